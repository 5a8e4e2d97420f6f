"""Error types raised by the inventory report pipeline."""


class ValidationError(ValueError):
    """Raised when untrusted input violates a report constraint.

    The message is human-readable and names the violated constraint.
    """
