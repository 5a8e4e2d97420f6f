"""
Recipient Resolver Module

Merges a base recipient list with added addresses.

SAFETY:
- No PII logging (email addresses), counts only
- Non-list inputs are treated as empty instead of failing
"""

from typing import Any, List

from inventory_report.config import MAX_RECIPIENTS
from inventory_report.errors import ValidationError
from inventory_report.logger import get_logger

logger = get_logger(__name__)


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def build_recipient_list(base_recipients: Any, added_recipients: Any) -> List[str]:
    """
    Build a recipient list from a base list plus any new addresses.

    Addresses are trimmed and empty entries dropped. The size limit applies to
    the merged list before de-duplication; de-duplication keeps first-seen order.

    Args:
        base_recipients: Base list of addresses (non-lists count as empty)
        added_recipients: Additional addresses (non-lists count as empty)

    Returns:
        Unique, trimmed email addresses

    Raises:
        ValidationError: if more than MAX_RECIPIENTS addresses remain after trimming
    """
    merged = [
        "" if email is None else str(email).strip()
        for email in _as_list(base_recipients) + _as_list(added_recipients)
    ]
    merged = [email for email in merged if email]

    if len(merged) > MAX_RECIPIENTS:
        logger.error(f"Recipient list has {len(merged)} entries, limit is {MAX_RECIPIENTS}")
        raise ValidationError("Recipient list exceeds maximum size.")

    recipients = list(dict.fromkeys(merged))
    logger.info(f"Resolved {len(recipients)} recipient(s) ({len(merged) - len(recipients)} duplicate(s) removed)")
    return recipients
