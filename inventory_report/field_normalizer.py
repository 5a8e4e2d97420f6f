"""
Field Normalizer Module

Coerces individual untrusted scalar fields into canonical typed values.

Two layers are provided:
- parse_* functions return a tagged result (success, value, error_msg) and never
  raise for bad input. Item normalization chains these in a fixed order.
- normalize_* functions wrap the parsers and raise ValidationError on failure.

Dates are interpreted in UTC and truncated to day precision (YYYY-MM-DD).
"""

import math
import re
from datetime import date
from numbers import Number
from typing import Any, Optional, Tuple

import pandas as pd

from inventory_report.config import MAX_IMAGE_URL_LENGTH, DATE_FORMAT_ISO
from inventory_report.errors import ValidationError

_HTTP_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def _is_absent(value: Any) -> bool:
    """Falsy optional values (None, "", False, 0, NaN) mean "not supplied"."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Number) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def _to_utc_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """
    Convert a date-like value into a UTC Timestamp.

    Numbers are read as epoch milliseconds. Naive values are taken as UTC,
    timezone-aware values are converted to UTC. Resolution is inferred from the
    input (pandas 3), so dates outside the nanosecond range 1677-2262 are valid.

    Returns:
        UTC Timestamp, or None if the value cannot be read as a date
    """
    if isinstance(value, bool):
        return None

    try:
        if isinstance(value, Number):
            timestamp = pd.to_datetime(value, unit="ms", utc=True, errors="coerce")
        elif isinstance(value, (str, date)):
            timestamp = pd.to_datetime(value, utc=True, errors="coerce")
        else:
            return None
    except (TypeError, ValueError, OverflowError):
        return None

    if pd.isna(timestamp):
        return None
    return timestamp


def parse_finite_non_negative(value: Any, field_name: str) -> Tuple[bool, Optional[float], Optional[str]]:
    """
    Parse a mandatory non-negative number.

    Accepts ints, floats, Decimals and numeric strings. Booleans, None,
    unparseable strings, NaN, infinities and negative values are rejected.

    Args:
        value: Raw field value
        field_name: Field name used in the error message (e.g. "onHand")

    Returns:
        Tuple of (success: bool, number: Optional[float], error_msg: Optional[str])
    """
    error_msg = f"Item {field_name} must be a non-negative number."

    if value is None or isinstance(value, bool):
        return False, None, error_msg

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return False, None, error_msg

    if not math.isfinite(number) or number < 0:
        return False, None, error_msg

    return True, number, None


def parse_required_text(
    value: Any,
    error_msg: str,
    max_length: Optional[int] = None
) -> Tuple[bool, Optional[str], Optional[str]]:
    """
    Parse a mandatory text field: None becomes "", anything else is str()-ed and trimmed.

    Returns:
        Tuple of (success, trimmed text, error_msg). Fails when the trimmed
        text is empty or longer than max_length.
    """
    text = "" if value is None else str(value).strip()

    if not text:
        return False, None, error_msg
    if max_length is not None and len(text) > max_length:
        return False, None, error_msg

    return True, text, None


def parse_optional_url(value: Any) -> Tuple[bool, Optional[str], Optional[str]]:
    """Parse an optional http(s) URL. Missing values succeed with None."""
    if _is_absent(value):
        return True, None, None

    url = str(value).strip()
    if len(url) > MAX_IMAGE_URL_LENGTH:
        return False, None, "Item image URL is too long."
    if not _HTTP_SCHEME_RE.match(url):
        return False, None, "Item image URL must be http or https."

    return True, url, None


def parse_optional_date(value: Any) -> Tuple[bool, Optional[str], Optional[str]]:
    """Parse an optional date into a YYYY-MM-DD string. Missing values succeed with None."""
    if _is_absent(value):
        return True, None, None

    timestamp = _to_utc_timestamp(value)
    if timestamp is None:
        return False, None, "Invalid date value."

    return True, timestamp.strftime(DATE_FORMAT_ISO), None


def parse_calendar_date(value: Any) -> Tuple[bool, Optional[date], Optional[str]]:
    """
    Parse a required reference date (e.g. a report as-of date).

    Args:
        value: date, datetime, pandas Timestamp or date string

    Returns:
        Tuple of (success, UTC calendar date, error_msg)
    """
    error_msg = "asOfDate must be a valid date."

    if _is_absent(value) or isinstance(value, Number):
        return False, None, error_msg

    timestamp = _to_utc_timestamp(value)
    if timestamp is None:
        return False, None, error_msg

    return True, timestamp.date(), None


def normalize_optional_url(value: Any) -> Optional[str]:
    """
    Normalize an optional image URL.

    Returns:
        Trimmed URL, or None when no URL was supplied

    Raises:
        ValidationError: if the URL is longer than the limit or is not http/https
    """
    success, url, error_msg = parse_optional_url(value)
    if not success:
        raise ValidationError(error_msg)
    return url


def normalize_optional_date(value: Any) -> Optional[str]:
    """
    Normalize an optional date to a UTC calendar date string (YYYY-MM-DD).

    Raises:
        ValidationError: if the value cannot be parsed as a date
    """
    success, iso_date, error_msg = parse_optional_date(value)
    if not success:
        raise ValidationError(error_msg)
    return iso_date


def normalize_calendar_date(value: Any) -> date:
    """Normalize a required reference date, raising ValidationError when invalid."""
    success, calendar_date, error_msg = parse_calendar_date(value)
    if not success:
        raise ValidationError(error_msg)
    return calendar_date
