"""
Stock-Out Projector Module

Projects the calendar date at which on-hand stock reaches zero at the current
average daily usage.

Policy:
- No projection (None) when usage <= 0 or on-hand <= 0. Non-depleting or
  already-empty stock gets no stock-out warning.
- Partial days round up: daysRemaining = ceil(onHand / averageDailyUsage).
- Day arithmetic is done on UTC calendar dates.
"""

import math
from datetime import date
from numbers import Real
from typing import Any, Optional, Union

import pandas as pd

from inventory_report.config import DATE_FORMAT_ISO
from inventory_report.errors import ValidationError
from inventory_report.field_normalizer import normalize_calendar_date


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def calculate_stock_out_date(
    on_hand: float,
    average_daily_usage: float,
    as_of_date: Union[date, str]
) -> Optional[str]:
    """
    Calculate a stock-out date from on-hand quantity and daily usage.

    Example: 10 on hand, 2 per day, as of 2024-01-01 -> "2024-01-06"

    Args:
        on_hand: Current quantity in inventory
        average_daily_usage: Mean units depleted per day
        as_of_date: Reference date (date, datetime, Timestamp or date string)

    Returns:
        Stock-out date as YYYY-MM-DD, or None if stock is not depleting

    Raises:
        ValidationError: if a quantity is not a finite number or the date is invalid
    """
    if not _is_finite_number(on_hand) or not _is_finite_number(average_daily_usage):
        raise ValidationError("onHand and averageDailyUsage must be numbers.")

    start = normalize_calendar_date(as_of_date)

    if average_daily_usage <= 0 or on_hand <= 0:
        return None

    try:
        days_remaining = math.ceil(on_hand / average_daily_usage)
        stock_out = pd.Timestamp(start) + pd.DateOffset(days=days_remaining)
    except (OverflowError, ValueError):
        raise ValidationError("Projected stock-out date is out of range.")

    return stock_out.strftime(DATE_FORMAT_ISO)
