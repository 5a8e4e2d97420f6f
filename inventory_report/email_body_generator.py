"""
Email Body Generator Module

Renders an inventory report into a plain-text email for one rep.

Body layout:
- Greeting
- Intro line with the report date
- One line per item (quantities, prices, totals, last sold, stock-out, image)
- Closing line

The line layout is a fixed contract; delivery is left to the caller.
"""

from collections.abc import Mapping
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from inventory_report.config import EMAIL_SUBJECT_TEMPLATE, NOT_AVAILABLE_LABEL
from inventory_report.errors import ValidationError
from inventory_report.logger import get_logger
from inventory_report.models import EmailMessage, InventoryReport, Rep, ReportedItem

logger = get_logger(__name__)

# Wide enough to quantize any finite float to cents
_MONEY_CONTEXT = Context(prec=400)
_CENT = Decimal("0.01")


def format_quantity(value: float) -> str:
    """
    Format a quantity without a trailing ".0" for whole numbers.

    Example: 10.0 -> "10", 2.5 -> "2.5"
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_money(value: float) -> str:
    """
    Format a monetary value with 2 decimal places (no thousand separators).

    Exact halves of the stored binary value round up: 0.125 -> "0.13".
    """
    return str(Decimal(float(value)).quantize(_CENT, rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT))


def generate_email_subject(as_of_date: str) -> str:
    """
    Generate email subject line.

    Format: "Inventory report (<YYYY-MM-DD>)"
    """
    return EMAIL_SUBJECT_TEMPLATE.format(date=as_of_date)


def format_item_line(item: ReportedItem) -> str:
    stock_out = item.expected_stock_out_date or NOT_AVAILABLE_LABEL
    last_sold = item.last_sold_at or NOT_AVAILABLE_LABEL
    image = item.image_url or NOT_AVAILABLE_LABEL

    return " ".join([
        f"- {item.name} ({item.sku}):",
        f"{format_quantity(item.on_hand)} on hand, ${format_money(item.price)} per unit",
        f"total value ${format_money(item.total_value)}",
        f"total COGS ${format_money(item.total_cost_of_goods_sold)}",
        f"last sold {last_sold}, stock-out {stock_out}, image: {image}",
    ])


def _coerce_report(report: Any) -> InventoryReport:
    if isinstance(report, InventoryReport):
        return report
    if not isinstance(report, Mapping):
        raise ValidationError("report must be an object.")
    try:
        return InventoryReport.model_validate(report)
    except PydanticValidationError as e:
        raise ValidationError(f"report is malformed: {e.error_count()} error(s).")


def format_rep_email(rep: Any, report: Any) -> EmailMessage:
    """
    Format the inventory report email for a rep.

    Args:
        rep: Rep, or mapping with "name" and "email"
        report: InventoryReport, or a mapping dumped from one

    Returns:
        EmailMessage with subject and plain-text body

    Raises:
        ValidationError: if rep or report is missing, or rep name/email is empty
    """
    if isinstance(rep, Rep):
        rep = rep.model_dump()
    if not isinstance(rep, Mapping):
        raise ValidationError("rep must be an object.")

    name = "" if rep.get("name") is None else str(rep.get("name")).strip()
    email = "" if rep.get("email") is None else str(rep.get("email")).strip()

    if not name:
        raise ValidationError("rep name is required.")
    if not email:
        raise ValidationError("rep email is required.")

    report = _coerce_report(report)

    lines: List[str] = [
        f"Hi {name},",
        "",
        f"Here is your inventory report as of {report.as_of_date}:",
    ]
    lines.extend(format_item_line(item) for item in report.items)
    lines.extend(["", "Reply if you have questions."])

    body = "\n".join(lines)
    logger.debug(f"Formatted email body ({len(body)} characters, {len(report.items)} item line(s))")

    return EmailMessage(subject=generate_email_subject(report.as_of_date), body=body)
