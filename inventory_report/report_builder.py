"""
Report Builder Module

Builds a dated inventory report from raw records:
1. Validate the item collection and the as-of date
2. Normalize every item (the first invalid item aborts the whole report)
3. Project a stock-out date for each item against the report's as-of date

Also provides a pandas view of a report and summary aggregates used for logging.
"""

from datetime import date
from typing import Any, Dict, Sequence, Union

import pandas as pd

from inventory_report.config import DATE_FORMAT_ISO
from inventory_report.errors import ValidationError
from inventory_report.field_normalizer import normalize_calendar_date
from inventory_report.item_normalizer import normalize_inventory_item
from inventory_report.logger import get_logger
from inventory_report.models import InventoryReport, ReportedItem
from inventory_report.stock_out_projector import calculate_stock_out_date

logger = get_logger(__name__)

REPORT_COLUMNS = [
    "sku",
    "name",
    "onHand",
    "price",
    "costPerUnit",
    "averageDailyUsage",
    "totalUnitsSold",
    "imageUrl",
    "lastSoldAt",
    "totalValue",
    "totalCostOfGoodsSold",
    "expectedStockOutDate",
]


def build_inventory_report(items: Sequence[Any], as_of_date: Union[date, str]) -> InventoryReport:
    """
    Build an inventory report.

    Args:
        items: List of raw item records (order is preserved in the report)
        as_of_date: Report reference date

    Returns:
        InventoryReport with as_of_date formatted YYYY-MM-DD

    Raises:
        ValidationError: if items is not a list, the date is invalid, or any item is invalid
    """
    if not isinstance(items, (list, tuple)):
        raise ValidationError("items must be a list.")

    report_date = normalize_calendar_date(as_of_date)
    logger.info(f"Building inventory report for {len(items)} item(s) as of {report_date.strftime(DATE_FORMAT_ISO)}")

    reported_items = []
    for raw_item in items:
        item = normalize_inventory_item(raw_item)
        stock_out = calculate_stock_out_date(item.on_hand, item.average_daily_usage, report_date)
        reported_items.append(ReportedItem(**item.source_fields(), expected_stock_out_date=stock_out))

    report = InventoryReport(
        as_of_date=report_date.strftime(DATE_FORMAT_ISO),
        items=tuple(reported_items),
    )

    logger.debug(
        f"Report built: {len(report.items)} item(s), "
        f"{sum(1 for it in report.items if it.expected_stock_out_date)} with projected stock-out"
    )
    return report


def report_to_dataframe(report: InventoryReport) -> pd.DataFrame:
    """Tabular view of the report items, one row per item, camelCase columns."""
    rows = [item.model_dump(by_alias=True) for item in report.items]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarize_report(report: InventoryReport) -> Dict[str, Any]:
    """
    Aggregate a report into headline numbers.

    Returns:
        Dict with keys:
        - as_of_date: report date string
        - item_count: number of items
        - total_value: sum of item total values
        - total_cost_of_goods_sold: sum of item COGS
        - stock_out_count: items with a projected stock-out date
        - earliest_stock_out_date: earliest projected stock-out, or None
    """
    df = report_to_dataframe(report)

    stock_out_dates = df["expectedStockOutDate"].dropna()
    earliest = stock_out_dates.min() if not stock_out_dates.empty else None

    return {
        "as_of_date": report.as_of_date,
        "item_count": len(df),
        "total_value": float(df["totalValue"].sum()),
        "total_cost_of_goods_sold": float(df["totalCostOfGoodsSold"].sum()),
        "stock_out_count": int(stock_out_dates.count()),
        "earliest_stock_out_date": earliest,
    }
