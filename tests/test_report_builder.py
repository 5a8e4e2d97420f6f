from datetime import date

import pytest

from inventory_report.errors import ValidationError
from inventory_report.models import InventoryReport
from inventory_report.report_builder import (
    build_inventory_report,
    report_to_dataframe,
    summarize_report,
)


def _items(raw_item):
    return [
        raw_item,
        dict(raw_item, sku="SKU-2", name="Bolt", onHand=10, averageDailyUsage=3, imageUrl=None),
        dict(raw_item, sku="SKU-3", name="Nut", onHand=0, lastSoldAt=None),
    ]


def test_builds_report_in_input_order(raw_item):
    report = build_inventory_report(_items(raw_item), date(2024, 1, 1))

    assert isinstance(report, InventoryReport)
    assert report.as_of_date == "2024-01-01"
    assert [item.sku for item in report.items] == ["SKU-1", "SKU-2", "SKU-3"]
    assert [item.expected_stock_out_date for item in report.items] == ["2024-01-05", "2024-01-05", None]
    assert report.items[0].total_value == 8
    assert report.items[0].total_cost_of_goods_sold == 5


def test_as_of_date_string_accepted(raw_item):
    report = build_inventory_report((raw_item,), "2024-03-31")
    assert report.as_of_date == "2024-03-31"
    assert report.items[0].expected_stock_out_date == "2024-04-04"


def test_empty_report():
    report = build_inventory_report([], date(2024, 1, 1))
    assert report.items == ()


def test_one_invalid_item_fails_whole_report(raw_item):
    items = _items(raw_item)
    items[1] = dict(items[1], price="free")

    with pytest.raises(ValidationError, match="Item price must be a non-negative number"):
        build_inventory_report(items, date(2024, 1, 1))


@pytest.mark.parametrize("bad", [None, "items", {"sku": "SKU-1"}, 3])
def test_items_must_be_a_list(bad):
    with pytest.raises(ValidationError, match="items must be a list"):
        build_inventory_report(bad, date(2024, 1, 1))


def test_invalid_as_of_date(raw_item):
    with pytest.raises(ValidationError, match="asOfDate"):
        build_inventory_report([raw_item], "soon")


def test_report_to_dataframe(raw_item):
    df = report_to_dataframe(build_inventory_report(_items(raw_item), date(2024, 1, 1)))

    assert list(df["sku"]) == ["SKU-1", "SKU-2", "SKU-3"]
    assert "expectedStockOutDate" in df.columns
    assert df.loc[0, "totalValue"] == 8


def test_summarize_report(raw_item):
    summary = summarize_report(build_inventory_report(_items(raw_item), date(2024, 1, 1)))

    assert summary["as_of_date"] == "2024-01-01"
    assert summary["item_count"] == 3
    assert summary["total_value"] == 8 + 20 + 0
    assert summary["total_cost_of_goods_sold"] == 15
    assert summary["stock_out_count"] == 2
    assert summary["earliest_stock_out_date"] == "2024-01-05"


def test_summarize_empty_report():
    summary = summarize_report(build_inventory_report([], date(2024, 1, 1)))

    assert summary["item_count"] == 0
    assert summary["total_value"] == 0
    assert summary["stock_out_count"] == 0
    assert summary["earliest_stock_out_date"] is None
