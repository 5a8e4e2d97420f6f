import re
from datetime import date

import pytest

from inventory_report.email_body_generator import (
    format_money,
    format_quantity,
    format_rep_email,
    generate_email_subject,
)
from inventory_report.errors import ValidationError
from inventory_report.models import Rep
from inventory_report.report_builder import build_inventory_report

REP = {"name": "Alex", "email": "alex@example.com"}


@pytest.fixture
def report(raw_item):
    return build_inventory_report([
        raw_item,
        dict(raw_item, sku="SKU-2", name="Bolt", onHand=2.5, price=0.125, averageDailyUsage=0,
             imageUrl=None, lastSoldAt=None),
    ], date(2024, 1, 1))


def test_builds_reports_and_formats_email(report):
    email = format_rep_email(REP, report)

    assert email.subject == "Inventory report (2024-01-01)"
    assert email.body == "\n".join([
        "Hi Alex,",
        "",
        "Here is your inventory report as of 2024-01-01:",
        "- Part (SKU-1): 4 on hand, $2.00 per unit total value $8.00 total COGS $5.00 "
        "last sold 2024-01-03, stock-out 2024-01-05, image: https://example.com/part.png",
        "- Bolt (SKU-2): 2.5 on hand, $0.13 per unit total value $0.31 total COGS $5.00 "
        "last sold N/A, stock-out N/A, image: N/A",
        "",
        "Reply if you have questions.",
    ])


def test_subject_pattern_and_item_lines(report):
    email = format_rep_email(Rep(name="Alex", email="alex@example.com"), report)

    assert re.fullmatch(r"Inventory report \(\d{4}-\d{2}-\d{2}\)", email.subject)
    item_lines = [line for line in email.body.splitlines() if line.startswith("- ")]
    assert len(item_lines) == len(report.items)
    assert all("total value" in line and "total COGS" in line for line in item_lines)


def test_empty_report_has_no_item_lines():
    email = format_rep_email(REP, build_inventory_report([], date(2024, 1, 1)))
    assert email.body.splitlines() == [
        "Hi Alex,",
        "",
        "Here is your inventory report as of 2024-01-01:",
        "",
        "Reply if you have questions.",
    ]


def test_report_given_as_mapping(report):
    from_mapping = format_rep_email(REP, report.model_dump(by_alias=True))
    assert from_mapping == format_rep_email(REP, report)


def test_rep_name_is_trimmed(report):
    email = format_rep_email({"name": "  Alex ", "email": " alex@example.com "}, report)
    assert email.body.startswith("Hi Alex,\n")


@pytest.mark.parametrize("rep", [None, "Alex", ["Alex", "alex@example.com"]])
def test_rep_must_be_an_object(rep, report):
    with pytest.raises(ValidationError, match="rep must be an object"):
        format_rep_email(rep, report)


@pytest.mark.parametrize("rep,message", [
    ({"email": "alex@example.com"}, "rep name is required"),
    ({"name": "  ", "email": "alex@example.com"}, "rep name is required"),
    ({"name": "Alex"}, "rep email is required"),
    ({"name": "Alex", "email": ""}, "rep email is required"),
])
def test_rep_fields_required(rep, message, report):
    with pytest.raises(ValidationError, match=message):
        format_rep_email(rep, report)


@pytest.mark.parametrize("bad", [None, "report", [1, 2]])
def test_report_must_be_an_object(bad):
    with pytest.raises(ValidationError, match="report must be an object"):
        format_rep_email(REP, bad)


def test_malformed_report_mapping():
    with pytest.raises(ValidationError, match="report is malformed"):
        format_rep_email(REP, {"items": []})


def test_formatters():
    assert generate_email_subject("2024-06-30") == "Inventory report (2024-06-30)"
    assert format_quantity(10.0) == "10"
    assert format_quantity(0.5) == "0.5"
    assert format_money(3) == "3.00"
    assert format_money(1234.5) == "1234.50"


@pytest.mark.parametrize("value,expected", [
    (0.125, "0.13"),
    (1.375, "1.38"),
    (0.5, "0.50"),
    (0.3125, "0.31"),
    # 1.005 is stored just below 1.005, so it rounds down
    (1.005, "1.00"),
    (0, "0.00"),
])
def test_money_rounds_exact_halves_up(value, expected):
    assert format_money(value) == expected


def test_money_formats_very_large_values():
    formatted = format_money(1e30)
    assert formatted.endswith(".00")
    assert "E" not in formatted and "e" not in formatted
