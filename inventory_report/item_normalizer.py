"""
Item Normalizer Module

Validates a raw inventory record and returns a CanonicalItem.

Checks run in a fixed order and the first failure wins:
sku, name, onHand, price, costPerUnit, averageDailyUsage, totalUnitsSold,
imageUrl, lastSoldAt. Only imageUrl and lastSoldAt may be missing.
"""

from collections.abc import Mapping
from typing import Any

from inventory_report.config import MAX_ITEM_NAME_LENGTH
from inventory_report.errors import ValidationError
from inventory_report.field_normalizer import (
    parse_finite_non_negative,
    parse_optional_date,
    parse_optional_url,
    parse_required_text,
)
from inventory_report.models import CanonicalItem

# (raw key, attribute name) for the mandatory numeric fields, in check order
NUMERIC_FIELDS = [
    ("onHand", "on_hand"),
    ("price", "price"),
    ("costPerUnit", "cost_per_unit"),
    ("averageDailyUsage", "average_daily_usage"),
    ("totalUnitsSold", "total_units_sold"),
]


def _unwrap(result):
    success, value, error_msg = result
    if not success:
        raise ValidationError(error_msg)
    return value


def normalize_inventory_item(item: Any) -> CanonicalItem:
    """
    Validate and normalize an untrusted inventory record.

    Args:
        item: Mapping with keys sku, name, onHand, price, costPerUnit,
              averageDailyUsage, totalUnitsSold and optionally imageUrl, lastSoldAt

    Returns:
        CanonicalItem with totalValue and totalCostOfGoodsSold derived from it

    Raises:
        ValidationError: on the first violated constraint
    """
    if not isinstance(item, Mapping):
        raise ValidationError("Item must be an object.")

    fields = {
        "sku": _unwrap(parse_required_text(item.get("sku"), "Item sku is required.")),
        "name": _unwrap(parse_required_text(
            item.get("name"),
            "Item name is required and must be short.",
            max_length=MAX_ITEM_NAME_LENGTH,
        )),
    }

    for raw_key, attribute in NUMERIC_FIELDS:
        fields[attribute] = _unwrap(parse_finite_non_negative(item.get(raw_key), raw_key))

    fields["image_url"] = _unwrap(parse_optional_url(item.get("imageUrl")))
    fields["last_sold_at"] = _unwrap(parse_optional_date(item.get("lastSoldAt")))

    return CanonicalItem(**fields)
