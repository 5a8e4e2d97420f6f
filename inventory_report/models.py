"""
Value objects for the inventory report.

All models are frozen. Attribute names are snake_case; camelCase aliases are
used when a model is dumped with by_alias=True, matching the raw record keys.
Derived monetary totals are computed properties so they always agree with
their source fields.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class CanonicalItem(_FrozenModel):
    """A validated inventory item."""

    sku: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    on_hand: float = Field(..., ge=0, allow_inf_nan=False)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    cost_per_unit: float = Field(..., ge=0, allow_inf_nan=False)
    average_daily_usage: float = Field(..., ge=0, allow_inf_nan=False)
    total_units_sold: float = Field(..., ge=0, allow_inf_nan=False)
    image_url: Optional[str] = None
    last_sold_at: Optional[str] = None

    @computed_field(alias="totalValue")
    @property
    def total_value(self) -> float:
        return self.on_hand * self.price

    @computed_field(alias="totalCostOfGoodsSold")
    @property
    def total_cost_of_goods_sold(self) -> float:
        return self.total_units_sold * self.cost_per_unit

    def source_fields(self) -> dict:
        """Stored fields only (no computed totals), keyed by attribute name."""
        return self.model_dump(exclude={"total_value", "total_cost_of_goods_sold"})


class ReportedItem(CanonicalItem):
    """CanonicalItem plus the stock-out projection made at report-build time."""

    expected_stock_out_date: Optional[str] = None


class InventoryReport(_FrozenModel):
    as_of_date: str
    items: Tuple[ReportedItem, ...] = ()


class Rep(_FrozenModel):
    name: str
    email: str


class EmailMessage(_FrozenModel):
    subject: str
    body: str
