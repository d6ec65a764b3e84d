"""Pydantic schemas for Reports."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from home_inventory.schemas.items import Item

ALL = "all"

InsuranceType = Literal["all", "fixed", "contents"]


class ReportFilters(BaseModel):
    """
    Report filter set. Each dimension is independent; "all" means
    no constraint. An item must pass every active filter.
    """
    room_id: str = ALL
    category: str = ALL
    project_id: str = ALL
    insurance_type: InsuranceType = ALL

    model_config = {"populate_by_name": True, "alias_generator": to_camel}


class ReportResult(BaseModel):
    """Filtered items (original order) and their summed value."""
    filtered_items: list[Item] = Field(default_factory=list)
    total_value: float = 0

    model_config = {"populate_by_name": True, "alias_generator": to_camel}

    @property
    def item_count(self) -> int:
        return len(self.filtered_items)


class ReportResponse(BaseModel):
    """Report page payload."""
    filters: ReportFilters
    item_count: int
    total_value: float
    currency: str
    currency_symbol: str
    items: list[Item]
    categories: list[str]

    model_config = {"populate_by_name": True, "alias_generator": to_camel}
