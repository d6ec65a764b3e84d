"""Pydantic schemas for Items."""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class Item(BaseModel):
    """
    A stored item.

    is_fixed=True marks a fixture covered by building insurance;
    False or unset is a contents item.
    """
    id: str
    room_id: str
    name: str
    description: str = ""
    category: str = ""
    type: str | None = None
    brand: str | None = None
    model: str | None = None
    notes: str | None = None
    project_ids: list[str] = Field(default_factory=list)
    manual_url: str | None = None
    manual_title: str | None = None
    value: float | None = None
    purchase_date: str | None = None
    is_fixed: bool | None = None

    model_config = {"populate_by_name": True, "alias_generator": to_camel, "frozen": True}


_TRIMMED_FIELDS = ("name", "description", "category", "type", "brand", "model", "notes")


class ItemPayload(BaseModel):
    """Schema for creating or editing an item (everything but the id)."""
    room_id: str = Field(..., description="Owning room")
    name: str = Field(..., description="Display name, required")
    description: str = ""
    category: str = ""
    type: str | None = None
    brand: str | None = None
    model: str | None = None
    notes: str | None = None
    project_ids: list[str] = Field(default_factory=list)
    manual_url: str | None = None
    manual_title: str | None = None
    value: float | None = Field(None, description="Estimated value; empty clears it")
    purchase_date: str | None = None
    is_fixed: bool | None = None

    model_config = {"populate_by_name": True, "alias_generator": to_camel}

    @field_validator(*_TRIMMED_FIELDS)
    @classmethod
    def strip_text(cls, value: str | None) -> str | None:
        return value.strip() if isinstance(value, str) else value

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("Item name is required")
        return value

    @field_validator("value", mode="before")
    @classmethod
    def blank_value_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("purchase_date", mode="before")
    @classmethod
    def blank_date_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ManualMatch(BaseModel):
    """A web page found for an item's manual."""
    title: str
    uri: str
