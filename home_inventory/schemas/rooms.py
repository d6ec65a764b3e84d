"""Pydantic schemas for Rooms."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from home_inventory.schemas.items import Item

UnitSystem = Literal["imperial", "metric"]


class Room(BaseModel):
    """
    A stored room.

    linked_room_ids is symmetric across the collection: the repository
    keeps A → B and B → A in step on every save.
    """
    id: str
    name: str
    dimensions: str | None = Field(None, description="Legacy free-text dimensions")
    width: float | None = None
    length: float | None = None
    unit: UnitSystem | None = Field(None, description="Unit width/length were recorded in")
    description: str = ""
    linked_room_ids: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "alias_generator": to_camel, "frozen": True}


class RoomPayload(BaseModel):
    """Schema for creating or editing a room (everything but the id)."""
    name: str = Field(..., description="Display name, required")
    dimensions: str | None = None
    width: float | None = None
    length: float | None = None
    unit: UnitSystem | None = None
    description: str = ""
    linked_room_ids: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "alias_generator": to_camel}

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Room name is required")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        return value.strip()

    @field_validator("width", "length", mode="before")
    @classmethod
    def blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RoomDetail(BaseModel):
    """A room with everything its detail page shows."""
    room: Room
    formatted_dimensions: str
    item_count: int
    linked_rooms: list[Room]
    fixtures: list[Item]
    contents: list[Item]

    model_config = {"populate_by_name": True, "alias_generator": to_camel}


class RoomSummary(BaseModel):
    """Dashboard card: room plus derived figures."""
    room: Room
    formatted_dimensions: str
    item_count: int

    model_config = {"populate_by_name": True, "alias_generator": to_camel}

