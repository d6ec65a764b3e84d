"""Pydantic schemas for the AI assistant endpoints."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from home_inventory.schemas.items import Item, ManualMatch


class ManualLookupResponse(BaseModel):
    """Outcome of a manual search for one item."""
    found: bool
    item: Item
    matches: list[ManualMatch] = Field(default_factory=list)
    message: str | None = None

    model_config = {"populate_by_name": True, "alias_generator": to_camel}


class ValueEstimateResponse(BaseModel):
    """Free-text estimate; never stored on the item."""
    estimate: str
    currency: str
    available: bool

    model_config = {"populate_by_name": True, "alias_generator": to_camel}


class SuggestionsResponse(BaseModel):
    """Item names the assistant expects in a room."""
    suggestions: list[str] = Field(default_factory=list)
    message: str | None = None
