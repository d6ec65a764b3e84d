"""Pydantic schemas for preferences and backups."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from home_inventory.core.catalog import CURRENCIES
from home_inventory.schemas.items import Item
from home_inventory.schemas.projects import Project
from home_inventory.schemas.rooms import Room

BACKUP_VERSION = "1.1"


class UserPreferences(BaseModel):
    """Display preferences; travel as cookies, never stored with the data."""
    currency: str = Field("USD", description="ISO currency code")
    units: Literal["imperial", "metric"] = "imperial"

    @field_validator("currency")
    @classmethod
    def supported_currency(cls, value: str) -> str:
        if value not in CURRENCIES:
            raise ValueError(
                f"Unsupported currency: {value}. Valid codes: {list(CURRENCIES.keys())}"
            )
        return value


class BackupDocument(BaseModel):
    """Full export of the three collections."""
    rooms: list[Room]
    items: list[Item]
    projects: list[Project]
    export_date: str
    version: str = BACKUP_VERSION

    model_config = {"populate_by_name": True, "alias_generator": to_camel}


class ImportResponse(BaseModel):
    """Which collections an import replaced."""
    message: str
    replaced: list[str]
