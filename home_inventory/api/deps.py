"""FastAPI dependencies shared by the routers."""

from functools import lru_cache

from fastapi import Cookie

from home_inventory.core.database import make_engine
from home_inventory.schemas.settings import UserPreferences
from home_inventory.services.assistant import InventoryAssistant
from home_inventory.services.persistence import SqlStorageGateway
from home_inventory.services.preferences import load_preferences
from home_inventory.services.repository import InventoryRepository


@lru_cache
def get_repository() -> InventoryRepository:
    """The process-wide repository, loaded from storage on first use."""
    return InventoryRepository(SqlStorageGateway(make_engine()))


def get_assistant() -> InventoryAssistant:
    return InventoryAssistant.from_settings()


def get_preferences(
    inventory_currency: str | None = Cookie(None),
    inventory_units: str | None = Cookie(None),
) -> UserPreferences:
    """Preferences from the request cookies, with legacy migration."""
    return load_preferences(inventory_currency, inventory_units)
