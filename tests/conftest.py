"""
Shared test fixtures.

The repository runs against an in-memory gateway so every test starts
from an empty inventory. The HTTP client overrides the repository and
assistant dependencies; the default assistant has no API key, so no
test ever reaches the network.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from home_inventory.api.deps import get_assistant, get_repository
from home_inventory.main import app
from home_inventory.schemas.items import Item, ItemPayload
from home_inventory.schemas.projects import Project, ProjectPayload
from home_inventory.schemas.rooms import Room, RoomPayload
from home_inventory.services.assistant import InventoryAssistant
from home_inventory.services.persistence import InMemoryGateway
from home_inventory.services.repository import Create, InventoryRepository


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest.fixture
def repo(gateway: InMemoryGateway) -> InventoryRepository:
    return InventoryRepository(gateway)


@pytest.fixture
def assistant() -> InventoryAssistant:
    """Assistant with no credential: every lookup is neutral."""
    return InventoryAssistant(api_key="")


@pytest_asyncio.fixture
async def client(
    repo: InventoryRepository,
    assistant: InventoryAssistant,
) -> AsyncGenerator[AsyncClient, None]:
    """Provide a test HTTP client bound to the test repository."""
    app.dependency_overrides[get_repository] = lambda: repo
    app.dependency_overrides[get_assistant] = lambda: assistant

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# ─── Helper factories ─────────────────────────────────────────

@pytest.fixture
def make_room(repo: InventoryRepository):
    """Factory fixture for creating rooms through the repository."""
    def _make(name: str = "Room", **fields) -> Room:
        return repo.save_room(Create(RoomPayload(name=name, **fields)))
    return _make


@pytest.fixture
def make_item(repo: InventoryRepository):
    """Factory fixture for creating items through the repository."""
    def _make(room: Room, name: str = "Thing", **fields) -> Item:
        return repo.save_item(Create(ItemPayload(room_id=room.id, name=name, **fields)))
    return _make


@pytest.fixture
def make_project(repo: InventoryRepository):
    """Factory fixture for creating projects through the repository."""
    def _make(name: str = "Project", **fields) -> Project:
        return repo.add_project(ProjectPayload(name=name, **fields))
    return _make
