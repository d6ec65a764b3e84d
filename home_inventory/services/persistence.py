"""
Persistence gateway — load-at-startup, save-on-change.

The repository never touches storage directly; it is handed a gateway
with two operations:

  load()  → Collections   (rooms, items, projects)
  save(Collections)

Each collection is stored as an independent JSON array under its own
key. Reads are forgiving: a missing key, a storage read error, malformed
JSON or a non-array value yields an empty collection for that key. An
entry that no longer validates is dropped on its own; the rest of its
collection is kept. Every recovery is logged as a warning. Writes are
not guarded; a failing write propagates.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from home_inventory.core.database import Base, make_session_factory
from home_inventory.models.core import StorageEntry
from home_inventory.schemas.items import Item
from home_inventory.schemas.projects import Project
from home_inventory.schemas.rooms import Room

logger = logging.getLogger(__name__)

ROOMS_KEY = "inventory_rooms"
ITEMS_KEY = "inventory_items"
PROJECTS_KEY = "inventory_projects"

_ENTITIES: dict[str, type] = {
    ROOMS_KEY: Room,
    ITEMS_KEY: Item,
    PROJECTS_KEY: Project,
}

_COLLECTION_ADAPTERS: dict[str, TypeAdapter] = {
    key: TypeAdapter(list[entity]) for key, entity in _ENTITIES.items()
}
_ENTRY_ADAPTERS: dict[str, TypeAdapter] = {
    key: TypeAdapter(entity) for key, entity in _ENTITIES.items()
}


@dataclass
class Collections:
    """The three entity collections, in display order."""
    rooms: list[Room] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)


def encode_collection(key: str, entries: list) -> str:
    """Serialize one collection to its stored JSON form (camelCase, unset fields omitted)."""
    return _COLLECTION_ADAPTERS[key].dump_json(entries, by_alias=True, exclude_none=True).decode("utf-8")


def decode_collection(key: str, raw: str | None) -> list:
    """
    Parse one stored collection.

    Unparseable text or a non-array becomes []. Inside an array each
    entry is validated separately, so one bad entry costs only itself.
    """
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Discarding unreadable collection {key}: {e}")
        return []
    if not isinstance(data, list):
        logger.warning(f"Discarding collection {key}: stored value is not an array")
        return []

    adapter = _ENTRY_ADAPTERS[key]
    entries = []
    for position, entry in enumerate(data):
        try:
            entries.append(adapter.validate_python(entry))
        except ValidationError as e:
            logger.warning(f"Dropping invalid entry {position} of {key}: {e.error_count()} error(s)")
    return entries


class PersistenceGateway(ABC):
    """Base gateway: subclasses provide raw key/value access."""

    @abstractmethod
    def read_raw(self, key: str) -> str | None:
        """Stored text for a key, or None if there is none."""

    @abstractmethod
    def write_raw(self, entries: dict[str, str]) -> None:
        """Store every key/value pair together."""

    def load(self) -> Collections:
        return Collections(
            rooms=decode_collection(ROOMS_KEY, self.read_raw(ROOMS_KEY)),
            items=decode_collection(ITEMS_KEY, self.read_raw(ITEMS_KEY)),
            projects=decode_collection(PROJECTS_KEY, self.read_raw(PROJECTS_KEY)),
        )

    def save(self, collections: Collections) -> None:
        self.write_raw({
            ROOMS_KEY: encode_collection(ROOMS_KEY, collections.rooms),
            ITEMS_KEY: encode_collection(ITEMS_KEY, collections.items),
            PROJECTS_KEY: encode_collection(PROJECTS_KEY, collections.projects),
        })


class InMemoryGateway(PersistenceGateway):
    """Dict-backed gateway for tests and throwaway sessions."""

    def __init__(self, entries: dict[str, str] | None = None):
        self.entries: dict[str, str] = dict(entries or {})
        self.save_count = 0

    def read_raw(self, key: str) -> str | None:
        return self.entries.get(key)

    def write_raw(self, entries: dict[str, str]) -> None:
        self.entries.update(entries)
        self.save_count += 1


class SqlStorageGateway(PersistenceGateway):
    """
    Gateway backed by the storage_entries table.

    Creates the table on first use; one transaction per save so the
    three collections are always written together.

    The engine is synchronous and routes call the repository from
    async handlers, so each save blocks the event loop for one small
    commit. Fine for one user on a local SQLite file; concurrent users
    would need AsyncSession here.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        Base.metadata.create_all(engine)
        self.Session = make_session_factory(engine)

    def read_raw(self, key: str) -> str | None:
        """Stored text for a key; a failing read is treated as a missing key."""
        try:
            with self.Session() as session:
                entry = session.execute(
                    select(StorageEntry).where(StorageEntry.key == key)
                ).scalar_one_or_none()
                return entry.value if entry else None
        except SQLAlchemyError as e:
            logger.warning(f"Could not read {key} from storage, starting it empty: {e}")
            return None

    def write_raw(self, entries: dict[str, str]) -> None:
        with self.Session() as session:
            for key, value in entries.items():
                session.merge(StorageEntry(key=key, value=value))
            session.commit()
