"""
Inventory repository — the only write surface for rooms, items and projects.

Holds the authoritative in-memory collections, loaded once from the
injected persistence gateway and saved back after every mutation.

Saves are explicit commands rather than "has an id means edit":

  Create(payload)       → fresh id, appended
  Update(id, payload)   → replaces the stored record with that id;
                          an unknown id is a no-op and returns None

Invariants maintained here:
  - Room links are symmetric: A lists B iff B lists A.
  - Deleting a project removes its id from every item's project_ids.
  - Widths, lengths and values are stored non-negative (sign discarded).

Validation of names, room existence, etc. belongs to the caller.
"""

import json
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import BaseModel, TypeAdapter, ValidationError

from home_inventory.schemas.items import Item, ItemPayload, ManualMatch
from home_inventory.schemas.projects import Project, ProjectPayload
from home_inventory.schemas.rooms import Room, RoomPayload
from home_inventory.schemas.settings import BACKUP_VERSION, BackupDocument
from home_inventory.services.persistence import Collections, PersistenceGateway

logger = logging.getLogger(__name__)


class BackupImportError(ValueError):
    """A backup document that cannot be restored; nothing was changed."""


@dataclass(frozen=True)
class Create:
    """Save a new entity."""
    payload: BaseModel


@dataclass(frozen=True)
class Update:
    """Replace the stored entity with this id."""
    id: str
    payload: BaseModel


SaveCommand = Create | Update


def new_id() -> str:
    return str(uuid.uuid4())


def _non_negative(value: float | None) -> float | None:
    return abs(value) if value is not None else None


def _dedupe(ids: list[str], exclude: str) -> list[str]:
    """Drop duplicates and self-references, keeping first-seen order."""
    seen: set[str] = set()
    result = []
    for rid in ids:
        if rid == exclude or rid in seen:
            continue
        seen.add(rid)
        result.append(rid)
    return result


def reconcile_link(
    other: Room,
    saved_id: str,
    new_linked: set[str],
    old_linked: set[str],
) -> Room:
    """
    Bring one neighbouring room's links in line with a saved room.

    Linked now but not reciprocated → append the saved id.
    Unlinked by this save but still pointing back → remove it.
    Anything else is left alone.
    """
    is_linked_now = other.id in new_linked
    was_linked_before = other.id in old_linked
    points_back = saved_id in other.linked_room_ids

    if is_linked_now and not points_back:
        return other.model_copy(
            update={"linked_room_ids": [*other.linked_room_ids, saved_id]}
        )
    if not is_linked_now and was_linked_before and points_back:
        return other.model_copy(
            update={"linked_room_ids": [rid for rid in other.linked_room_ids if rid != saved_id]}
        )
    return other


class InventoryRepository:
    """In-memory collections with persistence on every change."""

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway
        loaded = gateway.load()
        self._rooms: list[Room] = loaded.rooms
        self._items: list[Item] = loaded.items
        self._projects: list[Project] = loaded.projects

    # ─── Readers ──────────────────────────────────────────────

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    @property
    def projects(self) -> list[Project]:
        return list(self._projects)

    def get_room(self, room_id: str) -> Room | None:
        return next((r for r in self._rooms if r.id == room_id), None)

    def get_item(self, item_id: str) -> Item | None:
        return next((i for i in self._items if i.id == item_id), None)

    def get_project(self, project_id: str) -> Project | None:
        return next((p for p in self._projects if p.id == project_id), None)

    def collections(self) -> Collections:
        return Collections(rooms=self.rooms, items=self.items, projects=self.projects)

    # ─── Rooms ────────────────────────────────────────────────

    def save_room(self, command: SaveCommand) -> Room | None:
        """
        Create or edit a room and reconcile reciprocal links.

        Every other room is checked once: rooms newly listed gain a
        link back, rooms dropped from the list lose theirs. The saved
        room keeps its position in the collection.
        """
        payload: RoomPayload = command.payload
        if isinstance(command, Update):
            old = self.get_room(command.id)
            if old is None:
                logger.warning(f"Ignoring update for unknown room {command.id}")
                return None
            room_id = command.id
        else:
            old = None
            room_id = new_id()

        data = payload.model_dump()
        data["width"] = _non_negative(payload.width)
        data["length"] = _non_negative(payload.length)
        data["linked_room_ids"] = _dedupe(payload.linked_room_ids, exclude=room_id)
        room = Room(id=room_id, **data)

        new_linked = set(room.linked_room_ids)
        old_linked = set(old.linked_room_ids) if old else set()

        updated: list[Room] = []
        for other in self._rooms:
            if other.id == room.id:
                updated.append(room)
            else:
                updated.append(reconcile_link(other, room.id, new_linked, old_linked))
        if old is None:
            updated.append(room)

        self._rooms = updated
        self._persist()
        return room

    # ─── Items ────────────────────────────────────────────────

    def save_item(self, command: SaveCommand) -> Item | None:
        """Create an item or replace one by id. No other entity is touched."""
        payload: ItemPayload = command.payload
        if isinstance(command, Update):
            if self.get_item(command.id) is None:
                logger.warning(f"Ignoring update for unknown item {command.id}")
                return None
            item_id = command.id
        else:
            item_id = new_id()

        data = payload.model_dump()
        # Zero and empty both clear the value
        data["value"] = abs(payload.value) if payload.value else None
        item = Item(id=item_id, **data)

        if isinstance(command, Update):
            self._items = [item if i.id == item_id else i for i in self._items]
        else:
            self._items = [*self._items, item]
        self._persist()
        return item

    def merge_manual(self, item_id: str, match: ManualMatch) -> Item | None:
        """Store a manual lookup hit on an item; other fields are left as they are."""
        item = self.get_item(item_id)
        if item is None:
            logger.warning(f"Dropping manual match for unknown item {item_id}")
            return None
        merged = item.model_copy(update={"manual_url": match.uri, "manual_title": match.title})
        self._items = [merged if i.id == item_id else i for i in self._items]
        self._persist()
        return merged

    # ─── Projects ─────────────────────────────────────────────

    def add_project(self, payload: ProjectPayload) -> Project:
        """Create a project. A non-empty name is the caller's job."""
        project = Project(id=new_id(), **payload.model_dump())
        self._projects = [*self._projects, project]
        self._persist()
        return project

    def delete_project(self, project_id: str) -> bool:
        """
        Remove a project and untag every item that carried it.

        Items themselves survive. Both collections change before the
        single save, so storage never holds a dangling tag.
        """
        if self.get_project(project_id) is None:
            return False
        self._projects = [p for p in self._projects if p.id != project_id]
        self._items = [
            i.model_copy(update={"project_ids": [pid for pid in i.project_ids if pid != project_id]})
            if project_id in i.project_ids else i
            for i in self._items
        ]
        self._persist()
        return True

    # ─── Backup / restore ─────────────────────────────────────

    def export_backup(self) -> BackupDocument:
        """Snapshot of all three collections with an export timestamp."""
        exported_at = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return BackupDocument(
            rooms=self.rooms,
            items=self.items,
            projects=self.projects,
            export_date=exported_at.replace("+00:00", "Z"),
            version=BACKUP_VERSION,
        )

    def import_backup(self, raw: str | bytes) -> list[str]:
        """
        Restore from a backup document.

        Each of rooms / items / projects that is present as an array
        replaces the in-memory collection wholesale (no merge, no id
        reconciliation). Anything unreadable aborts the whole import.

        Returns the names of the collections that were replaced.
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise BackupImportError("Backup is not valid JSON") from e
        if not isinstance(data, dict):
            raise BackupImportError("Backup must be a JSON object")

        adapters = {
            "rooms": TypeAdapter(list[Room]),
            "items": TypeAdapter(list[Item]),
            "projects": TypeAdapter(list[Project]),
        }
        replacements: dict[str, list] = {}
        for key, adapter in adapters.items():
            entries = data.get(key)
            if not isinstance(entries, list):
                continue
            try:
                replacements[key] = adapter.validate_python(entries)
            except ValidationError as e:
                raise BackupImportError(f"Backup has invalid {key}: {e.error_count()} error(s)") from e

        if "rooms" in replacements:
            self._rooms = replacements["rooms"]
        if "items" in replacements:
            self._items = replacements["items"]
        if "projects" in replacements:
            self._projects = replacements["projects"]

        if replacements:
            self._persist()
        logger.info(f"Backup imported, replaced: {', '.join(replacements) or 'nothing'}")
        return list(replacements)

    def clear(self) -> None:
        """Remove every room, item and project."""
        self._rooms = []
        self._items = []
        self._projects = []
        self._persist()
        logger.info("All inventory data cleared")

    # ─── Internal ─────────────────────────────────────────────

    def _persist(self) -> None:
        self.gateway.save(self.collections())
