"""Tests for backup export and import."""

import json
import re

import pytest

from home_inventory.schemas.settings import BACKUP_VERSION
from home_inventory.services.repository import BackupImportError


@pytest.fixture
def populated(repo, make_room, make_item, make_project):
    """One room, one item, one project."""
    room = make_room("Kitchen", width=3, length=4, unit="metric")
    project = make_project("Renovation")
    item = make_item(room, "Dishwasher", value=600, project_ids=[project.id])
    return room, item, project


# ─── Export ────────────────────────────────────────────────────

def test_export_shape(repo, populated):
    room, item, project = populated
    document = repo.export_backup()

    assert document.version == BACKUP_VERSION == "1.1"
    assert document.rooms == [room]
    assert document.items == [item]
    assert document.projects == [project]
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", document.export_date)


def test_export_uses_camel_case(repo, populated):
    dumped = repo.export_backup().model_dump(mode="json", by_alias=True, exclude_none=True)
    assert set(dumped) == {"rooms", "items", "projects", "exportDate", "version"}
    assert "roomId" in dumped["items"][0]
    assert "projectIds" in dumped["items"][0]


def test_export_then_import_restores(repo, populated):
    dumped = repo.export_backup().model_dump(mode="json", by_alias=True)
    snapshot = repo.collections()

    repo.clear()
    replaced = repo.import_backup(json.dumps(dumped))

    assert replaced == ["rooms", "items", "projects"]
    assert repo.collections() == snapshot


# ─── Import ────────────────────────────────────────────────────

def test_import_only_items_keeps_rooms_and_projects(repo, populated):
    room, _, project = populated
    new_items = [{"id": "i-new", "roomId": room.id, "name": "Kettle"}]

    replaced = repo.import_backup(json.dumps({"items": new_items}))

    assert replaced == ["items"]
    assert [i.name for i in repo.items] == ["Kettle"]
    assert repo.rooms == [room]
    assert repo.projects == [project]


def test_import_ignores_non_array_values(repo, populated):
    room, item, project = populated
    replaced = repo.import_backup(json.dumps({"rooms": "nope", "items": None}))
    assert replaced == []
    assert repo.rooms == [room]
    assert repo.items == [item]


def test_import_empty_array_replaces(repo, populated):
    repo.import_backup(json.dumps({"projects": []}))
    assert repo.projects == []


def test_import_persists(repo, gateway, populated):
    repo.import_backup(json.dumps({"rooms": []}))
    assert gateway.load().rooms == []


@pytest.mark.parametrize("raw", [
    "{not json",
    "[1, 2, 3]",
    '"just a string"',
    b"\xff\xfe\x00",
])
def test_malformed_backup_rejected(repo, gateway, populated, raw):
    snapshot = repo.collections()
    saves_before = gateway.save_count

    with pytest.raises(BackupImportError):
        repo.import_backup(raw)

    assert repo.collections() == snapshot
    assert gateway.save_count == saves_before


def test_invalid_entry_rejects_whole_import(repo, populated):
    snapshot = repo.collections()
    document = {
        "rooms": [],
        "items": [{"id": "i1", "name": "No room id"}],
    }

    with pytest.raises(BackupImportError):
        repo.import_backup(json.dumps(document))

    assert repo.collections() == snapshot


def test_clear_removes_everything(repo, gateway, populated):
    repo.clear()
    assert repo.rooms == repo.items == repo.projects == []
    loaded = gateway.load()
    assert loaded.rooms == loaded.items == loaded.projects == []
