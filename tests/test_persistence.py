"""Tests for the persistence gateways."""

import json

import pytest
from sqlalchemy import text

from home_inventory.core.database import make_engine
from home_inventory.schemas.items import Item
from home_inventory.schemas.projects import Project
from home_inventory.schemas.rooms import Room, RoomPayload
from home_inventory.services.persistence import (
    ITEMS_KEY,
    PROJECTS_KEY,
    ROOMS_KEY,
    Collections,
    InMemoryGateway,
    PersistenceGateway,
    SqlStorageGateway,
    decode_collection,
    encode_collection,
)
from home_inventory.services.repository import Create, InventoryRepository


def _collections() -> Collections:
    return Collections(
        rooms=[Room(id="r1", name="Kitchen", width=3, length=4, unit="metric", linked_room_ids=["r2"]),
               Room(id="r2", name="Hall", linked_room_ids=["r1"])],
        items=[Item(id="i1", room_id="r1", name="Kettle", value=25, project_ids=["p1"])],
        projects=[Project(id="p1", name="Claim", color="bg-blue-500")],
    )


@pytest.fixture
def sql_gateway() -> SqlStorageGateway:
    return SqlStorageGateway(make_engine("sqlite:///:memory:"))


# ─── Encoding ──────────────────────────────────────────────────

def test_encode_omits_unset_fields():
    stored = json.loads(encode_collection(ITEMS_KEY, _collections().items))
    assert stored == [{
        "id": "i1",
        "roomId": "r1",
        "name": "Kettle",
        "description": "",
        "category": "",
        "projectIds": ["p1"],
        "value": 25.0,
    }]


def test_decode_missing_key():
    assert decode_collection(ROOMS_KEY, None) == []


def test_decode_malformed_json():
    assert decode_collection(ROOMS_KEY, "{oops") == []


def test_decode_wrong_shape():
    assert decode_collection(PROJECTS_KEY, json.dumps({"id": "p1"})) == []
    assert decode_collection(ITEMS_KEY, json.dumps([{"id": "i1"}])) == []


def test_decode_drops_only_invalid_entries():
    raw = json.dumps([
        {"id": "i1", "roomId": "r1", "name": "Sofa", "value": 100},
        {"id": "i2", "roomId": "r1", "name": "TV", "value": "n/a"},
        {"id": "i3", "roomId": "r1", "name": "Lamp"},
    ])
    assert [i.id for i in decode_collection(ITEMS_KEY, raw)] == ["i1", "i3"]


def test_gateway_base_is_abstract():
    with pytest.raises(TypeError):
        PersistenceGateway()


# ─── In-memory gateway ────────────────────────────────────────

def test_in_memory_round_trip():
    gateway = InMemoryGateway()
    gateway.save(_collections())
    assert gateway.load() == _collections()
    assert gateway.save_count == 1
    assert set(gateway.entries) == {ROOMS_KEY, ITEMS_KEY, PROJECTS_KEY}


def test_one_bad_key_does_not_affect_others():
    gateway = InMemoryGateway()
    gateway.save(_collections())
    gateway.entries[ROOMS_KEY] = "not json at all"

    loaded = gateway.load()
    assert loaded.rooms == []
    assert loaded.items == _collections().items
    assert loaded.projects == _collections().projects


def test_repository_loads_existing_entries():
    gateway = InMemoryGateway()
    gateway.save(_collections())
    repo = InventoryRepository(gateway)
    assert repo.get_room("r1").name == "Kitchen"
    assert repo.get_item("i1").value == 25


def test_empty_storage_gives_empty_repository():
    repo = InventoryRepository(InMemoryGateway())
    assert repo.rooms == repo.items == repo.projects == []


# ─── SQL gateway ──────────────────────────────────────────────

def test_sql_round_trip(sql_gateway):
    sql_gateway.save(_collections())
    assert sql_gateway.load() == _collections()


def test_sql_save_overwrites(sql_gateway):
    sql_gateway.save(_collections())
    sql_gateway.save(Collections())
    assert sql_gateway.load() == Collections()


def test_sql_empty_database(sql_gateway):
    assert sql_gateway.read_raw(ROOMS_KEY) is None
    assert sql_gateway.load() == Collections()


def test_sql_corrupt_entry(sql_gateway):
    sql_gateway.write_raw({ITEMS_KEY: "[{]"})
    assert sql_gateway.load().items == []


def test_repository_survives_restart():
    engine = make_engine("sqlite:///:memory:")
    first = InventoryRepository(SqlStorageGateway(engine))
    first.import_backup(json.dumps({"rooms": [{"id": "r1", "name": "Attic"}]}))

    second = InventoryRepository(SqlStorageGateway(engine))
    assert [r.name for r in second.rooms] == ["Attic"]


def test_bad_entry_does_not_wipe_collection_on_next_save():
    """Valid items stored beside an invalid one survive an unrelated save."""
    gateway = InMemoryGateway({ITEMS_KEY: json.dumps([
        {"id": "i1", "roomId": "r1", "name": "Sofa", "value": 100},
        {"id": "i2", "roomId": "r1", "name": "TV", "value": "n/a"},
    ])})
    repo = InventoryRepository(gateway)
    assert [i.name for i in repo.items] == ["Sofa"]

    repo.save_room(Create(RoomPayload(name="Hall")))

    stored = json.loads(gateway.entries[ITEMS_KEY])
    assert [i["id"] for i in stored] == ["i1"]
    assert stored[0]["value"] == 100


def test_sql_read_failure_starts_empty():
    engine = make_engine("sqlite:///:memory:")
    gateway = SqlStorageGateway(engine)
    gateway.save(_collections())
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE storage_entries"))

    assert gateway.read_raw(ROOMS_KEY) is None
    repo = InventoryRepository(gateway)
    assert repo.rooms == repo.items == repo.projects == []
