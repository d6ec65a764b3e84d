"""Tests for Seed Data — verifies seed_inventory() builds the sample house."""

from home_inventory.schemas.reports import ReportFilters
from home_inventory.services.persistence import InMemoryGateway
from home_inventory.services.reports import filter_report
from home_inventory.services.repository import InventoryRepository
from scripts.seed_data import ITEMS, ROOMS, seed_inventory


# ─── Seed Execution ────────────────────────────────────────────

def test_seed_returns_ids(repo):
    ids = seed_inventory(repo)
    for key, *_ in ROOMS:
        assert f"room_{key}" in ids
    assert "project_renovation" in ids
    assert "project_claim" in ids
    assert len([k for k in ids if k.startswith("item_")]) == len(ITEMS)


def test_seed_counts(repo):
    seed_inventory(repo)
    assert len(repo.rooms) == 5
    assert len(repo.items) == 12
    assert [p.name for p in repo.projects] == ["Kitchen Renovation", "Insurance Claim 2024"]


def test_seed_is_reproducible():
    first = InventoryRepository(InMemoryGateway())
    second = InventoryRepository(InMemoryGateway())
    seed_inventory(first)
    seed_inventory(second)
    assert [i.value for i in first.items] == [i.value for i in second.items]


# ─── Room Links ────────────────────────────────────────────────

def test_hallway_links_every_room(repo):
    ids = seed_inventory(repo)
    hallway = repo.get_room(ids["room_hallway"])
    assert len(hallway.linked_room_ids) == 4


def test_seed_links_are_symmetric(repo):
    seed_inventory(repo)
    by_id = {r.id: r for r in repo.rooms}
    for room in repo.rooms:
        for other_id in room.linked_room_ids:
            assert room.id in by_id[other_id].linked_room_ids


def test_kitchen_links(repo):
    ids = seed_inventory(repo)
    kitchen = repo.get_room(ids["room_kitchen"])
    living = repo.get_room(ids["room_living"])
    assert set(kitchen.linked_room_ids) == {ids["room_living"], ids["room_hallway"]}
    assert set(living.linked_room_ids) == {ids["room_kitchen"], ids["room_hallway"]}


# ─── Items ─────────────────────────────────────────────────────

def test_kitchen_items_tagged_renovation(repo):
    ids = seed_inventory(repo)
    tagged = filter_report(repo.items, ReportFilters(project_id=ids["project_renovation"]))
    assert {i.room_id for i in tagged.filtered_items} == {ids["room_kitchen"]}
    assert tagged.item_count == 3


def test_unbranded_items_have_no_value(repo):
    seed_inventory(repo)
    for item in repo.items:
        if not item.brand:
            assert item.value is None
        else:
            assert item.value > 0


def test_seed_persists(repo, gateway):
    seed_inventory(repo)
    loaded = gateway.load()
    assert len(loaded.rooms) == 5
    assert len(loaded.items) == 12
