"""
Seed data script — creates a realistic sample house.

  - 5 Rooms (Living Room, Kitchen, Hallway, Master Bedroom, Garage)
  - Hallway linked to every other room; Kitchen linked to Living Room
  - 12 Items, fixtures and contents, some with values
  - 2 Projects ("Kitchen Renovation", "Insurance Claim 2024")

Usage:
  python -m scripts.seed_data

  Or import and call seed_inventory() with a repository.
"""

import random

from home_inventory.api.deps import get_repository
from home_inventory.schemas.items import ItemPayload
from home_inventory.schemas.projects import ProjectPayload
from home_inventory.schemas.rooms import RoomPayload
from home_inventory.services.repository import Create, InventoryRepository, Update


# ─── Sample data ───────────────────────────────────────────────

ROOMS = [
    # key, name, width, length, description
    ("living", "Living Room", 6.0, 5.0, "Open-plan lounge facing the garden"),
    ("kitchen", "Kitchen", 4.0, 3.5, "Galley kitchen with breakfast bar"),
    ("hallway", "Hallway", 1.5, 8.0, "Entrance hall and stairs"),
    ("bedroom", "Master Bedroom", 4.5, 4.0, "Main bedroom with en-suite"),
    ("garage", "Garage", 6.0, 3.0, "Single garage, used as workshop"),
]

LINKS = {
    "hallway": ["living", "kitchen", "bedroom", "garage"],
    "kitchen": ["living", "hallway"],
}

ITEMS = [
    # room, name, category, brand, model, is_fixed
    ("living", "Sofa", "Furniture", "IKEA", "KIVIK", False),
    ("living", "Television", "Electronics", "Samsung", "QE55Q80", False),
    ("living", "Fireplace", "Decor", None, None, True),
    ("kitchen", "Dishwasher", "Appliances", "Bosch", "SMS6ZCI49E", True),
    ("kitchen", "Refrigerator", "Appliances", "LG", "GBB92STAXP", False),
    ("kitchen", "Built-in Oven", "Appliances", "Neff", "B57CR22N0B", True),
    ("hallway", "Coat Rack", "Furniture", None, None, False),
    ("bedroom", "Bed Frame", "Furniture", "Hypnos", "Orthocare 10", False),
    ("bedroom", "Built-in Wardrobe", "Furniture", None, None, True),
    ("bedroom", "Laptop", "Electronics", "Apple", "MacBook Air M2", False),
    ("garage", "Cordless Drill", "Tools", "Makita", "DHP484Z", False),
    ("garage", "Workbench", "Tools", None, None, True),
]

VALUES = [150, 300, 450, 600, 900, 1200, 2000]


# ─── Seed function ─────────────────────────────────────────────

def seed_inventory(repo: InventoryRepository) -> dict[str, str]:
    """
    Create the sample house through the repository.
    Returns a dict of key names → ids for reference.
    """
    ids: dict[str, str] = {}
    random.seed(42)  # Reproducible

    # ── Projects ───────────────────────────────────────────
    renovation = repo.add_project(ProjectPayload(
        name="Kitchen Renovation",
        description="Appliances replaced in the 2024 refit",
        color="bg-amber-500",
    ))
    claim = repo.add_project(ProjectPayload(
        name="Insurance Claim 2024",
        description="Items listed on the water-damage claim",
        color="bg-blue-500",
    ))
    ids["project_renovation"] = renovation.id
    ids["project_claim"] = claim.id

    # ── Rooms ──────────────────────────────────────────────
    for key, name, width, length, description in ROOMS:
        room = repo.save_room(Create(RoomPayload(
            name=name,
            width=width,
            length=length,
            unit="metric",
            description=description,
        )))
        ids[f"room_{key}"] = room.id

    # ── Links (reciprocal links are added by the repository) ─
    for key, targets in LINKS.items():
        room = repo.get_room(ids[f"room_{key}"])
        payload = RoomPayload(
            name=room.name,
            width=room.width,
            length=room.length,
            unit=room.unit,
            description=room.description,
            linked_room_ids=[ids[f"room_{t}"] for t in targets],
        )
        repo.save_room(Update(room.id, payload))

    # ── Items ──────────────────────────────────────────────
    for idx, (room_key, name, category, brand, model, is_fixed) in enumerate(ITEMS):
        project_ids = []
        if room_key == "kitchen":
            project_ids.append(renovation.id)
        if idx % 3 == 0:
            project_ids.append(claim.id)
        item = repo.save_item(Create(ItemPayload(
            room_id=ids[f"room_{room_key}"],
            name=name,
            category=category,
            brand=brand,
            model=model,
            is_fixed=is_fixed,
            project_ids=project_ids,
            value=random.choice(VALUES) if brand else None,
            purchase_date=f"202{idx % 5}-0{idx % 9 + 1}-15",
        )))
        ids[f"item_{idx}"] = item.id

    print("Seeded sample house:")
    print(f"  Rooms:     {len(repo.rooms)}")
    print(f"  Items:     {len(repo.items)}")
    print(f"  Projects:  {len(repo.projects)}")

    return ids


# ─── CLI entry point ───────────────────────────────────────────

def main():
    seed_inventory(get_repository())
    print("\nSeed complete.")


if __name__ == "__main__":
    main()
