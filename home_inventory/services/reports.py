"""
View aggregators — derived state computed from the current collections.

Nothing here is cached or stored: every figure is recomputed from the
rooms, items and projects passed in, so callers always see the latest
repository state.
"""

from collections import Counter

from home_inventory.core.catalog import CATEGORIES
from home_inventory.schemas.items import Item
from home_inventory.schemas.projects import Project
from home_inventory.schemas.reports import ALL, ReportFilters, ReportResult
from home_inventory.schemas.rooms import Room

FIXED_LABEL = "Fixed (Building)"
CONTENTS_LABEL = "Contents"
UNKNOWN_ROOM = "Unknown Room"

CSV_HEADERS = [
    "Brand", "Name", "Model", "Type", "Category", "Insurance Type",
    "Room", "Projects", "Description", "Notes", "Value ({currency})", "Purchase Date",
]


# ─── Counts ───────────────────────────────────────────────────

def room_item_counts(rooms: list[Room], items: list[Item]) -> dict[str, int]:
    """Items per room, every room present (zero included)."""
    counts = Counter(i.room_id for i in items)
    return {r.id: counts.get(r.id, 0) for r in rooms}


def project_item_counts(projects: list[Project], items: list[Item]) -> dict[str, int]:
    """Items tagged with each project."""
    return {p.id: sum(1 for i in items if p.id in i.project_ids) for p in projects}


# ─── Room views ───────────────────────────────────────────────

def items_in_room(items: list[Item], room_id: str) -> list[Item]:
    return [i for i in items if i.room_id == room_id]


def split_room_items(items: list[Item], room_id: str) -> tuple[list[Item], list[Item]]:
    """(fixtures, contents) for one room."""
    in_room = items_in_room(items, room_id)
    fixtures = [i for i in in_room if i.is_fixed]
    contents = [i for i in in_room if not i.is_fixed]
    return fixtures, contents


def linked_rooms(room: Room, rooms: list[Room]) -> list[Room]:
    """Rooms this room links to, in collection order. Dangling ids are skipped."""
    return [r for r in rooms if r.id in room.linked_room_ids]


# ─── Report filter ────────────────────────────────────────────

def matches_filters(item: Item, filters: ReportFilters) -> bool:
    """True if the item passes every active filter."""
    if filters.room_id != ALL and item.room_id != filters.room_id:
        return False
    if filters.category != ALL and item.category != filters.category:
        return False
    if filters.project_id != ALL and filters.project_id not in item.project_ids:
        return False
    if filters.insurance_type == "fixed" and item.is_fixed is not True:
        return False
    if filters.insurance_type == "contents" and item.is_fixed:
        return False
    return True


def filter_report(items: list[Item], filters: ReportFilters | None = None) -> ReportResult:
    """
    Apply the report filters.

    Order is preserved; items without a value count as 0 in the total.
    """
    filters = filters or ReportFilters()
    filtered = [i for i in items if matches_filters(i, filters)]
    total = sum(i.value or 0 for i in filtered)
    return ReportResult(filtered_items=filtered, total_value=total)


def report_categories(items: list[Item]) -> list[str]:
    """Sorted union of the default categories and every category in use."""
    return sorted(set(CATEGORIES) | {i.category for i in items})


# ─── Autocomplete ─────────────────────────────────────────────

def _distinct(values) -> list[str]:
    """Non-empty values, first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


def autocomplete_vocabulary(items: list[Item]) -> dict[str, list[str]]:
    """
    Suggestions for the item form.

    Brands and types come only from existing items; categories are the
    ones in use followed by any defaults not yet used.
    """
    return {
        "brands": _distinct(i.brand for i in items),
        "types": _distinct(i.type for i in items),
        "categories": _distinct([*(i.category for i in items), *CATEGORIES]),
    }


# ─── CSV export ───────────────────────────────────────────────

def csv_escape(value: str | None) -> str:
    """Wrap in double quotes, doubling any quote inside. None → \"\"."""
    return '"' + (value or "").replace('"', '""') + '"'


def format_number(value: float | None) -> str:
    """10.0 → '10', 12.5 → '12.5', None → '0'."""
    if not value:
        return "0"
    if value == int(value):
        return str(int(value))
    return repr(value)


def export_row(item: Item, rooms: list[Room], projects: list[Project]) -> str:
    """One CSV line for an item, room and project ids resolved to names."""
    room = next((r for r in rooms if r.id == item.room_id), None)
    room_name = room.name if room else UNKNOWN_ROOM
    project_names = "; ".join(p.name for p in projects if p.id in item.project_ids)

    return ",".join([
        csv_escape(item.brand),
        csv_escape(item.name),
        csv_escape(item.model),
        csv_escape(item.type),
        csv_escape(item.category),
        FIXED_LABEL if item.is_fixed else CONTENTS_LABEL,
        csv_escape(room_name),
        csv_escape(project_names),
        csv_escape(item.description),
        csv_escape(item.notes),
        format_number(item.value),
        csv_escape(item.purchase_date),
    ])


def export_csv(
    items: list[Item],
    rooms: list[Room],
    projects: list[Project],
    currency: str,
) -> str:
    """Header plus one row per item, newline separated."""
    header = ",".join(h.format(currency=currency) for h in CSV_HEADERS)
    return "\n".join([header, *(export_row(i, rooms, projects) for i in items)])
