"""Rooms API routes — create/edit with reciprocal links, dashboard and detail views."""

from fastapi import APIRouter, Depends, HTTPException

from home_inventory.api.deps import get_assistant, get_preferences, get_repository
from home_inventory.schemas.assistant import SuggestionsResponse
from home_inventory.schemas.rooms import Room, RoomDetail, RoomPayload, RoomSummary
from home_inventory.schemas.settings import UserPreferences
from home_inventory.services.assistant import InventoryAssistant
from home_inventory.services.dimensions import format_room_dimensions
from home_inventory.services.reports import (
    items_in_room,
    linked_rooms,
    room_item_counts,
    split_room_items,
)
from home_inventory.services.repository import Create, InventoryRepository, Update

router = APIRouter()


def _get_room_or_404(repo: InventoryRepository, room_id: str) -> Room:
    room = repo.get_room(room_id)
    if room is None:
        raise HTTPException(status_code=404, detail=f"Room not found: {room_id}")
    return room


# ─── CRUD ──────────────────────────────────────────────────────

@router.get("/", response_model=list[RoomSummary])
async def list_rooms(
    repo: InventoryRepository = Depends(get_repository),
    prefs: UserPreferences = Depends(get_preferences),
):
    """Dashboard: every room with its size in the preferred unit and item count."""
    rooms = repo.rooms
    counts = room_item_counts(rooms, repo.items)
    return [
        RoomSummary(
            room=room,
            formatted_dimensions=format_room_dimensions(room, prefs.units),
            item_count=counts[room.id],
        )
        for room in rooms
    ]


@router.post("/", response_model=Room, status_code=201)
async def create_room(
    payload: RoomPayload,
    repo: InventoryRepository = Depends(get_repository),
    prefs: UserPreferences = Depends(get_preferences),
):
    """
    Create a room. Rooms listed in linkedRoomIds link back to it.

    A room submitted without a unit is recorded in the preferred unit.
    """
    if payload.unit is None:
        payload = payload.model_copy(update={"unit": prefs.units})
    return repo.save_room(Create(payload))


@router.get("/{room_id}", response_model=Room)
async def get_room(
    room_id: str,
    repo: InventoryRepository = Depends(get_repository),
):
    return _get_room_or_404(repo, room_id)


@router.put("/{room_id}", response_model=Room)
async def update_room(
    room_id: str,
    payload: RoomPayload,
    repo: InventoryRepository = Depends(get_repository),
    prefs: UserPreferences = Depends(get_preferences),
):
    """
    Replace a room. Rooms added to linkedRoomIds gain a link back,
    rooms dropped from it lose theirs.
    """
    if payload.unit is None:
        payload = payload.model_copy(update={"unit": prefs.units})
    room = repo.save_room(Update(room_id, payload))
    if room is None:
        raise HTTPException(status_code=404, detail=f"Room not found: {room_id}")
    return room


# ─── Views ─────────────────────────────────────────────────────

@router.get("/{room_id}/detail", response_model=RoomDetail)
async def get_room_detail(
    room_id: str,
    repo: InventoryRepository = Depends(get_repository),
    prefs: UserPreferences = Depends(get_preferences),
):
    """Room page: size, linked rooms, fixtures and contents."""
    room = _get_room_or_404(repo, room_id)
    items = repo.items
    fixtures, contents = split_room_items(items, room.id)
    return RoomDetail(
        room=room,
        formatted_dimensions=format_room_dimensions(room, prefs.units),
        item_count=len(items_in_room(items, room.id)),
        linked_rooms=linked_rooms(room, repo.rooms),
        fixtures=fixtures,
        contents=contents,
    )


@router.get("/{room_id}/suggestions", response_model=SuggestionsResponse)
async def suggest_items(
    room_id: str,
    repo: InventoryRepository = Depends(get_repository),
    assistant: InventoryAssistant = Depends(get_assistant),
):
    """Ask the assistant what else is usually found in this room."""
    room = _get_room_or_404(repo, room_id)
    outcome = await assistant.suggest_room_items(room.name, room.description)
    message = None
    if not outcome.value:
        message = f"Couldn't find suggestions for {room.name}."
    return SuggestionsResponse(suggestions=outcome.value, message=message)
