"""Items API routes — create/edit, autocomplete, manual lookup and value estimates."""

from fastapi import APIRouter, Depends, HTTPException, Query

from home_inventory.api.deps import get_assistant, get_preferences, get_repository
from home_inventory.schemas.assistant import ManualLookupResponse, ValueEstimateResponse
from home_inventory.schemas.items import Item, ItemPayload
from home_inventory.schemas.settings import UserPreferences
from home_inventory.services.assistant import InventoryAssistant, item_search_text
from home_inventory.services.reports import autocomplete_vocabulary, items_in_room
from home_inventory.services.repository import Create, InventoryRepository, Update

router = APIRouter()


def _get_item_or_404(repo: InventoryRepository, item_id: str) -> Item:
    item = repo.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item not found: {item_id}")
    return item


def _require_room(repo: InventoryRepository, room_id: str) -> None:
    """Items can only be filed under an existing room."""
    if not repo.rooms:
        raise HTTPException(
            status_code=400,
            detail="No rooms available. Add a room before adding items.",
        )
    if repo.get_room(room_id) is None:
        raise HTTPException(status_code=400, detail=f"Unknown room: {room_id}")


# ─── CRUD ──────────────────────────────────────────────────────

@router.post("/", response_model=Item, status_code=201)
async def create_item(
    payload: ItemPayload,
    repo: InventoryRepository = Depends(get_repository),
):
    """Create an item in an existing room."""
    _require_room(repo, payload.room_id)
    return repo.save_item(Create(payload))


@router.get("/", response_model=list[Item])
async def list_items(
    room_id: str | None = Query(None, description="Only items in this room"),
    repo: InventoryRepository = Depends(get_repository),
):
    items = repo.items
    if room_id:
        return items_in_room(items, room_id)
    return items


@router.get("/vocabulary")
async def get_vocabulary(repo: InventoryRepository = Depends(get_repository)):
    """Brands, types and categories already in use, for form autocomplete."""
    return autocomplete_vocabulary(repo.items)


@router.get("/{item_id}", response_model=Item)
async def get_item(
    item_id: str,
    repo: InventoryRepository = Depends(get_repository),
):
    return _get_item_or_404(repo, item_id)


@router.put("/{item_id}", response_model=Item)
async def update_item(
    item_id: str,
    payload: ItemPayload,
    repo: InventoryRepository = Depends(get_repository),
):
    """Replace an item. An empty or zero value clears it."""
    _get_item_or_404(repo, item_id)
    _require_room(repo, payload.room_id)
    return repo.save_item(Update(item_id, payload))


# ─── Assistant ─────────────────────────────────────────────────

@router.post("/{item_id}/manual", response_model=ManualLookupResponse)
async def find_manual(
    item_id: str,
    repo: InventoryRepository = Depends(get_repository),
    assistant: InventoryAssistant = Depends(get_assistant),
):
    """
    Search for the item's manual and keep the best match on the item.

    The lookup runs against the item as it was when the request began;
    the merge only writes manualUrl/manualTitle, so edits made in the
    meantime to other fields survive.
    """
    item = _get_item_or_404(repo, item_id)
    outcome = await assistant.find_manual(
        item_search_text(item.brand, item.name, item.model),
        item.description or item.notes,
    )
    if not outcome.value:
        return ManualLookupResponse(
            found=False,
            item=repo.get_item(item_id) or item,
            message="Couldn't find a specific manual. Try adding more details to the item description.",
        )

    merged = repo.merge_manual(item_id, outcome.value[0])
    if merged is None:
        raise HTTPException(status_code=404, detail=f"Item not found: {item_id}")
    return ManualLookupResponse(found=True, item=merged, matches=outcome.value)


@router.post("/{item_id}/value-estimate", response_model=ValueEstimateResponse)
async def estimate_value(
    item_id: str,
    repo: InventoryRepository = Depends(get_repository),
    assistant: InventoryAssistant = Depends(get_assistant),
    prefs: UserPreferences = Depends(get_preferences),
):
    """Free-text value estimate in the preferred currency. Not stored."""
    item = _get_item_or_404(repo, item_id)
    outcome = await assistant.analyze_item_value(
        item_search_text(item.brand, item.name, item.model),
        item.description or item.notes or "",
        prefs.currency,
    )
    return ValueEstimateResponse(
        estimate=outcome.value,
        currency=prefs.currency,
        available=outcome.ok,
    )
