"""Settings API routes — preference cookies, backup export/import, data reset."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from home_inventory.api.deps import get_preferences, get_repository
from home_inventory.schemas.settings import ImportResponse, UserPreferences
from home_inventory.services.preferences import store_preferences
from home_inventory.services.repository import BackupImportError, InventoryRepository

router = APIRouter()


# ─── Preferences ───────────────────────────────────────────────

@router.get("/preferences", response_model=UserPreferences)
async def get_user_preferences(prefs: UserPreferences = Depends(get_preferences)):
    """Current preferences, read from cookies (legacy symbols already migrated)."""
    return prefs


@router.put("/preferences", response_model=UserPreferences)
async def save_user_preferences(payload: UserPreferences, response: Response):
    """Store preferences as one-year cookies."""
    store_preferences(response, payload)
    return payload


# ─── Backup ────────────────────────────────────────────────────

@router.get("/backup")
async def export_backup(repo: InventoryRepository = Depends(get_repository)):
    """Download every room, item and project as one JSON document."""
    document = repo.export_backup()
    filename = f"inventory_backup_{date.today().isoformat()}.json"
    return JSONResponse(
        content=document.model_dump(mode="json", by_alias=True, exclude_none=True),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/backup", response_model=ImportResponse)
async def import_backup(
    request: Request,
    repo: InventoryRepository = Depends(get_repository),
):
    """
    Restore from a backup document sent as the request body.

    Each of rooms / items / projects present replaces that collection;
    anything unreadable leaves the inventory untouched.
    """
    raw = await request.body()
    try:
        replaced = repo.import_backup(raw)
    except BackupImportError:
        raise HTTPException(
            status_code=400,
            detail="Failed to import data. Invalid file format.",
        )
    return ImportResponse(message="Data restored successfully!", replaced=replaced)


@router.delete("/data", status_code=204)
async def clear_data(repo: InventoryRepository = Depends(get_repository)):
    """Remove all rooms, items and projects. Preferences are kept."""
    repo.clear()
