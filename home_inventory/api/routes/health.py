"""Health check route."""

from fastapi import APIRouter, Depends

from home_inventory.api.deps import get_repository
from home_inventory.core.config import settings
from home_inventory.services.repository import InventoryRepository

router = APIRouter()


@router.get("/health")
async def health_check(repo: InventoryRepository = Depends(get_repository)):
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "rooms": len(repo.rooms),
        "items": len(repo.items),
        "projects": len(repo.projects),
    }
