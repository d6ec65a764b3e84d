"""Home Inventory API — main application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from home_inventory.core.config import settings
from home_inventory.api.routes import config, health, items, projects, reports, rooms
from home_inventory.api.routes import settings as settings_routes

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Home inventory for insurance records. "
        "Rooms, the items in them, and projects that tag items across rooms."
    ),
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(health.router, tags=["health"])
app.include_router(config.router, prefix="/api/v1/config", tags=["config"])
app.include_router(rooms.router, prefix="/api/v1/rooms", tags=["rooms"])
app.include_router(items.router, prefix="/api/v1/items", tags=["items"])
app.include_router(projects.router, prefix="/api/v1/projects", tags=["projects"])
app.include_router(reports.router, prefix="/api/v1/reports", tags=["reports"])
app.include_router(settings_routes.router, prefix="/api/v1/settings", tags=["settings"])
