"""Projects API routes — tag groups across rooms, delete cascades to item tags."""

from fastapi import APIRouter, Depends, HTTPException

from home_inventory.api.deps import get_repository
from home_inventory.schemas.items import Item
from home_inventory.schemas.projects import Project, ProjectPayload, ProjectSummary
from home_inventory.services.reports import project_item_counts
from home_inventory.services.repository import InventoryRepository

router = APIRouter()


@router.get("/", response_model=list[ProjectSummary])
async def list_projects(repo: InventoryRepository = Depends(get_repository)):
    """Every project with the number of items tagged with it."""
    projects = repo.projects
    counts = project_item_counts(projects, repo.items)
    return [ProjectSummary(project=p, item_count=counts[p.id]) for p in projects]


@router.post("/", response_model=Project, status_code=201)
async def create_project(
    payload: ProjectPayload,
    repo: InventoryRepository = Depends(get_repository),
):
    return repo.add_project(payload)


@router.get("/{project_id}/items", response_model=list[Item])
async def list_project_items(
    project_id: str,
    repo: InventoryRepository = Depends(get_repository),
):
    if repo.get_project(project_id) is None:
        raise HTTPException(status_code=404, detail=f"Project not found: {project_id}")
    return [i for i in repo.items if project_id in i.project_ids]


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: str,
    repo: InventoryRepository = Depends(get_repository),
):
    """Delete a project. Items keep existing, minus this tag."""
    if not repo.delete_project(project_id):
        raise HTTPException(status_code=404, detail=f"Project not found: {project_id}")
