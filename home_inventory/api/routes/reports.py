"""Reports API routes — filtered totals and CSV export."""

from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from home_inventory.api.deps import get_preferences, get_repository
from home_inventory.core.catalog import get_currency_symbol
from home_inventory.schemas.reports import ALL, InsuranceType, ReportFilters, ReportResponse
from home_inventory.schemas.settings import UserPreferences
from home_inventory.services.reports import export_csv, filter_report, report_categories
from home_inventory.services.repository import InventoryRepository

router = APIRouter()


def get_report_filters(
    room_id: str = Query(ALL, description="Room id or 'all'"),
    category: str = Query(ALL, description="Category or 'all'"),
    project_id: str = Query(ALL, description="Project id or 'all'"),
    insurance_type: InsuranceType = Query(ALL, description="'fixed', 'contents' or 'all'"),
) -> ReportFilters:
    return ReportFilters(
        room_id=room_id,
        category=category,
        project_id=project_id,
        insurance_type=insurance_type,
    )


@router.get("/", response_model=ReportResponse)
async def get_report(
    filters: ReportFilters = Depends(get_report_filters),
    repo: InventoryRepository = Depends(get_repository),
    prefs: UserPreferences = Depends(get_preferences),
):
    """Items matching every active filter and their total value."""
    items = repo.items
    result = filter_report(items, filters)
    return ReportResponse(
        filters=filters,
        item_count=result.item_count,
        total_value=result.total_value,
        currency=prefs.currency,
        currency_symbol=get_currency_symbol(prefs.currency),
        items=result.filtered_items,
        categories=report_categories(items),
    )


@router.get("/export.csv")
async def export_report_csv(
    filters: ReportFilters = Depends(get_report_filters),
    repo: InventoryRepository = Depends(get_repository),
    prefs: UserPreferences = Depends(get_preferences),
):
    """The filtered report as a CSV download."""
    result = filter_report(repo.items, filters)
    content = export_csv(result.filtered_items, repo.rooms, repo.projects, prefs.currency)
    filename = f"inventory_report_{date.today().isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
