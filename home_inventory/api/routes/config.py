"""Configuration API routes — fixed catalogues used by the forms."""

from fastapi import APIRouter

from home_inventory.core.catalog import CATEGORIES, COLORS, CURRENCIES, UNIT_LABELS

router = APIRouter()


@router.get("/catalog")
async def get_catalog():
    """
    Categories, project colours, supported currencies and unit systems.

    The UI renders pickers from these; currencies are listed in
    registration order.
    """
    return {
        "categories": CATEGORIES,
        "colors": COLORS,
        "currencies": [
            {
                "code": c.code,
                "symbol": c.symbol,
                "label": c.label,
            }
            for c in CURRENCIES.values()
        ],
        "units": [
            {"name": name, "label": label}
            for name, label in UNIT_LABELS.items()
        ],
    }
