"""User preferences carried in cookies."""

from fastapi import Response

from home_inventory.core.catalog import normalize_units, resolve_currency_code
from home_inventory.core.config import settings
from home_inventory.schemas.settings import UserPreferences

CURRENCY_COOKIE = "inventory_currency"
UNITS_COOKIE = "inventory_units"
COOKIE_MAX_AGE = 31536000  # 1 year


def load_preferences(currency: str | None, units: str | None) -> UserPreferences:
    """
    Build preferences from raw cookie values.

    Legacy symbol currencies migrate to their code; unknown values fall
    back to the configured default. Units other than 'metric' are imperial.
    """
    default_currency = resolve_currency_code(settings.DEFAULT_CURRENCY)
    return UserPreferences(
        currency=resolve_currency_code(currency, default=default_currency),
        units=normalize_units(units if units is not None else settings.DEFAULT_UNITS),
    )


def store_preferences(response: Response, prefs: UserPreferences) -> None:
    """Write both preference cookies onto a response."""
    response.set_cookie(CURRENCY_COOKIE, prefs.currency, max_age=COOKIE_MAX_AGE, path="/")
    response.set_cookie(UNITS_COOKIE, prefs.units, max_age=COOKIE_MAX_AGE, path="/")
