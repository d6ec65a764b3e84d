"""
Fixed catalogues: item categories, project colours, currencies, units.

Catalogues are application configuration, not stored data.
Adding a currency requires zero data changes — just an entry here.

Currency preferences were once saved as symbols ('$', '€'); they are
migrated to ISO codes when read back (see resolve_currency_code).
"""

from dataclasses import dataclass


# ─── Units ─────────────────────────────────────────────────────

IMPERIAL = "imperial"
METRIC = "metric"
UNIT_SYSTEMS = (IMPERIAL, METRIC)

FEET_PER_METER = 3.28084

UNIT_LABELS: dict[str, str] = {
    IMPERIAL: "ft",
    METRIC: "m",
}


def normalize_units(value: str | None) -> str:
    """'metric' stays metric; anything else is imperial."""
    return METRIC if value == METRIC else IMPERIAL


# ─── Item Categories ───────────────────────────────────────────

CATEGORIES: list[str] = [
    "Furniture",
    "Electronics",
    "Appliances",
    "Decor",
    "Clothing",
    "Tools",
    "Other",
]


# ─── Project Colours ───────────────────────────────────────────

COLORS: list[str] = [
    "bg-red-500",
    "bg-orange-500",
    "bg-amber-500",
    "bg-green-500",
    "bg-emerald-500",
    "bg-teal-500",
    "bg-cyan-500",
    "bg-blue-500",
    "bg-indigo-500",
    "bg-violet-500",
    "bg-purple-500",
    "bg-fuchsia-500",
    "bg-pink-500",
    "bg-rose-500",
]


# ─── Currency Registry ─────────────────────────────────────────

@dataclass(frozen=True)
class CurrencyDef:
    """A supported display currency."""
    code: str
    symbol: str
    label: str


CURRENCIES: dict[str, CurrencyDef] = {}

DEFAULT_CURRENCY = "USD"
FALLBACK_SYMBOL = "$"


def register_currency(currency: CurrencyDef) -> CurrencyDef:
    """Register a supported currency."""
    CURRENCIES[currency.code] = currency
    return currency


def get_currency(code: str) -> CurrencyDef | None:
    """Look up a currency by ISO code."""
    return CURRENCIES.get(code)


def get_currency_symbol(code: str) -> str:
    """Display symbol for an ISO code; unknown codes fall back to '$'."""
    currency = CURRENCIES.get(code)
    return currency.symbol if currency else FALLBACK_SYMBOL


def resolve_currency_code(saved: str | None, default: str = DEFAULT_CURRENCY) -> str:
    """
    Turn a saved preference value into a supported ISO code.

    'ZAR' → 'ZAR'
    'R'   → 'ZAR'   (legacy symbol value)
    'XYZ' → default
    """
    if not saved:
        return default
    if saved in CURRENCIES:
        return saved
    for currency in CURRENCIES.values():
        if currency.symbol == saved:
            return currency.code
    return default


register_currency(CurrencyDef("USD", "$", "US Dollar ($)"))
register_currency(CurrencyDef("EUR", "€", "Euro (€)"))
register_currency(CurrencyDef("GBP", "£", "British Pound (£)"))
register_currency(CurrencyDef("JPY", "¥", "Japanese Yen (¥)"))
register_currency(CurrencyDef("CAD", "C$", "Canadian Dollar (C$)"))
register_currency(CurrencyDef("AUD", "A$", "Australian Dollar (A$)"))
register_currency(CurrencyDef("ZAR", "R", "South African Rand (R)"))
