"""
Room dimension conversion and formatting.

Rooms remember the unit their width/length were typed in; display
always converts to the user's preferred unit with the fixed ratio
1 m = 3.28084 ft. Conversion happens once per call, never on stored
values, so repeated formatting never compounds.
"""

from home_inventory.core.catalog import (
    FEET_PER_METER,
    IMPERIAL,
    METRIC,
    UNIT_LABELS,
)
from home_inventory.schemas.rooms import Room

DIMENSIONS_NOT_SET = "Dimensions not set"


def convert_length(value: float, source_unit: str, target_unit: str) -> float:
    """
    Convert a length between unit systems.

    10 metric → imperial  = 32.8084
    10 imperial → metric  ≈ 3.048
    same unit             = unchanged
    """
    if source_unit == target_unit:
        return value
    if source_unit == METRIC and target_unit == IMPERIAL:
        return value * FEET_PER_METER
    if source_unit == IMPERIAL and target_unit == METRIC:
        return value / FEET_PER_METER
    return value


def format_room_dimensions(room: Room, target_unit: str) -> str:
    """
    Human-readable size of a room in the target unit.

    '10.0 x 10.0 m (100.0 sq m)'
    '32.8 x 32.8 ft (1076.4 sq ft)'

    Rooms without both width and length fall back to the legacy
    free-text dimensions, then to 'Dimensions not set'.
    """
    if room.width and room.length:
        # A room with no recorded unit is taken to already be in the target unit
        source_unit = room.unit or target_unit
        width = convert_length(room.width, source_unit, target_unit)
        length = convert_length(room.length, source_unit, target_unit)
        area = width * length
        label = UNIT_LABELS[IMPERIAL] if target_unit == IMPERIAL else UNIT_LABELS[METRIC]
        return f"{width:.1f} x {length:.1f} {label} ({area:.1f} sq {label})"
    return room.dimensions or DIMENSIONS_NOT_SET
