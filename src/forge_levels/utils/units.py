"""Unit conversion helpers for body weight and loads."""

from decimal import ROUND_HALF_UP, Decimal

from ..models.patterns import UnitPreference

LBS_PER_KG = 2.20462


def to_kg(value: float, unit: UnitPreference) -> float:
    """Convert a weight entered in the user's unit to kilograms."""
    if unit is UnitPreference.IMPERIAL:
        return value / LBS_PER_KG
    return value


def format_weight(value: float | None, unit: UnitPreference) -> str:
    """Format a weight rounded half up to a whole unit, e.g. ``"203 lbs"``."""
    whole = Decimal(str(value or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{int(whole)} {unit.weight_label}"
