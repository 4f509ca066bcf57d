"""Rendering weights for the user."""

from wendler_mcp.wendler.calc import round_to_increment
from wendler_mcp.wendler.constants import BARBELL_REFERENCE_LB, LB_TO_KG_CONVERSION_FACTOR
from wendler_mcp.wendler.models import UnitSystem, UserProfile, WeightDisplayPreference


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.10g}"


def unit_suffix(unit_system: UnitSystem) -> str:
    return "kg" if unit_system == UnitSystem.METRIC else "lb"


def barbell_weight(unit_system: UnitSystem) -> float:
    if unit_system == UnitSystem.METRIC:
        return round_to_increment(BARBELL_REFERENCE_LB / LB_TO_KG_CONVERSION_FACTOR, 0.5)
    return BARBELL_REFERENCE_LB


def format_weight(weight: float, profile: UserProfile | None) -> str:
    """Render a total weight as a total or as plates per side, per the profile's preference."""
    if profile is None:
        return f"{format_number(weight)} units"

    suffix = unit_suffix(profile.unit_system)
    if profile.weight_display_preference != WeightDisplayPreference.PLATES_PER_SIDE:
        return f"{format_number(weight)} {suffix}"

    bar = barbell_weight(profile.unit_system)
    per_side = round_to_increment((weight - bar) / 2)
    if weight <= bar or per_side <= 0:
        return f"{format_number(weight)} {suffix} (Barbell)"
    return f"{format_number(per_side)} {suffix} per side"
