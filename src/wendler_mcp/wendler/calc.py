"""Weight rounding, training max and estimated one-rep max helpers."""

import math

from wendler_mcp.wendler.constants import (
    BARBELL_REFERENCE_LB,
    DEFAULT_TRAINING_MAX_PERCENTAGE,
    IMPERIAL_PLATE_STEP,
    METRIC_PLATE_STEP,
)
from wendler_mcp.wendler.models import UnitSystem


def round_to_increment(weight: float, increment: float = 2.5) -> float:
    """Round to the nearest multiple of ``increment``, halves rounding up."""
    return math.floor(weight / increment + 0.5) * increment


def training_max(one_rep_max: float, percentage: float = DEFAULT_TRAINING_MAX_PERCENTAGE) -> float:
    return one_rep_max * percentage


def round_target_weight(weight: float, unit_system: UnitSystem) -> float:
    """Round a raw set weight to something loadable in the given unit system.

    Imperial weights land on 45 lb plus a multiple of 10 (a pair of 5 lb
    plates is the smallest jump). Metric weights land on a multiple of 5 kg.
    Zero and negative input gives 0.
    """
    if weight <= 0:
        return 0
    if unit_system == UnitSystem.IMPERIAL:
        rounded = BARBELL_REFERENCE_LB + round_to_increment(weight - BARBELL_REFERENCE_LB, IMPERIAL_PLATE_STEP)
    else:
        rounded = round_to_increment(weight, METRIC_PLATE_STEP)
    return max(0, rounded)


def estimated_one_rep_max(weight: float, reps: int) -> float:
    """Brzycki estimate of the one-rep max for ``weight`` lifted ``reps`` times."""
    if reps <= 0:
        return 0
    if reps == 1:
        return round_to_increment(weight)
    denominator = 1.0278 - 0.0278 * reps
    if denominator <= 0:
        return 0
    return round_to_increment(weight / denominator)
