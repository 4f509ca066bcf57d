"""Saving and resetting the user profile."""

import datetime as dt
import math

from wendler_mcp.wendler.calc import training_max
from wendler_mcp.wendler.models import (
    MainLift, ScheduleEntry, UnitSystem, UserProfile, WeightDisplayPreference,
)


def derive_training_maxes(one_rep_maxes: dict[MainLift, float]) -> dict[MainLift, float]:
    """Training max for each lift: 90% of the one-rep max, rounded to a whole number."""
    return {
        lift: math.floor(training_max(one_rep_maxes.get(lift, 0)) + 0.5)
        for lift in MainLift
    }


def build_profile(
    one_rep_maxes: dict[MainLift, float],
    workout_schedule: list[ScheduleEntry],
    start_date: dt.date,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
    weight_display_preference: WeightDisplayPreference = WeightDisplayPreference.TOTAL,
    profile_id: str = "currentUser",
    name: str | None = None,
) -> UserProfile:
    """A complete profile whose training maxes are derived from ``one_rep_maxes``."""
    maxes = {lift: one_rep_maxes.get(lift, 0) for lift in MainLift}
    return UserProfile(
        id=profile_id,
        name=name,
        start_date=start_date,
        unit_system=unit_system,
        weight_display_preference=weight_display_preference,
        workout_schedule=workout_schedule,
        one_rep_maxes=maxes,
        training_maxes=derive_training_maxes(maxes),
    )


def reset_profile(profile: UserProfile | None, today: dt.date | None = None) -> UserProfile:
    """Zero the maxes, clear the schedule and restart the program today.

    Identity, name and unit preferences survive the reset.
    """
    today = today or dt.date.today()
    if profile is None:
        return UserProfile(start_date=today)
    return profile.model_copy(update={
        "start_date": today,
        "workout_schedule": [],
        "one_rep_maxes": {lift: 0 for lift in MainLift},
        "training_maxes": {lift: 0 for lift in MainLift},
    })
