"""Locate calendar dates within the program."""

import datetime as dt

from wendler_mcp.wendler.constants import CYCLE_WEEKS
from wendler_mcp.wendler.cycle import generate_cycle
from wendler_mcp.wendler.models import CyclePosition, DailyWorkout, UserProfile


def weeks_elapsed(start_date: dt.date, as_of: dt.date) -> int:
    """Whole weeks from ``start_date`` to ``as_of``, weeks beginning on the start date's weekday.

    Negative when ``as_of`` precedes the start date.
    """
    return (as_of - start_date).days // 7


def locate_cycle_and_day(profile: UserProfile, as_of: dt.date | None = None) -> CyclePosition | None:
    """Find the cycle, week and scheduled workout (if any) for ``as_of``.

    Always derived from the elapsed weeks since the start date. Returns None
    for an incomplete profile or a date before the program starts.
    """
    if not profile.is_complete:
        return None
    as_of = as_of or dt.date.today()

    elapsed = weeks_elapsed(profile.start_date, as_of)
    if elapsed < 0:
        return None

    cycle_number = elapsed // CYCLE_WEEKS + 1
    cycle = generate_cycle(profile, cycle_number)
    if cycle is None:
        return None
    week = cycle.weeks[elapsed % CYCLE_WEEKS]

    day_workout = next((d for d in week.days if d.date == as_of), None)
    return CyclePosition(cycle_number=cycle_number, week_number=week.week_number, day_workout=day_workout)


def workouts_in_week(profile: UserProfile, cycle_number: int, week_number: int) -> list[DailyWorkout] | None:
    cycle = generate_cycle(profile, cycle_number)
    if cycle is None:
        return None
    for week in cycle.weeks:
        if week.week_number == week_number:
            return week.days
    return None
