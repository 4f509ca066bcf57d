"""Wendler 5/3/1 cycle generation."""

import datetime as dt
import logging

from wendler_mcp.wendler.calc import round_target_weight
from wendler_mcp.wendler.constants import CYCLE_WEEKS, DAYS_OF_WEEK, WEEK_TEMPLATES
from wendler_mcp.wendler.models import (
    DailyWorkout, DayOfWeek, UserProfile, WeeklyWorkout, WorkoutCycle, WorkoutSet,
)

logger = logging.getLogger(__name__)


def weekday_index(day: dt.date) -> int:
    """Sunday-first weekday number (Sunday=0 .. Saturday=6)."""
    return day.isoweekday() % 7


def date_in_week(week_start: dt.date, day: DayOfWeek) -> dt.date:
    """The date within the 7 days starting at ``week_start`` that falls on ``day``."""
    offset = (DAYS_OF_WEEK.index(day) - weekday_index(week_start)) % 7
    return week_start + dt.timedelta(days=offset)


def cycle_start_date(start_date: dt.date, cycle_number: int) -> dt.date:
    return start_date + dt.timedelta(weeks=(cycle_number - 1) * CYCLE_WEEKS)


def generate_cycle(profile: UserProfile, cycle_number: int = 1) -> WorkoutCycle | None:
    """Build the dated four-week block ``cycle_number`` for ``profile``.

    Returns None when the profile has no start date or ``cycle_number`` is
    below 1. An empty schedule still yields four (empty) weeks. Training max
    values are copied into the set weights, so the cycle does not follow
    later profile edits.
    """
    if profile.start_date is None or cycle_number < 1:
        return None

    start = cycle_start_date(profile.start_date, cycle_number)
    schedule = sorted(profile.workout_schedule, key=lambda entry: DAYS_OF_WEEK.index(entry.day))

    weeks: list[WeeklyWorkout] = []
    for week_index, template in enumerate(WEEK_TEMPLATES):
        week_start = start + dt.timedelta(weeks=week_index)
        days: list[DailyWorkout] = []

        for entry in schedule:
            tm = profile.training_max(entry.lift)
            sets = [
                WorkoutSet(
                    percentage=set_conf["percentage"],
                    target_reps=set_conf["reps"],
                    target_weight=round_target_weight(tm * set_conf["percentage"], profile.unit_system),
                    is_amrap=set_conf["amrap"],
                )
                for set_conf in template["sets"]
            ]
            days.append(DailyWorkout(
                date=date_in_week(week_start, entry.day),
                day_of_week=entry.day,
                main_lift=entry.lift,
                sets=sets,
            ))

        days.sort(key=lambda d: d.date)
        weeks.append(WeeklyWorkout(week_number=week_index + 1, week_name=template["name"], days=days))

    end = start + dt.timedelta(weeks=CYCLE_WEEKS) - dt.timedelta(days=1)
    logger.debug("Generated cycle %d (%s to %s) with %d sessions per week",
                 cycle_number, start, end, len(schedule))
    return WorkoutCycle(cycle_number=cycle_number, start_date=start, end_date=end, weeks=weeks)
