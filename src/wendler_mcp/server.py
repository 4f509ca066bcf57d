"""Wendler 5/3/1 MCP Server."""

import datetime as dt
import logging

from mcp.server.fastmcp import FastMCP

from wendler_mcp.wendler.advice import AdviceClient, build_advice_request
from wendler_mcp.wendler.calc import estimated_one_rep_max
from wendler_mcp.wendler.constants import LIFT_NAMES
from wendler_mcp.wendler.cycle import generate_cycle
from wendler_mcp.wendler.display import format_number, format_weight, unit_suffix
from wendler_mcp.wendler.exceptions import ProfileRequiredError, WendlerError
from wendler_mcp.wendler.logbook import (
    apply_logs, default_completed_sets, e1rm_trend, recent_logs, record_completion, top_set,
)
from wendler_mcp.wendler.models import (
    CompletedSet, DailyWorkout, DayOfWeek, MainLift, ScheduleEntry, UnitSystem,
    UserProfile, WeightDisplayPreference, WorkoutCycle,
)
from wendler_mcp.wendler.navigator import locate_cycle_and_day
from wendler_mcp.wendler.profile import build_profile, reset_profile
from wendler_mcp.wendler.store import JsonStore

logger = logging.getLogger(__name__)

mcp = FastMCP("wendler")
store = JsonStore()
advice = AdviceClient()

SETUP_MESSAGE = "No profile found. Use save_profile to set up your program."


def _parse_lift(value: str) -> MainLift:
    key = value.strip().lower().replace(" ", "").replace("_", "")
    for lift in MainLift:
        if key in (lift.value.lower(), LIFT_NAMES[lift].lower().replace(" ", "")):
            return lift
    raise WendlerError(f"Unknown lift '{value}'. Use one of: " + ", ".join(m.value for m in MainLift))


def _parse_date(value: str | None) -> dt.date:
    if value is None:
        return dt.date.today()
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise WendlerError(f"Invalid date '{value}', expected YYYY-MM-DD.") from None


def _require_profile() -> UserProfile:
    profile = store.load_profile()
    if profile is None:
        raise ProfileRequiredError(SETUP_MESSAGE)
    return profile


def _cycle_with_logs(profile: UserProfile, cycle_number: int) -> WorkoutCycle | None:
    cycle = generate_cycle(profile, cycle_number)
    if cycle is None:
        return None
    return apply_logs(cycle, store.load_logs())


def _format_day(day: DailyWorkout, profile: UserProfile) -> list[str]:
    done = " ✓" if day.is_completed else ""
    lines = [f"### {day.day_of_week.value} {day.date.isoformat()}: {LIFT_NAMES[day.main_lift]}{done}"]
    for i, s in enumerate(day.sets, start=1):
        amrap = " (AMRAP)" if s.is_amrap else ""
        reps_done = f" -> {s.completed_reps} reps" if s.completed_reps is not None else ""
        lines.append(
            f"  {i}. {format_weight(s.target_weight, profile)} x {s.target_reps}"
            f" @ {round(s.percentage * 100)}%{amrap}{reps_done}"
        )
    return lines


@mcp.tool()
async def get_profile() -> str:
    """Show the stored program profile: start date, schedule, maxes and units."""
    profile = store.load_profile()
    if profile is None:
        return SETUP_MESSAGE

    suffix = unit_suffix(profile.unit_system)
    start = profile.start_date.isoformat() if profile.start_date else "not set"
    lines = [
        f"# Profile{f' — {profile.name}' if profile.name else ''}",
        f"Start date: {start} | Units: {profile.unit_system.value} | "
        f"Display: {profile.weight_display_preference.value}",
        "",
        "## Schedule",
    ]
    if profile.workout_schedule:
        for entry in profile.workout_schedule:
            lines.append(f"- {entry.day.value}: {LIFT_NAMES[entry.lift]}")
    else:
        lines.append("- No workout days scheduled.")

    lines.extend(["", "## Maxes"])
    for lift in MainLift:
        lines.append(
            f"- {LIFT_NAMES[lift]}: 1RM {format_number(profile.one_rep_maxes.get(lift, 0))} {suffix}, "
            f"TM {format_number(profile.training_max(lift))} {suffix}"
        )
    return "\n".join(lines)


@mcp.tool()
async def save_profile(
    start_date: str,
    schedule: dict[str, str],
    squat: float,
    bench_press: float,
    deadlift: float,
    overhead_press: float,
    unit_system: str = "imperial",
    weight_display: str = "total",
    name: str | None = None,
) -> str:
    """Create or replace the program profile. Training maxes are set to 90% of each 1RM.

    Args:
        start_date: First day of cycle 1, as YYYY-MM-DD.
        schedule: Day name to lift, e.g. {"Monday": "squat", "Wednesday": "benchPress"}.
        squat: Squat one-rep max.
        bench_press: Bench press one-rep max.
        deadlift: Deadlift one-rep max.
        overhead_press: Overhead press one-rep max.
        unit_system: "imperial" (lb) or "metric" (kg).
        weight_display: "total" or "platesPerSide".
        name: Optional display name.
    """
    try:
        entries = [
            ScheduleEntry(day=DayOfWeek(day.strip().capitalize()), lift=_parse_lift(lift))
            for day, lift in schedule.items()
        ]
        existing = store.load_profile()
        profile = build_profile(
            one_rep_maxes={
                MainLift.SQUAT: squat,
                MainLift.BENCH_PRESS: bench_press,
                MainLift.DEADLIFT: deadlift,
                MainLift.OVERHEAD_PRESS: overhead_press,
            },
            workout_schedule=entries,
            start_date=_parse_date(start_date),
            unit_system=UnitSystem(unit_system),
            weight_display_preference=WeightDisplayPreference(weight_display),
            profile_id=existing.id if existing else "currentUser",
            name=name,
        )
    except (WendlerError, ValueError) as exc:
        return f"Profile not saved: {exc}"

    store.save_profile(profile)
    return "Profile saved.\n\n" + await get_profile()


@mcp.tool()
async def reset_progress() -> str:
    """Zero all maxes, clear the schedule and the workout log, and restart the program today."""
    profile = reset_profile(store.load_profile())
    store.save_profile(profile)
    store.clear_logs()
    return f"Progress reset. Program restarts on {profile.start_date.isoformat()}."


@mcp.tool()
async def get_today(date: str | None = None) -> str:
    """Show the prescribed workout for a date (default today).

    Args:
        date: Date as YYYY-MM-DD. Omit for today.
    """
    try:
        profile = _require_profile()
        day = _parse_date(date)
    except WendlerError as exc:
        return str(exc)

    position = locate_cycle_and_day(profile, day)
    if position is None:
        if not profile.is_complete:
            return "Your profile is incomplete. Set a start date and at least one workout day."
        return f"The program starts on {profile.start_date.isoformat()}."

    header = f"Cycle {position.cycle_number}, week {position.week_number} — {day.isoformat()}"
    if position.day_workout is None:
        return f"{header}\nRest day. Nothing scheduled."

    cycle = _cycle_with_logs(profile, position.cycle_number)
    workout = next(
        d for d in cycle.all_days
        if d.date == day and d.main_lift == position.day_workout.main_lift
    )
    return "\n".join([header, *_format_day(workout, profile)])


@mcp.tool()
async def get_cycle(cycle_number: int | None = None) -> str:
    """Show all four weeks of a cycle.

    Args:
        cycle_number: Cycle to show, starting at 1. Omit for the current cycle.
    """
    try:
        profile = _require_profile()
    except WendlerError as exc:
        return str(exc)

    if cycle_number is None:
        position = locate_cycle_and_day(profile)
        cycle_number = position.cycle_number if position else 1

    cycle = _cycle_with_logs(profile, cycle_number)
    if cycle is None:
        return "No cycle available. Check the profile's start date and the cycle number."

    lines = [f"# Cycle {cycle.cycle_number}: {cycle.start_date.isoformat()} to {cycle.end_date.isoformat()}"]
    for week in cycle.weeks:
        lines.append(f"\n## {week.week_name}")
        if not week.days:
            lines.append("Nothing scheduled.")
        for day in week.days:
            lines.extend(_format_day(day, profile))
    return "\n".join(lines)


@mcp.tool()
async def get_week(cycle_number: int, week_number: int) -> str:
    """Show the sessions of one week.

    Args:
        cycle_number: Cycle number, starting at 1.
        week_number: Week within the cycle, 1 to 4.
    """
    try:
        profile = _require_profile()
    except WendlerError as exc:
        return str(exc)

    cycle = _cycle_with_logs(profile, cycle_number)
    week = next((w for w in cycle.weeks if w.week_number == week_number), None) if cycle else None
    if week is None:
        return f"No week {week_number} in cycle {cycle_number}."
    if not week.days:
        return "Nothing scheduled this week."

    lines = [f"# Cycle {cycle_number}, week {week_number}"]
    for day in week.days:
        lines.extend(_format_day(day, profile))
    return "\n".join(lines)


@mcp.tool()
async def log_workout(
    date: str,
    lift: str,
    reps: list[int],
    weights: list[float] | None = None,
) -> str:
    """Record the reps completed for a workout.

    Args:
        date: Date of the workout, YYYY-MM-DD.
        lift: squat, benchPress, deadlift or overheadPress.
        reps: Reps completed for each set, in order.
        weights: Weights used for each set. Only needed for workouts that are not in the plan.
    """
    try:
        profile = _require_profile()
        day = _parse_date(date)
        main_lift = _parse_lift(lift)
    except WendlerError as exc:
        return str(exc)

    cycle = None
    planned = None
    position = locate_cycle_and_day(profile, day)
    if position is not None:
        cycle = _cycle_with_logs(profile, position.cycle_number)
        planned = next((d for d in cycle.all_days if d.date == day and d.main_lift == main_lift), None)

    if planned is not None and len(reps) != len(planned.sets):
        return (f"The planned {LIFT_NAMES[main_lift]} session on {day.isoformat()} has "
                f"{len(planned.sets)} sets; got {len(reps)} rep counts. Workout not logged.")
    if planned is None and (weights is None or len(weights) != len(reps)):
        return (f"No {LIFT_NAMES[main_lift]} session is planned on {day.isoformat()}. "
                "Pass one weight per set to log it anyway.")

    try:
        if planned is not None:
            completed = default_completed_sets(planned)
            for i, actual in enumerate(reps):
                completed[i] = CompletedSet(**{**completed[i].model_dump(), "actual_reps": actual})
        else:
            completed = [
                CompletedSet(
                    prescribed_weight=w,
                    prescribed_reps=str(r),
                    actual_reps=r,
                    is_amrap=i == len(reps) - 1,
                )
                for i, (w, r) in enumerate(zip(weights, reps))
            ]
        result = record_completion(profile, cycle, day, main_lift, completed)
    except (WendlerError, ValueError) as exc:
        return f"Workout not logged: {exc}"
    store.append_log(result.log_entry)

    lines = [f"Logged {LIFT_NAMES[main_lift]} on {day.isoformat()}."]
    if not result.matched_day:
        lines.append("Note: this session is not part of the planned cycle.")
    best = top_set(result.log_entry)
    if best is not None:
        e1rm = estimated_one_rep_max(best.prescribed_weight, best.actual_reps)
        if e1rm > 0:
            lines.append(
                f"Top set {format_number(best.prescribed_weight)} x {best.actual_reps}: "
                f"estimated 1RM {format_number(e1rm)} {unit_suffix(profile.unit_system)}"
            )
    return "\n".join(lines)


@mcp.tool()
async def get_progress(lift: str | None = None) -> str:
    """Show estimated one-rep max trends and recent sessions.

    Args:
        lift: Limit to one lift. Omit for all four.
    """
    try:
        profile = _require_profile()
        lifts = [_parse_lift(lift)] if lift else list(MainLift)
    except WendlerError as exc:
        return str(exc)

    logs = store.load_logs()
    suffix = unit_suffix(profile.unit_system)
    lines = []
    for main_lift in lifts:
        lines.append(f"## {LIFT_NAMES[main_lift]}")
        trend = e1rm_trend(logs, main_lift)
        if len(trend) < 2:
            lines.append("Not enough data for a trend. Complete at least two workouts with AMRAP sets.")
        for point in trend:
            lines.append(
                f"- {point.date.isoformat()}: e1RM {format_number(point.e1rm)} {suffix} "
                f"({format_number(point.weight)} x {point.reps})"
            )
        recent = recent_logs(logs, main_lift)
        if recent:
            lines.append("Recent sessions:")
            for log in recent:
                reps = ", ".join(str(s.actual_reps) for s in log.completed_sets)
                lines.append(f"  {log.date.isoformat()}: reps {reps} (TM {format_number(log.training_max_used)})")
        lines.append("")
    return "\n".join(lines).rstrip()


@mcp.tool()
async def get_weight_adjustment(lift: str) -> str:
    """Ask for advice on adjusting a lift's training max, based on its recent sessions.

    Args:
        lift: squat, benchPress, deadlift or overheadPress.
    """
    try:
        profile = _require_profile()
        request = build_advice_request(profile, store.load_logs(), _parse_lift(lift))
    except WendlerError as exc:
        return str(exc)

    result = await advice.suggest(request)
    if "error" in result:
        return f"Could not get a recommendation: {result['error']}"
    return result["adjustmentRecommendation"]


def main():
    mcp.run()


if __name__ == "__main__":
    main()
