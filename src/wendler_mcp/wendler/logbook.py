"""Recording completed workouts and reading progress back out of the log."""

import datetime as dt
import logging
import math
import uuid

from wendler_mcp.wendler.calc import estimated_one_rep_max
from wendler_mcp.wendler.exceptions import ProfileRequiredError
from wendler_mcp.wendler.models import (
    CompletedSet, CompletionResult, DailyWorkout, E1RMPoint, MainLift, SetMatch,
    UserProfile, WorkoutCycle, WorkoutLogEntry, WorkoutSet,
)

logger = logging.getLogger(__name__)


def _same_structure(prescribed: WorkoutSet, completed: CompletedSet) -> bool:
    return (
        math.isclose(completed.prescribed_weight, prescribed.target_weight)
        and completed.prescribed_reps == prescribed.target_reps
        and completed.is_amrap == prescribed.is_amrap
    )


def match_sets(sets: list[WorkoutSet], completed: list[CompletedSet]) -> list[SetMatch]:
    """Pair each prescribed set with at most one completed set.

    First pass pairs on (weight, reps, AMRAP flag); sets left over take the
    completed record at the same index if nobody claimed it yet. Each
    completed record is used once.
    """
    claimed: set[int] = set()
    pairs: dict[int, SetMatch] = {}

    for i, prescribed in enumerate(sets):
        for j, record in enumerate(completed):
            if j not in claimed and _same_structure(prescribed, record):
                claimed.add(j)
                pairs[i] = SetMatch(set_index=i, completed_index=j, method="structural")
                break

    for i in range(len(sets)):
        if i in pairs:
            continue
        if i < len(completed) and i not in claimed:
            claimed.add(i)
            pairs[i] = SetMatch(set_index=i, completed_index=i, method="positional")
        else:
            pairs[i] = SetMatch(set_index=i, method="unmatched")

    return [pairs[i] for i in range(len(sets))]


def _complete_day(day: DailyWorkout, completed: list[CompletedSet]) -> tuple[DailyWorkout, list[SetMatch]]:
    matches = match_sets(day.sets, completed)
    sets = [
        s if m.completed_index is None
        else s.model_copy(update={"completed_reps": completed[m.completed_index].actual_reps})
        for s, m in zip(day.sets, matches)
    ]
    return day.model_copy(update={"sets": sets, "is_completed": True}), matches


def _apply(cycle: WorkoutCycle, date: dt.date, lift: MainLift,
           completed: list[CompletedSet]) -> tuple[WorkoutCycle, bool, list[SetMatch]]:
    weeks = []
    found = False
    matches: list[SetMatch] = []
    for week in cycle.weeks:
        days = []
        for day in week.days:
            if not found and day.date == date and day.main_lift == lift:
                day, matches = _complete_day(day, completed)
                found = True
            days.append(day)
        weeks.append(week.model_copy(update={"days": days}))
    return cycle.model_copy(update={"weeks": weeks}), found, matches


def record_completion(
    profile: UserProfile | None,
    cycle: WorkoutCycle | None,
    date: dt.date,
    main_lift: MainLift,
    completed_sets: list[CompletedSet],
    log_id: str | None = None,
) -> CompletionResult:
    """Apply reported reps to ``cycle`` and create the matching log entry.

    The input cycle is left untouched; the result carries an updated copy.
    A log entry is produced even when the cycle has no session for that
    date and lift (``matched_day`` is False in that case).

    Raises:
        ProfileRequiredError: no profile to take the training max from.
    """
    if profile is None:
        raise ProfileRequiredError("Cannot log a workout without a profile.")

    updated = cycle
    found = False
    matches: list[SetMatch] = []
    if cycle is not None:
        updated, found, matches = _apply(cycle, date, main_lift, completed_sets)

    if not found:
        logger.warning("No %s session on %s in the current cycle; logging it anyway",
                       main_lift.value, date.isoformat())

    entry = WorkoutLogEntry(
        log_id=log_id or f"{date.isoformat()}-{main_lift.value}-{uuid.uuid4().hex[:12]}",
        date=date,
        exercise=main_lift,
        completed_sets=list(completed_sets),
        training_max_used=profile.training_max(main_lift),
    )
    return CompletionResult(cycle=updated, log_entry=entry, matched_day=found, set_matches=matches)


def apply_logs(cycle: WorkoutCycle, logs: list[WorkoutLogEntry]) -> WorkoutCycle:
    """Mark the sessions of a freshly generated cycle that already have log entries."""
    for entry in sorted(logs, key=lambda e: e.date):
        if cycle.start_date <= entry.date <= cycle.end_date:
            cycle, _, _ = _apply(cycle, entry.date, entry.exercise, entry.completed_sets)
    return cycle


def default_completed_sets(day: DailyWorkout) -> list[CompletedSet]:
    """Prefilled completion records: target reps for straight sets, 0 for AMRAP."""
    records = []
    for s in day.sets:
        if s.completed_reps is not None:
            reps = s.completed_reps
        else:
            reps = 0 if s.is_amrap else s.base_reps
        records.append(CompletedSet(
            prescribed_weight=s.target_weight,
            prescribed_reps=s.target_reps,
            actual_reps=reps,
            is_amrap=s.is_amrap,
        ))
    return records


def top_set(entry: WorkoutLogEntry) -> CompletedSet | None:
    """The AMRAP set of a log entry, else its last set."""
    amrap = next((s for s in entry.completed_sets if s.is_amrap), None)
    if amrap is not None:
        return amrap
    return entry.completed_sets[-1] if entry.completed_sets else None


def recent_logs(logs: list[WorkoutLogEntry], lift: MainLift, limit: int = 4) -> list[WorkoutLogEntry]:
    """Most recent entries for ``lift``, newest first."""
    matching = [log for log in logs if log.exercise == lift]
    return sorted(matching, key=lambda log: log.date, reverse=True)[:limit]


def e1rm_trend(logs: list[WorkoutLogEntry], lift: MainLift) -> list[E1RMPoint]:
    points = []
    for entry in sorted((log for log in logs if log.exercise == lift), key=lambda log: log.date):
        best = top_set(entry)
        if best is None:
            continue
        e1rm = estimated_one_rep_max(best.prescribed_weight, best.actual_reps)
        if e1rm > 0:
            points.append(E1RMPoint(
                date=entry.date, lift=lift, weight=best.prescribed_weight,
                reps=best.actual_reps, e1rm=e1rm,
            ))
    return points
