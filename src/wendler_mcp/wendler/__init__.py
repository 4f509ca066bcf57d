from wendler_mcp.wendler.advice import AdviceClient, build_advice_request
from wendler_mcp.wendler.calc import (
    estimated_one_rep_max, round_target_weight, round_to_increment, training_max,
)
from wendler_mcp.wendler.cycle import generate_cycle
from wendler_mcp.wendler.display import format_weight
from wendler_mcp.wendler.logbook import (
    apply_logs, default_completed_sets, e1rm_trend, match_sets, recent_logs,
    record_completion, top_set,
)
from wendler_mcp.wendler.models import (
    CompletedSet, CompletionResult, CyclePosition, DailyWorkout, DayOfWeek, E1RMPoint,
    MainLift, ScheduleEntry, SetMatch, UnitSystem, UserProfile, WeeklyWorkout,
    WeightDisplayPreference, WorkoutCycle, WorkoutLogEntry, WorkoutSet,
)
from wendler_mcp.wendler.navigator import locate_cycle_and_day, workouts_in_week
from wendler_mcp.wendler.profile import build_profile, derive_training_maxes, reset_profile
from wendler_mcp.wendler.store import JsonStore
from wendler_mcp.wendler.exceptions import (
    WendlerError, ProfileRequiredError, NoWorkoutHistoryError, StoreError, AdviceError,
)

__all__ = [
    "AdviceClient", "build_advice_request",
    "estimated_one_rep_max", "round_target_weight", "round_to_increment", "training_max",
    "generate_cycle", "format_weight",
    "apply_logs", "default_completed_sets", "e1rm_trend", "match_sets", "recent_logs",
    "record_completion", "top_set",
    "CompletedSet", "CompletionResult", "CyclePosition", "DailyWorkout", "DayOfWeek",
    "E1RMPoint", "MainLift", "ScheduleEntry", "SetMatch", "UnitSystem", "UserProfile",
    "WeeklyWorkout", "WeightDisplayPreference", "WorkoutCycle", "WorkoutLogEntry", "WorkoutSet",
    "locate_cycle_and_day", "workouts_in_week",
    "build_profile", "derive_training_maxes", "reset_profile",
    "JsonStore",
    "WendlerError", "ProfileRequiredError", "NoWorkoutHistoryError", "StoreError", "AdviceError",
]
