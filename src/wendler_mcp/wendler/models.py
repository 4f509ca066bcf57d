"""Wendler 5/3/1 data models."""

import datetime as dt
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MainLift(str, Enum):
    """One of the four main lifts the program is built around."""
    SQUAT = "squat"
    BENCH_PRESS = "benchPress"
    DEADLIFT = "deadlift"
    OVERHEAD_PRESS = "overheadPress"


class DayOfWeek(str, Enum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class WeightDisplayPreference(str, Enum):
    TOTAL = "total"
    PLATES_PER_SIDE = "platesPerSide"


def _zero_maxes() -> dict[MainLift, float]:
    return {lift: 0 for lift in MainLift}


class ScheduleEntry(BaseModel):
    """A main lift assigned to a day of the week."""
    day: DayOfWeek
    lift: MainLift


class UserProfile(BaseModel):
    """The configuration every cycle is generated from."""
    id: str = "currentUser"
    name: str | None = None
    start_date: dt.date | None = None
    unit_system: UnitSystem = UnitSystem.IMPERIAL
    weight_display_preference: WeightDisplayPreference = WeightDisplayPreference.TOTAL
    workout_schedule: list[ScheduleEntry] = []
    one_rep_maxes: dict[MainLift, float] = Field(default_factory=_zero_maxes)
    training_maxes: dict[MainLift, float] = Field(default_factory=_zero_maxes)

    @field_validator("workout_schedule")
    @classmethod
    def _one_lift_per_day(cls, schedule: list[ScheduleEntry]) -> list[ScheduleEntry]:
        seen: set[DayOfWeek] = set()
        for entry in schedule:
            if entry.day in seen:
                raise ValueError(f"{entry.day.value} is scheduled more than once")
            seen.add(entry.day)
        return schedule

    @field_validator("one_rep_maxes", "training_maxes")
    @classmethod
    def _non_negative(cls, maxes: dict[MainLift, float]) -> dict[MainLift, float]:
        for lift, value in maxes.items():
            if value < 0:
                raise ValueError(f"{lift.value} max must not be negative")
        return maxes

    @property
    def is_complete(self) -> bool:
        return self.start_date is not None and bool(self.workout_schedule)

    def training_max(self, lift: MainLift) -> float:
        return self.training_maxes.get(lift, 0)


class WorkoutSet(BaseModel):
    """A single prescribed set."""
    percentage: float
    target_reps: str
    target_weight: float
    is_amrap: bool = False
    completed_reps: int | None = None

    @property
    def base_reps(self) -> int:
        """Target reps without the AMRAP marker."""
        return int(self.target_reps.rstrip("+"))


class DailyWorkout(BaseModel):
    """One scheduled session."""
    date: dt.date
    day_of_week: DayOfWeek
    main_lift: MainLift
    sets: list[WorkoutSet] = []
    is_completed: bool = False

    @property
    def amrap_set(self) -> WorkoutSet | None:
        return next((s for s in self.sets if s.is_amrap), None)


class WeeklyWorkout(BaseModel):
    week_number: int
    week_name: str
    days: list[DailyWorkout] = []


class WorkoutCycle(BaseModel):
    """A generated four-week block."""
    cycle_number: int
    start_date: dt.date
    end_date: dt.date
    weeks: list[WeeklyWorkout] = []

    @property
    def all_days(self) -> list[DailyWorkout]:
        return [day for week in self.weeks for day in week.days]


class CompletedSet(BaseModel):
    """What was actually done against one prescribed set."""
    prescribed_weight: float
    prescribed_reps: str
    actual_reps: int
    is_amrap: bool = False

    @field_validator("actual_reps")
    @classmethod
    def _reps_not_negative(cls, reps: int) -> int:
        if reps < 0:
            raise ValueError("actual reps must not be negative")
        return reps


class WorkoutLogEntry(BaseModel):
    """A historical record of one logged workout."""
    model_config = ConfigDict(frozen=True)

    log_id: str
    date: dt.date
    exercise: MainLift
    completed_sets: list[CompletedSet] = []
    training_max_used: float


class CyclePosition(BaseModel):
    """Where a calendar date falls in the program."""
    cycle_number: int
    week_number: int
    day_workout: DailyWorkout | None = None


class SetMatch(BaseModel):
    """How a prescribed set was paired with a completed set."""
    set_index: int
    completed_index: int | None = None
    method: Literal["structural", "positional", "unmatched"]


class CompletionResult(BaseModel):
    """Outcome of recording a completed workout."""
    cycle: WorkoutCycle | None = None
    log_entry: WorkoutLogEntry
    matched_day: bool = False
    set_matches: list[SetMatch] = []


class E1RMPoint(BaseModel):
    """One point on an estimated one-rep max trend."""
    date: dt.date
    lift: MainLift
    weight: float
    reps: int
    e1rm: float
