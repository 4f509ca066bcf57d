"""Shared fixtures for the Wendler planner tests."""

import datetime as dt

import pytest

from wendler_mcp.wendler.models import (
    DayOfWeek, MainLift, ScheduleEntry, UnitSystem, WeightDisplayPreference,
)
from wendler_mcp.wendler.profile import build_profile
from wendler_mcp.wendler.store import JsonStore


@pytest.fixture
def squat_profile():
    """Monday-start imperial profile with only a Monday squat day (squat 1RM 300, TM 270)."""
    return build_profile(
        one_rep_maxes={MainLift.SQUAT: 300},
        workout_schedule=[ScheduleEntry(day=DayOfWeek.MONDAY, lift=MainLift.SQUAT)],
        start_date=dt.date(2024, 1, 1),
    )


@pytest.fixture
def full_profile():
    """Four-day imperial profile starting on a Wednesday."""
    return build_profile(
        one_rep_maxes={
            MainLift.SQUAT: 315,
            MainLift.BENCH_PRESS: 225,
            MainLift.DEADLIFT: 405,
            MainLift.OVERHEAD_PRESS: 135,
        },
        workout_schedule=[
            ScheduleEntry(day=DayOfWeek.FRIDAY, lift=MainLift.OVERHEAD_PRESS),
            ScheduleEntry(day=DayOfWeek.MONDAY, lift=MainLift.SQUAT),
            ScheduleEntry(day=DayOfWeek.THURSDAY, lift=MainLift.DEADLIFT),
            ScheduleEntry(day=DayOfWeek.TUESDAY, lift=MainLift.BENCH_PRESS),
        ],
        start_date=dt.date(2024, 1, 3),
    )


@pytest.fixture
def metric_profile():
    """Metric profile with plates-per-side display."""
    return build_profile(
        one_rep_maxes={
            MainLift.SQUAT: 140,
            MainLift.BENCH_PRESS: 100,
            MainLift.DEADLIFT: 180,
            MainLift.OVERHEAD_PRESS: 60,
        },
        workout_schedule=[
            ScheduleEntry(day=DayOfWeek.MONDAY, lift=MainLift.SQUAT),
            ScheduleEntry(day=DayOfWeek.WEDNESDAY, lift=MainLift.BENCH_PRESS),
            ScheduleEntry(day=DayOfWeek.FRIDAY, lift=MainLift.DEADLIFT),
            ScheduleEntry(day=DayOfWeek.SATURDAY, lift=MainLift.OVERHEAD_PRESS),
        ],
        start_date=dt.date(2024, 3, 4),
        unit_system=UnitSystem.METRIC,
        weight_display_preference=WeightDisplayPreference.PLATES_PER_SIDE,
    )


@pytest.fixture
def store(tmp_path):
    """A JsonStore in a temporary directory."""
    return JsonStore(tmp_path / "data")
