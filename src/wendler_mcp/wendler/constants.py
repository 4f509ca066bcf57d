"""Wendler 5/3/1 program constants."""

from wendler_mcp.wendler.models import DayOfWeek, MainLift

LIFT_NAMES: dict[MainLift, str] = {
    MainLift.SQUAT: "Squat",
    MainLift.BENCH_PRESS: "Bench Press",
    MainLift.DEADLIFT: "Deadlift",
    MainLift.OVERHEAD_PRESS: "Overhead Press",
}

# Sunday-first, matching date-style weekday numbering used for alignment.
DAYS_OF_WEEK: list[DayOfWeek] = [
    DayOfWeek.SUNDAY,
    DayOfWeek.MONDAY,
    DayOfWeek.TUESDAY,
    DayOfWeek.WEDNESDAY,
    DayOfWeek.THURSDAY,
    DayOfWeek.FRIDAY,
    DayOfWeek.SATURDAY,
]

DEFAULT_TRAINING_MAX_PERCENTAGE = 0.9
CYCLE_WEEKS = 4

BARBELL_REFERENCE_LB = 45
LB_TO_KG_CONVERSION_FACTOR = 2.20462

IMPERIAL_PLATE_STEP = 10
METRIC_PLATE_STEP = 5

WEEK_TEMPLATES: list[dict] = [
    {
        "name": "Week 1 (3x5)",
        "sets": [
            {"percentage": 0.65, "reps": "5", "amrap": False},
            {"percentage": 0.75, "reps": "5", "amrap": False},
            {"percentage": 0.85, "reps": "5+", "amrap": True},
        ],
    },
    {
        "name": "Week 2 (3x3)",
        "sets": [
            {"percentage": 0.70, "reps": "3", "amrap": False},
            {"percentage": 0.80, "reps": "3", "amrap": False},
            {"percentage": 0.90, "reps": "3+", "amrap": True},
        ],
    },
    {
        "name": "Week 3 (5/3/1)",
        "sets": [
            {"percentage": 0.75, "reps": "5", "amrap": False},
            {"percentage": 0.85, "reps": "3", "amrap": False},
            {"percentage": 0.95, "reps": "1+", "amrap": True},
        ],
    },
    {
        "name": "Week 4 (Deload)",
        "sets": [
            {"percentage": 0.40, "reps": "5", "amrap": False},
            {"percentage": 0.50, "reps": "5", "amrap": False},
            {"percentage": 0.60, "reps": "5", "amrap": False},
        ],
    },
]
