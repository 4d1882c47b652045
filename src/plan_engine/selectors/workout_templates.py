"""Workout templates — fixed weekly schedules keyed by goal, day bracket and access.

Each template is an ordered tuple of WorkoutDay entries. The workout
selector picks one with a table lookup, appends preference extras and
truncates to the user's day count.
"""

from __future__ import annotations

from plan_engine.models.enums import (
    SHORT_TEMPLATE_MAX_DAYS,
    AccessTier,
    DayBracket,
    Goal,
    GymAccess,
)
from plan_engine.models.plan import WorkoutDay

TemplateKey = tuple[Goal, DayBracket, AccessTier]


# ---------------------------------------------------------------------------
# Lose weight
# ---------------------------------------------------------------------------

LOSE_WEIGHT_3_DAY: tuple[WorkoutDay, ...] = (
    WorkoutDay(
        label="Day 1",
        focus="Full Body + HIIT",
        exercises=("Squats", "Push-ups", "Rows", "HIIT Intervals (15 min)"),
    ),
    WorkoutDay(
        label="Day 2",
        focus="Cardio + Core",
        exercises=(
            "Steady State Cardio (30 min)",
            "Plank Variations",
            "Russian Twists",
            "Mountain Climbers",
        ),
    ),
    WorkoutDay(
        label="Day 3",
        focus="Full Body Circuit",
        exercises=("Lunges", "Dumbbell Press", "Deadlifts", "Burpees", "Jump Rope"),
    ),
)

LOSE_WEIGHT_5_DAY: tuple[WorkoutDay, ...] = (
    WorkoutDay(
        label="Day 1",
        focus="Lower Body + HIIT",
        exercises=("Squats", "Lunges", "Leg Press", "HIIT Intervals (15 min)"),
    ),
    WorkoutDay(
        label="Day 2",
        focus="Upper Body + Core",
        exercises=("Push-ups", "Rows", "Shoulder Press", "Plank Variations"),
    ),
    WorkoutDay(
        label="Day 3",
        focus="Cardio",
        exercises=("Steady State Cardio (45 min)", "Stair Climber", "Rowing Machine"),
    ),
    WorkoutDay(
        label="Day 4",
        focus="Full Body Circuit",
        exercises=("Burpees", "Kettlebell Swings", "Mountain Climbers", "Jump Rope"),
    ),
    WorkoutDay(
        label="Day 5",
        focus="Active Recovery",
        exercises=("Light Walking (30 min)", "Stretching", "Foam Rolling"),
    ),
)

# ---------------------------------------------------------------------------
# Build muscle
# ---------------------------------------------------------------------------

BUILD_MUSCLE_GYM_3_DAY: tuple[WorkoutDay, ...] = (
    WorkoutDay(
        label="Day 1",
        focus="Full Body",
        exercises=(
            "Barbell Squats",
            "Bench Press",
            "Bent Over Rows",
            "Shoulder Press",
            "Bicep Curls",
        ),
    ),
    WorkoutDay(
        label="Day 2",
        focus="Full Body",
        exercises=(
            "Deadlifts",
            "Incline Press",
            "Pull-ups",
            "Lateral Raises",
            "Tricep Extensions",
        ),
    ),
    WorkoutDay(
        label="Day 3",
        focus="Full Body",
        exercises=("Leg Press", "Dips", "Lat Pulldowns", "Face Pulls", "Leg Curls"),
    ),
)

BUILD_MUSCLE_GYM_5_DAY: tuple[WorkoutDay, ...] = (
    WorkoutDay(
        label="Day 1",
        focus="Chest & Triceps",
        exercises=(
            "Bench Press",
            "Incline Dumbbell Press",
            "Chest Flyes",
            "Tricep Pushdowns",
            "Skull Crushers",
        ),
    ),
    WorkoutDay(
        label="Day 2",
        focus="Back & Biceps",
        exercises=(
            "Deadlifts",
            "Pull-ups",
            "Bent Over Rows",
            "Bicep Curls",
            "Hammer Curls",
        ),
    ),
    WorkoutDay(
        label="Day 3",
        focus="Legs",
        exercises=(
            "Squats",
            "Leg Press",
            "Romanian Deadlifts",
            "Leg Extensions",
            "Calf Raises",
        ),
    ),
    WorkoutDay(
        label="Day 4",
        focus="Shoulders & Arms",
        exercises=(
            "Shoulder Press",
            "Lateral Raises",
            "Face Pulls",
            "Tricep Extensions",
            "Bicep Curls",
        ),
    ),
    WorkoutDay(
        label="Day 5",
        focus="Full Body",
        exercises=("Deadlifts", "Bench Press", "Pull-ups", "Shoulder Press", "Lunges"),
    ),
)

BUILD_MUSCLE_BODYWEIGHT: tuple[WorkoutDay, ...] = (
    WorkoutDay(
        label="Day 1",
        focus="Push (Bodyweight)",
        exercises=(
            "Push-ups (4 sets)",
            "Pike Push-ups",
            "Tricep Dips",
            "Decline Push-ups",
        ),
    ),
    WorkoutDay(
        label="Day 2",
        focus="Pull (Bodyweight)",
        exercises=(
            "Pull-ups/Rows with household items",
            "Superman Holds",
            "Bicep Curls with makeshift weights",
            "Doorway Rows",
        ),
    ),
    WorkoutDay(
        label="Day 3",
        focus="Legs (Bodyweight)",
        exercises=(
            "Bodyweight Squats (4 sets)",
            "Lunges",
            "Glute Bridges",
            "Calf Raises",
            "Wall Sits",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Get toned
# ---------------------------------------------------------------------------

GET_TONED_4_DAY: tuple[WorkoutDay, ...] = (
    WorkoutDay(
        label="Day 1",
        focus="Full Body Toning",
        exercises=(
            "Circuit: Squats, Push-ups, Rows, Lunges (3 rounds)",
            "Core Circuit",
            "Light Cardio (15 min)",
        ),
    ),
    WorkoutDay(
        label="Day 2",
        focus="HIIT & Core",
        exercises=(
            "HIIT Intervals (20 min)",
            "Plank Variations",
            "Russian Twists",
            "Bicycle Crunches",
        ),
    ),
    WorkoutDay(
        label="Day 3",
        focus="Upper Body Focus",
        exercises=("Push-ups", "Dumbbell Rows", "Shoulder Press", "Tricep Dips", "Bicep Curls"),
    ),
    WorkoutDay(
        label="Day 4",
        focus="Lower Body Focus",
        exercises=("Squats", "Lunges", "Glute Bridges", "Calf Raises", "Wall Sits"),
    ),
)

# ---------------------------------------------------------------------------
# Preference extras
# ---------------------------------------------------------------------------

YOGA_RECOVERY_DAY = WorkoutDay(
    label="Recovery Day",
    focus="Yoga",
    exercises=("30-minute Yoga Flow", "Stretching", "Meditation"),
)

HIIT_EXTRA_DAY = WorkoutDay(
    label="Extra Day",
    focus="HIIT",
    exercises=("HIIT Intervals (20 min)", "Burpees", "Mountain Climbers", "Jump Squats"),
)

# Substring that marks a day as already covering HIIT
HIIT_FOCUS_MARKER = "HIIT"

# ---------------------------------------------------------------------------
# Catalog: (goal, bracket, access) → template
# ---------------------------------------------------------------------------

WORKOUT_TEMPLATES: dict[TemplateKey, tuple[WorkoutDay, ...]] = {
    # LOSE_WEIGHT: gym access ignored
    (Goal.LOSE_WEIGHT, DayBracket.UP_TO_THREE, AccessTier.FULL_GYM): LOSE_WEIGHT_3_DAY,
    (Goal.LOSE_WEIGHT, DayBracket.UP_TO_THREE, AccessTier.BODYWEIGHT): LOSE_WEIGHT_3_DAY,
    (Goal.LOSE_WEIGHT, DayBracket.FOUR_PLUS, AccessTier.FULL_GYM): LOSE_WEIGHT_5_DAY,
    (Goal.LOSE_WEIGHT, DayBracket.FOUR_PLUS, AccessTier.BODYWEIGHT): LOSE_WEIGHT_5_DAY,

    # BUILD_MUSCLE: full gym splits by day count, otherwise bodyweight only
    (Goal.BUILD_MUSCLE, DayBracket.UP_TO_THREE, AccessTier.FULL_GYM): BUILD_MUSCLE_GYM_3_DAY,
    (Goal.BUILD_MUSCLE, DayBracket.FOUR_PLUS, AccessTier.FULL_GYM): BUILD_MUSCLE_GYM_5_DAY,
    (Goal.BUILD_MUSCLE, DayBracket.UP_TO_THREE, AccessTier.BODYWEIGHT): BUILD_MUSCLE_BODYWEIGHT,
    (Goal.BUILD_MUSCLE, DayBracket.FOUR_PLUS, AccessTier.BODYWEIGHT): BUILD_MUSCLE_BODYWEIGHT,

    # GET_TONED: one template for everyone
    (Goal.GET_TONED, DayBracket.UP_TO_THREE, AccessTier.FULL_GYM): GET_TONED_4_DAY,
    (Goal.GET_TONED, DayBracket.UP_TO_THREE, AccessTier.BODYWEIGHT): GET_TONED_4_DAY,
    (Goal.GET_TONED, DayBracket.FOUR_PLUS, AccessTier.FULL_GYM): GET_TONED_4_DAY,
    (Goal.GET_TONED, DayBracket.FOUR_PLUS, AccessTier.BODYWEIGHT): GET_TONED_4_DAY,

    # MAINTAIN and IMPROVE_HEALTH have no base template
}


def day_bracket(workout_days_per_week: int) -> DayBracket:
    if workout_days_per_week <= SHORT_TEMPLATE_MAX_DAYS:
        return DayBracket.UP_TO_THREE
    return DayBracket.FOUR_PLUS


def access_tier(gym_access: GymAccess) -> AccessTier:
    if gym_access == GymAccess.FULL:
        return AccessTier.FULL_GYM
    return AccessTier.BODYWEIGHT


def get_template(
    goal: Goal, workout_days_per_week: int, gym_access: GymAccess
) -> tuple[WorkoutDay, ...]:
    """Look up the base template for a goal, day count and gym access.

    Returns:
        The matching template, or an empty tuple for goals without one.
    """
    key = (goal, day_bracket(workout_days_per_week), access_tier(gym_access))
    return WORKOUT_TEMPLATES.get(key, ())
