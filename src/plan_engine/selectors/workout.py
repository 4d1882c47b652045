"""Workout plan selector: template lookup, preference extras, day-count truncation."""

from __future__ import annotations

from collections.abc import Iterable

from plan_engine.models.enums import Goal, GymAccess, WorkoutPreference
from plan_engine.models.plan import WorkoutDay
from plan_engine.selectors.workout_templates import (
    HIIT_EXTRA_DAY,
    HIIT_FOCUS_MARKER,
    YOGA_RECOVERY_DAY,
    get_template,
)


def add_preference_days(
    base: tuple[WorkoutDay, ...],
    preferences: Iterable[WorkoutPreference],
) -> tuple[WorkoutDay, ...]:
    """Append the yoga recovery day and the extra HIIT day where requested.

    Yoga is appended first. The HIIT day is skipped when any day's focus
    already mentions HIIT, including the yoga day.
    """
    prefs = frozenset(preferences)
    days = list(base)
    if WorkoutPreference.YOGA in prefs:
        days.append(YOGA_RECOVERY_DAY)
    if WorkoutPreference.HIIT in prefs and not any(
        HIIT_FOCUS_MARKER in d.focus for d in days
    ):
        days.append(HIIT_EXTRA_DAY)
    return tuple(days)


def select_workout_plan(
    goal: Goal,
    workout_days_per_week: int,
    gym_access: GymAccess,
    preferences: Iterable[WorkoutPreference],
) -> tuple[WorkoutDay, ...]:
    """Select the weekly workout schedule.

    Args:
        goal: Picks the template family.
        workout_days_per_week: Picks the ≤3 / >3 template and caps the
            schedule length.
        gym_access: Only FULL unlocks the gym templates for BUILD_MUSCLE.
        preferences: YOGA and HIIT add extra days before truncation.

    Returns:
        At most ``workout_days_per_week`` days, in template order followed
        by the yoga and HIIT extras. Entries past the limit are dropped.
    """
    base = get_template(goal, workout_days_per_week, gym_access)
    augmented = add_preference_days(base, preferences)
    return augmented[: max(workout_days_per_week, 0)]
