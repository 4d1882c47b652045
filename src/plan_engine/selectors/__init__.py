"""Template selectors — pick workout and meal schedules from fixed catalogs."""

from plan_engine.selectors.meal import select_meal_plan
from plan_engine.selectors.workout import select_workout_plan

__all__ = ["select_meal_plan", "select_workout_plan"]
