"""Static training, nutrition and lifestyle guidance shown alongside a plan."""

from __future__ import annotations

from datetime import date, timedelta

from plan_engine.models.enums import CHECK_IN_INTERVAL_DAYS
from plan_engine.models.plan import NutritionTarget

TRAINING_GUIDELINES: tuple[str, ...] = (
    "Warm up for 5-10 minutes before each workout",
    "For strength exercises: 3-4 sets of 8-12 reps",
    "Rest 60-90 seconds between sets",
    "Increase weight when you can complete all sets with good form",
    "Cool down and stretch for 5-10 minutes after each workout",
)

_GENERAL_NUTRITION_TIPS: tuple[str, ...] = (
    "Drink at least 2-3 liters of water daily",
    "Prep meals 2-3 times per week to save time",
    "Use a food scale to measure portions accurately",
    "Track your food intake with MyFitnessPal or similar app",
    'Allow yourself one "flexible" meal per week for sustainability',
)

LIFESTYLE_TIPS: dict[str, tuple[str, ...]] = {
    "Sleep & Recovery": (
        "Aim for 7-9 hours of quality sleep each night",
        "Establish a consistent sleep schedule",
        "Take 1-2 complete rest days per week",
        "Consider foam rolling and stretching on rest days",
    ),
    "Daily Activity": (
        "Aim for 8,000-10,000 steps daily",
        "Take movement breaks every hour if you have a desk job",
        "Consider a standing desk or active sitting options",
        "Take the stairs instead of elevators when possible",
    ),
    "Stress Management": (
        "Practice 5-10 minutes of meditation daily",
        "Incorporate deep breathing exercises throughout the day",
        "Spend time in nature when possible",
        "Consider journaling to process thoughts and track progress",
    ),
    "Progress Tracking": (
        "Weigh yourself at the same time 1-2 times per week",
        "Take progress photos every 2-4 weeks",
        "Track workout performance (weights, reps, time)",
        "Measure body circumferences monthly (waist, hips, chest, arms)",
    ),
}

COACHING_BENEFITS: tuple[str, ...] = (
    "Weekly video check-ins with your coach",
    "Personalized plan adjustments based on your progress",
    "Access to private community for support",
    "Priority access to your coach via messaging",
)


def training_guidelines() -> tuple[str, ...]:
    return TRAINING_GUIDELINES


def nutrition_tips(nutrition: NutritionTarget | None) -> tuple[str, ...]:
    """Target-specific tips followed by the general ones.

    Only the general tips are returned when nutrition is undefined.
    """
    if nutrition is None:
        return _GENERAL_NUTRITION_TIPS
    targets = (
        f"Aim for {nutrition.daily_calories} calories per day",
        f"Protein target: {nutrition.protein_grams}g daily (focus on lean sources)",
        f"Carbs target: {nutrition.carb_grams}g daily (prioritize complex carbs)",
        f"Fats target: {nutrition.fat_grams}g daily (focus on healthy fats)",
    )
    return targets + _GENERAL_NUTRITION_TIPS


def lifestyle_tips() -> dict[str, tuple[str, ...]]:
    return dict(LIFESTYLE_TIPS)


def first_check_in(today: date) -> date:
    """Date of the first accountability check-in, one week after *today*."""
    return today + timedelta(days=CHECK_IN_INTERVAL_DAYS)
