"""Body metrics: unit normalization and body mass index.

Reference: Keys et al. (1972), Indices of relative weight and obesity,
J Chronic Dis 25(6):329-343.
"""

from __future__ import annotations

import math

from plan_engine.models.enums import (
    CM_PER_METER,
    INCHES_TO_METERS,
    POUNDS_TO_KG,
    HeightUnit,
    WeightUnit,
)
from plan_engine.models.plan import BodyMetrics


def pounds_to_kg(pounds: float) -> float:
    return pounds * POUNDS_TO_KG


def kg_to_pounds(kg: float) -> float:
    return kg / POUNDS_TO_KG


def weight_to_kg(weight: float, unit: WeightUnit) -> float:
    """Normalize a weight answer to kilograms."""
    if unit == WeightUnit.POUND:
        return pounds_to_kg(weight)
    return weight


def height_to_meters(height: float, unit: HeightUnit) -> float:
    """Normalize a height answer to meters.

    FEET_INCHES heights must already be expressed as total inches.
    """
    if unit == HeightUnit.FEET_INCHES:
        return height * INCHES_TO_METERS
    return height / CM_PER_METER


def calculate_bmi(weight_kg: float, height_m: float) -> float | None:
    """Body mass index in kg/m², or None when it is undefined.

    Undefined covers a non-positive height and any non-finite input or
    result. Full precision is kept; rounding is a display concern.
    """
    if not (math.isfinite(weight_kg) and math.isfinite(height_m)):
        return None
    if height_m <= 0:
        return None
    bmi = weight_kg / (height_m * height_m)
    if not math.isfinite(bmi) or bmi < 0:
        return None
    return bmi


def compute_metrics(
    weight: float,
    weight_unit: WeightUnit,
    height: float,
    height_unit: HeightUnit,
) -> BodyMetrics:
    """Normalize weight and height and compute BMI.

    Args:
        weight: Weight in ``weight_unit``.
        weight_unit: Kilograms or pounds.
        height: Height in ``height_unit`` (total inches for FEET_INCHES).
        height_unit: Centimeters or feet-inches.

    Returns:
        BodyMetrics in kilograms and meters. ``bmi`` is None when the
        height is not positive.
    """
    weight_kg = weight_to_kg(weight, weight_unit)
    height_m = height_to_meters(height, height_unit)
    return BodyMetrics(
        weight_kg=weight_kg,
        height_m=height_m,
        bmi=calculate_bmi(weight_kg, height_m),
    )
