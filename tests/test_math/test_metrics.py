"""Tests for unit normalization and BMI."""

from __future__ import annotations

import math

import pytest

from plan_engine.math.metrics import (
    calculate_bmi,
    compute_metrics,
    height_to_meters,
    kg_to_pounds,
    pounds_to_kg,
    weight_to_kg,
)
from plan_engine.models.enums import HeightUnit, WeightUnit


class TestUnitConversion:
    def test_pounds_to_kg_factor(self) -> None:
        assert pounds_to_kg(1.0) == pytest.approx(0.453592)
        assert pounds_to_kg(150.0) == pytest.approx(68.0388)

    def test_kg_pounds_round_trip(self) -> None:
        for kg in (0.5, 45.0, 70.0, 123.456, 250.0):
            assert pounds_to_kg(kg_to_pounds(kg)) == pytest.approx(kg)

    def test_kg_passes_through(self) -> None:
        assert weight_to_kg(70.0, WeightUnit.KILOGRAM) == 70.0

    def test_pound_weight_converted(self) -> None:
        assert weight_to_kg(200.0, WeightUnit.POUND) == pytest.approx(90.7184)

    def test_centimeters_to_meters(self) -> None:
        assert height_to_meters(175.0, HeightUnit.CENTIMETER) == pytest.approx(1.75)

    def test_total_inches_to_meters(self) -> None:
        # 5'10" arrives as 70 total inches
        assert height_to_meters(70.0, HeightUnit.FEET_INCHES) == pytest.approx(1.778)


class TestBMI:
    def test_known_value(self) -> None:
        bmi = calculate_bmi(70.0, 1.75)
        assert bmi == pytest.approx(22.857, abs=1e-3)
        assert round(bmi, 1) == 22.9

    def test_full_precision_kept(self) -> None:
        """Rounding is left to display."""
        assert calculate_bmi(70.0, 1.75) == 70.0 / (1.75 * 1.75)

    def test_zero_height_is_undefined(self) -> None:
        assert calculate_bmi(70.0, 0.0) is None

    def test_negative_height_is_undefined(self) -> None:
        assert calculate_bmi(70.0, -1.8) is None

    def test_non_finite_input_is_undefined(self) -> None:
        assert calculate_bmi(math.nan, 1.75) is None
        assert calculate_bmi(70.0, math.inf) is None

    def test_heavier_means_higher_bmi(self) -> None:
        assert calculate_bmi(90.0, 1.75) > calculate_bmi(70.0, 1.75)


class TestComputeMetrics:
    def test_metric_answers(self) -> None:
        metrics = compute_metrics(70.0, WeightUnit.KILOGRAM, 175.0, HeightUnit.CENTIMETER)
        assert metrics.weight_kg == 70.0
        assert metrics.height_m == pytest.approx(1.75)
        assert metrics.height_cm == pytest.approx(175.0)
        assert metrics.bmi_display == "22.9"

    def test_imperial_answers_match_metric(self) -> None:
        """154.3 lbs and 5'9" land on the same BMI as the metric answers."""
        metrics = compute_metrics(154.3, WeightUnit.POUND, 69.0, HeightUnit.FEET_INCHES)
        assert metrics.weight_kg == pytest.approx(69.99, abs=0.01)
        assert metrics.height_m == pytest.approx(1.7526)
        assert metrics.bmi == pytest.approx(22.79, abs=0.01)

    def test_zero_height_gives_undefined_bmi(self) -> None:
        metrics = compute_metrics(70.0, WeightUnit.KILOGRAM, 0.0, HeightUnit.CENTIMETER)
        assert metrics.bmi is None
        assert metrics.bmi_display == "N/A"
