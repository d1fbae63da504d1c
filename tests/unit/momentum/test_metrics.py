"""Tests for the metrics calculator."""

from types import SimpleNamespace

import pytest

from app.core.exceptions import InvalidInput
from app.momentum.metrics import (
    bmi,
    bmi_classification,
    bmr,
    body_fat_classification,
    caloric_target,
    compute_metrics,
    ideal_weight_range,
    macro_split,
    tdee,
)
from app.schemas.sample import ActivityLevel, BMIClassification, BodyFatClassification


# ======================================================================
# Helpers
# ======================================================================


def _make_sample(**overrides) -> SimpleNamespace:
    values = {
        "weight_kg": 70.0,
        "height_cm": 175.0,
        "sex": "male",
        "age_years": 30,
        "body_fat_pct": None,
        "muscle_mass_kg": None,
        "waist_cm": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


# ======================================================================
# BMI
# ======================================================================


class TestBMI:
    def test_reference_value(self):
        assert bmi(70, 175) == pytest.approx(22.86, abs=0.01)

    def test_reference_value_is_normal(self):
        assert bmi_classification(bmi(70, 175)) == BMIClassification.NORMAL

    @pytest.mark.parametrize("height", [0, -170])
    def test_non_positive_height_rejected(self, height):
        with pytest.raises(InvalidInput):
            bmi(70, height)

    def test_non_positive_weight_rejected(self):
        with pytest.raises(InvalidInput):
            bmi(0, 175)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (18.49, BMIClassification.UNDERWEIGHT),
            (18.5, BMIClassification.NORMAL),
            (24.99, BMIClassification.NORMAL),
            (25.0, BMIClassification.OVERWEIGHT),
            (29.99, BMIClassification.OVERWEIGHT),
            (30.0, BMIClassification.OBESE_I),
            (35.0, BMIClassification.OBESE_II),
            (40.0, BMIClassification.OBESE_III),
            (55.0, BMIClassification.OBESE_III),
        ],
    )
    def test_classification_bands(self, value, expected):
        assert bmi_classification(value) == expected


# ======================================================================
# BMR / TDEE
# ======================================================================


class TestBMR:
    def test_male_reference(self):
        assert bmr("male", 70, 175, 30) == pytest.approx(1695.67, abs=0.01)

    def test_female_reference(self):
        assert bmr("female", 60, 165, 25) == pytest.approx(1405.33, abs=0.01)

    def test_unknown_sex_rejected(self):
        with pytest.raises(InvalidInput):
            bmr("other", 70, 175, 30)


class TestTDEE:
    @pytest.mark.parametrize(
        "level, factor",
        [("sedentary", 1.2), ("light", 1.375), ("moderate", 1.55), ("intense", 1.725)],
    )
    def test_activity_factors(self, level, factor):
        assert tdee(1000.0, level) == pytest.approx(1000.0 * factor)

    def test_accepts_enum(self):
        assert tdee(1000.0, ActivityLevel.MODERATE) == pytest.approx(1550.0)

    @pytest.mark.parametrize("level", ["extreme", "", "MODERATE"])
    def test_unknown_level_rejected(self, level):
        with pytest.raises(InvalidInput):
            tdee(1000.0, level)


# ======================================================================
# Body composition
# ======================================================================


class TestIdealWeightRange:
    def test_range_for_175(self):
        result = ideal_weight_range(175)
        assert result.min_kg == pytest.approx(56.7)
        assert result.max_kg == pytest.approx(76.3)


class TestBodyFatClassification:
    @pytest.mark.parametrize(
        "pct, expected",
        [
            (5.9, BodyFatClassification.ESSENTIAL),
            (6.0, BodyFatClassification.ATHLETE),
            (13.9, BodyFatClassification.ATHLETE),
            (14.0, BodyFatClassification.FITNESS),
            (18.0, BodyFatClassification.AVERAGE),
            (24.9, BodyFatClassification.AVERAGE),
            (25.0, BodyFatClassification.OVER_FAT),
        ],
    )
    def test_male_bands(self, pct, expected):
        assert body_fat_classification(pct, "male") == expected

    @pytest.mark.parametrize(
        "pct, expected",
        [
            (13.9, BodyFatClassification.ESSENTIAL),
            (14.0, BodyFatClassification.ATHLETE),
            (21.0, BodyFatClassification.FITNESS),
            (25.0, BodyFatClassification.AVERAGE),
            (32.0, BodyFatClassification.OVER_FAT),
        ],
    )
    def test_female_bands(self, pct, expected):
        assert body_fat_classification(pct, "female") == expected


# ======================================================================
# Energy targets
# ======================================================================


class TestCaloricTarget:
    def test_weight_loss_deficit(self):
        result = caloric_target(2500, 80, 75, 10)
        assert result.daily_calories == pytest.approx(1950.0)
        assert result.daily_energy_delta == pytest.approx(-550.0)
        assert result.weekly_weight_change_kg == pytest.approx(-0.5)

    def test_weight_gain_surplus(self):
        result = caloric_target(2500, 70, 72, 14)
        assert result.daily_calories == pytest.approx(2657.1, abs=0.1)

    @pytest.mark.parametrize("weeks", [0, -4])
    def test_non_positive_time_frame_rejected(self, weeks):
        with pytest.raises(InvalidInput):
            caloric_target(2500, 80, 75, weeks)


class TestMacroSplit:
    def test_grams_from_percentages(self):
        result = macro_split(2000, 20, 55, 25)
        assert result.protein_g == pytest.approx(100.0)
        assert result.carbs_g == pytest.approx(275.0)
        assert result.fat_g == pytest.approx(55.6)

    def test_percentages_must_sum_to_100(self):
        with pytest.raises(InvalidInput):
            macro_split(2000, 20, 50, 20)


# ======================================================================
# compute_metrics
# ======================================================================


class TestComputeMetrics:
    def test_reference_subject(self):
        result = compute_metrics(_make_sample(), "moderate")
        assert result.bmi == pytest.approx(22.86)
        assert result.bmr == pytest.approx(1695.7)
        assert result.tdee == pytest.approx(2628.3, abs=0.1)
        assert result.classification == BMIClassification.NORMAL
        assert result.body_fat_classification is None

    def test_includes_body_fat_band_when_present(self):
        result = compute_metrics(_make_sample(body_fat_pct=12.0), "light")
        assert result.body_fat_classification == BodyFatClassification.ATHLETE

    def test_unknown_activity_level_rejected(self):
        with pytest.raises(InvalidInput):
            compute_metrics(_make_sample(), "couch")

    def test_unknown_sex_rejected(self):
        with pytest.raises(InvalidInput):
            compute_metrics(_make_sample(sex="unknown"), "moderate")
