"""Tests for the athletic profile classifier."""

from types import SimpleNamespace

import pytest

from app.momentum.profile import DEFAULT_CONFIG, ProfileConfig, classify_profile
from app.schemas.profile import (
    Capability,
    DominantType,
    Objective,
    PerformanceTests,
    TrainingBackground,
)


# ======================================================================
# Helpers
# ======================================================================


def _make_sample(**overrides) -> SimpleNamespace:
    values = {
        "weight_kg": 70.0,
        "height_cm": 175.0,
        "sex": "male",
        "age_years": 25,
        "body_fat_pct": None,
        "muscle_mass_kg": None,
        "waist_cm": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


# ======================================================================
# Sub-scores
# ======================================================================


class TestSubScores:
    def test_neutral_without_tests(self):
        profile = classify_profile(_make_sample())
        assert (profile.strength_score, profile.power_score, profile.endurance_score) == (5, 5, 5)
        assert profile.dominant_type == DominantType.BALANCED
        assert profile.strengths == []
        assert profile.weaknesses == []

    @pytest.mark.parametrize(
        "tests, expected_power",
        [
            ({"vertical_jump_cm": 65}, 7),
            ({"vertical_jump_cm": 50}, 6),
            ({"vertical_jump_cm": 40}, 5),
            ({"vertical_jump_cm": 25}, 4),
            ({"sprint_time_sec": 3.9}, 7),
            ({"sprint_time_sec": 4.2}, 6),
            ({"sprint_time_sec": 6.0}, 4),
            ({"agility_time_sec": 9.0}, 6),
            ({"agility_time_sec": 13.0}, 4),
        ],
    )
    def test_power_thresholds(self, tests, expected_power):
        profile = classify_profile(_make_sample(), PerformanceTests(**tests))
        assert profile.power_score == expected_power

    @pytest.mark.parametrize("vo2, expected", [(60, 7), (50, 6), (40, 5), (30, 4)])
    def test_vo2max_thresholds(self, vo2, expected):
        profile = classify_profile(_make_sample(), PerformanceTests(vo2_max=vo2))
        assert profile.endurance_score == expected

    def test_clamped_to_ten(self):
        tests = PerformanceTests(vertical_jump_cm=70, sprint_time_sec=3.8, agility_time_sec=9.0)
        profile = classify_profile(_make_sample(), tests, config=ProfileConfig(seed_score=6.0))
        assert profile.power_score == 10

    def test_muscle_ratio_raises_strength(self):
        profile = classify_profile(_make_sample(muscle_mass_kg=33.0))
        assert profile.strength_score == 7
        assert profile.dominant_type == DominantType.POWER
        assert Capability.STRENGTH in profile.strengths

    def test_age_decrements(self):
        profile = classify_profile(_make_sample(age_years=45))
        assert profile.strength_score == 4.5
        assert profile.power_score == 4.5
        assert profile.endurance_score == 4.5

    def test_only_strength_and_power_decline_past_30(self):
        profile = classify_profile(_make_sample(age_years=35))
        assert profile.endurance_score == 5
        assert profile.power_score == 4.5

    def test_floor_after_age_decrement(self):
        config = ProfileConfig(seed_score=1.0)
        profile = classify_profile(_make_sample(age_years=50), config=config)
        assert profile.strength_score == 1.0
        assert profile.endurance_score == 1.0


# ======================================================================
# Dominant type and capabilities
# ======================================================================


class TestDominantType:
    def test_endurance(self):
        profile = classify_profile(_make_sample(), PerformanceTests(vo2_max=60))
        assert profile.dominant_type == DominantType.ENDURANCE

    def test_power(self):
        profile = classify_profile(_make_sample(), PerformanceTests(vertical_jump_cm=65))
        assert profile.dominant_type == DominantType.POWER

    def test_tie_is_balanced(self):
        tests = PerformanceTests(vertical_jump_cm=65, vo2_max=60)
        assert classify_profile(_make_sample(), tests).dominant_type == DominantType.BALANCED


class TestCapabilities:
    def test_fast_sprint_is_speed_strength(self):
        profile = classify_profile(_make_sample(), PerformanceTests(sprint_time_sec=4.2))
        assert Capability.SPEED in profile.strengths

    def test_slow_sprint_and_agility_are_weaknesses(self):
        tests = PerformanceTests(sprint_time_sec=6.0, agility_time_sec=13.0)
        profile = classify_profile(_make_sample(), tests)
        assert Capability.SPEED in profile.weaknesses
        assert Capability.AGILITY in profile.weaknesses

    def test_lean_body_composition_is_strength(self):
        profile = classify_profile(_make_sample(body_fat_pct=10.0))
        assert Capability.BODY_COMPOSITION in profile.strengths

    def test_over_fat_lowers_endurance(self):
        profile = classify_profile(_make_sample(body_fat_pct=30.0))
        assert profile.endurance_score == 4
        assert Capability.BODY_COMPOSITION in profile.weaknesses
        assert Capability.ENDURANCE in profile.weaknesses

    def test_capability_order_is_stable(self):
        tests = PerformanceTests(vertical_jump_cm=65, sprint_time_sec=3.9, agility_time_sec=9.0)
        profile = classify_profile(_make_sample(body_fat_pct=10.0), tests)
        assert profile.strengths == [
            Capability.POWER, Capability.SPEED, Capability.AGILITY, Capability.BODY_COMPOSITION,
        ]


# ======================================================================
# Potential score
# ======================================================================


class TestPotential:
    def test_baseline_age_25(self):
        assert classify_profile(_make_sample()).potential_score == pytest.approx(0.6)

    def test_young_beginner_aligned(self):
        background = TrainingBackground(experience_years=2, objective=Objective.POWER)
        profile = classify_profile(
            _make_sample(age_years=20), PerformanceTests(vertical_jump_cm=65), background,
        )
        assert profile.potential_score == pytest.approx(1.0)

    def test_capped_at_one(self):
        background = TrainingBackground(experience_years=1, objective=Objective.GENERAL_FITNESS)
        profile = classify_profile(
            _make_sample(age_years=20), background=background, config=ProfileConfig(seed_score=4.0),
        )
        assert profile.potential_score == 1.0

    def test_older_experienced_misaligned(self):
        background = TrainingBackground(experience_years=10, objective=Objective.ENDURANCE)
        profile = classify_profile(
            _make_sample(age_years=40), PerformanceTests(vertical_jump_cm=65), background,
        )
        assert profile.potential_score == pytest.approx(0.5)


class TestEnergyBasis:
    def test_copies_bmr_and_weight(self):
        profile = classify_profile(_make_sample(age_years=30))
        assert profile.bmr_kcal == pytest.approx(1695.7)
        assert profile.weight_kg == 70.0

    def test_default_config_values(self):
        assert DEFAULT_CONFIG.seed_score == 5.0
        assert DEFAULT_CONFIG.strength_threshold == 7.0
