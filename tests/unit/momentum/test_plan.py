"""Tests for the training and nutrition plan generator."""

import datetime

import pytest

from app.core.exceptions import IncompletePlanInput, InvalidInput
from app.momentum.plan import athlete_multiplier, generate_plan, phase_distribution, select_periodization
from app.schemas.plan import Periodization, PhaseName, PlanGoal
from app.schemas.profile import AthleticProfile, Objective


# ======================================================================
# Helpers
# ======================================================================


def _make_profile(**overrides) -> AthleticProfile:
    values = {
        "dominant_type": "balanced",
        "potential_score": 0.6,
        "strength_score": 5,
        "power_score": 5,
        "endurance_score": 5,
        "bmr_kcal": 1695.7,
        "weight_kg": 70.0,
    }
    values.update(overrides)
    return AthleticProfile(**values)


def _make_goal(**overrides) -> PlanGoal:
    values = {"objective": Objective.STRENGTH, "daily_training_hours": 1.5}
    values.update(overrides)
    return PlanGoal(**values)


# ======================================================================
# Periodization
# ======================================================================


class TestPeriodization:
    def test_competition_date_means_reverse(self):
        goal = _make_goal(competition_date=datetime.date(2026, 12, 1))
        assert select_periodization(goal) == Periodization.REVERSE

    def test_functional_hypertrophy_is_undulating(self):
        goal = _make_goal(objective=Objective.FUNCTIONAL_HYPERTROPHY)
        assert select_periodization(goal) == Periodization.UNDULATING

    def test_competition_date_takes_precedence(self):
        goal = _make_goal(objective=Objective.FUNCTIONAL_HYPERTROPHY, competition_date=datetime.date(2026, 12, 1))
        assert select_periodization(goal) == Periodization.REVERSE

    @pytest.mark.parametrize("objective", [Objective.STRENGTH, Objective.ENDURANCE, Objective.GENERAL_FITNESS])
    def test_default_is_linear(self, objective):
        assert select_periodization(_make_goal(objective=objective)) == Periodization.LINEAR


# ======================================================================
# Phases
# ======================================================================


class TestPhases:
    def test_fixed_phase_sequence(self):
        plan = generate_plan(_make_goal(), _make_profile()).training_plan
        assert [p.name for p in plan.phases] == list(PhaseName)
        assert [p.order for p in plan.phases] == [1, 2, 3, 4]

    @pytest.mark.parametrize("objective", list(Objective))
    @pytest.mark.parametrize("phase", list(PhaseName))
    def test_every_distribution_sums_to_100(self, objective, phase):
        distribution = phase_distribution(objective, phase)
        assert distribution.total() == 100
        assert all(v >= 0 for v in distribution.model_dump().values())

    def test_general_preparation_shift(self):
        d = phase_distribution(Objective.STRENGTH, PhaseName.GENERAL_PREPARATION)
        assert (d.strength, d.power, d.endurance, d.speed, d.technique, d.recovery) == (45, 10, 15, 0, 15, 15)

    def test_specific_preparation_is_base(self):
        d = phase_distribution(Objective.GENERAL_FITNESS, PhaseName.SPECIFIC_PREPARATION)
        assert (d.strength, d.power, d.endurance, d.speed, d.technique, d.recovery) == (20, 15, 25, 10, 15, 15)

    def test_duration_ranges_are_ordered(self):
        plan = generate_plan(_make_goal(), _make_profile()).training_plan
        for phase in plan.phases:
            assert 1 <= phase.duration_weeks_min <= phase.duration_weeks_max


# ======================================================================
# Nutrition
# ======================================================================


class TestNutrition:
    @pytest.mark.parametrize(
        "hours, expected",
        [(0.5, 1.8), (1.0, 1.9), (1.99, 1.9), (2.0, 2.0), (3.5, 2.1), (4.0, 2.2), (6.0, 2.2)],
    )
    def test_athlete_multiplier(self, hours, expected):
        assert athlete_multiplier(hours) == expected

    def test_calories_and_macros(self):
        nutrition = generate_plan(_make_goal(), _make_profile()).nutrition_plan
        assert nutrition.activity_multiplier == 1.9
        assert nutrition.daily_calories == 3222
        assert nutrition.protein_g == pytest.approx(161.1)
        assert nutrition.carbs_g == pytest.approx(443.0, abs=0.1)
        assert nutrition.fat_g == pytest.approx(89.5)
        assert (nutrition.protein_pct, nutrition.carbs_pct, nutrition.fat_pct) == (20, 55, 25)
        assert nutrition.protein_per_kg == pytest.approx(2.3)

    def test_three_timing_windows(self):
        nutrition = generate_plan(_make_goal(), _make_profile()).nutrition_plan
        assert [w.window for w in nutrition.meal_timing] == ["pre", "during", "post"]
        assert nutrition.meal_timing[1].long_session_guidance is not None

    def test_short_sessions_get_no_intra_workout_fuel(self):
        nutrition = generate_plan(_make_goal(daily_training_hours=1.0), _make_profile()).nutrition_plan
        assert nutrition.meal_timing[1].long_session_guidance is None


# ======================================================================
# Determinism and validation
# ======================================================================


class TestGeneratePlan:
    def test_same_input_same_output(self):
        goal = _make_goal(competition_date=datetime.date(2026, 12, 1), sessions_per_week=4)
        first = generate_plan(goal, _make_profile())
        second = generate_plan(goal, _make_profile())
        assert first.model_dump_json() == second.model_dump_json()

    def test_missing_objective(self):
        with pytest.raises(IncompletePlanInput) as exc_info:
            generate_plan(_make_goal(objective=None), _make_profile())
        assert exc_info.value.missing == ["objective"]

    def test_missing_everything_is_reported_at_once(self):
        goal = PlanGoal()
        profile = _make_profile(bmr_kcal=None, weight_kg=None)
        with pytest.raises(IncompletePlanInput) as exc_info:
            generate_plan(goal, profile)
        assert exc_info.value.missing == ["objective", "daily_training_hours", "bmr_kcal", "weight_kg"]
        assert exc_info.value.kind == "incomplete_plan_input"

    @pytest.mark.parametrize("field", ["bmr_kcal", "weight_kg"])
    @pytest.mark.parametrize("value", [0.0, -70.0, float("nan"), float("inf")])
    def test_energy_basis_must_be_positive(self, field, value):
        with pytest.raises(InvalidInput) as exc_info:
            generate_plan(_make_goal(), _make_profile(**{field: value}))
        assert field in exc_info.value.message
