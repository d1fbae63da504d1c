"""
Plan generator — goal + athletic profile to training and nutrition plans.

The generator is a single deterministic pass: the same (goal, profile)
pair always yields an identical bundle.  It never reads the clock; the
caller stamps persisted plans.

Periodization
-------------
    competition date set          → reverse (peak for the event)
    functional hypertrophy        → undulating
    otherwise                     → linear

Every plan walks the same four phases:

    general_preparation → specific_preparation → pre_competitive → competitive

Each phase distributes the weekly training time over six qualities
(strength, power, endurance, speed, technique, recovery).  The base
distribution is a closed table over the objectives; each phase then
applies a zero-sum shift, so every phase totals exactly 100.

Nutrition
---------
Training-day expenditure is BMR times an athlete multiplier chosen by
daily training hours:

    < 1 h → 1.8   < 2 h → 1.9   < 3 h → 2.0   < 4 h → 2.1   else 2.2

Macros are 20 % protein, 55 % carbohydrate, 25 % fat.  Meal timing is
given as three windows around the session (pre, during, post).
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from app.core.exceptions import IncompletePlanInput, InvalidInput
from app.momentum import metrics
from app.schemas.plan import (
    TRAINING_QUALITIES,
    GeneratedPlanBundle,
    MealTimingWindow,
    NutritionPlan,
    Periodization,
    PhaseName,
    PlanGoal,
    TrainingPhase,
    TrainingPlan,
    WeeklyDistribution,
)
from app.schemas.profile import AthleticProfile, Objective

# ======================================================================
# Configuration
# ======================================================================

# Percent of weekly time: strength, power, endurance, speed, technique, recovery.
_BASE_DISTRIBUTION: dict[Objective, tuple[int, int, int, int, int, int]] = {
    Objective.STRENGTH: (40, 15, 10, 5, 15, 15),
    Objective.POWER: (25, 30, 10, 15, 10, 10),
    Objective.ENDURANCE: (15, 5, 45, 10, 10, 15),
    Objective.SPEED: (15, 25, 10, 30, 10, 10),
    Objective.HYPERTROPHY: (45, 10, 15, 5, 10, 15),
    Objective.FUNCTIONAL_HYPERTROPHY: (35, 20, 15, 5, 10, 15),
    Objective.WEIGHT_LOSS: (20, 10, 40, 5, 10, 15),
    Objective.GENERAL_FITNESS: (20, 15, 25, 10, 15, 15),
}

# Zero-sum adjustments applied per phase.
_PHASE_SHIFTS: dict[PhaseName, dict[str, int]] = {
    PhaseName.GENERAL_PREPARATION: {"endurance": 5, "strength": 5, "speed": -5, "power": -5},
    PhaseName.SPECIFIC_PREPARATION: {},
    PhaseName.PRE_COMPETITIVE: {"speed": 5, "power": 5, "endurance": -5, "strength": -5},
    PhaseName.COMPETITIVE: {"technique": 5, "recovery": 5, "strength": -5, "endurance": -5},
}

# Per style and phase: (min weeks, max weeks, volume, intensity).
_PHASE_TEMPLATES: dict[Periodization, list[tuple[int, int, str, str]]] = {
    Periodization.LINEAR: [
        (4, 6, "high", "low"),
        (3, 4, "moderate", "moderate"),
        (2, 3, "low", "high"),
        (1, 2, "low", "very_high"),
    ],
    Periodization.UNDULATING: [
        (3, 4, "alternating high/moderate", "alternating low/moderate"),
        (3, 4, "alternating moderate/high", "alternating moderate/high"),
        (2, 3, "alternating low/moderate", "alternating high/very_high"),
        (1, 2, "low", "high"),
    ],
    Periodization.REVERSE: [
        (3, 4, "low", "high"),
        (3, 4, "moderate", "high"),
        (2, 3, "high", "moderate"),
        (1, 2, "low", "peak"),
    ],
}

# (upper bound of daily hours, multiplier), checked in order.
_ATHLETE_MULTIPLIERS: list[tuple[float, float]] = [
    (1.0, 1.8),
    (2.0, 1.9),
    (3.0, 2.0),
    (4.0, 2.1),
]
_MAX_ATHLETE_MULTIPLIER = 2.2


class PlanConfig(BaseModel):
    """Macro split and timing parameters of the nutrition plan."""

    protein_pct: int = Field(default=20)
    carbs_pct: int = Field(default=55)
    fat_pct: int = Field(default=25)
    long_session_hours: float = Field(default=1.5, description="Sessions at least this long get intra-workout fuel")


DEFAULT_CONFIG = PlanConfig()


# ======================================================================
# Training plan
# ======================================================================


def select_periodization(goal: PlanGoal) -> Periodization:
    if goal.competition_date is not None:
        return Periodization.REVERSE
    if goal.objective == Objective.FUNCTIONAL_HYPERTROPHY:
        return Periodization.UNDULATING
    return Periodization.LINEAR


def phase_distribution(objective: Objective, phase: PhaseName) -> WeeklyDistribution:
    values = dict(zip(TRAINING_QUALITIES, _BASE_DISTRIBUTION[objective]))
    for quality, delta in _PHASE_SHIFTS[phase].items():
        values[quality] += delta
    return WeeklyDistribution(**values)


def _build_training_plan(goal: PlanGoal) -> TrainingPlan:
    style = select_periodization(goal)
    phases = []
    for order, (name, template) in enumerate(zip(PhaseName, _PHASE_TEMPLATES[style]), start=1):
        weeks_min, weeks_max, volume, intensity = template
        phases.append(
            TrainingPhase(
                order=order,
                name=name,
                duration_weeks_min=weeks_min,
                duration_weeks_max=weeks_max,
                volume=volume,
                intensity=intensity,
                weekly_distribution=phase_distribution(goal.objective, name),
            )
        )
    return TrainingPlan(
        objective=goal.objective,
        periodization=style,
        competition_date=goal.competition_date,
        sessions_per_week=goal.sessions_per_week,
        phases=phases,
    )


# ======================================================================
# Nutrition plan
# ======================================================================


def athlete_multiplier(daily_training_hours: float) -> float:
    for upper, multiplier in _ATHLETE_MULTIPLIERS:
        if daily_training_hours < upper:
            return multiplier
    return _MAX_ATHLETE_MULTIPLIER


def _meal_timing(daily_training_hours: float, config: PlanConfig) -> list[MealTimingWindow]:
    long_session = None
    if daily_training_hours >= config.long_session_hours:
        long_session = (
            "Sessions this long need 30-60 g of carbohydrate per hour "
            "from sports drinks, gels or fruit, plus electrolytes."
        )
    return [
        MealTimingWindow(
            window="pre",
            timing="1-3 h before training",
            guidance="Carbohydrate-based meal with moderate protein, low in fat and fibre.",
        ),
        MealTimingWindow(
            window="during",
            timing="during training",
            guidance="Water in small regular sips; sessions under an hour need nothing else.",
            long_session_guidance=long_session,
        ),
        MealTimingWindow(
            window="post",
            timing="within 2 h after training",
            guidance="Protein (20-40 g) with carbohydrate to restore glycogen.",
        ),
    ]


def _build_nutrition_plan(
    goal: PlanGoal, profile: AthleticProfile, config: PlanConfig,
) -> NutritionPlan:
    multiplier = athlete_multiplier(goal.daily_training_hours)
    calories = round(profile.bmr_kcal * multiplier)
    macros = metrics.macro_split(calories, config.protein_pct, config.carbs_pct, config.fat_pct)
    return NutritionPlan(
        bmr=profile.bmr_kcal,
        activity_multiplier=multiplier,
        daily_calories=calories,
        protein_g=macros.protein_g,
        carbs_g=macros.carbs_g,
        fat_g=macros.fat_g,
        protein_pct=config.protein_pct,
        carbs_pct=config.carbs_pct,
        fat_pct=config.fat_pct,
        protein_per_kg=round(macros.protein_g / profile.weight_kg, 2),
        meal_timing=_meal_timing(goal.daily_training_hours, config),
    )


# ======================================================================
# Public API
# ======================================================================


def _missing_inputs(goal: PlanGoal, profile: AthleticProfile) -> list[str]:
    missing = []
    if goal.objective is None:
        missing.append("objective")
    if goal.daily_training_hours is None:
        missing.append("daily_training_hours")
    if profile.bmr_kcal is None:
        missing.append("bmr_kcal")
    if profile.weight_kg is None:
        missing.append("weight_kg")
    return missing


def generate_plan(
    goal: PlanGoal,
    profile: AthleticProfile,
    config: PlanConfig = DEFAULT_CONFIG,
) -> GeneratedPlanBundle:
    """Expand a goal and profile into a training and a nutrition plan."""
    missing = _missing_inputs(goal, profile)
    if missing:
        raise IncompletePlanInput(missing)
    for name in ("bmr_kcal", "weight_kg"):
        value = getattr(profile, name)
        if not math.isfinite(value) or value <= 0:
            raise InvalidInput(f"{name} must be a positive number")

    return GeneratedPlanBundle(
        training_plan=_build_training_plan(goal),
        nutrition_plan=_build_nutrition_plan(goal, profile, config),
    )
