"""
Training and nutrition plan schemas.

Plans are immutable generated artifacts.  The training plan is made of
four fixed sequential phases; every phase distributes the weekly time
across six training qualities summing to exactly 100.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.profile import AthleticProfile, Objective, PerformanceTests, TrainingBackground

TRAINING_QUALITIES = ["strength", "power", "endurance", "speed", "technique", "recovery", ]


class Periodization(str, Enum):
    LINEAR = "linear"
    UNDULATING = "undulating"
    REVERSE = "reverse"


class PhaseName(str, Enum):
    GENERAL_PREPARATION = "general_preparation"
    SPECIFIC_PREPARATION = "specific_preparation"
    PRE_COMPETITIVE = "pre_competitive"
    COMPETITIVE = "competitive"


class PlanGoal(BaseModel):
    """Goal answers from the questionnaire.

    Fields are optional at the schema level so that the generator itself
    can report *which* inputs are missing.
    """

    objective: Optional[Objective] = None
    daily_training_hours: Optional[float] = Field(None, gt=0, le=12.0)
    competition_date: Optional[datetime.date] = None
    sessions_per_week: Optional[int] = Field(None, ge=1, le=14)


class WeeklyDistribution(BaseModel):
    """Percent of weekly training time per quality."""

    strength: int
    power: int
    endurance: int
    speed: int
    technique: int
    recovery: int

    def total(self) -> int:
        return sum(getattr(self, q) for q in TRAINING_QUALITIES)


class TrainingPhase(BaseModel):
    order: int
    name: PhaseName
    duration_weeks_min: int
    duration_weeks_max: int
    volume: str
    intensity: str
    weekly_distribution: WeeklyDistribution


class TrainingPlan(BaseModel):
    objective: Objective
    periodization: Periodization
    competition_date: Optional[datetime.date] = None
    sessions_per_week: Optional[int] = None
    phases: list[TrainingPhase]


class MealTimingWindow(BaseModel):
    window: str
    timing: str
    guidance: str
    long_session_guidance: Optional[str] = None


class NutritionPlan(BaseModel):
    bmr: float
    activity_multiplier: float
    daily_calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    protein_pct: int
    carbs_pct: int
    fat_pct: int
    protein_per_kg: Optional[float] = None
    meal_timing: list[MealTimingWindow]


class GeneratedPlanBundle(BaseModel):
    """Output of the plan generator."""

    training_plan: TrainingPlan
    nutrition_plan: NutritionPlan


class PlanRequest(BaseModel):
    """Stateless generation request."""

    goal: PlanGoal
    profile: AthleticProfile


class GeneratedPlanResponse(GeneratedPlanBundle):
    """A stored plan, versioned by its creation timestamp."""

    id: int
    subject_id: str
    goal: PlanGoal
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class SubjectPlanRequest(BaseModel):
    """Plan generation for a stored subject: the profile is classified
    from the latest sample plus the optional tests and background."""

    goal: PlanGoal
    tests: Optional[PerformanceTests] = None
    background: Optional[TrainingBackground] = None
