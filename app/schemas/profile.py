"""
Athletic profile schemas.

Sub-scores (strength, power, endurance) live on a 1-10 scale seeded at
5.  The profile is recomputed on demand and is only ever persisted as
an input snapshot of a generated plan.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.sample import PhysiologicalSampleBase


class DominantType(str, Enum):
    POWER = "power"
    ENDURANCE = "endurance"
    BALANCED = "balanced"


class Capability(str, Enum):
    STRENGTH = "strength"
    POWER = "power"
    ENDURANCE = "endurance"
    SPEED = "speed"
    AGILITY = "agility"
    BODY_COMPOSITION = "body_composition"


class Objective(str, Enum):
    """Primary training objective.  ``general_fitness`` is the balanced default."""
    STRENGTH = "strength"
    POWER = "power"
    ENDURANCE = "endurance"
    SPEED = "speed"
    HYPERTROPHY = "hypertrophy"
    FUNCTIONAL_HYPERTROPHY = "functional_hypertrophy"
    WEIGHT_LOSS = "weight_loss"
    GENERAL_FITNESS = "general_fitness"


class PerformanceTests(BaseModel):
    """Optional field-test results."""

    sprint_time_sec: Optional[float] = Field(None, gt=0, le=20.0, description="30 m sprint time (s)")
    vertical_jump_cm: Optional[float] = Field(None, ge=0, le=150.0, description="Countermovement jump (cm)")
    agility_time_sec: Optional[float] = Field(None, gt=0, le=30.0, description="T-test time (s)")
    vo2_max: Optional[float] = Field(None, gt=0, le=100.0, description="VO2max (ml/kg/min)")


class TrainingBackground(BaseModel):
    """Questionnaire answers that influence the potential score."""

    experience_years: Optional[float] = Field(None, ge=0, le=80)
    objective: Optional[Objective] = None


class AthleticProfile(BaseModel):
    """Derived athletic/body profile."""

    dominant_type: DominantType
    strengths: list[Capability] = Field(default_factory=list)
    weaknesses: list[Capability] = Field(default_factory=list)
    potential_score: float = Field(..., ge=0.0, le=1.0)

    strength_score: float = Field(..., ge=1.0, le=10.0)
    power_score: float = Field(..., ge=1.0, le=10.0)
    endurance_score: float = Field(..., ge=1.0, le=10.0)

    # Energy basis of the sample the profile was derived from
    bmr_kcal: Optional[float] = None
    weight_kg: Optional[float] = None


class ProfileRequest(BaseModel):
    """Stateless classification request."""

    sample: PhysiologicalSampleBase
    tests: Optional[PerformanceTests] = None
    background: Optional[TrainingBackground] = None


class SubjectProfileRequest(BaseModel):
    """Classification of a stored subject (uses the latest sample)."""

    tests: Optional[PerformanceTests] = None
    background: Optional[TrainingBackground] = None
