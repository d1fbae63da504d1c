"""
Physiological sample and derived-metrics schemas.

Field bounds are the validation domain of a sample: weight 20-500 kg,
height 100-250 cm, body fat 2-50 %, muscle mass 10-200 kg.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Everyday activity level used to scale BMR into TDEE."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"


class BMIClassification(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE_I = "obese_i"
    OBESE_II = "obese_ii"
    OBESE_III = "obese_iii"


class BodyFatClassification(str, Enum):
    ESSENTIAL = "essential"
    ATHLETE = "athlete"
    FITNESS = "fitness"
    AVERAGE = "average"
    OVER_FAT = "over_fat"


# ---------------------------------------------------------------------------
# Entity schemas (Base / Create / Response)
# ---------------------------------------------------------------------------

class PhysiologicalSampleBase(BaseModel):
    """Anthropometric measurement fields shared by requests and responses."""

    weight_kg: float = Field(..., ge=20.0, le=500.0, description="Body weight (kg)")
    height_cm: float = Field(..., ge=100.0, le=250.0, description="Standing height (cm)")
    sex: Sex
    age_years: int = Field(..., ge=10, le=120, description="Age in whole years")
    body_fat_pct: Optional[float] = Field(None, ge=2.0, le=50.0, description="Body fat percentage")
    muscle_mass_kg: Optional[float] = Field(None, ge=10.0, le=200.0, description="Skeletal muscle mass (kg)")
    waist_cm: Optional[float] = Field(None, ge=30.0, le=250.0, description="Waist circumference (cm)")


class PhysiologicalSampleCreate(PhysiologicalSampleBase):
    """Schema for appending a sample.  ``measured_at`` defaults to now."""

    measured_at: Optional[datetime.datetime] = Field(
        None, description="Measurement timestamp (defaults to the time of recording)",
    )


class PhysiologicalSampleResponse(PhysiologicalSampleBase):
    """A stored sample."""

    id: int
    subject_id: str
    measured_at: datetime.datetime
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Derived metrics
# ---------------------------------------------------------------------------

class WeightRange(BaseModel):
    min_kg: float
    max_kg: float


class DerivedMetrics(BaseModel):
    """Metrics computed from a sample plus an activity level.  Never stored."""

    bmi: float = Field(..., description="Body mass index (kg/m²)")
    bmr: float = Field(..., description="Basal metabolic rate (kcal/day, Harris-Benedict revised)")
    tdee: float = Field(..., description="Total daily energy expenditure (kcal/day)")
    classification: BMIClassification
    activity_level: ActivityLevel
    ideal_weight_range: WeightRange
    body_fat_classification: Optional[BodyFatClassification] = None


class MetricsRequest(BaseModel):
    """Stateless metrics computation request."""

    sample: PhysiologicalSampleBase
    activity_level: str = Field(..., description="One of: sedentary, light, moderate, intense")


class CaloricTargetRequest(BaseModel):
    tdee: float = Field(..., gt=0)
    current_weight_kg: float = Field(..., ge=20.0, le=500.0)
    target_weight_kg: float = Field(..., ge=20.0, le=500.0)
    weeks: float = Field(..., description="Time frame to reach the target (weeks)")


class CaloricTarget(BaseModel):
    """Daily calorie target implied by a weight goal and a time frame."""

    daily_calories: float
    daily_energy_delta: float = Field(..., description="Negative for a deficit, positive for a surplus")
    weekly_weight_change_kg: float


class MacroGrams(BaseModel):
    """Macro-nutrient split in calories and grams."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    protein_pct: float
    carbs_pct: float
    fat_pct: float
