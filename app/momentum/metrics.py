"""
Metrics calculator — anthropometric inputs to derived metrics.

Every function here is pure and total over its validated domain; an
input outside that domain raises :class:`InvalidInput` immediately
rather than falling back to a default.

Formulas
--------
BMI        weight / height_m²
BMR        Harris-Benedict, revised (Roza & Shizgal 1984)

               male:   88.362 + 13.397·w + 4.799·h − 5.677·a
               female: 447.593 + 9.247·w + 3.098·h − 4.330·a

TDEE       BMR × activity factor (sedentary 1.2 … intense 1.725)

Caloric target
    One kilogram of body mass is taken as 7700 kcal.  A weight change of
    Δ kg over ``weeks`` weeks is spread evenly over the days:

        daily = tdee − Δ·7700 / (weeks·7)

Macro split
    Percentages of total calories converted to grams with 4 kcal/g for
    protein and carbohydrate and 9 kcal/g for fat.
"""

from __future__ import annotations

from app.core.exceptions import InvalidInput
from app.schemas.sample import (
    ActivityLevel,
    BMIClassification,
    BodyFatClassification,
    DerivedMetrics,
    CaloricTarget,
    MacroGrams,
    Sex,
    WeightRange,
)

# ======================================================================
# Constants
# ======================================================================

_ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.INTENSE: 1.725,
}

# (upper bound exclusive, label), checked in order.
_BMI_BANDS: list[tuple[float, BMIClassification]] = [
    (18.5, BMIClassification.UNDERWEIGHT),
    (25.0, BMIClassification.NORMAL),
    (30.0, BMIClassification.OVERWEIGHT),
    (35.0, BMIClassification.OBESE_I),
    (40.0, BMIClassification.OBESE_II),
]

_BODY_FAT_BANDS: dict[Sex, list[tuple[float, BodyFatClassification]]] = {
    Sex.MALE: [
        (6.0, BodyFatClassification.ESSENTIAL),
        (14.0, BodyFatClassification.ATHLETE),
        (18.0, BodyFatClassification.FITNESS),
        (25.0, BodyFatClassification.AVERAGE),
    ],
    Sex.FEMALE: [
        (14.0, BodyFatClassification.ESSENTIAL),
        (21.0, BodyFatClassification.ATHLETE),
        (25.0, BodyFatClassification.FITNESS),
        (32.0, BodyFatClassification.AVERAGE),
    ],
}

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

KCAL_PER_KG = 7700.0
KCAL_PER_G = {"protein": 4.0, "carbs": 4.0, "fat": 9.0}


# ======================================================================
# Parsing helpers
# ======================================================================


def parse_sex(value) -> Sex:
    try:
        return Sex(value)
    except ValueError:
        raise InvalidInput(f"Unknown sex: {value!r}") from None


def parse_activity_level(value) -> ActivityLevel:
    """Resolve an activity level.  Unknown values are rejected, not defaulted."""
    try:
        return ActivityLevel(value)
    except ValueError:
        raise InvalidInput(
            f"Unknown activity level: {value!r} "
            f"(expected one of {', '.join(a.value for a in ActivityLevel)})"
        ) from None


# ======================================================================
# Core formulas
# ======================================================================


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index in kg/m²."""
    if height_cm <= 0:
        raise InvalidInput("Height must be positive")
    if weight_kg <= 0:
        raise InvalidInput("Weight must be positive")
    height_m = height_cm / 100.0
    return weight_kg / (height_m * height_m)


def bmr(sex, weight_kg: float, height_cm: float, age_years: float) -> float:
    """Basal metabolic rate (kcal/day), revised Harris-Benedict."""
    sex = parse_sex(sex)
    if sex is Sex.MALE:
        return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age_years
    return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age_years


def tdee(bmr_kcal: float, activity_level) -> float:
    """Total daily energy expenditure (kcal/day)."""
    return bmr_kcal * _ACTIVITY_FACTORS[parse_activity_level(activity_level)]


def bmi_classification(bmi_value: float) -> BMIClassification:
    for upper, label in _BMI_BANDS:
        if bmi_value < upper:
            return label
    return BMIClassification.OBESE_III


def ideal_weight_range(height_cm: float) -> WeightRange:
    """Weight range matching a healthy BMI (18.5-24.9) at this height."""
    if height_cm <= 0:
        raise InvalidInput("Height must be positive")
    height_m2 = (height_cm / 100.0) ** 2
    return WeightRange(
        min_kg=round(HEALTHY_BMI_MIN * height_m2, 1),
        max_kg=round(HEALTHY_BMI_MAX * height_m2, 1),
    )


def body_fat_classification(body_fat_pct: float, sex) -> BodyFatClassification:
    """Sex-specific body fat band; every band is half-open [lower, upper)."""
    for upper, label in _BODY_FAT_BANDS[parse_sex(sex)]:
        if body_fat_pct < upper:
            return label
    return BodyFatClassification.OVER_FAT


# ======================================================================
# Energy targets
# ======================================================================


def caloric_target(
    tdee_kcal: float,
    current_weight_kg: float,
    target_weight_kg: float,
    weeks: float,
) -> CaloricTarget:
    """Daily intake that moves ``current`` to ``target`` over ``weeks``."""
    if weeks <= 0:
        raise InvalidInput("Time frame must be a positive number of weeks")
    delta_kg = target_weight_kg - current_weight_kg
    daily_delta = delta_kg * KCAL_PER_KG / (weeks * 7.0)
    return CaloricTarget(
        daily_calories=round(tdee_kcal + daily_delta, 1),
        daily_energy_delta=round(daily_delta, 1),
        weekly_weight_change_kg=round(delta_kg / weeks, 2),
    )


def macro_split(
    calories: float,
    protein_pct: float,
    carbs_pct: float,
    fat_pct: float,
) -> MacroGrams:
    """Convert a percentage split of ``calories`` into grams."""
    if calories < 0:
        raise InvalidInput("Calories must not be negative")
    if min(protein_pct, carbs_pct, fat_pct) < 0:
        raise InvalidInput("Macro percentages must not be negative")
    if abs(protein_pct + carbs_pct + fat_pct - 100.0) > 1e-6:
        raise InvalidInput("Macro percentages must sum to 100")
    return MacroGrams(
        calories=round(calories, 1),
        protein_g=round(calories * protein_pct / 100.0 / KCAL_PER_G["protein"], 1),
        carbs_g=round(calories * carbs_pct / 100.0 / KCAL_PER_G["carbs"], 1),
        fat_g=round(calories * fat_pct / 100.0 / KCAL_PER_G["fat"], 1),
        protein_pct=protein_pct,
        carbs_pct=carbs_pct,
        fat_pct=fat_pct,
    )


# ======================================================================
# Public API
# ======================================================================


def compute_metrics(sample, activity_level) -> DerivedMetrics:
    """Derive BMI, BMR, TDEE and classifications from one sample.

    ``sample`` is anything exposing the sample fields (the ORM row or a
    request schema).
    """
    level = parse_activity_level(activity_level)
    bmi_value = bmi(sample.weight_kg, sample.height_cm)
    bmr_value = bmr(sample.sex, sample.weight_kg, sample.height_cm, sample.age_years)

    body_fat = None
    if sample.body_fat_pct is not None:
        body_fat = body_fat_classification(sample.body_fat_pct, sample.sex)

    return DerivedMetrics(
        bmi=round(bmi_value, 2),
        bmr=round(bmr_value, 1),
        tdee=round(tdee(bmr_value, level), 1),
        classification=bmi_classification(bmi_value),
        activity_level=level,
        ideal_weight_range=ideal_weight_range(sample.height_cm),
        body_fat_classification=body_fat,
    )
