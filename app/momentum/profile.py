"""
Profile classifier — sample + field tests to an athletic profile.

Scoring
-------
Three sub-scores (strength, power, endurance) start at a neutral 5 and
are nudged by fixed test thresholds:

    vertical jump (cm)   > 60 → +2 power    > 45 → +1    < 30 → −1
    30 m sprint (s)      < 4.0 → +2 power   < 4.5 → +1   > 5.5 → −1
    T-test agility (s)   < 9.5 → +1 power   > 12.0 → −1
    VO2max (ml/kg/min)   > 55 → +2 endurance  > 45 → +1  < 35 → −1
    muscle / weight      > 0.45 → +2 strength  > 0.40 → +1
    body fat band        over_fat → −1 endurance

Scores are clamped to [1, 10], then aged: past 30 strength and power
lose 0.5 each, past 40 endurance loses 0.5.  The floor of 1 is applied
again afterwards.

The dominant type is the sub-score strictly above both others
(strength counts as ``power``); any tie at the top is ``balanced``.

Potential
---------
A 0-1 heuristic of expected adaptation:

    0.5
    + 0.2 if age < 25, else + 0.1 if age < 30
    + 0.1 if fewer than 5 years of training
    + 0.2 if the objective favours the dominant type
    + 0.1 if the mean sub-score is below 5 (room to grow)

capped to [0, 1].
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.momentum import metrics
from app.schemas.profile import (
    AthleticProfile,
    Capability,
    DominantType,
    Objective,
    PerformanceTests,
    TrainingBackground,
)
from app.schemas.sample import BodyFatClassification

# ======================================================================
# Configuration
# ======================================================================

# (test field, sub-score, [(comparison, threshold, delta), ...]); first match wins.
_TEST_RULES: list[tuple[str, str, list[tuple[str, float, float]]]] = [
    ("vertical_jump_cm", "power", [(">", 60.0, 2.0), (">", 45.0, 1.0), ("<", 30.0, -1.0)]),
    ("sprint_time_sec", "power", [("<", 4.0, 2.0), ("<", 4.5, 1.0), (">", 5.5, -1.0)]),
    ("agility_time_sec", "power", [("<", 9.5, 1.0), (">", 12.0, -1.0)]),
    ("vo2_max", "endurance", [(">", 55.0, 2.0), (">", 45.0, 1.0), ("<", 35.0, -1.0)]),
]

_MUSCLE_RATIO_RULES: list[tuple[float, float]] = [(0.45, 2.0), (0.40, 1.0)]

# Type each objective trains towards; general fitness favours none.
_OBJECTIVE_TYPE: dict[Objective, DominantType] = {
    Objective.STRENGTH: DominantType.POWER,
    Objective.POWER: DominantType.POWER,
    Objective.SPEED: DominantType.POWER,
    Objective.HYPERTROPHY: DominantType.POWER,
    Objective.FUNCTIONAL_HYPERTROPHY: DominantType.POWER,
    Objective.ENDURANCE: DominantType.ENDURANCE,
    Objective.WEIGHT_LOSS: DominantType.ENDURANCE,
    Objective.GENERAL_FITNESS: DominantType.BALANCED,
}

_SCORE_CAPABILITY = {
    "strength": Capability.STRENGTH,
    "power": Capability.POWER,
    "endurance": Capability.ENDURANCE,
}


class ProfileConfig(BaseModel):
    """Tunable parameters of the classifier."""

    seed_score: float = Field(default=5.0)
    min_score: float = Field(default=1.0)
    max_score: float = Field(default=10.0)

    strength_threshold: float = Field(default=7.0, description="Sub-score at or above → strength")
    weakness_threshold: float = Field(default=4.0, description="Sub-score at or below → weakness")

    # Age decrements
    power_decline_age: int = Field(default=30)
    endurance_decline_age: int = Field(default=40)
    age_decrement: float = Field(default=0.5)

    # Test-derived capabilities
    fast_sprint_sec: float = Field(default=4.5)
    slow_sprint_sec: float = Field(default=5.5)
    agile_time_sec: float = Field(default=10.0)
    slow_agility_sec: float = Field(default=12.0)


DEFAULT_CONFIG = ProfileConfig()


# ======================================================================
# Scoring
# ======================================================================


def _matches(value: float, op: str, threshold: float) -> bool:
    return value > threshold if op == ">" else value < threshold


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _score(
    sample,
    tests: PerformanceTests,
    body_fat: Optional[BodyFatClassification],
    config: ProfileConfig,
) -> dict[str, float]:
    scores = {"strength": config.seed_score, "power": config.seed_score, "endurance": config.seed_score}

    for field, target, rules in _TEST_RULES:
        value = getattr(tests, field)
        if value is None:
            continue
        for op, threshold, delta in rules:
            if _matches(value, op, threshold):
                scores[target] += delta
                break

    if sample.muscle_mass_kg is not None and sample.weight_kg > 0:
        ratio = sample.muscle_mass_kg / sample.weight_kg
        for threshold, delta in _MUSCLE_RATIO_RULES:
            if ratio > threshold:
                scores["strength"] += delta
                break

    if body_fat is BodyFatClassification.OVER_FAT:
        scores["endurance"] -= 1.0

    scores = {k: _clamp(v, config.min_score, config.max_score) for k, v in scores.items()}

    if sample.age_years > config.power_decline_age:
        scores["strength"] -= config.age_decrement
        scores["power"] -= config.age_decrement
    if sample.age_years > config.endurance_decline_age:
        scores["endurance"] -= config.age_decrement

    return {k: max(config.min_score, v) for k, v in scores.items()}


def _dominant_type(scores: dict[str, float]) -> DominantType:
    for name, value in scores.items():
        others = [v for k, v in scores.items() if k != name]
        if all(value > other for other in others):
            return DominantType.ENDURANCE if name == "endurance" else DominantType.POWER
    return DominantType.BALANCED


def _capabilities(
    scores: dict[str, float],
    tests: PerformanceTests,
    body_fat: Optional[BodyFatClassification],
    config: ProfileConfig,
) -> tuple[list[Capability], list[Capability]]:
    strengths: set[Capability] = set()
    weaknesses: set[Capability] = set()

    for name, value in scores.items():
        if value >= config.strength_threshold:
            strengths.add(_SCORE_CAPABILITY[name])
        elif value <= config.weakness_threshold:
            weaknesses.add(_SCORE_CAPABILITY[name])

    if tests.sprint_time_sec is not None:
        if tests.sprint_time_sec < config.fast_sprint_sec:
            strengths.add(Capability.SPEED)
        elif tests.sprint_time_sec > config.slow_sprint_sec:
            weaknesses.add(Capability.SPEED)

    if tests.agility_time_sec is not None:
        if tests.agility_time_sec < config.agile_time_sec:
            strengths.add(Capability.AGILITY)
        elif tests.agility_time_sec > config.slow_agility_sec:
            weaknesses.add(Capability.AGILITY)

    if body_fat in (BodyFatClassification.ATHLETE, BodyFatClassification.FITNESS):
        strengths.add(Capability.BODY_COMPOSITION)
    elif body_fat is BodyFatClassification.OVER_FAT:
        weaknesses.add(Capability.BODY_COMPOSITION)

    # Stable enum order for a deterministic output
    order = list(Capability)
    return sorted(strengths, key=order.index), sorted(weaknesses, key=order.index)


def _potential(
    age_years: int,
    background: TrainingBackground,
    dominant: DominantType,
    scores: dict[str, float],
) -> float:
    potential = 0.5
    if age_years < 25:
        potential += 0.2
    elif age_years < 30:
        potential += 0.1

    if background.experience_years is not None and background.experience_years < 5:
        potential += 0.1

    if background.objective is not None and _OBJECTIVE_TYPE[background.objective] == dominant:
        potential += 0.2

    if sum(scores.values()) / len(scores) < 5.0:
        potential += 0.1

    return round(_clamp(potential, 0.0, 1.0), 2)


# ======================================================================
# Public API
# ======================================================================


def classify_profile(
    sample,
    tests: Optional[PerformanceTests] = None,
    background: Optional[TrainingBackground] = None,
    config: ProfileConfig = DEFAULT_CONFIG,
) -> AthleticProfile:
    """Classify a subject from their latest sample and optional tests."""
    tests = tests or PerformanceTests()
    background = background or TrainingBackground()

    body_fat = None
    if sample.body_fat_pct is not None:
        body_fat = metrics.body_fat_classification(sample.body_fat_pct, sample.sex)

    scores = _score(sample, tests, body_fat, config)
    dominant = _dominant_type(scores)
    strengths, weaknesses = _capabilities(scores, tests, body_fat, config)

    return AthleticProfile(
        dominant_type=dominant,
        strengths=strengths,
        weaknesses=weaknesses,
        potential_score=_potential(sample.age_years, background, dominant, scores),
        strength_score=scores["strength"],
        power_score=scores["power"],
        endurance_score=scores["endurance"],
        bmr_kcal=round(metrics.bmr(sample.sex, sample.weight_kg, sample.height_cm, sample.age_years), 1),
        weight_kg=sample.weight_kg,
    )
