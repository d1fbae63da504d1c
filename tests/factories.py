"""Builders for request schemas used across service and API tests."""

import datetime

from app.schemas.activity import ActivityEventCreate
from app.schemas.sample import PhysiologicalSampleCreate


def make_sample_create(**overrides) -> PhysiologicalSampleCreate:
    values = {
        "weight_kg": 70.0,
        "height_cm": 175.0,
        "sex": "male",
        "age_years": 30,
    }
    values.update(overrides)
    return PhysiologicalSampleCreate(**values)


def make_event(
    type: str = "workout",
    occurred_at: datetime.datetime = datetime.datetime(2026, 3, 2, 18, 0),
    duration_min: float = 45.0,
    calories_burned=320.0,
    **metadata,
) -> ActivityEventCreate:
    return ActivityEventCreate(
        type=type,
        duration_min=duration_min,
        calories_burned=calories_burned,
        occurred_at=occurred_at,
        metadata=metadata,
    )
