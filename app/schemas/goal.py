"""
Goal schemas.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GoalType(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    WEIGHT_GAIN = "weight_gain"
    MUSCLE_GAIN = "muscle_gain"
    WORKOUTS = "workouts"
    MINUTES = "minutes"
    CUSTOM = "custom"


# Goal types where progress means the value going down.
DECREASING_GOAL_TYPES = {GoalType.WEIGHT_LOSS}


class GoalBase(BaseModel):
    type: GoalType
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    target_value: float
    current_value: float
    unit: str = Field(..., min_length=1, max_length=20)
    target_date: datetime.date


class GoalCreate(GoalBase):
    pass


class GoalUpdate(BaseModel):
    """Partial update; only provided fields change."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    target_value: Optional[float] = None
    unit: Optional[str] = Field(None, min_length=1, max_length=20)
    target_date: Optional[datetime.date] = None


class GoalProgressUpdate(BaseModel):
    current_value: float


class GoalResponse(GoalBase):
    id: int
    subject_id: str
    completed: bool
    completed_at: Optional[datetime.datetime] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
