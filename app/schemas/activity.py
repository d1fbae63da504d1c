"""
Activity event schemas.

Event fields are deliberately unconstrained here: well-formedness is
checked by the progress ledger, which reports ``invalid_event``.
"""

import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ActivityType(str, Enum):
    WORKOUT = "workout"
    VIDEO_WATCHED = "video_watched"
    LOGIN = "login"


class ActivityEventCreate(BaseModel):
    """Schema for logging an activity.  ``occurred_at`` defaults to now."""

    type: str = Field(..., description="One of: workout, video_watched, login")
    duration_min: float = Field(default=0.0, description="Duration in minutes")
    calories_burned: Optional[float] = Field(None, description="Calories burned (kcal)")
    occurred_at: Optional[datetime.datetime] = Field(
        None, description="When it happened, with the subject's UTC offset",
    )
    metadata: dict[str, Any] = Field(default_factory=dict)


class ActivityEventResponse(BaseModel):
    """A logged activity."""

    id: int
    subject_id: str
    type: ActivityType
    duration_min: float
    calories_burned: Optional[float] = None
    occurred_at: datetime.datetime
    local_date: datetime.date
    xp_gained: int
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
