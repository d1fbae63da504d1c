"""
Progress, level and summary schemas.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.achievement import AchievementUnlockResponse
from app.schemas.activity import ActivityEventResponse


class ProgressSnapshot(BaseModel):
    """Value of a subject's progress state, as folded by the ledger."""

    subject_id: str

    total_workouts: int = 0
    total_minutes: float = 0.0
    total_calories: float = 0.0
    videos_watched: int = 0

    current_streak: int = 0
    longest_streak: int = 0
    last_activity_date: Optional[datetime.date] = None
    last_workout_date: Optional[datetime.date] = None

    active_days: int = 0
    last_login_date: Optional[datetime.date] = None

    total_xp: int = 50
    level: int = 1
    achievements_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class ProgressStateResponse(ProgressSnapshot):
    """Stored progress state."""

    version: int
    updated_at: datetime.datetime


class LevelInfo(BaseModel):
    level: int
    total_xp: int
    level_start_xp: int = Field(..., description="Total XP at which the current level was reached")
    next_level_xp: int = Field(..., description="Total XP needed for the next level")
    xp_into_level: int
    xp_to_next_level: int
    progress_pct: float


class RecordActivityResponse(BaseModel):
    """Result of recording one activity event."""

    event: ActivityEventResponse
    state: ProgressStateResponse
    xp_gained: int = Field(..., description="XP credited by the event itself")
    newly_unlocked: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Progress summary (sample history)
# ---------------------------------------------------------------------------

class SummaryWindow(str, Enum):
    WEEK = "7d"
    MONTH = "30d"
    QUARTER = "90d"


class Trend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class MetricDirection(str, Enum):
    LOWER_IS_BETTER = "lower_is_better"
    HIGHER_IS_BETTER = "higher_is_better"


class MetricChange(BaseModel):
    first: float
    latest: float
    change: float
    trend: Trend
    direction: MetricDirection
    samples: int


class ProgressSummary(BaseModel):
    subject_id: str
    window: SummaryWindow
    sample_count: int
    since: datetime.datetime
    weight_kg: MetricChange
    bmi: MetricChange
    body_fat_pct: Optional[MetricChange] = None
    muscle_mass_kg: Optional[MetricChange] = None
    waist_cm: Optional[MetricChange] = None


# ---------------------------------------------------------------------------
# Weekly / gamification views
# ---------------------------------------------------------------------------

class WeeklyProgress(BaseModel):
    """Activity totals for a week starting on Sunday."""

    week_start: datetime.date
    workouts: int = 0
    minutes: float = 0.0
    calories: float = 0.0
    videos: int = 0
    xp: int = 0


class GamificationSummary(BaseModel):
    subject_id: str
    level: LevelInfo
    current_streak: int
    longest_streak: int
    today_active: bool
    achievements_count: int
    achievements: list[AchievementUnlockResponse] = Field(default_factory=list)
