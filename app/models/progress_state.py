"""
Progress state database model.

One row per subject holding the aggregates derived from the activity log.
``version`` is bumped on every write and checked on update (optimistic
concurrency); see :class:`~app.db.repositories.progress_state.ProgressStateRepository`.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class ProgressState(SQLModel, table=True):
    """Derived gamification state of a subject."""

    __tablename__ = "progress_states"

    id: Optional[int] = Field(default=None, primary_key=True)
    subject_id: str = Field(nullable=False, max_length=64, unique=True, index=True)

    # Totals
    total_workouts: int = Field(default=0, nullable=False)
    total_minutes: float = Field(default=0.0, nullable=False)
    total_calories: float = Field(default=0.0, nullable=False)
    videos_watched: int = Field(default=0, nullable=False)

    # Streaks
    current_streak: int = Field(default=0, nullable=False)
    longest_streak: int = Field(default=0, nullable=False)
    last_activity_date: Optional[datetime.date] = Field(default=None)
    last_workout_date: Optional[datetime.date] = Field(default=None)

    # Logins
    active_days: int = Field(default=0, nullable=False)
    last_login_date: Optional[datetime.date] = Field(default=None)

    # Gamification
    total_xp: int = Field(default=50, nullable=False)
    level: int = Field(default=1, nullable=False)
    achievements_count: int = Field(default=0, nullable=False)

    version: int = Field(default=1, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
