"""
Achievement unlock database model.

At most one row per subject per achievement, enforced by a unique
constraint that backs the insert-if-absent write.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class AchievementUnlock(SQLModel, table=True):
    """An achievement a subject has unlocked."""

    __tablename__ = "achievement_unlocks"
    __table_args__ = (UniqueConstraint("subject_id", "achievement_id", name="uq_unlock_subject_achievement"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    subject_id: str = Field(nullable=False, max_length=64, index=True)
    achievement_id: str = Field(nullable=False, max_length=50)
    unlocked_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, nullable=False)
