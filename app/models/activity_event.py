"""
Activity event database model.

The raw, append-only activity log.  It is the source of truth for every
derived progress aggregate; rows are never updated.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ActivityEvent(SQLModel, table=True):
    """A logged workout, video view or login."""

    __tablename__ = "activity_events"

    id: Optional[int] = Field(default=None, primary_key=True)
    subject_id: str = Field(nullable=False, max_length=64, index=True)
    type: str = Field(nullable=False, max_length=20, index=True)

    duration_min: float = Field(default=0.0, nullable=False)
    calories_burned: Optional[float] = Field(default=None)

    occurred_at: datetime.datetime = Field(nullable=False, index=True)
    # Calendar date in the subject's local time (derived from occurred_at)
    local_date: datetime.date = Field(nullable=False, index=True)

    # XP credited by the ledger for this event (0 for no-op logins)
    xp_gained: int = Field(default=0, nullable=False)

    event_metadata: dict = Field(default_factory=dict, sa_column=Column("metadata", JSON, nullable=False), )

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
