"""
Activity event repository.

The activity log is append-only.  ``append`` only flushes: the caller
owns the transaction so that the event, the progress state and any
unlocks are committed (or rolled back) together.
"""

import datetime

from sqlmodel import Session, select

from app.models.activity_event import ActivityEvent


class ActivityEventRepository:
    """Repository for ActivityEvent database operations."""

    def __init__(self, session: Session):
        self.session = session

    def append(self, event: ActivityEvent) -> ActivityEvent:
        self.session.add(event)
        self.session.flush()
        return event

    def get_by_subject_date_range(
        self, subject_id: str, start: datetime.date, end: datetime.date,
    ) -> list[ActivityEvent]:
        """Events whose local date falls within [start, end], oldest first."""
        statement = (
            select(ActivityEvent)
            .where(
                ActivityEvent.subject_id == subject_id,
                ActivityEvent.local_date >= start,
                ActivityEvent.local_date <= end,
            )
            .order_by(ActivityEvent.occurred_at, ActivityEvent.id)
        )
        return list(self.session.exec(statement).all())

    def get_all_by_subject(
        self, subject_id: str, skip: int = 0, limit: int = 100,
    ) -> list[ActivityEvent]:
        """Get the activity log of a subject with pagination, newest first."""
        statement = (
            select(ActivityEvent)
            .where(ActivityEvent.subject_id == subject_id)
            .order_by(ActivityEvent.occurred_at.desc(), ActivityEvent.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())
