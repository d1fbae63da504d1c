"""
Progress state repository.

One row per subject, guarded by an optimistic ``version`` column:

* the lazy initial row is written with an INSERT ... ON CONFLICT DO
  NOTHING, so two first events cannot both create it;
* every save is an ``UPDATE ... WHERE version = :expected``.

Either write affecting zero rows means another writer got there first
and raises :class:`~app.core.exceptions.ConcurrencyConflict`.  Nothing
here commits; the service owns the transaction.
"""

import datetime
from typing import Optional

from sqlalchemy import update
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, select

from app.core.exceptions import ConcurrencyConflict
from app.models.progress_state import ProgressState

# Columns written by ``save``; identity and bookkeeping columns are excluded.
_STATE_COLUMNS = [
    "total_workouts",
    "total_minutes",
    "total_calories",
    "videos_watched",
    "current_streak",
    "longest_streak",
    "last_activity_date",
    "last_workout_date",
    "active_days",
    "last_login_date",
    "total_xp",
    "level",
    "achievements_count",
]


def insert_ignore(session: Session, table, **values):
    """Build an INSERT that silently skips rows violating a unique key."""
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        stmt = postgresql.insert(table).values(**values)
    elif dialect == "sqlite":
        stmt = sqlite.insert(table).values(**values)
    else:
        raise NotImplementedError(f"insert-if-absent is not supported on {dialect}")
    return stmt.on_conflict_do_nothing()


class ProgressStateRepository:
    """Repository for ProgressState database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_subject(self, subject_id: str) -> Optional[ProgressState]:
        """Load the current row, bypassing any stale identity-map copy."""
        statement = (
            select(ProgressState)
            .where(ProgressState.subject_id == subject_id)
            .execution_options(populate_existing=True)
        )
        return self.session.exec(statement).first()

    def create_initial(self, subject_id: str, total_xp: int) -> ProgressState:
        """Insert the initial row for a subject.

        Raises ConcurrencyConflict if a row already exists.
        """
        now = datetime.datetime.utcnow()
        stmt = insert_ignore(
            self.session,
            ProgressState.__table__,
            subject_id=subject_id,
            total_workouts=0,
            total_minutes=0.0,
            total_calories=0.0,
            videos_watched=0,
            current_streak=0,
            longest_streak=0,
            active_days=0,
            total_xp=total_xp,
            level=1,
            achievements_count=0,
            version=1,
            created_at=now,
            updated_at=now,
        )
        result = self.session.connection().execute(stmt)
        if result.rowcount == 0:
            raise ConcurrencyConflict(f"Progress state for {subject_id} was created concurrently")
        return self.get_by_subject(subject_id)

    def save(self, state: ProgressState, expected_version: int) -> ProgressState:
        """Write ``state`` if the stored row is still at ``expected_version``."""
        values = {column: getattr(state, column) for column in _STATE_COLUMNS}
        values["version"] = expected_version + 1
        values["updated_at"] = datetime.datetime.utcnow()
        stmt = (
            update(ProgressState.__table__)
            .where(
                ProgressState.__table__.c.subject_id == state.subject_id,
                ProgressState.__table__.c.version == expected_version,
            )
            .values(**values)
        )
        result = self.session.connection().execute(stmt)
        if result.rowcount == 0:
            raise ConcurrencyConflict(
                f"Progress state for {state.subject_id} changed since version {expected_version}"
            )
        return self.get_by_subject(state.subject_id)
