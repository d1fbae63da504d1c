"""
Achievement unlock repository.

Unlocks are written with a single conditional insert; the unique key on
(subject_id, achievement_id) decides who wins.
"""

import datetime

from sqlmodel import Session, select

from app.db.repositories.progress_state import insert_ignore
from app.models.achievement_unlock import AchievementUnlock


class AchievementRepository:
    """Repository for AchievementUnlock database operations."""

    def __init__(self, session: Session):
        self.session = session

    def list_unlocks(self, subject_id: str) -> list[AchievementUnlock]:
        statement = (
            select(AchievementUnlock)
            .where(AchievementUnlock.subject_id == subject_id)
            .order_by(AchievementUnlock.unlocked_at, AchievementUnlock.id)
        )
        return list(self.session.exec(statement).all())

    def insert_unlock_if_absent(
        self, subject_id: str, achievement_id: str, unlocked_at: datetime.datetime,
    ) -> bool:
        """Record an unlock.  Returns True only if this call inserted it."""
        stmt = insert_ignore(
            self.session,
            AchievementUnlock.__table__,
            subject_id=subject_id,
            achievement_id=achievement_id,
            unlocked_at=unlocked_at,
        )
        result = self.session.connection().execute(stmt)
        return result.rowcount == 1
