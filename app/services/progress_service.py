"""
Progress service.

Records activity events and keeps each subject's progress state in
step with the activity log.  One ``record_activity`` call is a single
transaction: event append, achievement unlocks and the state write
commit together or not at all.

Writes for a subject are serialized by an in-process lock and, across
processes, by the optimistic version check of the state row.  A lost
race rolls the transaction back and replays the event on fresh state.
"""

import contextlib
import datetime
import logging
import threading
from typing import Iterator, Optional

from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import ConcurrencyConflict, NotFound
from app.db.repositories.achievement import AchievementRepository
from app.db.repositories.activity_event import ActivityEventRepository
from app.db.repositories.progress_state import ProgressStateRepository
from app.models.activity_event import ActivityEvent
from app.models.progress_state import ProgressState
from app.momentum import achievements as achievement_engine
from app.momentum import ledger
from app.momentum.levels import level_info
from app.schemas.achievement import AchievementUnlockResponse
from app.schemas.activity import ActivityEventCreate, ActivityEventResponse
from app.schemas.progress import (
    GamificationSummary,
    ProgressSnapshot,
    ProgressStateResponse,
    RecordActivityResponse,
    WeeklyProgress,
)

log = logging.getLogger(__name__)

# subject_id -> [lock, number of holders and waiters]
_SUBJECT_LOCKS: dict[str, list] = {}
_SUBJECT_LOCKS_GUARD = threading.Lock()


@contextlib.contextmanager
def _subject_lock(subject_id: str) -> Iterator[None]:
    """Serialize writers of one subject; the entry is dropped once unused."""
    with _SUBJECT_LOCKS_GUARD:
        entry = _SUBJECT_LOCKS.setdefault(subject_id, [threading.Lock(), 0])
        entry[1] += 1
    try:
        with entry[0]:
            yield
    finally:
        with _SUBJECT_LOCKS_GUARD:
            entry[1] -= 1
            if entry[1] == 0:
                del _SUBJECT_LOCKS[subject_id]


def week_start(day: datetime.date) -> datetime.date:
    """Sunday on or before ``day``."""
    return day - datetime.timedelta(days=(day.weekday() + 1) % 7)


class ProgressService:
    """Service for activity logging and progress state."""

    def __init__(self, session: Session, max_retries: Optional[int] = None):
        self.session = session
        self.events = ActivityEventRepository(session)
        self.states = ProgressStateRepository(session)
        self.unlocks = AchievementRepository(session)
        self.max_retries = max_retries if max_retries is not None else settings.LEDGER_MAX_RETRIES

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_activity(
        self,
        subject_id: str,
        data: ActivityEventCreate,
        now: Optional[datetime.datetime] = None,
    ) -> RecordActivityResponse:
        """Append an event and fold it into the subject's progress state.

        Raises:
            InvalidEvent: the event is malformed (nothing is written).
            ConcurrencyConflict: the state kept changing underneath us
                for ``max_retries`` attempts.
        """
        now = now or datetime.datetime.utcnow()
        if data.occurred_at is None:
            data = data.model_copy(update={"occurred_at": now})
        ledger.validate_event(data)

        with _subject_lock(subject_id):
            attempt = 1
            while True:
                try:
                    result = self._record_once(subject_id, data, now)
                    self.session.commit()
                    return result
                except ConcurrencyConflict:
                    self.session.rollback()
                    if attempt >= self.max_retries:
                        log.warning(
                            "Giving up on %s event for subject %s after %d attempts",
                            data.type, subject_id, attempt,
                        )
                        raise
                    log.info(
                        "Concurrent progress update for subject %s, retrying (attempt %d/%d)",
                        subject_id, attempt + 1, self.max_retries,
                    )
                    attempt += 1
                except Exception:
                    self.session.rollback()
                    raise

    def _record_once(
        self, subject_id: str, data: ActivityEventCreate, now: datetime.datetime,
    ) -> RecordActivityResponse:
        row = self.states.get_by_subject(subject_id)
        if row is None:
            row = self.states.create_initial(subject_id, settings.WELCOME_BONUS_XP)
        expected_version = row.version

        state = ProgressSnapshot.model_validate(row)
        new_state, xp_gained = ledger.apply(state, data)

        event = self.events.append(
            ActivityEvent(
                subject_id=subject_id,
                type=data.type,
                duration_min=data.duration_min,
                calories_burned=data.calories_burned,
                occurred_at=data.occurred_at,
                local_date=ledger.local_date(data.occurred_at),
                xp_gained=xp_gained,
                event_metadata=dict(data.metadata),
                created_at=now,
            )
        )
        event_response = self._event_response(event)

        newly_unlocked = []
        unlocked = {u.achievement_id for u in self.unlocks.list_unlocks(subject_id)}
        for rule in achievement_engine.evaluate(new_state, unlocked):
            if not self.unlocks.insert_unlock_if_absent(subject_id, rule.id, now):
                continue
            new_state = ledger.credit_xp(new_state, rule.definition.xp_reward)
            new_state = new_state.model_copy(update={"achievements_count": new_state.achievements_count + 1})
            newly_unlocked.append(rule.id)
            log.info("Subject %s unlocked %s (+%d XP)", subject_id, rule.id, rule.definition.xp_reward)

        if new_state != state:
            row = self.states.save(new_state, expected_version)

        return RecordActivityResponse(
            event=event_response,
            state=ProgressStateResponse.model_validate(row),
            xp_gained=xp_gained,
            newly_unlocked=newly_unlocked,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _load_state(self, subject_id: str) -> ProgressState:
        row = self.states.get_by_subject(subject_id)
        if row is None:
            raise NotFound(f"No progress recorded for subject {subject_id}")
        return row

    def get_progress(self, subject_id: str) -> ProgressStateResponse:
        return ProgressStateResponse.model_validate(self._load_state(subject_id))

    def get_activities(
        self, subject_id: str, skip: int = 0, limit: int = 100,
    ) -> list[ActivityEventResponse]:
        events = self.events.get_all_by_subject(subject_id, skip, limit)
        return [self._event_response(e) for e in events]

    def get_weekly(
        self, subject_id: str, weeks: int = 4, today: Optional[datetime.date] = None,
    ) -> list[WeeklyProgress]:
        """Activity totals per week (Sunday to Saturday), oldest week first."""
        today = today or datetime.datetime.utcnow().date()
        first_week = week_start(today) - datetime.timedelta(weeks=weeks - 1)
        buckets = {
            first_week + datetime.timedelta(weeks=i): WeeklyProgress(week_start=first_week + datetime.timedelta(weeks=i))
            for i in range(weeks)
        }

        for event in self.events.get_by_subject_date_range(subject_id, first_week, today):
            bucket = buckets[week_start(event.local_date)]
            bucket.xp += event.xp_gained
            if event.type == "workout":
                bucket.workouts += 1
                bucket.minutes += event.duration_min
                bucket.calories += event.calories_burned or 0.0
            elif event.type == "video_watched":
                bucket.videos += 1

        return list(buckets.values())

    def get_achievements(self, subject_id: str) -> list[AchievementUnlockResponse]:
        responses = []
        for unlock in self.unlocks.list_unlocks(subject_id):
            rule = achievement_engine.ACHIEVEMENTS_BY_ID.get(unlock.achievement_id)
            responses.append(
                AchievementUnlockResponse(
                    achievement_id=unlock.achievement_id,
                    unlocked_at=unlock.unlocked_at,
                    name=rule.definition.name if rule else None,
                    category=rule.definition.category if rule else None,
                    xp_reward=rule.definition.xp_reward if rule else None,
                )
            )
        return responses

    def get_gamification_summary(
        self, subject_id: str, today: Optional[datetime.date] = None,
    ) -> GamificationSummary:
        today = today or datetime.datetime.utcnow().date()
        state = self._load_state(subject_id)
        return GamificationSummary(
            subject_id=subject_id,
            level=level_info(state.total_xp),
            current_streak=state.current_streak,
            longest_streak=state.longest_streak,
            today_active=state.last_activity_date == today,
            achievements_count=state.achievements_count,
            achievements=self.get_achievements(subject_id),
        )

    @staticmethod
    def _event_response(event: ActivityEvent) -> ActivityEventResponse:
        return ActivityEventResponse(
            id=event.id,
            subject_id=event.subject_id,
            type=event.type,
            duration_min=event.duration_min,
            calories_burned=event.calories_burned,
            occurred_at=event.occurred_at,
            local_date=event.local_date,
            xp_gained=event.xp_gained,
            metadata=event.event_metadata,
            created_at=event.created_at,
        )
