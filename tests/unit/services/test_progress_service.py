"""Tests for the progress service: persistence, unlocks and concurrency."""

import datetime
import threading

import pytest
from sqlmodel import Session, SQLModel, select

from app.core.exceptions import ConcurrencyConflict, InvalidEvent, NotFound
from app.db.repositories.achievement import AchievementRepository
from app.db.repositories.progress_state import ProgressStateRepository
from app.db.session import build_engine
from app.models.activity_event import ActivityEvent
from app.momentum.ledger import initial_state
from app.services.progress_service import _SUBJECT_LOCKS, ProgressService, week_start
from tests.factories import make_event

DAY = datetime.datetime(2026, 3, 2, 18, 0)


def _days(n: int) -> datetime.timedelta:
    return datetime.timedelta(days=n)


# ======================================================================
# record_activity
# ======================================================================


class TestRecordActivity:
    def test_first_workout_creates_state_and_unlocks(self, session):
        result = ProgressService(session).record_activity("alice", make_event())

        assert result.xp_gained == 87
        assert result.newly_unlocked == ["first_workout"]
        assert result.state.total_workouts == 1
        assert result.state.current_streak == 1
        # welcome 50 + workout 87 + first_workout 50
        assert result.state.total_xp == 187
        assert result.state.level == 2
        assert result.state.achievements_count == 1
        assert result.state.version == 2
        assert result.event.id is not None
        assert result.event.local_date == DAY.date()

    def test_same_day_workouts_keep_streak(self, session):
        service = ProgressService(session)
        service.record_activity("alice", make_event())
        result = service.record_activity("alice", make_event(occurred_at=DAY + datetime.timedelta(hours=1)))
        assert result.state.total_workouts == 2
        assert result.state.current_streak == 1
        assert result.newly_unlocked == []

    def test_weekly_warrior_on_seventh_day(self, session):
        service = ProgressService(session)
        for offset in range(6):
            service.record_activity("alice", make_event(occurred_at=DAY + _days(offset)))
        result = service.record_activity("alice", make_event(occurred_at=DAY + _days(6)))
        assert result.state.current_streak == 7
        assert "weekly_warrior" in result.newly_unlocked

    def test_achievement_unlocked_at_most_once(self, session):
        service = ProgressService(session)
        unlocked = []
        for i in range(12):
            event = make_event(type="video_watched", duration_min=10, calories_burned=None,
                               occurred_at=DAY + datetime.timedelta(minutes=i))
            unlocked += service.record_activity("alice", event).newly_unlocked

        assert unlocked.count("video_explorer") == 1
        ids = [a.achievement_id for a in service.get_achievements("alice")]
        assert ids == ["video_explorer"]
        assert service.get_progress("alice").achievements_count == 1

    def test_weekly_warrior_reached_twice_unlocks_once(self, session):
        service = ProgressService(session)
        days = list(range(7)) + list(range(9, 16))
        unlocked = []
        for offset in days:
            result = service.record_activity("alice", make_event(occurred_at=DAY + _days(offset)))
            unlocked += result.newly_unlocked

        assert result.state.current_streak == 7
        assert unlocked.count("weekly_warrior") == 1
        ids = [a.achievement_id for a in service.get_achievements("alice")]
        assert ids.count("weekly_warrior") == 1

    def test_subject_locks_are_released(self, session):
        service = ProgressService(session)
        service.record_activity("alice", make_event())
        with pytest.raises(InvalidEvent):
            service.record_activity("bob", make_event(duration_min=-1))
        assert "alice" not in _SUBJECT_LOCKS
        assert "bob" not in _SUBJECT_LOCKS

    def test_repeated_login_is_logged_but_not_counted(self, session):
        service = ProgressService(session)
        first = service.record_activity("alice", make_event(type="login", duration_min=0, calories_burned=None))
        second = service.record_activity(
            "alice",
            make_event(type="login", duration_min=0, calories_burned=None, occurred_at=DAY + datetime.timedelta(hours=2)),
        )
        assert second.state.active_days == 1
        assert second.state.version == first.state.version
        assert len(service.get_activities("alice")) == 2

    def test_metadata_is_stored(self, session):
        service = ProgressService(session)
        service.record_activity("alice", make_event(video_id="v-42"))
        assert service.get_activities("alice")[0].metadata == {"video_id": "v-42"}

    def test_invalid_event_writes_nothing(self, session):
        service = ProgressService(session)
        with pytest.raises(InvalidEvent):
            service.record_activity("alice", make_event(duration_min=-10))
        with pytest.raises(NotFound):
            service.get_progress("alice")
        assert service.get_activities("alice") == []

    def test_defaults_occurred_at_to_now(self, session):
        now = datetime.datetime(2026, 5, 1, 7, 0)
        event = make_event()
        event.occurred_at = None
        result = ProgressService(session).record_activity("alice", event, now=now)
        assert result.event.occurred_at == now

    def test_subjects_are_independent(self, session):
        service = ProgressService(session)
        service.record_activity("alice", make_event())
        service.record_activity("bob", make_event(type="video_watched", calories_burned=None))
        assert service.get_progress("alice").total_workouts == 1
        assert service.get_progress("bob").total_workouts == 0


# ======================================================================
# Optimistic concurrency
# ======================================================================


class TestOptimisticVersion:
    def test_stale_version_is_rejected(self, session):
        repo = ProgressStateRepository(session)
        row = repo.create_initial("alice", 50)
        snapshot = initial_state("alice").model_copy(update={"total_workouts": 1})

        repo.save(snapshot, row.version)
        with pytest.raises(ConcurrencyConflict):
            repo.save(snapshot, row.version)

    def test_initial_row_created_once(self, session):
        repo = ProgressStateRepository(session)
        repo.create_initial("alice", 50)
        with pytest.raises(ConcurrencyConflict):
            repo.create_initial("alice", 50)

    def test_insert_unlock_if_absent(self, session):
        repo = AchievementRepository(session)
        assert repo.insert_unlock_if_absent("alice", "first_workout", DAY) is True
        assert repo.insert_unlock_if_absent("alice", "first_workout", DAY) is False
        assert len(repo.list_unlocks("alice")) == 1

    def test_conflict_is_retried(self, session, monkeypatch):
        service = ProgressService(session)
        real_save = service.states.save
        calls = []

        def flaky_save(state, expected_version):
            calls.append(expected_version)
            if len(calls) == 1:
                raise ConcurrencyConflict("simulated")
            return real_save(state, expected_version)

        monkeypatch.setattr(service.states, "save", flaky_save)
        result = service.record_activity("alice", make_event())

        assert len(calls) == 2
        assert result.state.total_workouts == 1
        assert result.newly_unlocked == ["first_workout"]
        events = session.exec(select(ActivityEvent)).all()
        assert len(events) == 1

    def test_conflict_surfaces_after_max_retries(self, session, monkeypatch):
        service = ProgressService(session, max_retries=3)
        calls = []

        def always_conflict(state, expected_version):
            calls.append(expected_version)
            raise ConcurrencyConflict("simulated")

        monkeypatch.setattr(service.states, "save", always_conflict)
        with pytest.raises(ConcurrencyConflict):
            service.record_activity("alice", make_event())
        assert len(calls) == 3
        assert service.get_activities("alice") == []

    def test_concurrent_same_day_workouts_both_counted(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'progress.db'}")
        SQLModel.metadata.create_all(engine)
        barrier = threading.Barrier(2)
        errors = []

        def worker(hour: int):
            with Session(engine) as session:
                barrier.wait()
                try:
                    event = make_event(occurred_at=DAY + datetime.timedelta(hours=hour))
                    ProgressService(session).record_activity("alice", event)
                except Exception as e:  # collected for the assertion below
                    errors.append(e)

        threads = [threading.Thread(target=worker, args=(h,)) for h in (0, 1)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        with Session(engine) as session:
            state = ProgressService(session).get_progress("alice")
            unlocks = ProgressService(session).get_achievements("alice")
        engine.dispose()

        assert errors == []
        assert state.total_workouts == 2
        assert state.current_streak == 1
        assert state.longest_streak == 1
        assert [u.achievement_id for u in unlocks] == ["first_workout"]


# ======================================================================
# Queries
# ======================================================================


class TestQueries:
    def test_progress_not_found(self, session):
        with pytest.raises(NotFound):
            ProgressService(session).get_progress("nobody")

    def test_week_starts_on_sunday(self):
        assert week_start(datetime.date(2026, 3, 11)) == datetime.date(2026, 3, 8)
        assert week_start(datetime.date(2026, 3, 8)) == datetime.date(2026, 3, 8)
        assert week_start(datetime.date(2026, 3, 14)) == datetime.date(2026, 3, 8)

    def test_weekly_progress(self, session):
        service = ProgressService(session)
        service.record_activity("alice", make_event(occurred_at=datetime.datetime(2026, 3, 2, 9)))
        service.record_activity("alice", make_event(occurred_at=datetime.datetime(2026, 3, 9, 9), duration_min=30,
                                                    calories_burned=200))
        service.record_activity("alice", make_event(type="video_watched", calories_burned=None,
                                                    occurred_at=datetime.datetime(2026, 3, 10, 9)))

        weeks = service.get_weekly("alice", weeks=2, today=datetime.date(2026, 3, 11))

        assert [w.week_start for w in weeks] == [datetime.date(2026, 3, 1), datetime.date(2026, 3, 8)]
        assert (weeks[0].workouts, weeks[0].minutes, weeks[0].calories) == (1, 45.0, 320.0)
        assert (weeks[1].workouts, weeks[1].minutes, weeks[1].videos) == (1, 30.0, 1)

    def test_gamification_summary(self, session):
        service = ProgressService(session)
        service.record_activity("alice", make_event())
        summary = service.get_gamification_summary("alice", today=DAY.date())

        assert summary.today_active is True
        assert summary.level.level == 2
        assert summary.level.total_xp == 187
        assert summary.current_streak == 1
        assert [a.achievement_id for a in summary.achievements] == ["first_workout"]
        assert summary.achievements[0].name == "First Step"

    def test_gamification_summary_inactive_today(self, session):
        service = ProgressService(session)
        service.record_activity("alice", make_event())
        summary = service.get_gamification_summary("alice", today=DAY.date() + _days(1))
        assert summary.today_active is False
