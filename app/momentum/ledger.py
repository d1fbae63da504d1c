"""
Progress ledger — folds activity events into a progress state.

``apply(state, event)`` is a pure transition: it returns the new state
and the XP the event itself earned.  Persistence, locking and
achievement unlocks live in the service layer.

Transitions
-----------
workout
    Totals grow by (1, duration, calories).  The streak moves on the
    event's local calendar date ``d`` against the last workout date:

        same day            → unchanged
        the next day        → +1
        any later day       → reset to 1
        an earlier day      → unchanged (late-logged workout)

    XP = 10 + min(duration, 60) + min(calories // 10, 50)

video_watched
    One more video; XP = 5 + duration // 5.  No streak effect.

login
    Counts an active day at most once per calendar date.  A repeated
    login on an already counted day leaves the state untouched.

After each transition ``level`` is recomputed from ``total_xp``.

Local dates
-----------
The calendar date of an event is the date of ``occurred_at`` in the
offset it carries, i.e. the subject's wall-clock date.
"""

from __future__ import annotations

import datetime
import math
from typing import Optional

from app.core.exceptions import InvalidEvent
from app.momentum.levels import level_from_xp
from app.schemas.activity import ActivityEventCreate, ActivityType
from app.schemas.progress import ProgressSnapshot

WORKOUT_BASE_XP = 10
WORKOUT_MAX_DURATION_XP = 60
WORKOUT_MAX_CALORIE_XP = 50
VIDEO_BASE_XP = 5


# ======================================================================
# Event helpers
# ======================================================================


def local_date(occurred_at: datetime.datetime) -> datetime.date:
    return occurred_at.date()


def validate_event(event: ActivityEventCreate) -> ActivityType:
    """Return the event type, or raise InvalidEvent for malformed input."""
    try:
        kind = ActivityType(event.type)
    except ValueError:
        raise InvalidEvent(f"Unknown activity type: {event.type!r}") from None
    if event.duration_min is None or not math.isfinite(event.duration_min) or event.duration_min < 0:
        raise InvalidEvent("duration_min must be a finite, non-negative number")
    if event.calories_burned is not None and (
        not math.isfinite(event.calories_burned) or event.calories_burned < 0
    ):
        raise InvalidEvent("calories_burned must be a finite, non-negative number")
    if event.occurred_at is None:
        raise InvalidEvent("occurred_at is required")
    return kind


def workout_xp(duration_min: float, calories_burned: Optional[float]) -> int:
    duration_xp = min(int(duration_min), WORKOUT_MAX_DURATION_XP)
    calorie_xp = min(int(calories_burned or 0) // 10, WORKOUT_MAX_CALORIE_XP)
    return WORKOUT_BASE_XP + duration_xp + calorie_xp


def video_xp(duration_min: float) -> int:
    return VIDEO_BASE_XP + int(duration_min) // 5


# ======================================================================
# Transitions
# ======================================================================


def _next_streak(state: ProgressSnapshot, today: datetime.date) -> tuple[int, Optional[datetime.date]]:
    last = state.last_workout_date
    if last is None:
        return 1, today
    if today <= last:
        return state.current_streak, last
    if today - last == datetime.timedelta(days=1):
        return state.current_streak + 1, today
    return 1, today


def _apply_workout(state: ProgressSnapshot, event: ActivityEventCreate, today: datetime.date):
    streak, last_workout = _next_streak(state, today)
    xp = workout_xp(event.duration_min, event.calories_burned)
    return {
        "total_workouts": state.total_workouts + 1,
        "total_minutes": state.total_minutes + event.duration_min,
        "total_calories": state.total_calories + (event.calories_burned or 0.0),
        "current_streak": streak,
        "longest_streak": max(state.longest_streak, streak),
        "last_workout_date": last_workout,
    }, xp


def _apply_video(state: ProgressSnapshot, event: ActivityEventCreate, today: datetime.date):
    return {"videos_watched": state.videos_watched + 1}, video_xp(event.duration_min)


def _apply_login(state: ProgressSnapshot, event: ActivityEventCreate, today: datetime.date):
    if state.last_login_date is not None and today <= state.last_login_date:
        return None, 0
    return {"active_days": state.active_days + 1, "last_login_date": today}, 0


_TRANSITIONS = {
    ActivityType.WORKOUT: _apply_workout,
    ActivityType.VIDEO_WATCHED: _apply_video,
    ActivityType.LOGIN: _apply_login,
}


# ======================================================================
# Public API
# ======================================================================


def apply(state: ProgressSnapshot, event: ActivityEventCreate) -> tuple[ProgressSnapshot, int]:
    """Apply one event.  Returns ``(new_state, xp_gained)``.

    ``state`` is never modified.  A login on an already counted day
    returns the input state unchanged with 0 XP.
    """
    kind = validate_event(event)
    today = local_date(event.occurred_at)

    changes, xp = _TRANSITIONS[kind](state, event, today)
    if changes is None:
        return state, 0

    last_activity = state.last_activity_date
    changes["last_activity_date"] = today if last_activity is None else max(last_activity, today)
    changes["total_xp"] = state.total_xp + xp
    changes["level"] = level_from_xp(changes["total_xp"])
    return state.model_copy(update=changes), xp


def credit_xp(state: ProgressSnapshot, xp: int) -> ProgressSnapshot:
    """Add bonus XP (achievement rewards); never negative."""
    if xp < 0:
        raise ValueError("XP credits must not be negative")
    total = state.total_xp + xp
    return state.model_copy(update={"total_xp": total, "level": level_from_xp(total)})


def initial_state(subject_id: str, welcome_xp: int = 50) -> ProgressSnapshot:
    return ProgressSnapshot(subject_id=subject_id, total_xp=welcome_xp, level=level_from_xp(welcome_xp))
