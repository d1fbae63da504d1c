"""SQLModel database models."""

from app.models.sample import PhysiologicalSample
from app.models.activity_event import ActivityEvent
from app.models.progress_state import ProgressState
from app.models.achievement_unlock import AchievementUnlock
from app.models.goal import Goal
from app.models.plan import GeneratedPlan

__all__ = [
    "PhysiologicalSample",
    "ActivityEvent",
    "ProgressState",
    "AchievementUnlock",
    "Goal",
    "GeneratedPlan",
]
