"""Database repositories."""

from app.db.repositories.sample import SampleRepository
from app.db.repositories.activity_event import ActivityEventRepository
from app.db.repositories.progress_state import ProgressStateRepository
from app.db.repositories.achievement import AchievementRepository
from app.db.repositories.goal import GoalRepository
from app.db.repositories.plan import PlanRepository

__all__ = [
    "SampleRepository",
    "ActivityEventRepository",
    "ProgressStateRepository",
    "AchievementRepository",
    "GoalRepository",
    "PlanRepository",
]
