"""Business logic services."""

from app.services.sample_service import SampleService
from app.services.plan_service import PlanService
from app.services.progress_service import ProgressService
from app.services.goal_service import GoalService

__all__ = [
    "SampleService",
    "PlanService",
    "ProgressService",
    "GoalService",
]
