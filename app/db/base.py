"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.sample import PhysiologicalSample  # noqa: F401
from app.models.activity_event import ActivityEvent  # noqa: F401
from app.models.progress_state import ProgressState  # noqa: F401
from app.models.achievement_unlock import AchievementUnlock  # noqa: F401
from app.models.goal import Goal  # noqa: F401
from app.models.plan import GeneratedPlan  # noqa: F401
