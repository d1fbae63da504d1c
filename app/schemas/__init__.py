"""Pydantic schemas for request/response validation."""

from app.schemas.sample import (
    PhysiologicalSampleCreate,
    PhysiologicalSampleResponse,
    DerivedMetrics,
    MetricsRequest,
    CaloricTargetRequest,
    CaloricTarget,
    MacroGrams,
)
from app.schemas.profile import (
    PerformanceTests,
    TrainingBackground,
    AthleticProfile,
    ProfileRequest,
    SubjectProfileRequest,
)
from app.schemas.plan import (
    PlanGoal,
    TrainingPlan,
    NutritionPlan,
    GeneratedPlanBundle,
    PlanRequest,
    SubjectPlanRequest,
    GeneratedPlanResponse,
)
from app.schemas.activity import ActivityEventCreate, ActivityEventResponse
from app.schemas.achievement import AchievementDefinition, AchievementUnlockResponse
from app.schemas.progress import (
    ProgressSnapshot,
    ProgressStateResponse,
    LevelInfo,
    RecordActivityResponse,
    ProgressSummary,
    WeeklyProgress,
    GamificationSummary,
)
from app.schemas.goal import GoalCreate, GoalUpdate, GoalProgressUpdate, GoalResponse

__all__ = [
    "PhysiologicalSampleCreate",
    "PhysiologicalSampleResponse",
    "DerivedMetrics",
    "MetricsRequest",
    "CaloricTargetRequest",
    "CaloricTarget",
    "MacroGrams",
    "PerformanceTests",
    "TrainingBackground",
    "AthleticProfile",
    "ProfileRequest",
    "SubjectProfileRequest",
    "PlanGoal",
    "TrainingPlan",
    "NutritionPlan",
    "GeneratedPlanBundle",
    "PlanRequest",
    "SubjectPlanRequest",
    "GeneratedPlanResponse",
    "ActivityEventCreate",
    "ActivityEventResponse",
    "AchievementDefinition",
    "AchievementUnlockResponse",
    "ProgressSnapshot",
    "ProgressStateResponse",
    "LevelInfo",
    "RecordActivityResponse",
    "ProgressSummary",
    "WeeklyProgress",
    "GamificationSummary",
    "GoalCreate",
    "GoalUpdate",
    "GoalProgressUpdate",
    "GoalResponse",
]
