"""
Profile and plan service.

Classifies stored subjects and persists generated plans as immutable,
timestamped artifacts.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.db.repositories.plan import PlanRepository
from app.models.plan import GeneratedPlan
from app.momentum import plan as plan_engine
from app.momentum import profile as profile_engine
from app.schemas.plan import GeneratedPlanResponse, PlanGoal
from app.schemas.profile import AthleticProfile, PerformanceTests, TrainingBackground
from app.services.sample_service import SampleService

log = logging.getLogger(__name__)


class PlanService:
    """Service for profile classification and plan generation."""

    def __init__(self, session: Session):
        self.repository = PlanRepository(session)
        self.samples = SampleService(session)

    def classify_subject(
        self,
        subject_id: str,
        tests: Optional[PerformanceTests] = None,
        background: Optional[TrainingBackground] = None,
    ) -> AthleticProfile:
        sample = self.samples.load_latest(subject_id)
        return profile_engine.classify_profile(sample, tests, background)

    def create_for_subject(
        self,
        subject_id: str,
        goal: PlanGoal,
        tests: Optional[PerformanceTests] = None,
        background: Optional[TrainingBackground] = None,
    ) -> GeneratedPlanResponse:
        """Classify the subject, generate a plan and store it as a new version."""
        if background is None:
            background = TrainingBackground(objective=goal.objective)
        profile = self.classify_subject(subject_id, tests, background)
        bundle = plan_engine.generate_plan(goal, profile)

        row = GeneratedPlan(
            subject_id=subject_id,
            objective=bundle.training_plan.objective.value,
            periodization=bundle.training_plan.periodization.value,
            goal=goal.model_dump(mode="json"),
            profile=profile.model_dump(mode="json"),
            training_plan=bundle.training_plan.model_dump(mode="json"),
            nutrition_plan=bundle.nutrition_plan.model_dump(mode="json"),
            created_at=datetime.datetime.utcnow(),
        )
        row = self.repository.create(row)
        log.info(
            "Generated %s plan %s for subject %s (%s)",
            row.periodization, row.id, subject_id, row.objective,
        )
        return self._to_response(row)

    def get_all(
        self, subject_id: str, skip: int = 0, limit: int = 20,
    ) -> list[GeneratedPlanResponse]:
        plans = self.repository.get_all_by_subject(subject_id, skip, limit)
        return [self._to_response(p) for p in plans]

    @staticmethod
    def _to_response(row: GeneratedPlan) -> GeneratedPlanResponse:
        return GeneratedPlanResponse(
            id=row.id,
            subject_id=row.subject_id,
            goal=row.goal,
            training_plan=row.training_plan,
            nutrition_plan=row.nutrition_plan,
            created_at=row.created_at,
        )
