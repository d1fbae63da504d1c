"""
Generated plan repository.

Plans are immutable; there is no update path.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.plan import GeneratedPlan


class PlanRepository:
    """Repository for GeneratedPlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, plan: GeneratedPlan) -> GeneratedPlan:
        self.session.add(plan)
        self.session.commit()
        self.session.refresh(plan)
        return plan

    def get_by_id(self, plan_id: int) -> Optional[GeneratedPlan]:
        return self.session.get(GeneratedPlan, plan_id)

    def get_all_by_subject(
        self, subject_id: str, skip: int = 0, limit: int = 20,
    ) -> list[GeneratedPlan]:
        """Plans of a subject, newest version first."""
        statement = (
            select(GeneratedPlan)
            .where(GeneratedPlan.subject_id == subject_id)
            .order_by(GeneratedPlan.created_at.desc(), GeneratedPlan.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())
