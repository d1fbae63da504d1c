"""
Goal repository.

Handles database operations for Goal model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.goal import Goal


class GoalRepository:
    """Repository for Goal database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, goal: Goal) -> Goal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal

    def get_by_id(self, goal_id: int) -> Optional[Goal]:
        return self.session.get(Goal, goal_id)

    def get_all_by_subject(
        self, subject_id: str, completed: Optional[bool] = None,
    ) -> list[Goal]:
        """Get goals for a subject, optionally filtered by completion."""
        statement = select(Goal).where(Goal.subject_id == subject_id)
        if completed is not None:
            statement = statement.where(Goal.completed == completed)
        statement = statement.order_by(Goal.target_date, Goal.id)
        return list(self.session.exec(statement).all())

    def update(self, goal: Goal) -> Goal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal

    def delete(self, goal_id: int) -> bool:
        goal = self.get_by_id(goal_id)
        if goal:
            self.session.delete(goal)
            self.session.commit()
            return True
        return False
