"""
Goal service.

Business logic for subject goals.  Goals move only through explicit
progress updates; completion is latched the first time the target is
reached.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.goal import GoalRepository
from app.models.goal import Goal
from app.schemas.goal import (
    DECREASING_GOAL_TYPES,
    GoalCreate,
    GoalProgressUpdate,
    GoalResponse,
    GoalType,
    GoalUpdate,
)


def target_reached(goal_type: str, current_value: float, target_value: float) -> bool:
    if GoalType(goal_type) in DECREASING_GOAL_TYPES:
        return current_value <= target_value
    return current_value >= target_value


class GoalService:
    """Service for goal business logic."""

    def __init__(self, session: Session):
        self.repository = GoalRepository(session)

    def create(self, subject_id: str, data: GoalCreate) -> GoalResponse:
        goal = Goal(subject_id=subject_id, **data.model_dump(mode="json", exclude={"target_date"}),
                    target_date=data.target_date)
        self._check_completion(goal)
        goal = self.repository.create(goal)
        return GoalResponse.model_validate(goal)

    def get(self, subject_id: str, goal_id: int) -> GoalResponse:
        return GoalResponse.model_validate(self._get_owned_goal(subject_id, goal_id))

    def get_all(self, subject_id: str, completed: Optional[bool] = None) -> list[GoalResponse]:
        goals = self.repository.get_all_by_subject(subject_id, completed)
        return [GoalResponse.model_validate(g) for g in goals]

    def update(self, subject_id: str, goal_id: int, data: GoalUpdate) -> GoalResponse:
        goal = self._get_owned_goal(subject_id, goal_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(goal, key, value)
        self._check_completion(goal)
        goal.updated_at = datetime.datetime.utcnow()
        goal = self.repository.update(goal)
        return GoalResponse.model_validate(goal)

    def update_progress(self, subject_id: str, goal_id: int, data: GoalProgressUpdate) -> GoalResponse:
        goal = self._get_owned_goal(subject_id, goal_id)
        goal.current_value = data.current_value
        self._check_completion(goal)
        goal.updated_at = datetime.datetime.utcnow()
        goal = self.repository.update(goal)
        return GoalResponse.model_validate(goal)

    def delete(self, subject_id: str, goal_id: int) -> None:
        self._get_owned_goal(subject_id, goal_id)
        self.repository.delete(goal_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_owned_goal(self, subject_id: str, goal_id: int) -> Goal:
        goal = self.repository.get_by_id(goal_id)
        if not goal or goal.subject_id != subject_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Goal not found",
            )
        return goal

    @staticmethod
    def _check_completion(goal: Goal) -> None:
        if goal.completed:
            return
        if target_reached(goal.type, goal.current_value, goal.target_value):
            goal.completed = True
            goal.completed_at = datetime.datetime.utcnow()
