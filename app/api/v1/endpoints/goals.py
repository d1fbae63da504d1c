"""
Goal endpoints.

Goal CRUD and progress updates for a subject.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_subject_id
from app.db.session import get_db
from app.schemas.goal import GoalCreate, GoalProgressUpdate, GoalResponse, GoalUpdate
from app.services.goal_service import GoalService

router = APIRouter()


@router.post("/{subject_id}/goals", summary="Create a goal.", response_model=GoalResponse,
             status_code=status.HTTP_201_CREATED, )
def create_goal(data: GoalCreate, subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return GoalService(db).create(subject_id, data)


@router.get("/{subject_id}/goals", summary="List goals.", response_model=list[GoalResponse], )
def list_goals(completed: Optional[bool] = Query(None, description="Filter by completion"),
               subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return GoalService(db).get_all(subject_id, completed)


@router.get("/{subject_id}/goals/{goal_id}", summary="Get a goal.", response_model=GoalResponse, )
def get_goal(goal_id: int, subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return GoalService(db).get(subject_id, goal_id)


@router.patch("/{subject_id}/goals/{goal_id}", summary="Update a goal.", response_model=GoalResponse, )
def update_goal(goal_id: int, data: GoalUpdate, subject_id: str = Depends(get_subject_id),
                db: Session = Depends(get_db), ):
    return GoalService(db).update(subject_id, goal_id, data)


@router.put("/{subject_id}/goals/{goal_id}/progress", summary="Set the current value of a goal.",
            response_model=GoalResponse, )
def update_goal_progress(goal_id: int, data: GoalProgressUpdate, subject_id: str = Depends(get_subject_id),
                         db: Session = Depends(get_db), ):
    return GoalService(db).update_progress(subject_id, goal_id, data)


@router.delete("/{subject_id}/goals/{goal_id}", summary="Delete a goal.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_goal(goal_id: int, subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    GoalService(db).delete(subject_id, goal_id)
