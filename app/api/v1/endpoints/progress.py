"""
Progress endpoints — activity log, streaks, XP, levels and achievements.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_subject_id
from app.db.session import get_db
from app.momentum.achievements import catalogue
from app.schemas.achievement import AchievementDefinition, AchievementUnlockResponse
from app.schemas.activity import ActivityEventCreate, ActivityEventResponse
from app.schemas.progress import (
    GamificationSummary,
    ProgressStateResponse,
    RecordActivityResponse,
    WeeklyProgress,
)
from app.services.progress_service import ProgressService

router = APIRouter()


@router.get("/achievements", summary="List every achievement that can be unlocked.",
            response_model=list[AchievementDefinition], )
def list_achievement_catalogue():
    return catalogue()


@router.post("/subjects/{subject_id}/activities", summary="Record an activity event.",
             response_model=RecordActivityResponse, status_code=status.HTTP_201_CREATED, )
def record_activity(data: ActivityEventCreate, subject_id: str = Depends(get_subject_id),
                    db: Session = Depends(get_db), ):
    """Append the event and fold it into the progress state.

    Returns the new state, the XP the event earned and any achievements
    it unlocked.
    """
    return ProgressService(db).record_activity(subject_id, data)


@router.get("/subjects/{subject_id}/activities", summary="List logged activities, most recent first.",
            response_model=list[ActivityEventResponse], )
def list_activities(skip: int = Query(0, ge=0, description="Records to skip"),
                    limit: int = Query(100, ge=1, le=500, description="Max records to return"),
                    subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return ProgressService(db).get_activities(subject_id, skip, limit)


@router.get("/subjects/{subject_id}/progress", summary="Current progress state.",
            response_model=ProgressStateResponse, )
def get_progress(subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return ProgressService(db).get_progress(subject_id)


@router.get("/subjects/{subject_id}/progress/weekly", summary="Activity totals per week (weeks start on Sunday).",
            response_model=list[WeeklyProgress], )
def get_weekly_progress(weeks: int = Query(4, ge=1, le=52, description="Number of weeks"),
                        as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
                        subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return ProgressService(db).get_weekly(subject_id, weeks, as_of)


@router.get("/subjects/{subject_id}/gamification", summary="Level, streaks and unlocked achievements.",
            response_model=GamificationSummary, )
def get_gamification_summary(as_of: Optional[datetime.date] = Query(None, description="Reference date"),
                             subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return ProgressService(db).get_gamification_summary(subject_id, as_of)


@router.get("/subjects/{subject_id}/achievements", summary="Achievements unlocked by a subject.",
            response_model=list[AchievementUnlockResponse], )
def list_unlocked_achievements(subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return ProgressService(db).get_achievements(subject_id)
