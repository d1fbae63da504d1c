"""
Plan endpoints — periodized training and nutrition plans.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_subject_id
from app.db.session import get_db
from app.momentum.plan import generate_plan
from app.schemas.plan import GeneratedPlanBundle, GeneratedPlanResponse, PlanRequest, SubjectPlanRequest
from app.services.plan_service import PlanService

router = APIRouter()


@router.post("/plans/generate", summary="Generate a plan from a goal and a profile (not stored).",
             response_model=GeneratedPlanBundle, )
def generate(data: PlanRequest):
    return generate_plan(data.goal, data.profile)


@router.post("/subjects/{subject_id}/plans", summary="Generate and store a new plan version for a subject.",
             response_model=GeneratedPlanResponse, status_code=status.HTTP_201_CREATED, )
def create_subject_plan(data: SubjectPlanRequest, subject_id: str = Depends(get_subject_id),
                        db: Session = Depends(get_db), ):
    return PlanService(db).create_for_subject(subject_id, data.goal, data.tests, data.background)


@router.get("/subjects/{subject_id}/plans", summary="List stored plans, newest first.",
            response_model=list[GeneratedPlanResponse], )
def list_subject_plans(skip: int = Query(0, ge=0), limit: int = Query(20, ge=1, le=100),
                       subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return PlanService(db).get_all(subject_id, skip, limit)
