"""
Profile endpoints — athletic profile classification.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_subject_id
from app.db.session import get_db
from app.momentum.profile import classify_profile
from app.schemas.profile import AthleticProfile, ProfileRequest, SubjectProfileRequest
from app.services.plan_service import PlanService

router = APIRouter()


@router.post("/profile/classify", summary="Classify a sample and optional field tests.",
             response_model=AthleticProfile, )
def classify(data: ProfileRequest):
    return classify_profile(data.sample, data.tests, data.background)


@router.post("/subjects/{subject_id}/profile", summary="Classify a subject from their latest sample.",
             response_model=AthleticProfile, )
def classify_subject(data: SubjectProfileRequest, subject_id: str = Depends(get_subject_id),
                     db: Session = Depends(get_db), ):
    return PlanService(db).classify_subject(subject_id, data.tests, data.background)
