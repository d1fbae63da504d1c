"""
Sample endpoints.

Append-only physiological sample log of a subject and the views
derived from it (current metrics, progress summary).
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_subject_id
from app.db.session import get_db
from app.schemas.progress import ProgressSummary
from app.schemas.sample import DerivedMetrics, PhysiologicalSampleCreate, PhysiologicalSampleResponse
from app.services.sample_service import SampleService

router = APIRouter()


@router.post("/{subject_id}/samples", summary="Append a physiological sample.",
             response_model=PhysiologicalSampleResponse, status_code=status.HTTP_201_CREATED, )
def append_sample(data: PhysiologicalSampleCreate, subject_id: str = Depends(get_subject_id),
                  db: Session = Depends(get_db), ):
    return SampleService(db).append(subject_id, data)


@router.get("/{subject_id}/samples", summary="List samples, most recent first.",
            response_model=list[PhysiologicalSampleResponse], )
def list_samples(skip: int = Query(0, ge=0, description="Records to skip"),
                 limit: int = Query(100, ge=1, le=500, description="Max records to return"),
                 subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return SampleService(db).get_all(subject_id, skip, limit)


@router.get("/{subject_id}/samples/latest", summary="Get the most recent sample.",
            response_model=PhysiologicalSampleResponse, )
def get_latest_sample(subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return SampleService(db).get_latest(subject_id)


@router.delete("/{subject_id}/samples/{sample_id}", summary="Delete a sample.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_sample(sample_id: int, subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    SampleService(db).delete(subject_id, sample_id)


@router.get("/{subject_id}/metrics", summary="Derived metrics of the latest sample.", response_model=DerivedMetrics, )
def get_metrics(activity_level: str = Query(..., description="sedentary, light, moderate or intense"),
                subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return SampleService(db).compute_metrics(subject_id, activity_level)


@router.get("/{subject_id}/progress/summary", summary="Body metric changes and trends over a window.",
            response_model=ProgressSummary, )
def get_progress_summary(window: str = Query("30d", description="7d, 30d or 90d"),
                         subject_id: str = Depends(get_subject_id), db: Session = Depends(get_db), ):
    return SampleService(db).get_progress_summary(subject_id, window)
