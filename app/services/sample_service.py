"""
Physiological sample service.

Business logic for the sample log and everything derived from it:
current metrics and the windowed progress summary.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.exceptions import NotFound
from app.db.repositories.sample import SampleRepository
from app.models.sample import PhysiologicalSample
from app.momentum import metrics, trends
from app.schemas.progress import ProgressSummary
from app.schemas.sample import (
    DerivedMetrics,
    PhysiologicalSampleCreate,
    PhysiologicalSampleResponse,
)

log = logging.getLogger(__name__)


class SampleService:
    """Service for sample data business logic."""

    def __init__(self, session: Session):
        self.repository = SampleRepository(session)

    # ------------------------------------------------------------------
    # Sample log
    # ------------------------------------------------------------------

    def append(self, subject_id: str, data: PhysiologicalSampleCreate) -> PhysiologicalSampleResponse:
        values = data.model_dump(mode="json", exclude={"measured_at"})
        sample = PhysiologicalSample(
            subject_id=subject_id,
            measured_at=data.measured_at or datetime.datetime.utcnow(),
            **values,
        )
        sample = self.repository.append(sample)
        log.debug("Appended sample %s for subject %s", sample.id, subject_id)
        return PhysiologicalSampleResponse.model_validate(sample)

    def load_latest(self, subject_id: str) -> PhysiologicalSample:
        sample = self.repository.get_latest(subject_id)
        if sample is None:
            raise NotFound(f"No samples recorded for subject {subject_id}")
        return sample

    def get_latest(self, subject_id: str) -> PhysiologicalSampleResponse:
        return PhysiologicalSampleResponse.model_validate(self.load_latest(subject_id))

    def get_all(
        self, subject_id: str, skip: int = 0, limit: int = 100,
    ) -> list[PhysiologicalSampleResponse]:
        samples = self.repository.get_all_by_subject(subject_id, skip, limit)
        return [PhysiologicalSampleResponse.model_validate(s) for s in samples]

    def delete(self, subject_id: str, sample_id: int) -> None:
        """Delete one sample.  Progress state is left untouched."""
        sample = self.repository.get_by_id(sample_id)
        if not sample or sample.subject_id != subject_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Sample not found",
            )
        self.repository.delete(sample_id)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def compute_metrics(self, subject_id: str, activity_level: str) -> DerivedMetrics:
        return metrics.compute_metrics(self.load_latest(subject_id), activity_level)

    def get_progress_summary(
        self,
        subject_id: str,
        window: str,
        now: Optional[datetime.datetime] = None,
    ) -> ProgressSummary:
        """Change and trend of each body metric over the last 7, 30 or 90 days."""
        window = trends.parse_window(window)
        since = trends.window_start(window, now or datetime.datetime.utcnow())
        samples = self.repository.get_since(subject_id, since)
        if not samples:
            raise NotFound(f"No samples for subject {subject_id} in the last {window.value}")

        changes = trends.summarize(samples)
        return ProgressSummary(
            subject_id=subject_id,
            window=window,
            sample_count=len(samples),
            since=since,
            **changes,
        )
