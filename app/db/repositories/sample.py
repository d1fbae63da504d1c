"""
Physiological sample repository.

Handles database operations for the append-only PhysiologicalSample log.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.sample import PhysiologicalSample


class SampleRepository:
    """Repository for PhysiologicalSample database operations."""

    def __init__(self, session: Session):
        self.session = session

    def append(self, sample: PhysiologicalSample) -> PhysiologicalSample:
        self.session.add(sample)
        self.session.commit()
        self.session.refresh(sample)
        return sample

    def get_by_id(self, sample_id: int) -> Optional[PhysiologicalSample]:
        return self.session.get(PhysiologicalSample, sample_id)

    def get_latest(self, subject_id: str) -> Optional[PhysiologicalSample]:
        """Most recent sample by measurement time (ties broken by id)."""
        statement = (
            select(PhysiologicalSample)
            .where(PhysiologicalSample.subject_id == subject_id)
            .order_by(PhysiologicalSample.measured_at.desc(), PhysiologicalSample.id.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def get_since(
        self, subject_id: str, start: datetime.datetime,
    ) -> list[PhysiologicalSample]:
        """Samples measured at or after ``start``, oldest first."""
        statement = (
            select(PhysiologicalSample)
            .where(
                PhysiologicalSample.subject_id == subject_id,
                PhysiologicalSample.measured_at >= start,
            )
            .order_by(PhysiologicalSample.measured_at, PhysiologicalSample.id)
        )
        return list(self.session.exec(statement).all())

    def get_all_by_subject(
        self, subject_id: str, skip: int = 0, limit: int = 100,
    ) -> list[PhysiologicalSample]:
        """Get all samples for a subject with pagination, newest first."""
        statement = (
            select(PhysiologicalSample)
            .where(PhysiologicalSample.subject_id == subject_id)
            .order_by(PhysiologicalSample.measured_at.desc(), PhysiologicalSample.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def delete(self, sample_id: int) -> bool:
        sample = self.get_by_id(sample_id)
        if sample:
            self.session.delete(sample)
            self.session.commit()
            return True
        return False
