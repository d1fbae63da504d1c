"""
Physiological sample database model.

Samples are append-only: a new measurement is a new row, rows are never
mutated.  The latest row per subject feeds the derived metrics.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class PhysiologicalSample(SQLModel, table=True):
    """A single anthropometric measurement of a subject."""

    __tablename__ = "physiological_samples"

    id: Optional[int] = Field(default=None, primary_key=True)
    subject_id: str = Field(nullable=False, max_length=64, index=True)

    weight_kg: float = Field(nullable=False)
    height_cm: float = Field(nullable=False)
    sex: str = Field(nullable=False, max_length=10)
    age_years: int = Field(nullable=False)

    # Optional body composition
    body_fat_pct: Optional[float] = Field(default=None)
    muscle_mass_kg: Optional[float] = Field(default=None)
    waist_cm: Optional[float] = Field(default=None)

    measured_at: datetime.datetime = Field(nullable=False, index=True)
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
