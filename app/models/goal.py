"""
Goal database model.

Goals are user-declared targets.  They are mutated by explicit progress
updates from callers, never by the progress ledger.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Goal(SQLModel, table=True):
    """A subject's declared target (weight, muscle, habits...)."""

    __tablename__ = "goals"

    id: Optional[int] = Field(default=None, primary_key=True)
    subject_id: str = Field(nullable=False, max_length=64, index=True)

    type: str = Field(nullable=False, max_length=30)
    title: str = Field(nullable=False, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)

    target_value: float = Field(nullable=False)
    current_value: float = Field(nullable=False)
    unit: str = Field(nullable=False, max_length=20)
    target_date: datetime.date = Field(nullable=False)

    completed: bool = Field(default=False, nullable=False)
    completed_at: Optional[datetime.datetime] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
