"""
Generated plan database model.

A plan is an immutable artifact: each goal submission inserts a new row,
versioned by ``created_at``.  Plan bodies are stored as JSON exactly as
the generator produced them.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class GeneratedPlan(SQLModel, table=True):
    """A training + nutrition plan generated for a subject."""

    __tablename__ = "generated_plans"

    id: Optional[int] = Field(default=None, primary_key=True)
    subject_id: str = Field(nullable=False, max_length=64, index=True)

    objective: str = Field(nullable=False, max_length=30)
    periodization: str = Field(nullable=False, max_length=20)

    goal: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    profile: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    training_plan: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    nutrition_plan: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
