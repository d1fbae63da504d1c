"""
Shared API dependencies.

Reusable FastAPI dependencies for subject identification.  Subjects are
identified by an opaque caller-supplied id; authentication happens
upstream of this service.
"""

from fastapi import Path

SUBJECT_ID_PATTERN = r"^[A-Za-z0-9_.:@-]+$"


def get_subject_id(subject_id: str = Path(..., min_length=1, max_length=64, pattern=SUBJECT_ID_PATTERN,
                                          description="Opaque subject identifier"), ) -> str:
    """Validate the ``{subject_id}`` path segment."""
    return subject_id
