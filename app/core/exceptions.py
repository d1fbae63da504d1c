"""
Error taxonomy for the progress & personalization engine.

Every error the engine raises derives from :class:`MomentumError` and
carries a stable ``kind`` string that the API layer reports back to the
caller.  None of these errors implies corrupted data, only rejected or
postponed processing.
"""


class MomentumError(Exception):
    """Base class for all engine errors."""

    kind: str = "processing_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(MomentumError):
    """Malformed or out-of-domain numeric input to a pure function."""

    kind = "invalid_input"


class InvalidEvent(MomentumError):
    """Malformed activity event."""

    kind = "invalid_event"


class IncompletePlanInput(MomentumError):
    """Plan generation is missing required goal or profile fields."""

    kind = "incomplete_plan_input"

    def __init__(self, missing: list[str]):
        super().__init__(f"Missing required plan input: {', '.join(missing)}")
        self.missing = missing


class NotFound(MomentumError):
    """No progress state or no samples where some were required."""

    kind = "not_found"


class ConcurrencyConflict(MomentumError):
    """Optimistic version check failed (after retries, when surfaced)."""

    kind = "concurrency_conflict"
