"""
Shared API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Reason codes for failed store operations
REASON_GOAL_OUT_OF_RANGE = "goal_out_of_range"
REASON_FAST_IN_PROGRESS = "fast_in_progress"
REASON_NO_ACTIVE_FAST = "no_active_fast"


class OperationResult(BaseModel):
    """Outcome of a store mutation.

    Expected business conditions are reported here with ``success=False``
    rather than as HTTP errors.
    """

    success: bool
    reason: Optional[str] = Field(None, description="Machine-readable failure reason")

    @classmethod
    def ok(cls) -> "OperationResult":
        return cls(success=True)

    @classmethod
    def failed(cls, reason: str) -> "OperationResult":
        return cls(success=False, reason=reason)
