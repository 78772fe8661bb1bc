"""Pydantic schemas for request/response validation."""

from app.schemas.common import OperationResult
from app.schemas.devotional import CurrentDayResponse, CurrentDayUpdate, DevotionalDay
from app.schemas.fasting import (
    Completed,
    CompleteFastRequest,
    FastHistoryResponse,
    FastingContent,
    FastingSessionResponse,
    FastingStatus,
    InProgress,
    NotStarted,
    StartFastRequest,
    VerseReference,
)

__all__ = [
    "OperationResult",
    "CurrentDayResponse",
    "CurrentDayUpdate",
    "DevotionalDay",
    "NotStarted",
    "InProgress",
    "Completed",
    "FastingStatus",
    "StartFastRequest",
    "CompleteFastRequest",
    "FastingSessionResponse",
    "FastHistoryResponse",
    "VerseReference",
    "FastingContent",
]
