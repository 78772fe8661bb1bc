"""
Fasting API schemas.

The session status is a tagged union discriminated by ``kind``; only
the in-progress variant carries an elapsed-time payload, so states such
as "completed with elapsed hours" cannot be represented.
"""

import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.clock import as_utc


# ======================================================================
# Session status
# ======================================================================


class NotStarted(BaseModel):
    """No active or completed session."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_started"] = "not_started"


class InProgress(BaseModel):
    """A session is active; ``elapsed_hours`` as last computed by the store."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["in_progress"] = "in_progress"
    elapsed_hours: int = Field(..., ge=0)


class Completed(BaseModel):
    """The most recent session ran to completion."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["completed"] = "completed"


FastingStatus = Annotated[Union[NotStarted, InProgress, Completed], Field(discriminator="kind")]


# ======================================================================
# Requests
# ======================================================================


class StartFastRequest(BaseModel):
    """Schema for starting a fast.

    The goal range is checked by the service so that an out-of-range
    goal is reported as an ordinary failed operation.
    """

    goal_hours: int = Field(..., description="Target duration in hours")


class CompleteFastRequest(BaseModel):
    """Schema for completing the active fast."""

    reflection_journal: str = Field("", max_length=10000, description="Reflection written at completion")


# ======================================================================
# Responses
# ======================================================================


class FastingSessionResponse(BaseModel):
    """Point-in-time snapshot of a user's fasting session."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    status: FastingStatus
    goal_hours: Optional[int] = None
    start_time: Optional[datetime.datetime] = None
    timestamp: datetime.datetime
    reflection_journal: str = ""

    @field_validator("start_time", "timestamp")
    @classmethod
    def normalize_utc(cls, value):
        return as_utc(value)

    @property
    def is_in_progress(self) -> bool:
        return isinstance(self.status, InProgress)

    @property
    def elapsed_hours(self) -> int:
        """Elapsed whole hours, 0 unless a session is in progress."""
        return self.status.elapsed_hours if isinstance(self.status, InProgress) else 0


class FastHistoryResponse(BaseModel):
    """A completed fast."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    start_time: datetime.datetime
    end_time: datetime.datetime
    goal_hours: int
    timestamp: datetime.datetime
    reflection_journal: str = ""

    @field_validator("start_time", "end_time", "timestamp")
    @classmethod
    def normalize_utc(cls, value):
        return as_utc(value)


class VerseReference(BaseModel):
    book: str
    chapter: int = Field(..., ge=1)
    verse_start: int = Field(..., ge=1)
    verse_end: int = Field(..., ge=1)


class FastingContent(BaseModel):
    """Static descriptive and encouragement text for the fasting page."""

    model_config = ConfigDict(frozen=True)

    description: str
    reflection_prompt: str
    completion_encouragement: str
    scripture_references: list[VerseReference] = Field(default_factory=list)
    hourly_encouragement: list[str] = Field(default_factory=list)
