"""
Fasting database models.

``FastingSession`` holds the single current session per user and is
overwritten on every new start.  ``FastHistory`` is the append-only log
of completed sessions.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utcnow

STATUS_NOT_STARTED = "not_started"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"

FASTING_STATUSES = (STATUS_NOT_STARTED, STATUS_IN_PROGRESS, STATUS_COMPLETED)


class FastingSession(SQLModel, table=True):
    """The current fasting session of a user (exactly one row per user)."""

    __tablename__ = "fasting_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    status: str = Field(default=STATUS_NOT_STARTED, nullable=False, max_length=20)
    goal_hours: Optional[int] = Field(default=None)
    start_time: Optional[datetime.datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    # Only meaningful while in progress; cleared on completion or cancel
    elapsed_hours: Optional[int] = Field(default=None)

    reflection_journal: str = Field(default="", nullable=False)
    timestamp: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))


class FastHistory(SQLModel, table=True):
    """An immutable record of a completed fast."""

    __tablename__ = "fast_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    start_time: datetime.datetime = Field(nullable=False, sa_type=DateTime(timezone=True))
    end_time: datetime.datetime = Field(nullable=False, index=True, sa_type=DateTime(timezone=True))
    goal_hours: int = Field(nullable=False)
    reflection_journal: str = Field(default="", nullable=False)
    timestamp: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
