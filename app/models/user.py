"""
User database model.

A user is identified by an opaque principal string supplied by the
caller and is created on first interaction with the store.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utcnow


class User(SQLModel, table=True):
    """
    User model.

    Stores the identity and the 30-day devotional progress.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    principal: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Devotional plan progress (1-based day)
    current_day: int = Field(default=1, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
