"""
Devotional plan schemas.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings


class CurrentDayResponse(BaseModel):
    day: int


class CurrentDayUpdate(BaseModel):
    """Schema for moving to another day of the devotional plan."""

    day: int = Field(..., ge=1, le=settings.DEVOTIONAL_DAYS, description="Day of the plan (1-based)")


class DevotionalDay(BaseModel):
    """Content for one day of the plan; scripture is quoted from the KJV."""

    model_config = ConfigDict(frozen=True)

    day_number: int = Field(..., ge=1)
    title: str
    scripture: str
    guidance: str
    reflection: str
    action: str = ""
