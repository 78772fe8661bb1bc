"""SQLModel database models."""

from app.models.user import User
from app.models.fasting import FastHistory, FastingSession

__all__ = [
    "User",
    "FastingSession",
    "FastHistory",
]
