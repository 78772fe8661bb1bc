"""Business logic services."""

from app.services.user_service import UserService
from app.services.fasting_service import FastingService

__all__ = [
    "UserService",
    "FastingService",
]
