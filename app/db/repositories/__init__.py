"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.fasting import FastingRepository

__all__ = [
    "UserRepository",
    "FastingRepository",
]
