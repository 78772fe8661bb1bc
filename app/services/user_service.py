"""
User service.

Resolves caller identities to users and manages devotional progress.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.clock import utcnow
from app.core.config import settings
from app.db.repositories.user import UserRepository
from app.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self.repository = UserRepository(session)

    def get_or_create(self, principal: str) -> User:
        """
        Return the user for *principal*, creating it on first interaction.

        Args:
            principal: Caller identity string

        Returns:
            Existing or newly created user
        """
        user = self.repository.get_by_principal(principal)
        if user:
            return user

        try:
            user = self.repository.create(User(principal=principal))
        except IntegrityError:
            # Created concurrently by another request
            self.session.rollback()
            user = self.repository.get_by_principal(principal)
            if user is None:
                raise
            return user

        logger.info("Registered new user %s", principal)
        return user

    def set_current_day(self, user: User, day: int) -> User:
        """
        Move *user* to *day* of the devotional plan.

        Raises:
            HTTPException: If the day is outside the plan
        """
        if not 1 <= day <= settings.DEVOTIONAL_DAYS:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"Day must be between 1 and {settings.DEVOTIONAL_DAYS}")
        user.current_day = day
        user.updated_at = utcnow()
        return self.repository.update(user)
