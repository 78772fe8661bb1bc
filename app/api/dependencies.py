"""
Shared API dependencies.

Reusable FastAPI dependencies for identity, clock and database access.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from sqlmodel import Session

from app.core.clock import Clock, utcnow
from app.db.session import get_db
from app.models.user import User
from app.services.fasting_service import FastingService
from app.services.user_service import UserService

PRINCIPAL_HEADER = "X-Principal"

principal_scheme = APIKeyHeader(name=PRINCIPAL_HEADER, auto_error=False)


def get_clock() -> Clock:
    """Store clock; overridden in tests to simulate elapsed time."""
    return utcnow


def get_current_user(principal: Optional[str] = Depends(principal_scheme), db: Session = Depends(get_db), ) -> User:
    """Resolve the caller identity, registering the user on first interaction."""
    if not principal or not principal.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Identity not established",
                            headers={ "WWW-Authenticate": PRINCIPAL_HEADER }, )
    return UserService(db).get_or_create(principal.strip())


def get_fasting_service(db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ) -> FastingService:
    return FastingService(db, clock=clock)
