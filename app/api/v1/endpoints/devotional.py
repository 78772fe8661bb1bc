"""
Devotional plan endpoints.

Serves the content of each day of the 30-day plan and tracks which day
the caller is on.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.content.devotional import get_devotional_day
from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.schemas.devotional import CurrentDayResponse, CurrentDayUpdate, DevotionalDay
from app.services.user_service import UserService

router = APIRouter()


@router.get("/days/{day}", summary="Get the content for one day of the plan.", response_model=DevotionalDay)
def read_devotional_day(day: int = Path(..., ge=1, le=settings.DEVOTIONAL_DAYS)):
    devotion = get_devotional_day(day)
    if devotion is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No content for day {day}")
    return devotion


@router.get("/current-day", summary="Get the caller's current plan day.", response_model=CurrentDayResponse)
def get_current_day(user: User = Depends(get_current_user)):
    return CurrentDayResponse(day=user.current_day)


@router.put("/current-day", summary="Set the caller's current plan day.", response_model=CurrentDayResponse)
def set_current_day(data: CurrentDayUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    user = UserService(db).set_current_day(user, data.day)
    return CurrentDayResponse(day=user.current_day)
