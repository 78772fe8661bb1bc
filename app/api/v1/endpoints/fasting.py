"""
Fasting endpoints.

Session lifecycle (start, complete, cancel), server-side progress
recomputation, and read access to the snapshot, history and content.
Mutations answer with an ``OperationResult``; rejected transitions are
``success: false``, not HTTP errors.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user, get_fasting_service
from app.models.user import User
from app.schemas.common import OperationResult
from app.schemas.fasting import (
    CompleteFastRequest,
    FastHistoryResponse,
    FastingContent,
    FastingSessionResponse,
    StartFastRequest,
)
from app.services.fasting_service import FastingService

router = APIRouter()


@router.post("/start", summary="Start a new fast.", response_model=OperationResult)
def start_new_fast(data: StartFastRequest, service: FastingService = Depends(get_fasting_service),
                   user: User = Depends(get_current_user), ):
    return service.start_new_fast(user.id, data.goal_hours)


@router.post("/complete", summary="Complete the active fast with a reflection.", response_model=OperationResult)
def complete_fast(data: CompleteFastRequest, service: FastingService = Depends(get_fasting_service),
                  user: User = Depends(get_current_user), ):
    return service.complete_fast(user.id, data.reflection_journal)


@router.post("/cancel", summary="Cancel the active fast without recording it.", response_model=OperationResult)
def cancel_current_fast(service: FastingService = Depends(get_fasting_service),
                        user: User = Depends(get_current_user), ):
    return service.cancel_current_fast(user.id)


@router.post("/progress/update", summary="Recompute elapsed time of the active fast.",
             response_model=OperationResult)
def update_fasting_progress(service: FastingService = Depends(get_fasting_service),
                            user: User = Depends(get_current_user), ):
    return service.update_fasting_progress(user.id)


@router.get("/progress", summary="Get the current fasting session.", response_model=FastingSessionResponse)
def get_fasting_progress(service: FastingService = Depends(get_fasting_service),
                         user: User = Depends(get_current_user), ):
    return service.get_fasting_progress(user.id)


@router.get("/sessions", summary="List the caller's fasting sessions.",
            response_model=list[FastingSessionResponse])
def get_all_fasting_sessions(service: FastingService = Depends(get_fasting_service),
                             user: User = Depends(get_current_user), ):
    return service.get_all_fasting_sessions(user.id)


@router.get("/history", summary="List completed fasts.", response_model=list[FastHistoryResponse])
def get_fasting_history(service: FastingService = Depends(get_fasting_service),
                        user: User = Depends(get_current_user), ):
    return service.get_fasting_history(user.id)


@router.get("/content", summary="Get fasting page content.", response_model=FastingContent)
def get_fasting_content():
    return FastingService.get_fasting_content()
