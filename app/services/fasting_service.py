"""
Fasting service.

Authoritative side of the fasting session state machine:

    not_started --start--> in_progress --complete--> completed
                              |                          |
                              +--cancel--> not_started   +--start--> in_progress

Elapsed time is derived from the store clock (``now - start_time``)
and is never accepted from callers.  Mutations for one user are
serialized so that at most one session exists per user; expected
business conditions are reported as :class:`OperationResult` failures.
"""

import logging
import threading
import weakref
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.content.fasting import FASTING_CONTENT
from app.core.clock import Clock, as_utc, utcnow
from app.core.config import settings
from app.db.repositories.fasting import FastingRepository
from app.models.fasting import (
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_NOT_STARTED,
    FastHistory,
    FastingSession,
)
from app.schemas.common import (
    REASON_FAST_IN_PROGRESS,
    REASON_GOAL_OUT_OF_RANGE,
    REASON_NO_ACTIVE_FAST,
    OperationResult,
)
from app.schemas.fasting import (
    Completed,
    FastHistoryResponse,
    FastingContent,
    FastingSessionResponse,
    InProgress,
    NotStarted,
)

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600

# Locks live only while some request holds them
_user_locks: "weakref.WeakValueDictionary[int, threading.Lock]" = weakref.WeakValueDictionary()
_user_locks_guard = threading.Lock()


def _user_lock(user_id: int) -> threading.Lock:
    with _user_locks_guard:
        lock = _user_locks.get(user_id)
        if lock is None:
            lock = _user_locks[user_id] = threading.Lock()
        return lock


def elapsed_whole_hours(start_time, now) -> int:
    """Whole hours between *start_time* and *now*, never negative."""
    return max(0, int((as_utc(now) - as_utc(start_time)).total_seconds() // SECONDS_PER_HOUR))


class FastingService:
    """Service for fasting session business logic."""

    def __init__(self, session: Session, clock: Clock = utcnow, min_goal_hours: Optional[int] = None,
                 max_goal_hours: Optional[int] = None, overwrite_active: Optional[bool] = None, ):
        self.session = session
        self.repository = FastingRepository(session)
        self.clock = clock
        self.min_goal_hours = settings.FASTING_MIN_GOAL_HOURS if min_goal_hours is None else min_goal_hours
        self.max_goal_hours = settings.FASTING_MAX_GOAL_HOURS if max_goal_hours is None else max_goal_hours
        self.overwrite_active = settings.FASTING_OVERWRITE_ACTIVE if overwrite_active is None else overwrite_active

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def start_new_fast(self, user_id: int, goal_hours: int) -> OperationResult:
        if not self.min_goal_hours <= goal_hours <= self.max_goal_hours:
            logger.info("Rejected fast start for user %s: goal %s outside [%s, %s]", user_id, goal_hours,
                        self.min_goal_hours, self.max_goal_hours)
            return OperationResult.failed(REASON_GOAL_OUT_OF_RANGE)

        with _user_lock(user_id):
            entry = self.repository.get_session(user_id)
            if entry is not None and entry.status == STATUS_IN_PROGRESS and not self.overwrite_active:
                logger.info("Rejected fast start for user %s: a fast is already in progress", user_id)
                return OperationResult.failed(REASON_FAST_IN_PROGRESS)

            now = self.clock()
            if entry is None:
                entry = FastingSession(user_id=user_id)
            entry.status = STATUS_IN_PROGRESS
            entry.goal_hours = goal_hours
            entry.start_time = now
            entry.elapsed_hours = 0
            entry.reflection_journal = ""
            entry.timestamp = now
            try:
                self.repository.save_session(entry)
            except IntegrityError:
                # Another worker created this user's session first
                self.session.rollback()
                logger.info("Rejected fast start for user %s: session created concurrently", user_id)
                return OperationResult.failed(REASON_FAST_IN_PROGRESS)

        logger.info("Fast started for user %s with a %dh goal", user_id, goal_hours)
        return OperationResult.ok()

    def complete_fast(self, user_id: int, reflection_journal: str) -> OperationResult:
        with _user_lock(user_id):
            entry = self.repository.get_session(user_id)
            if entry is None or entry.status != STATUS_IN_PROGRESS:
                return OperationResult.failed(REASON_NO_ACTIVE_FAST)

            now = self.clock()
            history = FastHistory(user_id=user_id, start_time=entry.start_time, end_time=now,
                                  goal_hours=entry.goal_hours, reflection_journal=reflection_journal, timestamp=now, )
            entry.status = STATUS_COMPLETED
            entry.elapsed_hours = None
            entry.reflection_journal = reflection_journal
            entry.timestamp = now
            self.repository.complete_session(entry, history)

        logger.info("Fast completed for user %s", user_id)
        return OperationResult.ok()

    def cancel_current_fast(self, user_id: int) -> OperationResult:
        with _user_lock(user_id):
            entry = self.repository.get_session(user_id)
            if entry is None or entry.status != STATUS_IN_PROGRESS:
                return OperationResult.failed(REASON_NO_ACTIVE_FAST)

            entry.status = STATUS_NOT_STARTED
            entry.start_time = None
            entry.elapsed_hours = None
            entry.timestamp = self.clock()
            self.repository.save_session(entry)

        logger.info("Fast cancelled for user %s", user_id)
        return OperationResult.ok()

    def update_fasting_progress(self, user_id: int) -> OperationResult:
        """Recompute elapsed hours from the store clock.

        The stored value never decreases, so repeated refreshes are
        monotonic even if the clock steps backwards.
        """
        with _user_lock(user_id):
            entry = self.repository.get_session(user_id)
            if entry is None or entry.status != STATUS_IN_PROGRESS:
                return OperationResult.failed(REASON_NO_ACTIVE_FAST)

            now = self.clock()
            entry.elapsed_hours = max(entry.elapsed_hours or 0, elapsed_whole_hours(entry.start_time, now))
            entry.timestamp = now
            self.repository.save_session(entry)

        return OperationResult.ok()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_fasting_progress(self, user_id: int) -> FastingSessionResponse:
        entry = self.repository.get_session(user_id)
        if entry is None:
            return FastingSessionResponse(status=NotStarted(), timestamp=self.clock())
        return self._to_response(entry)

    def get_all_fasting_sessions(self, user_id: int) -> list[FastingSessionResponse]:
        return [self._to_response(e) for e in self.repository.list_sessions(user_id)]

    def get_fasting_history(self, user_id: int) -> list[FastHistoryResponse]:
        return [FastHistoryResponse.model_validate(h) for h in self.repository.list_history(user_id)]

    @staticmethod
    def get_fasting_content() -> FastingContent:
        return FASTING_CONTENT

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(entry: FastingSession) -> FastingSessionResponse:
        if entry.status == STATUS_IN_PROGRESS:
            state = InProgress(elapsed_hours=entry.elapsed_hours or 0)
        elif entry.status == STATUS_COMPLETED:
            state = Completed()
        else:
            state = NotStarted()

        return FastingSessionResponse(status=state, goal_hours=entry.goal_hours, start_time=entry.start_time,
                                      timestamp=entry.timestamp, reflection_journal=entry.reflection_journal, )
