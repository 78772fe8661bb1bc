"""
Fasting session controller.

Client-side owner of a disposable snapshot of the user's fasting
session.  The store is authoritative for both state and elapsed time;
the controller only validates intents, forwards them, and replaces its
snapshot with what the store reports.

State machine
-------------
============  =====================  ================  ============
From          Trigger                Guard             To
============  =====================  ================  ============
NotStarted    start_fast(goal)       1 <= goal <= 72   InProgress
Completed     start_fast(goal)       1 <= goal <= 72   InProgress
InProgress    complete_fast(text)    session active    Completed
InProgress    cancel_fast()          session active    NotStarted
any           refresh_progress()     -                 unchanged
============  =====================  ================  ============

Consistency
-----------
* Business failures come back as :class:`FastOutcome` with
  ``success=False``; only transport problems raise
  (:class:`~app.fasting.errors.StoreTransportError`).  On a transport
  error the last good snapshot is kept and flagged stale.
* Every mutation bumps a generation counter.  A refresh that overlaps a
  mutation is discarded so a stale read never overwrites the result of
  a newer user action.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel

from app.core.config import settings
from app.fasting.errors import StoreTransportError
from app.fasting.poller import ProgressPoller
from app.fasting.progress import FastingProgressView, build_progress_view
from app.fasting.store import FastingStore
from app.schemas.common import REASON_GOAL_OUT_OF_RANGE, REASON_NO_ACTIVE_FAST, OperationResult
from app.schemas.fasting import FastHistoryResponse, FastingContent, FastingSessionResponse

logger = logging.getLogger(__name__)


class FastOutcome(BaseModel):
    """Result of a controller operation."""

    success: bool
    reason: Optional[str] = None
    snapshot: Optional[FastingSessionResponse] = None


class FastingSessionController:
    """Drives one user's fasting session against a :class:`FastingStore`."""

    def __init__(self, store: FastingStore, poll_interval_seconds: Optional[float] = None,
                 min_goal_hours: Optional[int] = None, max_goal_hours: Optional[int] = None,
                 auto_poll: bool = True, ):
        self.store = store
        self.min_goal_hours = settings.FASTING_MIN_GOAL_HOURS if min_goal_hours is None else min_goal_hours
        self.max_goal_hours = settings.FASTING_MAX_GOAL_HOURS if max_goal_hours is None else max_goal_hours
        self.auto_poll = auto_poll

        interval = settings.FASTING_POLL_INTERVAL_SECONDS if poll_interval_seconds is None else poll_interval_seconds
        self.poller = ProgressPoller(self, interval)

        self._snapshot: Optional[FastingSessionResponse] = None
        self._stale = False
        self._content: Optional[FastingContent] = None
        self._generation = 0
        self._pending_mutations = 0
        self._refresh_lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> Optional[FastingSessionResponse]:
        return self._snapshot

    @property
    def is_stale(self) -> bool:
        """True when the last store call failed and the snapshot may be outdated."""
        return self._stale

    @property
    def is_in_progress(self) -> bool:
        return self._snapshot is not None and self._snapshot.is_in_progress

    @property
    def refresh_in_flight(self) -> bool:
        return self._refresh_lock.locked()

    def progress_view(self) -> Optional[FastingProgressView]:
        if self._snapshot is None:
            return None
        return build_progress_view(self._snapshot, self._content)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def start_fast(self, goal_hours: int) -> FastOutcome:
        if isinstance(goal_hours, bool) or not isinstance(goal_hours, int) \
                or not self.min_goal_hours <= goal_hours <= self.max_goal_hours:
            logger.info("Refusing to start fast: goal %r outside [%s, %s]", goal_hours, self.min_goal_hours,
                        self.max_goal_hours)
            return FastOutcome(success=False, reason=REASON_GOAL_OUT_OF_RANGE, snapshot=self._snapshot)
        return await self._mutate("start", lambda: self.store.start_new_fast(goal_hours))

    async def complete_fast(self, reflection_text: str) -> FastOutcome:
        if not await self._has_active_fast():
            return FastOutcome(success=False, reason=REASON_NO_ACTIVE_FAST, snapshot=self._snapshot)
        return await self._mutate("complete", lambda: self.store.complete_fast(reflection_text))

    async def cancel_fast(self) -> FastOutcome:
        if not await self._has_active_fast():
            return FastOutcome(success=False, reason=REASON_NO_ACTIVE_FAST, snapshot=self._snapshot)
        return await self._mutate("cancel", self.store.cancel_current_fast)

    async def refresh_progress(self) -> FastingSessionResponse:
        """Have the store recompute elapsed time and replace the snapshot.

        Returns the snapshot held after the call.  If a mutation overlapped
        the read, the read is dropped and the mutation's snapshot is kept.
        """
        async with self._refresh_lock:
            generation = self._generation
            overlapped = self._pending_mutations > 0
            try:
                await self.store.update_fasting_progress()
                snapshot = await self.store.get_fasting_progress()
            except StoreTransportError:
                self._mark_stale("refresh")
                raise

            if overlapped or self._pending_mutations > 0 or generation != self._generation:
                logger.debug("Dropping progress read superseded by a newer mutation")
                return self._snapshot if self._snapshot is not None else snapshot

            await self._apply_snapshot(snapshot)
            return snapshot

    async def get_content(self) -> FastingContent:
        """Fasting page content, fetched once per controller."""
        if self._content is None:
            self._content = await self.store.get_fasting_content()
        return self._content

    async def get_history(self) -> list[FastHistoryResponse]:
        return await self.store.get_fasting_history()

    async def close(self) -> None:
        """Tear down background polling."""
        await self.poller.stop()

    async def __aenter__(self) -> "FastingSessionController":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _has_active_fast(self) -> bool:
        if self._snapshot is None or self._stale:
            await self.refresh_progress()
        return self.is_in_progress

    async def _mutate(self, action: str, call: Callable[[], Awaitable[OperationResult]]) -> FastOutcome:
        self._generation += 1
        generation = self._generation
        self._pending_mutations += 1
        try:
            result = await call()
            # Re-read even on rejection so an existing session is shown
            snapshot = await self.store.get_fasting_progress()
        except StoreTransportError:
            self._mark_stale(action)
            raise
        finally:
            self._pending_mutations -= 1

        if generation == self._generation:
            await self._apply_snapshot(snapshot)

        if result.success:
            logger.info("Fast %s succeeded", action)
        else:
            logger.info("Fast %s rejected by store: %s", action, result.reason)
        return FastOutcome(success=result.success, reason=result.reason, snapshot=self._snapshot)

    async def _apply_snapshot(self, snapshot: FastingSessionResponse) -> None:
        previous = self._snapshot
        self._snapshot = snapshot
        self._stale = False
        if previous is None or previous.status.kind != snapshot.status.kind:
            logger.info("Fasting status is now %s", snapshot.status.kind)
        await self._sync_polling()

    async def _sync_polling(self) -> None:
        if self.auto_poll and self.is_in_progress:
            self.poller.start()
        else:
            await self.poller.stop()

    def _mark_stale(self, action: str) -> None:
        self._stale = True
        logger.warning("Fasting store unavailable during %s; keeping last known snapshot", action)
