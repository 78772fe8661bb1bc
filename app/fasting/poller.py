"""
Background progress poller.

While the controller's snapshot is in progress, re-synchronizes it with
the store on a fixed interval.  Ticks never overlap: if a refresh is
still in flight when a tick fires, that tick is skipped.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Optional

from app.fasting.errors import StoreTransportError

if TYPE_CHECKING:
    from app.fasting.controller import FastingSessionController

logger = logging.getLogger(__name__)


class ProgressPoller:
    """Cancellable periodic refresh bound to one controller."""

    def __init__(self, controller: "FastingSessionController", interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError("Poll interval must be positive")
        self.controller = controller
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None
        self.ticks = 0
        self.skipped_ticks = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling.  No-op if already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="fasting-progress-poller")
        logger.debug("Progress poller started (every %ss)", self.interval_seconds)

    async def stop(self) -> None:
        """Stop polling and wait for the loop to exit."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        if task is asyncio.current_task():
            # Stopped from inside a tick; the loop sees the status change and exits
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("Progress poller stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            if not self.controller.is_in_progress:
                break
            if self.controller.refresh_in_flight:
                self.skipped_ticks += 1
                logger.debug("Skipping poll tick, refresh already in flight")
                continue

            self.ticks += 1
            try:
                await self.controller.refresh_progress()
            except StoreTransportError as e:
                logger.warning("Progress poll failed, keeping stale snapshot: %s", e)

            if not self.controller.is_in_progress:
                break
