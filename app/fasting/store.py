"""
Remote store contract.

The operations the fasting controller consumes.  The HTTP client in
:mod:`app.fasting.client` is the production implementation; anything
else implementing this interface (e.g. an in-memory fake) can be handed
to the controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.schemas.common import OperationResult
from app.schemas.fasting import FastHistoryResponse, FastingContent, FastingSessionResponse


class FastingStore(ABC):
    """Abstract async interface of the remote fasting store.

    Implementations report business failures through
    :class:`OperationResult` and raise
    :class:`~app.fasting.errors.StoreTransportError` for transport problems.
    """

    @abstractmethod
    async def start_new_fast(self, goal_hours: int) -> OperationResult:
        ...

    @abstractmethod
    async def complete_fast(self, reflection_journal: str) -> OperationResult:
        ...

    @abstractmethod
    async def cancel_current_fast(self) -> OperationResult:
        ...

    @abstractmethod
    async def update_fasting_progress(self) -> OperationResult:
        """Ask the store to recompute elapsed time of the active fast."""

    @abstractmethod
    async def get_fasting_progress(self) -> FastingSessionResponse:
        ...

    @abstractmethod
    async def get_all_fasting_sessions(self) -> list[FastingSessionResponse]:
        ...

    @abstractmethod
    async def get_fasting_history(self) -> list[FastHistoryResponse]:
        ...

    @abstractmethod
    async def get_fasting_content(self) -> FastingContent:
        ...
