"""
HTTP client for the remote fasting store.

Wraps the ``/fasting`` endpoints with an ``httpx.AsyncClient``.  Timeout
policy lives here, at the transport; the controller adds none.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.fasting.errors import IdentityNotEstablishedError, StoreResponseError, StoreUnavailableError
from app.fasting.store import FastingStore
from app.schemas.common import OperationResult
from app.schemas.fasting import FastHistoryResponse, FastingContent, FastingSessionResponse

logger = logging.getLogger(__name__)

PRINCIPAL_HEADER = "X-Principal"

_sessions_adapter = TypeAdapter(list[FastingSessionResponse])
_history_adapter = TypeAdapter(list[FastHistoryResponse])


class FastingStoreClient(FastingStore):
    """Async client for the fasting store API.

    Args:
        principal: Caller identity sent with every request
        base_url: API root, e.g. ``http://localhost:8000/api/v1``
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport (``httpx.ASGITransport`` in tests)
    """

    def __init__(self, principal: str, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None, ):
        self.principal = principal
        self._client = httpx.AsyncClient(
            base_url=(base_url or settings.STORE_BASE_URL).rstrip("/") + "/fasting",
            headers={ PRINCIPAL_HEADER: principal },
            timeout=settings.STORE_TIMEOUT_SECONDS if timeout is None else timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "FastingStoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def start_new_fast(self, goal_hours: int) -> OperationResult:
        return await self._operation("/start", { "goal_hours": goal_hours })

    async def complete_fast(self, reflection_journal: str) -> OperationResult:
        return await self._operation("/complete", { "reflection_journal": reflection_journal })

    async def cancel_current_fast(self) -> OperationResult:
        return await self._operation("/cancel")

    async def update_fasting_progress(self) -> OperationResult:
        return await self._operation("/progress/update")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_fasting_progress(self) -> FastingSessionResponse:
        payload = await self._request("GET", "/progress")
        return self._parse(FastingSessionResponse.model_validate, payload)

    async def get_all_fasting_sessions(self) -> list[FastingSessionResponse]:
        payload = await self._request("GET", "/sessions")
        return self._parse(_sessions_adapter.validate_python, payload)

    async def get_fasting_history(self) -> list[FastHistoryResponse]:
        payload = await self._request("GET", "/history")
        return self._parse(_history_adapter.validate_python, payload)

    async def get_fasting_content(self) -> FastingContent:
        payload = await self._request("GET", "/content")
        return self._parse(FastingContent.model_validate, payload)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _operation(self, path: str, body: Optional[dict] = None) -> OperationResult:
        payload = await self._request("POST", path, json=body)
        return self._parse(OperationResult.model_validate, payload)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.warning("Fasting store unreachable (%s %s): %s", method, path, e)
            raise StoreUnavailableError(f"Fasting store unreachable: {e}") from e

        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise IdentityNotEstablishedError("Identity not established", status_code=response.status_code)
        if response.is_error:
            logger.warning("Fasting store answered %s to %s %s", response.status_code, method, path)
            raise StoreResponseError(f"Fasting store error {response.status_code}: {response.text}",
                                     status_code=response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise StoreResponseError(f"Invalid JSON from fasting store: {e}",
                                     status_code=response.status_code) from e

    @staticmethod
    def _parse(validator, payload):
        try:
            return validator(payload)
        except ValidationError as e:
            raise StoreResponseError(f"Unexpected payload from fasting store: {e}") from e
