"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database and a controllable
clock.  ``ServiceBackedStore`` runs the real :class:`FastingService` in
process so controller tests exercise the same transition rules as the
HTTP store.
"""

import asyncio
import datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.api.dependencies import get_clock
from app.db.session import get_db
from app.fasting.errors import StoreUnavailableError
from app.fasting.store import FastingStore
from app.main import app as fastapi_app
from app.services.fasting_service import FastingService
from app.services.user_service import UserService


# ======================================================================
# Helpers
# ======================================================================


class FakeClock:
    """Store clock that only moves when told to."""

    def __init__(self, start: datetime.datetime = datetime.datetime(2026, 3, 1, 6, 0, 0, tzinfo=datetime.timezone.utc)):
        self.now = start

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += datetime.timedelta(**kwargs)


class ServiceBackedStore(FastingStore):
    """In-process :class:`FastingStore` over the real service.

    ``offline`` makes every call raise a transport error; ``hold_next_read``
    returns an event that blocks the next snapshot read *after* it has
    been taken, which simulates a slow, stale response.
    """

    def __init__(self, service: FastingService, user_id: int):
        self.service = service
        self.user_id = user_id
        self.offline = False
        self.calls: list[str] = []
        self._held: Optional[asyncio.Event] = None

    def hold_next_read(self) -> asyncio.Event:
        self._held = asyncio.Event()
        return self._held

    async def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.offline:
            raise StoreUnavailableError("store offline")

    async def start_new_fast(self, goal_hours):
        await self._enter("start_new_fast")
        return self.service.start_new_fast(self.user_id, goal_hours)

    async def complete_fast(self, reflection_journal):
        await self._enter("complete_fast")
        return self.service.complete_fast(self.user_id, reflection_journal)

    async def cancel_current_fast(self):
        await self._enter("cancel_current_fast")
        return self.service.cancel_current_fast(self.user_id)

    async def update_fasting_progress(self):
        await self._enter("update_fasting_progress")
        return self.service.update_fasting_progress(self.user_id)

    async def get_fasting_progress(self):
        await self._enter("get_fasting_progress")
        snapshot = self.service.get_fasting_progress(self.user_id)
        gate, self._held = self._held, None
        if gate is not None:
            await gate.wait()
        return snapshot

    async def get_all_fasting_sessions(self):
        await self._enter("get_all_fasting_sessions")
        return self.service.get_all_fasting_sessions(self.user_id)

    async def get_fasting_history(self):
        await self._enter("get_fasting_history")
        return self.service.get_fasting_history(self.user_id)

    async def get_fasting_content(self):
        await self._enter("get_fasting_content")
        return self.service.get_fasting_content()


# ======================================================================
# Database
# ======================================================================


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(db):
    return UserService(db).get_or_create("alice")


@pytest.fixture
def service(db, clock):
    return FastingService(db, clock=clock)


@pytest.fixture
def store(service, user):
    return ServiceBackedStore(service, user.id)


# ======================================================================
# API
# ======================================================================


@pytest.fixture
def api_app(engine, clock):
    def _get_db():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _get_db
    fastapi_app.dependency_overrides[get_clock] = lambda: clock
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(api_app):
    with TestClient(api_app, headers={ "X-Principal": "alice" }) as test_client:
        yield test_client
