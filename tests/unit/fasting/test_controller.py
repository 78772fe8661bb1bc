"""
Unit tests for the fasting session controller.

The controller runs against ``ServiceBackedStore`` (real service rules,
in-memory database, fake clock); polling is disabled except where the
poller itself is under test.
"""

import asyncio

import pytest

from app.fasting.controller import FastingSessionController
from app.fasting.errors import StoreUnavailableError
from app.schemas.common import REASON_FAST_IN_PROGRESS, REASON_GOAL_OUT_OF_RANGE, REASON_NO_ACTIVE_FAST
from app.schemas.fasting import Completed, InProgress, NotStarted

MUTATIONS = {"start_new_fast", "complete_fast", "cancel_current_fast"}


@pytest.fixture
async def controller(store):
    controller = FastingSessionController(store, auto_poll=False)
    yield controller
    await controller.close()


@pytest.fixture
async def polling_controller(store):
    controller = FastingSessionController(store, poll_interval_seconds=0.01)
    yield controller
    await controller.close()


async def _let_tasks_run(times: int = 5) -> None:
    for _ in range(times):
        await asyncio.sleep(0)


# ======================================================================
# start_fast
# ======================================================================


class TestStartFast:

    @pytest.mark.parametrize("goal", [0, -5, 73, 1000, 6.5, True])
    async def test_goal_outside_range_fails_locally(self, controller, store, goal):
        before = controller.snapshot
        outcome = await controller.start_fast(goal)

        assert outcome.success is False
        assert outcome.reason == REASON_GOAL_OUT_OF_RANGE
        assert controller.snapshot is before
        assert store.calls == []

    async def test_start_then_refresh_is_zero_elapsed(self, controller):
        outcome = await controller.start_fast(6)
        assert outcome.success is True
        assert outcome.snapshot.status == InProgress(elapsed_hours=0)

        snapshot = await controller.refresh_progress()
        assert snapshot.status == InProgress(elapsed_hours=0)
        assert snapshot.goal_hours == 6

    async def test_conflict_shows_existing_session(self, controller, store, service, user, clock):
        # Another device started a fast the controller has not seen yet
        service.start_new_fast(user.id, 12)
        clock.advance(hours=2)

        outcome = await controller.start_fast(20)
        assert outcome.success is False
        assert outcome.reason == REASON_FAST_IN_PROGRESS
        assert controller.snapshot.is_in_progress
        assert controller.snapshot.goal_hours == 12

    async def test_start_after_completion(self, controller):
        await controller.start_fast(4)
        await controller.complete_fast("done")

        outcome = await controller.start_fast(8)
        assert outcome.success is True
        assert controller.snapshot.status == InProgress(elapsed_hours=0)
        assert controller.snapshot.goal_hours == 8


# ======================================================================
# complete_fast / cancel_fast
# ======================================================================


class TestCompleteFast:

    async def test_complete_records_history(self, controller, clock):
        await controller.start_fast(8)
        started = controller.snapshot.start_time
        clock.advance(hours=3)

        outcome = await controller.complete_fast("Thankful")
        assert outcome.success is True
        assert controller.snapshot.status == Completed()

        history = await controller.get_history()
        assert len(history) == 1
        assert history[0].goal_hours == 8
        assert history[0].start_time == started
        assert history[0].reflection_journal == "Thankful"

    async def test_complete_twice_is_noop_failure(self, controller, store):
        await controller.start_fast(8)
        await controller.complete_fast("once")
        calls_before = list(store.calls)

        outcome = await controller.complete_fast("twice")
        assert outcome.success is False
        assert outcome.reason == REASON_NO_ACTIVE_FAST
        assert store.calls == calls_before
        assert len(await controller.get_history()) == 1

    async def test_complete_from_unknown_state_refreshes_first(self, controller, store):
        outcome = await controller.complete_fast("nothing to complete")
        assert outcome.success is False
        assert outcome.reason == REASON_NO_ACTIVE_FAST
        assert controller.snapshot.status == NotStarted()
        assert not MUTATIONS & set(store.calls)


class TestCancelFast:

    async def test_cancel_leaves_history_unchanged(self, controller, clock):
        await controller.start_fast(4)
        clock.advance(hours=4)
        await controller.complete_fast("first")
        await controller.start_fast(10)
        clock.advance(hours=1)

        outcome = await controller.cancel_fast()
        assert outcome.success is True
        assert controller.snapshot.status == NotStarted()
        assert len(await controller.get_history()) == 1

    async def test_cancel_when_not_started(self, controller, store):
        await controller.refresh_progress()
        outcome = await controller.cancel_fast()
        assert outcome.success is False
        assert outcome.reason == REASON_NO_ACTIVE_FAST
        assert "cancel_current_fast" not in store.calls

    async def test_cancel_after_complete(self, controller):
        await controller.start_fast(4)
        await controller.complete_fast("done")
        outcome = await controller.cancel_fast()
        assert outcome.success is False
        assert controller.snapshot.status == Completed()


# ======================================================================
# refresh_progress / display
# ======================================================================


class TestRefreshProgress:

    async def test_refresh_twice_is_stable(self, controller, clock):
        await controller.start_fast(8)
        clock.advance(hours=2, minutes=10)

        first = await controller.refresh_progress()
        second = await controller.refresh_progress()
        assert first.status == second.status == InProgress(elapsed_hours=2)

    async def test_percentage_monotonic_and_clamped(self, controller, clock):
        await controller.start_fast(6)
        percentages = []
        for _ in range(9):
            clock.advance(hours=1)
            await controller.refresh_progress()
            percentages.append(controller.progress_view().percentage)

        assert percentages == sorted(percentages)
        # 7h of a 6h goal
        assert percentages[6] == 100.0
        assert percentages[-1] == 100.0

    async def test_progress_view_uses_content(self, controller, clock):
        content = await controller.get_content()
        await controller.start_fast(6)
        clock.advance(hours=9)
        await controller.refresh_progress()

        view = controller.progress_view()
        assert view.elapsed_hours == 9
        assert view.encouragement_index == len(content.hourly_encouragement) - 1
        assert view.encouragement == content.hourly_encouragement[-1]

    async def test_content_is_cached(self, controller, store):
        first = await controller.get_content()
        second = await controller.get_content()
        assert first is second
        assert store.calls.count("get_fasting_content") == 1

    async def test_no_view_before_first_snapshot(self, controller):
        assert controller.progress_view() is None


# ======================================================================
# Transport failures
# ======================================================================


class TestTransportFailures:

    async def test_refresh_failure_keeps_snapshot(self, controller, store, clock):
        await controller.start_fast(8)
        clock.advance(hours=1)
        await controller.refresh_progress()
        last_good = controller.snapshot

        store.offline = True
        with pytest.raises(StoreUnavailableError):
            await controller.refresh_progress()

        assert controller.is_stale is True
        assert controller.snapshot is last_good
        assert controller.snapshot.is_in_progress

    async def test_mutation_failure_propagates(self, controller, store):
        await controller.start_fast(8)
        store.offline = True

        with pytest.raises(StoreUnavailableError):
            await controller.cancel_fast()
        assert controller.is_stale is True
        assert controller.snapshot.is_in_progress

    async def test_recovery_clears_stale(self, controller, store):
        await controller.start_fast(8)
        store.offline = True
        with pytest.raises(StoreUnavailableError):
            await controller.refresh_progress()

        store.offline = False
        await controller.refresh_progress()
        assert controller.is_stale is False

    async def test_stale_snapshot_is_refreshed_before_cancel(self, controller, store, service, user):
        await controller.start_fast(8)
        store.offline = True
        with pytest.raises(StoreUnavailableError):
            await controller.refresh_progress()

        # Completed from another device while this one was offline
        service.complete_fast(user.id, "done elsewhere")
        store.offline = False
        store.calls.clear()

        outcome = await controller.cancel_fast()
        assert outcome.success is False
        assert outcome.reason == REASON_NO_ACTIVE_FAST
        assert controller.snapshot.status == Completed()
        assert controller.is_stale is False
        assert not MUTATIONS & set(store.calls)

    async def test_stale_snapshot_is_refreshed_before_complete(self, controller, store, service, user):
        await controller.start_fast(8)
        store.offline = True
        with pytest.raises(StoreUnavailableError):
            await controller.complete_fast("offline")

        service.cancel_current_fast(user.id)
        store.offline = False

        outcome = await controller.complete_fast("too late")
        assert outcome.success is False
        assert controller.snapshot.status == NotStarted()
        assert service.get_fasting_history(user.id) == []


# ======================================================================
# Stale reads vs. newer mutations
# ======================================================================


class TestSupersededReads:

    async def test_refresh_overlapping_cancel_is_dropped(self, controller, store, clock):
        await controller.start_fast(8)
        clock.advance(hours=2)

        gate = store.hold_next_read()
        refresh = asyncio.create_task(controller.refresh_progress())
        await _let_tasks_run()

        outcome = await controller.cancel_fast()
        assert outcome.success is True

        gate.set()
        await refresh
        assert controller.snapshot.status == NotStarted()


# ======================================================================
# Polling
# ======================================================================


class TestPolling:

    async def test_poller_follows_server_time(self, polling_controller, clock):
        await polling_controller.start_fast(8)
        assert polling_controller.poller.running

        clock.advance(hours=3)
        await asyncio.sleep(0.05)
        assert polling_controller.snapshot.status == InProgress(elapsed_hours=3)

    async def test_poller_stops_on_completion(self, polling_controller):
        await polling_controller.start_fast(8)
        await polling_controller.complete_fast("done")
        assert not polling_controller.poller.running

    async def test_poller_stops_on_cancel(self, polling_controller):
        await polling_controller.start_fast(8)
        await polling_controller.cancel_fast()
        assert not polling_controller.poller.running

    async def test_poller_stops_when_other_device_completes(self, polling_controller, service, user):
        await polling_controller.start_fast(8)
        service.complete_fast(user.id, "from phone")

        await asyncio.sleep(0.05)
        assert polling_controller.snapshot.status == Completed()
        assert not polling_controller.poller.running

    async def test_no_poller_when_not_started(self, polling_controller):
        await polling_controller.refresh_progress()
        assert not polling_controller.poller.running

    async def test_ticks_skip_while_refresh_in_flight(self, polling_controller, store):
        await polling_controller.start_fast(8)

        gate = store.hold_next_read()
        refresh = asyncio.create_task(polling_controller.refresh_progress())
        await asyncio.sleep(0.05)

        assert polling_controller.refresh_in_flight
        assert polling_controller.poller.skipped_ticks >= 1
        assert store.calls.count("update_fasting_progress") == 1

        gate.set()
        await refresh

    async def test_poller_survives_transport_errors(self, polling_controller, store):
        await polling_controller.start_fast(8)
        store.offline = True
        await asyncio.sleep(0.05)

        assert polling_controller.poller.running
        assert polling_controller.is_stale is True
        assert polling_controller.snapshot.is_in_progress

    async def test_close_stops_poller(self, polling_controller):
        await polling_controller.start_fast(8)
        await polling_controller.close()
        assert not polling_controller.poller.running
