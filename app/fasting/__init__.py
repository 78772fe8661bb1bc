"""Client-side fasting core: store client, session controller, poller, progress view."""

from app.fasting.client import FastingStoreClient
from app.fasting.controller import FastingSessionController, FastOutcome
from app.fasting.errors import (
    IdentityNotEstablishedError,
    StoreResponseError,
    StoreTransportError,
    StoreUnavailableError,
)
from app.fasting.poller import ProgressPoller
from app.fasting.progress import (
    FastingProgressView,
    build_progress_view,
    encouragement_index,
    progress_percentage,
    split_elapsed,
)
from app.fasting.store import FastingStore

__all__ = [
    "FastingStore",
    "FastingStoreClient",
    "FastingSessionController",
    "FastOutcome",
    "ProgressPoller",
    "FastingProgressView",
    "build_progress_view",
    "encouragement_index",
    "progress_percentage",
    "split_elapsed",
    "StoreTransportError",
    "StoreUnavailableError",
    "IdentityNotEstablishedError",
    "StoreResponseError",
]
