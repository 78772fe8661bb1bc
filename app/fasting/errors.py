"""
Transport errors raised by store clients.

Business failures (bad goal, invalid transition, concurrent session) are
never raised; they come back as failed outcomes.  These exceptions mean
the store could not be asked at all, and callers should offer a retry.
"""

from typing import Optional


class StoreTransportError(Exception):
    """The store could not be reached or did not answer usably."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StoreUnavailableError(StoreTransportError):
    """Network-level failure (connection refused, timeout, DNS...)."""


class IdentityNotEstablishedError(StoreTransportError):
    """The store refused the request because the caller has no identity."""


class StoreResponseError(StoreTransportError):
    """The store answered with an unexpected status or payload."""
