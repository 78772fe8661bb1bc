"""Time source shared by the store service and the models."""

import datetime
from typing import Callable, Optional

Clock = Callable[[], datetime.datetime]


def utcnow() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    """Return *value* as an aware UTC datetime.

    Backends without a native time zone type (SQLite) hand values back
    naive; those are already UTC and only get the zone attached.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)
