"""
Fasting progress derivation.

Display-only arithmetic over the store's snapshot.  Nothing here keeps
time on its own: the elapsed value always comes from the last snapshot
the store returned.

Rules
-----
* elapsed split: ``elapsed_hours * 60`` total minutes, split into whole
  hours and remaining minutes.
* progress: ``min(elapsed / goal * 100, 100)`` while a fast is in
  progress, otherwise 0.  Fasting beyond the goal is allowed, so the
  value clamps rather than overflowing.
* encouragement index: ``min(floor(elapsed), L - 1)`` for ``L``
  messages; past the end of the list the last message is repeated.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel

from app.schemas.fasting import FastingContent, FastingSessionResponse

# Length assumed when no content has been loaded yet.
DEFAULT_ENCOURAGEMENT_COUNT = 6


class FastingProgressView(BaseModel):
    """Derived display fields for a snapshot."""

    in_progress: bool
    goal_hours: Optional[int]
    elapsed_hours: int
    elapsed_minutes: int
    percentage: float
    encouragement_index: int
    encouragement: Optional[str] = None


# ======================================================================
# Derivation rules
# ======================================================================


def split_elapsed(elapsed_hours: float) -> tuple[int, int]:
    """Split an elapsed hour count into ``(hours, minutes)``."""
    total_minutes = max(elapsed_hours, 0) * 60
    return int(total_minutes // 60), int(total_minutes % 60)


def progress_percentage(elapsed_hours: float, goal_hours: Optional[int]) -> float:
    if not goal_hours or goal_hours <= 0:
        return 0.0
    return min(max(elapsed_hours, 0) / goal_hours * 100, 100.0)


def encouragement_index(elapsed_hours: float, count: int = DEFAULT_ENCOURAGEMENT_COUNT) -> int:
    """Index of the hourly encouragement to show.

    >>> encouragement_index(9, 6)
    5
    """
    if count <= 0:
        return 0
    return max(0, min(math.floor(elapsed_hours), count - 1))


# ======================================================================
# Snapshot view
# ======================================================================


def build_progress_view(snapshot: FastingSessionResponse,
                        content: Optional[FastingContent] = None) -> FastingProgressView:
    in_progress = snapshot.is_in_progress
    elapsed = snapshot.elapsed_hours if in_progress else 0
    hours, minutes = split_elapsed(elapsed)

    messages = content.hourly_encouragement if content is not None else []
    index = encouragement_index(hours, len(messages) or DEFAULT_ENCOURAGEMENT_COUNT)

    return FastingProgressView(
        in_progress=in_progress,
        goal_hours=snapshot.goal_hours,
        elapsed_hours=hours,
        elapsed_minutes=minutes,
        percentage=progress_percentage(hours, snapshot.goal_hours) if in_progress else 0.0,
        encouragement_index=index,
        encouragement=messages[index] if messages else None,
    )
