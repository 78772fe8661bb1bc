"""
Reminder preferences.

Device-local configuration kept outside the remote store.  Preferences
are loaded from and saved to a JSON file at explicit boundaries; nothing
here touches fasting session state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from app.core.config import settings

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


class Reminder(BaseModel):
    """A daily reminder at ``time`` minutes after local midnight."""

    time: int = Field(..., ge=0, lt=MINUTES_PER_DAY, description="Minutes after midnight")
    enabled: bool = True
    message: str = Field("", max_length=500)


class ReminderPreferences(BaseModel):
    """All reminder preferences for this device."""

    reminders: list[Reminder] = Field(default_factory=list)


def _resolve(path: Optional[Path | str]) -> Path:
    return Path(path) if path is not None else Path(settings.PREFERENCES_PATH)


def load_preferences(path: Optional[Path | str] = None) -> ReminderPreferences:
    """Load preferences from *path*.

    A missing file yields empty defaults.  A malformed file raises
    :class:`pydantic.ValidationError`.
    """
    target = _resolve(path)
    if not target.exists():
        logger.debug("No reminder preferences at %s, using defaults", target)
        return ReminderPreferences()
    return ReminderPreferences.model_validate_json(target.read_text(encoding="utf-8"))


def save_preferences(preferences: ReminderPreferences, path: Optional[Path | str] = None) -> Path:
    """Write *preferences* to *path* and return the path written."""
    target = _resolve(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Saved %d reminder(s) to %s", len(preferences.reminders), target)
    return target


def add_reminder(preferences: ReminderPreferences, time: int, message: str, enabled: bool = True) -> Reminder:
    reminder = Reminder(time=time, enabled=enabled, message=message)
    preferences.reminders.append(reminder)
    return reminder


def set_reminder_enabled(preferences: ReminderPreferences, index: int, enabled: bool) -> bool:
    """Toggle the reminder at *index*.  Returns ``False`` if there is none."""
    if index < 0 or index >= len(preferences.reminders):
        return False
    preferences.reminders[index].enabled = enabled
    return True
