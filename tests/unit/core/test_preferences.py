"""Tests for device-local reminder preferences."""

import pytest
from pydantic import ValidationError

from app.core.preferences import (
    Reminder,
    ReminderPreferences,
    add_reminder,
    load_preferences,
    save_preferences,
    set_reminder_enabled,
)


@pytest.fixture
def prefs_path(tmp_path):
    return tmp_path / "prefs" / "reminders.json"


class TestLoadSave:

    def test_missing_file_gives_defaults(self, prefs_path):
        assert load_preferences(prefs_path) == ReminderPreferences()

    def test_save_then_load(self, prefs_path):
        prefs = ReminderPreferences()
        add_reminder(prefs, 7 * 60, "Morning devotion")
        add_reminder(prefs, 21 * 60 + 30, "Evening journal", enabled=False)

        written = save_preferences(prefs, prefs_path)
        assert written == prefs_path
        assert load_preferences(prefs_path) == prefs

    def test_malformed_file_raises(self, prefs_path):
        prefs_path.parent.mkdir(parents=True)
        prefs_path.write_text('{"reminders": [{"time": -5}]}', encoding="utf-8")
        with pytest.raises(ValidationError):
            load_preferences(prefs_path)


class TestReminders:

    @pytest.mark.parametrize("time", [-1, 24 * 60])
    def test_time_must_be_within_a_day(self, time):
        with pytest.raises(ValidationError):
            Reminder(time=time, message="x")

    def test_toggle(self):
        prefs = ReminderPreferences()
        add_reminder(prefs, 480, "Pray")
        assert set_reminder_enabled(prefs, 0, False) is True
        assert prefs.reminders[0].enabled is False

    @pytest.mark.parametrize("index", [-1, 1, 10])
    def test_toggle_out_of_range(self, index):
        prefs = ReminderPreferences()
        add_reminder(prefs, 480, "Pray")
        assert set_reminder_enabled(prefs, index, False) is False
        assert prefs.reminders[0].enabled is True
