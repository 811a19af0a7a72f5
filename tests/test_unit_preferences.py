"""Unit tests for the settings store and player preferences.

These tests run against an in-memory sqlite database.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.db import DB_TABLES, SettingsDatabase
from core.models import MinimizeMode, SeekParameters
from core.preferences import (
    AUTO_QUEUE_KEY,
    DEFAULT_SCREEN_BRIGHTNESS,
    MINIMIZE_ON_EXIT_BACKGROUND,
    MINIMIZE_ON_EXIT_KEY,
    MINIMIZE_ON_EXIT_POPUP,
    SCREEN_BRIGHTNESS_KEY,
    USE_INEXACT_SEEK_KEY,
    VOLUME_GESTURE_CONTROL_KEY,
)


class TestSettingsDatabase:
    """Test the settings database facade."""

    def test_creates_settings_table(self, settings_db):
        settings_db.db_cursor.execute("SELECT name FROM sqlite_master WHERE type='table' AND name='settings'")
        assert settings_db.db_cursor.fetchone() is not None

    def test_persists_across_connections(self, tmp_path):
        db_path = str(tmp_path / "settings.db")

        with SettingsDatabase(db_path) as db:
            db.preferences.set_string("theme", "dark")

        with SettingsDatabase(db_path, DB_TABLES) as db:
            assert db.preferences.get_string("theme") == "dark"


class TestPreferencesManager:
    """Test typed getters and setters."""

    def test_missing_keys_use_defaults(self, settings_db):
        prefs = settings_db.preferences

        assert prefs.get_bool("missing", True) is True
        assert prefs.get_string("missing", "fallback") == "fallback"
        assert prefs.get_float("missing", 0.5) == 0.5
        assert prefs.get_int("missing", 7) == 7

    def test_round_trip_values(self, settings_db):
        prefs = settings_db.preferences
        prefs.set_bool("flag", True)
        prefs.set_string("name", "value")
        prefs.set_float("ratio", 0.75)
        prefs.set_int("count", 12)

        assert prefs.get_bool("flag", False) is True
        assert prefs.get_string("name") == "value"
        assert prefs.get_float("ratio", 0.0) == 0.75
        assert prefs.get_int("count", 0) == 12

    def test_overwrite(self, settings_db):
        prefs = settings_db.preferences
        prefs.set_bool("flag", True)
        prefs.set_bool("flag", False)

        assert prefs.get_bool("flag", True) is False

    def test_unparseable_values_use_defaults(self, settings_db):
        prefs = settings_db.preferences
        prefs.set_string("flag", "yes please")
        prefs.set_string("ratio", "bright")
        prefs.set_string("count", "1.5")

        assert prefs.get_bool("flag", False) is False
        assert prefs.get_float("ratio", 0.25) == 0.25
        assert prefs.get_int("count", 3) == 3

    def test_remove(self, settings_db):
        prefs = settings_db.preferences
        prefs.set_int("count", 1)
        prefs.remove("count")

        assert prefs.get_int("count", 0) == 0


class TestPlayerPreferences:
    """Test named player settings."""

    def test_defaults(self, player_preferences):
        assert player_preferences.is_resume_after_audio_focus_gain() is False
        assert player_preferences.is_volume_gesture_enabled() is True
        assert player_preferences.is_brightness_gesture_enabled() is True
        assert player_preferences.is_using_old_player() is False
        assert player_preferences.is_remembering_popup_dimensions() is True
        assert player_preferences.is_auto_queue_enabled() is False
        assert player_preferences.is_using_dsp() is True

    def test_stored_flags_win(self, player_preferences):
        player_preferences.preferences.set_bool(VOLUME_GESTURE_CONTROL_KEY, False)
        player_preferences.preferences.set_bool(AUTO_QUEUE_KEY, True)

        assert player_preferences.is_volume_gesture_enabled() is False
        assert player_preferences.is_auto_queue_enabled() is True

    def test_auto_queue_default_from_config(self, player_preferences):
        with patch("config.AUTO_QUEUE_DEFAULT", True):
            assert player_preferences.is_auto_queue_enabled() is True

    def test_set_auto_queue_enabled(self, player_preferences):
        player_preferences.set_auto_queue_enabled(True)
        assert player_preferences.is_auto_queue_enabled() is True

        player_preferences.set_auto_queue_enabled(False)
        assert player_preferences.is_auto_queue_enabled() is False

    @pytest.mark.parametrize(
        "stored,expected",
        [
            (None, MinimizeMode.NONE),
            (MINIMIZE_ON_EXIT_POPUP, MinimizeMode.POPUP),
            (MINIMIZE_ON_EXIT_BACKGROUND, MinimizeMode.BACKGROUND),
            ("something_else", MinimizeMode.NONE),
        ],
    )
    def test_minimize_on_exit_action(self, player_preferences, stored, expected):
        if stored is not None:
            player_preferences.preferences.set_string(MINIMIZE_ON_EXIT_KEY, stored)

        assert player_preferences.get_minimize_on_exit_action() is expected

    def test_seek_parameters(self, player_preferences):
        assert player_preferences.get_seek_parameters() is SeekParameters.EXACT

        player_preferences.preferences.set_bool(USE_INEXACT_SEEK_KEY, True)

        assert player_preferences.get_seek_parameters() is SeekParameters.CLOSEST_SYNC

    def test_buffer_constants(self, player_preferences):
        assert player_preferences.get_preferred_cache_size() == 64 * 1024 * 1024
        assert player_preferences.get_preferred_file_size() == 512 * 1024
        assert player_preferences.get_playback_start_buffer_ms() == 500
        assert player_preferences.get_playback_minimum_buffer_ms() == 25000
        assert player_preferences.get_playback_optimal_buffer_ms() == 60000
        assert player_preferences.get_toss_fling_velocity() == 2500


class TestScreenBrightness:
    """Test the screen brightness memory window."""

    def test_unset_brightness_is_system_default(self, player_preferences):
        assert player_preferences.get_screen_brightness() == DEFAULT_SCREEN_BRIGHTNESS

    def test_recent_brightness_is_restored(self, player_preferences):
        player_preferences.set_screen_brightness(0.6)
        player_preferences.test_clock['now'] += 3 * 3600

        assert player_preferences.get_screen_brightness() == 0.6

    def test_brightness_at_window_edge_is_restored(self, player_preferences):
        player_preferences.set_screen_brightness(0.6)
        player_preferences.test_clock['now'] += 4 * 3600

        assert player_preferences.get_screen_brightness() == 0.6

    def test_stale_brightness_expires(self, player_preferences):
        player_preferences.set_screen_brightness(0.6)
        player_preferences.test_clock['now'] += 4 * 3600 + 1

        assert player_preferences.get_screen_brightness() == DEFAULT_SCREEN_BRIGHTNESS

    def test_brightness_without_timestamp_expires(self, player_preferences):
        player_preferences.preferences.set_float(SCREEN_BRIGHTNESS_KEY, 0.3)

        assert player_preferences.get_screen_brightness() == DEFAULT_SCREEN_BRIGHTNESS
