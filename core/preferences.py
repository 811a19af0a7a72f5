"""Player settings resolved from the settings store."""

import config
import time
from core.db.preferences import PreferencesManager
from core.models import MinimizeMode, SeekParameters

# Settings keys
RESUME_ON_AUDIO_FOCUS_GAIN_KEY = 'resume_on_audio_focus_gain'
VOLUME_GESTURE_CONTROL_KEY = 'volume_gesture_control'
BRIGHTNESS_GESTURE_CONTROL_KEY = 'brightness_gesture_control'
USE_OLD_PLAYER_KEY = 'use_old_player'
POPUP_REMEMBER_SIZE_POS_KEY = 'popup_remember_size_pos'
USE_INEXACT_SEEK_KEY = 'use_inexact_seek'
AUTO_QUEUE_KEY = 'auto_queue'
MINIMIZE_ON_EXIT_KEY = 'minimize_on_exit'
SCREEN_BRIGHTNESS_KEY = 'screen_brightness'
SCREEN_BRIGHTNESS_TIMESTAMP_KEY = 'screen_brightness_timestamp'

# Stored values of MINIMIZE_ON_EXIT_KEY
MINIMIZE_ON_EXIT_NONE = 'minimize_on_exit_none_key'
MINIMIZE_ON_EXIT_BACKGROUND = 'minimize_on_exit_background_key'
MINIMIZE_ON_EXIT_POPUP = 'minimize_on_exit_popup_key'

# Negative brightness means "use the system default"
DEFAULT_SCREEN_BRIGHTNESS = -1.0


class PlayerPreferences:
    """Named player settings over a PreferencesManager.

    Args:
        preferences: Key-value settings store
        clock: Returns the current time in seconds, used by the brightness memory
    """

    def __init__(self, preferences: PreferencesManager, clock=time.time):
        self.preferences = preferences
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def is_resume_after_audio_focus_gain(self) -> bool:
        return self.preferences.get_bool(RESUME_ON_AUDIO_FOCUS_GAIN_KEY, False)

    def is_volume_gesture_enabled(self) -> bool:
        return self.preferences.get_bool(VOLUME_GESTURE_CONTROL_KEY, True)

    def is_brightness_gesture_enabled(self) -> bool:
        return self.preferences.get_bool(BRIGHTNESS_GESTURE_CONTROL_KEY, True)

    def is_using_old_player(self) -> bool:
        return self.preferences.get_bool(USE_OLD_PLAYER_KEY, False)

    def is_remembering_popup_dimensions(self) -> bool:
        return self.preferences.get_bool(POPUP_REMEMBER_SIZE_POS_KEY, True)

    def is_using_inexact_seek(self) -> bool:
        return self.preferences.get_bool(USE_INEXACT_SEEK_KEY, False)

    def is_auto_queue_enabled(self) -> bool:
        return self.preferences.get_bool(AUTO_QUEUE_KEY, config.AUTO_QUEUE_DEFAULT)

    def set_auto_queue_enabled(self, enabled: bool):
        self.preferences.set_bool(AUTO_QUEUE_KEY, enabled)

    def get_minimize_on_exit_action(self) -> MinimizeMode:
        """Resolve the minimize-on-exit setting. Unknown values mean NONE."""
        action = self.preferences.get_string(MINIMIZE_ON_EXIT_KEY, MINIMIZE_ON_EXIT_NONE)
        if action == MINIMIZE_ON_EXIT_POPUP:
            return MinimizeMode.POPUP
        elif action == MINIMIZE_ON_EXIT_BACKGROUND:
            return MinimizeMode.BACKGROUND
        return MinimizeMode.NONE

    def get_seek_parameters(self) -> SeekParameters:
        return SeekParameters.CLOSEST_SYNC if self.is_using_inexact_seek() else SeekParameters.EXACT

    def get_preferred_cache_size(self) -> int:
        return config.CACHE_SIZE_BYTES

    def get_preferred_file_size(self) -> int:
        return config.FILE_SIZE_BYTES

    def get_playback_start_buffer_ms(self) -> int:
        """Milliseconds buffered before playback starts."""
        return config.PLAYBACK_START_BUFFER_MS

    def get_playback_minimum_buffer_ms(self) -> int:
        """Milliseconds the player always buffers to once playing."""
        return config.PLAYBACK_MINIMUM_BUFFER_MS

    def get_playback_optimal_buffer_ms(self) -> int:
        """Milliseconds the player buffers to after reaching the minimum buffer."""
        return config.PLAYBACK_OPTIMAL_BUFFER_MS

    def is_using_dsp(self) -> bool:
        return True

    def get_toss_fling_velocity(self) -> int:
        return config.TOSS_FLING_VELOCITY

    def get_screen_brightness(self) -> float:
        """Brightness saved by the last session, if it is recent enough.

        Lighting conditions change between viewing blocks, so a value older
        than BRIGHTNESS_MEMORY_HOURS falls back to the system default.
        """
        timestamp = self.preferences.get_int(SCREEN_BRIGHTNESS_TIMESTAMP_KEY, 0)
        window_ms = config.BRIGHTNESS_MEMORY_HOURS * 60 * 60 * 1000
        if self._now_ms() - timestamp > window_ms:
            return DEFAULT_SCREEN_BRIGHTNESS
        return self.preferences.get_float(SCREEN_BRIGHTNESS_KEY, DEFAULT_SCREEN_BRIGHTNESS)

    def set_screen_brightness(self, brightness: float):
        self.preferences.set_float(SCREEN_BRIGHTNESS_KEY, brightness)
        self.preferences.set_int(SCREEN_BRIGHTNESS_TIMESTAMP_KEY, self._now_ms())
