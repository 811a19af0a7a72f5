from decouple import config
from pathlib import Path


def get_version():
    """Get version from pyproject.toml"""
    import tomllib

    pyproject_path = Path(__file__).parent / "pyproject.toml"
    if pyproject_path.exists():
        with open(pyproject_path, 'rb') as f:
            data = tomllib.load(f)
            return data.get("project", {}).get("version", "unknown")
    return "unknown"


__version__ = get_version()

# App Configuration
APP_NAME = config('UPNEXT_APP_NAME', default="upnext")

# Logging Configuration
LOG_LEVEL = config('UPNEXT_LOG_LEVEL', default="INFO")
LOG_FILE = config('UPNEXT_LOG_FILE', default=None)

# Settings store
DB_NAME = config('DB_NAME', default='upnext.db')

# Auto-queue
AUTO_QUEUE_DEFAULT = config('AUTO_QUEUE_DEFAULT', default=False, cast=bool)

# Screen brightness is only restored within this window (covers a viewing block, eg an evening)
BRIGHTNESS_MEMORY_HOURS = config('BRIGHTNESS_MEMORY_HOURS', default=4, cast=int)

# Player buffering
CACHE_SIZE_BYTES = config('CACHE_SIZE_BYTES', default=64 * 1024 * 1024, cast=int)
FILE_SIZE_BYTES = config('FILE_SIZE_BYTES', default=512 * 1024, cast=int)
PLAYBACK_START_BUFFER_MS = config('PLAYBACK_START_BUFFER_MS', default=500, cast=int)
PLAYBACK_MINIMUM_BUFFER_MS = config('PLAYBACK_MINIMUM_BUFFER_MS', default=25000, cast=int)
PLAYBACK_OPTIMAL_BUFFER_MS = config('PLAYBACK_OPTIMAL_BUFFER_MS', default=60000, cast=int)

# Gestures
TOSS_FLING_VELOCITY = 2500

# Test Configuration
TEST_TIMEOUT = config('TEST_TIMEOUT', default=0.5, cast=float)
