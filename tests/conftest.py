import pytest
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.db import SettingsDatabase
from core.models import ChannelInfoItem, PlaylistInfoItem
from core.preferences import PlayerPreferences
from hypothesis import settings
from tests.helpers.factories import stream

# Hypothesis configuration for property-based testing
# Register Hypothesis profiles
settings.register_profile("fast", max_examples=50, deadline=None)
settings.register_profile("thorough", max_examples=1000, deadline=None)
settings.load_profile("fast")  # Default to fast profile


def pytest_collection_modifyitems(items):
    """Automatically order tests: unit tests first, then property tests.

    Individual tests marked with @pytest.mark.order("last") will run at the very end.
    """
    for item in items:
        if hasattr(item, 'get_closest_marker') and item.get_closest_marker('order'):
            continue

        test_file = str(item.fspath)
        if 'test_unit_' in test_file:
            item.add_marker(pytest.mark.order(1))
        elif 'test_props_' in test_file:
            item.add_marker(pytest.mark.order(2))


@pytest.fixture
def rng():
    """Seeded random source for reproducible selections."""
    return random.Random(1234)


@pytest.fixture
def settings_db():
    """In-memory settings database, closed after the test."""
    db = SettingsDatabase(":memory:")
    yield db
    db.close()


@pytest.fixture
def player_preferences(settings_db):
    """PlayerPreferences over the in-memory store with a fixed clock."""
    clock = {'now': 1_700_000_000.0}
    prefs = PlayerPreferences(settings_db.preferences, clock=lambda: clock['now'])
    prefs.test_clock = clock
    return prefs


@pytest.fixture
def mixed_related():
    """Related listing with streams, a playlist and a channel."""
    return [
        stream("https://example.com/watch?v=b"),
        PlaylistInfoItem(url="https://example.com/playlist?list=p", name="A playlist"),
        stream("https://example.com/watch?v=c"),
        ChannelInfoItem(url="https://example.com/channel/ch", name="A channel"),
    ]
