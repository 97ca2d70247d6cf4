"""
conftest.py
-----------
Shared pytest configuration and fixtures for the jump game tests.

Contains:
- Headless SDL setup so pygame works without a display
- Scripted random source for reproducible spawns
- Settings / logger isolation between tests
- Common mock fixtures
"""

import os

# Must be set before pygame initializes any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from unittest.mock import MagicMock

from jumpgame.core.debug.debug_logger import LoggerConfig
from jumpgame.core.services.config_manager import restore_settings, snapshot_settings


# ===========================================================
# Test Utilities
# ===========================================================

class ScriptedRandom:
    """
    Random source that replays a fixed list of draws.

    Once the script runs out the last value repeats, so a single-value
    script acts as a constant source.
    """

    def __init__(self, values):
        if not values:
            raise ValueError("ScriptedRandom needs at least one value")
        self.values = list(values)
        self.calls = 0

    def random(self):
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]


# ===========================================================
# Isolation Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def isolated_settings():
    """Restore every game_settings constant after each test."""
    snapshot = snapshot_settings()
    yield
    restore_settings(snapshot)


@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging unless a test turns it back on."""
    enabled, level = LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL = enabled, level


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with the drawing-surface primitives."""
    draw_manager = MagicMock()
    draw_manager.clear = MagicMock()
    draw_manager.fill_rect = MagicMock()
    draw_manager.draw_text = MagicMock()
    return draw_manager


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests that open a pygame display")
