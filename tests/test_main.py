"""
test_main.py
------------
Tests the command line entry point with the game loop patched out.
"""

from unittest.mock import patch

import pytest

from jumpgame import main as entry
from jumpgame.core.debug.debug_logger import LoggerConfig
from jumpgame.core.runtime.game_settings import Physics


@pytest.fixture
def game_loop():
    with patch.object(entry, "GameLoop") as loop_cls:
        yield loop_cls


def test_defaults(game_loop):
    assert entry.main([]) == 0

    game_loop.assert_called_once_with(fps=None, seed=None)
    game_loop.return_value.run.assert_called_once()


def test_seed_and_fps(game_loop):
    entry.main(["--seed", "42", "--fps", "30"])
    game_loop.assert_called_once_with(fps=30, seed=42)


def test_log_level(game_loop):
    entry.main(["--log-level", "VERBOSE"])
    assert LoggerConfig.LOG_LEVEL == "VERBOSE"


def test_config_applied_before_run(game_loop, tmp_path):
    path = tmp_path / "heavy.yaml"
    path.write_text("physics:\n  gravity: 0.9\n", encoding="utf-8")

    entry.main(["--config", str(path)])

    assert Physics.GRAVITY == 0.9
    game_loop.return_value.run.assert_called_once()


def test_missing_config_aborts(game_loop, tmp_path):
    with pytest.raises(FileNotFoundError):
        entry.main(["--config", str(tmp_path / "missing.json")])
    game_loop.assert_not_called()


def test_bad_log_level_rejected(game_loop):
    with pytest.raises(SystemExit):
        entry.main(["--log-level", "LOUD"])
