"""
test_session_state.py
---------------------
Unit tests for the session aggregate: initial values, reset and phase.
"""

from jumpgame.core.runtime.session_state import SessionPhase, SessionState
from jumpgame.entities.obstacle import Obstacle


def test_initial_state():
    session = SessionState()

    assert session.phase is SessionPhase.RUNNING
    assert session.score == 0
    assert session.obstacles == []
    assert session.obstacle_spawn_timer == 0
    assert session.last_timestamp is None
    assert (session.player.x, session.player.y) == (50, 360)
    assert (session.player.width, session.player.height) == (40, 40)
    assert session.player.velocity_y == 0
    assert session.player.airborne is False


def test_end_enters_game_over_once():
    session = SessionState()

    session.end()
    session.end()

    assert session.game_over is True
    assert session.is_running is False
    assert session.phase is SessionPhase.GAME_OVER


def test_reset_restores_every_field():
    session = SessionState()
    session.player.y = 250
    session.player.velocity_y = -3
    session.player.airborne = True
    session.obstacles = [Obstacle(100, 40, 80), Obstacle(600, 30, 55)]
    session.score = 87
    session.obstacle_spawn_timer = 420
    session.last_timestamp = 99999
    session.frames = 500
    session.end()

    session.reset()

    assert session.game_over is False
    assert session.score == 0
    assert session.obstacles == []
    assert session.obstacle_spawn_timer == 0
    assert session.last_timestamp is None
    assert session.frames == 0
    assert (session.player.x, session.player.y) == (50, 360)
    assert session.player.velocity_y == 0
    assert session.player.airborne is False


def test_player_start_follows_ground_override():
    from jumpgame.core.runtime.game_settings import Physics

    Physics.GROUND_HEIGHT = 450
    assert SessionState().player.y == 410
