"""
test_hud.py
-----------
Tests HUD text selection and placement on a mocked DrawManager.
"""

from jumpgame.core.runtime.game_settings import Colors, Layers
from jumpgame.core.runtime.session_state import SessionState
from jumpgame.ui.hud import HUD, HINT_TEXT, footer_text, score_text


def test_score_text():
    assert score_text(0) == "Score: 0"
    assert score_text(153) == "Score: 153"


def test_footer_hint_while_running():
    assert footer_text(SessionState()) == HINT_TEXT


def test_footer_game_over_message():
    session = SessionState()
    session.score = 27
    session.end()

    assert footer_text(session) == "Game Over! Score: 27. Press Space to play again."


def test_draw_footer_centered_below_play_field(mock_draw_manager):
    hud = HUD(width=800, height=500, footer_height=60)

    hud.draw_footer(mock_draw_manager, SessionState())

    args, kwargs = mock_draw_manager.draw_text.call_args
    assert args == (HINT_TEXT, (400, 530), Colors.HINT)
    assert kwargs["anchor"] == "center"
    assert kwargs["layer"] == Layers.UI


def test_draw_score(mock_draw_manager):
    HUD().draw_score(mock_draw_manager, 9)

    args, _ = mock_draw_manager.draw_text.call_args
    assert args[0] == "Score: 9"
    assert args[2] == Colors.SCORE


def test_debug_overlay_hidden_by_default(mock_draw_manager):
    HUD().draw_debug(mock_draw_manager, SessionState(), fps=60)
    mock_draw_manager.draw_text.assert_not_called()


def test_debug_overlay_toggle(mock_draw_manager):
    hud = HUD()

    assert hud.toggle_debug() is True
    hud.draw_debug(mock_draw_manager, SessionState(), fps=59.6)

    lines = [c.args[0] for c in mock_draw_manager.draw_text.call_args_list]
    assert len(lines) == 3
    assert lines[0] == "fps=60 frames=0"
    assert hud.toggle_debug() is False
