"""
hud.py
------
Text around the play field: score, footer message and debug overlay.

The footer strip below the play field shows the controls hint while a
session is running and the game-over message with the final score once
it has ended.
"""

from jumpgame.core.runtime.game_settings import Colors, Display, Layers

HINT_TEXT = "Press Space or Up to jump"
GAME_OVER_TEXT = "Game Over! Score: {score}. Press Space to play again."

SCORE_POS = (20, 22)
SCORE_SIZE = 32
FOOTER_SIZE = 28
DEBUG_SIZE = 20


def score_text(score) -> str:
    return f"Score: {score}"


def footer_text(session) -> str:
    """Message for the strip below the play field."""
    if session.game_over:
        return GAME_OVER_TEXT.format(score=session.score)
    return HINT_TEXT


class HUD:
    """Queues HUD text on a DrawManager."""

    def __init__(self, width=None, height=None, footer_height=None):
        self.width = Display.WIDTH if width is None else width
        self.height = Display.HEIGHT if height is None else height
        self.footer_height = Display.FOOTER_HEIGHT if footer_height is None else footer_height
        self.show_debug = False

    def toggle_debug(self):
        self.show_debug = not self.show_debug
        return self.show_debug

    def draw_score(self, draw_manager, score):
        draw_manager.draw_text(score_text(score), SCORE_POS, Colors.SCORE,
                               size=SCORE_SIZE, layer=Layers.UI)

    def draw_footer(self, draw_manager, session):
        color = Colors.GAME_OVER if session.game_over else Colors.HINT
        center = (self.width // 2, self.height + self.footer_height // 2)
        draw_manager.draw_text(footer_text(session), center, color,
                               size=FOOTER_SIZE, layer=Layers.UI, anchor="center")

    def draw_debug(self, draw_manager, session, fps=0.0):
        """Top-right diagnostics; only drawn while the overlay is on."""
        if not self.show_debug:
            return

        p = session.player
        lines = (
            f"fps={fps:.0f} frames={session.frames}",
            f"obstacles={len(session.obstacles)} timer={session.obstacle_spawn_timer:.0f}ms",
            f"y={p.y:.1f} vy={p.velocity_y:.1f} airborne={p.airborne}",
        )
        for i, line in enumerate(lines):
            draw_manager.draw_text(line, (self.width - 10, 10 + i * 18), Colors.DEBUG,
                                   size=DEBUG_SIZE, layer=Layers.DEBUG, anchor="topright")
