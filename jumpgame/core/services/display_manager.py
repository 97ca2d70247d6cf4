"""
display_manager.py
------------------
Window creation and presentation of the logical game surface.

Responsibilities:
- Own the fixed-size logical surface (play field plus footer strip)
- Create the window, optionally scaled by Display.WINDOW_SCALE
- Scale and flip the logical surface each frame
"""

import pygame

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.game_settings import Display


class DisplayManager:
    """Manages the window and the logical render target."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, game_width=None, game_height=None, footer_height=None, scale=None):
        """
        Args:
            game_width: Logical play field width (defaults to Display.WIDTH)
            game_height: Logical play field height (defaults to Display.HEIGHT)
            footer_height: Height of the message strip below the play field
            scale: Window scale factor
        """
        DebugLogger.init_entry("DisplayManager")

        self.game_width = Display.WIDTH if game_width is None else game_width
        self.game_height = Display.HEIGHT if game_height is None else game_height
        self.footer_height = Display.FOOTER_HEIGHT if footer_height is None else footer_height
        self.scale = Display.WINDOW_SCALE if scale is None else scale

        self.surface_size = (self.game_width, self.game_height + self.footer_height)
        self.game_surface = pygame.Surface(self.surface_size)

        self.window = None
        self._create_window()

    def _create_window(self):
        window_size = (
            int(self.surface_size[0] * self.scale),
            int(self.surface_size[1] * self.scale),
        )
        self.window = pygame.display.set_mode(window_size)
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_sub(f"Window: {window_size[0]}x{window_size[1]} (scale {self.scale:.2f})")

    # ===========================================================
    # Rendering Pipeline
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """Get the logical surface (play field on top, footer below)."""
        return self.game_surface

    def render(self):
        """Present the logical surface in the window."""
        if self.scale == 1.0:
            self.window.blit(self.game_surface, (0, 0))
        else:
            pygame.transform.scale(self.game_surface, self.window.get_size(), self.window)
        pygame.display.flip()

