"""
draw_manager.py
---------------
Layered draw queue for flat-colored rectangles and text.

Responsibilities:
- Provide the drawing-surface primitives used by scenes
  (clear, fill_rect, draw_text)
- Batch draw calls per layer and flush them onto a target surface
- Cache fonts by size
"""

import pygame

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.game_settings import Colors


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, background=None):
        """
        Args:
            background: RGB fill used when the surface is cleared
        """
        self.background = Colors.BACKGROUND if background is None else background

        # {layer: [(kind, payload), ...]}
        self.layers = {}
        self._layer_keys_cache = []
        self._layers_dirty = False

        self._fonts = {}

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Empty all draw queues for a new frame."""
        for items in self.layers.values():
            items.clear()

    def _queue(self, layer, kind, payload):
        if layer not in self.layers:
            self.layers[layer] = []
            self._layers_dirty = True
        self.layers[layer].append((kind, payload))

    def fill_rect(self, rect, color, layer=0):
        """
        Queue a filled rectangle.

        Args:
            rect: (x, y, w, h) in logical pixels
            color: RGB tuple
            layer: Render layer (lower = first)
        """
        x, y, w, h = rect
        if w <= 0 or h <= 0:
            return
        self._queue(layer, "rect", (pygame.Rect(round(x), round(y), round(w), round(h)), color))

    def draw_text(self, text, pos, color, size=24, layer=0, anchor="topleft"):
        """
        Queue a line of text.

        Args:
            text: String to render
            pos: Anchor position
            color: RGB tuple
            size: Font size in points
            layer: Render layer
            anchor: pygame.Rect attribute the position refers to ("topleft", "center", ...)
        """
        self._queue(layer, "text", (str(text), pos, color, size, anchor))

    def queued_count(self) -> int:
        return sum(len(items) for items in self.layers.values())

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """
        Clear ``target_surface`` to the background and flush every queue.

        Args:
            target_surface: pygame.Surface to draw on
        """
        target_surface.fill(self.background)

        if self._layers_dirty:
            self._layer_keys_cache = sorted(self.layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            for kind, payload in self.layers[layer]:
                if kind == "rect":
                    rect, color = payload
                    pygame.draw.rect(target_surface, color, rect)
                elif kind == "text":
                    self._render_text(target_surface, *payload)

        DebugLogger.trace(f"Rendered {self.queued_count()} draw calls", category="render")

    def _render_text(self, surface, text, pos, color, size, anchor):
        font = self._get_font(size)
        image = font.render(text, True, color)
        rect = image.get_rect(**{anchor: pos})
        surface.blit(image, rect)

    def _get_font(self, size):
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font
