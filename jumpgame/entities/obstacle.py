"""
obstacle.py
-----------
Ground-anchored rectangle that scrolls from the right edge to the left.

Only x, width and height are stored; the top edge is derived from the
ground line so obstacles always stand on the ground.
"""

from jumpgame.core.runtime.game_settings import Physics


class Obstacle:
    """A single scrolling obstacle."""

    __slots__ = ("x", "width", "height")

    def __init__(self, x, width, height):
        self.x = x
        self.width = width
        self.height = height

    @property
    def right(self):
        return self.x + self.width

    @property
    def top(self):
        """y of the top edge, measured from the ground line."""
        return Physics.GROUND_HEIGHT - self.height

    def is_offscreen(self):
        """True once the obstacle has scrolled fully past the left edge."""
        return self.x + self.width <= 0

    def as_rect(self):
        return (self.x, self.top, self.width, self.height)

    def copy(self):
        return Obstacle(self.x, self.width, self.height)

    def __eq__(self, other):
        if not isinstance(other, Obstacle):
            return NotImplemented
        return (self.x, self.width, self.height) == (other.x, other.width, other.height)

    def __repr__(self):
        return f"Obstacle(x={self.x}, w={self.width}, h={self.height})"
