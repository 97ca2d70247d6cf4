"""
player.py
---------
The player-controlled square.

Only the vertical axis moves: x stays at its start value for the whole
session while y and velocity_y are driven by the physics integrator.
"""

from jumpgame.core.runtime.game_settings import Physics, PlayerDefaults


class Player:
    """Axis-aligned player box with vertical velocity."""

    __slots__ = ("x", "y", "width", "height", "velocity_y", "airborne")

    def __init__(self, x=None, y=None, width=None, height=None,
                 velocity_y=0.0, airborne=False):
        self.width = PlayerDefaults.WIDTH if width is None else width
        self.height = PlayerDefaults.HEIGHT if height is None else height
        self.x = PlayerDefaults.X if x is None else x
        self.y = self.ground_y() if y is None else y
        self.velocity_y = velocity_y
        self.airborne = airborne

    # ===========================================================
    # Geometry
    # ===========================================================

    def ground_y(self):
        """Resting y for this player (top edge when standing on the ground)."""
        return Physics.GROUND_HEIGHT - self.height

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def as_rect(self):
        """(x, y, w, h) tuple for drawing."""
        return (self.x, self.y, self.width, self.height)

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def copy(self):
        return Player(self.x, self.y, self.width, self.height,
                      self.velocity_y, self.airborne)

    def __eq__(self, other):
        if not isinstance(other, Player):
            return NotImplemented
        return (self.x, self.y, self.width, self.height, self.velocity_y, self.airborne) == \
            (other.x, other.y, other.width, other.height, other.velocity_y, other.airborne)

    def __repr__(self):
        return (f"Player(x={self.x}, y={self.y}, w={self.width}, h={self.height}, "
                f"vy={self.velocity_y}, airborne={self.airborne})")
