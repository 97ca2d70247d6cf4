"""
collision_manager.py
--------------------
Axis-aligned overlap test between the player and ground-anchored obstacles.

Obstacles always touch the ground, so the vertical test only needs the
player's bottom edge against the obstacle's top edge.
"""

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.game_settings import Physics


def check_collision(player, obstacle) -> bool:
    """Return True if the player box overlaps the obstacle box."""
    return (
        player.x < obstacle.x + obstacle.width
        and player.x + player.width > obstacle.x
        and player.y + player.height > Physics.GROUND_HEIGHT - obstacle.height
    )


def find_collision(player, obstacles):
    """
    Return the first obstacle the player overlaps, or None.

    Args:
        player: Player snapshot
        obstacles: Obstacle snapshots, in creation order
    """
    for obstacle in obstacles:
        if check_collision(player, obstacle):
            DebugLogger.trace(f"Hit {obstacle} at player y={player.y:.1f}", category="collision")
            return obstacle
    return None
