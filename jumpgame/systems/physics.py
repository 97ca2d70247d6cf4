"""
physics.py
----------
Vertical physics for the player: jump impulse, gravity and ground clamp.

Physics advances one fixed step per rendered frame. The frame delta only
drives spawn timing and score, never the integration step.
"""

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.game_settings import Physics


def apply_jump(player) -> bool:
    """
    Give a grounded player the upward impulse.

    Returns:
        bool: True if the jump took effect, False while already airborne.
    """
    if player.airborne:
        return False

    player.velocity_y = Physics.JUMP_FORCE
    player.airborne = True
    DebugLogger.action(f"Jump (vy={player.velocity_y})", category="input")
    return True


def integrate_player(player):
    """
    Advance the player by one frame.

    The position moves by the current velocity and gravity is added to the
    velocity. Reaching or passing the ground snaps the player onto it,
    zeroes the velocity and clears the airborne flag.
    """
    new_y = player.y + player.velocity_y
    new_velocity_y = player.velocity_y + Physics.GRAVITY
    rest_y = Physics.GROUND_HEIGHT - player.height

    if new_y >= rest_y:
        if player.airborne:
            DebugLogger.trace(f"Landed at y={rest_y}", category="game_state")
        player.y = rest_y
        player.velocity_y = 0
        player.airborne = False
    else:
        player.y = new_y
        player.velocity_y = new_velocity_y

    return player
