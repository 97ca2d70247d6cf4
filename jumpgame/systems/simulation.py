"""
simulation.py
-------------
One frame of the jump game: spawn, scroll, integrate, collide, score.

Ordering
--------
1. Snapshot the player and obstacles as they were at the start of the frame.
2. Spawn and scroll obstacles (the spawner also advances its timer).
3. Integrate the player.
4. Test collisions against the snapshot, not the updated positions, so a
   hit is detected one frame after the overlap is first drawn.
5. Accrue score.
6. Enter the game-over state if step 4 found a hit.

A session that is already over is left untouched.
"""

from jumpgame.systems.collision_manager import find_collision
from jumpgame.systems.physics import integrate_player
from jumpgame.systems.scoring import accrue_score


def step_session(session, delta_ms, spawner) -> bool:
    """
    Advance ``session`` by one frame.

    Args:
        session: SessionState to update in place
        delta_ms: Sanitized elapsed milliseconds since the previous frame
        spawner: ObstacleSpawner owning spawn randomness

    Returns:
        bool: True if the frame changed state (session was running)
    """
    if session.game_over:
        return False

    player_before = session.player.copy()
    obstacles_before = [obstacle.copy() for obstacle in session.obstacles]

    spawner.update(session, delta_ms)
    integrate_player(session.player)

    hit = find_collision(player_before, obstacles_before)

    session.score = accrue_score(session.score, delta_ms)
    session.frames += 1

    if hit is not None:
        session.end()

    return True
