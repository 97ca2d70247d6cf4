"""
spawn_manager.py
----------------
Spawns, scrolls and culls obstacles.

Responsibilities
----------------
- Accumulate frame time into the spawn timer.
- Roll a fresh spawn threshold every frame it is checked.
- Enforce the minimum horizontal gap to the previous obstacle.
- Scroll every obstacle left and drop the ones that left the screen.

A failed distance check keeps the timer running, so the spawn is retried
on every following frame until the gap opens up.
"""

import random

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.game_settings import Display, Spawning
from jumpgame.entities.obstacle import Obstacle


class ObstacleSpawner:
    """
    Obstacle lifecycle manager.

    The random source is injectable; anything with a ``random()`` method
    returning floats in [0, 1) works (``random.Random`` in the game, a
    scripted sequence in tests). Draw order per spawn is threshold, width,
    height.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, rng=None, surface_width=None):
        """
        Args:
            rng: Random source (defaults to a fresh random.Random)
            surface_width: Right edge where obstacles appear (defaults to Display.WIDTH)
        """
        self.rng = rng if rng is not None else random.Random()
        self.surface_width = Display.WIDTH if surface_width is None else surface_width

        self._stats = {
            "spawned": 0,
            "deferred": 0,
            "culled": 0,
        }

        DebugLogger.init_entry("ObstacleSpawner")

    # ===========================================================
    # Spawn Decision
    # ===========================================================

    def roll_threshold(self) -> float:
        """Draw a spawn threshold in [MIN_OBSTACLE_SPACING, MAX_OBSTACLE_SPACING)."""
        spread = Spawning.MAX_OBSTACLE_SPACING - Spawning.MIN_OBSTACLE_SPACING
        return Spawning.MIN_OBSTACLE_SPACING + self.rng.random() * spread

    def can_spawn(self, obstacles) -> bool:
        """True if the newest obstacle is far enough from the right edge."""
        if not obstacles:
            return True
        last = obstacles[-1]
        return last.x < self.surface_width - Spawning.MIN_DISTANCE_BETWEEN_OBSTACLES

    def create_obstacle(self) -> Obstacle:
        """New obstacle at the right edge with randomized size."""
        width = Spawning.MIN_WIDTH + self.rng.random() * Spawning.WIDTH_RANGE
        height = Spawning.MIN_HEIGHT + self.rng.random() * Spawning.HEIGHT_RANGE
        return Obstacle(x=self.surface_width, width=width, height=height)

    def try_spawn(self, obstacles, spawn_timer):
        """
        Run one spawn check.

        Args:
            obstacles: Current obstacle sequence (appended to in place)
            spawn_timer: Accumulated ms since the last spawn

        Returns:
            float: The spawn timer after the check (0 if an obstacle spawned)
        """
        if spawn_timer <= self.roll_threshold():
            return spawn_timer

        if not self.can_spawn(obstacles):
            self._stats["deferred"] += 1
            return spawn_timer

        obstacle = self.create_obstacle()
        obstacles.append(obstacle)
        self._stats["spawned"] += 1
        DebugLogger.trace(f"Spawned {obstacle}", category="entity_spawn")
        return 0.0

    # ===========================================================
    # Movement & Cleanup
    # ===========================================================

    def advance(self, obstacles):
        """
        Scroll every obstacle left by OBSTACLE_SPEED and drop off-screen ones.

        Returns:
            list: Surviving obstacles in their original order
        """
        survivors = []
        for obstacle in obstacles:
            obstacle.x -= Spawning.OBSTACLE_SPEED
            if obstacle.is_offscreen():
                self._stats["culled"] += 1
                DebugLogger.trace(f"Culled {obstacle}", category="entity_cleanup")
                continue
            survivors.append(obstacle)
        return survivors

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, session, delta_ms):
        """
        Spawn and scroll obstacles for one frame.

        Args:
            session: SessionState whose obstacles and spawn timer are updated
            delta_ms: Sanitized frame delta in milliseconds
        """
        session.obstacle_spawn_timer += delta_ms
        session.obstacle_spawn_timer = self.try_spawn(session.obstacles, session.obstacle_spawn_timer)
        session.obstacles = self.advance(session.obstacles)

    def get_stats(self) -> dict:
        return self._stats.copy()
