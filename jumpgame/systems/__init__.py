"""
Gameplay systems exports.

Provides the physics integrator, obstacle spawner, collision test,
score accrual and the per-frame step that ties them together.
"""

from jumpgame.systems.physics import apply_jump, integrate_player
from jumpgame.systems.spawn_manager import ObstacleSpawner
from jumpgame.systems.collision_manager import check_collision, find_collision
from jumpgame.systems.scoring import accrue_score
from jumpgame.systems.simulation import step_session

__all__ = [
    'apply_jump',
    'integrate_player',
    'ObstacleSpawner',
    'check_collision',
    'find_collision',
    'accrue_score',
    'step_session',
]
