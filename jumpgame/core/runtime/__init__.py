"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class constants
with no initialization overhead.
"""

from jumpgame.core.runtime.game_settings import (
    Display,
    Physics,
    Spawning,
    PlayerDefaults,
    Colors,
    Layers,
    Debug,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Colors',
    'Layers',
    # Simulation
    'Physics',
    'Spawning',
    'PlayerDefaults',
    # Debug
    'Debug',
]
