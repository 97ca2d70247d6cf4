"""
jumpgame/entities/__init__.py
-----------------------------
Entity module exports.

Exports:
    Player   - The jumping square (only y moves)
    Obstacle - Ground-anchored scrolling rectangle
"""

from jumpgame.entities.player import Player
from jumpgame.entities.obstacle import Obstacle

__all__ = [
    'Player',
    'Obstacle',
]
