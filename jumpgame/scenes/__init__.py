"""
Scene exports.
"""

from jumpgame.scenes.jump_scene import JumpScene

__all__ = [
    'JumpScene',
]
