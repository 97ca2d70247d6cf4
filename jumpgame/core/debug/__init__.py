"""
Debug exports.

Provides the category-filtered console logger.
"""

from jumpgame.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = [
    'DebugLogger',
    'LoggerConfig',
]
