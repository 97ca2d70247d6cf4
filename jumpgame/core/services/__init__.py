"""
Core services exports.

Provides configuration loading, keyboard routing and window management.
"""

from jumpgame.core.services.config_manager import load_config, apply_overrides
from jumpgame.core.services.input_manager import InputManager
from jumpgame.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    'apply_overrides',
    # Services
    'InputManager',
    'DisplayManager',
]
