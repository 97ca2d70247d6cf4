"""
base_scene.py
-------------
Abstract base class for scenes.
Defines the mount / unmount lifecycle and the per-frame interface.
"""

from abc import ABC, abstractmethod
from enum import Enum


class SceneState(Enum):
    """Lifecycle states for a scene."""
    INACTIVE = "inactive"   # Not mounted
    ACTIVE = "active"       # Mounted and receiving frames


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
    """

    def __init__(self):
        self.state = SceneState.INACTIVE

    @property
    def mounted(self) -> bool:
        return self.state is SceneState.ACTIVE

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called when the scene is mounted."""
        self.state = SceneState.ACTIVE

    def on_exit(self):
        """Called when the scene is torn down."""
        self.state = SceneState.INACTIVE

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic. ``dt`` is in milliseconds."""

    @abstractmethod
    def draw(self, draw_manager):
        """Queue the scene's draw calls."""
