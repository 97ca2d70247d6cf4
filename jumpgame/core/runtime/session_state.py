"""
session_state.py
----------------
Single owned aggregate for one play-through.

Holds the player, the obstacle sequence, score, spawn timer and the
game-over flag. The simulation step replaces its fields once per frame;
nothing else writes to it except the jump and restart intents.
"""

from enum import Enum

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.entities.player import Player


class SessionPhase(Enum):
    """Session-level state machine."""
    RUNNING = "running"
    GAME_OVER = "game_over"


class SessionState:
    """Container for run-specific state. Reset when restarting."""

    def __init__(self):
        self.player = Player()
        self.obstacles = []
        self.score = 0
        self.obstacle_spawn_timer = 0.0
        self.game_over = False

        # Timestamp (ms) of the previous frame; None until the first frame
        self.last_timestamp = None

        # Frames stepped while running, for the debug overlay
        self.frames = 0

    # ===========================================================
    # Phase
    # ===========================================================

    @property
    def phase(self) -> SessionPhase:
        return SessionPhase.GAME_OVER if self.game_over else SessionPhase.RUNNING

    @property
    def is_running(self) -> bool:
        return not self.game_over

    def end(self):
        """Enter the terminal state. Idempotent."""
        if self.game_over:
            return
        self.game_over = True
        DebugLogger.state(f"Game over (score={self.score}, frames={self.frames})",
                          category="game_state")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Restore every field to its initial value."""
        self.player = Player()
        self.obstacles = []
        self.score = 0
        self.obstacle_spawn_timer = 0.0
        self.game_over = False
        self.last_timestamp = None
        self.frames = 0
        DebugLogger.state("Session reset", category="game_state")

    def __repr__(self):
        return (f"SessionState(phase={self.phase.value}, score={self.score}, "
                f"obstacles={len(self.obstacles)}, timer={self.obstacle_spawn_timer:.1f})")
