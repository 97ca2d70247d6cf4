"""
game_settings.py
----------------
Centralized constants for all game systems.

Values are plain class attributes so that config_manager.apply_overrides()
can patch them from a JSON or YAML file before the scene is built.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Play field and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 500
    FPS: int = 60
    CAPTION: str = "2D Jump Game"

    # Strip below the play field for the hint / game-over message
    FOOTER_HEIGHT: int = 60
    WINDOW_SCALE: float = 1.0


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Per-frame physics constants (units are pixels per frame)."""
    GRAVITY: float = 0.5
    JUMP_FORCE: float = -12
    GROUND_HEIGHT: int = 400

    # Frame deltas outside [0, MAX_FRAME_DELTA_MS] are treated as 0
    MAX_FRAME_DELTA_MS: float = 1000.0

    # Milliseconds of elapsed time per score point
    SCORE_INTERVAL_MS: int = 100


# ===========================================================
# Obstacle Spawning
# ===========================================================

class Spawning:
    """Obstacle spawn timing, spacing and size ranges."""
    OBSTACLE_SPEED: float = 5
    MIN_OBSTACLE_SPACING: float = 500    # ms
    MAX_OBSTACLE_SPACING: float = 800    # ms
    MIN_DISTANCE_BETWEEN_OBSTACLES: float = 400  # px

    MIN_WIDTH: float = 30
    WIDTH_RANGE: float = 20
    MIN_HEIGHT: float = 50
    HEIGHT_RANGE: float = 50


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Player start position and size."""
    X: float = 50
    WIDTH: float = 40
    HEIGHT: float = 40


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Flat fill colors (RGB)."""
    BACKGROUND = (243, 244, 246)
    GROUND = (74, 85, 104)
    OBSTACLE = (229, 62, 62)
    PLAYER = (59, 130, 246)
    SCORE = (26, 32, 44)
    HINT = (75, 85, 99)
    GAME_OVER = (220, 38, 38)
    DEBUG = (16, 120, 40)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    GROUND: int = 100
    OBSTACLES: int = 200
    PLAYER: int = 300
    UI: int = 600
    DEBUG: int = 900


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_OVERLAY: bool = False
    FRAME_TIME_WARNING: float = 33.3
