"""
jump_scene.py
-------------
The simulation loop: one scheduled frame callback that steps the session
and queues its drawing.

Responsibilities
----------------
- Subscribe to keyboard actions and request frames while mounted.
- Turn frame timestamps into sanitized deltas.
- Step physics, spawning, collision and score through step_session().
- Handle the jump and restart intents.
- Draw ground, obstacles, player, score and footer text.

Unmounting cancels the pending frame request and the keyboard listener.
"""

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.base_scene import BaseScene
from jumpgame.core.runtime.frame_scheduler import frame_delta
from jumpgame.core.runtime.game_settings import Colors, Display, Layers, Physics
from jumpgame.core.runtime.session_state import SessionState
from jumpgame.systems.physics import apply_jump
from jumpgame.systems.simulation import step_session
from jumpgame.systems.spawn_manager import ObstacleSpawner
from jumpgame.ui.hud import HUD

GROUND_LINE_THICKNESS = 2


class JumpScene(BaseScene):
    """Single-scene jump game."""

    def __init__(self, scheduler, input_manager, draw_manager, rng=None, hud=None):
        """
        Args:
            scheduler: FrameScheduler delivering frame timestamps
            input_manager: InputManager delivering key actions
            draw_manager: DrawManager the scene queues onto
            rng: Random source for obstacle spawning
            hud: Optional HUD (a default one is created if None)
        """
        super().__init__()
        DebugLogger.section("Initializing Scene: JumpScene")

        self.scheduler = scheduler
        self.input_manager = input_manager
        self.draw_manager = draw_manager

        self.session = SessionState()
        self.spawner = ObstacleSpawner(rng=rng, surface_width=Display.WIDTH)
        self.hud = hud or HUD()

        self.fps = 0.0
        self._frame_handle = None

    # ===========================================================
    # Mount / Unmount
    # ===========================================================

    def on_enter(self):
        """Start receiving key actions and frames. Mounting twice is a no-op."""
        if self.mounted:
            return
        super().on_enter()
        # Time spent unmounted must not count as a frame delta
        self.session.last_timestamp = None
        self.input_manager.add_listener(self.handle_actions)
        self._frame_handle = self.scheduler.request_frame(self.on_frame)
        DebugLogger.state("JumpScene mounted", category="scene")

    def on_exit(self):
        """Cancel the pending frame and drop the keyboard listener."""
        if not self.mounted:
            return
        self.scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None
        self.input_manager.remove_listener(self.handle_actions)
        super().on_exit()
        DebugLogger.state("JumpScene unmounted", category="scene")

    # ===========================================================
    # Frame Callback
    # ===========================================================

    def on_frame(self, timestamp):
        """
        One animation frame: step, draw, then request the next frame.

        Args:
            timestamp: Frame timestamp in milliseconds
        """
        delta = frame_delta(self.session.last_timestamp, timestamp)
        self.session.last_timestamp = timestamp

        self.update(delta)

        self.draw_manager.clear()
        self.draw(self.draw_manager)

        if self.mounted:
            self._frame_handle = self.scheduler.request_frame(self.on_frame)

    def update(self, dt: float):
        """Advance the session by one frame of ``dt`` milliseconds."""
        step_session(self.session, dt, self.spawner)

    # ===========================================================
    # Input Intents
    # ===========================================================

    def handle_actions(self, actions):
        """
        React to the actions bound to a pressed key.

        While the session is over only "restart" does anything; while it is
        running only "jump" does.
        """
        if self.session.game_over:
            if "restart" in actions:
                self.restart()
            return

        if "jump" in actions:
            self.jump()

    def jump(self) -> bool:
        """Jump if the session is running and the player is grounded."""
        if self.session.game_over:
            return False
        return apply_jump(self.session.player)

    def restart(self):
        """Reset the session to its initial state."""
        self.session.reset()
        DebugLogger.action("Restarted session", category="game_state")

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        """Queue ground, obstacles, player and HUD text."""
        session = self.session

        draw_manager.fill_rect((0, Physics.GROUND_HEIGHT, Display.WIDTH, GROUND_LINE_THICKNESS),
                               Colors.GROUND, layer=Layers.GROUND)

        for obstacle in session.obstacles:
            draw_manager.fill_rect(obstacle.as_rect(), Colors.OBSTACLE, layer=Layers.OBSTACLES)

        draw_manager.fill_rect(session.player.as_rect(), Colors.PLAYER, layer=Layers.PLAYER)

        self.hud.draw_score(draw_manager, session.score)
        self.hud.draw_footer(draw_manager, session)
        self.hud.draw_debug(draw_manager, session, self.fps)
