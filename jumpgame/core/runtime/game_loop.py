"""
game_loop.py
------------
Defines the GameLoop class responsible for orchestrating the runtime cycle.

Responsibilities
----------------
- Initialize pygame and the runtime services (display, input, draw manager,
  frame scheduler)
- Mount the JumpScene and unmount it on shutdown
- Drive one scheduler frame per display refresh (event -> frame -> render)
- Handle global hotkeys (debug overlay, quit)
"""

import random
import time

import pygame

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime.frame_scheduler import FrameScheduler
from jumpgame.core.runtime.game_settings import Debug, Display
from jumpgame.core.services.display_manager import DisplayManager
from jumpgame.core.services.input_manager import InputManager
from jumpgame.graphics.draw_manager import DrawManager
from jumpgame.scenes.jump_scene import JumpScene


class GameLoop:
    """Core runtime controller that owns the window and the frame cadence."""

    def __init__(self, fps=None, seed=None):
        """
        Args:
            fps: Target frame rate (defaults to Display.FPS)
            seed: Optional seed for deterministic obstacle spawning
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()
        DebugLogger.init_entry("Pygame")

        self.fps = Display.FPS if fps is None else fps

        self.display = DisplayManager()
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.scheduler = FrameScheduler()

        rng = random.Random(seed)
        if seed is not None:
            DebugLogger.init_sub(f"Spawn seed: {seed}")

        self.scene = JumpScene(
            self.scheduler,
            self.input_manager,
            self.draw_manager,
            rng=rng,
        )
        self.scene.hud.show_debug = Debug.SHOW_OVERLAY

        self.clock = pygame.time.Clock()
        self.running = False
        self._last_perf_warn_time = 0.0

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        self.running = True
        self.scene.on_enter()

        try:
            while self.running:
                self.clock.tick(self.fps)
                self._handle_events()
                if not self.running:
                    break
                self.tick(pygame.time.get_ticks())
        finally:
            self.shutdown()

    def tick(self, timestamp_ms):
        """Run one display refresh: scheduled frame callbacks, then present."""
        start = time.perf_counter()

        self.scene.fps = self.clock.get_fps()
        self.scheduler.run_frame(timestamp_ms)

        self.draw_manager.render(self.display.get_game_surface())
        self.display.render()

        frame_time_ms = (time.perf_counter() - start) * 1000
        if frame_time_ms > Debug.FRAME_TIME_WARNING:
            now = time.perf_counter()
            if now - self._last_perf_warn_time > 1.0:  # Throttle to 1/sec
                self._last_perf_warn_time = now
                DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="timing")

    def shutdown(self):
        """Unmount the scene and release pygame. Safe to call twice."""
        self.running = False
        self.scene.on_exit()
        self.scheduler.clear()
        if pygame.get_init():
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Route quit requests, global hotkeys and gameplay keys."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                return

            system_action = self.input_manager.handle_system_event(event)
            if system_action == "quit":
                self.running = False
                DebugLogger.action("Quit key pressed")
                return
            if system_action == "toggle_debug":
                visible = self.scene.hud.toggle_debug()
                DebugLogger.action(f"Debug overlay: {'ON' if visible else 'OFF'}", category="debug_hud")
                continue

            self.input_manager.handle_event(event)
