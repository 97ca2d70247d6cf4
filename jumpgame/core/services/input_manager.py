"""
input_manager.py
----------------
Keyboard event routing with context-aware action lookup.

Provides:
- Context-keyed key bindings (gameplay, system)
- Key-down events translated into action names
- Listener registration so scenes can subscribe on mount and
  unsubscribe on unmount
"""

import pygame

from jumpgame.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "jump": [pygame.K_SPACE, pygame.K_UP],
        "restart": [pygame.K_SPACE],
    },
    "system": {
        "toggle_debug": [pygame.K_F3],
        "quit": [pygame.K_ESCAPE],
    },
}


class InputManager:
    """
    Translates key-down events into actions and fans them out to listeners.

    A single key can carry several actions (Space is both "jump" and
    "restart"); listeners receive every action bound to the key and decide
    which one applies to the current game state.

    Usage:
        input_manager.add_listener(scene.handle_actions)
        input_manager.handle_event(event)   # from the game loop
        input_manager.remove_listener(scene.handle_actions)
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.context = "gameplay"
        self._listeners = []

        self._init_lookup_tables()
        self._validate_bindings()

    def _init_lookup_tables(self):
        """Build key -> actions tables per context."""
        self._key_to_actions = {}

        for context_name, actions in self.key_bindings.items():
            table = {}
            for action_name, keys in actions.items():
                for key in keys:
                    table.setdefault(key, []).append(action_name)
            self._key_to_actions[context_name] = {k: tuple(v) for k, v in table.items()}

    def _validate_bindings(self):
        """Warn if system keys overlap with gameplay keys."""
        system_keys = set(self._key_to_actions.get("system", {}))
        gameplay_keys = set(self._key_to_actions.get("gameplay", {}))

        overlap = system_keys & gameplay_keys
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Listeners
    # ===========================================================

    def add_listener(self, callback):
        """Register ``callback(actions)``. Adding the same callback twice is a no-op."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback):
        """Unregister a listener. Unknown callbacks are ignored."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # ===========================================================
    # Event Handling
    # ===========================================================

    def actions_for_key(self, key, context=None) -> tuple:
        """All actions bound to ``key`` in ``context`` (active context if None)."""
        table = self._key_to_actions.get(context or self.context, {})
        return table.get(key, ())

    def handle_event(self, event) -> bool:
        """
        Route a pygame event to the listeners.

        Only KEYDOWN events with a bound key are forwarded; everything else
        is ignored.

        Returns:
            bool: True if at least one action was dispatched
        """
        if event.type != pygame.KEYDOWN:
            return False

        actions = self.actions_for_key(event.key)
        if not actions:
            return False

        DebugLogger.trace(f"Key {event.key} -> {actions}", category="input")
        for listener in list(self._listeners):
            listener(actions)
        return True

    def handle_system_event(self, event):
        """
        Resolve a global hotkey.

        Returns:
            str or None: System action name ("toggle_debug", "quit")
        """
        if event.type != pygame.KEYDOWN:
            return None

        actions = self.actions_for_key(event.key, context="system")
        return actions[0] if actions else None
