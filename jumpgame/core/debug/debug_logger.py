"""
debug_logger.py
---------------
Diagnostic console logger with category filtering and formatted output.

Every manager in the game reports through DebugLogger so that a single
table (LoggerConfig) decides what reaches the terminal.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core Engine
        "loading": True,
        "system": True,
        "display": True,
        "scene": True,
        "input": True,
        "debug_hud": False,

        # Frame Loop
        "game_state": True,
        "timing": True,

        # Entities
        "entity_spawn": True,
        "entity_cleanup": False,
        "collision": True,

        # Rendering
        "render": False,
    }

    @classmethod
    def configure(cls, level=None, enabled=None):
        """Apply runtime overrides (CLI flags, tests)."""
        if level is not None:
            level = level.upper()
            if level not in DebugLogger.LEVEL_VALUES:
                raise ValueError(f"Unknown log level: {level}")
            cls.LOG_LEVEL = level
        if enabled is not None:
            cls.ENABLE_LOGGING = bool(enabled)


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"


# ===========================================================
# Debug Logger
# ===========================================================


class DebugLogger:
    """
    Static console logger.

    Each line reads ``[HH:MM:SS] [Source][TAG] message``, where Source is
    the class (or module) that logged it. Per-frame messages go through
    trace() and only appear at VERBOSE.
    """

    LINE_LENGTH = 59
    ENTRY_DOTS_COLUMN = 30

    # tag -> (color, level)
    TAGS = {
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
    }

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4
    }

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def should_log(category: str, level: str) -> bool:
        """Check if a message passes the category and level filters."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        level_val = DebugLogger.LEVEL_VALUES.get(level, 3)
        config_val = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return level_val <= config_val

    @staticmethod
    def _get_caller() -> str:
        """Name the class or module that called the public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__

        module_name = frame.f_globals.get("__name__", "unknown").rsplit(".", 1)[-1]
        return "".join(p.capitalize() for p in module_name.split("_"))

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger.should_log(category, level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        print(f"{color}[{timestamp}] [{source}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """State change log."""
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        """Player or user action."""
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "system"):
        """Verbose per-frame trace."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a centered section header."""
        if not DebugLogger.should_log("system", "INFO"):
            return
        line = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{line}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str):
        """Print ``> Module ........ [OK]`` for a manager that finished init."""
        if not DebugLogger.should_log("system", "INFO"):
            return
        label = f"> {module}".ljust(DebugLogger.ENTRY_DOTS_COLUMN)
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(" [OK]"), 1)
        print(f"{Colors.WHITE}{label}{dots} {Colors.GREEN}[OK]{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str):
        """Print an indented detail under the last init entry."""
        if not DebugLogger.should_log("system", "INFO"):
            return
        print(f"    • {Colors.WHITE}{detail}{Colors.RESET}")
