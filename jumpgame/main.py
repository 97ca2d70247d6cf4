"""
main.py
-------
Command line entry point.

Usage:
    jumpgame                          # Play with default settings
    jumpgame --config settings.yaml   # Override settings from JSON/YAML
    jumpgame --seed 42                # Deterministic obstacle sequence
    jumpgame --log-level VERBOSE      # Per-frame traces
"""

import argparse
import sys

from jumpgame.core.debug.debug_logger import LoggerConfig
from jumpgame.core.runtime.game_loop import GameLoop
from jumpgame.core.services.config_manager import apply_overrides, load_config


def build_parser():
    parser = argparse.ArgumentParser(description="Side-scrolling jump game")
    parser.add_argument("--config", metavar="PATH",
                        help="JSON or YAML file with setting overrides")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle spawning")
    parser.add_argument("--fps", type=int, default=None,
                        help="Target frame rate")
    parser.add_argument("--log-level", default=None,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    return parser


def main(argv=None):
    """Parse arguments, apply overrides and run the game."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        LoggerConfig.configure(level=args.log_level)

    if args.config:
        apply_overrides(load_config(args.config, strict=True))

    GameLoop(fps=args.fps, seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
