"""
config_manager.py
-----------------
Configuration loader for game setting overrides.

Features:
- Supports .json and .yaml/.yml files
- Recursively merges over defaults
- Ignores '_notes' keys for human-readable configs
- Applies loaded sections onto the game_settings constant classes
"""

import json
import os

import yaml

from jumpgame.core.debug.debug_logger import DebugLogger
from jumpgame.core.runtime import game_settings


# ===========================================================
# Configuration
# ===========================================================

# Config section name -> settings class
SECTIONS = {
    "display": game_settings.Display,
    "physics": game_settings.Physics,
    "spawning": game_settings.Spawning,
    "player": game_settings.PlayerDefaults,
    "colors": game_settings.Colors,
    "debug": game_settings.Debug,
}

YAML_EXTENSIONS = (".yaml", ".yml")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Path to a .json, .yaml or .yml file
        default_dict: Default fallback config
        strict: If True, raise on a missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    try:
        if str(filename).endswith(YAML_EXTENSIONS):
            data = _load_yaml(filename)
        else:
            data = _load_json(filename)

        if not isinstance(data, dict):
            raise ValueError(f"top level of {filename} must be a mapping")

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not loaded: {filename}") from e
        DebugLogger.warn(f"Failed to load {filename}: {e} - using defaults", category="loading")
        return default_dict.copy()


def apply_overrides(config):
    """
    Write config values onto the settings classes.

    Keys are matched case-insensitively against existing attributes, e.g.
    ``{"physics": {"gravity": 0.6}}`` sets ``Physics.GRAVITY``. Unknown
    sections or keys are logged and skipped.

    Returns:
        int: Number of settings changed
    """
    applied = 0
    for section_name, values in config.items():
        if section_name == "_notes":
            continue

        target = SECTIONS.get(section_name.lower())
        if target is None or not isinstance(values, dict):
            DebugLogger.warn(f"Unknown config section: {section_name}", category="loading")
            continue

        for key, value in values.items():
            if key == "_notes":
                continue
            attr = key.upper()
            if not hasattr(target, attr):
                DebugLogger.warn(f"Unknown setting: {section_name}.{key}", category="loading")
                continue
            if isinstance(value, list):
                value = tuple(value)
            setattr(target, attr, value)
            applied += 1

    DebugLogger.system(f"Applied {applied} setting override(s)", category="loading")
    return applied


def snapshot_settings():
    """Capture the current value of every setting (used to restore after tests)."""
    return {
        name: {attr: getattr(cls, attr) for attr in vars(cls) if attr.isupper()}
        for name, cls in SECTIONS.items()
    }


def restore_settings(snapshot):
    """Restore settings captured by snapshot_settings()."""
    for name, values in snapshot.items():
        cls = SECTIONS[name]
        for attr, value in values.items():
            setattr(cls, attr, value)


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
