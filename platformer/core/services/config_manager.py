"""
config_manager.py
-----------------
Configuration loader for simulation tuning files.

Features:
- Loads .json config files from the bundled config directory or a path
- Builds file index once on first lookup
- Recursively merges over defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

from platformer.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    ".",
    DATA_ROOT,
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file and merge it over defaults.

    Args:
        filename: Filename (looked up in the index) or full path
        default_dict: Default fallback config
        strict: If True, raise FileNotFoundError when the file is missing

    Returns:
        dict: Merged configuration

    Raises:
        json.JSONDecodeError: The file exists but is not valid JSON.
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename) and os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
    except json.JSONDecodeError as e:
        DebugLogger.fail(f"Invalid JSON in {path}: {e}", category="loading")
        raise
    except OSError as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts({}, default_dict)

    return _merge_dicts(default_dict, data)


def build_file_index():
    """Scan config directories and cache all file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for file in os.listdir(directory):
            if file.endswith(".json") and file not in _FILE_INDEX:
                _FILE_INDEX[file] = os.path.join(directory, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Lookup from pre-built index, falling back to the raw filename."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    key = filename + ".json"
    if key in _FILE_INDEX:
        return _FILE_INDEX[key]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: v for k, v in default.items() if k != "_notes"}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
