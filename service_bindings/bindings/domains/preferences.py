"""Persistent user preferences for service-bindings.

Stored in ~/.config/service-bindings/preferences.json. Only two paths are
kept there:

- config_path: YAML file with the enable/disable guard properties
- bindings_root: bindings directory used when neither SERVICE_BINDING_ROOT
  nor CNB_BINDINGS is set, e.g. when running outside a container
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

PREFERENCES_DIR = Path.home() / ".config" / "service-bindings"
PREFERENCES_FILE = PREFERENCES_DIR / "preferences.json"

CONFIG_PATH = "config_path"
BINDINGS_ROOT = "bindings_root"
PREFERENCE_KEYS = (CONFIG_PATH, BINDINGS_ROOT)


def _check_key(key: str) -> None:
    if key not in PREFERENCE_KEYS:
        raise ValueError(f"Unknown preference '{key}', expected one of: {', '.join(PREFERENCE_KEYS)}")


def _load_preferences() -> Dict[str, str]:
    """
    Load stored paths from the preferences file.

    Returns:
        Known preference keys with string values; a missing, unreadable or
        corrupt file counts as no preferences
    """
    if not PREFERENCES_FILE.exists():
        return {}

    try:
        with open(PREFERENCES_FILE, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse preferences file {PREFERENCES_FILE}: {e}")
        return {}
    except OSError as e:
        logger.error(f"Failed to read preferences file {PREFERENCES_FILE}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.error(f"Ignoring preferences file {PREFERENCES_FILE}: expected a JSON object")
        return {}
    return {key: value for key, value in data.items()
            if key in PREFERENCE_KEYS and isinstance(value, str)}


def _save_preferences(preferences: Dict[str, str]) -> None:
    try:
        PREFERENCES_DIR.mkdir(parents=True, exist_ok=True)
        with open(PREFERENCES_FILE, 'w') as f:
            json.dump(preferences, f, indent=2)
    except OSError as e:
        logger.error(f"Failed to save preferences to {PREFERENCES_FILE}: {e}")
        raise


def get_preference(key: str) -> Optional[str]:
    """Stored path for `key`, or None if unset."""
    _check_key(key)
    return _load_preferences().get(key)


def set_preference(key: str, path: Union[str, Path]) -> str:
    """
    Store a path preference.

    Args:
        key: CONFIG_PATH or BINDINGS_ROOT
        path: Path to store; saved as an absolute path

    Returns:
        The absolute path that was stored

    Raises:
        ValueError: If `key` is not a known preference
    """
    _check_key(key)
    absolute = str(Path(path).expanduser().resolve())
    preferences = _load_preferences()
    preferences[key] = absolute
    _save_preferences(preferences)
    logger.info(f"Preference '{key}' set to: {absolute}")
    return absolute


def clear_preference(key: str) -> bool:
    """Remove a preference. Returns False if it wasn't set."""
    _check_key(key)
    preferences = _load_preferences()
    if key not in preferences:
        logger.debug(f"Preference '{key}' not set, nothing to clear")
        return False
    del preferences[key]
    _save_preferences(preferences)
    logger.info(f"Preference '{key}' cleared")
    return True
