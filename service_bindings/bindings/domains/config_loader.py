"""Configuration loader for service-bindings."""
import logging
from pathlib import Path
from typing import Dict, Any, Mapping, Optional
import yaml

from .preferences import CONFIG_PATH, get_preference

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration error exception."""
    pass


def default_config_path() -> Path:
    return Path.home() / ".config" / "service-bindings" / "config.yml"


def _get_config_path() -> Optional[str]:
    """
    Get config file path using XDG Base Directory standard.

    Priority order:
    1. User preference (stored in ~/.config/service-bindings/preferences.json)
    2. Default location: ~/.config/service-bindings/config.yml

    Returns:
        Absolute path to config file, or None if no config file exists.
        Running without a config file is supported: guards then fall back
        to environment variables and their defaults.
    """
    # 1. Check user preference
    config_path_pref = get_preference(CONFIG_PATH)
    if config_path_pref:
        config_path = Path(config_path_pref)
        if config_path.exists():
            logger.info(f"Using config from preference: {config_path}")
            return str(config_path)
        else:
            logger.warning(f"Config path from preference doesn't exist: {config_path}")

    # 2. Check default location
    default_config = default_config_path()
    if default_config.exists():
        logger.info(f"Using default config location: {default_config}")
        return str(default_config)

    logger.debug("No config file found, using environment variables only")
    return None


def flatten_config(config: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """
    Flatten nested mappings into dotted property keys.

    {"a": {"b": 1}, "c": 2} becomes {"a.b": 1, "c": 2}. Lists and scalars
    are kept as leaf values.
    """
    flat: Dict[str, Any] = {}
    for key, value in config.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_config(value, full_key))
        else:
            flat[full_key] = value
    return flat


def read_config_file(config_path) -> Dict[str, Any]:
    """
    Read and flatten one YAML config file.

    Raises:
        ConfigError: If the file is unreadable, invalid YAML, empty, or not
            a mapping at the top level
    """
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML config at {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read config file at {config_path}: {e}")

    if not config:
        raise ConfigError(f"Config file at {config_path} is empty")

    if not isinstance(config, Mapping):
        raise ConfigError(
            f"Config file at {config_path} must contain a mapping of properties\n"
            f"Example:\n"
            f"org:\n"
            f"  springframework:\n"
            f"    cloud:\n"
            f"      bindings:\n"
            f"        boot:\n"
            f"          redis:\n"
            f"            enable: false"
        )

    return flatten_config(config)


def load_config() -> Dict[str, Any]:
    """
    Load configuration properties from the YAML config file.

    Returns:
        Flat dict of dotted property keys to values, or an empty dict
        when no config file is configured

    Raises:
        ConfigError: If the config file is invalid (see read_config_file)
    """
    # Resolved on every call so preference changes apply immediately
    config_path = _get_config_path()
    if config_path is None:
        return {}

    properties = read_config_file(config_path)
    logger.info(f"Configuration loaded successfully from {config_path}")
    logger.debug(f"Loaded {len(properties)} properties")
    return properties
