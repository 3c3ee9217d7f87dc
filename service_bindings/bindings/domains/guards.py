"""Enablement guards for binding processing."""
import logging
from typing import Any, Mapping

from .config_loader import ConfigError

logger = logging.getLogger(__name__)

GLOBAL_ENABLE_KEY = "org.springframework.cloud.bindings.boot.enable"
TYPE_ENABLE_KEY = "org.springframework.cloud.bindings.boot.{}.enable"

_TRUE_VALUES = ("true", "yes", "on", "1")
_FALSE_VALUES = ("false", "no", "off", "0")


def _get_bool(environment: Mapping[str, Any], key: str, default: bool) -> bool:
    value = environment.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value

    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Invalid boolean value for '{key}': {value!r}\n"
        f"Use one of: true, false, yes, no, on, off, 1, 0"
    )


def is_global_enabled(environment: Mapping[str, Any]) -> bool:
    """Whether binding processing runs at all (default: enabled)."""
    enabled = _get_bool(environment, GLOBAL_ENABLE_KEY, True)
    if not enabled:
        logger.info(f"Binding processing disabled by {GLOBAL_ENABLE_KEY}")
    return enabled


def is_type_enabled(environment: Mapping[str, Any], kind: str) -> bool:
    """
    Whether the processor for `kind` should run.

    Args:
        environment: Mapping-like property lookup
        kind: Binding kind, e.g. "postgresql"

    Returns:
        Value of org.springframework.cloud.bindings.boot.<kind>.enable,
        True when unset

    Raises:
        ConfigError: If the property is set to something that isn't a boolean
    """
    key = TYPE_ENABLE_KEY.format(kind)
    enabled = _get_bool(environment, key, True)
    if not enabled:
        logger.debug(f"Processor for '{kind}' disabled by {key}")
    return enabled
