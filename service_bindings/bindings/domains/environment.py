"""Property lookup over the config file and process environment."""
import os
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from .config_loader import load_config

logger = logging.getLogger(__name__)


def to_environment_variable(key: str) -> str:
    """
    Convert a dotted property key to its environment variable form.

    org.springframework.cloud.bindings.boot.enable becomes
    ORG_SPRINGFRAMEWORK_CLOUD_BINDINGS_BOOT_ENABLE. Dashes are dropped.
    """
    return key.replace("-", "").replace(".", "_").upper()


class Environment(Mapping):
    """
    Read-only property lookup.

    Environment variables take precedence over config file properties. A
    key is looked up as its environment variable form first, then verbatim
    in the environment variables, then in the config file properties.
    """

    def __init__(self, properties: Optional[Dict[str, Any]] = None,
                 environ: Optional[Mapping] = None):
        self._properties = dict(properties or {})
        self._environ = dict(os.environ if environ is None else environ)

    @classmethod
    def from_config(cls) -> "Environment":
        """Build an environment from the config file and os.environ."""
        return cls(properties=load_config(), environ=os.environ)

    def __getitem__(self, key: str) -> Any:
        env_key = to_environment_variable(key)
        if env_key in self._environ:
            return self._environ[env_key]
        if key in self._environ:
            return self._environ[key]
        return self._properties[key]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return (to_environment_variable(key) in self._environ
                or key in self._environ
                or key in self._properties)

    def __iter__(self) -> Iterator[str]:
        seen = set()
        for key in list(self._properties) + list(self._environ):
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self._properties) | set(self._environ))
