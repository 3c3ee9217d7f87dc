"""Registry of binding kind processors.

Each processor is a function `process(environment, bindings, properties)`
that contributes properties for one binding kind. Processors run in
registration order. Every kind writes to its own property namespace, so
the order only matters for processors registered at runtime.
"""
import logging
from typing import Any, Callable, Dict, List, Mapping

from ..domains.models import Bindings
from . import (
    cassandra,
    couchbase,
    elasticsearch,
    kafka,
    ldap,
    mongodb,
    neo4j,
    postgresql,
    rabbitmq,
    redis,
)

logger = logging.getLogger(__name__)

Processor = Callable[[Mapping[str, Any], Bindings, Dict[str, Any]], None]

_PROCESSORS: Dict[str, Processor] = {
    module.KIND: module.process
    for module in (
        cassandra,
        couchbase,
        elasticsearch,
        kafka,
        ldap,
        mongodb,
        neo4j,
        postgresql,
        rabbitmq,
        redis,
    )
}


def get_processors() -> Dict[str, Processor]:
    """Return a copy of the registered processors, keyed by kind, in run order."""
    return dict(_PROCESSORS)


def get_kinds() -> List[str]:
    return list(_PROCESSORS)


def register_processor(kind: str, processor: Processor) -> None:
    """
    Register a processor for an additional binding kind.

    Meant to be called at startup, before any translation run.

    Raises:
        ValueError: If a processor is already registered for `kind`
    """
    if kind in _PROCESSORS:
        raise ValueError(f"A processor is already registered for kind '{kind}'")
    _PROCESSORS[kind] = processor
    logger.debug(f"Registered processor for kind '{kind}'")
