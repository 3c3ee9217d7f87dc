"""Workflow for translating bindings into configuration properties."""
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..domains.discovery import load_bindings
from ..domains.environment import Environment
from ..domains.guards import is_global_enabled
from ..domains.models import Bindings
from ..processors.registry import Processor, get_processors

logger = logging.getLogger(__name__)

# Name of the property source the translated properties are published under
PROPERTY_SOURCE_NAME = "kubernetesServiceBindingSpecific"
FLATTENED_PROPERTY_SOURCE_NAME = "kubernetesServiceBinding"
FLATTENED_PREFIX = "k8s.bindings"


def process_bindings(environment: Mapping[str, Any], bindings: Bindings,
                     properties: Optional[Dict[str, Any]] = None,
                     processors: Optional[Mapping[str, Processor]] = None) -> Dict[str, Any]:
    """
    Run every kind processor over the same bindings and accumulator.

    Args:
        environment: Property lookup used by the per-kind enablement guards
        bindings: Bindings to translate
        properties: Accumulator to populate (a new dict if not provided)
        processors: Processors to run, keyed by kind (registry order if not provided)

    Returns:
        The populated accumulator

    Raises:
        Any exception raised by a processor; nothing is swallowed
    """
    if properties is None:
        properties = {}
    if processors is None:
        processors = get_processors()

    for kind, processor in processors.items():
        before = len(properties)
        processor(environment, bindings, properties)
        added = len(properties) - before
        if added:
            logger.debug(f"Processor '{kind}' contributed {added} properties")

    logger.info(f"Translated {len(bindings)} bindings into {len(properties)} properties")
    return properties


def flatten_bindings(bindings: Bindings) -> Dict[str, Any]:
    """
    Expose every binding entry under k8s.bindings.<name>.<key>.

    Covers metadata and secret entries for all kinds, including kinds
    without a processor. Secret entries win over metadata on a name clash.
    """
    properties: Dict[str, Any] = {}
    for binding in bindings:
        for entries in (binding.metadata, binding.secret):
            for key, value in entries.items():
                properties[f"{FLATTENED_PREFIX}.{binding.name}.{key}"] = value
    return properties


def load_binding_properties(root: Optional[Union[str, Path]] = None,
                            environment: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Discover bindings and translate them into properties.

    Args:
        root: Bindings root directory (SERVICE_BINDING_ROOT, CNB_BINDINGS or the
            bindings_root preference if not provided)
        environment: Property lookup (config file + os.environ if not provided)

    Returns:
        Translated properties, empty when binding processing is disabled

    Raises:
        ConfigError: If the config file or a guard property is invalid
        BindingError: If a binding directory is malformed
    """
    if environment is None:
        environment = Environment.from_config()

    if not is_global_enabled(environment):
        return {}

    bindings = load_bindings(root)
    return process_bindings(environment, bindings)
