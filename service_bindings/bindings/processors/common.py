"""Shared helpers for kind processors."""
import logging
from typing import Any, Dict, Iterable, Mapping

from ..domains.guards import is_type_enabled
from ..domains.models import Bindings, FieldMapping

logger = logging.getLogger(__name__)


def map_fields(secret: Mapping[str, str], properties: Dict[str, Any],
               fields: Iterable[FieldMapping]) -> None:
    """Copy each secret entry that is present to its target property."""
    for field in fields:
        if field.secret_key in secret:
            properties[field.property_key] = secret[field.secret_key]


def process_field_mappings(kind: str, fields: Iterable[FieldMapping],
                           environment: Mapping[str, Any], bindings: Bindings,
                           properties: Dict[str, Any]) -> None:
    """
    Process every binding of `kind` with straight secret-to-property renames.

    No-op when the kind is disabled. Later bindings of the same kind
    overwrite properties written by earlier ones.
    """
    if not is_type_enabled(environment, kind):
        return

    fields = tuple(fields)
    for binding in bindings.filter_bindings(kind):
        logger.debug(f"Processing {kind} binding '{binding.name}'")
        map_fields(binding.secret, properties, fields)
