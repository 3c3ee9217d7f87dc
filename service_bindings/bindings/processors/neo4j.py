"""Neo4j binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "neo4j"

FIELDS = (
    FieldMapping("password", "spring.neo4j.authentication.password"),
    FieldMapping("uri", "spring.neo4j.uri"),
    FieldMapping("username", "spring.neo4j.authentication.username"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
