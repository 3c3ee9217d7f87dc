"""Elasticsearch binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "elasticsearch"

FIELDS = (
    FieldMapping("password", "spring.elasticsearch.password"),
    FieldMapping("uris", "spring.elasticsearch.uris"),
    FieldMapping("username", "spring.elasticsearch.username"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
