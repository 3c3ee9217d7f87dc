"""Couchbase binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "couchbase"

FIELDS = (
    FieldMapping("bucket.name", "spring.data.couchbase.bucket-name"),
    FieldMapping("connection-string", "spring.couchbase.connection-string"),
    FieldMapping("password", "spring.couchbase.password"),
    FieldMapping("username", "spring.couchbase.username"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
