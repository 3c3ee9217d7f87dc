"""MongoDB binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "mongodb"

FIELDS = (
    FieldMapping("authentication-database", "spring.data.mongodb.authentication-database"),
    FieldMapping("database", "spring.data.mongodb.database"),
    FieldMapping("grid-fs-database", "spring.data.mongodb.gridfs.database"),
    FieldMapping("host", "spring.data.mongodb.host"),
    FieldMapping("password", "spring.data.mongodb.password"),
    FieldMapping("port", "spring.data.mongodb.port"),
    FieldMapping("uri", "spring.data.mongodb.uri"),
    FieldMapping("username", "spring.data.mongodb.username"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
