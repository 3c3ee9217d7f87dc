"""Cassandra binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "cassandra"

FIELDS = (
    FieldMapping("cluster-name", "spring.data.cassandra.cluster-name"),
    FieldMapping("compression", "spring.data.cassandra.compression"),
    FieldMapping("node_ips", "spring.data.cassandra.contact-points"),
    FieldMapping("keyspace-name", "spring.data.cassandra.keyspace-name"),
    FieldMapping("password", "spring.data.cassandra.password"),
    FieldMapping("port", "spring.data.cassandra.port"),
    FieldMapping("ssl", "spring.data.cassandra.ssl"),
    FieldMapping("username", "spring.data.cassandra.username"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
