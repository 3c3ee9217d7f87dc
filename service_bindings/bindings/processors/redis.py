"""Redis binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "redis"

FIELDS = (
    FieldMapping("client-name", "spring.redis.client-name"),
    FieldMapping("cluster.max-redirects", "spring.redis.cluster.max-redirects"),
    FieldMapping("cluster.nodes", "spring.redis.cluster.nodes"),
    FieldMapping("database", "spring.redis.database"),
    FieldMapping("host", "spring.redis.host"),
    FieldMapping("password", "spring.redis.password"),
    FieldMapping("port", "spring.redis.port"),
    FieldMapping("sentinel.master", "spring.redis.sentinel.master"),
    FieldMapping("sentinel.nodes", "spring.redis.sentinel.nodes"),
    FieldMapping("ssl", "spring.redis.ssl"),
    FieldMapping("url", "spring.redis.url"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
