"""RabbitMQ binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "rabbitmq"

FIELDS = (
    FieldMapping("addresses", "spring.rabbitmq.addresses"),
    FieldMapping("host", "spring.rabbitmq.host"),
    FieldMapping("password", "spring.rabbitmq.password"),
    FieldMapping("port", "spring.rabbitmq.port"),
    FieldMapping("username", "spring.rabbitmq.username"),
    FieldMapping("virtual-host", "spring.rabbitmq.virtual-host"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
