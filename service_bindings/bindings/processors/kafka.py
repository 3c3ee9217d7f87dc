"""Kafka binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "kafka"

FIELDS = (
    FieldMapping("bootstrap-servers", "spring.kafka.bootstrap-servers"),
    FieldMapping("consumer.bootstrap-servers", "spring.kafka.consumer.bootstrap-servers"),
    FieldMapping("producer.bootstrap-servers", "spring.kafka.producer.bootstrap-servers"),
    FieldMapping("streams.bootstrap-servers", "spring.kafka.streams.bootstrap-servers"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
