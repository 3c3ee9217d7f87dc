"""LDAP binding processor."""
from typing import Any, Dict, Mapping

from ..domains.models import Bindings, FieldMapping
from .common import process_field_mappings

KIND = "ldap"

FIELDS = (
    FieldMapping("base", "spring.ldap.base"),
    FieldMapping("password", "spring.ldap.password"),
    FieldMapping("urls", "spring.ldap.urls"),
    FieldMapping("username", "spring.ldap.username"),
)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    process_field_mappings(KIND, FIELDS, environment, bindings, properties)
