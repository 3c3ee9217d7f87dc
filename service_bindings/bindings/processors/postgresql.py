"""PostgreSQL binding processor.

Contributes JDBC (spring.datasource.*) and R2DBC (spring.r2dbc.*) properties.

JDBC URL format: https://jdbc.postgresql.org/documentation/use/
SSL parameters: https://www.postgresql.org/docs/14/libpq-connect.html
"""
import logging
from typing import Any, Dict, Mapping, Optional

from ..domains.guards import is_type_enabled
from ..domains.models import Binding, Bindings, FieldMapping
from .common import map_fields

logger = logging.getLogger(__name__)

KIND = "postgresql"
SSL_MODE = "sslmode"
SSL_ROOT_CERT = "sslrootcert"
OPTIONS = "options"
CLUSTER_OPTION = "--cluster"

DRIVER_CLASS_NAME = "org.postgresql.Driver"

JDBC_FIELDS = (
    FieldMapping("password", "spring.datasource.password"),
    FieldMapping("username", "spring.datasource.username"),
)
R2DBC_FIELDS = (
    FieldMapping("password", "spring.r2dbc.password"),
    FieldMapping("username", "spring.r2dbc.username"),
)


def _build_url(secret: Mapping[str, str], scheme: str) -> Optional[str]:
    if not all(key in secret for key in ("host", "port", "database")):
        return None
    return f"{scheme}:postgresql://{secret['host']}:{secret['port']}/{secret['database']}"


def _build_ssl_params(binding: Binding) -> str:
    sslmode = binding.secret.get(SSL_MODE, "")
    ssl_root_cert = binding.secret.get(SSL_ROOT_CERT, "")

    params = []
    if sslmode:
        params.append(f"{SSL_MODE}={sslmode}")
    if ssl_root_cert:
        params.append(f"{SSL_ROOT_CERT}={binding.get_secret_file_path(ssl_root_cert)}")
    return "&".join(params)


def _build_options(options: str) -> str:
    """
    Translate the `options` secret into a libpq options parameter.

    CockroachDB cloud passes its cluster routing id as --cluster; everything
    else becomes a -c runtime parameter.
    """
    cluster_option = ""
    runtime_options = []
    for pair in options.split("&"):
        parts = pair.split("=")
        # Trailing empty parts don't count, so "a=b=" is the pair a, b
        while parts and not parts[-1]:
            parts.pop()
        if len(parts) != 2 or not parts[0] or not parts[1]:
            continue
        key, value = parts
        if key == CLUSTER_OPTION:
            # Single slot: a repeated --cluster replaces the earlier one
            cluster_option = f"{key}={value}"
        else:
            runtime_options.append(f"-c {key}={value}")

    combined = " ".join(part for part in (cluster_option, " ".join(runtime_options)) if part)
    return f"{OPTIONS}={combined}" if combined else ""


def build_ssl_mode_and_options(binding: Binding) -> str:
    """
    Build the JDBC query string from the binding's SSL and options secrets.

    Args:
        binding: PostgreSQL binding

    Returns:
        Query string without the leading '?', or "" when there is nothing to add.
        Empty secret values are treated as absent.
    """
    ssl_params = _build_ssl_params(binding)
    options = binding.secret.get(OPTIONS, "")
    options_param = _build_options(options) if options else ""
    return "&".join(param for param in (ssl_params, options_param) if param)


def process(environment: Mapping[str, Any], bindings: Bindings, properties: Dict[str, Any]) -> None:
    """Contribute JDBC and R2DBC properties for every PostgreSQL binding."""
    if not is_type_enabled(environment, KIND):
        return

    for binding in bindings.filter_bindings(KIND):
        logger.debug(f"Processing {KIND} binding '{binding.name}'")
        secret = binding.secret

        # JDBC
        map_fields(secret, properties, JDBC_FIELDS)
        jdbc_url = _build_url(secret, "jdbc")
        if jdbc_url is not None:
            query = build_ssl_mode_and_options(binding)
            properties["spring.datasource.url"] = f"{jdbc_url}?{query}" if query else jdbc_url

        # An explicit jdbc-url takes precedence over the derived one
        if secret.get("jdbc-url"):
            properties["spring.datasource.url"] = secret["jdbc-url"]

        properties["spring.datasource.driver-class-name"] = DRIVER_CLASS_NAME

        # R2DBC
        map_fields(secret, properties, R2DBC_FIELDS)
        r2dbc_url = _build_url(secret, "r2dbc")
        if r2dbc_url is not None:
            properties["spring.r2dbc.url"] = r2dbc_url

        if secret.get("r2dbc-url"):
            properties["spring.r2dbc.url"] = secret["r2dbc-url"]
