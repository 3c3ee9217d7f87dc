"""Test suite for the PostgreSQL binding processor."""
import os

import pytest

from service_bindings.bindings.domains.models import Binding, Bindings
from service_bindings.bindings.processors import postgresql
from service_bindings.bindings.processors.postgresql import (
    DRIVER_CLASS_NAME,
    KIND,
    build_ssl_mode_and_options,
)


def _binding(secret, name="test-name", path="test-path"):
    return Binding(name=name, path=path, metadata={"kind": KIND}, secret=secret)


def _process(*bindings, environment=None):
    properties = {}
    postgresql.process(environment or {}, Bindings(bindings), properties)
    return properties


@pytest.fixture
def connection_secret():
    return {
        "host": "test-host",
        "port": "test-port",
        "database": "test-database",
        "username": "test-username",
        "password": "test-password",
    }


class TestJdbcProperties:
    """Test suite for spring.datasource.* properties."""

    def test_contributes_jdbc_properties(self, connection_secret):
        """Test that host, port and database build the JDBC URL."""
        properties = _process(_binding(connection_secret))

        assert properties["spring.datasource.url"] == "jdbc:postgresql://test-host:test-port/test-database"
        assert properties["spring.datasource.username"] == "test-username"
        assert properties["spring.datasource.password"] == "test-password"
        assert properties["spring.datasource.driver-class-name"] == "org.postgresql.Driver"

    def test_url_has_no_trailing_question_mark(self, connection_secret):
        """Test that no query separator is appended when there are no parameters."""
        properties = _process(_binding(connection_secret))

        assert not properties["spring.datasource.url"].endswith("?")

    def test_jdbc_url_takes_precedence(self, connection_secret):
        """Test that an explicit jdbc-url replaces the derived URL."""
        connection_secret["jdbc-url"] = "jdbc:postgresql://override:1234/other"
        connection_secret["sslmode"] = "require"

        properties = _process(_binding(connection_secret))

        assert properties["spring.datasource.url"] == "jdbc:postgresql://override:1234/other"

    def test_jdbc_url_without_connection_fields(self):
        """Test that jdbc-url alone is enough to set the URL."""
        properties = _process(_binding({"jdbc-url": "jdbc:postgresql://only:5432/db"}))

        assert properties["spring.datasource.url"] == "jdbc:postgresql://only:5432/db"

    def test_empty_jdbc_url_is_ignored(self, connection_secret):
        """Test that an empty jdbc-url does not blank out the derived URL."""
        connection_secret["jdbc-url"] = ""

        properties = _process(_binding(connection_secret))

        assert properties["spring.datasource.url"] == "jdbc:postgresql://test-host:test-port/test-database"

    def test_driver_class_name_always_set(self):
        """Test that the driver class name is set even with an empty secret."""
        properties = _process(_binding({}))

        assert properties == {"spring.datasource.driver-class-name": DRIVER_CLASS_NAME}

    def test_incomplete_connection_fields_skip_url(self):
        """Test that no URL is derived unless host, port and database are all present."""
        properties = _process(_binding({"host": "h", "port": "5432", "sslmode": "require"}))

        assert "spring.datasource.url" not in properties
        assert "spring.r2dbc.url" not in properties

    def test_url_includes_ssl_parameters(self, connection_secret):
        """Test that SSL parameters are appended as a query string."""
        connection_secret["sslmode"] = "verify-full"

        properties = _process(_binding(connection_secret))

        assert properties["spring.datasource.url"] == (
            "jdbc:postgresql://test-host:test-port/test-database?sslmode=verify-full"
        )


class TestR2dbcProperties:
    """Test suite for spring.r2dbc.* properties."""

    def test_contributes_r2dbc_properties(self, connection_secret):
        """Test that the R2DBC URL and credentials are set."""
        properties = _process(_binding(connection_secret))

        assert properties["spring.r2dbc.url"] == "r2dbc:postgresql://test-host:test-port/test-database"
        assert properties["spring.r2dbc.username"] == "test-username"
        assert properties["spring.r2dbc.password"] == "test-password"

    def test_r2dbc_url_takes_precedence(self, connection_secret):
        """Test that an explicit r2dbc-url replaces the derived URL."""
        connection_secret["r2dbc-url"] = "r2dbc:postgresql://override:1234/other"

        properties = _process(_binding(connection_secret))

        assert properties["spring.r2dbc.url"] == "r2dbc:postgresql://override:1234/other"
        assert properties["spring.datasource.url"] == "jdbc:postgresql://test-host:test-port/test-database"

    def test_r2dbc_url_has_no_ssl_parameters(self, connection_secret):
        """Test that SSL parameters only apply to the JDBC URL."""
        connection_secret["sslmode"] = "require"

        properties = _process(_binding(connection_secret))

        assert properties["spring.r2dbc.url"] == "r2dbc:postgresql://test-host:test-port/test-database"


class TestSslModeAndOptions:
    """Test suite for build_ssl_mode_and_options."""

    def test_no_parameters(self):
        """Test that an empty string is returned without SSL or options secrets."""
        assert build_ssl_mode_and_options(_binding({"host": "h"})) == ""

    def test_empty_values_are_absent(self):
        """Test that empty sslmode, sslrootcert and options produce nothing."""
        binding = _binding({"sslmode": "", "sslrootcert": "", "options": ""})

        assert build_ssl_mode_and_options(binding) == ""

    def test_sslmode_only(self):
        """Test sslmode on its own."""
        assert build_ssl_mode_and_options(_binding({"sslmode": "disable"})) == "sslmode=disable"

    def test_sslrootcert_resolved_against_binding_path(self):
        """Test that sslrootcert is resolved to a file in the binding directory."""
        binding = _binding({"sslmode": "require", "sslrootcert": "root.crt"}, path="/bindings/pg")

        assert build_ssl_mode_and_options(binding) == f"sslmode=require&sslrootcert=/bindings/pg{os.sep}root.crt"

    def test_sslrootcert_only(self):
        """Test that sslrootcert without sslmode has no leading separator."""
        binding = _binding({"sslrootcert": "root.crt"}, path="/bindings/pg")

        assert build_ssl_mode_and_options(binding) == f"sslrootcert=/bindings/pg{os.sep}root.crt"

    def test_cluster_option(self):
        """Test that --cluster is kept verbatim and other options become -c parameters."""
        binding = _binding({"options": "--cluster=foo&timeout=10"})

        assert build_ssl_mode_and_options(binding) == "options=--cluster=foo -c timeout=10"

    def test_cluster_option_comes_first(self):
        """Test that --cluster leads regardless of where it appears."""
        binding = _binding({"options": "a=1&--cluster=routing-id&b=2"})

        assert build_ssl_mode_and_options(binding) == "options=--cluster=routing-id -c a=1 -c b=2"

    def test_runtime_options_only(self):
        """Test options without --cluster."""
        binding = _binding({"options": "search_path=app&statement_timeout=5000"})

        assert build_ssl_mode_and_options(binding) == "options=-c search_path=app -c statement_timeout=5000"

    def test_malformed_options_are_dropped(self):
        """Test that pairs without exactly two non-empty parts are skipped."""
        binding = _binding({"options": "bad&x=1=2&y=&=z&timeout=10"})

        assert build_ssl_mode_and_options(binding) == "options=-c timeout=10"

    def test_only_malformed_options(self):
        """Test that only malformed pairs produce no options fragment."""
        binding = _binding({"options": "bad&x=1=2&y="})

        assert build_ssl_mode_and_options(binding) == ""

    def test_trailing_separator_is_ignored(self):
        """Test that a pair ending in '=' keeps its key and value."""
        binding = _binding({"options": "statement_timeout=5000=&a=b=&--cluster=c=="})

        assert build_ssl_mode_and_options(binding) == (
            "options=--cluster=c -c statement_timeout=5000 -c a=b"
        )

    def test_repeated_cluster_keeps_last(self):
        """Test that the last --cluster wins when several are given."""
        binding = _binding({"options": "--cluster=first&--cluster=second"})

        assert build_ssl_mode_and_options(binding) == "options=--cluster=second"

    def test_ssl_and_options_combined(self):
        """Test that SSL and options fragments are joined with '&'."""
        binding = _binding({
            "sslmode": "verify-full",
            "sslrootcert": "ca.pem",
            "options": "--cluster=crdb-1",
        }, path="/bindings/crdb")

        assert build_ssl_mode_and_options(binding) == (
            f"sslmode=verify-full&sslrootcert=/bindings/crdb{os.sep}ca.pem&options=--cluster=crdb-1"
        )


class TestProcessorContract:
    """Test suite for guard, precedence and idempotence behavior."""

    def test_disabled_kind_is_noop(self, connection_secret):
        """Test that a disabled processor leaves the accumulator untouched."""
        environment = {"org.springframework.cloud.bindings.boot.postgresql.enable": "false"}
        properties = {"existing": "value"}

        postgresql.process(environment, Bindings([_binding(connection_secret)]), properties)

        assert properties == {"existing": "value"}

    def test_no_matching_bindings(self):
        """Test that bindings of other kinds contribute nothing."""
        other = Binding("cache", "p", {"kind": "redis"}, {"host": "h"})

        assert _process(other) == {}

    def test_last_binding_wins(self, connection_secret):
        """Test that a later binding overwrites properties of an earlier one."""
        second = dict(connection_secret, host="second-host", username="second-user")

        properties = _process(_binding(connection_secret, name="first"), _binding(second, name="second"))

        assert properties["spring.datasource.url"] == "jdbc:postgresql://second-host:test-port/test-database"
        assert properties["spring.datasource.username"] == "second-user"

    def test_idempotent(self, connection_secret):
        """Test that processing twice into fresh accumulators gives the same result."""
        connection_secret["options"] = "--cluster=c&a=1"
        bindings = Bindings([_binding(connection_secret)])

        first, second = {}, {}
        postgresql.process({}, bindings, first)
        postgresql.process({}, bindings, second)

        assert first == second
