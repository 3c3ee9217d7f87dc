"""Shared fixtures for the service-bindings test suite."""
from pathlib import Path

import pytest

from service_bindings.bindings.domains import preferences


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Fixture to create a temporary home directory for testing."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setattr(Path, "home", lambda: fake_home)

    # Mock the preferences module paths
    fake_config_dir = fake_home / ".config" / "service-bindings"
    fake_preferences_file = fake_config_dir / "preferences.json"
    monkeypatch.setattr(preferences, "PREFERENCES_DIR", fake_config_dir)
    monkeypatch.setattr(preferences, "PREFERENCES_FILE", fake_preferences_file)

    return fake_home


@pytest.fixture
def clean_environ(monkeypatch):
    """Fixture that removes bindings-related variables from os.environ."""
    monkeypatch.delenv("SERVICE_BINDING_ROOT", raising=False)
    monkeypatch.delenv("CNB_BINDINGS", raising=False)
    monkeypatch.delenv("ORG_SPRINGFRAMEWORK_CLOUD_BINDINGS_BOOT_ENABLE", raising=False)


def write_binding(root, name, entries):
    """Write a Kubernetes-layout binding directory: one file per entry."""
    binding_dir = root / name
    binding_dir.mkdir(parents=True)
    for key, value in entries.items():
        (binding_dir / key).write_text(value)
    return binding_dir


@pytest.fixture
def bindings_root(tmp_path):
    """Fixture with a PostgreSQL and a Cassandra binding on disk."""
    root = tmp_path / "bindings"
    root.mkdir()
    write_binding(root, "my-db", {
        "type": "postgresql",
        "provider": "bitnami",
        "host": "db.example.com",
        "port": "5432",
        "database": "orders",
        "username": "app",
        "password": "s3cret",
    })
    write_binding(root, "my-cassandra", {
        "type": "cassandra",
        "node_ips": "10.0.0.1,10.0.0.2",
        "port": "9042",
        "username": "cass",
        "password": "cass-pass",
    })
    return root
