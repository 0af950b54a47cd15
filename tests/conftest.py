"""Shared test fixtures."""

from __future__ import annotations

import pytest

from propconf.defaults import ConfigDefaults, setting


class ServerDefaults(ConfigDefaults):
    TAG_HOST = setting("host", "localhost")
    TAG_PORT = setting("port", 8080)
    TAG_DEBUG = setting("debug", False)
    TAG_RATIO = setting("ratio", 0.5)
    TAG_PASSWORD = setting("password", "changeme", sensitive=True)
    TAG_TOKEN = setting("token", sensitive=True)


@pytest.fixture
def server_defaults() -> type[ServerDefaults]:
    """A ConfigDefaults class declaring one key of every kind."""
    return ServerDefaults


@pytest.fixture
def properties() -> dict[str, str]:
    """A small base property table."""
    return {
        "svc.host": "example.org",
        "svc.port": "8443",
        "svc.db.host": "db.internal",
        "svc.db.port": "5432",
    }


@pytest.fixture
def environ() -> dict[str, str]:
    """A fake process environment."""
    return {"SVC_PORT": "9000", "HOME": "/root"}
