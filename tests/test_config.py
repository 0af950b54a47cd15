"""Tests for configuration loading."""

from __future__ import annotations

from propconf.config.loader import get_config, settings_from_config
from propconf.config.settings import PropconfConfig
from propconf.resolver.cached import CachedSettings
from propconf.resolver.settings import Settings


def test_default_config():
    """PropconfConfig can be created with defaults."""
    config = PropconfConfig()
    assert config.log_level == "INFO"
    assert config.prefix == ""
    assert config.wrap_in_environment is True
    assert config.log_sensitive_data is False
    assert config.cached is True


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("PROPCONF_PREFIX", "app.")
    monkeypatch.setenv("PROPCONF_CACHED", "false")
    config = PropconfConfig()
    assert config.prefix == "app."
    assert config.cached is False


def test_get_config_is_cached():
    get_config.cache_clear()
    assert get_config() is get_config()
    get_config.cache_clear()


def test_settings_from_config_cached():
    config = PropconfConfig(prefix="app.", wrap_in_environment=True)
    resolver = settings_from_config({"app.name": "base"}, config, environ={"APP_NAME": "env"})
    assert isinstance(resolver, CachedSettings)
    assert resolver.prefix == "app."
    assert resolver.get("name") == "env"


def test_settings_from_config_uncached():
    config = PropconfConfig(cached=False, wrap_in_environment=False, log_sensitive_data=True)
    resolver = settings_from_config({"name": "base"}, config)
    assert isinstance(resolver, Settings)
    assert resolver.log_sensitive_data is True
    assert resolver.get("name") == "base"
