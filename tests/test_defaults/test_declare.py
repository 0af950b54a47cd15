"""Tests for ConfigDefaults declarations and ConfigProvider."""

from __future__ import annotations

import pytest

from propconf.defaults import ConfigDefaults, ConfigProvider, DefaultKind, setting
from propconf.errors import MissingDefaultError, SettingsError
from propconf.resolver.settings import Settings


class BaseDefaults(ConfigDefaults):
    TAG_NAME = setting("name", "base")
    TAG_RETRIES = setting("retries", 3)


class ChildDefaults(BaseDefaults):
    TAG_NAME = setting("name", "child")
    TAG_LIMIT = setting("limit", 10, kind=DefaultKind.INT)


class MailConfig(ConfigProvider):
    TAG_HOST = setting("host", "mail.local")
    TAG_PORT = setting("port", 25)
    TAG_TLS = setting("tls", True)
    TAG_BACKOFF = setting("backoff", 1.5)
    TAG_PASSWORD = setting("password", "", sensitive=True)


def test_markers_replaced_by_keys():
    assert BaseDefaults.TAG_NAME == "name"
    assert ChildDefaults.TAG_LIMIT == "limit"
    assert MailConfig.TAG_PORT == "port"


def test_subclass_overrides_and_inherits():
    assert ChildDefaults.default_value("name") == "child"
    assert BaseDefaults.default_value("name") == "base"
    assert ChildDefaults.default_value_int("retries") == 3
    assert ChildDefaults.config_defaults_int() == {"retries": 3, "limit": 10}
    assert ChildDefaults.config_tags() == {"name", "retries", "limit"}


def test_class_helpers():
    assert MailConfig.is_sensitive("password")
    assert MailConfig.default_value_bool("tls") is True
    assert MailConfig.default_value_double("backoff") == 1.5
    assert MailConfig.config_defaults()["tls"] == "true"
    with pytest.raises(MissingDefaultError):
        MailConfig.default_value_int("host")


def test_provider_reads_own_defaults():
    provider = MailConfig(Settings({"port": "2525"}, wrap_in_environment=False))
    assert provider.get("host") == "mail.local"
    assert provider.get_int("port") == 2525
    assert provider.get_long("port") == 2525
    assert provider.get_boolean("tls") is True
    assert provider.get_double("backoff") == 1.5


def test_provider_with_settings_is_fluent():
    provider = MailConfig()
    settings = Settings({"mail.host": "smtp"}, wrap_in_environment=False)
    assert provider.with_settings(settings) is provider
    assert provider.get_sub_settings("mail.").get("host") == "smtp"


def test_provider_without_settings():
    with pytest.raises(SettingsError, match="No settings"):
        MailConfig().get("host")
