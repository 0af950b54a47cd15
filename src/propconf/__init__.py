"""Layered settings: properties overridden by environment variables, with declared defaults."""

from propconf.defaults import ConfigDefaults, ConfigProvider, DefaultKind, register, setting
from propconf.errors import (
    MissingDefaultError,
    PropertyMissingError,
    PropertyTypeError,
    SettingsError,
)
from propconf.resolver import CachedSettings, Resolver, Settings

__all__ = [
    "CachedSettings",
    "ConfigDefaults",
    "ConfigProvider",
    "DefaultKind",
    "MissingDefaultError",
    "PropertyMissingError",
    "PropertyTypeError",
    "Resolver",
    "Settings",
    "SettingsError",
    "register",
    "setting",
]
