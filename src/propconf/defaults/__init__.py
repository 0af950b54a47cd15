"""Declared setting defaults."""

from propconf.defaults.declare import ConfigDefaults, ConfigProvider, setting
from propconf.defaults.registry import DefaultKind, DefaultRegistration, register

__all__ = [
    "ConfigDefaults",
    "ConfigProvider",
    "DefaultKind",
    "DefaultRegistration",
    "register",
    "setting",
]
