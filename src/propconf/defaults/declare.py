"""Declarative defaults: ``setting()`` markers on ConfigDefaults subclasses.

Declaring a class registers its markers in the default registry once, at
class-definition time, and replaces each marker with its key string::

    class DatabaseDefaults(ConfigDefaults):
        TAG_HOST = setting("host", "localhost")
        TAG_PORT = setting("port", 5432)
        TAG_PASSWORD = setting("password", "", sensitive=True)

    DatabaseDefaults.TAG_PORT  # "port"
    settings.get_int(DatabaseDefaults.TAG_PORT, DatabaseDefaults)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from propconf.defaults import registry
from propconf.defaults.registry import DefaultKind, DefaultValue
from propconf.errors import SettingsError

if TYPE_CHECKING:
    from propconf.resolver.base import Resolver

P = TypeVar("P", bound="ConfigProvider")


@dataclass(frozen=True)
class SettingDeclaration:
    key: str
    default: DefaultValue | None = None
    kind: DefaultKind | None = None
    sensitive: bool = False


def setting(
    key: str,
    default: DefaultValue | None = None,
    *,
    kind: DefaultKind | None = None,
    sensitive: bool = False,
) -> SettingDeclaration:
    """Declare a setting key, its default and whether its value is sensitive."""
    return SettingDeclaration(key=key, default=default, kind=kind, sensitive=sensitive)


class ConfigDefaults:
    """Base for classes declaring setting defaults with ``setting()``."""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        for attr, value in list(vars(cls).items()):
            if isinstance(value, SettingDeclaration):
                registry.register(
                    cls,
                    value.key,
                    value.default,
                    kind=value.kind,
                    sensitive=value.sensitive,
                )
                setattr(cls, attr, value.key)

    @classmethod
    def is_sensitive(cls, key: str) -> bool:
        return registry.is_sensitive(cls, key)

    @classmethod
    def default_value(cls, key: str) -> str:
        return registry.default_for(cls, key)

    @classmethod
    def default_value_int(cls, key: str) -> int:
        return registry.default_int(cls, key)

    @classmethod
    def default_value_bool(cls, key: str) -> bool:
        return registry.default_bool(cls, key)

    @classmethod
    def default_value_double(cls, key: str) -> float:
        return registry.default_double(cls, key)

    @classmethod
    def config_tags(cls) -> set[str]:
        return registry.config_tags(cls)

    @classmethod
    def config_defaults(cls) -> dict[str, str]:
        return registry.config_defaults(cls)

    @classmethod
    def config_defaults_int(cls) -> dict[str, int]:
        return registry.config_defaults_int(cls)


class ConfigProvider(ConfigDefaults):
    """A ConfigDefaults that also holds the resolver it reads its own keys from.

    Accessors use the provider's class as owner type, so missing keys fall
    back to the defaults the class declares.
    """

    def __init__(self, settings: Resolver | None = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> Resolver:
        if self._settings is None:
            raise SettingsError(f"No settings attached to {type(self).__qualname__}")
        return self._settings

    def with_settings(self: P, settings: Resolver) -> P:
        self._settings = settings
        return self

    def get_sub_settings(self, prefix: str) -> Resolver:
        return self.settings.get_sub_settings(prefix)

    def get(self, key: str) -> str:
        return self.settings.get(key, type(self))

    def get_int(self, key: str) -> int:
        return self.settings.get_int(key, type(self))

    def get_long(self, key: str) -> int:
        return self.settings.get_long(key, type(self))

    def get_double(self, key: str) -> float:
        return self.settings.get_double(key, type(self))

    def get_boolean(self, key: str) -> bool:
        return self.settings.get_boolean(key, type(self))
