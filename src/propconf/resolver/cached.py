"""Memoizing resolver that wraps any Resolver."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, TypeVar

from propconf.resolver.base import UNSET, Resolver
from propconf.resolver.settings import Settings

T = TypeVar("T")


class CachedSettings:
    """Remembers every value it hands out, per value type and name.

    Once a name has been resolved, later calls for the same name and type
    return the remembered value without consulting the wrapped resolver,
    whatever default they pass and however the store changed since. The
    cache lives as long as this instance and is never invalidated.
    """

    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver
        self._strings: dict[str, str] = {}
        self._ints: dict[str, int] = {}
        self._longs: dict[str, int] = {}
        self._booleans: dict[str, bool] = {}
        self._doubles: dict[str, float] = {}

    @classmethod
    def create(
        cls,
        properties: MutableMapping[str, str],
        prefix: str = "",
        wrap_in_environment: bool = True,
        log_sensitive_data: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> CachedSettings:
        """Build a cached resolver over a new Settings."""
        return cls(
            Settings(properties, prefix, wrap_in_environment, log_sensitive_data, environ)
        )

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def prefix(self) -> str:
        return self._resolver.prefix

    @property
    def properties(self) -> MutableMapping[str, str]:
        return self._resolver.properties

    @property
    def log_sensitive_data(self) -> bool:
        return self._resolver.log_sensitive_data

    @log_sensitive_data.setter
    def log_sensitive_data(self, value: bool) -> None:
        self._resolver.log_sensitive_data = value

    def contains_name(self, name: str) -> bool:
        return self._resolver.contains_name(name)

    def get_sub_settings(self, prefix: str) -> Resolver:
        return self._resolver.get_sub_settings(prefix)

    def set(self, name: str, value: str | bool) -> None:
        # Cache only, the wrapped store is left untouched.
        if isinstance(value, bool):
            self._booleans[name] = value
        elif isinstance(value, str):
            self._strings[name] = value
        else:
            raise TypeError(f"Setting values must be str or bool, got {type(value).__name__}")

    def _remember(self, cache: dict[str, T], name: str, fetch: Callable[[], T]) -> T:
        if name in cache:
            return cache[name]
        value = fetch()
        cache[name] = value
        return value

    def get(self, name: str, default: Any = UNSET) -> str:
        return self._remember(self._strings, name, lambda: self._resolver.get(name, default))

    def get_sensitive(self, name: str, default: Any = UNSET) -> str:
        return self._remember(
            self._strings, name, lambda: self._resolver.get_sensitive(name, default)
        )

    def get_int(self, name: str, default: Any = UNSET) -> int:
        if name in self._ints:
            return self._ints[name]
        value = self._resolver.get_int(name, default)
        self._ints[name] = value
        if default is not UNSET and not isinstance(default, type):
            # Only the inline-default form mirrors ints into the string cache.
            self._strings[name] = str(value)
        return value

    def get_long(self, name: str, default: Any = UNSET) -> int:
        return self._remember(self._longs, name, lambda: self._resolver.get_long(name, default))

    def get_double(self, name: str, default: Any = UNSET) -> float:
        return self._remember(
            self._doubles, name, lambda: self._resolver.get_double(name, default)
        )

    def get_boolean(self, name: str, default: Any = UNSET) -> bool:
        return self._remember(
            self._booleans, name, lambda: self._resolver.get_boolean(name, default)
        )
