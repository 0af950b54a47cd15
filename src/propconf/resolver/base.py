"""Resolver Protocol and the shared sentinel for accessor defaults."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol, runtime_checkable


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# Marks "no default given" so that None and falsy values stay usable as defaults.
UNSET: Any = _Unset()


@runtime_checkable
class Resolver(Protocol):
    """Contract shared by the direct and the memoizing resolver.

    Every typed accessor accepts three call shapes:

    - ``get_x(name)``: fails with PropertyMissingError / PropertyTypeError.
    - ``get_x(name, default)``: falls back to ``default``.
    - ``get_x(name, Owner)``: falls back to the default ``Owner`` declares
      for ``name``; MissingDefaultError when it declares none.
    """

    @property
    def prefix(self) -> str:
        """Prefix prepended to every name before lookup."""
        ...

    @property
    def properties(self) -> MutableMapping[str, str]:
        """The backing property store, shared with sub-settings."""
        ...

    log_sensitive_data: bool

    def contains_name(self, name: str) -> bool: ...

    def set(self, name: str, value: str | bool) -> None: ...

    def get(self, name: str, default: Any = UNSET) -> str: ...

    def get_sensitive(self, name: str, default: Any = UNSET) -> str: ...

    def get_int(self, name: str, default: Any = UNSET) -> int: ...

    def get_long(self, name: str, default: Any = UNSET) -> int: ...

    def get_double(self, name: str, default: Any = UNSET) -> float: ...

    def get_boolean(self, name: str, default: Any = UNSET) -> bool: ...

    def get_sub_settings(self, prefix: str) -> Resolver: ...
