# Default registry: maps owner types to their declared setting defaults.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from propconf.errors import MissingDefaultError

DefaultValue = Union[str, int, bool, float]


class DefaultKind(str, Enum):
    STRING = "string"
    INT = "int"
    BOOL = "bool"
    DOUBLE = "double"


@dataclass(frozen=True)
class DefaultRegistration:
    """A single declared key on an owner type.

    ``kind`` and ``value`` are both None for keys that are only marked
    sensitive without carrying a default.
    """

    key: str
    kind: DefaultKind | None
    value: DefaultValue | None
    sensitive: bool = False

    @property
    def has_default(self) -> bool:
        return self.kind is not None

    def as_string(self) -> str:
        if self.kind is DefaultKind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)


# Populated when ConfigDefaults subclasses are defined, or through register()
_REGISTRY: dict[type, dict[str, DefaultRegistration]] = {}


def infer_kind(value: DefaultValue) -> DefaultKind:
    """Pick the coercion kind matching a Python default value."""
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return DefaultKind.BOOL
    if isinstance(value, int):
        return DefaultKind.INT
    if isinstance(value, float):
        return DefaultKind.DOUBLE
    if isinstance(value, str):
        return DefaultKind.STRING
    raise TypeError(f"Unsupported default type {type(value).__name__} ({value!r})")


def register(
    owner: type,
    key: str,
    value: DefaultValue | None = None,
    *,
    kind: DefaultKind | None = None,
    sensitive: bool = False,
) -> DefaultRegistration:
    """Declare ``key`` on ``owner`` with an optional typed default."""
    if value is not None and kind is None:
        kind = infer_kind(value)
    if kind is not None and value is None:
        raise ValueError(f"Default for {key} declared as {kind.value} without a value")
    if kind is DefaultKind.DOUBLE and isinstance(value, int) and not isinstance(value, bool):
        value = float(value)

    registration = DefaultRegistration(key=key, kind=kind, value=value, sensitive=sensitive)
    _REGISTRY.setdefault(owner, {})[key] = registration
    return registration


def declared(owner: type) -> dict[str, DefaultRegistration]:
    """All registrations visible from ``owner``, subclass declarations winning."""
    merged: dict[str, DefaultRegistration] = {}
    for klass in reversed(owner.__mro__):
        merged.update(_REGISTRY.get(klass, {}))
    return merged


def _lookup(owner: type, key: str) -> DefaultRegistration | None:
    for klass in owner.__mro__:
        entries = _REGISTRY.get(klass)
        if entries and key in entries:
            return entries[key]
    return None


def _lookup_kind(owner: type, key: str, kind: DefaultKind) -> DefaultValue:
    registration = _lookup(owner, key)
    if registration is None or registration.kind is not kind:
        raise MissingDefaultError(owner, key, kind.value)
    return registration.value  # type: ignore[return-value]


def is_sensitive(owner: type, key: str) -> bool:
    registration = _lookup(owner, key)
    return registration is not None and registration.sensitive


def default_for(owner: type, key: str) -> str:
    """Return the default for ``key`` as a string, whatever kind it was declared as."""
    registration = _lookup(owner, key)
    if registration is None or not registration.has_default:
        raise MissingDefaultError(owner, key)
    return registration.as_string()


def default_int(owner: type, key: str) -> int:
    return _lookup_kind(owner, key, DefaultKind.INT)  # type: ignore[return-value]


def default_bool(owner: type, key: str) -> bool:
    return _lookup_kind(owner, key, DefaultKind.BOOL)  # type: ignore[return-value]


def default_double(owner: type, key: str) -> float:
    return _lookup_kind(owner, key, DefaultKind.DOUBLE)  # type: ignore[return-value]


def config_tags(owner: type) -> set[str]:
    """Keys on ``owner`` that carry a default."""
    return {key for key, reg in declared(owner).items() if reg.has_default}


def config_defaults(owner: type) -> dict[str, str]:
    return {
        key: reg.as_string() for key, reg in declared(owner).items() if reg.has_default
    }


def config_defaults_int(owner: type) -> dict[str, int]:
    return {
        key: reg.value  # type: ignore[misc]
        for key, reg in declared(owner).items()
        if reg.kind is DefaultKind.INT
    }


def config_defaults_bool(owner: type) -> dict[str, bool]:
    return {
        key: reg.value  # type: ignore[misc]
        for key, reg in declared(owner).items()
        if reg.kind is DefaultKind.BOOL
    }
