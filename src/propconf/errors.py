"""Exceptions raised while resolving settings."""

from __future__ import annotations


class SettingsError(Exception):
    """Base exception for all settings failures."""


class PropertyMissingError(SettingsError):
    """A key has no stored value and no default to fall back on."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Property not set: {key}")
        self.key = key


class PropertyTypeError(SettingsError):
    """A stored value cannot be parsed as the requested type."""

    def __init__(self, name: str, target_type: type) -> None:
        super().__init__(
            f"Property {name} could not be parsed as {target_type.__name__}"
        )
        self.name = name
        self.target_type = target_type


class MissingDefaultError(SettingsError, LookupError):
    """An owner type declares no default for the requested key."""

    def __init__(self, owner: type, key: str, kind: str | None = None) -> None:
        qualifier = f"{kind}-default" if kind else "default"
        super().__init__(f"{owner.__qualname__} has no {qualifier} declared for {key}")
        self.owner = owner
        self.key = key
        self.kind = kind
