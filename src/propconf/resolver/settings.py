"""Direct resolver: prefix qualification, precedence, coercion and access logging."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, TypeVar

from propconf.defaults import registry
from propconf.errors import PropertyMissingError, PropertyTypeError, SettingsError
from propconf.resolver.base import UNSET
from propconf.resolver.environment import to_key_path, with_environment
from propconf.utils.logging import HIDDEN_VALUE, get_logger

if TYPE_CHECKING:
    from propconf.resolver.cached import CachedSettings

logger = get_logger(__name__)

T = TypeVar("T")

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1


# int() alone also takes "8_080", " 8080 " and non-ASCII digits.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_integer(value: str, low: int, high: int, width: int) -> int:
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"{value!r} is not an integer")
    number = int(value)
    if not low <= number <= high:
        raise ValueError(f"{value} is out of range for a {width}-bit integer")
    return number


def _parse_int(value: str) -> int:
    return _parse_integer(value, _INT_MIN, _INT_MAX, 32)


def _parse_long(value: str) -> int:
    return _parse_integer(value, _LONG_MIN, _LONG_MAX, 64)


def _parse_double(value: str) -> float:
    if "_" in value or not value.isascii():
        raise ValueError(f"{value!r} is not a number")
    return float(value)


def _parse_bool(value: str) -> bool:
    # Anything but "true" reads as False, it never fails.
    return value.lower() == "true"


class Settings:
    """Resolves setting names against a property store.

    Lookup precedence, highest first: the property store (environment
    overlay included), an inline default, the default declared by an owner
    type. Names are prefixed and have ``_`` translated to ``.`` before lookup.

    The numeric and boolean accessors differ in how they treat a value that
    is present but malformed: the bare ``get_x(name)`` form raises
    PropertyTypeError, the defaulted forms log it and return the default.
    """

    def __init__(
        self,
        properties: MutableMapping[str, str],
        prefix: str = "",
        wrap_in_environment: bool = True,
        log_sensitive_data: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        if properties is None:
            raise ValueError("properties must not be None")
        if wrap_in_environment:
            self._properties: MutableMapping[str, str] = with_environment(properties, environ)
        else:
            self._properties = properties
        self._prefix = prefix or ""
        self.log_sensitive_data = log_sensitive_data

    @classmethod
    def from_environment(
        cls,
        prefix: str = "",
        log_sensitive_data: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> Settings:
        """Settings backed only by environment variables."""
        return cls({}, prefix, True, log_sensitive_data, environ)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def properties(self) -> MutableMapping[str, str]:
        return self._properties

    def get_sub_settings(self, prefix: str) -> CachedSettings:
        """A cached view sharing this store, with ``prefix`` appended to ours."""
        from propconf.resolver.cached import CachedSettings

        child = Settings(
            self._properties,
            self._prefix + prefix,
            wrap_in_environment=False,
            log_sensitive_data=self.log_sensitive_data,
        )
        return CachedSettings(child)

    def qualify(self, name: str) -> str:
        return self._prefix + to_key_path(name)

    def contains_name(self, name: str) -> bool:
        return self._properties.get(self.qualify(name)) is not None

    def set(self, name: str, value: str | bool) -> None:
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif not isinstance(value, str):
            raise TypeError(f"Setting values must be str or bool, got {type(value).__name__}")
        self._properties[self.qualify(name)] = value

    # -- strings ---------------------------------------------------------

    def get(self, name: str, default: Any = UNSET) -> str:
        if default is UNSET:
            return self._get_required(name, sensitive=False)
        if isinstance(default, type):
            return self._get_with_owner(name, default)
        return self._get_with_default(name, default, sensitive=False)

    def get_sensitive(self, name: str, default: Any = UNSET) -> str:
        """Like ``get`` but the value is hidden from the log unless enabled."""
        if isinstance(default, type):
            raise TypeError("get_sensitive takes an inline default, not an owner type")
        if default is UNSET:
            return self._get_required(name, sensitive=True)
        return self._get_with_default(name, default, sensitive=True)

    def _get_required(self, name: str, sensitive: bool) -> str:
        key = self.qualify(name)
        value = self._properties.get(key)
        if value is None:
            logger.error("setting_not_set_no_default", key=key)
            raise PropertyMissingError(key)
        self._log_has_value(name, value, sensitive)
        return value

    def _get_with_default(self, name: str, default: str, sensitive: bool) -> str:
        value = self._properties.get(self.qualify(name))
        if value is None:
            self._log_default(name, default, sensitive)
            return default
        self._log_has_value(name, value, sensitive)
        return value

    def _get_with_owner(self, name: str, owner: type) -> str:
        value = self._properties.get(self.qualify(name))
        sensitive = registry.is_sensitive(owner, name)
        if value is None:
            default = registry.default_for(owner, name)
            self._log_default(name, default, sensitive)
            return default
        self._log_has_value(name, value, sensitive)
        return value

    # -- typed -----------------------------------------------------------

    def get_int(self, name: str, default: Any = UNSET) -> int:
        return self._get_typed(name, default, _parse_int, int, registry.default_int)

    def get_long(self, name: str, default: Any = UNSET) -> int:
        # Owner types declare integer defaults only, longs share them.
        return self._get_typed(name, default, _parse_long, int, registry.default_int)

    def get_double(self, name: str, default: Any = UNSET) -> float:
        return self._get_typed(name, default, _parse_double, float, registry.default_double)

    def get_boolean(self, name: str, default: Any = UNSET) -> bool:
        return self._get_typed(name, default, _parse_bool, bool, registry.default_bool)

    def _get_typed(
        self,
        name: str,
        default: Any,
        parse: Callable[[str], T],
        target_type: type,
        owner_default: Callable[[type, str], T],
    ) -> T:
        if default is UNSET:
            return self._parse(name, parse, target_type, sensitive=False)

        if isinstance(default, type):
            sensitive = registry.is_sensitive(default, name)
            value = self._parse_or_unset(name, parse, target_type, sensitive)
            if value is not UNSET:
                return value
            fallback = owner_default(default, name)
            self._log_default(name, fallback, sensitive)
            return fallback

        value = self._parse_or_unset(name, parse, target_type, sensitive=False)
        if value is not UNSET:
            return value
        self._log_default(name, default, sensitive=False)
        return default

    def _parse(self, name: str, parse: Callable[[str], T], target_type: type, sensitive: bool) -> T:
        raw = self._get_required(name, sensitive)
        try:
            return parse(raw)
        except ValueError as e:
            raise PropertyTypeError(name, target_type) from e

    def _parse_or_unset(
        self, name: str, parse: Callable[[str], T], target_type: type, sensitive: bool
    ) -> Any:
        if not self.contains_name(name):
            return UNSET
        try:
            return self._parse(name, parse, target_type, sensitive)
        except SettingsError:
            logger.debug("settings_value_error", prefix=self._prefix, name=name, exc_info=True)
            return UNSET

    # -- logging ---------------------------------------------------------

    def _shown(self, value: object, sensitive: bool) -> object:
        if sensitive and not self.log_sensitive_data:
            return HIDDEN_VALUE
        return value

    def _log_has_value(self, name: str, value: object, sensitive: bool) -> None:
        logger.info(
            "setting_has_value",
            prefix=self._prefix,
            name=name,
            value=self._shown(value, sensitive),
        )

    def _log_default(self, name: str, default: object, sensitive: bool) -> None:
        logger.info(
            "setting_not_set_using_default",
            prefix=self._prefix,
            name=name,
            value=self._shown(default, sensitive),
        )
