"""Config loading and resolver construction from it."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from functools import lru_cache

from propconf.config.settings import PropconfConfig
from propconf.resolver.base import Resolver
from propconf.resolver.cached import CachedSettings
from propconf.resolver.settings import Settings


@lru_cache(maxsize=1)
def get_config() -> PropconfConfig:
    """Load and cache the library configuration."""
    return PropconfConfig()


def settings_from_config(
    properties: MutableMapping[str, str] | None = None,
    config: PropconfConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> Resolver:
    """Build a resolver over ``properties`` the way ``config`` describes."""
    if config is None:
        config = get_config()
    settings = Settings(
        properties if properties is not None else {},
        prefix=config.prefix,
        wrap_in_environment=config.wrap_in_environment,
        log_sensitive_data=config.log_sensitive_data,
        environ=environ,
    )
    if config.cached:
        return CachedSettings(settings)
    return settings
