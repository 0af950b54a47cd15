"""Setting resolvers."""

from propconf.resolver.base import UNSET, Resolver
from propconf.resolver.cached import CachedSettings
from propconf.resolver.settings import Settings

__all__ = ["CachedSettings", "Resolver", "Settings", "UNSET"]
