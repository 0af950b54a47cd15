"""Environment overlay layered over a caller-supplied property table."""

from __future__ import annotations

import os
from collections import ChainMap
from collections.abc import Iterator, Mapping, MutableMapping

from propconf.utils.logging import get_logger

logger = get_logger(__name__)


def to_key_path(name: str) -> str:
    """Translate a variable-style name (``db_host``) to a key path (``db.host``)."""
    return name.replace("_", ".")


class EnvironmentOverlay(Mapping[str, str]):
    """Snapshot of the process environment, keyed by key path.

    Keys are matched case-insensitively, so ``DB_HOST`` answers for
    ``db.host``. Entries are inserted in variable-name order; of two
    variables mapping to the same key path the later one wins.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        if environ is None:
            environ = os.environ
        self._entries: dict[str, str] = {}
        for name in sorted(environ):
            key = to_key_path(name)
            logger.debug("environment_variable_added", key=key)
            self._entries[key.lower()] = environ[name]

    def __getitem__(self, key: str) -> str:
        return self._entries[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def with_environment(
    properties: MutableMapping[str, str],
    environ: Mapping[str, str] | None = None,
) -> ChainMap[str, str]:
    """Layer writes > environment > ``properties``.

    Writes land in the first layer, so the caller's table is never modified.
    """
    return ChainMap({}, EnvironmentOverlay(environ), properties)
