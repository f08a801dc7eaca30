# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process-wide cache of field bindings, keyed by class.

Discovery runs at most once per class in the common case. Lookups are plain
dictionary reads and take no lock. Publishing a freshly discovered tuple
happens under a ``threading.Lock`` with ``setdefault``, so when two threads
race on the same class both may run discovery, but the first published
tuple wins and every caller receives that same tuple.

Entries are never evicted; ``clear()`` exists for tests.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TypeAlias

from omnibase_envars.binding.field_binding import FieldBinding

logger = logging.getLogger(__name__)

BindingFactory: TypeAlias = Callable[[type], tuple[FieldBinding, ...]]


class FieldBindingCache:
    """Thread-safe, append-only map from class to its field bindings."""

    def __init__(self) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._bindings: dict[type, tuple[FieldBinding, ...]] = {}

    def get(self, owner: type) -> tuple[FieldBinding, ...] | None:
        return self._bindings.get(owner)

    def get_or_create(
        self,
        owner: type,
        factory: BindingFactory,
    ) -> tuple[FieldBinding, ...]:
        """Return the cached bindings for ``owner``, running ``factory`` on a miss.

        Exceptions raised by ``factory`` propagate and nothing is cached.
        """
        cached = self._bindings.get(owner)
        if cached is not None:
            return cached

        created = tuple(factory(owner))
        with self._lock:
            published = self._bindings.setdefault(owner, created)
        if published is created:
            logger.debug(
                "Cached %d field binding(s) for %s", len(created), owner.__qualname__
            )
        return published

    def clear(self) -> None:
        with self._lock:
            self._bindings.clear()

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, owner: object) -> bool:
        return owner in self._bindings


_cache: FieldBindingCache | None = None
_singleton_lock: threading.Lock = threading.Lock()


def get_field_binding_cache() -> FieldBindingCache:
    """Return the process-wide field binding cache."""
    global _cache
    if _cache is None:
        with _singleton_lock:
            if _cache is None:
                _cache = FieldBindingCache()
    return _cache


__all__ = [
    "BindingFactory",
    "FieldBindingCache",
    "get_field_binding_cache",
]
