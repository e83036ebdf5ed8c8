"""Thread-safe keyed memoization for derived locale artefacts.

Every schema, matcher, lookup table and formatter is derived once per key
and shared for the process lifetime. Derivations are pure functions of
their key, so concurrent first use may compute a value twice; the first
insert wins and every caller receives that same object.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Values computed OUTSIDE the lock (derivations call into other caches)
    - Insert-if-absent: dict.setdefault under the lock
    - Module registry so that clear_caches() resets every cache at once

Python 3.13+.
"""

import functools
import logging
from collections.abc import Callable, Hashable
from threading import RLock

__all__ = ["KeyedCache", "cache_stats", "clear_caches", "memoize"]

logger = logging.getLogger(__name__)

_REGISTRY: list["KeyedCache[Hashable, object]"] = []
_REGISTRY_LOCK = RLock()


class KeyedCache[K: Hashable, V]:
    """Process-wide memo table with insert-if-absent semantics.

    Attributes:
        name: Identifier used in statistics and logs
        hits: Number of lookups served from the table
        misses: Number of lookups that ran the factory
    """

    __slots__ = ("_entries", "_hits", "_lock", "_misses", "name")

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[K, V] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        with _REGISTRY_LOCK:
            _REGISTRY.append(self)  # type: ignore[arg-type]

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        """Return the value for key, deriving it with factory on first use.

        Thread-safe. The factory runs without the lock held; when two
        threads race, the value inserted first is returned to both.

        Args:
            key: Hashable cache key
            factory: Zero-argument callable deriving the value

        Returns:
            The cached value for key
        """
        with self._lock:
            if key in self._entries:
                self._hits += 1
                return self._entries[key]
            self._misses += 1

        value = factory()

        with self._lock:
            return self._entries.setdefault(key, value)

    def clear(self) -> None:
        """Drop every entry and reset metrics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dict with keys size, hits and misses
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"KeyedCache({self.name!r}, size={len(self)})"


def memoize[**P, R](name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Memoize a function in a named KeyedCache.

    The key is the tuple of positional arguments plus the sorted keyword
    arguments, so every argument must be hashable.

    Example:
        >>> @memoize("months.table")
        ... def table(locale_code: str) -> tuple[str, ...]: ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        cache: KeyedCache[Hashable, R] = KeyedCache(name)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            key = (args, tuple(sorted(kwargs.items())))
            return cache.get_or_create(key, lambda: func(*args, **kwargs))

        wrapper.cache = cache  # type: ignore[attr-defined]
        return wrapper

    return decorator


def clear_caches() -> None:
    """Clear every memoized schema, matcher, table and formatter.

    Thread-safe. Intended for tests and for processes that swap Babel's
    locale data at runtime.
    """
    with _REGISTRY_LOCK:
        caches = list(_REGISTRY)
    for cache in caches:
        cache.clear()
    logger.debug("Cleared %d caches", len(caches))


def cache_stats() -> dict[str, dict[str, int]]:
    """Statistics of every registered cache, keyed by cache name."""
    with _REGISTRY_LOCK:
        caches = list(_REGISTRY)
    return {cache.name: cache.get_stats() for cache in caches}
