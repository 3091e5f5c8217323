"""PathCache: LRU-backed memo of parsed path strings.

Accessors are typically called over and over with the same handful of path
strings ("network.port", "devices.0.name", ...).  PathCache keeps the
DataPath parsed from each string so repeated lookups skip the split.  LRU
eviction occurs silently when ``max_size`` is exceeded.

Each ``PathCache`` instance maintains its own ``LRUCache`` and is bound to a
single separator, so two instances never interfere with each other.

Example::

    from json_data_io.cache import PathCache

    cache = PathCache(max_size=64)
    cache.parse("a.b.1")   # split and stored
    cache.parse("a.b.1")   # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from json_data_io.path import DataPath

__all__ = ["PathCache"]


class PathCache:
    """LRU cache from path string to parsed DataPath.

    Args:
        max_size: Maximum number of parsed paths held in memory.  Defaults to
            128.  When exceeded, the least-recently-used entry is evicted.
        separator: Segment separator used when parsing.
    """

    def __init__(self, max_size: int = 128, separator: str = ".") -> None:
        self._separator = separator
        self._cache: LRUCache[str, DataPath] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def separator(self) -> str:
        return self._separator

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def __contains__(self, text: object) -> bool:
        return text in self._cache

    def parse(self, text: str) -> DataPath:
        """Return the DataPath for ``text``, parsing it only on a cache miss."""
        path = self._cache.get(text)
        if path is None:
            path = DataPath.parse(text, self._separator)
            self._cache[text] = path
        return path
