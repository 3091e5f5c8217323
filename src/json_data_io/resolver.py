"""PathResolver: read-only descent from a starting node along a DataPath.

For each segment in order:
- OBJECT: the segment is looked up as a literal key (``int`` segments as
  ``str(i)``).
- ARRAY: the segment is converted to an index according to the configured
  IndexPolicy and looked up by position.
- Scalar: no further descent is possible; the path resolves to nothing.

A missing key or an out-of-range index ends the walk with no result.  This is
never an error: callers get ``None`` and fall back to their default.
Resolution never creates nodes.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import TypeAlias

from json_data_io.cache import PathCache
from json_data_io.config import AccessConfig, IndexPolicy
from json_data_io.document import Document
from json_data_io.path import DataPath, PathLike, Segment
from json_data_io.tree.nodes import DataNode, NodeKind

__all__ = ["Handle", "PathResolver", "node_of"]

logger = logging.getLogger(__name__)

# Anything an accessor accepts as the starting point of a lookup or write.
Handle: TypeAlias = Document | DataNode | None

# STRICT index segments: one or more ASCII decimal digits, nothing else.
_DIGITS = re.compile(r"[0-9]+")

# PERMISSIVE index segments follow strtoul(): leading whitespace, an optional
# sign, then the longest run of digits.  Always matches (possibly empty).
_STRTOUL_PREFIX = re.compile(r"\s*([+-]?)([0-9]*)")


def node_of(handle: Handle) -> DataNode | None:
    """Return the node behind ``handle``; None for absent or unloaded documents."""
    if isinstance(handle, Document):
        return handle.root
    return handle


class PathResolver:
    """Resolves paths against a node tree.

    Args:
        config: Path resolution settings.  Defaults to ``AccessConfig()``.
        cache: Parsed-path cache.  Defaults to a fresh ``PathCache`` using the
            config's separator.
    """

    def __init__(
        self, config: AccessConfig | None = None, cache: PathCache | None = None
    ) -> None:
        self._config: AccessConfig = config if config is not None else AccessConfig()
        self._cache: PathCache = (
            cache if cache is not None else PathCache(separator=self._config.separator)
        )
        if self._cache.separator != self._config.separator:
            msg = (
                f"cache separator {self._cache.separator!r} does not match "
                f"config separator {self._config.separator!r}"
            )
            raise ValueError(msg)

    @property
    def config(self) -> AccessConfig:
        return self._config

    @property
    def cache(self) -> PathCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def to_path(self, path: PathLike) -> DataPath | None:
        """Normalise ``path`` to a DataPath; None if a string path is too long."""
        if isinstance(path, DataPath):
            return path
        if isinstance(path, str):
            if len(path) > self._config.max_path_length:
                logger.warning(
                    "path of %d characters exceeds the %d character limit: %.40s...",
                    len(path),
                    self._config.max_path_length,
                    path,
                )
                return None
            return self._cache.parse(path)
        if isinstance(path, Sequence):
            return DataPath(tuple(path))
        raise TypeError(f"Unsupported path type: {type(path)!r}")

    def resolve(self, start: Handle, path: PathLike) -> DataNode | None:
        """Return the node at ``path`` below ``start``, or None."""
        current = node_of(start)
        data_path = self.to_path(path)
        if current is None or data_path is None:
            return None

        for segment in data_path:
            if current.kind is NodeKind.OBJECT:
                current = current.find_by_key(str(segment))
            elif current.kind is NodeKind.ARRAY:
                index = self._to_index(segment)
                current = None if index is None else current.find_by_index(index)
            else:
                # Scalars are leaves: segments left over means nothing to find.
                return None
            if current is None:
                return None

        return current

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _to_index(self, segment: Segment) -> int | None:
        if isinstance(segment, int):
            return segment
        if self._config.index_policy is IndexPolicy.STRICT:
            return int(segment) if _DIGITS.fullmatch(segment) else None

        sign, digits = _STRTOUL_PREFIX.match(segment).groups()  # type: ignore[union-attr]
        index = int(digits) if digits else 0
        if sign == "-" and index:
            return None
        return index
