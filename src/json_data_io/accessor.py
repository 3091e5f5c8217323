"""DataAccessor: typed read and write access to a document tree.

Getters resolve a path from the given handle and convert the node they find:

- nothing found, or a node of the wrong kind -> the caller's default (a kind
  mismatch is treated exactly like a missing path, never as an error);
- STRING  -> the raw text;
- NUMBER  -> the longest decimal prefix of the text parsed as a float;
- BOOLEAN -> True only when the text is exactly ``"true"``.

Setters and adders never resolve paths.  They create exactly one child under
the given parent: under ``key`` when the parent is an OBJECT, appended (key
ignored) when it is an ARRAY.  Any other parent makes the write fail with no
mutation.  Nested structure is built one level at a time with
``add_level`` / ``add_list``.
"""

from __future__ import annotations

import re

from json_data_io.cache import PathCache
from json_data_io.config import AccessConfig
from json_data_io.path import PathLike
from json_data_io.resolver import Handle, PathResolver, node_of
from json_data_io.tree.builder import format_number
from json_data_io.tree.nodes import DataNode, NodeKind

__all__ = ["DataAccessor"]

# Longest leading decimal floating point literal, as strtod() would consume it.
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _parse_number(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group())


class DataAccessor:
    """Typed get/set operations over document trees.

    Parsed path strings are kept in a per-instance LRU cache, so reusing one
    accessor for many lookups avoids re-splitting the same paths.  Two
    accessors never share cache state.

    Example::

        accessor = DataAccessor()
        doc = Document.from_string('{"a": {"b": [1, 2, 3]}}')
        accessor.get_list_size(doc, "a.b")             # 3
        accessor.get_numeric_value(doc, -1, "a.b.1")   # 2.0
        accessor.get_numeric_value(doc, -1, "a.b.9")   # -1

    Args:
        config: Path resolution settings.  Defaults to ``AccessConfig()``.
        max_cache_size: Maximum number of parsed path strings held in the
            per-instance LRU cache.  Defaults to 128.
    """

    def __init__(
        self, config: AccessConfig | None = None, max_cache_size: int = 128
    ) -> None:
        self._config: AccessConfig = config if config is not None else AccessConfig()
        self._resolver = PathResolver(
            config=self._config,
            cache=PathCache(max_size=max_cache_size, separator=self._config.separator),
        )

    @property
    def config(self) -> AccessConfig:
        return self._config

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    # ------------------------------------------------------------------
    # Typed reads
    # ------------------------------------------------------------------

    def get_sub_data(self, data: Handle, path: PathLike) -> DataNode | None:
        """Return the node at ``path`` as a non-owning handle, whatever its kind.

        An empty path returns None rather than ``data`` itself.  A string made
        only of separators is not empty and resolves to ``data``.
        """
        if len(path) == 0:
            return None
        return self._resolver.resolve(data, path)

    def get_string_value(
        self, data: Handle, default: str | None, path: PathLike
    ) -> str | None:
        node = self._resolve_kind(data, path, NodeKind.STRING)
        if node is None:
            return default
        return node.get_text()

    def get_numeric_value(self, data: Handle, default: float, path: PathLike) -> float:
        node = self._resolve_kind(data, path, NodeKind.NUMBER)
        if node is None:
            return default
        return _parse_number(node.get_text())

    def get_boolean_value(self, data: Handle, default: bool, path: PathLike) -> bool:
        node = self._resolve_kind(data, path, NodeKind.BOOLEAN)
        if node is None:
            return default
        return node.get_text() == "true"

    def get_list_size(self, data: Handle, path: PathLike) -> int:
        """Number of elements of the array at ``path``; 0 for anything else."""
        node = self._resolve_kind(data, path, NodeKind.ARRAY)
        if node is None:
            return 0
        return node.child_count()

    def has_key(self, data: Handle, path: PathLike) -> bool:
        """True iff ``path`` resolves to a node of any kind."""
        return self._resolver.resolve(data, path) is not None

    # ------------------------------------------------------------------
    # Typed writes
    # ------------------------------------------------------------------

    def set_string_value(self, data: Handle, key: str, value: str) -> bool:
        node = self._add_node(data, key, NodeKind.STRING)
        if node is None:
            return False
        node.set_text(value)
        return True

    def set_numeric_value(self, data: Handle, key: str, value: float) -> bool:
        """Store ``value`` under ``key``; False for NaN/infinite or a bad parent."""
        text = format_number(value)
        if text is None:
            return False
        node = self._add_node(data, key, NodeKind.NUMBER)
        if node is None:
            return False
        node.set_text(text)
        return True

    def set_boolean_value(self, data: Handle, key: str, value: bool) -> bool:
        node = self._add_node(data, key, NodeKind.BOOLEAN)
        if node is None:
            return False
        node.set_text("true" if value else "false")
        return True

    def add_list(self, data: Handle, key: str) -> DataNode | None:
        """Create an empty array child and return it for further writes."""
        return self._add_node(data, key, NodeKind.ARRAY)

    def add_level(self, data: Handle, key: str) -> DataNode | None:
        """Create an empty object child and return it for further writes."""
        return self._add_node(data, key, NodeKind.OBJECT)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_kind(
        self, data: Handle, path: PathLike, kind: NodeKind
    ) -> DataNode | None:
        node = self._resolver.resolve(data, path)
        if node is None or node.kind is not kind:
            return None
        return node

    @staticmethod
    def _add_node(data: Handle, key: str, kind: NodeKind) -> DataNode | None:
        parent = node_of(data)
        if parent is None:
            return None
        if parent.kind is NodeKind.OBJECT:
            return parent.add_key(kind, key)
        if parent.kind is NodeKind.ARRAY:
            return parent.add_index(kind)
        return None
