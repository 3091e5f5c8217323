"""Public API functions for json-data-io.

Module-level functions mirroring the classic DataIO operation set.  Each
accessor call creates a fresh DataAccessor, and each storage call a fresh
DataStore, to guarantee zero global state between calls.  Code doing many
lookups should hold its own ``DataAccessor`` to benefit from its path cache.
"""

from __future__ import annotations

import os

from json_data_io.accessor import DataAccessor
from json_data_io.config import AccessConfig, StorageConfig
from json_data_io.document import Document
from json_data_io.path import PathLike
from json_data_io.resolver import Handle, node_of
from json_data_io.result import EntryListing
from json_data_io.storage import DataStore
from json_data_io.tree.codec import serialize
from json_data_io.tree.nodes import DataNode

__all__ = [
    "add_level",
    "add_list",
    "create_empty_data",
    "get_boolean_value",
    "get_data_string",
    "get_list_size",
    "get_numeric_value",
    "get_string_value",
    "get_sub_data",
    "has_key",
    "list_storage_entries",
    "load_storage_data",
    "load_string_data",
    "set_boolean_value",
    "set_numeric_value",
    "set_string_value",
    "unload_data",
]


# ----------------------------------------------------------------------
# Document lifecycle
# ----------------------------------------------------------------------


def create_empty_data() -> Document:
    """Return a new document holding an empty object."""
    return Document.create_empty()


def load_string_data(text: str | None) -> Document | None:
    """Parse ``text`` (None means ``"{}"``); None when it is not valid JSON."""
    return Document.from_string(text)


def load_storage_data(
    name: str | None, config: StorageConfig | None = None
) -> Document | None:
    """Load ``<base_directory>/<name><suffix>``; None when missing or malformed.

    Args:
        name:   Storage name, without directory or suffix.
        config: Storage settings.  Defaults to ``StorageConfig()``.
    """
    return DataStore(config).load(name)


def list_storage_entries(
    directory: str | os.PathLike[str] | None = None,
    config: StorageConfig | None = None,
) -> EntryListing:
    """List storage names in ``directory`` (default: the config's base directory)."""
    return DataStore(config).list_entries(directory)


def get_data_string(data: Handle, indent: int | None = None) -> str | None:
    """Serialize a document or subtree; None for absent or unloaded data."""
    node = node_of(data)
    if node is None:
        return None
    return serialize(node, indent)


def unload_data(data: Document | None) -> None:
    """Destroy ``data``'s tree.  No-op for None or an already unloaded document."""
    if data is None:
        return
    data.unload()


# ----------------------------------------------------------------------
# Typed reads
# ----------------------------------------------------------------------


def get_sub_data(
    data: Handle, path: PathLike, config: AccessConfig | None = None
) -> DataNode | None:
    """Return the node at ``path`` as a non-owning handle, or None."""
    return DataAccessor(config=config).get_sub_data(data, path)


def get_string_value(
    data: Handle, default: str | None, path: PathLike, config: AccessConfig | None = None
) -> str | None:
    """Return the string at ``path``, or ``default`` if missing or not a string."""
    return DataAccessor(config=config).get_string_value(data, default, path)


def get_numeric_value(
    data: Handle, default: float, path: PathLike, config: AccessConfig | None = None
) -> float:
    """Return the number at ``path``, or ``default`` if missing or not a number."""
    return DataAccessor(config=config).get_numeric_value(data, default, path)


def get_boolean_value(
    data: Handle, default: bool, path: PathLike, config: AccessConfig | None = None
) -> bool:
    """Return the boolean at ``path``, or ``default`` if missing or not a boolean."""
    return DataAccessor(config=config).get_boolean_value(data, default, path)


def get_list_size(
    data: Handle, path: PathLike, config: AccessConfig | None = None
) -> int:
    """Return the length of the array at ``path``; 0 for anything else."""
    return DataAccessor(config=config).get_list_size(data, path)


def has_key(data: Handle, path: PathLike, config: AccessConfig | None = None) -> bool:
    """Return True if ``path`` resolves to any node."""
    return DataAccessor(config=config).has_key(data, path)


# ----------------------------------------------------------------------
# Typed writes
# ----------------------------------------------------------------------


def set_string_value(data: Handle, key: str, value: str) -> bool:
    return DataAccessor().set_string_value(data, key, value)


def set_numeric_value(data: Handle, key: str, value: float) -> bool:
    return DataAccessor().set_numeric_value(data, key, value)


def set_boolean_value(data: Handle, key: str, value: bool) -> bool:
    return DataAccessor().set_boolean_value(data, key, value)


def add_list(data: Handle, key: str) -> DataNode | None:
    return DataAccessor().add_list(data, key)


def add_level(data: Handle, key: str) -> DataNode | None:
    return DataAccessor().add_level(data, key)
