"""JSON data I/O - path-addressed typed access to JSON documents."""

from __future__ import annotations

import logging

from json_data_io.accessor import DataAccessor
from json_data_io.api import (
    add_level,
    add_list,
    create_empty_data,
    get_boolean_value,
    get_data_string,
    get_list_size,
    get_numeric_value,
    get_string_value,
    get_sub_data,
    has_key,
    list_storage_entries,
    load_storage_data,
    load_string_data,
    set_boolean_value,
    set_numeric_value,
    set_string_value,
    unload_data,
)
from json_data_io.config import AccessConfig, IndexPolicy, StorageConfig
from json_data_io.document import Document
from json_data_io.path import DataPath
from json_data_io.result import EntryListing
from json_data_io.storage import DataStore
from json_data_io.tree.nodes import DataNode, NodeKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "AccessConfig",
    "DataAccessor",
    "DataNode",
    "DataPath",
    "DataStore",
    "Document",
    "EntryListing",
    "IndexPolicy",
    "NodeKind",
    "StorageConfig",
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
