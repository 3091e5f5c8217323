"""Tree subpackage: the document tree engine.

Re-exports the public API for the tree module:
- DataNode: dataclass representing a node in the document tree
- NodeKind: StrEnum of the six node kinds (OBJECT, ARRAY, STRING, NUMBER, BOOLEAN, NULL)
- TreeBuilder: converts decoded JSON values into a DataNode tree
- parse_text / serialize: JSON text <-> DataNode tree
"""

from json_data_io.tree.builder import TreeBuilder, format_number
from json_data_io.tree.codec import parse_text, serialize
from json_data_io.tree.nodes import DataNode, NodeKind

__all__ = [
    "DataNode",
    "NodeKind",
    "TreeBuilder",
    "format_number",
    "parse_text",
    "serialize",
]
