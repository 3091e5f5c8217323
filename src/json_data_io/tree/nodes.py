"""DataNode dataclass and NodeKind StrEnum for the JSON document tree.

A document is a tree of DataNode objects.  Container nodes (OBJECT, ARRAY)
hold children; scalar nodes (STRING, NUMBER, BOOLEAN, NULL) hold a single raw
textual value, exactly as it appears in (or will be written to) JSON text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["CONTAINER_KINDS", "NodeKind", "DataNode"]


class NodeKind(StrEnum):
    """Enumeration of the node kinds in a document tree.

    StrEnum values are the lowercased member names:
    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"  : quoted string
    - NUMBER  -> "number"  : numeric literal, text kept verbatim
    - BOOLEAN -> "boolean" : true / false
    - NULL    -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


CONTAINER_KINDS = frozenset({NodeKind.OBJECT, NodeKind.ARRAY})

# Raw text a freshly created scalar starts with.
_INITIAL_TEXT = {
    NodeKind.STRING: "",
    NodeKind.NUMBER: "0",
    NodeKind.BOOLEAN: "false",
    NodeKind.NULL: "null",
}


@dataclass(slots=True, eq=False)
class DataNode:
    """A node in the document tree.

    Nodes compare by identity: two distinct nodes are never equal, which is
    what subtree handles rely on.

    Attributes:
        kind:     Which kind of node this is (see NodeKind).  Never changes.
        text:     Raw textual value for scalar nodes; empty for containers.
        members:  Children of an OBJECT node, keyed and in insertion order.
        items:    Children of an ARRAY node, dense and zero-indexed.
    """

    kind: NodeKind
    text: str = ""
    members: dict[str, DataNode] = field(default_factory=dict)
    items: list[DataNode] = field(default_factory=list)

    @classmethod
    def create(cls, kind: NodeKind) -> DataNode:
        """Return a new empty node of ``kind``."""
        return cls(kind=kind, text=_INITIAL_TEXT.get(kind, ""))

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    # ------------------------------------------------------------------
    # Scalar text
    # ------------------------------------------------------------------

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        """Replace the raw text of a scalar node.

        Raises:
            TypeError: If this node is a container.
        """
        if self.is_container:
            msg = f"cannot set text on a {self.kind} node"
            raise TypeError(msg)
        self.text = text

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def find_by_key(self, key: str) -> DataNode | None:
        if self.kind is not NodeKind.OBJECT:
            return None
        return self.members.get(key)

    def find_by_index(self, index: int) -> DataNode | None:
        if self.kind is not NodeKind.ARRAY or not 0 <= index < len(self.items):
            return None
        return self.items[index]

    def child_count(self) -> int:
        if self.kind is NodeKind.OBJECT:
            return len(self.members)
        if self.kind is NodeKind.ARRAY:
            return len(self.items)
        return 0

    def add_key(self, kind: NodeKind, key: str) -> DataNode | None:
        """Create a ``kind`` child under ``key``; None unless this is an OBJECT.

        An existing child under the same key is replaced in place.
        """
        if self.kind is not NodeKind.OBJECT:
            return None
        child = DataNode.create(kind)
        self.members[key] = child
        return child

    def add_index(self, kind: NodeKind) -> DataNode | None:
        """Append a ``kind`` child; None unless this is an ARRAY."""
        if self.kind is not NodeKind.ARRAY:
            return None
        child = DataNode.create(kind)
        self.items.append(child)
        return child

    def destroy(self) -> None:
        """Release every descendant of this node, however deeply nested."""
        pending = [self]
        while pending:
            node = pending.pop()
            pending.extend(node.members.values())
            pending.extend(node.items)
            node.members.clear()
            node.items.clear()
