"""Document: owning handle to the root of a DataNode tree.

A document is created by parsing text (``"{}"`` when no text is given) and
lives until ``unload()`` destroys its tree.  Subtree handles obtained from a
document (``get_sub_data``, ``add_level``, ...) are plain DataNode references
into that tree and are only meaningful while the document is loaded.
"""

from __future__ import annotations

from json_data_io.tree.codec import parse_text, serialize
from json_data_io.tree.nodes import DataNode

__all__ = ["EMPTY_DATA_STRING", "Document"]

EMPTY_DATA_STRING = "{}"


class Document:
    """Root handle of a document tree.

    Args:
        root: Root node the document takes ownership of.

    Example::

        doc = Document.from_string('{"a": {"b": [1, 2, 3]}}')
        doc.to_string()   # '{"a":{"b":[1,2,3]}}'
        doc.unload()
        doc.closed        # True
    """

    __slots__ = ("_root",)

    def __init__(self, root: DataNode) -> None:
        self._root: DataNode | None = root

    @classmethod
    def create_empty(cls) -> Document:
        """Return a new document holding an empty object."""
        document = cls.from_string(EMPTY_DATA_STRING)
        assert document is not None
        return document

    @classmethod
    def from_string(cls, text: str | None) -> Document | None:
        """Parse ``text`` into a document; None when it is not valid JSON.

        ``None`` text is treated as the empty object.
        """
        root = parse_text(EMPTY_DATA_STRING if text is None else text)
        if root is None:
            return None
        return cls(root)

    @property
    def root(self) -> DataNode | None:
        """Root node, or None once the document has been unloaded."""
        return self._root

    @property
    def closed(self) -> bool:
        return self._root is None

    def to_string(self, indent: int | None = None) -> str | None:
        """Serialize the document; None once it has been unloaded."""
        if self._root is None:
            return None
        return serialize(self._root, indent)

    def unload(self) -> None:
        """Destroy the tree.  Calling it again is a no-op."""
        if self._root is None:
            return
        self._root.destroy()
        self._root = None

    def __repr__(self) -> str:
        if self._root is None:
            return "Document(<unloaded>)"
        return f"Document(root={self._root.kind})"
