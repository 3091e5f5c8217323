"""TreeBuilder: converts decoded JSON values into a DataNode tree.

Dispatches on the Python type of each value and fills containers from a work
stack, producing a tree of DataNode objects.  Numbers decoded by the codec
arrive as ``NumberText`` (the literal digits from the source text) and are
stored verbatim; plain Python ints and floats are formatted with ``format_number``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from json_data_io.tree.nodes import DataNode, NodeKind

__all__ = ["NumberText", "TreeBuilder", "format_number"]

# Type alias for values TreeBuilder accepts
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# Integral floats below this magnitude are written without a fraction or exponent.
_PLAIN_INTEGER_LIMIT = 1e16


class NumberText(str):
    """Numeric literal exactly as it appeared in the source text."""

    __slots__ = ()


def format_number(value: float) -> str | None:
    """Return the JSON text of ``value``, or None when it has no JSON form.

    Integral values below 1e16 in magnitude are written as plain integers
    ("3", "-20"); everything else uses the shortest repr that round-trips
    ("0.1", "1e+20").  NaN and the infinities return None.
    """
    number = float(value)
    if not math.isfinite(number):
        return None
    if number.is_integer() and abs(number) < _PLAIN_INTEGER_LIMIT:
        return str(int(number))
    return repr(number)


@dataclass
class TreeBuilder:
    """Converts any JSON-compatible Python value into a DataNode tree.

    The dispatch order matters:
    - bool MUST be checked before int because bool is a subclass of int.
    - NumberText MUST be checked before str because it subclasses str.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"a": [1, True]})
        # tree: OBJECT -> "a": ARRAY -> [NUMBER("1"), BOOLEAN("true")]
    """

    def build(self, value: JsonValue) -> DataNode:
        """Convert a JSON value to a DataNode tree.

        Containers are filled from an explicit work stack, so nesting depth is
        not limited by the interpreter's recursion limit.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
            ValueError: If a float is NaN or infinite.
        """
        root = self._make_node(value)
        pending: list[tuple[DataNode, Any]] = []
        if root.is_container:
            pending.append((root, value))

        while pending:
            node, source = pending.pop()
            if node.kind is NodeKind.OBJECT:
                for key, val in source.items():
                    if not isinstance(key, str):
                        raise TypeError(f"Object keys must be str, got {type(key)!r}")
                    child = self._make_node(val)
                    node.members[key] = child
                    if child.is_container:
                        pending.append((child, val))
            else:
                for item in source:
                    child = self._make_node(item)
                    node.items.append(child)
                    if child.is_container:
                        pending.append((child, item))
        return root

    def _make_node(self, value: JsonValue) -> DataNode:
        """Return the node for ``value``; containers come back empty."""
        if isinstance(value, bool):
            return DataNode(kind=NodeKind.BOOLEAN, text="true" if value else "false")

        if isinstance(value, NumberText):
            return DataNode(kind=NodeKind.NUMBER, text=str(value))

        if isinstance(value, str):
            return DataNode(kind=NodeKind.STRING, text=value)

        if isinstance(value, dict):
            return DataNode(kind=NodeKind.OBJECT)

        if isinstance(value, (list, tuple)):
            return DataNode(kind=NodeKind.ARRAY)

        if isinstance(value, (int, float)):
            text = format_number(value)
            if text is None:
                msg = f"Number has no JSON representation: {value!r}"
                raise ValueError(msg)
            return DataNode(kind=NodeKind.NUMBER, text=text)

        if value is None:
            return DataNode(kind=NodeKind.NULL, text="null")

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
