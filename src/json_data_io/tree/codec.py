"""Text codec for DataNode trees.

``parse_text`` decodes JSON text with the standard ``json`` module, keeping
every numeric literal as its original text, and hands the result to
TreeBuilder.  ``serialize`` writes a tree back out, either compact
(``{"a":[1,2]}``) or indented like ``json.dumps(..., indent=n)``.
"""

from __future__ import annotations

import json
import logging

from json_data_io.tree.builder import NumberText, TreeBuilder
from json_data_io.tree.nodes import DataNode, NodeKind

__all__ = ["parse_text", "serialize"]

logger = logging.getLogger(__name__)

_builder = TreeBuilder()


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def parse_text(text: str) -> DataNode | None:
    """Parse JSON ``text`` into a tree; None when the text is malformed."""
    try:
        value = json.loads(
            text,
            parse_int=NumberText,
            parse_float=NumberText,
            parse_constant=_reject_constant,
        )
        return _builder.build(value)
    except (ValueError, RecursionError) as exc:
        logger.debug("could not parse document text: %s", exc)
        return None


def serialize(node: DataNode, indent: int | None = None) -> str:
    """Return the JSON text of the tree rooted at ``node``.

    Args:
        node:   Root of the tree to write.
        indent: None for compact output; otherwise the number of spaces per
                nesting level.
    """
    parts: list[str] = []
    # Text still to emit, or (node, depth) pairs still to expand, popped LIFO.
    pending: list[str | tuple[DataNode, int]] = [(node, 0)]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        current, depth = item
        if current.kind is NodeKind.STRING:
            parts.append(json.dumps(current.text, ensure_ascii=False))
        elif current.is_container:
            pending.extend(reversed(_container_pieces(current, indent, depth)))
        else:
            # NUMBER, BOOLEAN and NULL text is already valid JSON.
            parts.append(current.text)
    return "".join(parts)


def _container_pieces(
    node: DataNode, indent: int | None, depth: int
) -> list[str | tuple[DataNode, int]]:
    entries: list[tuple[str | None, DataNode]]
    if node.kind is NodeKind.OBJECT:
        opener, closer = "{", "}"
        entries = list(node.members.items())
    else:
        opener, closer = "[", "]"
        entries = [(None, item) for item in node.items]

    if not entries:
        return [opener + closer]

    if indent is None:
        newline, inner, outer, colon = "", "", "", ":"
    else:
        newline = "\n"
        inner = " " * (indent * (depth + 1))
        outer = " " * (indent * depth)
        colon = ": "

    pieces: list[str | tuple[DataNode, int]] = [opener]
    for position, (key, child) in enumerate(entries):
        if position:
            pieces.append(",")
        pieces.append(newline + inner)
        if key is not None:
            pieces.append(json.dumps(key, ensure_ascii=False) + colon)
        pieces.append((child, depth + 1))
    pieces.append(newline + outer + closer)
    return pieces
