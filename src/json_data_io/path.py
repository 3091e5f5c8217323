"""DataPath: an immutable sequence of key / index segments.

A path addresses a node relative to some starting node.  Whether a segment
is used as an object key or an array index is decided at resolution time by
the kind of node it meets, not by the segment's type: ``"1"`` can index an
array and ``1`` can look up the key ``"1"`` in an object.

Paths are usually written as separator-delimited strings::

    DataPath.parse("devices.3.name")           # ('devices', '3', 'name')
    DataPath.format("devices.%d.name", 3)      # same, printf-style
    DataPath.of("devices", 3, "name")          # ('devices', 3, 'name')
    DataPath().key("devices").index(3).key("name")

Empty segments produced by splitting are skipped, so ``"a..b"``, ``".a.b"``
and ``"a.b."`` all parse to ``('a', 'b')``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

__all__ = ["DataPath", "PathLike", "Segment"]

Segment: TypeAlias = str | int


@dataclass(frozen=True, slots=True)
class DataPath:
    """Ordered, immutable sequence of path segments.

    Attributes:
        segments: Tuple of ``str`` (key) or non-negative ``int`` (index)
            segments, in descent order.
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        for segment in self.segments:
            _check_segment(segment)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, separator: str = ".") -> DataPath:
        """Split ``text`` on ``separator``, skipping empty segments."""
        return cls(tuple(part for part in text.split(separator) if part))

    @classmethod
    def of(cls, *segments: Segment) -> DataPath:
        return cls(tuple(segments))

    @classmethod
    def format(cls, template: str, *args: Any, separator: str = ".") -> DataPath:
        """Substitute ``args`` into ``template`` (``%`` formatting), then parse.

        With no ``args`` the template is parsed as-is, so a literal ``%`` in a
        key needs no escaping.
        """
        text = template % args if args else template
        return cls.parse(text, separator)

    def child(self, segment: Segment) -> DataPath:
        return DataPath((*self.segments, segment))

    def key(self, name: str) -> DataPath:
        if not isinstance(name, str):
            raise TypeError(f"Key segment must be str, got {type(name)!r}")
        return self.child(name)

    def index(self, position: int) -> DataPath:
        return self.child(position)

    # ------------------------------------------------------------------
    # Sequence behaviour
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def to_string(self, separator: str = ".") -> str:
        return separator.join(str(segment) for segment in self.segments)

    def __str__(self) -> str:
        return self.to_string()


# Anything an accessor accepts as a path.
PathLike: TypeAlias = str | DataPath | Sequence[Segment]


def _check_segment(segment: object) -> None:
    # bool is an int subclass but never a meaningful index.
    if isinstance(segment, bool) or not isinstance(segment, (str, int)):
        raise TypeError(f"Path segment must be str or int, got {type(segment)!r}")
    if isinstance(segment, int) and segment < 0:
        msg = f"Index segment must be >= 0, got {segment}"
        raise ValueError(msg)
