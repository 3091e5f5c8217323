"""AccessConfig, StorageConfig and IndexPolicy.

Both configs are frozen (immutable) dataclasses validated on construction.
AccessConfig governs how dotted paths are split and resolved; StorageConfig
governs where documents live on disk and how directory listings are capped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["AccessConfig", "IndexPolicy", "StorageConfig"]


class IndexPolicy(StrEnum):
    """How a path segment is turned into an array index.

    - STRICT:     Only ASCII decimal digits are accepted ("12"); anything else
                  resolves to nothing.
    - PERMISSIVE: ``strtoul``-style parsing: leading whitespace, optional sign,
                  longest digit prefix ("3x" -> 3).  A segment with no digits
                  becomes index 0; a negative index resolves to nothing.
    """

    STRICT = auto()
    PERMISSIVE = auto()


@dataclass(frozen=True, slots=True)
class AccessConfig:
    """Immutable configuration for path resolution.

    Attributes:
        separator: Single character splitting a path string into segments.
        index_policy: How segments are parsed when the current node is an array.
        max_path_length: Longest accepted path string, in characters.  Longer
            paths resolve to nothing instead of being truncated.
    """

    separator: str = "."
    index_policy: IndexPolicy = IndexPolicy.STRICT
    max_path_length: int = 256

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            msg = f"separator must be a single character, got {self.separator!r}"
            raise ValueError(msg)
        if self.max_path_length <= 0:
            msg = f"max_path_length must be > 0, got {self.max_path_length}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Immutable configuration for file storage.

    Attributes:
        base_directory: Directory that storage names are resolved against.
            Empty string means the current working directory.
        suffix: File suffix appended to every storage name (e.g. ".json").
        max_entries: Maximum number of names a directory listing returns.
        max_name_length: Longest listed name (suffix stripped), in characters.
        max_names_size: Total size budget of a listing: the sum over listed
            names of ``len(name) + 1`` must stay strictly below this value.
    """

    base_directory: str = ""
    suffix: str = ".json"
    max_entries: int = 32
    max_name_length: int = 16
    max_names_size: int = 512

    def __post_init__(self) -> None:
        if not self.suffix.startswith(".") or len(self.suffix) < 2:
            msg = f"suffix must look like '.ext', got {self.suffix!r}"
            raise ValueError(msg)
        if self.max_entries <= 0:
            msg = f"max_entries must be > 0, got {self.max_entries}"
            raise ValueError(msg)
        if self.max_name_length <= 0:
            msg = f"max_name_length must be > 0, got {self.max_name_length}"
            raise ValueError(msg)
        if self.max_names_size <= 0:
            msg = f"max_names_size must be > 0, got {self.max_names_size}"
            raise ValueError(msg)
