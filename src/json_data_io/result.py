"""EntryListing dataclass for directory listing output.

This module provides the result type returned by ``DataStore.list_entries``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["EntryListing"]


@dataclass(frozen=True, slots=True)
class EntryListing:
    """Result of listing the stored documents in a directory.

    Attributes:
        names: Storage names (suffix stripped) that fit within the configured
            caps, in sorted order.
        available: Number of matching entries found in the directory,
            including those that did not fit.
    """

    names: tuple[str, ...]
    available: int

    @property
    def dropped(self) -> int:
        """Number of matching entries left out because of the caps."""
        return self.available - len(self.names)

    @property
    def truncated(self) -> bool:
        return self.dropped > 0

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)
