"""Append-only filename collections for history and scan candidates."""

from __future__ import annotations

import os
from collections.abc import Iterator

# Bound on a stored filename, in bytes, terminator included.
MAX_FILENAME_BYTES = 500


def fits_path_bound(path: str) -> bool:
    """Return True if the path encodes to fewer than MAX_FILENAME_BYTES bytes."""
    return len(os.fsencode(path)) < MAX_FILENAME_BYTES


class FileSet:
    """Ordered filenames with exact, case-sensitive membership.

    Insertion order is kept so the last item of a loaded history is the most
    recently played file. Items are never removed individually; ``clear``
    empties the whole set.
    """

    def __init__(self, filenames: list[str] | None = None) -> None:
        self._items: list[str] = []
        for name in filenames or ():
            self.add(name)

    def add(self, filename: str) -> None:
        if not fits_path_bound(filename):
            raise ValueError(
                f"Filename exceeds {MAX_FILENAME_BYTES - 1} bytes: {filename[:60]}..."
            )
        self._items.append(filename)

    def contains(self, filename: str) -> bool:
        # Newest entries are the likeliest hits.
        for item in reversed(self._items):
            if item == filename:
                return True
        return False

    @property
    def count(self) -> int:
        return len(self._items)

    def item_at(self, index: int) -> str:
        if not 0 <= index < len(self._items):
            raise IndexError(f"FileSet index out of range: {index}")
        return self._items[index]

    def last(self) -> str | None:
        """Return the most recently added filename, or None when empty."""
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, filename: object) -> bool:
        return isinstance(filename, str) and self.contains(filename)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self.item_at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FileSet({self._items!r})"
