"""EntryCursor: pausable cursor over the root entries of a backing mapping."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dotaccess.types import DataRef

__all__ = ["EntryCursor"]


class EntryCursor:
    """Cursor with current/key/next/valid/rewind semantics.

    Entries are pulled lazily from the mapping in insertion order, so the
    cursor can be advanced a few steps, left alone, and resumed later. It is
    also a plain iterator of ``(key, value)`` pairs. Mutating the mapping
    while a cursor is in use gives undefined results.
    """

    def __init__(self, ref: DataRef) -> None:
        self._ref = ref
        self._entries: Iterator[tuple[str, Any]] = iter(())
        self._entry: tuple[str, Any] | None = None
        self.rewind()

    def rewind(self) -> None:
        """Move back to the first entry."""
        self._entries = iter(self._ref.value.items())
        self._entry = next(self._entries, None)

    def valid(self) -> bool:
        """Whether the cursor points at an entry."""
        return self._entry is not None

    def current(self) -> Any:
        """Value of the current entry, or None past the end."""
        return self._entry[1] if self._entry is not None else None

    def key(self) -> str | None:
        """Key of the current entry, or None past the end."""
        return self._entry[0] if self._entry is not None else None

    def next(self) -> None:
        """Advance to the following entry."""
        if self._entry is not None:
            self._entry = next(self._entries, None)

    def __iter__(self) -> EntryCursor:
        return self

    def __next__(self) -> tuple[str, Any]:
        if self._entry is None:
            raise StopIteration
        entry = self._entry
        self.next()
        return entry
