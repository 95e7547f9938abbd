"""Bidirectional iterator over a mutable sequence.

The cursor never points at an element: it sits in the gap between two of
them. `next()` returns the element after the gap and moves past it,
`previous()` returns the element before the gap and moves back, so calling
one right after the other returns the same element twice.

    a   b   c
  ^   ^   ^   ^
  0   1   2   3     <- cursor positions
"""

from collections.abc import Iterator, MutableSequence
from typing import Any

from src.app.core.errors import IllegalStateError, NoSuchElementError


class ListIterator(Iterator):
    """Cursor-based iterator that can move in both directions and edit."""

    def __init__(self, items: MutableSequence[Any], index: int = 0):
        if not 0 <= index <= len(items):
            raise IndexError(f"cursor index {index} out of range")
        self._items = items
        self._cursor = index
        self._last_returned = -1

    def has_next(self) -> bool:
        return self._cursor < len(self._items)

    def has_previous(self) -> bool:
        return self._cursor > 0

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError("no element after the cursor")
        item = self._items[self._cursor]
        self._last_returned = self._cursor
        self._cursor += 1
        return item

    def previous(self) -> Any:
        if not self.has_previous():
            raise NoSuchElementError("no element before the cursor")
        self._cursor -= 1
        self._last_returned = self._cursor
        return self._items[self._cursor]

    def remove(self) -> None:
        """Remove the element last returned by next() or previous()."""
        if self._last_returned < 0:
            raise IllegalStateError("remove() requires a preceding next() or previous()")
        del self._items[self._last_returned]
        if self._last_returned < self._cursor:
            self._cursor -= 1
        self._last_returned = -1

    def set(self, item: Any) -> None:
        """Replace the element last returned by next() or previous()."""
        if self._last_returned < 0:
            raise IllegalStateError("set() requires a preceding next() or previous()")
        self._items[self._last_returned] = item

    def add(self, item: Any) -> None:
        """Insert item before the cursor; a following next() is unaffected."""
        self._items.insert(self._cursor, item)
        self._cursor += 1
        self._last_returned = -1

    def __iter__(self) -> "ListIterator":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()
