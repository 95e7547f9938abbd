"""A sorted set with nearest-neighbour lookups.

Python has no sorted set in the standard library; this one keeps its
elements in a list ordered by a comparator and uses `bisect` for lookups.
Membership is decided by the ordering: an element is already present when
the comparator reports it equal to a stored one.
"""

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator, MutableSet
from functools import cmp_to_key
from typing import Any

from src.app.core.errors import NoSuchElementError, require_non_null
from src.app.core.functional.comparators import Comparator, natural_order


class TreeSet(MutableSet):
    """Navigable set ordered by natural order or by a comparator."""

    def __init__(
        self, items: Iterable[Any] = (), comparator: Comparator | None = None
    ):
        self._comparator = comparator or natural_order
        self._key = cmp_to_key(self._comparator)
        self._items: list[Any] = []
        self._keys: list[Any] = []
        for item in items:
            self.add(item)

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    def _copy_empty(self) -> "TreeSet":
        return TreeSet(comparator=self._comparator)

    def _from_iterable(self, items: Iterable[Any]) -> "TreeSet":
        return TreeSet(items, comparator=self._comparator)

    def _index_of(self, item: Any) -> int:
        index = bisect_left(self._keys, self._key(item))
        if index < len(self._items) and self._comparator(self._items[index], item) == 0:
            return index
        return -1

    def __contains__(self, item: object) -> bool:
        if item is None:
            return False
        return self._index_of(item) >= 0

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"TreeSet({self._items!r})"

    def add(self, item: Any) -> None:
        require_non_null(item, "TreeSet does not accept None elements")
        key = self._key(item)
        index = bisect_left(self._keys, key)
        if index < len(self._items) and self._comparator(self._items[index], item) == 0:
            return
        self._items.insert(index, item)
        self._keys.insert(index, key)

    def discard(self, item: Any) -> None:
        if item is None:
            return
        index = self._index_of(item)
        if index >= 0:
            del self._items[index]
            del self._keys[index]

    def first(self) -> Any:
        if not self._items:
            raise NoSuchElementError("TreeSet is empty")
        return self._items[0]

    def last(self) -> Any:
        if not self._items:
            raise NoSuchElementError("TreeSet is empty")
        return self._items[-1]

    def poll_first(self) -> Any | None:
        if not self._items:
            return None
        self._keys.pop(0)
        return self._items.pop(0)

    def poll_last(self) -> Any | None:
        if not self._items:
            return None
        self._keys.pop()
        return self._items.pop()

    def lower(self, item: Any) -> Any | None:
        """Greatest element strictly less than item, or None."""
        index = bisect_left(self._keys, self._key(item))
        return self._items[index - 1] if index > 0 else None

    def floor(self, item: Any) -> Any | None:
        """Greatest element less than or equal to item, or None."""
        index = bisect_right(self._keys, self._key(item))
        return self._items[index - 1] if index > 0 else None

    def ceiling(self, item: Any) -> Any | None:
        """Least element greater than or equal to item, or None."""
        index = bisect_left(self._keys, self._key(item))
        return self._items[index] if index < len(self._items) else None

    def higher(self, item: Any) -> Any | None:
        """Least element strictly greater than item, or None."""
        index = bisect_right(self._keys, self._key(item))
        return self._items[index] if index < len(self._items) else None

    def head_set(self, to_item: Any, inclusive: bool = False) -> "TreeSet":
        """Elements below to_item, as a new set."""
        bound = bisect_right if inclusive else bisect_left
        result = self._copy_empty()
        for item in self._items[: bound(self._keys, self._key(to_item))]:
            result.add(item)
        return result

    def tail_set(self, from_item: Any, inclusive: bool = True) -> "TreeSet":
        """Elements from from_item upwards, as a new set."""
        bound = bisect_left if inclusive else bisect_right
        result = self._copy_empty()
        for item in self._items[bound(self._keys, self._key(from_item)) :]:
            result.add(item)
        return result

    def sub_set(self, from_item: Any, to_item: Any) -> "TreeSet":
        """Elements in [from_item, to_item), as a new set."""
        start = bisect_left(self._keys, self._key(from_item))
        end = bisect_left(self._keys, self._key(to_item))
        result = self._copy_empty()
        for item in self._items[start:end]:
            result.add(item)
        return result

    def descending(self) -> list[Any]:
        return list(reversed(self._items))
