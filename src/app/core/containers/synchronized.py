"""Lock-guarded list and mapping variants.

`list` and `dict` are the everyday choices; these wrap the same storage
behind a re-entrant lock for code that shares one instance across threads.
"""

import threading
from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSequence
from typing import Any

from src.app.core.errors import EmptyStackError, require_non_null


class SynchronizedList(MutableSequence):
    """A list whose every operation holds the instance lock."""

    def __init__(self, items: Iterable[Any] = ()):
        self._lock = threading.RLock()
        self._items: list[Any] = list(items)

    def __getitem__(self, index):
        with self._lock:
            if isinstance(index, slice):
                return type(self)(self._items[index])
            return self._items[index]

    def __setitem__(self, index, value) -> None:
        with self._lock:
            self._items[index] = value

    def __delitem__(self, index) -> None:
        with self._lock:
            del self._items[index]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SynchronizedList):
            return self.snapshot() == other.snapshot()
        if isinstance(other, list):
            return self.snapshot() == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.snapshot()!r})"

    def insert(self, index: int, value: Any) -> None:
        with self._lock:
            self._items.insert(index, value)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def snapshot(self) -> list[Any]:
        """Return a plain list copy taken under the lock."""
        with self._lock:
            return list(self._items)


class Stack(SynchronizedList):
    """Last-in first-out stack on top of SynchronizedList.

    The top of the stack is the end of the underlying list.
    """

    def push(self, item: Any) -> Any:
        self.append(item)
        return item

    def pop(self, index: int = -1) -> Any:
        with self._lock:
            if not self._items:
                raise EmptyStackError("stack is empty")
            return self._items.pop(index)

    def peek(self) -> Any:
        with self._lock:
            if not self._items:
                raise EmptyStackError("stack is empty")
            return self._items[-1]

    def empty(self) -> bool:
        return len(self) == 0

    def search(self, item: Any) -> int:
        """1-based distance of item from the top of the stack, or -1."""
        with self._lock:
            for distance, candidate in enumerate(reversed(self._items), start=1):
                if candidate == item:
                    return distance
            return -1


class Hashtable(MutableMapping):
    """Lock-guarded mapping that refuses None keys and None values."""

    def __init__(self, items: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()):
        self._lock = threading.RLock()
        self._data: dict[Any, Any] = {}
        self.update(items)

    def __getitem__(self, key: Any) -> Any:
        require_non_null(key, "Hashtable keys must not be None")
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        require_non_null(key, "Hashtable keys must not be None")
        require_non_null(value, "Hashtable values must not be None")
        with self._lock:
            self._data[key] = value

    def __delitem__(self, key: Any) -> None:
        with self._lock:
            del self._data[key]

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            return iter(list(self._data))

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        require_non_null(key, "Hashtable keys must not be None")
        with self._lock:
            return key in self._data

    def __repr__(self) -> str:
        with self._lock:
            return f"Hashtable({self._data!r})"
