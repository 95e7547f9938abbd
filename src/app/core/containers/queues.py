"""Queue and deque containers with paired failure styles.

Every queue operation exists in two forms: one raises when it cannot
complete, the other returns a sentinel (False or None).

    add     -> offer    (insertion)
    remove  -> poll     (take the head)
    element -> peek     (read the head)

None elements are rejected so that a None result from poll/peek always
means "empty".
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator
from functools import cmp_to_key
from typing import Any

from src.app.core.errors import IllegalStateError, NoSuchElementError, require_non_null
from src.app.core.functional.comparators import Comparator


class Queue(ABC):
    """Abstract base for queues holding elements about to be processed."""

    def __init__(self, capacity: int | None = None):
        self.capacity = capacity

    @abstractmethod
    def _insert(self, item: Any) -> None:
        pass

    @abstractmethod
    def _take(self) -> Any:
        pass

    @abstractmethod
    def _head(self) -> Any:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_full(self) -> bool:
        return self.capacity is not None and len(self) >= self.capacity

    def offer(self, item: Any) -> bool:
        """Insert item if there is room, returning whether it was inserted."""
        require_non_null(item, f"{type(self).__name__} does not accept None elements")
        if self.is_full():
            return False
        self._insert(item)
        return True

    def add(self, item: Any) -> bool:
        """Insert item, raising IllegalStateError when the queue is full."""
        if not self.offer(item):
            raise IllegalStateError(f"{type(self).__name__} is full")
        return True

    def poll(self) -> Any | None:
        """Take the head, or return None when empty."""
        if self.is_empty():
            return None
        return self._take()

    def remove(self) -> Any:
        """Take the head, raising NoSuchElementError when empty."""
        if self.is_empty():
            raise NoSuchElementError(f"{type(self).__name__} is empty")
        return self._take()

    def peek(self) -> Any | None:
        """Read the head without removing it, or return None when empty."""
        if self.is_empty():
            return None
        return self._head()

    def element(self) -> Any:
        """Read the head without removing it, raising when empty."""
        if self.is_empty():
            raise NoSuchElementError(f"{type(self).__name__} is empty")
        return self._head()

    def drain(self) -> list[Any]:
        """Poll every element, returning them in removal order."""
        result = []
        while not self.is_empty():
            result.append(self._take())
        return result


class PriorityQueue(Queue):
    """Heap-backed queue ordered by natural order or a comparator.

    Elements with equal priority leave in the order they were inserted.
    Iteration follows the internal heap layout, not priority order.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        comparator: Comparator | None = None,
        capacity: int | None = None,
    ):
        super().__init__(capacity)
        self._key = cmp_to_key(comparator) if comparator else (lambda item: item)
        self._heap: list[tuple[Any, int, Any]] = []
        self._counter = itertools.count()
        for item in items:
            self.add(item)

    def _insert(self, item: Any) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def _take(self) -> Any:
        return heapq.heappop(self._heap)[2]

    def _head(self) -> Any:
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        return iter([entry[2] for entry in self._heap])

    def __repr__(self) -> str:
        return f"PriorityQueue({list(self)!r})"


class ArrayDeque(Queue):
    """Double-ended queue usable both as a FIFO queue and a LIFO stack.

    Each end has the same three paired operations as a queue:

        add_first    -> offer_first  / add_last    -> offer_last
        remove_first -> poll_first   / remove_last -> poll_last
        get_first    -> peek_first   / get_last    -> peek_last
    """

    def __init__(self, items: Iterable[Any] = (), capacity: int | None = None):
        super().__init__(capacity)
        self._items: deque[Any] = deque()
        for item in items:
            self.add_last(item)

    def _insert(self, item: Any) -> None:
        self._items.append(item)

    def _take(self) -> Any:
        return self._items.popleft()

    def _head(self) -> Any:
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self._items))

    def __repr__(self) -> str:
        return f"ArrayDeque({list(self._items)!r})"

    # insertion
    def offer_first(self, item: Any) -> bool:
        require_non_null(item, "ArrayDeque does not accept None elements")
        if self.is_full():
            return False
        self._items.appendleft(item)
        return True

    def offer_last(self, item: Any) -> bool:
        return self.offer(item)

    def add_first(self, item: Any) -> None:
        if not self.offer_first(item):
            raise IllegalStateError("ArrayDeque is full")

    def add_last(self, item: Any) -> None:
        self.add(item)

    # removal
    def poll_first(self) -> Any | None:
        return self.poll()

    def poll_last(self) -> Any | None:
        return self._items.pop() if self._items else None

    def remove_first(self) -> Any:
        return self.remove()

    def remove_last(self) -> Any:
        if not self._items:
            raise NoSuchElementError("ArrayDeque is empty")
        return self._items.pop()

    # examination
    def peek_first(self) -> Any | None:
        return self.peek()

    def peek_last(self) -> Any | None:
        return self._items[-1] if self._items else None

    def get_first(self) -> Any:
        return self.element()

    def get_last(self) -> Any:
        if not self._items:
            raise NoSuchElementError("ArrayDeque is empty")
        return self._items[-1]

    # stack view
    def push(self, item: Any) -> None:
        self.add_first(item)

    def pop(self) -> Any:
        return self.remove_first()
