"""A lazy, one-shot pipeline of operations over a source of values.

A stream stores nothing: it pulls elements from its source through its
intermediate stages (filter, map, ...) only when a terminal operation
(collect, reduce, for_each, ...) asks for them. Each stream can be used
once; an intermediate operation hands the source over to the new stream
it returns, and a terminal operation consumes it. Revisiting the same
elements needs a new stream from the source.
"""

import itertools
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from functools import cmp_to_key, reduce as _reduce
from typing import Any, Generic, TypeVar

from src.app.core.errors import IllegalStateError
from src.app.core.functional.collectors import Collector
from src.app.core.functional.comparators import Comparator
from src.app.core.functional.optional import OptionalValue

T = TypeVar("T")
R = TypeVar("R")

_NO_IDENTITY = object()


class Stream(Generic[T]):
    """Sequential or parallel pipeline built on iterators and itertools."""

    def __init__(self, source: Iterable[T], parallel: bool = False):
        self._source: Iterator[T] = iter(source)
        self._parallel = parallel
        self._used = False

    # sources
    @classmethod
    def of(cls, *values: T) -> "Stream[T]":
        return cls(values)

    @classmethod
    def of_iterable(cls, iterable: Iterable[T]) -> "Stream[T]":
        return cls(iterable)

    @classmethod
    def empty(cls) -> "Stream[Any]":
        return cls(())

    @classmethod
    def iterate(cls, seed: T, next_value: Callable[[T], T]) -> "Stream[T]":
        """Infinite stream seed, f(seed), f(f(seed)), ..."""

        def generate() -> Iterator[T]:
            value = seed
            while True:
                yield value
                value = next_value(value)

        return cls(generate())

    @classmethod
    def generate(cls, supplier: Callable[[], T]) -> "Stream[T]":
        """Infinite stream of values returned by supplier."""
        return cls(supplier() for _ in itertools.count())

    @classmethod
    def concat(cls, first: "Stream[T]", second: "Stream[T]") -> "Stream[T]":
        if first._used or second._used:
            raise IllegalStateError("stream has already been operated upon or closed")
        return cls(itertools.chain(first._consume(), second._consume()))

    def _consume(self) -> Iterator[T]:
        if self._used:
            raise IllegalStateError("stream has already been operated upon or closed")
        self._used = True
        return self._source

    def _chain(self, iterator: Iterable[R]) -> "Stream[R]":
        return Stream(iterator, parallel=self._parallel)

    # intermediate operations
    def filter(self, predicate: Callable[[T], bool]) -> "Stream[T]":
        return self._chain(filter(predicate, self._consume()))

    def map(self, mapper: Callable[[T], R]) -> "Stream[R]":
        return self._chain(map(mapper, self._consume()))

    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> "Stream[R]":
        source = self._consume()
        return self._chain(
            itertools.chain.from_iterable(mapper(element) for element in source)
        )

    def distinct(self) -> "Stream[T]":
        source = self._consume()

        def unique() -> Iterator[T]:
            seen = []
            for element in source:
                if element not in seen:
                    seen.append(element)
                    yield element

        return self._chain(unique())

    def sorted(self, comparator: Comparator | None = None) -> "Stream[T]":
        source = self._consume()

        def ordered() -> Iterator[T]:
            if comparator is None:
                yield from sorted(source)
            else:
                yield from sorted(source, key=cmp_to_key(comparator))

        return self._chain(ordered())

    def peek(self, action: Callable[[T], Any]) -> "Stream[T]":
        source = self._consume()

        def observed() -> Iterator[T]:
            for element in source:
                action(element)
                yield element

        return self._chain(observed())

    def limit(self, max_size: int) -> "Stream[T]":
        if max_size < 0:
            raise ValueError(f"limit must not be negative: {max_size}")
        return self._chain(itertools.islice(self._consume(), max_size))

    def skip(self, n: int) -> "Stream[T]":
        if n < 0:
            raise ValueError(f"skip must not be negative: {n}")
        return self._chain(itertools.islice(self._consume(), n, None))

    def parallel(self) -> "Stream[T]":
        self._parallel = True
        return self

    def sequential(self) -> "Stream[T]":
        self._parallel = False
        return self

    def is_parallel(self) -> bool:
        return self._parallel

    # terminal operations
    def for_each(self, action: Callable[[T], Any]) -> None:
        """Apply action to each element.

        A parallel stream runs the actions on a thread pool, in no
        particular order, and returns once all of them have finished.
        """
        source = self._consume()
        if not self._parallel:
            for element in source:
                action(element)
            return
        with ThreadPoolExecutor() as executor:
            for future in [executor.submit(action, element) for element in source]:
                future.result()

    def for_each_ordered(self, action: Callable[[T], Any]) -> None:
        for element in self._consume():
            action(element)

    def collect(self, collector: Collector) -> Any:
        return collector.collect(self._consume())

    def to_list(self) -> list[T]:
        return list(self._consume())

    def reduce(self, *args: Any) -> Any:
        """Fold the elements with an associative accumulator.

        `reduce(identity, accumulator)` returns the folded value, starting
        from identity. `reduce(accumulator)` returns an OptionalValue that is
        empty for an empty stream.
        """
        if len(args) == 2:
            identity, accumulator = args
            return _reduce(accumulator, self._consume(), identity)
        if len(args) == 1:
            (accumulator,) = args
            source = self._consume()
            first = next(source, _NO_IDENTITY)
            if first is _NO_IDENTITY:
                return OptionalValue.empty()
            return OptionalValue.of(_reduce(accumulator, source, first))
        raise TypeError(f"reduce() takes 1 or 2 arguments ({len(args)} given)")

    def count(self) -> int:
        return sum(1 for _ in self._consume())

    def max(self, comparator: Comparator) -> OptionalValue[T]:
        """Greatest element; the left one wins whenever compare(a, b) >= 0."""
        return self._select(lambda a, b: a if comparator(a, b) >= 0 else b)

    def min(self, comparator: Comparator) -> OptionalValue[T]:
        """Least element; the left one wins whenever compare(a, b) <= 0."""
        return self._select(lambda a, b: a if comparator(a, b) <= 0 else b)

    def _select(self, choose: Callable[[T, T], T]) -> OptionalValue[T]:
        source = self._consume()
        try:
            best = next(source)
        except StopIteration:
            return OptionalValue.empty()
        for element in source:
            best = choose(best, element)
        return OptionalValue.of(best)

    def find_first(self) -> OptionalValue[T]:
        for element in self._consume():
            return OptionalValue.of(element)
        return OptionalValue.empty()

    def any_match(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(element) for element in self._consume())

    def all_match(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(element) for element in self._consume())

    def none_match(self, predicate: Callable[[T], bool]) -> bool:
        return not any(predicate(element) for element in self._consume())

    def __iter__(self) -> Iterator[T]:
        return self._consume()
