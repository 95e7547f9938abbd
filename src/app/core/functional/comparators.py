"""Comparator helpers.

A comparator is a two-argument callable returning a negative number, zero,
or a positive number when its first argument sorts before, equal to, or
after the second one. Python's sorting works with key functions, so
`functools.cmp_to_key` bridges the two styles.
"""

from collections.abc import Callable, MutableSequence
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two values with their own ordering operators."""
    return (a > b) - (a < b)


def reverse_order(comparator: Comparator = natural_order) -> Comparator:
    """Return a comparator imposing the reverse of the given ordering."""

    def compare(a: Any, b: Any) -> int:
        return comparator(b, a)

    return compare


def comparing(
    key: Callable[[Any], Any], comparator: Comparator = natural_order
) -> Comparator:
    """Return a comparator that compares the keys extracted from each value."""

    def compare(a: Any, b: Any) -> int:
        return comparator(key(a), key(b))

    return compare


def then_comparing(first: Comparator, second: Comparator) -> Comparator:
    """Return a comparator that falls back to second when first ties."""

    def compare(a: Any, b: Any) -> int:
        result = first(a, b)
        return result if result != 0 else second(a, b)

    return compare


def by_length(a: str, b: str) -> int:
    """Order strings by their length only; same-length strings tie."""
    if len(a) == len(b):
        return 0
    return 1 if len(a) > len(b) else -1


def sort(items: MutableSequence[T], comparator: Comparator | None = None) -> None:
    """Sort items in place, by natural order or by the given comparator.

    The sort is stable, so values the comparator considers equal keep their
    relative order. Without a comparator the elements must be mutually
    comparable, otherwise a TypeError propagates.
    """
    if comparator is None:
        items[:] = sorted(items)
    else:
        items[:] = sorted(items, key=cmp_to_key(comparator))
