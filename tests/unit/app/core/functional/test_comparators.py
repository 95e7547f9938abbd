"""Unit tests for comparator helpers."""

import operator

import pytest

from src.app.core.functional import (
    by_length,
    comparing,
    natural_order,
    reverse_order,
    sort,
    then_comparing,
)


class TestComparators:
    """Test comparator construction and sorting with comparators."""

    def test_natural_order(self):
        """Should return the sign of the comparison."""
        assert natural_order(1, 2) == -1
        assert natural_order(2, 2) == 0
        assert natural_order("b", "a") == 1

    def test_reverse_order(self):
        """Should swap the arguments."""
        assert reverse_order()(1, 2) == 1
        assert reverse_order(by_length)("a", "bb") == 1

    def test_by_length(self):
        """Same-length strings should tie."""
        assert by_length("fig", "kiwi") == -1
        assert by_length("pear", "kiwi") == 0
        assert by_length("banana", "kiwi") == 1

    def test_comparing_then_comparing(self):
        """Should order by key, then break ties with the second comparator."""
        cmp = then_comparing(comparing(len), natural_order)
        items = ["pear", "fig", "kiwi", "apple"]
        sort(items, cmp)

        assert items == ["fig", "kiwi", "pear", "apple"]

    def test_sort_is_stable_and_in_place(self):
        """Equal elements should keep their relative order."""
        items = ["pear", "fig", "kiwi", "apple", "fig"]
        alias = items
        sort(items, by_length)

        assert alias == ["fig", "fig", "pear", "kiwi", "apple"]

    def test_sort_natural_order(self):
        """Without a comparator the natural order applies."""
        items = [3, 1, 2]
        sort(items)

        assert items == [1, 2, 3]

    def test_sort_mixed_types(self):
        """Incomparable elements should raise TypeError."""
        with pytest.raises(TypeError):
            sort([1, "a"])

    def test_comparing_with_attrgetter(self):
        """Key extractors can be any callable."""
        cmp = comparing(operator.itemgetter(1), reverse_order())

        assert cmp(("a", 1), ("b", 2)) == 1
