"""Unit tests for the collectors module."""

import operator

import pytest

from src.app.core.errors import IllegalStateError
from src.app.core.functional import Stream, collectors
from src.app.entities import Product


@pytest.fixture
def catalog() -> list[Product]:
    return [
        Product(id=1, name="HP Laptop", price=25000.0),
        Product(id=2, name="Dell Laptop", price=30000.0),
        Product(id=3, name="Lenevo Laptop", price=28000.0),
        Product(id=4, name="Sony Laptop", price=28000.0),
        Product(id=5, name="Apple Laptop", price=90000.0),
    ]


class TestCollectors:
    """Test the reduction recipes used with Stream.collect."""

    def test_to_list_and_to_set(self, catalog):
        """Should collect prices into a list and a set."""
        prices = Stream.of_iterable(catalog).map(operator.attrgetter("price"))

        assert prices.collect(collectors.to_list()) == [25000.0, 30000.0, 28000.0, 28000.0, 90000.0]
        assert Stream.of_iterable(catalog).map(
            operator.attrgetter("price")
        ).collect(collectors.to_set()) == {25000.0, 30000.0, 28000.0, 90000.0}

    def test_to_map(self, catalog):
        """Should map unique keys to values."""
        result = Stream.of_iterable(catalog).collect(
            collectors.to_map(operator.attrgetter("id"), operator.attrgetter("name"))
        )

        assert result[5] == "Apple Laptop"
        assert list(result) == [1, 2, 3, 4, 5]

    def test_to_map_duplicate_key(self, catalog):
        """Should raise IllegalStateError on duplicate keys without merge."""
        collector = collectors.to_map(operator.attrgetter("price"), operator.attrgetter("name"))

        with pytest.raises(IllegalStateError, match="Duplicate key 28000.0"):
            Stream.of_iterable(catalog).collect(collector)

    def test_to_map_with_merge(self, catalog):
        """Should merge values of duplicate keys."""
        result = Stream.of_iterable(catalog).collect(
            collectors.to_map(
                operator.attrgetter("price"),
                operator.attrgetter("name"),
                lambda first, second: f"{first}, {second}",
            )
        )

        assert result[28000.0] == "Lenevo Laptop, Sony Laptop"

    def test_grouping_by(self, catalog):
        """Should group elements by key, in first-seen order."""
        names = collectors.mapping(operator.attrgetter("name"), collectors.to_list())
        result = Stream.of_iterable(catalog).collect(
            collectors.grouping_by(operator.attrgetter("price"), names)
        )

        assert result == {
            25000.0: ["HP Laptop"],
            30000.0: ["Dell Laptop"],
            28000.0: ["Lenevo Laptop", "Sony Laptop"],
            90000.0: ["Apple Laptop"],
        }

    def test_grouping_by_counting(self, catalog):
        """Should reduce each group with the downstream collector."""
        result = Stream.of_iterable(catalog).collect(
            collectors.grouping_by(operator.attrgetter("price"), collectors.counting())
        )

        assert result[28000.0] == 2

    def test_partitioning_by_has_both_keys(self, catalog):
        """Both partitions should exist even when one is empty."""
        result = Stream.of_iterable(catalog).collect(
            collectors.partitioning_by(lambda p: p.price >= 3000)
        )

        assert result[False] == []
        assert len(result[True]) == 5

    def test_partitioning_by_with_downstream(self, catalog):
        """Should reduce each partition with the downstream collector."""
        result = Stream.of_iterable(catalog).collect(
            collectors.partitioning_by(
                lambda p: p.price > 28000, collectors.summing(operator.attrgetter("price"))
            )
        )

        assert result == {False: 81000.0, True: 120000.0}

    def test_joining(self):
        """Should join string values with prefix and suffix."""
        assert Stream.of("a", "b").collect(collectors.joining(", ", "[", "]")) == "[a, b]"
        assert Stream.empty().collect(collectors.joining(",", "{", "}")) == "{}"
