"""Unit tests for ComparablePerson and PersonComparator."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from src.app.core.containers import TreeSet
from src.app.core.functional import sort
from src.app.entities import ComparablePerson, PersonComparator


class TestComparablePerson:
    """Test equality, hashing and natural order of ComparablePerson."""

    def test_equality_ignores_hire_date(self):
        """Persons with the same names should be equal."""
        first = ComparablePerson(first_name="Ada", last_name="Lovelace", hire_date=datetime(2020, 1, 1, tzinfo=UTC))
        second = ComparablePerson(first_name="Ada", last_name="Lovelace", hire_date=datetime(2021, 1, 1, tzinfo=UTC))

        assert first == second
        assert first is not second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_names_are_not_equal(self):
        """Any name difference should make persons different."""
        ada = ComparablePerson(first_name="Ada", last_name="Lovelace")

        assert ada != ComparablePerson(first_name="Ada", last_name="Byron")
        assert ada != "Ada Lovelace"

    def test_hire_date_defaults_to_now(self):
        """Should default the hire date to an aware current time."""
        before = datetime.now(UTC)
        person = ComparablePerson(first_name="Ada", last_name="Lovelace")

        assert person.hire_date.tzinfo is not None
        assert person.hire_date >= before

    def test_natural_order_last_then_first_name(self, persons):
        """Should sort by last name, then first name."""
        sort(persons)

        assert [str(p) for p in persons] == [
            "Annie Hopper",
            "Grace Hopper",
            "Ada Lovelace",
            "Alan Turing",
        ]

    def test_compare_to(self):
        """Should return a three-way comparison consistent with equality."""
        annie = ComparablePerson(first_name="Annie", last_name="Hopper")
        grace = ComparablePerson(first_name="Grace", last_name="Hopper")

        assert annie.compare_to(grace) == -1
        assert grace.compare_to(annie) == 1
        assert annie.compare_to(ComparablePerson(first_name="Annie", last_name="Hopper")) == 0
        assert annie < grace <= grace
        assert grace > annie >= annie

    def test_ordering_against_other_types(self):
        """Comparing with another type should raise TypeError."""
        with pytest.raises(TypeError):
            ComparablePerson(first_name="Ada", last_name="Lovelace") < "Ada"  # noqa: B015

    def test_frozen(self):
        """Persons should be immutable."""
        person = ComparablePerson(first_name="Ada", last_name="Lovelace")

        with pytest.raises(ValidationError):
            person.first_name = "Augusta"

    def test_tree_set_uses_natural_order(self, persons):
        """A TreeSet of persons should iterate in natural order."""
        tree = TreeSet(persons)

        assert [p.first_name for p in tree] == ["Annie", "Grace", "Ada", "Alan"]


class TestPersonComparator:
    """Test ordering by hire date."""

    def test_most_recently_hired_first(self, persons):
        """Should sort by hire date, descending."""
        sort(persons, PersonComparator())

        assert [str(p) for p in persons] == [
            "Annie Hopper",
            "Alan Turing",
            "Grace Hopper",
            "Ada Lovelace",
        ]

    def test_compare(self, persons):
        """Should return -1, 0 or 1."""
        ada, alan = persons[0], persons[1]
        comparator = PersonComparator()

        assert comparator.compare(alan, ada) == -1
        assert comparator.compare(ada, alan) == 1
        assert comparator(ada, ada) == 0
