"""Unit tests for functional interfaces."""

from abc import ABC, abstractmethod

import pytest

from src.app.core.functional import functional_interface, implement
from src.app.core.functional.interfaces import functional_method_name


@functional_interface
class Adder(ABC):
    @abstractmethod
    def add(self, a: int, b: int) -> int:
        pass


@functional_interface
class Supplier(ABC):
    @abstractmethod
    def get(self):
        pass

    @abstractmethod
    def __eq__(self, other):
        pass

    @abstractmethod
    def __hash__(self):
        pass


class TestFunctionalInterface:
    """Test the single-abstract-method check and implement()."""

    def test_decorator_records_method_name(self):
        """Should remember the single abstract method."""
        assert Adder.__functional_method__ == "add"

    def test_object_methods_do_not_count(self):
        """Redeclared object methods should not break the single-method rule."""
        assert functional_method_name(Supplier) == "get"

    def test_two_abstract_methods_are_refused(self):
        """Should raise TypeError when more than one method is abstract."""

        class TwoMethods(ABC):
            @abstractmethod
            def first(self):
                pass

            @abstractmethod
            def second(self):
                pass

        with pytest.raises(TypeError, match="not a functional interface"):
            functional_interface(TwoMethods)

    def test_no_abstract_method_is_refused(self):
        """A class without an abstract method is not a functional interface."""
        with pytest.raises(TypeError):
            functional_method_name(object)

    def test_implement_with_lambda(self):
        """Should return an instance whose method runs the lambda."""
        adder = implement(Adder, lambda a, b: a + b)

        assert isinstance(adder, Adder)
        assert adder.add(2, 3) == 5
        assert adder(4, 5) == 9
        assert type(adder).__name__ == "AdderLambda"

    def test_implement_with_bound_method(self):
        """Should accept any callable with a matching signature."""

        class Multiplier:
            def multiply(self, a, b):
                return a * b

        adder = implement(Adder, Multiplier().multiply)

        assert adder.add(2, 3) == 6

    def test_implement_fills_object_methods(self):
        """Redeclared object methods should fall back to object's."""
        supplier = implement(Supplier, lambda: "value")

        assert supplier.get() == "value"
        assert supplier == supplier
        assert hash(supplier) == hash(supplier)
        assert {supplier}
