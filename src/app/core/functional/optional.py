"""A container that may or may not hold a non-None value."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from src.app.core.errors import NoSuchElementError, require_non_null

T = TypeVar("T")
U = TypeVar("U")

_EMPTY = object()


class OptionalValue(Generic[T]):
    """Wrap a possibly missing value and make the absence explicit.

    Build instances with `empty()`, `of()` or `of_nullable()`; the
    constructor is private to this module.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY):
        self._value = value

    @classmethod
    def empty(cls) -> "OptionalValue[Any]":
        return _EMPTY_OPTIONAL

    @classmethod
    def of(cls, value: T) -> "OptionalValue[T]":
        """Wrap value, which must not be None."""
        require_non_null(value, "OptionalValue.of() requires a non-None value")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> "OptionalValue[T]":
        """Wrap value, or return the empty optional when value is None."""
        return cls.empty() if value is None else cls(value)

    def is_present(self) -> bool:
        return self._value is not _EMPTY

    def is_empty(self) -> bool:
        return self._value is _EMPTY

    def get(self) -> T:
        if self._value is _EMPTY:
            raise NoSuchElementError("No value present")
        return self._value

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if self._value is not _EMPTY:
            consumer(self._value)

    def if_present_or_else(
        self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]
    ) -> None:
        if self._value is not _EMPTY:
            consumer(self._value)
        else:
            empty_action()

    def filter(self, predicate: Callable[[T], bool]) -> "OptionalValue[T]":
        if self._value is _EMPTY or predicate(self._value):
            return self
        return self.empty()

    def map(self, mapper: Callable[[T], U | None]) -> "OptionalValue[U]":
        if self._value is _EMPTY:
            return self.empty()
        return OptionalValue.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], "OptionalValue[U]"]) -> "OptionalValue[U]":
        if self._value is _EMPTY:
            return self.empty()
        return require_non_null(mapper(self._value), "flat_map mapper returned None")

    def or_else(self, other: T) -> T:
        return other if self._value is _EMPTY else self._value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier() if self._value is _EMPTY else self._value

    def or_else_throw(
        self, exception_supplier: Callable[[], BaseException] | None = None
    ) -> T:
        if self._value is _EMPTY:
            if exception_supplier is None:
                raise NoSuchElementError("No value present")
            raise exception_supplier()
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalValue):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        return 0 if self._value is _EMPTY else hash(self._value)

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return "OptionalValue.empty"
        return f"OptionalValue[{self._value!r}]"


_EMPTY_OPTIONAL: OptionalValue[Any] = OptionalValue()
