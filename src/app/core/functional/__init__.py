"""Functional-style helpers: comparators, optionals, joiners and streams."""

from . import collectors
from .comparators import (
    Comparator,
    by_length,
    comparing,
    natural_order,
    reverse_order,
    sort,
    then_comparing,
)
from .interfaces import functional_interface, implement
from .optional import OptionalValue
from .stream import Stream
from .string_joiner import StringJoiner

__all__ = [
    "Comparator",
    "OptionalValue",
    "Stream",
    "StringJoiner",
    "by_length",
    "collectors",
    "comparing",
    "functional_interface",
    "implement",
    "natural_order",
    "reverse_order",
    "sort",
    "then_comparing",
]
