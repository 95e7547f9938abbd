"""Reference: functions as values, optional values, date/time, joiners, streams.

Functions are first-class objects: a lambda, a bound method, a class or any
object with `__call__` can be stored, passed and called. This module shows
how single-method contracts are filled with them, how closures capture
their surroundings, how multiple inheritance resolves methods defined in
more than one base, and the functional-style helpers of
`src.app.core.functional`.

Run with `python -m src.app.references.features_reference`.
"""

import operator
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta
from functools import reduce
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from src.app.core.errors import IllegalStateError, NoSuchElementError, NullValueError
from src.app.core.functional import (
    OptionalValue,
    Stream,
    StringJoiner,
    collectors,
    comparing,
    functional_interface,
    implement,
    sort,
)
from src.app.references.clock import local_now
from src.app.references.registry import Demonstration, demonstration
from src.app.runtime.context import get_config

SECTION = "features"


@functional_interface
class NoParameterFunctionable(ABC):
    """A functional interface has exactly one abstract method."""

    @abstractmethod
    def no_parameter_function(self):
        pass

    # Redeclaring methods every object already has does not count
    @abstractmethod
    def __hash__(self):
        pass

    @abstractmethod
    def __str__(self):
        pass

    @abstractmethod
    def __eq__(self, other):
        pass


@functional_interface
class SingleParameterFunctionable(ABC):
    @abstractmethod
    def single_parameter_function(self, param: str):
        pass


@functional_interface
class MultipleParameterFunctionable(ABC):
    @abstractmethod
    def multiple_parameters_function(self, a: int, b: int) -> int:
        pass


class SomeClass:
    def sum(self, a: int, b: int) -> int:
        return a * b

    def same_or_not(self, instance: "SomeClass") -> bool:
        return self is instance


@functional_interface
class AnotherFunctionable(ABC):
    @abstractmethod
    def create(self) -> SomeClass:
        pass


@functional_interface
class YetAnotherFunctionable(ABC):
    @abstractmethod
    def compare(self, a: SomeClass, b: SomeClass) -> bool:
        pass


class ReferenceFeatures:
    """Owner of the fields and methods referenced by the closures below."""

    STATIC_FIELD = "STATIC"

    def __init__(self):
        self.field = "default"

    @staticmethod
    def static_reference_method(param: str) -> str:
        return "Static Method Reference"

    def instance_reference_method(self, a: int, b: int) -> int:
        return a + b

    def capturing_closure(self, some_variable: str):
        # Reads the local at call time, and the instance and class through self
        return lambda: [some_variable, self.field, type(self).STATIC_FIELD]


class SomeInterface:
    """Base class providing a default implementation."""

    def default_method(self) -> list[str]:
        return ["Call from default method of SomeInterface"]

    @staticmethod
    def static_method() -> str:
        return "Call from static method of SomeInterface"


class AnotherInterface:
    def default_method(self) -> list[str]:
        return ["Call from default method of AnotherInterface"]


class MyClass(SomeInterface, AnotherInterface):
    """Both bases define default_method; the override calls each explicitly."""

    def default_method(self) -> list[str]:
        return (
            SomeInterface.default_method(self)
            + AnotherInterface.default_method(self)
            + ["Call from default overridden method"]
        )

    def test(self) -> list[str]:
        return self.default_method()


class ResolvedByMro(SomeInterface, AnotherInterface):
    """No override: the first base in the MRO provides default_method."""


@demonstration(section=SECTION, name="functional-interfaces", title="Functional interfaces")
def functional_interfaces(demo: Demonstration) -> None:
    """Single-method contracts filled with lambdas of 0, 1 and 2 parameters."""
    f1 = implement(
        NoParameterFunctionable, lambda: "My Awesome Function without parameters"
    )
    f2 = implement(
        SingleParameterFunctionable,
        lambda x: "another awesome function with a single parameter",
    )

    def add(x: int, y: int) -> int:
        # A body with statements needs def; a single expression fits a lambda
        return x + y

    f3 = implement(MultipleParameterFunctionable, add)
    f4 = implement(MultipleParameterFunctionable, lambda x, y: x + y)

    demo.record("no parameter", f1.no_parameter_function())
    demo.record("single parameter", f2.single_parameter_function("ignored"))
    demo.record("two parameters (def)", f3.multiple_parameters_function(2, 3))
    demo.record("two parameters (lambda)", f4.multiple_parameters_function(2, 3))
    demo.record("called directly", f4(4, 5))
    demo.record(
        "abstract method of NoParameterFunctionable",
        NoParameterFunctionable.__functional_method__,
        note="__hash__, __str__ and __eq__ are ignored",
    )

    class TwoMethods(ABC):
        @abstractmethod
        def first(self):
            pass

        @abstractmethod
        def second(self):
            pass

    try:
        functional_interface(TwoMethods)
    except TypeError as e:
        demo.record("two abstract methods", type(e).__name__)


@demonstration(section=SECTION, name="closures", title="Closures and captured variables")
def closures(demo: Demonstration) -> None:
    """A lambda captures names from its enclosing scopes, not their values."""
    features = ReferenceFeatures()
    f5 = features.capturing_closure("Value")
    demo.record("captured", f5())

    # The instance can be modified after the closure was created
    features.field = "modified"
    demo.record("after modifying the instance", f5())

    # Late binding: every lambda sees the loop variable's final value...
    late = [lambda: i for i in range(3)]
    demo.record("late binding", [f() for f in late])
    # ...unless the current value is bound as a default argument
    bound = [lambda i=i: i for i in range(3)]
    demo.record("bound with a default", [f() for f in bound])


@demonstration(section=SECTION, name="method-references", title="Method references")
def method_references(demo: Demonstration) -> None:
    """Passing an existing function or method instead of writing a lambda.

    The referenced callable must accept the arguments of the interface's
    method and return what it returns.
    """
    features = ReferenceFeatures()

    # Static method: Class.method
    f6 = implement(SingleParameterFunctionable, ReferenceFeatures.static_reference_method)
    demo.record("static method", f6.single_parameter_function("param"))

    # Method bound to self
    f7 = implement(MultipleParameterFunctionable, features.instance_reference_method)
    demo.record("bound to self", f7.multiple_parameters_function(2, 3))

    # Method bound to another instance
    instance = SomeClass()
    f8 = implement(MultipleParameterFunctionable, instance.sum)
    demo.record("bound to an instance", f8.multiple_parameters_function(2, 3))

    # Constructor: the class itself
    f9 = implement(AnotherFunctionable, SomeClass)
    demo.record("constructor", type(f9.create()).__name__)

    # Unbound method: the first argument becomes self, so
    # compare(a, b) runs a.same_or_not(b)
    f10 = implement(YetAnotherFunctionable, SomeClass.same_or_not)
    other = SomeClass()
    demo.record("unbound, same instance", f10.compare(instance, instance))
    demo.record("unbound, other instance", f10.compare(instance, other))

    # Plain callables work wherever a function is expected
    demo.record("str.upper as a function", list(map(str.upper, ["a", "b"])))
    demo.record(
        "operator.attrgetter", list(map(operator.attrgetter("real"), [1, 2.5]))
    )


@demonstration(section=SECTION, name="default-methods", title="Default methods and the diamond")
def default_methods(demo: Demonstration) -> None:
    """Several bases can implement the same method.

    Python resolves the call along the method resolution order (MRO); an
    override can still call each base's version explicitly.
    """
    demo.record("overridden", MyClass().test())
    demo.record("resolved by MRO", ResolvedByMro().default_method())
    demo.record("MRO", [cls.__name__ for cls in ResolvedByMro.__mro__])
    demo.record("static method", SomeInterface.static_method())


@demonstration(section=SECTION, name="optional", title="Optional values")
def optional(demo: Demonstration) -> None:
    """OptionalValue makes a possibly missing value explicit."""
    empty = OptionalValue.empty()
    value = OptionalValue.of("value")
    nullable = OptionalValue.of_nullable("value")

    demo.record("empty.is_present()", empty.is_present())
    demo.record("value.get()", value.get())
    printed: list[str] = []
    nullable.if_present(printed.append)
    demo.record("nullable.if_present()", printed)
    demo.record("of_nullable(None)", OptionalValue.of_nullable(None))

    try:
        OptionalValue.of(None)
    except NullValueError as e:
        demo.record("of(None)", type(e).__name__)
    try:
        empty.get()
    except NoSuchElementError as e:
        demo.record("empty.get()", type(e).__name__)

    demo.record("map", value.map(str.upper))
    demo.record("filter", value.filter(lambda text: text.startswith("x")))
    demo.record("flat_map", value.flat_map(lambda text: OptionalValue.of(len(text))))
    demo.record("or_else", empty.or_else("fallback"))
    demo.record("or_else_get", empty.or_else_get(lambda: "supplied"))


@demonstration(section=SECTION, name="for-each", title="for_each with lambdas and references")
def for_each(demo: Demonstration) -> None:
    """for_each takes any one-argument callable."""
    strings = ["first", "second"]

    printed: list[str] = []
    Stream.of_iterable(strings).for_each(lambda s: printed.append("s"))
    demo.record("lambda ignoring its argument", printed)

    printed = []
    Stream.of_iterable(strings).for_each(printed.append)
    demo.record("bound method", printed)


@demonstration(section=SECTION, name="date-time", title="Dates, times and zones")
def date_time(demo: Demonstration) -> None:
    """Immutable date/time values and calendar arithmetic.

    `datetime` covers days, hours and smaller units through timedelta;
    months and years have variable lengths, so they go through
    dateutil's relativedelta, which clamps to the end of shorter months.
    """
    features = get_config().features
    now = local_now()

    # Dates without time
    today = now.date()
    demo.record("today", today)
    demo.record("anchor + 1 day", features.anchor_date + timedelta(days=1))
    demo.record("today - 1 month", today - relativedelta(months=1))
    demo.record("parsed date", date.fromisoformat("2018-07-29"))

    # Times without date
    demo.record("now time", now.time().replace(microsecond=0))
    demo.record("anchor time", features.anchor_time)
    parsed = time.fromisoformat("06:30")
    demo.record(
        "parsed 06:30 + 1 hour",
        (datetime.combine(date.min, parsed) + timedelta(hours=1)).time(),
    )

    # Date and time together
    demo.record("now", now.replace(microsecond=0))
    day_at_time = datetime.combine(features.anchor_date, features.anchor_time)
    demo.record("anchor date at time", day_at_time)
    future = day_at_time + timedelta(days=2)
    future = future + timedelta(hours=3)
    future = future + relativedelta(months=4)
    future = future + relativedelta(years=5)
    demo.record(
        "+2 days +3 hours +4 months +5 years",
        future,
        note="applied one after the other",
    )
    demo.record(
        "same offsets in one relativedelta",
        day_at_time + relativedelta(years=5, months=4, days=2, hours=3),
        note="years and months are applied first",
    )

    # Zoned date-time
    zone = ZoneInfo(features.time_zone)
    zoned = now.replace(tzinfo=zone)
    demo.record("zoned now", zoned.replace(microsecond=0).isoformat())
    demo.record("anchor UTC offset", day_at_time.replace(tzinfo=zone).utcoffset())


@demonstration(section=SECTION, name="string-joiner", title="Joining strings")
def string_joiner(demo: Demonstration) -> None:
    """StringJoiner builds a delimited string with optional prefix and suffix."""
    comma_separated = StringJoiner(",")
    comma_separated.add("one").add("two").add("three")
    demo.record("comma separated", str(comma_separated))

    join_names = StringJoiner(":", "[", "]")
    join_names.add("leo").add("lex").add("max")
    demo.record("with prefix and suffix", str(join_names))

    merged = join_names.merge(comma_separated)
    demo.record("merged", str(merged))

    empty = StringJoiner(",", "{", "}")
    demo.record("empty", str(empty))
    demo.record("empty with empty value", str(empty.set_empty_value("EMPTY")))

    demo.record("str.join", ",".join(["one", "two", "three"]))


@demonstration(section=SECTION, name="streams", title="Stream pipelines")
def streams(demo: Demonstration) -> None:
    """Streams convey elements from a source through a pipeline of operations.

    A stream does not modify its source. It is evaluated lazily, when a
    terminal operation runs, and its elements are visited once: a new
    stream is needed to visit them again.
    """
    features = get_config().features
    products = list(features.catalog)

    prices = (
        Stream.of_iterable(products)
        .filter(lambda p: p.price > features.price_filter_threshold)
        .map(lambda p: p.price)
        .collect(collectors.to_list())
    )
    demo.record("prices above threshold", prices)

    multiples = (
        Stream.iterate(features.iterate_seed, lambda element: element + 1)
        .filter(lambda element: element % features.iterate_divisor == 0)
        .limit(features.iterate_limit)
        .to_list()
    )
    demo.record("iterate, filter, limit", multiples)

    # map / reduce
    total_price = (
        Stream.of_iterable(products)
        .map(lambda product: product.price)
        .reduce(0.0, lambda total, price: total + price)
    )
    demo.record("total price", total_price)
    total_price2 = (
        Stream.of_iterable(products)
        .map(operator.attrgetter("price"))
        .reduce(0.0, operator.add)
    )
    demo.record("total price with operator.add", total_price2)

    most_expensive = (
        Stream.of_iterable(products)
        .max(lambda p1, p2: 1 if p1.price > p2.price else -1)
        .get()
    )
    demo.record("max", most_expensive.name)
    cheapest = (
        Stream.of_iterable(products)
        .max(lambda p1, p2: 1 if p1.price < p2.price else -1)
        .get()
    )
    demo.record("min, as max of the reversed order", cheapest.name)

    demo.record(
        "count below threshold",
        Stream.of_iterable(products)
        .filter(lambda product: product.price < features.price_filter_threshold)
        .count(),
    )
    demo.record(
        "set of prices",
        Stream.of_iterable(products)
        .map(operator.attrgetter("price"))
        .collect(collectors.to_set()),
    )
    demo.record(
        "map by id",
        Stream.of_iterable(products).collect(
            collectors.to_map(operator.attrgetter("id"), operator.attrgetter("name"))
        ),
    )

    # Grouping and partitioning
    names = collectors.mapping(operator.attrgetter("name"), collectors.to_list())
    demo.record(
        "grouped by id",
        Stream.of_iterable(products).collect(
            collectors.grouping_by(operator.attrgetter("id"), names)
        ),
    )
    demo.record(
        "grouped by name",
        list(
            Stream.of_iterable(products).collect(
                collectors.grouping_by(operator.attrgetter("name"))
            )
        ),
    )
    demo.record(
        "grouped by price",
        Stream.of_iterable(products).collect(
            collectors.grouping_by(operator.attrgetter("price"), names)
        ),
    )
    demo.record(
        "partitioned by price",
        Stream.of_iterable(products).collect(
            collectors.partitioning_by(
                lambda p: p.price >= features.partition_threshold, names
            )
        ),
    )
    demo.record(
        "joined names",
        Stream.of_iterable(products)
        .map(operator.attrgetter("name"))
        .collect(collectors.joining(", ", "[", "]")),
    )

    # Nothing runs before the terminal operation
    visited: list[int] = []
    pipeline = (
        Stream.of_iterable(products)
        .peek(lambda product: visited.append(product.id))
        .filter(lambda product: product.price > 26000)
    )
    demo.record("visited before terminal operation", list(visited))
    demo.record("find_first", pipeline.find_first().map(operator.attrgetter("name")))
    demo.record("visited after find_first", visited)

    # One-shot
    numbers = Stream.of(1, 2, 3)
    demo.record("first count", numbers.count())
    try:
        numbers.count()
    except IllegalStateError as e:
        demo.record("second count", type(e).__name__)

    # A stable sort is idempotent
    by_price = comparing(operator.attrgetter("price"))
    once = list(products)
    sort(once, by_price)
    twice = list(once)
    sort(twice, by_price)
    demo.record("sorted by price", [product.name for product in once])
    demo.record("sorting again changes nothing", once == twice)


def _concatenate(values: list[int]) -> str:
    return Stream.of_iterable(values).map(str).reduce(lambda s, a: s + a).get()


@demonstration(section=SECTION, name="arrays", title="Sorting arrays")
def arrays(demo: Demonstration) -> None:
    """Sorting a whole sequence or only a range of it, in place."""
    features = get_config().features

    integers = list(features.integers)
    demo.record("integers", _concatenate(integers))
    integers.sort()
    demo.record("sorted", _concatenate(integers))

    ints = list(features.ints)
    demo.record("ints", _concatenate(ints))
    start, end = features.sort_range
    ints[start:end] = sorted(ints[start:end])
    demo.record(f"sorted range [{start}, {end})", _concatenate(ints))

    demo.record("with str.join", "".join(map(str, ints)))
    demo.record("with functools.reduce", reduce(operator.add, map(str, ints)))


def main() -> None:
    """Run every features demonstration and print the results."""
    from src.app.references.console import render_all
    from src.app.references.registry import run_section
    from src.app.runtime.logging import configure_logging

    configure_logging(get_config().logging)
    render_all(run_section(SECTION))


if __name__ == "__main__":
    main()
