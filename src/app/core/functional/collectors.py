"""Reduction recipes for `Stream.collect`.

A collector bundles three steps: create a mutable container, fold each
element into it, and turn the container into the final result.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from src.app.core.errors import IllegalStateError
from src.app.core.functional.string_joiner import StringJoiner


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class Collector:
    """Supplier, accumulator and finisher of a mutable reduction."""

    supplier: Callable[[], Any]
    accumulator: Callable[[Any, Any], None]
    finisher: Callable[[Any], Any] = _identity

    def collect(self, elements) -> Any:
        container = self.supplier()
        for element in elements:
            self.accumulator(container, element)
        return self.finisher(container)


def to_list() -> Collector:
    return Collector(list, list.append)


def to_set() -> Collector:
    return Collector(set, set.add)


def to_map(
    key_mapper: Callable[[Any], Hashable],
    value_mapper: Callable[[Any], Any],
    merge: Callable[[Any, Any], Any] | None = None,
) -> Collector:
    """Collect into a dict; duplicate keys fail unless merge is given."""

    def accumulate(container: dict, element: Any) -> None:
        key = key_mapper(element)
        value = value_mapper(element)
        if key in container:
            if merge is None:
                raise IllegalStateError(
                    f"Duplicate key {key!r} (attempted merging values "
                    f"{container[key]!r} and {value!r})"
                )
            value = merge(container[key], value)
        container[key] = value

    return Collector(dict, accumulate)


def grouping_by(
    classifier: Callable[[Any], Hashable], downstream: Collector | None = None
) -> Collector:
    """Group elements by classifier, reducing each group with downstream."""
    downstream = downstream or to_list()

    def accumulate(container: dict, element: Any) -> None:
        key = classifier(element)
        if key not in container:
            container[key] = downstream.supplier()
        downstream.accumulator(container[key], element)

    def finish(container: dict) -> dict:
        return {key: downstream.finisher(group) for key, group in container.items()}

    return Collector(dict, accumulate, finish)


def partitioning_by(
    predicate: Callable[[Any], bool], downstream: Collector | None = None
) -> Collector:
    """Split elements in two groups; both False and True keys are present."""
    downstream = downstream or to_list()

    def supply() -> dict:
        return {False: downstream.supplier(), True: downstream.supplier()}

    def accumulate(container: dict, element: Any) -> None:
        downstream.accumulator(container[bool(predicate(element))], element)

    def finish(container: dict) -> dict:
        return {key: downstream.finisher(group) for key, group in container.items()}

    return Collector(supply, accumulate, finish)


def joining(delimiter: str = "", prefix: str = "", suffix: str = "") -> Collector:
    return Collector(
        lambda: StringJoiner(delimiter, prefix, suffix),
        StringJoiner.add,
        str,
    )


def counting() -> Collector:
    return Collector(lambda: [0], _increment, lambda box: box[0])


def _increment(box: list[int], _element: Any) -> None:
    box[0] += 1


def summing(mapper: Callable[[Any], float]) -> Collector:
    def accumulate(box: list, element: Any) -> None:
        box[0] += mapper(element)

    return Collector(lambda: [0], accumulate, lambda box: box[0])


def mapping(mapper: Callable[[Any], Any], downstream: Collector) -> Collector:
    """Adapt downstream to accept elements after applying mapper."""

    def accumulate(container: Any, element: Any) -> None:
        downstream.accumulator(container, mapper(element))

    return Collector(downstream.supplier, accumulate, downstream.finisher)
