"""Single-abstract-method interfaces and their implementation by closures.

Python treats any callable as a function value, so a `Callable[[int, int],
int]` annotation is usually all a "functional interface" needs. When a
named contract is wanted, declare an ABC with exactly one abstract method,
mark it with `@functional_interface`, and fill it from a lambda or a method
with `implement()`.
"""

from abc import ABC
from collections.abc import Callable
from typing import Any, TypeVar

I = TypeVar("I", bound=ABC)

# Methods every object already has; redeclaring them abstract does not add
# to an interface's contract.
OBJECT_METHODS = frozenset(
    name for name in dir(object) if callable(getattr(object, name))
)


def functional_method_name(interface: type) -> str:
    """Return the name of the single abstract method of interface."""
    abstract = set(getattr(interface, "__abstractmethods__", ())) - OBJECT_METHODS
    if len(abstract) != 1:
        raise TypeError(
            f"{interface.__name__} is not a functional interface: "
            f"expected exactly one abstract method, found {sorted(abstract)}"
        )
    return next(iter(abstract))


def functional_interface(interface: type[I]) -> type[I]:
    """Class decorator checking that interface has one abstract method."""
    interface.__functional_method__ = functional_method_name(interface)
    return interface


def implement(interface: type[I], function: Callable[..., Any]) -> I:
    """Return an instance of interface whose abstract method runs function.

    Redeclared object methods fall back to `object`'s implementation. The
    returned instance is callable as well, so it can be passed wherever a
    plain function is expected.
    """
    method_name = getattr(interface, "__functional_method__", None) or (
        functional_method_name(interface)
    )

    def bridge(self, *args: Any, **kwargs: Any) -> Any:
        return function(*args, **kwargs)

    namespace: dict[str, Any] = {
        method_name: bridge,
        "__call__": bridge,
        "__wrapped__": function,
    }
    for name in set(getattr(interface, "__abstractmethods__", ())) & OBJECT_METHODS:
        namespace[name] = getattr(object, name)
    implementation = type(f"{interface.__name__}Lambda", (interface,), namespace)
    return implementation()
