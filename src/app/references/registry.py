# references/registry.py
"""
Demonstration Registry.

Demonstrations are plain functions grouped into sections. Registering them
with a decorator keeps the catalog next to the code and lets the CLI list
and run them without a hand-maintained index.

Usage:
    @demonstration(section="collections", name="sets", title="Set implementations")
    def sets(demo: Demonstration) -> None:
        demo.record("hash set", {"a", "b"})

    result = run_demonstration("collections", "sets")
    result["hash set"]
"""

import copy
import importlib
import pkgutil
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from loguru import logger


@dataclass
class Observation:
    """A labelled value printed by a demonstration."""

    label: str
    value: Any
    note: str | None = None


@dataclass
class Demonstration:
    """The observations recorded by one run of a demonstration function."""

    section: str
    name: str
    title: str
    observations: list[Observation] = field(default_factory=list)

    def record(self, label: str, value: Any, note: str | None = None) -> Any:
        """Record value under label and return it unchanged.

        Plain containers are copied so later mutations do not rewrite what
        was observed.
        """
        snapshot = copy.copy(value) if isinstance(value, (list, dict, set, deque)) else value
        self.observations.append(Observation(label, snapshot, note))
        return value

    def labels(self) -> list[str]:
        return [observation.label for observation in self.observations]

    def __getitem__(self, label: str) -> Any:
        for observation in self.observations:
            if observation.label == label:
                return observation.value
        raise KeyError(label)

    def __contains__(self, label: object) -> bool:
        return any(observation.label == label for observation in self.observations)


DemonstrationFunction = Callable[[Demonstration], None]


@dataclass(frozen=True)
class RegisteredDemonstration:
    section: str
    name: str
    title: str
    function: DemonstrationFunction

    @property
    def summary(self) -> str:
        doc = (self.function.__doc__ or "").strip()
        return doc.splitlines()[0] if doc else self.title


# central registry: section -> name -> demonstration, in registration order
_REGISTRY: dict[str, dict[str, RegisteredDemonstration]] = {}

REFERENCE_MODULES = (
    "src.app.references.collections_reference",
    "src.app.references.features_reference",
)


class UnknownDemonstrationError(KeyError):
    """Raised when a section or demonstration name is not registered."""


def demonstration(
    *, section: str, name: str, title: str
) -> Callable[[DemonstrationFunction], DemonstrationFunction]:
    """
    Decorator registering a demonstration function under section/name.

    Args:
        section: Section the demonstration belongs to
        name: Unique name within the section
        title: Human readable title

    Raises:
        ValueError: If the name is already registered in the section
    """

    def decorator(function: DemonstrationFunction) -> DemonstrationFunction:
        entries = _REGISTRY.setdefault(section, {})
        existing = entries.get(name)
        if existing is not None and existing.function is not function:
            raise ValueError(f"Demonstration '{section}.{name}' is already registered")
        entries[name] = RegisteredDemonstration(section, name, title, function)
        return function

    return decorator


def discover(module_paths: tuple[str, ...] = REFERENCE_MODULES) -> None:
    """Import the reference modules so their decorators run."""
    for module_path in module_paths:
        module = importlib.import_module(module_path)
        if hasattr(module, "__path__"):
            for info in pkgutil.iter_modules(module.__path__, prefix=f"{module_path}."):
                importlib.import_module(info.name)


def sections() -> list[str]:
    discover()
    return list(_REGISTRY)


def demonstrations(section: str | None = None) -> list[RegisteredDemonstration]:
    """Registered demonstrations, optionally limited to one section."""
    discover()
    if section is None:
        return [entry for entries in _REGISTRY.values() for entry in entries.values()]
    if section not in _REGISTRY:
        raise UnknownDemonstrationError(
            f"Unknown section '{section}'. Known: {', '.join(_REGISTRY)}"
        )
    return list(_REGISTRY[section].values())


def get_demonstration(section: str, name: str) -> RegisteredDemonstration:
    for entry in demonstrations(section):
        if entry.name == name:
            return entry
    known = ", ".join(entry.name for entry in demonstrations(section))
    raise UnknownDemonstrationError(
        f"Unknown demonstration '{name}' in section '{section}'. Known: {known}"
    )


def run(entry: RegisteredDemonstration) -> Demonstration:
    demo = Demonstration(entry.section, entry.name, entry.title)
    logger.debug("Running demonstration {}.{}", entry.section, entry.name)
    entry.function(demo)
    logger.debug(
        "Finished demonstration {}.{} with {} observations",
        entry.section,
        entry.name,
        len(demo.observations),
    )
    return demo


def run_demonstration(section: str, name: str) -> Demonstration:
    return run(get_demonstration(section, name))


def run_section(section: str) -> list[Demonstration]:
    return [run(entry) for entry in demonstrations(section)]
