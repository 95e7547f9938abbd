"""Runnable references for the collections and language features."""

from .registry import (
    Demonstration,
    Observation,
    RegisteredDemonstration,
    UnknownDemonstrationError,
    demonstration,
    demonstrations,
    discover,
    get_demonstration,
    run_demonstration,
    run_section,
    sections,
)

__all__ = [
    "Demonstration",
    "Observation",
    "RegisteredDemonstration",
    "UnknownDemonstrationError",
    "demonstration",
    "demonstrations",
    "discover",
    "get_demonstration",
    "run_demonstration",
    "run_section",
    "sections",
]
