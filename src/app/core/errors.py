"""Exceptions raised by the reference containers and functional helpers.

Each error also derives from the closest builtin so callers can catch
either the project type or the standard one.
"""


class ReferencesError(Exception):
    """Base class for all errors raised by this project."""


class NoSuchElementError(ReferencesError, LookupError):
    """Raised when a value is requested from an empty container or optional."""


class EmptyStackError(NoSuchElementError):
    """Raised when popping or peeking an empty stack."""


class IllegalStateError(ReferencesError, RuntimeError):
    """Raised when an operation is invalid for the object's current state."""


class NullValueError(ReferencesError, TypeError):
    """Raised when None is given where a value is required."""


def require_non_null(value, message: str = "value must not be None"):
    """Return value unchanged, raising NullValueError if it is None."""
    if value is None:
        raise NullValueError(message)
    return value
