"""Build delimited strings with an optional prefix and suffix."""

from typing import Any


class StringJoiner:
    """Accumulate values and render them joined by a delimiter.

    >>> str(StringJoiner(":", "[", "]").add("leo").add("lex"))
    '[leo:lex]'

    An empty joiner renders as prefix + suffix unless an empty value has been
    set with `set_empty_value`.
    """

    def __init__(self, delimiter: str, prefix: str = "", suffix: str = ""):
        self.delimiter = str(delimiter)
        self.prefix = str(prefix)
        self.suffix = str(suffix)
        self._parts: list[str] = []
        self._empty_value: str | None = None

    def set_empty_value(self, empty_value: str) -> "StringJoiner":
        self._empty_value = str(empty_value)
        return self

    def add(self, value: Any) -> "StringJoiner":
        self._parts.append(str(value))
        return self

    def merge(self, other: "StringJoiner") -> "StringJoiner":
        """Append other's joined content, without its prefix and suffix.

        The other joiner's elements keep its own delimiter and count as a
        single element of this joiner. Merging an empty joiner is a no-op.
        """
        if other._parts:
            self._parts.append(other.delimiter.join(other._parts))
        return self

    def __str__(self) -> str:
        if not self._parts and self._empty_value is not None:
            return self._empty_value
        return f"{self.prefix}{self.delimiter.join(self._parts)}{self.suffix}"

    def __len__(self) -> int:
        return len(str(self))

    def __repr__(self) -> str:
        return f"StringJoiner({str(self)!r})"
