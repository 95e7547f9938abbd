"""Entity: ComparablePerson."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ComparablePerson(BaseModel):
    """A person with a natural order: last name first, then first name.

    Two persons are equal when their names match; the hire date is not part
    of equality, hashing or the natural order.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(description="Person's first name")
    last_name: str = Field(description="Person's last name")
    hire_date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the person was hired",
    )

    def __eq__(self, other: Any) -> bool:
        """Compare persons by name, ignoring the hire date."""
        if not isinstance(other, ComparablePerson):
            return NotImplemented

        return (
            self.first_name == other.first_name
            and self.last_name == other.last_name
        )

    def __hash__(self) -> int:
        """Hash based on the names, ignoring the hire date."""
        return hash((
            self.first_name,
            self.last_name,
        ))

    def _sort_key(self) -> tuple[str, str]:
        return self.last_name, self.first_name

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ComparablePerson):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, ComparablePerson):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, ComparablePerson):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, ComparablePerson):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def compare_to(self, other: "ComparablePerson") -> int:
        """Three-way comparison in natural order."""
        if self.last_name != other.last_name:
            return -1 if self.last_name < other.last_name else 1
        if self.first_name != other.first_name:
            return -1 if self.first_name < other.first_name else 1
        return 0

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"
