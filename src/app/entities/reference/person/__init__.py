"""Entity package: ComparablePerson."""

from .comparator import PersonComparator
from .entity import ComparablePerson

__all__ = ["ComparablePerson", "PersonComparator"]
