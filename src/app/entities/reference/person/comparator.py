"""External ordering for ComparablePerson."""

from .entity import ComparablePerson


class PersonComparator:
    """Order persons by hire date, most recently hired first.

    A comparator is separate from the class it orders, so it works for
    classes we do not own, or to sort by something other than the natural
    order.
    """

    def compare(self, first: ComparablePerson, second: ComparablePerson) -> int:
        if second.hire_date == first.hire_date:
            return 0
        return 1 if second.hire_date > first.hire_date else -1

    def __call__(self, first: ComparablePerson, second: ComparablePerson) -> int:
        return self.compare(first, second)
