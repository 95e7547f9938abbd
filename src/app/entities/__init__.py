"""Entities used as sample values by the reference demonstrations.

Each entity has its own package:
- person: ComparablePerson (natural order) and PersonComparator
- product: Product, the catalog record fed to streams and collectors
"""

from .reference.person import ComparablePerson, PersonComparator
from .reference.product import Product

__all__ = [
    "ComparablePerson",
    "PersonComparator",
    "Product",
]
