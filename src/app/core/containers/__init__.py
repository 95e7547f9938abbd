"""Containers missing from the standard library's builtins."""

from .list_iterator import ListIterator
from .navigable_set import TreeSet
from .queues import ArrayDeque, PriorityQueue, Queue
from .synchronized import Hashtable, Stack, SynchronizedList

__all__ = [
    "ArrayDeque",
    "Hashtable",
    "ListIterator",
    "PriorityQueue",
    "Queue",
    "Stack",
    "SynchronizedList",
    "TreeSet",
]
