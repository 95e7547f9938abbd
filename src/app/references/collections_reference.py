"""Reference: containers and ordering.

A container holds multiple objects and lets us manipulate them. Unlike a
fixed-size array, a container grows and shrinks as needed.

The builtins cover the everyday variants:

    list          positional sequence, duplicates allowed
    set           unordered, no duplicates, hash based
    dict          key -> value, keys unique, keeps insertion order
    deque         double-ended sequence (collections)

The abstract base classes of `collections.abc` (Iterable, Collection,
Sequence, MutableSet, Mapping, ...) describe the protocols these containers
follow; `src.app.core.containers` uses them to add what the builtins lack:
a sorted navigable set, queues with paired failure styles, a bidirectional
list iterator, and lock-guarded variants.

Run with `python -m src.app.references.collections_reference`.
"""

from collections import deque
from datetime import timedelta

from src.app.core.containers import (
    ArrayDeque,
    Hashtable,
    ListIterator,
    PriorityQueue,
    Stack,
    SynchronizedList,
    TreeSet,
)
from src.app.core.errors import (
    EmptyStackError,
    IllegalStateError,
    NoSuchElementError,
    NullValueError,
)
from src.app.core.functional import Stream, by_length, collectors, sort
from src.app.entities.reference.person import ComparablePerson, PersonComparator
from src.app.references.clock import utc_now
from src.app.references.registry import Demonstration, demonstration
from src.app.runtime.context import get_config

SECTION = "collections"


def sample_words() -> list[str]:
    return list(get_config().collections.words)


def sample_persons() -> list[ComparablePerson]:
    """Persons from the configuration, hired relative to the reference clock."""
    now = utc_now()
    return [
        ComparablePerson(
            first_name=sample.first_name,
            last_name=sample.last_name,
            hire_date=now - timedelta(days=sample.hired_days_ago),
        )
        for sample in get_config().collections.persons
    ]


@demonstration(section=SECTION, name="traversal", title="Traversing a collection")
def traversal(demo: Demonstration) -> None:
    """Three ways to walk a collection: aggregate operations, loops, iterators."""
    words = sample_words()

    # Aggregate operations: hand an action to the collection or to a stream
    visited: list[str] = []
    Stream.of_iterable(words).for_each(visited.append)
    demo.record("stream for_each", visited)

    # A large collection can be walked in parallel; the order is lost
    visited_in_parallel: list[str] = []
    Stream.of_iterable(words).parallel().for_each(visited_in_parallel.append)
    demo.record(
        "parallel for_each",
        sorted(visited_in_parallel),
        note="sorted afterwards, threads visit in any order",
    )

    # for loop
    looped = []
    for word in words:
        looped.append(word)
    demo.record("for loop", looped)

    # Explicit iterator: next() until StopIteration
    iterator = iter(words)
    stepped = []
    while True:
        try:
            stepped.append(next(iterator))
        except StopIteration:
            break
    demo.record("iterator with while", stepped)

    # or also, with a cursor exposing has_next()
    cursor = ListIterator(words)
    walked = []
    while cursor.has_next():
        walked.append(cursor.next())
    demo.record("iterator with has_next", walked)

    # the same cursor driven from a for header, one step per has_next() call
    cursor = ListIterator(words)
    walked_in_for = []
    for _ in iter(cursor.has_next, False):
        walked_in_for.append(cursor.next())
    demo.record("iterator in for header", walked_in_for)

    demo.record("iterator is exhausted", next(iter(iterator), None) is None)


@demonstration(section=SECTION, name="equality", title="Equality and hashing contracts")
def equality(demo: Demonstration) -> None:
    """`is` compares identity, `==` compares values; equal values hash alike."""
    first = ComparablePerson(first_name="Ada", last_name="Lovelace")
    second = ComparablePerson(first_name="Ada", last_name="Lovelace")

    demo.record("first is second", first is second)
    demo.record("first == second", first == second)
    demo.record("hash(first) == hash(second)", hash(first) == hash(second))
    demo.record("distinct persons in a set", len({first, second}))

    # Sets are equal when they hold the same elements, whatever the order
    demo.record("{1, 2, 3} == {3, 2, 1}", {1, 2, 3} == {3, 2, 1})
    demo.record("TreeSet([3, 1, 2]) == {1, 2, 3}", TreeSet([3, 1, 2]) == {1, 2, 3})
    # Lists are equal when they hold the same elements at the same positions
    demo.record("[1, 2, 3] == [3, 2, 1]", [1, 2, 3] == [3, 2, 1])
    # Maps are equal when they hold the same key-value mappings
    demo.record(
        "{1: 'a', 2: 'b'} == {2: 'b', 1: 'a'}",
        {1: "a", 2: "b"} == {2: "b", 1: "a"},
    )


@demonstration(section=SECTION, name="sets", title="Set implementations")
def sets(demo: Demonstration) -> None:
    """A set holds no duplicates; implementations differ in iteration order."""
    words = sample_words()

    # Hash based, fastest, no order guarantee
    hash_set = set(words)
    demo.record("hash set", hash_set)

    # Sorted by natural order or a comparator, slower than a hash set
    tree_set = TreeSet(words)
    demo.record("tree set", list(tree_set))

    # Insertion order: the keys of a dict
    linked_hash_set = dict.fromkeys(words)
    demo.record("linked hash set", list(linked_hash_set))

    # Turning a list into a set drops duplicates
    demo.record("sizes list / set", (len(words), len(hash_set)))
    demo.record(
        "stream collected to set",
        Stream.of_iterable(words).collect(collectors.to_set()),
    )

    # A sorted set answers nearest-match questions about absent targets too
    numbers = TreeSet([10, 20, 30, 40])
    demo.record("lower(20)", numbers.lower(20))
    demo.record("floor(20)", numbers.floor(20))
    demo.record("floor(25)", numbers.floor(25))
    demo.record("ceiling(25)", numbers.ceiling(25))
    demo.record("higher(40)", numbers.higher(40))
    demo.record("head_set(30)", list(numbers.head_set(30)))
    demo.record("tail_set(30)", list(numbers.tail_set(30)))
    demo.record("descending", numbers.descending())


@demonstration(section=SECTION, name="lists", title="Lists: positional access and iteration")
def lists(demo: Demonstration) -> None:
    """A list keeps insertion order, allows duplicates, and is index addressable."""
    words = sample_words()

    # Positional access
    demo.record("get(1)", words[1])
    replaced = words[0]
    words[0] = "plum"
    demo.record("set(0) returned", replaced)
    words.insert(1, "grape")
    demo.record("after insert(1)", words)
    demo.record("remove(1)", words.pop(1))

    # Search
    demo.record("index_of('apple')", words.index("apple"))
    demo.record("last_index_of('apple')", len(words) - 1 - words[::-1].index("apple"))

    # The cursor sits between elements: next() then previous() is the same element
    letters = ["a", "b", "c", "d", "e"]
    cursor = ListIterator(letters)
    cursor.next()
    forward = cursor.next()
    backward = cursor.previous()
    demo.record("next() then previous()", (forward, backward))

    # Start at the end and walk backwards
    cursor = ListIterator(letters, len(letters))
    backwards = []
    while cursor.has_previous():
        backwards.append(cursor.previous())
    demo.record("walked backwards", backwards)

    # Editing through the cursor
    cursor = ListIterator(letters)
    while cursor.has_next():
        if cursor.next() in ("b", "d"):
            cursor.remove()
    demo.record("removed through iterator", letters)

    # A slice is a copy, so clearing it leaves the list intact...
    letters = ["a", "b", "c", "d", "e"]
    portion = letters[1:3]
    portion.clear()
    demo.record("cleared slice copy", letters)
    # ...while deleting a slice removes that range from the list
    del letters[1:3]
    demo.record("deleted range [1:3)", letters)


@demonstration(section=SECTION, name="list-variants", title="Linked list, vector and stack")
def list_variants(demo: Demonstration) -> None:
    """Other sequence implementations and what they are good at."""
    words = sample_words()[:3]

    # A deque is a doubly linked structure: cheap at both ends, slow in the middle
    linked = deque(words)
    linked.appendleft("first")
    linked.append("last")
    demo.record("linked list", linked)
    demo.record("linked popleft / pop", (linked.popleft(), linked.pop()))
    demo.record("linked peek", linked[0])

    # A synchronized list guards every operation with a lock; a plain list is
    # the better choice when the instance is not shared between threads
    vector = SynchronizedList(words)
    vector.append("kiwi")
    demo.record("vector", vector.snapshot())

    # A stack pushes and pops on the top only (last in, first out)
    stack = Stack()
    for word in ["bottom", "middle", "top"]:
        stack.push(word)
    demo.record("stack peek", stack.peek())
    demo.record("stack search('bottom')", stack.search("bottom"))
    demo.record("stack search('absent')", stack.search("absent"))
    demo.record("stack pops", [stack.pop() for _ in range(3)])
    demo.record("stack empty", stack.empty())
    try:
        stack.pop()
    except EmptyStackError as e:
        demo.record("pop on empty stack", type(e).__name__)


@demonstration(section=SECTION, name="queues", title="Queues and priority queues")
def queues(demo: Demonstration) -> None:
    """Queues hold elements about to be processed, in FIFO or priority order.

    Each operation exists in a raising and a value-returning form:
    add/offer, remove/poll, element/peek.
    """
    words = sample_words()

    # Priority queue: the head is always the least element
    natural = PriorityQueue(words)
    demo.record("priority queue, natural order", natural.drain())

    # or the least according to a comparator; ties leave in insertion order
    by_word_length = PriorityQueue(words, comparator=by_length)
    demo.record("priority queue, by length", by_word_length.drain())

    # Empty queue: value-returning forms give None, raising forms raise
    empty = PriorityQueue()
    demo.record("poll() on empty", empty.poll())
    demo.record("peek() on empty", empty.peek())
    try:
        empty.remove()
    except NoSuchElementError as e:
        demo.record("remove() on empty", type(e).__name__)
    try:
        empty.element()
    except NoSuchElementError as e:
        demo.record("element() on empty", type(e).__name__)

    # A bounded queue refuses new elements once full
    capacity = get_config().collections.queue_capacity
    bounded = ArrayDeque(capacity=capacity)
    offers = [bounded.offer(word) for word in words[: capacity + 1]]
    demo.record("offer() into bounded queue", offers)
    try:
        bounded.add("overflow")
    except IllegalStateError as e:
        demo.record("add() into full queue", type(e).__name__)

    try:
        bounded.offer(None)
    except NullValueError as e:
        demo.record("offer(None)", type(e).__name__)


@demonstration(section=SECTION, name="deques", title="Double ended queues")
def deques(demo: Demonstration) -> None:
    """A deque is both a FIFO queue and a LIFO stack.

    The queue methods exist once per end:
    add_first/offer_first, remove_first/poll_first, get_first/peek_first,
    and the same with _last.
    """
    queue = ArrayDeque()
    queue.add_first("b")
    queue.add_last("c")
    queue.offer_first("a")
    queue.offer_last("d")
    demo.record("after inserts", list(queue))

    demo.record("peek_first / peek_last", (queue.peek_first(), queue.peek_last()))
    demo.record("get_first / get_last", (queue.get_first(), queue.get_last()))
    demo.record("poll_first / poll_last", (queue.poll_first(), queue.poll_last()))
    demo.record("remove_first / remove_last", (queue.remove_first(), queue.remove_last()))
    demo.record("poll_first on empty", queue.poll_first())
    try:
        queue.remove_last()
    except NoSuchElementError as e:
        demo.record("remove_last on empty", type(e).__name__)

    # Used as a stack
    for word in ["one", "two", "three"]:
        queue.push(word)
    demo.record("stack pops", [queue.pop() for _ in range(3)])


@demonstration(section=SECTION, name="maps", title="Maps and their views")
def maps(demo: Demonstration) -> None:
    """A map associates unique keys with values.

    Iteration goes through one of its views: keys, items or values. Keys and
    items behave like sets; values may contain duplicates.
    """
    hash_map = {3: "three", 1: "one", 2: "two", 4: "one"}

    demo.record("through keys()", [hash_map[key] for key in hash_map.keys()])
    demo.record("through items()", [value for _key, value in hash_map.items()])
    demo.record("through values()", list(hash_map.values()))
    demo.record("keys view is set-like", hash_map.keys() & {1, 2, 10})

    # Putting an existing key replaces its value
    hash_map[1] = "uno"
    demo.record("after replacing key 1", hash_map)

    # Sorted by key
    tree_map = dict(sorted(hash_map.items()))
    demo.record("sorted map", list(tree_map))

    # Insertion ordered: every dict
    linked = {"b": 2, "a": 1, "c": 3}
    demo.record("insertion order", list(linked))

    demo.record(
        "word lengths",
        Stream.of_iterable(dict.fromkeys(sample_words())).collect(
            collectors.to_map(lambda word: word, len)
        ),
    )


@demonstration(section=SECTION, name="hashtable", title="Hashtable versus dict")
def hashtable(demo: Demonstration) -> None:
    """A synchronized mapping that, unlike dict, refuses None keys and values."""
    table = Hashtable({1: "one"})
    table[2] = "two"
    demo.record("hashtable", dict(table))

    try:
        table[None] = "nothing"
    except NullValueError as e:
        demo.record("None key", type(e).__name__)
    try:
        table[3] = None
    except NullValueError as e:
        demo.record("None value", type(e).__name__)

    plain = {None: None}
    demo.record("dict with None key and value", plain)


@demonstration(section=SECTION, name="ordering", title="Natural order and comparators")
def ordering(demo: Demonstration) -> None:
    """Sorting by a class's natural order or by an external comparator.

    A class gets a natural order by defining the comparison operators (see
    ComparablePerson). A comparator orders values of a class we do not own,
    or by another criterion than the natural one (see PersonComparator).
    """
    words = sample_words()

    sort(words)
    demo.record("natural order", words)

    # The sort is stable: words of the same length keep their current order
    sort(words, by_length)
    demo.record("by length", words)

    # Natural order needs mutually comparable elements
    mixed = [3, "three", 1]
    try:
        sort(mixed)
    except TypeError as e:
        demo.record("mixed types", type(e).__name__)

    persons = sample_persons()
    sort(persons)
    demo.record("persons, natural order", [str(person) for person in persons])

    sort(persons, PersonComparator())
    demo.record("persons, most recently hired first", [str(person) for person in persons])

    # The idiomatic spelling of the same sort uses a key function
    by_hire_date = sorted(persons, key=lambda person: person.hire_date, reverse=True)
    demo.record("same with a key function", [str(person) for person in by_hire_date])


def main() -> None:
    """Run every collections demonstration and print the results."""
    from src.app.references.console import render_all
    from src.app.references.registry import run_section
    from src.app.runtime.logging import configure_logging

    configure_logging(get_config().logging)
    render_all(run_section(SECTION))


if __name__ == "__main__":
    main()
