"""Priority queue kept as an ordered sequence of entries."""

from __future__ import annotations

from bisect import bisect_left
from operator import itemgetter
from typing import Generic, Iterator, TypeVar

from pqbench.errors import ElementNotFoundError, EmptyQueueError

T = TypeVar("T")

_priority = itemgetter(0)


class LinkedPriorityQueue(Generic[T]):
    """Sorted priority queue.

    Elements of equal priority leave the queue in the order they entered it.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        # Ascending by priority; the next element to leave sits at the end.
        # Among equal priorities the newest entry comes first.
        self._entries: list[tuple[int, T]] = []

    def insert(self, element: T, priority: int) -> None:
        """Add ``element`` behind every queued element of the same or higher priority."""
        position = bisect_left(self._entries, priority, key=_priority)
        self._entries.insert(position, (priority, element))

    def extract_max(self) -> T:
        """Remove and return the element with the highest priority."""
        if not self._entries:
            raise EmptyQueueError("Queue is empty")
        return self._entries.pop()[1]

    def find_max(self) -> T:
        """Return the element with the highest priority without removing it."""
        if not self._entries:
            raise EmptyQueueError("Queue is empty")
        return self._entries[-1][1]

    def modify_key(self, element: T, new_priority: int) -> None:
        """Give the first matching element, in queue order, a new priority."""
        last = len(self._entries) - 1
        for offset, (_, item) in enumerate(reversed(self._entries)):
            if item == element:
                del self._entries[last - offset]
                break
        else:
            raise ElementNotFoundError("Element not found")
        self.insert(item, new_priority)

    def copy(self) -> LinkedPriorityQueue[T]:
        """Return an independent queue holding the same entries in the same order."""
        duplicate: LinkedPriorityQueue[T] = LinkedPriorityQueue()
        duplicate._entries = list(self._entries)
        return duplicate

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[T, int]]:
        """Yield ``(element, priority)`` pairs in the order they would be extracted."""
        for priority, element in reversed(self._entries):
            yield element, priority

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"