"""Priority queue backed by an array binary max-heap."""

from __future__ import annotations

from typing import Generic, TypeVar

from pqbench.errors import ElementNotFoundError, EmptyQueueError

T = TypeVar("T")


class HeapPriorityQueue(Generic[T]):
    """Binary max-heap ordered by integer priority."""

    __slots__ = ("_heap",)

    def __init__(self) -> None:
        self._heap: list[tuple[int, T]] = []

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index][0] <= heap[parent][0]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while 2 * index + 1 < size:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if heap[left][0] > heap[largest][0]:
                largest = left
            if right < size and heap[right][0] > heap[largest][0]:
                largest = right
            if largest == index:
                break
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def insert(self, element: T, priority: int) -> None:
        """Add ``element`` with the given priority."""
        self._heap.append((priority, element))
        self._sift_up(len(self._heap) - 1)

    def extract_max(self) -> T:
        """Remove and return the element with the highest priority."""
        if not self._heap:
            raise EmptyQueueError("Heap is empty")
        top = self._heap[0][1]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the element with the highest priority without removing it."""
        if not self._heap:
            raise EmptyQueueError("Heap is empty")
        return self._heap[0][1]

    def modify_key(self, element: T, new_priority: int) -> None:
        """Give the first matching element, in array order, a new priority."""
        for index, (old_priority, item) in enumerate(self._heap):
            if item == element:
                self._heap[index] = (new_priority, item)
                if new_priority > old_priority:
                    self._sift_up(index)
                else:
                    self._sift_down(index)
                return
        raise ElementNotFoundError("Element to modify not found")

    def copy(self) -> HeapPriorityQueue[T]:
        """Return an independent heap with the same layout."""
        duplicate: HeapPriorityQueue[T] = HeapPriorityQueue()
        duplicate._heap = list(self._heap)
        return duplicate

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._heap)})"