"""Sets of identical, randomly filled priority queues for benchmarking."""

from __future__ import annotations

import random
from enum import Enum

from pqbench.heap_queue import HeapPriorityQueue
from pqbench.linked_queue import LinkedPriorityQueue

DEFAULT_COPIES = 100


class StructureType(Enum):
    """Which priority queue implementation to fill."""

    QUEUE = "queue"
    HEAP = "heap"


class RandomStructures:
    """Builds one randomly filled structure and keeps identical copies of it.

    Each of the ``size`` entries gets a value and a priority drawn uniformly
    from ``0`` to ``3 * size`` inclusive.
    """

    def __init__(
        self,
        size: int,
        structure_type: StructureType | str,
        copies: int = DEFAULT_COPIES,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self.structure_type = StructureType(structure_type)
        self.copies = copies
        self._rng = rng if rng is not None else random.Random()
        self._queues: list[LinkedPriorityQueue[int]] = []
        self._heaps: list[HeapPriorityQueue[int]] = []

    def _fill(self, structure: LinkedPriorityQueue[int] | HeapPriorityQueue[int]) -> None:
        upper = self.size * 3
        for _ in range(self.size):
            value = self._rng.randint(0, upper)
            priority = self._rng.randint(0, upper)
            structure.insert(value, priority)

    def generate(self) -> None:
        """Fill a fresh base structure and replace the stored copies with copies of it."""
        if self.structure_type is StructureType.QUEUE:
            base_queue: LinkedPriorityQueue[int] = LinkedPriorityQueue()
            self._fill(base_queue)
            self._queues = [base_queue.copy() for _ in range(self.copies)]
        else:
            base_heap: HeapPriorityQueue[int] = HeapPriorityQueue()
            self._fill(base_heap)
            self._heaps = [base_heap.copy() for _ in range(self.copies)]

    def queue_copies(self) -> tuple[LinkedPriorityQueue[int], ...]:
        """The generated sorted-queue copies; empty until a queue is generated."""
        return tuple(self._queues)

    def heap_copies(self) -> tuple[HeapPriorityQueue[int], ...]:
        """The generated heap copies; empty until a heap is generated."""
        return tuple(self._heaps)