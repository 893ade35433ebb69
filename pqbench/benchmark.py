"""Timing of priority queue operations with results written to text files."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Sequence, TypeVar

from pqbench.errors import QueueError
from pqbench.heap_queue import HeapPriorityQueue
from pqbench.linked_queue import LinkedPriorityQueue
from pqbench.random_structures import RandomStructures, StructureType
from pqbench.timer import Timer

DEFAULT_SIZES = (5000, 10000, 15000, 20000, 25000, 30000, 35000, 40000, 45000, 50000)
DEFAULT_RESULTS_DIR = Path("./results")

S = TypeVar("S", LinkedPriorityQueue, HeapPriorityQueue)


def save_result(
    results_dir: str | Path,
    structure_name: str,
    method_name: str,
    size: int,
    time: float,
) -> Path:
    """Append one averaged timing to ``<results_dir>/<structure>/<method>/<size>.txt``."""
    directory = Path(results_dir) / structure_name / method_name
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{size}.txt"
    try:
        with path.open("a", encoding="utf-8") as out:
            out.write(f"Rozmiar: {size}, Średni czas: {time:g} µ\n")
    except OSError:
        print(f"Nie można otworzyć pliku: {path}", file=sys.stderr)
    return path


def _fresh(copies: Sequence[S]) -> list[S]:
    if not copies:
        raise ValueError("no structures to benchmark")
    return [structure.copy() for structure in copies]


def _average(copies: Sequence[S], operation: Callable[[S], object]) -> float:
    working = _fresh(copies)
    with Timer() as timer:
        for structure in working:
            operation(structure)
    return timer.micros() / len(working)


def _average_modify(copies: Sequence[S], rng: random.Random) -> float:
    working = _fresh(copies)
    upper = len(working) * 3
    successes = 0
    with Timer() as timer:
        for structure in working:
            value = rng.randint(1, upper)
            priority = rng.randint(1, upper)
            try:
                structure.modify_key(value, priority)
                successes += 1
            except QueueError as error:
                print(f"Ostrzeżenie: {error}", file=sys.stderr)
    return timer.micros() / successes if successes else -1.0


def _random_insert(rng: random.Random, lower: int, upper: int) -> Callable[[S], None]:
    def insert(structure: S) -> None:
        value = rng.randint(lower, upper)
        priority = rng.randint(lower, upper)
        structure.insert(value, priority)

    return insert


def benchmark_queue(
    copies: Sequence[LinkedPriorityQueue[int]],
    size: int,
    results_dir: str | Path,
    rng: random.Random | None = None,
) -> dict[str, float]:
    """Time every sorted-queue operation over fresh copies and save the averages."""
    rng = rng if rng is not None else random.Random()
    upper = len(copies) * 3
    results = {
        "findMax": _average(copies, LinkedPriorityQueue.find_max),
        "getSize": _average(copies, len),
        "extractMax": _average(copies, LinkedPriorityQueue.extract_max),
        "insert": _average(copies, _random_insert(rng, 1, upper)),
        "modifyKey": _average_modify(copies, rng),
    }
    for method, time in results.items():
        save_result(results_dir, "queue", method, size, time)
    return results


def benchmark_heap(
    copies: Sequence[HeapPriorityQueue[int]],
    size: int,
    results_dir: str | Path,
    rng: random.Random | None = None,
) -> dict[str, float]:
    """Time every heap operation over fresh copies and save the averages."""
    rng = rng if rng is not None else random.Random()
    upper = len(copies) * 3
    results = {
        "peek": _average(copies, HeapPriorityQueue.peek),
        "return_size": _average(copies, len),
        "extract_max": _average(copies, HeapPriorityQueue.extract_max),
        "insert": _average(copies, _random_insert(rng, 0, upper)),
        "modify_key": _average_modify(copies, rng),
    }
    for method, time in results.items():
        save_result(results_dir, "heap", method, size, time)
    return results


def run_benchmarks(
    sizes: Iterable[int] = DEFAULT_SIZES,
    results_dir: str | Path = DEFAULT_RESULTS_DIR,
    rng: random.Random | None = None,
) -> dict[tuple[str, str, int], float]:
    """Benchmark both structures for every size; return the averages by (structure, method, size)."""
    rng = rng if rng is not None else random.Random()
    results: dict[tuple[str, str, int], float] = {}
    for size in sizes:
        queues = RandomStructures(size, StructureType.QUEUE, rng=rng)
        queues.generate()
        queue_copies = queues.queue_copies()
        if queue_copies:
            for method, time in benchmark_queue(queue_copies, size, results_dir, rng).items():
                results["queue", method, size] = time

        heaps = RandomStructures(size, StructureType.HEAP, rng=rng)
        heaps.generate()
        heap_copies = heaps.heap_copies()
        if heap_copies:
            for method, time in benchmark_heap(heap_copies, size, results_dir, rng).items():
                results["heap", method, size] = time
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="pqbench", description="Benchmark priority queue implementations."
    )
    parser.add_argument(
        "--results-dir",
        type=Path,
        default=DEFAULT_RESULTS_DIR,
        help="directory that receives the result files",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=list(DEFAULT_SIZES),
        help="structure sizes to benchmark",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    run_benchmarks(args.sizes, args.results_dir, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())