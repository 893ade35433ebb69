# pqbench

pqbench times the basic operations of two priority queue implementations
and writes the mean time per operation to text files.

- `LinkedPriorityQueue` (`pqbench.linked_queue`) keeps its entries in a list
  sorted by priority. Elements that share a priority leave the queue in the
  order they were inserted. Iterating over it yields `(element, priority)`
  pairs in the order they would be extracted.
- `HeapPriorityQueue` (`pqbench.heap_queue`) keeps its entries in a binary
  max-heap stored in a list.

Both support `insert(element, priority)`, `extract_max()`, `modify_key(element,
new_priority)`, `copy()` and `len()`. The sorted queue reads its top element
with `find_max()`, the heap with `peek()`.

Reading from an empty structure raises `EmptyQueueError`. `modify_key` raises
`ElementNotFoundError` when the element is not there. Both come from
`pqbench.errors` and derive from `QueueError`, which is a `RuntimeError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the benchmark

```
pqbench
```

The same command is available as `python -m pqbench.benchmark`. Options:

- `--results-dir DIR`: where result files go (default `./results`)
- `--sizes N [N ...]`: structure sizes to benchmark (default 5000 to 50000
  in steps of 5000)
- `--seed SEED`: seed for the random generator, for repeatable structures

For each size the benchmark builds a random sorted queue and a random heap of
that many entries. Values and priorities are drawn uniformly from
`0 .. 3 * size`. Each structure is copied 100 times, and every operation is
timed once on each of a fresh set of copies:

- queue: `findMax`, `getSize`, `extractMax`, `insert`, `modifyKey`
- heap: `peek`, `return_size`, `extract_max`, `insert`, `modify_key`

For `insert` and `modify_key`, the value and priority are drawn at random from
up to three times the number of copies.

The mean time per operation, in whole microseconds of the total divided by
the number of operations, is appended as a line such as

```
Rozmiar: 5000, Średni czas: 0.42 µ
```

to `<results-dir>/<structure>/<method>/<size>.txt`. The structure is `queue`
or `heap`, and the method is one of the names listed above.

For `modify_key`, the mean counts only the calls that found their element.
Each miss prints a warning on standard error. If no call succeeds, `-1` is
written.

The same run is available from Python as
`pqbench.benchmark.run_benchmarks(sizes, results_dir, rng)`. It returns a dict
keyed by `(structure, method, size)`. `benchmark_queue`, `benchmark_heap` and
`save_result` in the same module do the individual steps.

## Using the structures directly

```python
from pqbench.heap_queue import HeapPriorityQueue
from pqbench.linked_queue import LinkedPriorityQueue

queue = LinkedPriorityQueue()
queue.insert("a", 1)
queue.insert("b", 5)
queue.modify_key("a", 10)
assert list(queue) == [("a", 10), ("b", 5)]
assert queue.extract_max() == "a"

heap = HeapPriorityQueue()
heap.insert("x", 3)
heap.insert("y", 7)
assert heap.peek() == "y"
assert len(heap) == 2
```

`pqbench.timer.Timer` is a stopwatch that starts when it is created. Its
readings (`seconds()`, `millis()`, `micros()`) are truncated to whole units.
Used as a context manager, it restarts on entry and stops on exit:

```python
from pqbench.timer import Timer, TimeUnit

with Timer() as timer:
    sum(range(1000))
print(timer.micros())

timer.reset()
print(timer.stop_and_measure(TimeUnit.MILLISECONDS))
```

`pqbench.random_structures.RandomStructures(size, structure_type, copies=100,
rng=None)` builds the random copies the benchmark uses. Call `generate()`,
then read `queue_copies()` or `heap_copies()`. Pass your own `random.Random`
to get repeatable structures.

## What it does not do

pqbench only appends raw averages to text files. It does not summarise,
compare or plot results across runs. Result files keep growing with each run
until you remove them.