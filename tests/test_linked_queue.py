import pytest
from hypothesis import given
from hypothesis import strategies as st

from pqbench.errors import ElementNotFoundError, EmptyQueueError, QueueError
from pqbench.linked_queue import LinkedPriorityQueue


def _queue(pairs):
    queue = LinkedPriorityQueue()
    for element, priority in pairs:
        queue.insert(element, priority)
    return queue


def test_new_queue_is_empty():
    assert len(LinkedPriorityQueue()) == 0


def test_extract_from_empty_raises():
    with pytest.raises(EmptyQueueError, match="Queue is empty"):
        LinkedPriorityQueue().extract_max()


def test_find_max_on_empty_raises():
    with pytest.raises(QueueError):
        LinkedPriorityQueue().find_max()


def test_find_max_does_not_remove():
    queue = _queue([("a", 1), ("b", 3), ("c", 2)])
    assert queue.find_max() == "b"
    assert len(queue) == 3


def test_iteration_order_is_by_priority():
    queue = _queue([("a", 1), ("b", 3), ("c", 2)])
    assert list(queue) == [("b", 3), ("c", 2), ("a", 1)]


def test_equal_priorities_are_first_in_first_out():
    queue = _queue([("first", 4), ("second", 4), ("third", 4)])
    assert [queue.extract_max() for _ in range(3)] == ["first", "second", "third"]


def test_modify_key_raises_priority():
    queue = _queue([("a", 1), ("b", 3), ("c", 2)])
    queue.modify_key("a", 10)
    assert queue.find_max() == "a"
    assert len(queue) == 3


def test_modify_key_lowers_priority():
    queue = _queue([("a", 1), ("b", 3), ("c", 2)])
    queue.modify_key("b", 0)
    assert list(queue) == [("c", 2), ("a", 1), ("b", 0)]


def test_modify_key_goes_behind_equal_priorities():
    queue = _queue([("a", 5), ("b", 5), ("c", 1)])
    queue.modify_key("a", 5)
    assert [element for element, _ in queue] == ["b", "a", "c"]


def test_modify_key_changes_first_match_only():
    queue = _queue([("x", 1), ("x", 7)])
    queue.modify_key("x", 3)
    assert list(queue) == [("x", 3), ("x", 1)]


def test_modify_key_missing_element_raises():
    queue = _queue([("a", 1)])
    with pytest.raises(ElementNotFoundError, match="Element not found"):
        queue.modify_key("z", 5)
    assert list(queue) == [("a", 1)]


def test_copy_is_independent():
    original = _queue([("a", 1), ("b", 2)])
    duplicate = original.copy()
    duplicate.extract_max()
    duplicate.insert("c", 9)
    assert list(original) == [("b", 2), ("a", 1)]
    assert list(duplicate) == [("c", 9), ("a", 1)]


pairs_strategy = st.lists(st.tuples(st.integers(0, 50), st.integers(-20, 20)), max_size=40)


@given(pairs_strategy)
def test_extraction_is_stable_sort_by_priority(pairs):
    queue = _queue(pairs)
    expected = sorted(pairs, key=lambda pair: -pair[1])
    assert list(queue) == expected
    assert [queue.extract_max() for _ in pairs] == [element for element, _ in expected]
    assert len(queue) == 0


@given(pairs_strategy)
def test_copy_matches_original(pairs):
    queue = _queue(pairs)
    assert list(queue.copy()) == list(queue)


@given(pairs_strategy, st.integers(-20, 20))
def test_modify_key_keeps_size_and_multiset(pairs, new_priority):
    queue = _queue(pairs)
    if pairs:
        target = pairs[0][0]
        queue.modify_key(target, new_priority)
        assert len(queue) == len(pairs)
        assert sorted(element for element, _ in queue) == sorted(e for e, _ in pairs)
        assert (target, new_priority) in list(queue)
    else:
        with pytest.raises(ElementNotFoundError):
            queue.modify_key(0, new_priority)