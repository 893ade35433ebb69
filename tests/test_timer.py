import pytest
from hypothesis import given
from hypothesis import strategies as st

from pqbench.timer import TimeUnit, Timer


class FakeClock:
    def __init__(self, *readings):
        self._readings = iter(readings)

    def __call__(self):
        return next(self._readings)


def test_new_timer_reads_zero():
    timer = Timer(FakeClock(500))
    assert timer.micros() == 0.0
    assert timer.millis() == 0.0
    assert timer.seconds() == 0.0


def test_readings_truncate_to_whole_units():
    timer = Timer(FakeClock(0, 0, 2_999_999))
    timer.reset()
    timer.stop()
    assert timer.millis() == 2.0
    assert timer.seconds() == 0.0


def test_reset_clears_previous_interval():
    timer = Timer(FakeClock(0, 10_000_000, 50_000_000))
    timer.stop()
    timer.reset()
    assert timer.millis() == 0.0


def test_stop_and_measure_each_unit():
    nanos = 7_000_000_000
    timer = Timer(FakeClock(0, nanos, nanos, nanos))
    seconds = timer.stop_and_measure(TimeUnit.SECONDS)
    millis = timer.stop_and_measure(TimeUnit.MILLISECONDS)
    micros = timer.stop_and_measure(TimeUnit.MICROSECONDS)
    assert seconds == 7.0
    assert millis == seconds * 1000
    assert micros == millis * 1000


def test_stop_and_measure_rejects_unknown_unit():
    timer = Timer(FakeClock(0, 1))
    with pytest.raises(ValueError):
        timer.stop_and_measure("fortnights")


def test_context_manager_measures_block():
    timer = Timer(FakeClock(0, 1_000, 4_000_000_000))
    with timer as running:
        assert running is timer
    assert timer.seconds() == 3.0


def test_real_clock_is_non_negative():
    timer = Timer()
    timer.reset()
    timer.stop()
    assert timer.micros() >= 0.0


@given(st.integers(0, 10**6), st.integers(0, 10**13))
def test_units_are_consistent(start, elapsed):
    timer = Timer(FakeClock(start, start, start + elapsed))
    timer.reset()
    timer.stop()
    assert timer.millis() == timer.micros() // 1000
    assert timer.seconds() == timer.millis() // 1000
    assert timer.micros() * 1000 <= elapsed < (timer.micros() + 1) * 1000