import pytest

from battleship.timer import Timer


@pytest.fixture
def counter():
    calls = []
    return calls


def test_does_not_fire_before_wait_time(counter):
    timer = Timer(wait_time=1.0, on_timeout=lambda: counter.append(1))
    timer.on_update(0.5)
    assert counter == []


def test_fires_when_wait_time_reached(counter):
    timer = Timer(wait_time=1.0, on_timeout=lambda: counter.append(1))
    timer.on_update(1.0)
    assert counter == [1]


def test_fires_once_per_update_even_with_large_delta(counter):
    timer = Timer(wait_time=1.0, on_timeout=lambda: counter.append(1))
    timer.on_update(5.0)
    assert len(counter) == 1


def test_remainder_carries_over(counter):
    timer = Timer(wait_time=1.0, on_timeout=lambda: counter.append(1))
    timer.on_update(1.5)
    assert timer.elapsed == 0.5
    timer.on_update(0.5)
    assert len(counter) == 2


def test_pause_and_resume(counter):
    timer = Timer(wait_time=1.0, on_timeout=lambda: counter.append(1))
    timer.pause()
    timer.on_update(2.0)
    assert counter == []
    assert timer.elapsed == 0.0
    timer.resume()
    timer.on_update(1.0)
    assert counter == [1]


def test_restart_clears_elapsed(counter):
    timer = Timer(wait_time=1.0, on_timeout=lambda: counter.append(1))
    timer.on_update(0.75)
    timer.restart()
    timer.on_update(0.5)
    assert counter == []
    assert timer.elapsed == 0.5


def test_one_shot_fires_only_once_until_restart(counter):
    timer = Timer(wait_time=1.0, one_shot=True, on_timeout=lambda: counter.append(1))
    timer.on_update(1.0)
    timer.on_update(1.0)
    assert counter == [1]
    timer.restart()
    timer.on_update(1.0)
    assert counter == [1, 1]


def test_repeating_timer_keeps_firing(counter):
    timer = Timer(wait_time=1.0, on_timeout=lambda: counter.append(1))
    for _ in range(4):
        timer.on_update(1.0)
    assert len(counter) == 4