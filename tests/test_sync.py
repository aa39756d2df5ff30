import threading

import pytest

from tvpilot.sync import MultiEvents, ResetError, SlotsLock, WaitError


def test_instances_share_one_lock():
    first, second = SlotsLock(), SlotsLock()
    assert first.acquire(timeout=1) is True
    try:
        assert second.acquire(timeout=0.05) is False
    finally:
        first.release()
    assert second.acquire(timeout=0.05) is True
    second.release()


def test_context_manager_holds_lock():
    other = SlotsLock()
    with SlotsLock():
        assert other.acquire(timeout=0.02) is False
    assert other.acquire(timeout=0.02) is True
    other.release()


def test_release_unheld_raises():
    with pytest.raises(RuntimeError):
        SlotsLock().release()


def test_names_are_numbered():
    first, second = SlotsLock(), SlotsLock()
    assert first.name.startswith("slotsSem-")
    assert second.name.startswith("slotsSem-")
    assert first.name != second.name


def test_wait_returns_lowest_set_index():
    events = [threading.Event() for _ in range(3)]
    events[1].set()
    events[2].set()
    assert MultiEvents(events).wait(timeout=1) == 1


def test_wait_times_out():
    with pytest.raises(WaitError):
        MultiEvents([threading.Event()]).wait(timeout=0.05)


def test_wait_wakes_when_other_thread_sets():
    events = [threading.Event(), threading.Event()]
    timer = threading.Timer(0.05, events[1].set)
    timer.start()
    try:
        assert MultiEvents(events).wait(timeout=2) == 1
    finally:
        timer.cancel()


def test_reset_clears_signalled_event():
    events = [threading.Event(), threading.Event()]
    events[0].set()
    multi = MultiEvents(events)
    assert multi.wait(timeout=1) == 0
    multi.reset(0)
    assert events[0].is_set() is False
    with pytest.raises(ResetError):
        multi.reset(0)


def test_reset_unsignalled_raises():
    with pytest.raises(ResetError):
        MultiEvents([threading.Event()]).reset(0)


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_reset_out_of_range_raises(index):
    with pytest.raises(ResetError):
        MultiEvents([threading.Event(), threading.Event()]).reset(index)


def test_empty_events_rejected():
    with pytest.raises(ValueError):
        MultiEvents([])