import threading

import pytest

from chromapick.utils.debounce import debounce, Debounced


def test_burst_collapses_to_last_call():
    calls = []
    done = threading.Event()

    def record(value, *, tag=None):
        calls.append((value, tag))
        done.set()

    # Long enough that the whole burst lands before the first timer expires.
    debounced = debounce(record, wait=0.5)
    for i in range(5):
        debounced(i, tag="x")

    assert done.wait(5.0)
    assert debounced.join(5.0)
    assert calls == [(4, "x")]
    assert not debounced.pending


def test_separate_bursts_each_fire():
    calls = []
    debounced = debounce(calls.append, wait=0.01)

    debounced("a")
    assert debounced.join(5.0)
    debounced("b")
    assert debounced.join(5.0)

    assert calls == ["a", "b"]


def test_cancel_drops_pending_call():
    calls = []
    debounced = debounce(calls.append, wait=5.0)

    debounced("a")
    assert debounced.pending
    debounced.cancel()

    assert not debounced.pending
    assert debounced.join(0)
    assert calls == []


def test_join_without_pending_call():
    debounced = debounce(print)
    assert debounced.join(0)


def test_negative_wait_rejected():
    with pytest.raises(ValueError):
        Debounced(print, wait=-1)
