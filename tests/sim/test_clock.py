import pytest

from pathlab.sim.clock import Stopwatch


def test_stopwatch_freezes_on_stop():
    sw = Stopwatch.started()
    assert sw.running
    elapsed = sw.stop()
    assert elapsed >= 0.0
    assert not sw.running
    assert sw.elapsed_ms == elapsed


def test_stopwatch_requires_start():
    assert Stopwatch().elapsed_ms == 0.0
    with pytest.raises(RuntimeError):
        Stopwatch().stop()
