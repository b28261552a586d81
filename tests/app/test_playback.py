import pytest

from pathlab.app.controllers.playback import PlaybackController, PlaybackMode
from pathlab.app.events import PlaybackTick
from pathlab.app.wiring import wire
from pathlab.domain.entities.trace import StepKind, Trace
from pathlab.services.pathfinding import run_algorithm
from pathlab.sim.event import CancelToken
from pathlab.sim.hooks import NoopHooks
from pathlab.sim.kernel import Kernel


class ReasonHooks(NoopHooks):
    def __init__(self):
        self.reasons: list[str] = []

    def playback_changed(self, state, *, reason):
        self.reasons.append(reason)


@pytest.fixture
def kernel():
    return Kernel()


@pytest.fixture
def hooks():
    return ReasonHooks()


@pytest.fixture
def pc(kernel, hooks):
    pc = PlaybackController(kernel, interval_ms=100, hooks=hooks)
    wire(kernel, playback=pc)
    return pc


@pytest.fixture
def result(small_graph):
    return run_algorithm("dijkstra", small_graph, "A")


def test_idle_until_loaded(pc, kernel):
    assert pc.mode is PlaybackMode.IDLE
    assert pc.current_step is None
    pc.next()
    pc.play()
    assert pc.cursor == 0
    assert pc.mode is PlaybackMode.IDLE
    assert kernel.pending == 0


def test_load_pauses_at_first_step(pc, result):
    pc.load(result)
    assert pc.mode is PlaybackMode.PAUSED
    assert pc.cursor == 0
    assert pc.current_step.kind is StepKind.INIT
    assert pc.state.last_index == len(result.trace) - 1


def test_navigation_is_clamped(pc, result):
    k = len(result.trace)
    pc.load(result)
    pc.prev()
    assert pc.cursor == 0
    pc.go_to(k + 5)
    assert pc.cursor == k - 1
    assert pc.current_step.kind is StepKind.FINAL
    pc.next()
    assert pc.cursor == k - 1
    pc.prev()
    assert pc.cursor == k - 2
    pc.go_to(-3)
    assert pc.cursor == 0


def test_play_at_last_step_pauses_without_advancing(pc, kernel, result):
    pc.load(result)
    pc.go_to(pc.last_index)
    pc.play()
    assert pc.mode is PlaybackMode.PAUSED
    assert pc.cursor == pc.last_index
    assert kernel.pending == 0


def test_auto_advance_runs_to_the_end(pc, kernel, result, hooks):
    pc.load(result)
    pc.play()
    assert pc.mode is PlaybackMode.PLAYING
    assert kernel.peek() == 100

    kernel.run(until=100)
    assert pc.cursor == 1
    kernel.run(until=250)
    assert pc.cursor == 2

    kernel.run()
    assert pc.cursor == pc.last_index
    assert pc.mode is PlaybackMode.PAUSED
    assert pc.is_at_end
    assert kernel.pending == 0
    assert kernel.now == 100 * pc.last_index
    assert hooks.reasons[:2] == ["load", "play"]
    assert hooks.reasons[-1] == "finished"


def test_pause_cancels_pending_tick(pc, kernel, result):
    pc.load(result)
    pc.play()
    kernel.run(until=100)
    pc.pause()
    assert pc.mode is PlaybackMode.PAUSED
    kernel.run()
    assert pc.cursor == 1
    assert kernel.pending == 0


def test_pause_outside_playing_is_noop(pc, result, hooks):
    pc.load(result)
    pc.pause()
    assert pc.mode is PlaybackMode.PAUSED
    assert hooks.reasons == ["load"]


def test_set_speed_applies_from_next_tick(pc, kernel, result):
    pc.load(result)
    pc.play()
    pc.set_speed(50)
    assert kernel.peek() == 100  # already queued tick keeps its time
    kernel.run(until=100)
    assert pc.cursor == 1
    assert kernel.peek() == 150
    kernel.run(until=150)
    assert pc.cursor == 2
    with pytest.raises(ValueError):
        pc.set_speed(0)
    assert pc.interval_ms == 50


def test_loading_while_playing_resets(pc, kernel, result, small_graph):
    pc.load(result)
    pc.play()
    kernel.run(until=100)
    other = run_algorithm("bellman_ford", small_graph, "A")
    pc.load(other)
    assert pc.mode is PlaybackMode.PAUSED
    assert pc.trace is other.trace
    kernel.run()
    assert pc.cursor == 0


def test_rapid_play_pause_play_advances_once_per_interval(pc, kernel, result):
    pc.load(result)
    pc.play()
    pc.pause()
    pc.play()
    assert kernel.pending == 2
    kernel.run(until=100)
    assert pc.cursor == 1


def test_play_twice_does_not_double_schedule(pc, kernel, result):
    pc.load(result)
    pc.play()
    pc.play()
    assert kernel.pending == 1


def test_stale_tick_is_ignored(pc, result):
    pc.load(result)
    pc.play()
    assert pc.on_tick(PlaybackTick(t=100, token=CancelToken())) is None
    assert pc.cursor == 0


def test_controllers_sharing_a_kernel_are_independent(kernel, result):
    a = PlaybackController(kernel, interval_ms=10)
    b = PlaybackController(kernel, interval_ms=10)
    wire(kernel, playback=a)
    wire(kernel, playback=b)
    a.load(result)
    b.load(result)
    a.play()
    kernel.run()
    assert a.is_at_end
    assert b.cursor == 0


def test_unload_returns_to_idle(pc, kernel, result):
    pc.load(result)
    pc.play()
    pc.unload()
    assert pc.mode is PlaybackMode.IDLE
    assert pc.current_step is None
    kernel.run()
    assert pc.cursor == 0


def test_load_accepts_trace_and_rejects_empty(pc, result):
    pc.load(result.trace)
    assert pc.state.current_step is result.trace[0]
    with pytest.raises(ValueError):
        pc.load(Trace())


def test_interval_must_be_positive(kernel):
    with pytest.raises(ValueError):
        PlaybackController(kernel, interval_ms=0)
