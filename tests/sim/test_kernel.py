# tests/sim/test_kernel.py
from dataclasses import dataclass, field

import pytest

from pathlab.sim.event import BaseEvent, CancelToken
from pathlab.sim.hooks import NoopHooks
from pathlab.sim.kernel import Kernel


# ---- demo events ----
@dataclass(order=True)
class Beat(BaseEvent):
    n: int = 0


@dataclass(order=True)
class Tick(BaseEvent):
    label: str = ""
    token: CancelToken | None = field(default=None, compare=False)


def handle_beat(ev: Beat):
    if ev.n > 0:
        return [Beat(t=ev.t + 100.0, n=ev.n - 1)]
    return None


# --- test hook that records dispatch order & skips ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []
        self.skipped = []

    def dispatch_start(self, ev, *, seq, qsize, handlers):
        self.trace.append((ev.t, type(ev).__name__))

    def cancelled(self, ev, *, qsize):
        self.skipped.append(ev)


def test_beats_fan_out_in_time_order():
    hooks = TraceHooks()
    k = Kernel(hooks=hooks)
    k.on(Beat, handle_beat)
    k.schedule(Beat(t=0.0, n=3))

    assert k.run(until=250.0) == 3
    assert [t for t, _ in hooks.trace] == [0.0, 100.0, 200.0]
    assert k.now == 200.0
    assert k.pending == 1
    assert k.peek() == 300.0


def test_equal_times_dispatch_fifo():
    k = Kernel()
    seen: list[str] = []
    k.on(Tick, lambda ev: seen.append(ev.label))
    k.schedule(Tick(t=5.0, label="first"))
    k.schedule(Tick(t=5.0, label="second"))
    k.schedule(Tick(t=1.0, label="early"))
    k.run()
    assert seen == ["early", "first", "second"]


def test_cancelled_events_are_skipped_not_dispatched():
    hooks = TraceHooks()
    k = Kernel(hooks=hooks)
    seen: list[str] = []
    k.on(Tick, lambda ev: seen.append(ev.label))

    token = CancelToken()
    k.schedule(Tick(t=10.0, label="stale", token=token))
    k.schedule(Tick(t=20.0, label="live", token=CancelToken()))
    token.cancel()

    assert k.run() == 1
    assert seen == ["live"]
    assert [ev.label for ev in hooks.skipped] == ["stale"]


def test_max_events_and_advance():
    k = Kernel()
    k.on(Beat, handle_beat)
    k.schedule(Beat(t=0.0, n=10))
    assert k.run(max_events=1) == 1
    assert k.now == 0.0

    # advance moves the clock even when nothing is due at the target
    assert k.advance(150.0) == 1
    assert k.now == 150.0
    assert k.peek() == 200.0


def test_scheduling_in_the_past_raises():
    k = Kernel()
    k.on(Beat, lambda ev: [Beat(t=ev.t - 1.0, n=0)])
    k.schedule(Beat(t=1.0, n=0))
    with pytest.raises(RuntimeError):
        k.run()
