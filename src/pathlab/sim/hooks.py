# sim/hooks.py
from typing import Protocol

from pathlab.sim.event import BaseEvent


class KernelHooks(Protocol):
    def run_start(
        self,
        *,
        until,
        max_events,
        qsize,
    ): ...
    def run_end(self, *, processed, last_t, qsize, wall_ms): ...
    def schedule(self, ev: BaseEvent, *, now, qsize): ...
    def dispatch_start(self, ev: BaseEvent, *, seq, qsize, handlers): ...
    def dispatch_end(self, ev: BaseEvent, *, produced, qsize, ms): ...
    def cancelled(self, ev: BaseEvent, *, qsize): ...
    def error(self, ev: BaseEvent, *, reason: str, **kw): ...


class EngineHooks(Protocol):
    def algorithm_start(self, *, algorithm, source, nodes, edges): ...
    def algorithm_end(self, result): ...
    def algorithm_error(self, *, algorithm, source, error: BaseException): ...
    def comparison_end(self, report): ...
    def playback_changed(self, state, *, reason: str): ...


class NoopHooks:
    """Satisfies both hook protocols and does nothing."""

    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def schedule(self, *_, **__):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def dispatch_end(self, *_, **__):
        pass

    def cancelled(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass

    def algorithm_start(self, **_):
        pass

    def algorithm_end(self, *_):
        pass

    def algorithm_error(self, **_):
        pass

    def comparison_end(self, *_):
        pass

    def playback_changed(self, *_, **__):
        pass
