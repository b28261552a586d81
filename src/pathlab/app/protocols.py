from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

from pathlab.domain.entities.graph import Graph, NodeId
from pathlab.domain.entities.results import AlgorithmKind, PathResult
from pathlab.sim.event import BaseEvent


# ------------- Engine --------------------
@runtime_checkable
class PathAlgorithm(Protocol):
    """
    Responsibilities:
      • Compute single-source distances and paths over an immutable Graph.
      • Record a trace bookended by init and final steps.
    Must raise UnknownSourceError before doing any work when the source is absent.
    """

    kind: AlgorithmKind

    def run(self, graph: Graph, source: NodeId) -> PathResult: ...


# ------------- Scheduling --------------------
@runtime_checkable
class Scheduler(Protocol):
    """What the playback controller needs from the event kernel."""

    @property
    def now(self) -> float: ...
    def schedule(self, ev: BaseEvent) -> None: ...
    def on(
        self, etype: type[BaseEvent], handler: Callable[[BaseEvent], Iterable[BaseEvent] | None]
    ) -> None: ...
