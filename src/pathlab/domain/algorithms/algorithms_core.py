# domain/algorithms/algorithms_core.py
from __future__ import annotations

from collections.abc import Mapping

from pathlab.domain.entities.graph import Graph, NodeId
from pathlab.domain.entities.results import INF, AlgorithmKind, PathResult
from pathlab.domain.entities.trace import TraceRecorder
from pathlab.domain.errors import EmptyGraphError, PathlabError, UnknownSourceError
from pathlab.sim.clock import Stopwatch

Distances = dict[NodeId, float]
Paths = dict[NodeId, tuple[NodeId, ...]]


class PathAlgorithmBase:
    """
    Shared run contract: validate the source, time the solve, freeze the trace.
    Subclasses implement `_solve` and must bookend the trace with init/final steps.
    """

    kind: AlgorithmKind

    def run(self, graph: Graph, source: NodeId) -> PathResult:
        if not graph.has_node(source):
            raise UnknownSourceError(source)
        recorder = TraceRecorder()
        sw = Stopwatch.started()
        distances, paths = self._solve(graph, source, recorder)
        elapsed = sw.stop()
        return PathResult(
            algorithm=self.kind,
            source=source,
            trace=recorder.freeze(),
            distances=distances,
            paths=paths,
            elapsed_ms=elapsed,
        )

    def _solve(
        self, graph: Graph, source: NodeId, recorder: TraceRecorder
    ) -> tuple[Distances, Paths]:
        raise NotImplementedError


def initial_distances(graph: Graph, source: NodeId) -> Distances:
    return {nid: (0.0 if nid == source else INF) for nid in graph.node_ids()}


def init_description(source: NodeId) -> str:
    return f"Initialize distances: set {source} to 0 and all others to infinity"


def paths_from_predecessors(
    node_ids, previous: Mapping[NodeId, NodeId | None], source: NodeId
) -> Paths:
    """Walk predecessor links back to `source`; nodes that never reach it get ()."""
    limit = len(previous)
    paths: Paths = {}
    for nid in node_ids:
        path = [nid]
        cur = previous.get(nid)
        while cur is not None:
            path.append(cur)
            if len(path) > limit:
                raise RuntimeError(f"predecessor cycle while rebuilding path to {nid!r}")
            cur = previous.get(cur)
        path.reverse()
        paths[nid] = tuple(path) if path[0] == source else ()
    return paths


def require_nonempty(graph: Graph) -> None:
    if graph.is_empty:
        raise EmptyGraphError()


def observed_run(algorithm, graph: Graph, source: NodeId, hooks) -> PathResult:
    """Run `algorithm`, reporting start/end/error to `hooks`. Errors propagate unchanged."""
    hooks.algorithm_start(
        algorithm=algorithm.kind, source=source, nodes=len(graph.nodes), edges=len(graph.edges)
    )
    try:
        result = algorithm.run(graph, source)
    except PathlabError as exc:
        hooks.algorithm_error(algorithm=algorithm.kind, source=source, error=exc)
        raise
    hooks.algorithm_end(result)
    return result
