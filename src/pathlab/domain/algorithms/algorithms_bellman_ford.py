# domain/algorithms/algorithms_bellman_ford.py
from pathlab.domain.algorithms.algorithms_core import (
    PathAlgorithmBase,
    init_description,
    initial_distances,
    paths_from_predecessors,
)
from pathlab.domain.entities.results import INF, AlgorithmKind
from pathlab.domain.entities.trace import TraceRecorder
from pathlab.domain.errors import NegativeCycleError


class BellmanFordAlgorithm(PathAlgorithmBase):
    """
    Label-correcting search: up to |V|-1 rounds relaxing every edge in graph order,
    stopping early after a round with no update, then one extra pass to detect a
    negative cycle reachable from the source.
    """

    kind = AlgorithmKind.BELLMAN_FORD

    def _solve(self, graph, source, recorder: TraceRecorder):
        dist = initial_distances(graph, source)
        previous = {nid: None for nid in dist}
        visited: dict[str, None] = {source: None}
        edges = graph.edges
        rounds = len(dist) - 1

        recorder.init(dist, init_description(source))

        for i in range(1, rounds + 1):
            recorder.visit(dist, visited, f"Iteration {i} of {rounds}", round=i)
            updated = False
            for e in edges:
                if dist[e.source] == INF:
                    continue
                new = dist[e.source] + e.weight
                if new < dist[e.target]:
                    old = dist[e.target]
                    dist[e.target] = new
                    previous[e.target] = e.source
                    visited[e.target] = None
                    updated = True
                    recorder.update(dist, visited, node=e.target, via=e.source, old=old, new=new)
            if not updated:
                break

        for e in edges:
            if dist[e.source] == INF:
                continue
            if dist[e.source] + e.weight < dist[e.target]:
                msg = f"Negative cycle detected involving edge from {e.source} to {e.target}"
                recorder.final(dist, visited, msg, failure=msg, edge=e)
                raise NegativeCycleError(e, recorder.freeze())

        recorder.final(dist, visited)
        return dist, paths_from_predecessors(dist, previous, source)
