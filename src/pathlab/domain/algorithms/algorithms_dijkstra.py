# domain/algorithms/algorithms_dijkstra.py
import heapq

from pathlab.domain.algorithms.algorithms_core import (
    PathAlgorithmBase,
    init_description,
    initial_distances,
    paths_from_predecessors,
)
from pathlab.domain.entities.results import AlgorithmKind
from pathlab.domain.entities.trace import TraceRecorder


class DijkstraAlgorithm(PathAlgorithmBase):
    """
    Label-setting search. Heap entries are (distance, seq, node) so equal priorities
    pop in insertion order. A node is settled on its first pop; later, stale entries
    for it are skipped. Negative weights are not checked.
    """

    kind = AlgorithmKind.DIJKSTRA

    def _solve(self, graph, source, recorder: TraceRecorder):
        dist = initial_distances(graph, source)
        previous = {nid: None for nid in dist}
        settled: dict[str, None] = {}  # insertion-ordered set
        adjacency = graph.adjacency

        recorder.init(dist, init_description(source))

        frontier: list[tuple[float, int, str]] = [(0.0, 0, source)]
        seq = 0
        while frontier:
            d, _, u = heapq.heappop(frontier)
            if u in settled:
                continue
            settled[u] = None
            recorder.visit(dist, settled, f"Visit node {u} with distance {d:g}", node=u)

            for e in adjacency[u]:
                v = e.target
                if v in settled:
                    continue
                new = dist[u] + e.weight
                if new < dist[v]:
                    old = dist[v]
                    dist[v] = new
                    previous[v] = u
                    recorder.update(dist, settled, node=v, via=u, old=old, new=new)
                    seq += 1
                    heapq.heappush(frontier, (new, seq, v))

        recorder.final(dist, settled)
        return dist, paths_from_predecessors(dist, previous, source)
