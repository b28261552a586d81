# domain/algorithms/algorithms_floyd_warshall.py
import numpy as np

from pathlab.domain.algorithms.algorithms_core import (
    PathAlgorithmBase,
    init_description,
    initial_distances,
)
from pathlab.domain.entities.results import AlgorithmKind
from pathlab.domain.entities.trace import TraceRecorder

NO_HOP = -1


class FloydWarshallAlgorithm(PathAlgorithmBase):
    """
    All-pairs dynamic programming over a dense distance matrix.

    Every row is relaxed (other rows feed the source row through intermediates), but
    only changes to the source row are traced. Negative cycles are not detected:
    distances are whatever the relaxation left, and a path whose next hops loop
    comes back as ().
    """

    kind = AlgorithmKind.FLOYD_WARSHALL

    def _solve(self, graph, source, recorder: TraceRecorder):
        ids = graph.node_ids()
        index = {nid: i for i, nid in enumerate(ids)}
        n = len(ids)
        s = index[source]

        dist = np.full((n, n), np.inf)
        np.fill_diagonal(dist, 0.0)
        nxt = np.full((n, n), NO_HOP, dtype=np.intp)

        row = initial_distances(graph, source)
        recorder.init(row, init_description(source))

        intermediates: list[str] = []
        for e in graph.edges:
            i, j = index[e.source], index[e.target]
            if e.weight >= dist[i, j]:
                continue  # only a non-negative self-loop can lose to the 0 diagonal
            dist[i, j] = e.weight
            nxt[i, j] = j
            if i == s:
                old, row[e.target] = row[e.target], float(e.weight)
                recorder.update(
                    row, intermediates, node=e.target, via=source, old=old, new=row[e.target]
                )

        for k in range(n):
            intermediates.append(ids[k])
            recorder.visit(row, intermediates, f"Consider paths through node {ids[k]}", node=ids[k])

            through = dist[:, k, None] + dist[None, k, :]
            improved = through < dist
            dist = np.where(improved, through, dist)
            nxt = np.where(improved, nxt[:, k, None], nxt)

            for j in np.flatnonzero(improved[s]):
                target = ids[j]
                old, row[target] = row[target], float(dist[s, j])
                recorder.update(
                    row, intermediates, node=target, via=ids[k], old=old, new=row[target]
                )

        distances = {nid: float(dist[s, index[nid]]) for nid in ids}
        paths = {nid: self._walk(nxt, ids, s, index[nid]) for nid in ids}
        recorder.final(distances, intermediates)
        return distances, paths

    @staticmethod
    def _walk(nxt, ids, s: int, t: int) -> tuple[str, ...]:
        """Follow next hops from s to t; () when t is unreachable or the hops loop."""
        if s == t:
            return (ids[s],)
        path = [s]
        seen = {s}
        at = s
        while at != t:
            at = int(nxt[at, t])
            if at == NO_HOP or at in seen:
                # a negative cycle on the way leaves no simple shortest path
                return ()
            seen.add(at)
            path.append(at)
        return tuple(ids[i] for i in path)
