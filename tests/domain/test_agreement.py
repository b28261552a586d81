import pytest

from pathlab.domain.algorithms.algorithms_bellman_ford import BellmanFordAlgorithm
from pathlab.domain.algorithms.algorithms_dijkstra import DijkstraAlgorithm
from pathlab.domain.algorithms.algorithms_floyd_warshall import FloydWarshallAlgorithm
from pathlab.domain.generators import random_graph
from pathlab.sim.rng import RNGRegistry

ALGORITHMS = (DijkstraAlgorithm(), BellmanFordAlgorithm(), FloydWarshallAlgorithm())


@pytest.mark.parametrize("seed", range(12))
def test_algorithms_agree_on_non_negative_graphs(seed):
    rng = RNGRegistry(seed, scenario="agreement").stream("graph")
    g = random_graph(rng, 9, density=0.25, min_weight=0, max_weight=9)
    results = [a.run(g, "n0") for a in ALGORITHMS]

    first = results[0].distances
    for r in results[1:]:
        assert r.distances == first
    for r in results:
        assert r.trace.last.distances == r.distances
        for n in r.reachable():
            assert r.paths[n][0] == "n0" and r.paths[n][-1] == n
            assert g.path_weight(r.paths[n]) == r.distances[n]
        for n in set(r.distances) - set(r.reachable()):
            assert r.paths[n] == ()


def test_random_graph_is_reproducible():
    a = random_graph(RNGRegistry(7).stream("graph"), 6, density=0.5)
    b = random_graph(RNGRegistry(7).stream("graph"), 6, density=0.5)
    assert a == b
    assert all(not e.is_self_loop for e in a.edges)
    assert all(1.0 <= e.weight <= 10.0 for e in a.edges)


def test_random_graph_bounds():
    rng = RNGRegistry(1).stream("graph")
    assert random_graph(rng, 5, density=0.0).edges == ()
    full = random_graph(rng, 4, density=1.0)
    assert len(full.edges) == 4 * 3
    with pytest.raises(ValueError):
        random_graph(rng, 3, density=1.5)
    with pytest.raises(ValueError):
        random_graph(rng, 3, min_weight=5, max_weight=1)
