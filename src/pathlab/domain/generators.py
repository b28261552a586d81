# domain/generators.py
import numpy as np

from pathlab.domain.entities.graph import Edge, Graph, Node


def random_graph(
    rng: np.random.Generator,
    n_nodes: int,
    *,
    density: float = 0.3,
    min_weight: int = 1,
    max_weight: int = 10,
    prefix: str = "n",
) -> Graph:
    """
    Directed graph with each ordered pair (no self-loops) present with probability
    `density`; integer weights drawn uniformly from [min_weight, max_weight].
    Nodes sit on a circle so a renderer has usable coordinates.
    """
    if n_nodes < 0:
        raise ValueError("n_nodes must be >= 0")
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be within [0, 1]")
    if min_weight > max_weight:
        raise ValueError("min_weight must be <= max_weight")

    ids = [f"{prefix}{i}" for i in range(n_nodes)]
    angles = np.linspace(0.0, 2 * np.pi, num=n_nodes, endpoint=False)
    nodes = tuple(
        Node(nid, nid, float(300 + 250 * np.cos(a)), float(300 + 250 * np.sin(a)))
        for nid, a in zip(ids, angles)
    )

    present = rng.random((n_nodes, n_nodes)) < density
    np.fill_diagonal(present, False)
    weights = rng.integers(min_weight, max_weight, size=(n_nodes, n_nodes), endpoint=True)
    edges = tuple(
        Edge(ids[i], ids[j], float(weights[i, j])) for i, j in zip(*np.nonzero(present))
    )
    return Graph(nodes, edges)
