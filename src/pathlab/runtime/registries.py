# runtime/registries.py
from collections.abc import Callable

from pathlab.app.protocols import PathAlgorithm
from pathlab.config.models import (
    ExampleGraphModel,
    GraphSourceUnion,
    InlineGraphModel,
    RandomGraphModel,
)
from pathlab.domain.algorithms.algorithms_bellman_ford import BellmanFordAlgorithm
from pathlab.domain.algorithms.algorithms_dijkstra import DijkstraAlgorithm
from pathlab.domain.algorithms.algorithms_floyd_warshall import FloydWarshallAlgorithm
from pathlab.domain.entities.graph import Edge, Graph, Node
from pathlab.domain.entities.results import AlgorithmKind
from pathlab.domain.examples import GraphSetup, example
from pathlab.domain.generators import random_graph

AlgorithmFactory = Callable[[], PathAlgorithm]
GraphFactory = Callable[[GraphSourceUnion, dict], GraphSetup]

_algorithm_registry: dict[AlgorithmKind, AlgorithmFactory] = {}
_graph_registry: dict[str, GraphFactory] = {}


# ------------------- Algorithms ---------------------------


def register_algorithm(kind: AlgorithmKind):
    def deco(fn: AlgorithmFactory):
        _algorithm_registry[kind] = fn
        return fn

    return deco


def make_algorithm(kind: AlgorithmKind | str) -> PathAlgorithm:
    try:
        return _algorithm_registry[AlgorithmKind(kind)]()
    except (KeyError, ValueError):
        raise ValueError(f"Unknown algorithm kind {kind!r}") from None


def comparison_algorithms() -> tuple[PathAlgorithm, ...]:
    """One instance per registered kind, in registration order."""
    return tuple(fn() for fn in _algorithm_registry.values())


@register_algorithm(AlgorithmKind.DIJKSTRA)
def _make_dijkstra():
    return DijkstraAlgorithm()


@register_algorithm(AlgorithmKind.BELLMAN_FORD)
def _make_bellman_ford():
    return BellmanFordAlgorithm()


@register_algorithm(AlgorithmKind.FLOYD_WARSHALL)
def _make_floyd_warshall():
    return FloydWarshallAlgorithm()


# ------------------- Graph sources ---------------------------


def register_graph_source(kind: str):
    def deco(fn: GraphFactory):
        _graph_registry[kind] = fn
        return fn

    return deco


def make_graph(cfg: GraphSourceUnion, *, deps: dict) -> GraphSetup:
    """
    deps can include:
      - 'rng': numpy Generator   # required by kind="random"
    """
    try:
        factory = _graph_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown graph source kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_graph_source("inline")
def _make_inline(cfg: InlineGraphModel, deps):
    graph = Graph.build(
        [Node(n.id, n.label, n.x, n.y) for n in cfg.nodes],
        [Edge(e.source, e.target, e.weight) for e in cfg.edges],
    )
    source = cfg.source or (graph.nodes[0].id if graph.nodes else None)
    return GraphSetup(graph, source=source, target=cfg.target)


@register_graph_source("example")
def _make_example(cfg: ExampleGraphModel, deps):
    return example(cfg.name)


@register_graph_source("random")
def _make_random(cfg: RandomGraphModel, deps):
    graph = random_graph(
        deps["rng"],
        cfg.nodes,
        density=cfg.density,
        min_weight=cfg.min_weight,
        max_weight=cfg.max_weight,
    )
    ids = graph.node_ids()
    return GraphSetup(graph, source=ids[0], target=ids[-1])
