# domain/examples.py
from dataclasses import dataclass

from pathlab.domain.entities.graph import Edge, Graph, Node, NodeId


@dataclass(frozen=True)
class GraphSetup:
    graph: Graph
    source: NodeId | None
    target: NodeId | None = None


def _graph(points: dict[str, tuple[float, float]], edges: list[tuple[str, str, float]]) -> Graph:
    return Graph(
        tuple(Node(nid, nid, x, y) for nid, (x, y) in points.items()),
        tuple(Edge(s, t, w) for s, t, w in edges),
    )


EXAMPLES: dict[str, GraphSetup] = {
    "small": GraphSetup(
        _graph(
            {"A": (100, 100), "B": (250, 100), "C": (175, 200)},
            [("A", "B", 4), ("A", "C", 2), ("B", "C", 1)],
        ),
        source="A",
        target="C",
    ),
    "medium": GraphSetup(
        _graph(
            {"A": (100, 100), "B": (250, 50), "C": (400, 100), "D": (250, 200), "E": (175, 300)},
            [
                ("A", "B", 4),
                ("A", "D", 2),
                ("B", "C", 3),
                ("B", "D", 1),
                ("C", "D", 2),
                ("D", "E", 5),
                ("A", "E", 8),
            ],
        ),
        source="A",
        target="C",
    ),
    "complex": GraphSetup(
        _graph(
            {
                "A": (100, 100),
                "B": (250, 50),
                "C": (400, 100),
                "D": (250, 200),
                "E": (100, 300),
                "F": (400, 300),
                "G": (250, 350),
            },
            [
                ("A", "B", 4),
                ("A", "D", 2),
                ("B", "C", 3),
                ("B", "D", 1),
                ("C", "D", 2),
                ("C", "F", 6),
                ("D", "E", 3),
                ("D", "F", 4),
                ("E", "G", 2),
                ("F", "G", 1),
            ],
        ),
        source="A",
        target="G",
    ),
}


def example(name: str) -> GraphSetup:
    try:
        return EXAMPLES[name]
    except KeyError:
        raise ValueError(f"Unknown example graph {name!r}") from None
