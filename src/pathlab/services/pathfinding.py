# services/pathfinding.py
from pathlab.app.controllers.comparison import ComparisonRunner
from pathlab.domain.algorithms.algorithms_core import observed_run, require_nonempty
from pathlab.domain.entities.graph import Graph, NodeId
from pathlab.domain.entities.results import AlgorithmKind, ComparisonReport, PathResult
from pathlab.runtime.registries import make_algorithm
from pathlab.sim.hooks import EngineHooks, NoopHooks


class PathfindingService:
    """
    Engine boundary used by the UI. Holds no graph: every call takes the snapshot to
    work on. Raises EmptyGraphError, UnknownSourceError or NegativeCycleError.
    """

    def __init__(self, hooks: EngineHooks | None = None):
        self.hooks = hooks or NoopHooks()
        self._comparison = ComparisonRunner(hooks=self.hooks)

    def run_algorithm(self, kind: AlgorithmKind | str, graph: Graph, source: NodeId) -> PathResult:
        require_nonempty(graph)
        return observed_run(make_algorithm(kind), graph, source, self.hooks)

    def run_comparison(self, graph: Graph, source: NodeId) -> ComparisonReport:
        return self._comparison.run(graph, source)


def run_algorithm(kind: AlgorithmKind | str, graph: Graph, source: NodeId) -> PathResult:
    return PathfindingService().run_algorithm(kind, graph, source)


def run_comparison(graph: Graph, source: NodeId) -> ComparisonReport:
    return PathfindingService().run_comparison(graph, source)
