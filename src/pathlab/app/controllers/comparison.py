# app/controllers/comparison.py
from collections.abc import Sequence

from pathlab.app.protocols import PathAlgorithm
from pathlab.domain.algorithms.algorithms_core import observed_run, require_nonempty
from pathlab.domain.entities.graph import Graph, NodeId
from pathlab.domain.entities.results import ComparisonReport, ComparisonResult
from pathlab.runtime.registries import comparison_algorithms
from pathlab.sim.hooks import EngineHooks, NoopHooks


class ComparisonRunner:
    """
    Runs every algorithm over the same graph/source, one after another, in a fixed
    order. The first failure propagates and nothing is collected for the rest.
    """

    def __init__(
        self,
        algorithms: Sequence[PathAlgorithm] | None = None,
        hooks: EngineHooks | None = None,
    ):
        self.algorithms = tuple(algorithms) if algorithms is not None else comparison_algorithms()
        self.hooks = hooks or NoopHooks()

    def run(self, graph: Graph, source: NodeId) -> ComparisonReport:
        require_nonempty(graph)
        results: list[ComparisonResult] = []
        for algorithm in self.algorithms:
            result = observed_run(algorithm, graph, source, self.hooks)
            results.append(ComparisonResult.from_result(result))
        report = ComparisonReport(source=source, results=tuple(results))
        self.hooks.comparison_end(report)
        return report
