# app/build.py
from collections.abc import Mapping
from dataclasses import dataclass, field

from pathlab.app.controllers.playback import PlaybackController
from pathlab.app.wiring import wire
from pathlab.config.models import EngineModel
from pathlab.domain.entities.graph import NodeId
from pathlab.domain.entities.results import AlgorithmKind, ComparisonReport, PathResult
from pathlab.domain.errors import GraphError
from pathlab.domain.state import GraphState
from pathlab.io.kernel_logging import KernelLogging
from pathlab.io.recorder import JsonlSink, Recorder, Sink
from pathlab.runtime.registries import make_graph
from pathlab.services.pathfinding import PathfindingService
from pathlab.sim.hooks import NoopHooks
from pathlab.sim.kernel import Kernel
from pathlab.sim.rng import RNGRegistry


@dataclass
class App:
    kernel: Kernel
    rng: RNGRegistry
    graph: GraphState
    engine: PathfindingService
    playback: PlaybackController
    recorder: Recorder | None = None
    results: dict[AlgorithmKind, PathResult] = field(default_factory=dict)
    report: ComparisonReport | None = None
    _inspecting: bool = field(default=False, repr=False)

    def _source(self, source: NodeId | None) -> NodeId:
        src = source or self.graph.source
        if src is None:
            raise GraphError("no source node selected")
        return src

    def inspect(self, kind: AlgorithmKind | str, source: NodeId | None = None) -> PathResult:
        """
        Run one algorithm and load its trace for playback. The graph stays locked
        until `close_inspection()`; a failed run leaves the previous session closed.
        The result is kept per algorithm, replacing that algorithm's previous one.
        """
        self.close_inspection()
        with self.graph.session() as snapshot:
            result = self.engine.run_algorithm(kind, snapshot, self._source(source))
        self.results[result.algorithm] = result
        self._open(result)
        return result

    def show(self, kind: AlgorithmKind | str) -> PathResult:
        """Reload the last kept result of `kind` into playback without rerunning it."""
        try:
            result = self.results[AlgorithmKind(kind)]
        except KeyError:
            raise ValueError(f"no kept result for {kind!r}") from None
        self.close_inspection()
        self._open(result)
        return result

    def _open(self, result: PathResult) -> None:
        self.graph.lock()
        self._inspecting = True
        self.playback.load(result)

    def close_inspection(self) -> None:
        if not self._inspecting:
            return
        self.playback.unload()
        self.graph.unlock()
        self._inspecting = False

    def compare(self, source: NodeId | None = None) -> ComparisonReport:
        with self.graph.session() as snapshot:
            self.report = self.engine.run_comparison(snapshot, self._source(source))
        return self.report

    def clear_results(self) -> None:
        self.close_inspection()
        self.results.clear()
        self.report = None


def build(
    cfg: EngineModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    sinks: tuple[Sink, ...] | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = EngineModel()
    else:
        model = cfg if isinstance(cfg, EngineModel) else EngineModel.model_validate(cfg)

    # 1) RNG
    rng_registry = RNGRegistry(model.seed, scenario=model.name)

    # 2) Hooks (one object serves kernel and engine) + kernel
    recorder = Recorder(*(sinks or (JsonlSink(),))) if use_logging else None
    hooks = (
        KernelLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)
    if use_logging:
        hooks.clock = kernel

    # 3) Graph
    setup = make_graph(model.graph, deps={"rng": rng_registry.stream("graph")})
    state = GraphState()
    state.load(setup.graph, source=setup.source, target=setup.target)
    if model.source is not None:
        state.set_source(model.source)

    # 4) Engine + playback (inject deps explicitly)
    engine = PathfindingService(hooks=hooks)
    playback = PlaybackController(kernel, interval_ms=model.playback.interval_ms, hooks=hooks)

    # 5) Wiring
    wire(kernel, playback=playback)

    return App(kernel, rng_registry, state, engine, playback, recorder)
