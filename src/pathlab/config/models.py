from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class PlaybackModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    interval_ms: int = Field(default=1000, gt=0)


# ----------------- GRAPH SOURCES ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str = Field(min_length=1)
    label: str = ""
    x: float = 0.0  # presentation only
    y: float = 0.0


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    source: str
    target: str
    weight: float

    @field_validator("weight")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not isfinite(v):
            raise ValueError("weight must be finite")
        return v


class InlineGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["inline"] = "inline"
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)
    source: str | None = None
    target: str | None = None

    @model_validator(mode="after")
    def _check_refs(self):
        ids = [n.id for n in self.nodes]
        if len(set(ids)) != len(ids):
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            raise ValueError(f"duplicate node ids: {dupes}")
        known = set(ids)
        for e in self.edges:
            if e.source not in known or e.target not in known:
                raise ValueError(f"edge {e.source!r} -> {e.target!r} references unknown node")
        for name in ("source", "target"):
            ref = getattr(self, name)
            if ref is not None and ref not in known:
                raise ValueError(f"{name} {ref!r} is not a node of the graph")
        return self


class ExampleGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["example"] = "example"
    name: Literal["small", "medium", "complex"] = "small"


class RandomGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["random"] = "random"
    nodes: int = Field(default=8, ge=1, le=500)
    density: float = Field(default=0.3, ge=0.0, le=1.0)
    min_weight: int = 1
    max_weight: int = 10

    @model_validator(mode="after")
    def _check_weights(self):
        if self.min_weight > self.max_weight:
            raise ValueError("min_weight must be <= max_weight")
        return self


GraphSourceUnion = Annotated[
    InlineGraphModel | ExampleGraphModel | RandomGraphModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "pathlab"
    run_id: str = "local"
    seed: int = 0
    log: LogModel = LogModel()
    playback: PlaybackModel = PlaybackModel()
    graph: GraphSourceUnion = Field(default_factory=ExampleGraphModel)
    source: str | None = None  # overrides the graph source's default
