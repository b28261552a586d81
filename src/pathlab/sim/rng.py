# sim/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(part: object) -> int:
    if isinstance(part, (int, np.integer)):
        return _u32(int(part))
    return _u32(crc32(str(part).encode("utf-8")))


class RNGRegistry:
    """
    Named numpy Generators derived from one master seed, so a graph generated under
    ("graph",) is the same whatever else the run draws.
    Entropy: [master_seed, scenario, name, *parts]
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _tag(str(scenario))

    @cache
    def stream(self, name: str, *parts: object) -> np.random.Generator:
        """One cached PCG64 generator per (name, *parts)."""
        entropy = [self.master_seed, self.scenario_tag, _tag(name), *map(_tag, parts)]
        return np.random.Generator(np.random.PCG64(np.random.SeedSequence(entropy)))
