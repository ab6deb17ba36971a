# algorithm/de/state.py
"""State container for differential evolution."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from heuropt.engine.algorithm.base import AlgorithmState


@dataclass
class DEState(AlgorithmState):
    population: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    fitness: np.ndarray = field(default_factory=lambda: np.empty(0))


__all__ = ["DEState"]
