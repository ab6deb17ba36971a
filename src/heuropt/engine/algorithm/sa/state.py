# algorithm/sa/state.py
"""State container for simulated annealing."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from heuropt.engine.algorithm.base import AlgorithmState


@dataclass
class SAState(AlgorithmState):
    """Current point, temperature and trial counter.

    One ``generation`` is one temperature level.
    """

    current_x: np.ndarray = field(default_factory=lambda: np.empty(0))
    current_f: float = 0.0
    temperature: float = 0.0
    trials: int = 0


__all__ = ["SAState"]
