# algorithm/aco/state.py
"""State container for continuous ant colony optimization."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from heuropt.engine.algorithm.base import AlgorithmState


@dataclass
class ACOState(AlgorithmState):
    """Pheromone matrix ``(dimensions, dimensions)``.

    ``best_x`` is empty until the first ant of the first iteration is seen.
    ``best_feasible`` is False while the incumbent violates the constraints.
    """

    pheromone: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    best_feasible: bool = False


__all__ = ["ACOState"]
