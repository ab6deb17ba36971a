# algorithm/pso/state.py
"""State container for particle swarm optimization."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from heuropt.engine.algorithm.base import AlgorithmState


@dataclass
class PSOState(AlgorithmState):
    """Swarm positions, velocities and personal bests.

    ``best_x`` / ``best_f`` (inherited) hold the global best.
    """

    positions: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    velocities: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    pbest_x: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    pbest_f: np.ndarray = field(default_factory=lambda: np.empty(0))


__all__ = ["PSOState"]
