# algorithm/nelder_mead/state.py
"""State container for the Nelder-Mead simplex search."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from heuropt.engine.algorithm.base import AlgorithmState


@dataclass
class NelderMeadState(AlgorithmState):
    """Simplex vertices ``(dimensions + 1, dimensions)`` and their scores."""

    simplex: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    values: np.ndarray = field(default_factory=lambda: np.empty(0))
    converged: bool = False
    minimize: bool = True


__all__ = ["NelderMeadState"]
