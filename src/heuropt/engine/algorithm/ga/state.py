# algorithm/ga/state.py
"""State container for the genetic algorithm."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from heuropt.engine.algorithm.base import AlgorithmState


@dataclass
class GAState(AlgorithmState):
    """Population plus the fitness already known for some of its rows.

    ``evaluated[i]`` is True when ``fitness[i]`` is current, which is the case
    for elites carried over from the previous generation.
    """

    population: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))
    fitness: np.ndarray = field(default_factory=lambda: np.empty(0))
    evaluated: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=bool))


__all__ = ["GAState"]
