# algorithm/aco/aco.py
"""
Ant colony optimization adapted to continuous vectors.

Each ant samples a full solution uniformly within the bounds. A pheromone
matrix indexed by pairs of consecutive (floored) coordinates is evaporated
and reinforced every iteration and kept in the run state, but it does not
influence how ants build solutions; ``alpha`` and ``beta`` are accepted for
configuration compatibility only.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from heuropt.engine.algorithm.base import Algorithm, close_step
from heuropt.engine.config.aco import ACOConfigData
from heuropt.engine.primitives import evaluate, initialize_population, is_better, is_feasible, worst_fitness
from heuropt.foundation.problem import OptimizationProblem

from .state import ACOState


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def deposit(pheromone: np.ndarray, ants: np.ndarray, fitness: np.ndarray, q: float) -> np.ndarray:
    """Add ``q / (1 + |f|)`` per ant on cells ``(floor(x[i]), floor(x[i + 1]))`` that fall inside the matrix."""
    out = pheromone.copy()
    n = out.shape[0]
    for x, f in zip(ants, fitness):
        if not math.isfinite(f):
            continue
        amount = q / (1.0 + abs(f))
        cells = np.floor(x).astype(np.int64)
        for i in range(n - 1):
            r, c = cells[i], cells[i + 1]
            if 0 <= r < n and 0 <= c < n:
                out[r, c] += amount
    return out


class AntColony(Algorithm[ACOConfigData, ACOState]):
    """Ant colony search over a box-bounded real vector."""

    name = "aco"
    config_cls = ACOConfigData

    def initialize(self, problem: OptimizationProblem, rng: np.random.Generator) -> ACOState:
        n = problem.dimensions
        _logger().debug("[aco] pheromone is tracked but does not bias solution construction")
        return ACOState(
            rng=rng,
            best_x=np.empty(0),
            best_f=worst_fitness(problem.minimize),
            pheromone=np.ones((n, n)),
        )

    def step(self, state: ACOState, problem: OptimizationProblem) -> ACOState:
        cfg = self.cfg
        ants = initialize_population(cfg.num_ants, problem.dimensions, problem.xl, problem.xu, state.rng)
        fitness = np.array([evaluate(problem, x) for x in ants])

        best_x, best_f, best_feasible = state.best_x, state.best_f, state.best_feasible
        for x, f in zip(ants, fitness):
            feasible = is_feasible(problem, x)
            if best_x.size == 0:
                best_x, best_f, best_feasible = x.copy(), float(f), feasible
            elif feasible and (not best_feasible or is_better(f, best_f, problem.minimize)):
                best_x, best_f, best_feasible = x.copy(), float(f), True

        pheromone = deposit(state.pheromone * (1.0 - cfg.evaporation), ants, fitness, cfg.q)
        return close_step(
            state, cfg.num_ants, best_x=best_x, best_f=best_f, best_feasible=best_feasible, pheromone=pheromone
        )

    def should_terminate(self, state: ACOState) -> bool:
        return state.generation >= self.cfg.iterations

    def termination_message(self, state: ACOState) -> str:
        return f"completed {state.generation} iterations"


__all__ = ["AntColony", "deposit"]
