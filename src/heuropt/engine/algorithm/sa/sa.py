# algorithm/sa/sa.py
"""
Simulated annealing with a geometric cooling schedule.

Each temperature level runs ``iterations_per_temp`` trials. A trial moves one
random coordinate by a step proportional to the bound span and the current
temperature; worse moves are accepted with the Metropolis probability
``exp(-delta / T)``.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from heuropt.engine.algorithm.base import Algorithm, close_step, offer
from heuropt.engine.config.sa import SAConfigData
from heuropt.engine.primitives import clamp, evaluate, is_feasible, sample_feasible_population, worsening
from heuropt.foundation.problem import OptimizationProblem

from .state import SAState

STEP_SCALE = 0.1


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def neighbour(
    x: np.ndarray,
    temperature: float,
    problem: OptimizationProblem,
    rng: np.random.Generator,
) -> np.ndarray:
    """Copy of ``x`` with one uniformly chosen coordinate perturbed, clamped."""
    dim = int(rng.integers(0, x.shape[0]))
    candidate = x.copy()
    candidate[dim] += (rng.random() - 0.5) * STEP_SCALE * problem.span[dim] * temperature
    return clamp(candidate, problem.xl, problem.xu)


def acceptance_probability(delta: float, temperature: float) -> float:
    if delta < 0:
        return 1.0
    return math.exp(-delta / temperature)


class SimulatedAnnealing(Algorithm[SAConfigData, SAState]):
    """Single-point annealing; ``iterations`` in the result counts trials."""

    name = "sa"
    config_cls = SAConfigData

    def initialize(self, problem: OptimizationProblem, rng: np.random.Generator) -> SAState:
        start, infeasible = sample_feasible_population(problem, 1, rng)
        x0 = start[0]
        f0 = evaluate(problem, x0)
        return SAState(
            rng=rng,
            best_x=x0.copy(),
            best_f=f0,
            n_eval=1,
            infeasible=infeasible,
            current_x=x0,
            current_f=f0,
            temperature=float(self.cfg.initial_temperature),
        )

    def step(self, state: SAState, problem: OptimizationProblem) -> SAState:
        cfg = self.cfg
        rng = state.rng
        temperature = state.temperature
        current_x, current_f = state.current_x, state.current_f
        best_x, best_f = state.best_x, state.best_f
        evaluated = accepted = 0

        for _ in range(cfg.iterations_per_temp):
            candidate = neighbour(current_x, temperature, problem, rng)
            if not is_feasible(problem, candidate):
                continue
            f = evaluate(problem, candidate)
            evaluated += 1
            delta = worsening(f, current_f, problem.minimize)
            if rng.random() < acceptance_probability(delta, temperature):
                current_x, current_f = candidate, f
                accepted += 1
                best_x, best_f = offer(best_x, best_f, current_x, current_f, problem.minimize)

        _logger().debug(
            "[sa] T=%.4g accepted %d/%d trials (best=%.6g)", temperature, accepted, cfg.iterations_per_temp, best_f
        )
        return close_step(
            state,
            evaluated,
            current_x=current_x,
            current_f=current_f,
            best_x=best_x,
            best_f=best_f,
            temperature=temperature * cfg.cooling_rate,
            trials=state.trials + cfg.iterations_per_temp,
        )

    def should_terminate(self, state: SAState) -> bool:
        return state.temperature <= self.cfg.min_temperature

    def iterations(self, state: SAState) -> int:
        return state.trials

    def termination_message(self, state: SAState) -> str:
        return f"cooled to T={state.temperature:.3g} after {state.generation} temperature levels"


__all__ = ["SimulatedAnnealing", "acceptance_probability", "neighbour"]
