"""Building blocks shared by every algorithm.

Random number generation, population sampling, bounds clamping, the
minimize/maximize comparator and guarded objective evaluation. Candidates are
float64 vectors; populations are ``(size, dimensions)`` arrays.
"""

from __future__ import annotations

import math
from typing import Union

import numpy as np

from heuropt.foundation.problem import OptimizationProblem

SeedLike = Union[int, np.random.SeedSequence, np.random.Generator, None]

MAX_FEASIBILITY_ATTEMPTS = 100


def resolve_rng(seed: SeedLike = None) -> np.random.Generator:
    """Return the generator driving one run.

    A ``Generator`` is used as-is so callers can share a stream on purpose;
    anything else seeds a fresh ``np.random.default_rng``.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def initialize_population(
    size: int,
    dimensions: int,
    xl: np.ndarray,
    xu: np.ndarray,
    rng: np.random.Generator,
) -> np.ndarray:
    """Sample ``size`` candidates uniformly in ``[xl, xu)`` per dimension."""
    if size <= 0:
        raise ValueError("size must be positive.")
    return rng.uniform(xl, xu, size=(size, dimensions))


def clamp(x: np.ndarray, xl: np.ndarray, xu: np.ndarray) -> np.ndarray:
    """Clip ``x`` (a vector or a population) to the bounds, returning a new array."""
    return np.clip(x, xl, xu)


def is_better(a: float, b: float, minimize: bool) -> bool:
    return a < b if minimize else a > b


def worst_fitness(minimize: bool) -> float:
    return math.inf if minimize else -math.inf


def evaluate(problem: OptimizationProblem, x: np.ndarray) -> float:
    """Call the objective once.

    NaN and +/-inf are replaced by the worst value for the optimization
    direction so they never win a comparison.
    """
    value = float(problem.objective(x))
    if not math.isfinite(value):
        return worst_fitness(problem.minimize)
    return value


def is_feasible(problem: OptimizationProblem, x: np.ndarray) -> bool:
    if problem.constraints is None:
        return True
    return bool(problem.constraints(x))


def sample_feasible_population(
    problem: OptimizationProblem,
    size: int,
    rng: np.random.Generator,
    max_attempts: int = MAX_FEASIBILITY_ATTEMPTS,
) -> tuple[np.ndarray, int]:
    """Uniform population whose rows satisfy the constraints where possible.

    Each infeasible row is redrawn up to ``max_attempts - 1`` more times; rows
    still infeasible after that are kept and counted. Returns
    ``(population, n_infeasible)``.
    """
    population = initialize_population(size, problem.dimensions, problem.xl, problem.xu, rng)
    if problem.constraints is None:
        return population, 0
    n_infeasible = 0
    for i in range(size):
        attempts = 1
        while not is_feasible(problem, population[i]):
            if attempts >= max_attempts:
                n_infeasible += 1
                break
            population[i] = rng.uniform(problem.xl, problem.xu)
            attempts += 1
    return population, n_infeasible


def worsening(candidate: float, reference: float, minimize: bool) -> float:
    """How much worse ``candidate`` is than ``reference`` (negative when better)."""
    if candidate == reference:
        return 0.0
    if math.isinf(candidate) or math.isinf(reference):
        return -math.inf if is_better(candidate, reference, minimize) else math.inf
    return candidate - reference if minimize else reference - candidate


def rank_indices(fitness: np.ndarray, minimize: bool) -> np.ndarray:
    """Indices ordered best-first; ties keep their original order."""
    keys = fitness if minimize else -fitness
    return np.argsort(keys, kind="stable")


def best_index(fitness: np.ndarray, minimize: bool) -> int:
    return int(np.argmin(fitness) if minimize else np.argmax(fitness))


__all__ = [
    "MAX_FEASIBILITY_ATTEMPTS",
    "SeedLike",
    "best_index",
    "clamp",
    "evaluate",
    "initialize_population",
    "is_better",
    "is_feasible",
    "rank_indices",
    "resolve_rng",
    "sample_feasible_population",
    "worsening",
    "worst_fitness",
]
