"""
User-facing API surface for heuropt.

One function per algorithm plus ``optimize`` for dispatch by name:

- genetic_algorithm / particle_swarm / simulated_annealing
- differential_evolution / nelder_mead / ant_colony_optimization
- optimize(problem, algorithm="ga", ...)

Every function takes an ``OptimizationProblem`` and returns an
``OptimizationResult``. ``seed`` may be an int, a ``SeedSequence`` or a
``np.random.Generator``; ``observer`` receives per-step progress.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from heuropt.engine.algorithm import (
    AntColony,
    DifferentialEvolution,
    GeneticAlgorithm,
    NelderMead,
    ParticleSwarm,
    SimulatedAnnealing,
    available_algorithms,
    build_algorithm,
)
from heuropt.engine.config import NelderMeadConfigData
from heuropt.engine.primitives import SeedLike
from heuropt.foundation.observer import RunObserver
from heuropt.foundation.problem import OptimizationProblem
from heuropt.foundation.result import OptimizationResult


def genetic_algorithm(
    problem: OptimizationProblem,
    config: Any = None,
    *,
    seed: SeedLike = None,
    observer: RunObserver | None = None,
) -> OptimizationResult:
    """Run the genetic algorithm; ``config`` is a ``GAConfigData``, ``GAConfig``, mapping or None."""
    return GeneticAlgorithm(config).run(problem, seed=seed, observer=observer)


def particle_swarm(
    problem: OptimizationProblem,
    config: Any = None,
    *,
    seed: SeedLike = None,
    observer: RunObserver | None = None,
) -> OptimizationResult:
    return ParticleSwarm(config).run(problem, seed=seed, observer=observer)


def simulated_annealing(
    problem: OptimizationProblem,
    config: Any = None,
    *,
    seed: SeedLike = None,
    observer: RunObserver | None = None,
) -> OptimizationResult:
    """Run simulated annealing; ``result.iterations`` counts trials, not temperature levels."""
    return SimulatedAnnealing(config).run(problem, seed=seed, observer=observer)


def differential_evolution(
    problem: OptimizationProblem,
    config: Any = None,
    *,
    seed: SeedLike = None,
    observer: RunObserver | None = None,
) -> OptimizationResult:
    return DifferentialEvolution(config).run(problem, seed=seed, observer=observer)


def nelder_mead(
    problem: OptimizationProblem,
    initial_simplex: Sequence[Sequence[float]] | np.ndarray | None = None,
    max_iterations: int = 1000,
    tolerance: float = 1e-6,
    *,
    seed: SeedLike = None,
    observer: RunObserver | None = None,
) -> OptimizationResult:
    """
    Run the Nelder-Mead simplex search.

    Parameters
    ----------
    problem : OptimizationProblem
        Problem to optimize.
    initial_simplex : array-like, optional
        ``(dimensions + 1, dimensions)`` starting vertices. Sampled uniformly
        within the bounds when omitted; clamped to the bounds otherwise.
    max_iterations : int
        Iteration cap.
    tolerance : float
        Stop once ``|f_worst - f_best|`` drops below this.

    Raises
    ------
    InitialSimplexError
        When ``initial_simplex`` has the wrong shape.
    """
    config = NelderMeadConfigData(
        initial_simplex=None if initial_simplex is None else np.asarray(initial_simplex, dtype=float),
        max_iterations=max_iterations,
        tolerance=tolerance,
    )
    return NelderMead(config).run(problem, seed=seed, observer=observer)


def ant_colony_optimization(
    problem: OptimizationProblem,
    config: Any = None,
    *,
    seed: SeedLike = None,
    observer: RunObserver | None = None,
) -> OptimizationResult:
    return AntColony(config).run(problem, seed=seed, observer=observer)


def optimize(
    problem: OptimizationProblem,
    algorithm: str = "ga",
    config: Any = None,
    *,
    seed: SeedLike = None,
    observer: RunObserver | None = None,
) -> OptimizationResult:
    """
    Run the algorithm registered as ``algorithm``.

    Raises
    ------
    InvalidAlgorithmError
        When ``algorithm`` is not registered (the message suggests close names).
    """
    return build_algorithm(algorithm, config).run(problem, seed=seed, observer=observer)


__all__ = [
    "ant_colony_optimization",
    "available_algorithms",
    "differential_evolution",
    "genetic_algorithm",
    "nelder_mead",
    "optimize",
    "particle_swarm",
    "simulated_annealing",
]
