# algorithm/ga/operators.py
"""
Variation operators for the real-coded genetic algorithm.

All operators take the run's ``np.random.Generator`` explicitly and return new
arrays; parents are never modified in place.
"""

from __future__ import annotations

import numpy as np

from heuropt.engine.primitives import clamp, is_better, is_feasible, rank_indices
from heuropt.foundation.problem import OptimizationProblem

# Mutation step is uniform in +/- half of this fraction of the bound span.
MUTATION_SCALE = 0.1


def tournament_selection(
    fitness: np.ndarray,
    tournament_size: int,
    minimize: bool,
    rng: np.random.Generator,
) -> int:
    """Index of the best of ``tournament_size`` draws (with replacement).

    Ties keep the earliest draw.
    """
    contenders = rng.integers(0, fitness.shape[0], size=tournament_size)
    winner = int(contenders[0])
    for idx in contenders[1:]:
        if is_better(fitness[idx], fitness[winner], minimize):
            winner = int(idx)
    return winner


def single_point_crossover(p1: np.ndarray, p2: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    """Child takes ``p1[:point]`` and ``p2[point:]`` with ``point`` uniform in ``[0, n)``."""
    point = int(rng.integers(0, p1.shape[0]))
    return np.concatenate([p1[:point], p2[point:]])


def uniform_mutation(
    x: np.ndarray,
    rate: float,
    span: np.ndarray,
    rng: np.random.Generator,
) -> np.ndarray:
    """Perturb each coordinate with probability ``rate`` by ``(u - 0.5) * span * 0.1``."""
    mask = rng.random(x.shape[0]) < rate
    delta = (rng.random(x.shape[0]) - 0.5) * span * MUTATION_SCALE
    child = x.copy()
    child[mask] += delta[mask]
    return child


def make_offspring(
    population: np.ndarray,
    fitness: np.ndarray,
    problem: OptimizationProblem,
    *,
    crossover_rate: float,
    mutation_rate: float,
    tournament_size: int,
    max_attempts: int,
    rng: np.random.Generator,
) -> tuple[np.ndarray, bool]:
    """Breed one feasible child.

    Returns ``(child, True)`` on success. After ``max_attempts`` infeasible
    children the first parent of the last attempt is returned as
    ``(parent_copy, False)``.
    """
    parent = population[0]
    for _ in range(max_attempts):
        i1 = tournament_selection(fitness, tournament_size, problem.minimize, rng)
        i2 = tournament_selection(fitness, tournament_size, problem.minimize, rng)
        parent = population[i1]
        if rng.random() < crossover_rate:
            child = single_point_crossover(population[i1], population[i2], rng)
        else:
            child = population[i1].copy()
        child = uniform_mutation(child, mutation_rate, problem.span, rng)
        child = clamp(child, problem.xl, problem.xu)
        if is_feasible(problem, child):
            return child, True
    return parent.copy(), False


def next_generation(
    population: np.ndarray,
    fitness: np.ndarray,
    problem: OptimizationProblem,
    *,
    elite_count: int,
    crossover_rate: float,
    mutation_rate: float,
    tournament_size: int,
    max_attempts: int,
    rng: np.random.Generator,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, int]:
    """Elites first (with their fitness), then offspring awaiting evaluation.

    Returns ``(population, fitness, evaluated_mask, n_fallbacks)``.
    """
    size, dims = population.shape
    new_pop = np.empty((size, dims))
    new_fit = np.full(size, np.nan)
    evaluated = np.zeros(size, dtype=bool)

    elites = rank_indices(fitness, problem.minimize)[:elite_count]
    new_pop[: len(elites)] = population[elites]
    new_fit[: len(elites)] = fitness[elites]
    evaluated[: len(elites)] = True

    fallbacks = 0
    for slot in range(len(elites), size):
        child, ok = make_offspring(
            population,
            fitness,
            problem,
            crossover_rate=crossover_rate,
            mutation_rate=mutation_rate,
            tournament_size=tournament_size,
            max_attempts=max_attempts,
            rng=rng,
        )
        new_pop[slot] = child
        if not ok:
            fallbacks += 1
    return new_pop, new_fit, evaluated, fallbacks


__all__ = [
    "uniform_mutation",
    "make_offspring",
    "next_generation",
    "single_point_crossover",
    "tournament_selection",
]
