# algorithm/de/de.py
"""
Differential evolution, DE/rand/1/bin.

Targets are processed in order and replaced in place, so a trial accepted for
target ``i`` can already serve as a donor for target ``i + 1``.

References
----------
R. Storn and K. Price, "Differential Evolution - A Simple and Efficient
Heuristic for Global Optimization over Continuous Spaces", J. Global Optim.
11, 1997.
"""

from __future__ import annotations

import logging

import numpy as np

from heuropt.engine.algorithm.base import Algorithm, close_step, offer
from heuropt.engine.config.de import DEConfigData
from heuropt.engine.primitives import (
    clamp,
    evaluate,
    is_better,
    is_feasible,
    sample_feasible_population,
    worst_fitness,
)
from heuropt.foundation.problem import OptimizationProblem

from .state import DEState


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def pick_donors(size: int, target: int, rng: np.random.Generator) -> tuple[int, int, int]:
    """Three distinct indices, all different from ``target``."""
    others = np.delete(np.arange(size), target)
    a, b, c = rng.choice(others, size=3, replace=False)
    return int(a), int(b), int(c)


def binomial_crossover(target: np.ndarray, mutant: np.ndarray, cr: float, rng: np.random.Generator) -> np.ndarray:
    """Take each coordinate from ``mutant`` with probability ``cr``; one random coordinate always."""
    n = target.shape[0]
    mask = rng.random(n) < cr
    mask[int(rng.integers(0, n))] = True
    return np.where(mask, mutant, target)


def make_trial(
    population: np.ndarray,
    target: int,
    problem: OptimizationProblem,
    *,
    f: float,
    cr: float,
    max_attempts: int,
    rng: np.random.Generator,
) -> np.ndarray | None:
    """Feasible trial vector for ``target``, or ``None`` when every attempt failed."""
    for _ in range(max_attempts):
        a, b, c = pick_donors(population.shape[0], target, rng)
        mutant = population[a] + f * (population[b] - population[c])
        trial = clamp(binomial_crossover(population[target], mutant, cr, rng), problem.xl, problem.xu)
        if is_feasible(problem, trial):
            return trial
    return None


class DifferentialEvolution(Algorithm[DEConfigData, DEState]):
    """Differential evolution with greedy one-to-one replacement.

    A trial replaces its target when it is at least as good, which lets the
    population drift across plateaus.
    """

    name = "de"
    config_cls = DEConfigData

    def initialize(self, problem: OptimizationProblem, rng: np.random.Generator) -> DEState:
        cfg = self.cfg
        population, infeasible = sample_feasible_population(problem, cfg.population_size, rng, cfg.max_attempts)
        fitness = np.array([evaluate(problem, x) for x in population])
        best_x, best_f = population[0].copy(), worst_fitness(problem.minimize)
        for i in range(cfg.population_size):
            best_x, best_f = offer(best_x, best_f, population[i], fitness[i], problem.minimize)
        return DEState(
            rng=rng,
            best_x=best_x,
            best_f=best_f,
            n_eval=cfg.population_size,
            infeasible=infeasible,
            population=population,
            fitness=fitness,
        )

    def step(self, state: DEState, problem: OptimizationProblem) -> DEState:
        cfg = self.cfg
        population = state.population.copy()
        fitness = state.fitness.copy()
        best_x, best_f = state.best_x, state.best_f
        evaluated = skipped = 0

        for i in range(population.shape[0]):
            trial = make_trial(
                population, i, problem, f=cfg.f, cr=cfg.cr, max_attempts=cfg.max_attempts, rng=state.rng
            )
            if trial is None:
                skipped += 1
                continue
            trial_f = evaluate(problem, trial)
            evaluated += 1
            if trial_f == fitness[i] or is_better(trial_f, fitness[i], problem.minimize):
                population[i] = trial
                fitness[i] = trial_f
                best_x, best_f = offer(best_x, best_f, trial, trial_f, problem.minimize)

        if skipped:
            _logger().debug("[de] generation %d: %d target(s) kept after infeasible trials", state.generation, skipped)
        return close_step(
            state,
            evaluated,
            population=population,
            fitness=fitness,
            best_x=best_x,
            best_f=best_f,
            infeasible=state.infeasible + skipped,
        )

    def should_terminate(self, state: DEState) -> bool:
        return state.generation >= self.cfg.generations

    def termination_message(self, state: DEState) -> str:
        return f"completed {state.generation} generations"


__all__ = ["DifferentialEvolution", "binomial_crossover", "make_trial", "pick_donors"]
