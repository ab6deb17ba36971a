# algorithm/ga/ga.py
"""
Real-coded genetic algorithm.

Generational loop with tournament selection, single-point crossover,
per-coordinate uniform mutation and elitism. Elites keep the fitness they
were evaluated with, so each generation after the first calls the objective
``population_size - elite_count`` times.

References
----------
D. E. Goldberg, "Genetic Algorithms in Search, Optimization and Machine
Learning", Addison-Wesley, 1989.
"""

from __future__ import annotations

import logging

import numpy as np

from heuropt.engine.algorithm.base import Algorithm, close_step, offer
from heuropt.engine.config.ga import GAConfigData
from heuropt.engine.primitives import evaluate, sample_feasible_population, worst_fitness
from heuropt.foundation.problem import OptimizationProblem

from .operators import next_generation
from .state import GAState


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class GeneticAlgorithm(Algorithm[GAConfigData, GAState]):
    """Genetic algorithm over a box-bounded real vector.

    Parameters
    ----------
    config : GAConfigData, GAConfig, mapping or None
        Algorithm settings; ``None`` uses the defaults.

    Examples
    --------
    >>> from heuropt import make_benchmark_problem
    >>> ga = GeneticAlgorithm({"population_size": 20, "generations": 30})
    >>> result = ga.run(make_benchmark_problem("sphere", 3), seed=1)
    """

    name = "ga"
    config_cls = GAConfigData

    def initialize(self, problem: OptimizationProblem, rng: np.random.Generator) -> GAState:
        cfg = self.cfg
        population, infeasible = sample_feasible_population(problem, cfg.population_size, rng, cfg.max_attempts)
        return GAState(
            rng=rng,
            best_x=population[0].copy(),
            best_f=worst_fitness(problem.minimize),
            infeasible=infeasible,
            population=population,
            fitness=np.full(cfg.population_size, np.nan),
            evaluated=np.zeros(cfg.population_size, dtype=bool),
        )

    def step(self, state: GAState, problem: OptimizationProblem) -> GAState:
        cfg = self.cfg
        population = state.population
        fitness = state.fitness.copy()
        pending = np.flatnonzero(~state.evaluated)
        for i in pending:
            fitness[i] = evaluate(problem, population[i])

        best_x, best_f = state.best_x, state.best_f
        for i in range(population.shape[0]):
            best_x, best_f = offer(best_x, best_f, population[i], fitness[i], problem.minimize)

        changes = {
            "fitness": fitness,
            "evaluated": np.ones(population.shape[0], dtype=bool),
            "best_x": best_x,
            "best_f": best_f,
        }
        # The final generation is only evaluated.
        if state.generation + 1 < cfg.generations:
            new_pop, new_fit, evaluated, fallbacks = next_generation(
                population,
                fitness,
                problem,
                elite_count=cfg.elite_count,
                crossover_rate=cfg.crossover_rate,
                mutation_rate=cfg.mutation_rate,
                tournament_size=cfg.tournament_size,
                max_attempts=cfg.max_attempts,
                rng=state.rng,
            )
            if fallbacks:
                _logger().debug("[ga] generation %d: %d offspring fell back to a parent", state.generation, fallbacks)
            changes.update(
                population=new_pop,
                fitness=new_fit,
                evaluated=evaluated,
                infeasible=state.infeasible + fallbacks,
            )
        return close_step(state, len(pending), **changes)

    def should_terminate(self, state: GAState) -> bool:
        return state.generation >= self.cfg.generations

    def termination_message(self, state: GAState) -> str:
        return f"completed {state.generation} generations"


__all__ = ["GeneticAlgorithm"]
