from __future__ import annotations

import logging
import math

import numpy as np

from heuropt import ant_colony_optimization
from heuropt.engine.algorithm.aco import deposit
from heuropt.foundation.problem import OptimizationProblem


def _sphere(x):
    return float(np.sum(x**2))


def test_deposit_on_consecutive_floored_coordinates():
    pheromone = np.ones((3, 3))
    ants = np.array([[0.5, 1.2, 2.9], [-0.5, 1.0, 1.0], [0.0, 0.0, 0.0]])
    fitness = np.array([1.0, 3.0, math.inf])
    out = deposit(pheromone, ants, fitness, q=2.0)

    expected = np.ones((3, 3))
    expected[0, 1] += 1.0  # ant 0: q / (1 + 1)
    expected[1, 2] += 1.0
    expected[1, 1] += 0.5  # ant 1: (-1, 1) is out of range, (1, 1) is not
    np.testing.assert_allclose(out, expected)
    np.testing.assert_array_equal(pheromone, np.ones((3, 3)))


def test_pheromone_evaporates_when_no_cell_is_hit():
    problem = OptimizationProblem(_sphere, 3, [(10, 20)] * 3)
    result = ant_colony_optimization(problem, {"num_ants": 4, "iterations": 3, "evaporation": 0.5}, seed=0)
    pheromone = result.extras["state"].pheromone
    assert pheromone.shape == (3, 3)
    np.testing.assert_allclose(pheromone, np.full((3, 3), 0.125))


def test_alpha_beta_do_not_change_the_search():
    problem = OptimizationProblem(_sphere, 2, [(-5, 5)] * 2)
    a = ant_colony_optimization(problem, {"num_ants": 6, "iterations": 5, "alpha": 1.0, "beta": 2.0}, seed=9)
    b = ant_colony_optimization(problem, {"num_ants": 6, "iterations": 5, "alpha": 7.0, "beta": 0.0}, seed=9)
    np.testing.assert_array_equal(a.solution, b.solution)


def test_first_ant_adopted_even_when_infeasible():
    problem = OptimizationProblem(_sphere, 2, [(-5, 5)] * 2, constraints=lambda x: False)
    result = ant_colony_optimization(problem, {"num_ants": 3, "iterations": 4}, seed=0)
    assert result.solution.shape == (2,)
    assert math.isfinite(result.fitness)
    assert len(set(result.convergence_history)) == 1
    assert result.evaluations == 12


def test_feasible_ant_replaces_infeasible_first_ant():
    seen = []

    def objective(x):
        seen.append(x.copy())
        return 0.0 if len(seen) == 1 else 10.0

    problem = OptimizationProblem(objective, 2, [(-5, 5)] * 2, constraints=lambda x: not np.array_equal(x, seen[0]))
    result = ant_colony_optimization(problem, {"num_ants": 2, "iterations": 1}, seed=0)
    assert result.fitness == 10.0
    np.testing.assert_array_equal(result.solution, seen[1])
    assert result.extras["state"].best_feasible


def test_only_feasible_ants_are_returned_once_one_is_seen():
    def feasible(x):
        return x[0] > 2.0

    problem = OptimizationProblem(_sphere, 2, [(-5, 5)] * 2, constraints=feasible)
    for seed in range(20):
        result = ant_colony_optimization(problem, {"num_ants": 10, "iterations": 10}, seed=seed)
        assert feasible(result.solution), seed


def test_pheromone_note_logged_at_debug(caplog):
    problem = OptimizationProblem(_sphere, 2, [(-5, 5)] * 2)
    with caplog.at_level(logging.DEBUG, logger="heuropt.engine.algorithm.aco.aco"):
        ant_colony_optimization(problem, {"num_ants": 2, "iterations": 2}, seed=0)
    notes = [r for r in caplog.records if "does not bias" in r.getMessage()]
    assert len(notes) == 1
