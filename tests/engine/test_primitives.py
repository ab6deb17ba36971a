from __future__ import annotations

import math

import numpy as np
import pytest

from heuropt.engine.primitives import (
    best_index,
    clamp,
    evaluate,
    initialize_population,
    is_better,
    is_feasible,
    rank_indices,
    resolve_rng,
    sample_feasible_population,
    worsening,
    worst_fitness,
)
from heuropt.foundation.problem import OptimizationProblem


def _problem(objective=lambda x: float(np.sum(x)), minimize=True, constraints=None):
    return OptimizationProblem(objective, 2, [(-1.0, 1.0), (0.0, 0.0)], minimize=minimize, constraints=constraints)


def test_resolve_rng_passes_generators_through():
    rng = np.random.default_rng(1)
    assert resolve_rng(rng) is rng
    a = resolve_rng(7).random(3)
    b = resolve_rng(np.random.SeedSequence(7)).random(3)
    np.testing.assert_array_equal(a, b)


def test_initialize_population_respects_bounds():
    rng = np.random.default_rng(0)
    pop = initialize_population(50, 2, np.array([-1.0, 0.0]), np.array([1.0, 0.0]), rng)
    assert pop.shape == (50, 2)
    assert np.all(pop[:, 0] >= -1.0) and np.all(pop[:, 0] < 1.0)
    assert np.all(pop[:, 1] == 0.0)


def test_initialize_population_rejects_empty():
    with pytest.raises(ValueError):
        initialize_population(0, 2, np.zeros(2), np.ones(2), np.random.default_rng(0))


def test_clamp_returns_copy():
    x = np.array([-3.0, 0.5])
    out = clamp(x, np.array([-1.0, 0.0]), np.array([1.0, 0.25]))
    np.testing.assert_array_equal(out, [-1.0, 0.25])
    assert x[0] == -3.0


def test_comparator_and_worst():
    assert is_better(1.0, 2.0, minimize=True)
    assert is_better(2.0, 1.0, minimize=False)
    assert not is_better(1.0, 1.0, minimize=True)
    assert worst_fitness(True) == math.inf
    assert worst_fitness(False) == -math.inf


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
@pytest.mark.parametrize("minimize", [True, False])
def test_evaluate_maps_non_finite_to_worst(bad, minimize):
    problem = _problem(objective=lambda x: bad, minimize=minimize)
    assert evaluate(problem, np.zeros(2)) == worst_fitness(minimize)


def test_evaluate_converts_to_float():
    problem = _problem(objective=lambda x: np.float32(1.5))
    value = evaluate(problem, np.zeros(2))
    assert type(value) is float and value == 1.5


def test_is_feasible():
    assert is_feasible(_problem(), np.zeros(2))
    problem = _problem(constraints=lambda x: x[0] > 0)
    assert is_feasible(problem, np.array([0.5, 0.0]))
    assert not is_feasible(problem, np.array([-0.5, 0.0]))


def test_sample_feasible_population_retries():
    problem = _problem(constraints=lambda x: x[0] > 0)
    pop, infeasible = sample_feasible_population(problem, 20, np.random.default_rng(3))
    assert infeasible == 0
    assert np.all(pop[:, 0] > 0)


def test_sample_feasible_population_counts_failures():
    problem = _problem(constraints=lambda x: False)
    pop, infeasible = sample_feasible_population(problem, 5, np.random.default_rng(3), max_attempts=2)
    assert pop.shape == (5, 2)
    assert infeasible == 5


def test_worsening_directions_and_infinities():
    assert worsening(3.0, 1.0, minimize=True) == 2.0
    assert worsening(3.0, 1.0, minimize=False) == -2.0
    assert worsening(math.inf, 1.0, minimize=True) == math.inf
    assert worsening(1.0, math.inf, minimize=True) == -math.inf
    assert worsening(math.inf, math.inf, minimize=True) == 0.0


def test_rank_and_best_index_are_stable():
    fitness = np.array([3.0, 1.0, 1.0, 5.0])
    np.testing.assert_array_equal(rank_indices(fitness, True), [1, 2, 0, 3])
    np.testing.assert_array_equal(rank_indices(fitness, False), [3, 0, 1, 2])
    assert best_index(fitness, True) == 1
    assert best_index(fitness, False) == 3
