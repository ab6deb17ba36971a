from __future__ import annotations

import math

import numpy as np

from heuropt import particle_swarm
from heuropt.engine.algorithm.pso import ParticleSwarm, update_velocity
from heuropt.foundation.problem import OptimizationProblem


def _sphere(x):
    return float(np.sum(x**2))


def test_velocity_is_clipped():
    rng = np.random.default_rng(0)
    v = update_velocity(
        np.array([100.0, -100.0]),
        np.zeros(2),
        np.zeros(2),
        np.zeros(2),
        inertia=1.0,
        cognitive=1.5,
        social=1.5,
        vmax=np.array([2.0, 0.5]),
        rng=rng,
    )
    np.testing.assert_array_equal(v, [2.0, -0.5])


def test_velocity_follows_attractors():
    rng = np.random.default_rng(0)
    v = update_velocity(
        np.zeros(2),
        np.zeros(2),
        np.ones(2),
        np.ones(2),
        inertia=0.0,
        cognitive=1.0,
        social=1.0,
        vmax=np.full(2, 10.0),
        rng=rng,
    )
    assert np.all(v >= 0.0) and np.all(v <= 2.0)


def test_initial_velocities_within_unit_box():
    problem = OptimizationProblem(_sphere, 3, [(-100, 100)] * 3)
    state = ParticleSwarm({"swarm_size": 25}).initialize(problem, np.random.default_rng(0))
    assert np.all(np.abs(state.velocities) <= 1.0)
    assert state.n_eval == 25
    np.testing.assert_array_equal(state.pbest_x, state.positions)


def test_converges_on_sphere():
    problem = OptimizationProblem(_sphere, 2, [(-5, 5), (-5, 5)])
    result = particle_swarm(problem, {"swarm_size": 20, "iterations": 60}, seed=7)
    assert result.fitness < 1e-2
    assert result.evaluations == 20 * 61
    assert result.message == "completed 60 iterations"


def test_infeasible_positions_never_become_best():
    problem = OptimizationProblem(_sphere, 2, [(-5, 5), (-5, 5)], constraints=lambda x: x[0] >= 1.0)
    result = particle_swarm(problem, {"swarm_size": 15, "iterations": 20}, seed=2)
    assert result.solution[0] >= 1.0
    assert math.isfinite(result.fitness)


def test_all_infeasible_keeps_worst_fitness():
    problem = OptimizationProblem(_sphere, 2, [(-5, 5), (-5, 5)], constraints=lambda x: False)
    result = particle_swarm(problem, {"swarm_size": 4, "iterations": 3}, seed=0)
    assert result.fitness == math.inf
    assert result.evaluations == 4 * 4
