# algorithm/pso/pso.py
"""
Particle swarm optimization (global-best topology).

Particles are updated one after another and the global best is refreshed
as soon as a particle improves it, so later particles in the same iteration
already follow the new leader.

References
----------
J. Kennedy and R. Eberhart, "Particle Swarm Optimization", Proc. IEEE ICNN,
1995.
"""

from __future__ import annotations

import numpy as np

from heuropt.engine.algorithm.base import Algorithm, close_step, offer
from heuropt.engine.config.pso import PSOConfigData
from heuropt.engine.primitives import (
    clamp,
    evaluate,
    initialize_population,
    is_better,
    is_feasible,
    worst_fitness,
)
from heuropt.foundation.problem import OptimizationProblem

from .state import PSOState


def update_velocity(
    velocity: np.ndarray,
    position: np.ndarray,
    pbest: np.ndarray,
    gbest: np.ndarray,
    *,
    inertia: float,
    cognitive: float,
    social: float,
    vmax: np.ndarray,
    rng: np.random.Generator,
) -> np.ndarray:
    """Canonical PSO velocity update, clipped to ``[-vmax, vmax]`` per dimension."""
    r1 = rng.random(position.shape[0])
    r2 = rng.random(position.shape[0])
    new_v = inertia * velocity + cognitive * r1 * (pbest - position) + social * r2 * (gbest - position)
    return np.clip(new_v, -vmax, vmax)


class ParticleSwarm(Algorithm[PSOConfigData, PSOState]):
    """Particle swarm over a box-bounded real vector.

    Positions that violate the problem constraints are still evaluated but
    never become personal or global bests.
    """

    name = "pso"
    config_cls = PSOConfigData

    def initialize(self, problem: OptimizationProblem, rng: np.random.Generator) -> PSOState:
        cfg = self.cfg
        size, dims = cfg.swarm_size, problem.dimensions
        positions = initialize_population(size, dims, problem.xl, problem.xu, rng)
        velocities = rng.uniform(-1.0, 1.0, size=(size, dims))

        worst = worst_fitness(problem.minimize)
        pbest_f = np.full(size, worst)
        best_x, best_f = positions[0].copy(), worst
        for i in range(size):
            f = evaluate(problem, positions[i])
            if is_feasible(problem, positions[i]):
                pbest_f[i] = f
                best_x, best_f = offer(best_x, best_f, positions[i], f, problem.minimize)

        return PSOState(
            rng=rng,
            best_x=best_x,
            best_f=best_f,
            n_eval=size,
            positions=positions,
            velocities=velocities,
            pbest_x=positions.copy(),
            pbest_f=pbest_f,
        )

    def step(self, state: PSOState, problem: OptimizationProblem) -> PSOState:
        cfg = self.cfg
        rng = state.rng
        vmax = cfg.vmax_fraction * problem.span
        positions = state.positions.copy()
        velocities = state.velocities.copy()
        pbest_x = state.pbest_x.copy()
        pbest_f = state.pbest_f.copy()
        best_x, best_f = state.best_x, state.best_f

        for i in range(positions.shape[0]):
            velocities[i] = update_velocity(
                velocities[i],
                positions[i],
                pbest_x[i],
                best_x,
                inertia=cfg.inertia_weight,
                cognitive=cfg.cognitive_weight,
                social=cfg.social_weight,
                vmax=vmax,
                rng=rng,
            )
            positions[i] = clamp(positions[i] + velocities[i], problem.xl, problem.xu)
            f = evaluate(problem, positions[i])
            if not is_feasible(problem, positions[i]):
                continue
            if is_better(f, pbest_f[i], problem.minimize):
                pbest_x[i] = positions[i]
                pbest_f[i] = f
            best_x, best_f = offer(best_x, best_f, positions[i], f, problem.minimize)

        return close_step(
            state,
            positions.shape[0],
            positions=positions,
            velocities=velocities,
            pbest_x=pbest_x,
            pbest_f=pbest_f,
            best_x=best_x,
            best_f=best_f,
        )

    def should_terminate(self, state: PSOState) -> bool:
        return state.generation >= self.cfg.iterations

    def termination_message(self, state: PSOState) -> str:
        return f"completed {state.generation} iterations"


__all__ = ["ParticleSwarm", "update_velocity"]
