# algorithm/nelder_mead/nelder_mead.py
"""
Nelder-Mead downhill simplex, bounded by clamping.

Standard coefficients: reflection 1, expansion 2, contraction 0.5 and
shrink 0.5. Every generated vertex is clipped to the bounds. Vertices that
violate the constraints still cost one objective call but score as the worst
possible value.

References
----------
J. A. Nelder and R. Mead, "A Simplex Method for Function Minimization",
The Computer Journal 7(4), 1965.
"""

from __future__ import annotations

from dataclasses import replace

import numpy as np

from heuropt.engine.algorithm.base import Algorithm, close_step
from heuropt.engine.config.nelder_mead import NelderMeadConfigData
from heuropt.engine.primitives import (
    best_index,
    clamp,
    evaluate,
    initialize_population,
    is_better,
    is_feasible,
    rank_indices,
    worst_fitness,
)
from heuropt.foundation.exceptions import InitialSimplexError
from heuropt.foundation.problem import OptimizationProblem
from heuropt.foundation.result import OptimizationResult

from .state import NelderMeadState

REFLECTION = 1.0
EXPANSION = 2.0
CONTRACTION = 0.5
SHRINK = 0.5


def score(problem: OptimizationProblem, x: np.ndarray) -> float:
    f = evaluate(problem, x)
    if not is_feasible(problem, x):
        return worst_fitness(problem.minimize)
    return f


class NelderMead(Algorithm[NelderMeadConfigData, NelderMeadState]):
    """Nelder-Mead simplex search.

    Stops when the spread between the best and worst vertex drops below
    ``tolerance`` or after ``max_iterations`` iterations.
    """

    name = "nelder_mead"
    config_cls = NelderMeadConfigData

    def check_problem(self, problem: OptimizationProblem) -> None:
        simplex = self.cfg.simplex_array()
        expected = (problem.dimensions + 1, problem.dimensions)
        if simplex is not None and simplex.shape != expected:
            raise InitialSimplexError(tuple(simplex.shape), problem.dimensions)

    def initialize(self, problem: OptimizationProblem, rng: np.random.Generator) -> NelderMeadState:
        n = problem.dimensions
        simplex = self.cfg.simplex_array()
        if simplex is None:
            simplex = initialize_population(n + 1, n, problem.xl, problem.xu, rng)
        else:
            simplex = clamp(simplex, problem.xl, problem.xu)
        values = np.array([score(problem, v) for v in simplex])
        idx = best_index(values, problem.minimize)
        return NelderMeadState(
            rng=rng,
            best_x=simplex[idx].copy(),
            best_f=float(values[idx]),
            n_eval=n + 1,
            simplex=simplex,
            values=values,
            minimize=problem.minimize,
        )

    def step(self, state: NelderMeadState, problem: OptimizationProblem) -> NelderMeadState:
        minimize = problem.minimize
        xl, xu = problem.xl, problem.xu
        n = problem.dimensions

        order = rank_indices(state.values, minimize)
        simplex = state.simplex[order].copy()
        values = state.values[order].copy()
        ranked = {"simplex": simplex, "values": values, "best_x": simplex[0].copy(), "best_f": float(values[0])}

        spread = 0.0 if values[-1] == values[0] else abs(values[-1] - values[0])
        if spread < self.cfg.tolerance:
            return close_step(state, 0, converged=True, **ranked)

        centroid = simplex[:-1].mean(axis=0)
        worst, f_worst = simplex[-1], values[-1]
        evals = 0

        reflected = clamp(centroid + REFLECTION * (centroid - worst), xl, xu)
        f_reflected = score(problem, reflected)
        evals += 1

        if is_better(f_reflected, values[0], minimize):
            expanded = clamp(centroid + EXPANSION * (reflected - centroid), xl, xu)
            f_expanded = score(problem, expanded)
            evals += 1
            if is_better(f_expanded, f_reflected, minimize):
                simplex[-1], values[-1] = expanded, f_expanded
            else:
                simplex[-1], values[-1] = reflected, f_reflected
        elif is_better(f_reflected, values[n - 1], minimize):
            simplex[-1], values[-1] = reflected, f_reflected
        else:
            contracted = clamp(centroid + CONTRACTION * (worst - centroid), xl, xu)
            f_contracted = score(problem, contracted)
            evals += 1
            if is_better(f_contracted, f_worst, minimize):
                simplex[-1], values[-1] = contracted, f_contracted
            else:
                for i in range(1, n + 1):
                    simplex[i] = clamp(simplex[0] + SHRINK * (simplex[i] - simplex[0]), xl, xu)
                    values[i] = score(problem, simplex[i])
                evals += n

        return close_step(state, evals, **ranked)

    def should_terminate(self, state: NelderMeadState) -> bool:
        return state.converged or state.generation >= self.cfg.max_iterations

    def termination_message(self, state: NelderMeadState) -> str:
        return "converged" if state.converged else "max_iterations reached"

    def build_result(self, state: NelderMeadState) -> OptimizationResult:
        # best_x/best_f were ranked before the last move; report the final simplex.
        idx = best_index(state.values, state.minimize)
        return super().build_result(replace(state, best_x=state.simplex[idx].copy(), best_f=float(state.values[idx])))


__all__ = ["NelderMead", "score"]
