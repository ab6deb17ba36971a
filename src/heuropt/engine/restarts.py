"""
Independent restarts of one algorithm on one problem.

Each restart gets its own generator spawned from a single ``SeedSequence``,
so the set of results depends only on ``seed`` and ``n_runs``, not on
``n_jobs`` or the joblib backend.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from joblib import Parallel, delayed  # type: ignore[import-untyped]

from heuropt.engine.algorithm.registry import build_algorithm
from heuropt.engine.primitives import is_better
from heuropt.foundation.exceptions import ConfigurationError
from heuropt.foundation.problem import OptimizationProblem
from heuropt.foundation.result import OptimizationResult


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass
class RestartSummary:
    """Best result plus every individual run, in spawn order."""

    best: OptimizationResult
    results: list[OptimizationResult] = field(default_factory=list)

    @property
    def fitness_values(self) -> list[float]:
        return [r.fitness for r in self.results]

    @property
    def total_evaluations(self) -> int:
        return sum(r.evaluations for r in self.results)


def _restart_worker(
    problem: OptimizationProblem,
    algorithm: str,
    config: Any,
    seed: np.random.SeedSequence,
) -> OptimizationResult:
    return build_algorithm(algorithm, config).run(problem, seed=np.random.default_rng(seed))


def spawn_seeds(seed: int | np.random.SeedSequence | None, n_runs: int) -> list[np.random.SeedSequence]:
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    return root.spawn(n_runs)


def run_restarts(
    problem: OptimizationProblem,
    algorithm: str,
    config: Any = None,
    n_runs: int = 4,
    seed: int | np.random.SeedSequence | None = None,
    n_jobs: int = 1,
    backend: str | None = None,
) -> RestartSummary:
    """
    Run ``algorithm`` ``n_runs`` times with independent seeds.

    Parameters
    ----------
    problem : OptimizationProblem
        Problem shared by all runs. Its callables must be picklable when a
        process-based backend is used.
    algorithm : str
        Registry name (see ``available_algorithms()``).
    config : optional
        Anything accepted by the algorithm's constructor; validated once up front.
    n_runs : int
        Number of restarts (>= 1).
    seed : int or SeedSequence, optional
        Root entropy; children are obtained with ``SeedSequence.spawn``.
    n_jobs : int
        1 runs sequentially in-process; other values go through ``joblib.Parallel``.
    backend : str, optional
        joblib backend name (e.g. ``"loky"``, ``"threading"``).

    Returns
    -------
    RestartSummary
    """
    if isinstance(n_runs, bool) or not isinstance(n_runs, int) or n_runs < 1:
        raise ConfigurationError(f"n_runs must be a positive integer; got {n_runs!r}.")
    if isinstance(n_jobs, bool) or not isinstance(n_jobs, int) or n_jobs == 0:
        raise ConfigurationError(
            f"n_jobs must be a non-zero integer; got {n_jobs!r}.", suggestion="Use 1 to run sequentially or -1 for all cores"
        )
    algo = build_algorithm(algorithm, config)
    cfg = algo.cfg
    seeds = spawn_seeds(seed, n_runs)
    _logger().info("Running %d restart(s) of %s on '%s' (n_jobs=%s)", n_runs, algo.name, problem.name, n_jobs)

    if n_jobs == 1:
        results = [_restart_worker(problem, algo.name, cfg, s) for s in seeds]
    else:
        results = Parallel(n_jobs=n_jobs, backend=backend)(
            delayed(_restart_worker)(problem, algo.name, cfg, s) for s in seeds
        )

    best = results[0]
    for result in results[1:]:
        if is_better(result.fitness, best.fitness, problem.minimize):
            best = result
    return RestartSummary(best=best, results=list(results))


__all__ = ["RestartSummary", "run_restarts", "spawn_seeds"]
