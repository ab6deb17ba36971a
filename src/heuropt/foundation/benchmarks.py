"""
Standard single-objective test functions.

Each benchmark has a known global minimum of 0. They are used by the CLI and
the test-suite; callers normally supply their own objective.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .exceptions import ProblemError
from .problem import Objective, OptimizationProblem
from .registry import Registry


def sphere(x: np.ndarray) -> float:
    return float(np.sum(np.square(x)))


def rastrigin(x: np.ndarray) -> float:
    return float(10.0 * x.shape[0] + np.sum(np.square(x) - 10.0 * np.cos(2.0 * math.pi * x)))


def rosenbrock(x: np.ndarray) -> float:
    if x.shape[0] < 2:
        return float((1.0 - x[0]) ** 2)
    return float(np.sum(100.0 * np.square(x[1:] - np.square(x[:-1])) + np.square(1.0 - x[:-1])))


def ackley(x: np.ndarray) -> float:
    n = x.shape[0]
    term1 = -20.0 * math.exp(-0.2 * math.sqrt(float(np.sum(np.square(x))) / n))
    term2 = -math.exp(float(np.sum(np.cos(2.0 * math.pi * x))) / n)
    return term1 + term2 + 20.0 + math.e


@dataclass(frozen=True)
class Benchmark:
    name: str
    objective: Objective
    lower: float
    upper: float
    optimum: float = 0.0


BENCHMARKS: Registry[Benchmark] = Registry("benchmarks")
for _bench in (
    Benchmark("sphere", sphere, -10.0, 10.0),
    Benchmark("rastrigin", rastrigin, -5.12, 5.12),
    Benchmark("rosenbrock", rosenbrock, -5.0, 10.0),
    Benchmark("ackley", ackley, -32.768, 32.768),
):
    BENCHMARKS.register(_bench.name, _bench)


def available_benchmarks() -> list[str]:
    return BENCHMARKS.list()


def make_benchmark_problem(
    name: str,
    dimensions: int = 2,
    *,
    lower: float | None = None,
    upper: float | None = None,
    **kwargs: Any,
) -> OptimizationProblem:
    """Build an :class:`OptimizationProblem` for a registered benchmark.

    ``lower``/``upper`` override the benchmark's default box; extra keyword
    arguments (``minimize``, ``constraints``) are passed to the problem.
    """
    bench = BENCHMARKS.get(name, None)
    if bench is None:
        suggestions = BENCHMARKS.suggest(name)
        hint = f" Did you mean '{suggestions[0]}'?" if suggestions else ""
        raise ProblemError(
            f"Unknown benchmark '{name}'.{hint}",
            suggestion=f"Available benchmarks: {', '.join(available_benchmarks())}",
        )
    lo = bench.lower if lower is None else float(lower)
    hi = bench.upper if upper is None else float(upper)
    kwargs.setdefault("name", bench.name)
    return OptimizationProblem.from_box(bench.objective, dimensions, lo, hi, **kwargs)


__all__ = [
    "Benchmark",
    "BENCHMARKS",
    "ackley",
    "available_benchmarks",
    "make_benchmark_problem",
    "rastrigin",
    "rosenbrock",
    "sphere",
]
