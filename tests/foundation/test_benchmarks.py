from __future__ import annotations

import numpy as np
import pytest

from heuropt.foundation.benchmarks import (
    BENCHMARKS,
    ackley,
    available_benchmarks,
    make_benchmark_problem,
    rastrigin,
    rosenbrock,
    sphere,
)
from heuropt.foundation.exceptions import ProblemError


@pytest.mark.parametrize(
    "func, optimum",
    [
        (sphere, np.zeros(3)),
        (rastrigin, np.zeros(3)),
        (rosenbrock, np.ones(3)),
        (ackley, np.zeros(3)),
    ],
)
def test_known_minimum_is_zero(func, optimum):
    assert func(optimum) == pytest.approx(0.0, abs=1e-12)


def test_values_away_from_optimum():
    assert sphere(np.array([1.0, 2.0])) == 5.0
    assert rosenbrock(np.array([0.0, 0.0])) == 1.0
    assert rosenbrock(np.array([3.0])) == 4.0
    assert ackley(np.array([1.0, 1.0])) > 0.0


def test_registry_lists_all():
    assert available_benchmarks() == ["ackley", "rastrigin", "rosenbrock", "sphere"]
    assert BENCHMARKS["sphere"].lower == -10.0


def test_make_benchmark_problem_defaults_and_overrides():
    problem = make_benchmark_problem("rastrigin", 3)
    assert problem.name == "rastrigin"
    np.testing.assert_array_equal(problem.xl, [-5.12] * 3)

    narrowed = make_benchmark_problem("sphere", 2, lower=-1, upper=1, minimize=False)
    np.testing.assert_array_equal(narrowed.xu, [1.0, 1.0])
    assert narrowed.minimize is False


def test_unknown_benchmark_suggests_close_name():
    with pytest.raises(ProblemError, match="Did you mean 'sphere'"):
        make_benchmark_problem("spher")
