from __future__ import annotations

import logging

import numpy as np
import pytest

from heuropt.foundation.benchmarks import make_benchmark_problem
from heuropt.foundation.observer import LoggingObserver, NoOpObserver, RunContext, RunObserver, resolve_observer
from heuropt.foundation.result import OptimizationResult


def test_builtin_observers_satisfy_protocol():
    assert isinstance(NoOpObserver(), RunObserver)
    assert isinstance(LoggingObserver(), RunObserver)


def test_resolve_observer_defaults_to_noop():
    assert isinstance(resolve_observer(None), NoOpObserver)
    obs = LoggingObserver()
    assert resolve_observer(obs) is obs


def test_logging_observer_rejects_bad_interval():
    with pytest.raises(ValueError):
        LoggingObserver(every=0)


def test_logging_observer_logs_every_n(caplog):
    problem = make_benchmark_problem("sphere", 2)
    obs = LoggingObserver(every=2)
    with caplog.at_level(logging.INFO, logger="heuropt.foundation.observer"):
        obs.on_start(RunContext(problem=problem, algorithm_name="ga", config={}))
        for gen in range(1, 5):
            obs.on_generation(gen, 1.0 / gen, np.zeros(2), {"evaluations": gen * 10})
        obs.on_end(
            OptimizationResult(
                solution=np.zeros(2), fitness=0.25, iterations=4, convergence_history=[1, 0.5], evaluations=40
            )
        )
    steps = [r.getMessage() for r in caplog.records if "step" in r.getMessage()]
    assert steps == ["[ga] step 2 best=0.5 evals=20", "[ga] step 4 best=0.25 evals=40"]
    assert "start: problem=sphere" in caplog.records[0].getMessage()
    assert "done" in caplog.records[-1].getMessage()
