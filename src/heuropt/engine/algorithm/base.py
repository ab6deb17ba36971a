"""
Shared infrastructure for the single-objective algorithms.

- AlgorithmState: fields every run carries (rng, best-so-far, accumulators)
- Algorithm: run() template (validate, initialize, step until done, build result)
- helpers to offer a candidate to the best-so-far and to notify observers

Step functions never mutate the state they receive: they return a new state
(``dataclasses.replace``) with the evaluation counter and convergence history
advanced by exactly what that step did.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Generic, Type, TypeVar

import numpy as np

from heuropt.engine.config.base import _SerializableConfig, coerce_config
from heuropt.engine.primitives import SeedLike, is_better, resolve_rng
from heuropt.foundation.observer import RunContext, RunObserver, resolve_observer
from heuropt.foundation.problem import OptimizationProblem
from heuropt.foundation.result import OptimizationResult


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass
class AlgorithmState:
    """
    Base state container.

    Attributes
    ----------
    rng : np.random.Generator
        Generator owned by this run.
    best_x : np.ndarray
        Best candidate seen so far, shape (dimensions,).
    best_f : float
        Fitness of ``best_x``.
    n_eval : int
        Objective calls so far.
    generation : int
        Completed steps.
    history : tuple of float
        Best-so-far fitness after each completed step.
    infeasible : int
        Slots that fell back to their parent after exhausting the retry budget.
    """

    rng: np.random.Generator
    best_x: np.ndarray
    best_f: float
    n_eval: int = 0
    generation: int = 0
    history: tuple[float, ...] = ()
    infeasible: int = 0


S = TypeVar("S", bound=AlgorithmState)
C = TypeVar("C", bound=_SerializableConfig)


def offer(
    best_x: np.ndarray,
    best_f: float,
    x: np.ndarray,
    f: float,
    minimize: bool,
) -> tuple[np.ndarray, float]:
    """Return the new (best_x, best_f) after seeing ``(x, f)``; copies ``x`` on improvement."""
    if is_better(f, best_f, minimize):
        return x.copy(), f
    return best_x, best_f


def close_step(state: S, n_new_evals: int, **changes: Any) -> S:
    """New state for a finished step: bumps generation, records best_f, adds evaluations."""
    merged = replace(state, **changes)
    return replace(
        merged,
        n_eval=state.n_eval + n_new_evals,
        generation=state.generation + 1,
        history=state.history + (merged.best_f,),
    )


def notify_generation(observer: RunObserver, state: AlgorithmState) -> None:
    observer.on_generation(
        state.generation,
        state.best_f,
        state.best_x,
        {"evaluations": state.n_eval, "infeasible": state.infeasible},
    )


class Algorithm(ABC, Generic[C, S]):
    """Template for a single run: ``run()`` drives ``initialize`` / ``step`` / ``should_terminate``."""

    name: ClassVar[str] = "algorithm"
    config_cls: ClassVar[Type[_SerializableConfig]]

    def __init__(self, config: Any = None) -> None:
        self.cfg: C = coerce_config(self.config_cls, config)  # type: ignore[assignment]

    @abstractmethod
    def initialize(self, problem: OptimizationProblem, rng: np.random.Generator) -> S:
        """Create the run state (initial population, first evaluations)."""

    @abstractmethod
    def step(self, state: S, problem: OptimizationProblem) -> S:
        """Advance one generation/iteration and return the new state."""

    @abstractmethod
    def should_terminate(self, state: S) -> bool: ...

    def check_problem(self, problem: OptimizationProblem) -> None:
        """Reject settings that are incompatible with ``problem``; called before any evaluation."""

    def iterations(self, state: S) -> int:
        return state.generation

    def termination_message(self, state: S) -> str:
        return f"completed {state.generation} steps"

    def build_result(self, state: S) -> OptimizationResult:
        return OptimizationResult(
            solution=state.best_x.copy(),
            fitness=float(state.best_f),
            iterations=self.iterations(state),
            convergence_history=list(state.history),
            evaluations=state.n_eval,
            success=True,
            algorithm=self.name,
            message=self.termination_message(state),
            infeasible=state.infeasible,
            extras={"state": state},
        )

    def run(
        self,
        problem: OptimizationProblem,
        seed: SeedLike = None,
        observer: RunObserver | None = None,
    ) -> OptimizationResult:
        """Run to completion.

        Parameters
        ----------
        problem : OptimizationProblem
            Problem to optimize; validated when it was constructed.
        seed : int, SeedSequence or Generator, optional
            Source of randomness for this run only.
        observer : RunObserver, optional
            Receives start/step/end events.

        Returns
        -------
        OptimizationResult
        """
        self.check_problem(problem)
        obs = resolve_observer(observer)
        rng = resolve_rng(seed)
        _logger().debug("[%s] starting on '%s' (%d dims)", self.name, problem.name, problem.dimensions)
        obs.on_start(RunContext(problem=problem, algorithm_name=self.name, config=self.cfg.to_dict()))

        state = self.initialize(problem, rng)
        while not self.should_terminate(state):
            state = self.step(state, problem)
            notify_generation(obs, state)

        result = self.build_result(state)
        if result.infeasible:
            _logger().debug("[%s] %d slot(s) fell back after exhausting feasibility retries", self.name, result.infeasible)
        _logger().debug(
            "[%s] finished: fitness=%.6g evaluations=%d %s", self.name, result.fitness, result.evaluations, result.message
        )
        obs.on_end(result)
        return result


__all__ = ["Algorithm", "AlgorithmState", "close_step", "notify_generation", "offer"]
