from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from .problem import OptimizationProblem
    from .result import OptimizationResult


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass
class RunContext:
    """
    Static context of an optimization run.
    Passed to on_start events.
    """

    problem: "OptimizationProblem"
    algorithm_name: str
    config: dict[str, Any]


@runtime_checkable
class RunObserver(Protocol):
    """
    Reacts to lifecycle events of a run.

    ``on_generation`` is called once per convergence-history entry, between
    generations, with the best-so-far fitness and solution.
    """

    def on_start(self, ctx: RunContext) -> None: ...

    def on_generation(
        self,
        generation: int,
        fitness: float,
        solution: np.ndarray,
        stats: dict[str, Any] | None = None,
    ) -> None: ...

    def on_end(self, result: "OptimizationResult") -> None: ...


class NoOpObserver:
    """Default observer; ignores every event."""

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_generation(
        self,
        generation: int,
        fitness: float,
        solution: np.ndarray,
        stats: dict[str, Any] | None = None,
    ) -> None:
        return None

    def on_end(self, result: "OptimizationResult") -> None:
        return None


class LoggingObserver:
    """Log progress every ``every`` generations through the ``logging`` module."""

    def __init__(self, every: int = 10, level: int = logging.INFO) -> None:
        if every < 1:
            raise ValueError("every must be >= 1.")
        self.every = every
        self.level = level
        self._algorithm = "?"

    def on_start(self, ctx: RunContext) -> None:
        self._algorithm = ctx.algorithm_name
        _logger().log(
            self.level,
            "[%s] start: problem=%s dims=%d minimize=%s",
            ctx.algorithm_name,
            ctx.problem.name,
            ctx.problem.dimensions,
            ctx.problem.minimize,
        )

    def on_generation(
        self,
        generation: int,
        fitness: float,
        solution: np.ndarray,
        stats: dict[str, Any] | None = None,
    ) -> None:
        if generation % self.every != 0:
            return
        n_eval = (stats or {}).get("evaluations")
        _logger().log(self.level, "[%s] step %d best=%.6g evals=%s", self._algorithm, generation, fitness, n_eval)

    def on_end(self, result: "OptimizationResult") -> None:
        _logger().log(
            self.level,
            "[%s] done: best=%.6g iterations=%d evaluations=%d %s",
            self._algorithm,
            result.fitness,
            result.iterations,
            result.evaluations,
            result.message,
        )


def resolve_observer(observer: RunObserver | None) -> RunObserver:
    return observer if observer is not None else NoOpObserver()


__all__ = ["RunContext", "RunObserver", "NoOpObserver", "LoggingObserver", "resolve_observer"]
