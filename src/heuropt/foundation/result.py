from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


@dataclass
class OptimizationResult:
    """Outcome of a single optimization run.

    ``convergence_history`` holds the best fitness known after each recorded
    step (generation, iteration or cooling step, depending on the algorithm).
    ``infeasible`` counts population slots that fell back to their parent
    after the constraint retry budget ran out.
    """

    solution: np.ndarray
    fitness: float
    iterations: int
    convergence_history: list[float]
    evaluations: int
    success: bool = True
    algorithm: str = ""
    message: str = ""
    infeasible: int = 0
    extras: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def dimensions(self) -> int:
        return int(self.solution.shape[0])

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view (arrays converted to lists, extras omitted)."""
        return {
            "algorithm": self.algorithm,
            "solution": [float(v) for v in self.solution],
            "fitness": float(self.fitness),
            "iterations": int(self.iterations),
            "convergence_history": [float(v) for v in self.convergence_history],
            "evaluations": int(self.evaluations),
            "success": bool(self.success),
            "message": self.message,
            "infeasible": int(self.infeasible),
        }


__all__ = ["OptimizationResult"]
