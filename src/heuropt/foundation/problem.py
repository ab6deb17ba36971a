"""Single-objective, box-bounded problem definition."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, NamedTuple, Sequence, Union

import numpy as np

from .exceptions import BoundsError, ProblemDimensionError

Objective = Callable[[np.ndarray], float]
Constraint = Callable[[np.ndarray], bool]


class Bound(NamedTuple):
    """Inclusive ``[min, max]`` range of one dimension."""

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


BoundLike = Union[Bound, Sequence[float], Mapping[str, float]]


def _as_bound(raw: Any, index: int) -> Bound:
    if isinstance(raw, Bound):
        lo, hi = raw
    elif isinstance(raw, Mapping):
        try:
            lo, hi = raw["min"], raw["max"]
        except KeyError as exc:
            raise BoundsError(f"Bound {index} must define 'min' and 'max'; got keys {sorted(raw)}.", index) from exc
    else:
        try:
            lo, hi = raw
        except (TypeError, ValueError) as exc:
            raise BoundsError(f"Bound {index} must be a (min, max) pair; got {raw!r}.", index) from exc
    try:
        lo_f, hi_f = float(lo), float(hi)
    except (TypeError, ValueError) as exc:
        raise BoundsError(f"Bound {index} has non-numeric limits {raw!r}.", index) from exc
    if not (math.isfinite(lo_f) and math.isfinite(hi_f)):
        raise BoundsError(f"Bound {index} must be finite; got [{lo_f}, {hi_f}].", index)
    if lo_f > hi_f:
        raise BoundsError(f"Bound {index} has min > max ({lo_f} > {hi_f}).", index)
    return Bound(lo_f, hi_f)


@dataclass(frozen=True)
class OptimizationProblem:
    """
    Scalar objective over a box-bounded real vector space.

    Parameters
    ----------
    objective : callable
        ``f(x) -> float`` for a float64 vector ``x`` of length ``dimensions``.
    dimensions : int
        Number of decision variables.
    bounds : sequence
        One bound per dimension: a :class:`Bound`, a ``(min, max)`` pair or a
        ``{"min": ..., "max": ...}`` mapping. Normalised to a tuple of ``Bound``.
    minimize : bool
        Minimize when True, maximize otherwise.
    constraints : callable, optional
        ``g(x) -> bool``; candidates for which it returns False are infeasible.
    name : str
        Label used in logs and results.

    Raises
    ------
    ProblemDimensionError
        If ``dimensions < 1`` or the number of bounds differs from ``dimensions``.
    BoundsError
        If a bound is malformed, non-finite or has ``min > max``.
    """

    objective: Objective
    dimensions: int
    bounds: Sequence[BoundLike]
    minimize: bool = True
    constraints: Constraint | None = None
    name: str = "problem"
    _xl: np.ndarray = field(init=False, repr=False, compare=False)
    _xu: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not callable(self.objective):
            raise TypeError("objective must be callable.")
        if self.constraints is not None and not callable(self.constraints):
            raise TypeError("constraints must be callable or None.")
        dims = int(self.dimensions)
        if dims < 1:
            raise ProblemDimensionError(f"dimensions must be at least 1; got {self.dimensions}.", dimensions=dims)
        bounds = tuple(_as_bound(raw, idx) for idx, raw in enumerate(self.bounds))
        if len(bounds) != dims:
            raise ProblemDimensionError(
                f"Expected {dims} bounds (one per dimension); got {len(bounds)}.",
                dimensions=dims,
                n_bounds=len(bounds),
            )
        xl = np.array([b.min for b in bounds], dtype=float)
        xu = np.array([b.max for b in bounds], dtype=float)
        xl.flags.writeable = False
        xu.flags.writeable = False
        object.__setattr__(self, "dimensions", dims)
        object.__setattr__(self, "bounds", bounds)
        object.__setattr__(self, "_xl", xl)
        object.__setattr__(self, "_xu", xu)

    @property
    def xl(self) -> np.ndarray:
        """Lower bounds, shape ``(dimensions,)``."""
        return self._xl

    @property
    def xu(self) -> np.ndarray:
        """Upper bounds, shape ``(dimensions,)``."""
        return self._xu

    @property
    def span(self) -> np.ndarray:
        return self._xu - self._xl

    @classmethod
    def from_box(
        cls,
        objective: Objective,
        dimensions: int,
        lower: float,
        upper: float,
        **kwargs: Any,
    ) -> "OptimizationProblem":
        """Problem with the same ``[lower, upper]`` range in every dimension."""
        return cls(objective, dimensions, [(lower, upper)] * int(dimensions), **kwargs)


__all__ = ["Bound", "BoundLike", "Constraint", "Objective", "OptimizationProblem"]
