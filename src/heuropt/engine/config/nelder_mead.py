"""Nelder-Mead configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple

import numpy as np

from heuropt.foundation.exceptions import ConfigurationError

from .base import _require_finite, _require_positive_int, _SerializableConfig, coerce_config

Simplex = Tuple[Tuple[float, ...], ...]


@dataclass(frozen=True)
class NelderMeadConfigData(_SerializableConfig):
    label: ClassVar[str] = "Nelder-Mead"
    initial_simplex: Optional[Simplex] = None
    max_iterations: int = 1000
    tolerance: float = 1e-6

    def __post_init__(self) -> None:
        if self.initial_simplex is not None:
            try:
                vertices = tuple(tuple(float(v) for v in row) for row in np.asarray(self.initial_simplex, dtype=float))
            except (TypeError, ValueError) as exc:
                raise ConfigurationError("Nelder-Mead initial_simplex must be a 2-D array of numbers.") from exc
            object.__setattr__(self, "initial_simplex", vertices)

    def validate(self) -> None:
        _require_positive_int(self.max_iterations, "max_iterations", self.label)
        _require_finite(self.tolerance, "tolerance", self.label)
        if self.tolerance < 0.0:
            raise ConfigurationError(f"Nelder-Mead tolerance must be >= 0; got {self.tolerance}.")

    def simplex_array(self) -> np.ndarray | None:
        if self.initial_simplex is None:
            return None
        return np.array(self.initial_simplex, dtype=float)


class NelderMeadConfig:
    """Declarative configuration holder for Nelder-Mead settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def initial_simplex(self, value: Sequence[Sequence[float]] | None) -> "NelderMeadConfig":
        self._cfg["initial_simplex"] = value
        return self

    def max_iterations(self, value: int) -> "NelderMeadConfig":
        self._cfg["max_iterations"] = value
        return self

    def tolerance(self, value: float) -> "NelderMeadConfig":
        self._cfg["tolerance"] = value
        return self

    def fixed(self) -> NelderMeadConfigData:
        return coerce_config(NelderMeadConfigData, self._cfg)
