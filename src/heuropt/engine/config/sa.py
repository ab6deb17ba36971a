"""Simulated annealing configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from heuropt.foundation.exceptions import ConfigurationError

from .base import _require_finite, _require_positive_int, _SerializableConfig, coerce_config


@dataclass(frozen=True)
class SAConfigData(_SerializableConfig):
    label: ClassVar[str] = "SA"
    initial_temperature: float = 10.0
    cooling_rate: float = 0.95
    min_temperature: float = 1e-3
    iterations_per_temp: int = 50

    def validate(self) -> None:
        _require_finite(self.initial_temperature, "initial_temperature", self.label, positive=True)
        _require_finite(self.min_temperature, "min_temperature", self.label, positive=True)
        _require_finite(self.cooling_rate, "cooling_rate", self.label)
        _require_positive_int(self.iterations_per_temp, "iterations_per_temp", self.label)
        if self.initial_temperature <= self.min_temperature:
            raise ConfigurationError(
                f"SA initial_temperature ({self.initial_temperature}) must exceed "
                f"min_temperature ({self.min_temperature}).",
                details={"initial_temperature": self.initial_temperature, "min_temperature": self.min_temperature},
            )
        if not 0.0 < self.cooling_rate < 1.0:
            raise ConfigurationError(
                f"SA cooling_rate must lie in (0, 1); got {self.cooling_rate}.",
                suggestion="Typical values are 0.8 - 0.99",
                details={"cooling_rate": self.cooling_rate},
            )

    @property
    def cooling_steps(self) -> int:
        """Number of temperature levels visited before the schedule ends."""
        steps = 0
        temperature = float(self.initial_temperature)
        while temperature > self.min_temperature:
            steps += 1
            temperature *= self.cooling_rate
        return steps


class SAConfig:
    """Declarative configuration holder for simulated annealing settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def initial_temperature(self, value: float) -> "SAConfig":
        self._cfg["initial_temperature"] = value
        return self

    def cooling_rate(self, value: float) -> "SAConfig":
        self._cfg["cooling_rate"] = value
        return self

    def min_temperature(self, value: float) -> "SAConfig":
        self._cfg["min_temperature"] = value
        return self

    def iterations_per_temp(self, value: int) -> "SAConfig":
        self._cfg["iterations_per_temp"] = value
        return self

    def fixed(self) -> SAConfigData:
        return coerce_config(SAConfigData, self._cfg)
