"""Differential evolution configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from heuropt.foundation.exceptions import ConfigurationError

from .base import _require_finite, _require_positive_int, _require_probability, _SerializableConfig, coerce_config


@dataclass(frozen=True)
class DEConfigData(_SerializableConfig):
    label: ClassVar[str] = "DE"
    population_size: int = 50
    generations: int = 100
    f: float = 0.8
    cr: float = 0.9
    max_attempts: int = 100

    _aliases: ClassVar[Dict[str, str]] = {"F": "f", "CR": "cr"}

    def validate(self) -> None:
        _require_positive_int(self.population_size, "population_size", self.label)
        _require_positive_int(self.generations, "generations", self.label)
        _require_positive_int(self.max_attempts, "max_attempts", self.label)
        _require_finite(self.f, "F", self.label)
        _require_probability(self.cr, "CR", self.label)
        if self.population_size < 4:
            raise ConfigurationError(
                f"DE needs population_size >= 4 to draw three distinct donors; got {self.population_size}.",
                details={"population_size": self.population_size},
            )


class DEConfig:
    """Declarative configuration holder for differential evolution settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def population_size(self, value: int) -> "DEConfig":
        self._cfg["population_size"] = value
        return self

    def generations(self, value: int) -> "DEConfig":
        self._cfg["generations"] = value
        return self

    def f(self, value: float) -> "DEConfig":
        self._cfg["f"] = value
        return self

    def cr(self, value: float) -> "DEConfig":
        self._cfg["cr"] = value
        return self

    def max_attempts(self, value: int) -> "DEConfig":
        self._cfg["max_attempts"] = value
        return self

    def fixed(self) -> DEConfigData:
        return coerce_config(DEConfigData, self._cfg)
