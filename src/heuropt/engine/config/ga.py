"""Genetic algorithm configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from .base import _require_positive_int, _require_probability, _SerializableConfig, coerce_config


@dataclass(frozen=True)
class GAConfigData(_SerializableConfig):
    label: ClassVar[str] = "GA"
    population_size: int = 50
    generations: int = 100
    mutation_rate: float = 0.1
    crossover_rate: float = 0.8
    elitism_rate: float = 0.1
    tournament_size: int = 3
    max_attempts: int = 100

    def validate(self) -> None:
        _require_positive_int(self.population_size, "population_size", self.label)
        _require_positive_int(self.generations, "generations", self.label)
        _require_positive_int(self.tournament_size, "tournament_size", self.label)
        _require_positive_int(self.max_attempts, "max_attempts", self.label)
        _require_probability(self.mutation_rate, "mutation_rate", self.label)
        _require_probability(self.crossover_rate, "crossover_rate", self.label)
        _require_probability(self.elitism_rate, "elitism_rate", self.label)

    @property
    def elite_count(self) -> int:
        return int(self.population_size * self.elitism_rate)


class GAConfig:
    """Declarative configuration holder for genetic algorithm settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def population_size(self, value: int) -> "GAConfig":
        self._cfg["population_size"] = value
        return self

    def generations(self, value: int) -> "GAConfig":
        self._cfg["generations"] = value
        return self

    def mutation_rate(self, value: float) -> "GAConfig":
        self._cfg["mutation_rate"] = value
        return self

    def crossover_rate(self, value: float) -> "GAConfig":
        self._cfg["crossover_rate"] = value
        return self

    def elitism_rate(self, value: float) -> "GAConfig":
        self._cfg["elitism_rate"] = value
        return self

    def tournament_size(self, value: int) -> "GAConfig":
        self._cfg["tournament_size"] = value
        return self

    def max_attempts(self, value: int) -> "GAConfig":
        self._cfg["max_attempts"] = value
        return self

    def fixed(self) -> GAConfigData:
        return coerce_config(GAConfigData, self._cfg)
