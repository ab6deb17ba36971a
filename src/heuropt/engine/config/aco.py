"""Ant colony configuration (continuous adaptation)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from .base import _require_finite, _require_positive_int, _require_probability, _SerializableConfig, coerce_config


@dataclass(frozen=True)
class ACOConfigData(_SerializableConfig):
    label: ClassVar[str] = "ACO"
    """ACO parameters.

    ``alpha`` and ``beta`` (pheromone and heuristic importance) are accepted
    and serialized but do not influence candidate construction.
    """

    num_ants: int = 20
    iterations: int = 100
    alpha: float = 1.0
    beta: float = 2.0
    evaporation: float = 0.5
    q: float = 100.0

    _aliases: ClassVar[Dict[str, str]] = {"Q": "q"}

    def validate(self) -> None:
        _require_positive_int(self.num_ants, "num_ants", self.label)
        _require_positive_int(self.iterations, "iterations", self.label)
        _require_finite(self.alpha, "alpha", self.label)
        _require_finite(self.beta, "beta", self.label)
        _require_probability(self.evaporation, "evaporation", self.label)
        _require_finite(self.q, "Q", self.label)


class ACOConfig:
    """Declarative configuration holder for ant colony settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def num_ants(self, value: int) -> "ACOConfig":
        self._cfg["num_ants"] = value
        return self

    def iterations(self, value: int) -> "ACOConfig":
        self._cfg["iterations"] = value
        return self

    def alpha(self, value: float) -> "ACOConfig":
        self._cfg["alpha"] = value
        return self

    def beta(self, value: float) -> "ACOConfig":
        self._cfg["beta"] = value
        return self

    def evaporation(self, value: float) -> "ACOConfig":
        self._cfg["evaporation"] = value
        return self

    def q(self, value: float) -> "ACOConfig":
        self._cfg["q"] = value
        return self

    def fixed(self) -> ACOConfigData:
        return coerce_config(ACOConfigData, self._cfg)
