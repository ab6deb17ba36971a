"""Particle swarm configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from .base import _require_finite, _require_positive_int, _SerializableConfig, coerce_config


@dataclass(frozen=True)
class PSOConfigData(_SerializableConfig):
    label: ClassVar[str] = "PSO"
    swarm_size: int = 30
    iterations: int = 100
    inertia_weight: float = 0.7
    cognitive_weight: float = 1.5
    social_weight: float = 1.5
    vmax_fraction: float = 0.2

    def validate(self) -> None:
        _require_positive_int(self.swarm_size, "swarm_size", self.label)
        _require_positive_int(self.iterations, "iterations", self.label)
        _require_finite(self.inertia_weight, "inertia_weight", self.label)
        _require_finite(self.cognitive_weight, "cognitive_weight", self.label)
        _require_finite(self.social_weight, "social_weight", self.label)
        _require_finite(self.vmax_fraction, "vmax_fraction", self.label, positive=True)


class PSOConfig:
    """Declarative configuration holder for particle swarm settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def swarm_size(self, value: int) -> "PSOConfig":
        self._cfg["swarm_size"] = value
        return self

    def iterations(self, value: int) -> "PSOConfig":
        self._cfg["iterations"] = value
        return self

    def inertia_weight(self, value: float) -> "PSOConfig":
        self._cfg["inertia_weight"] = value
        return self

    def cognitive_weight(self, value: float) -> "PSOConfig":
        self._cfg["cognitive_weight"] = value
        return self

    def social_weight(self, value: float) -> "PSOConfig":
        self._cfg["social_weight"] = value
        return self

    def vmax_fraction(self, value: float) -> "PSOConfig":
        self._cfg["vmax_fraction"] = value
        return self

    def fixed(self) -> PSOConfigData:
        return coerce_config(PSOConfigData, self._cfg)
