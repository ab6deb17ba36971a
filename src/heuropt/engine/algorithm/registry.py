"""
Algorithm registry.

Maps algorithm names to their classes so the public entry points and the CLI
dispatch by name instead of hard-coded conditionals.
"""

from __future__ import annotations

from typing import Any, Type

from heuropt.foundation.exceptions import InvalidAlgorithmError
from heuropt.foundation.registry import Registry

from .aco import AntColony
from .base import Algorithm
from .de import DifferentialEvolution
from .ga import GeneticAlgorithm
from .nelder_mead import NelderMead
from .pso import ParticleSwarm
from .sa import SimulatedAnnealing

AlgorithmClass = Type[Algorithm[Any, Any]]

_ALGORITHMS: Registry[AlgorithmClass] | None = None


def _register_algorithms(registry: Registry[AlgorithmClass]) -> None:
    for cls in (GeneticAlgorithm, ParticleSwarm, SimulatedAnnealing, DifferentialEvolution, NelderMead, AntColony):
        registry.register(cls.name, cls)


def get_algorithms_registry() -> Registry[AlgorithmClass]:
    global _ALGORITHMS
    if _ALGORITHMS is None:
        registry: Registry[AlgorithmClass] = Registry("Algorithms")
        _register_algorithms(registry)
        _ALGORITHMS = registry
    return _ALGORITHMS


def available_algorithms() -> list[str]:
    return get_algorithms_registry().list()


def resolve_algorithm(name: str) -> AlgorithmClass:
    """Class registered under ``name`` (case-insensitive)."""
    registry = get_algorithms_registry()
    try:
        return registry[name]
    except KeyError as exc:
        raise InvalidAlgorithmError(name, registry.list(), registry.suggest(name)) from exc


def build_algorithm(name: str, config: Any = None) -> Algorithm[Any, Any]:
    return resolve_algorithm(name)(config)


__all__ = [
    "AlgorithmClass",
    "available_algorithms",
    "build_algorithm",
    "get_algorithms_registry",
    "resolve_algorithm",
]
