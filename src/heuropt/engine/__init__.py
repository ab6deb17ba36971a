"""Algorithms, their configuration and the shared numerical primitives."""

from .algorithm import (
    Algorithm,
    AlgorithmState,
    AntColony,
    DifferentialEvolution,
    GeneticAlgorithm,
    NelderMead,
    ParticleSwarm,
    SimulatedAnnealing,
    available_algorithms,
    resolve_algorithm,
)
from .restarts import RestartSummary, run_restarts

__all__ = [
    "Algorithm",
    "AlgorithmState",
    "AntColony",
    "DifferentialEvolution",
    "GeneticAlgorithm",
    "NelderMead",
    "ParticleSwarm",
    "RestartSummary",
    "SimulatedAnnealing",
    "available_algorithms",
    "resolve_algorithm",
    "run_restarts",
]
