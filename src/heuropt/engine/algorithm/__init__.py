"""Algorithm implementations and the name registry."""

from .aco import AntColony
from .base import Algorithm, AlgorithmState
from .de import DifferentialEvolution
from .ga import GeneticAlgorithm
from .nelder_mead import NelderMead
from .pso import ParticleSwarm
from .registry import available_algorithms, build_algorithm, get_algorithms_registry, resolve_algorithm
from .sa import SimulatedAnnealing

__all__ = [
    "Algorithm",
    "AlgorithmState",
    "AntColony",
    "DifferentialEvolution",
    "GeneticAlgorithm",
    "NelderMead",
    "ParticleSwarm",
    "SimulatedAnnealing",
    "available_algorithms",
    "build_algorithm",
    "get_algorithms_registry",
    "resolve_algorithm",
]
