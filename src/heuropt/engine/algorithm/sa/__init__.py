"""Simulated annealing."""

from .sa import SimulatedAnnealing, acceptance_probability, neighbour
from .state import SAState

__all__ = ["SAState", "SimulatedAnnealing", "acceptance_probability", "neighbour"]
