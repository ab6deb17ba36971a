"""Genetic algorithm."""

from .ga import GeneticAlgorithm
from .operators import make_offspring, next_generation, single_point_crossover, tournament_selection, uniform_mutation
from .state import GAState

__all__ = [
    "GAState",
    "GeneticAlgorithm",
    "make_offspring",
    "next_generation",
    "single_point_crossover",
    "tournament_selection",
    "uniform_mutation",
]
