"""Differential evolution."""

from .de import DifferentialEvolution, binomial_crossover, make_trial, pick_donors
from .state import DEState

__all__ = ["DEState", "DifferentialEvolution", "binomial_crossover", "make_trial", "pick_donors"]
