"""Ant colony optimization for continuous problems."""

from .aco import AntColony, deposit
from .state import ACOState

__all__ = ["ACOState", "AntColony", "deposit"]
