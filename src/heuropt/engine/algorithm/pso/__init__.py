"""Particle swarm optimization."""

from .pso import ParticleSwarm, update_velocity
from .state import PSOState

__all__ = ["PSOState", "ParticleSwarm", "update_velocity"]
