"""Nelder-Mead simplex search."""

from .nelder_mead import NelderMead, score
from .state import NelderMeadState

__all__ = ["NelderMead", "NelderMeadState", "score"]
