"""Problem/result types, errors, logging and registries shared by every algorithm."""

from .exceptions import (
    BoundsError,
    ConfigurationError,
    HeuroptError,
    InitialSimplexError,
    InvalidAlgorithmError,
    MissingConfigError,
    ProblemDimensionError,
    ProblemError,
)
from .logging import configure_heuropt_logging
from .observer import LoggingObserver, NoOpObserver, RunContext, RunObserver
from .problem import Bound, OptimizationProblem
from .registry import Registry
from .result import OptimizationResult

__all__ = [
    "Bound",
    "BoundsError",
    "ConfigurationError",
    "HeuroptError",
    "InitialSimplexError",
    "InvalidAlgorithmError",
    "LoggingObserver",
    "MissingConfigError",
    "NoOpObserver",
    "OptimizationProblem",
    "OptimizationResult",
    "ProblemDimensionError",
    "ProblemError",
    "Registry",
    "RunContext",
    "RunObserver",
    "configure_heuropt_logging",
]
