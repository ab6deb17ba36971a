"""
heuropt: gradient-free single-objective optimization.

Genetic algorithm, particle swarm, simulated annealing, differential
evolution, Nelder-Mead and continuous ant colony optimization over
box-bounded real vectors, all driven by a seedable ``np.random.Generator``.

>>> from heuropt import make_benchmark_problem, optimize
>>> result = optimize(make_benchmark_problem("sphere", 2), "de", seed=0)
"""

from heuropt.api import (
    ant_colony_optimization,
    available_algorithms,
    differential_evolution,
    genetic_algorithm,
    nelder_mead,
    optimize,
    particle_swarm,
    simulated_annealing,
)
from heuropt.engine.config import (
    ACOConfig,
    ACOConfigData,
    DEConfig,
    DEConfigData,
    GAConfig,
    GAConfigData,
    NelderMeadConfig,
    NelderMeadConfigData,
    PSOConfig,
    PSOConfigData,
    SAConfig,
    SAConfigData,
)
from heuropt.engine.restarts import RestartSummary, run_restarts
from heuropt.foundation import (
    Bound,
    BoundsError,
    ConfigurationError,
    HeuroptError,
    InitialSimplexError,
    InvalidAlgorithmError,
    LoggingObserver,
    OptimizationProblem,
    OptimizationResult,
    ProblemDimensionError,
    ProblemError,
    RunObserver,
    configure_heuropt_logging,
)
from heuropt.foundation.benchmarks import available_benchmarks, make_benchmark_problem

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Entry points
    "optimize",
    "genetic_algorithm",
    "particle_swarm",
    "simulated_annealing",
    "differential_evolution",
    "nelder_mead",
    "ant_colony_optimization",
    "available_algorithms",
    "run_restarts",
    "RestartSummary",
    # Problems and results
    "Bound",
    "OptimizationProblem",
    "OptimizationResult",
    "make_benchmark_problem",
    "available_benchmarks",
    # Configuration
    "GAConfig",
    "GAConfigData",
    "PSOConfig",
    "PSOConfigData",
    "SAConfig",
    "SAConfigData",
    "DEConfig",
    "DEConfigData",
    "NelderMeadConfig",
    "NelderMeadConfigData",
    "ACOConfig",
    "ACOConfigData",
    # Errors
    "HeuroptError",
    "ConfigurationError",
    "InvalidAlgorithmError",
    "ProblemError",
    "ProblemDimensionError",
    "BoundsError",
    "InitialSimplexError",
    # Observability
    "RunObserver",
    "LoggingObserver",
    "configure_heuropt_logging",
]
