"""Per-algorithm configuration dataclasses and fluent builders."""

from .aco import ACOConfig, ACOConfigData
from .base import coerce_config
from .de import DEConfig, DEConfigData
from .ga import GAConfig, GAConfigData
from .loader import algorithm_section, load_run_spec
from .nelder_mead import NelderMeadConfig, NelderMeadConfigData
from .pso import PSOConfig, PSOConfigData
from .sa import SAConfig, SAConfigData

__all__ = [
    "ACOConfig",
    "ACOConfigData",
    "DEConfig",
    "DEConfigData",
    "GAConfig",
    "GAConfigData",
    "NelderMeadConfig",
    "NelderMeadConfigData",
    "PSOConfig",
    "PSOConfigData",
    "SAConfig",
    "SAConfigData",
    "algorithm_section",
    "coerce_config",
    "load_run_spec",
]
