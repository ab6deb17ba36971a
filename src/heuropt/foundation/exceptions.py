"""
heuropt exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All heuropt-specific exceptions inherit from HeuroptError for easy catching.

Example:
    try:
        result = optimize(problem, "de", config)
    except HeuroptError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class HeuroptError(Exception):
    """
    Base exception for all heuropt errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HeuroptError, ValueError):
    """Raised when an algorithm configuration is invalid or incomplete."""


class InvalidAlgorithmError(ConfigurationError):
    """Raised when an unknown algorithm is specified."""

    def __init__(self, algorithm: str, available: list[str] | None = None, matches: list[str] | None = None) -> None:
        available = available or ["aco", "de", "ga", "nelder_mead", "pso", "sa"]
        message = f"Unknown algorithm '{algorithm}'."
        if matches:
            message += " Did you mean " + " or ".join(f"'{m}'" for m in matches) + "?"
        suggestion = f"Available algorithms: {', '.join(available)}"
        super().__init__(message, suggestion, {"algorithm": algorithm, "available": available})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}().fixed() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(HeuroptError, ValueError):
    """Base class for problem-related errors."""


class ProblemDimensionError(ProblemError):
    """Raised when problem dimensions are invalid."""

    def __init__(self, message: str, dimensions: int | None = None, n_bounds: int | None = None) -> None:
        suggestion = "Pass one (min, max) bound per dimension and at least one dimension"
        super().__init__(message, suggestion, {"dimensions": dimensions, "n_bounds": n_bounds})


class BoundsError(ProblemError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str, index: int | None = None) -> None:
        suggestion = "Ensure min <= max and both are finite for every dimension"
        super().__init__(message, suggestion, {"index": index})


class InitialSimplexError(ProblemError):
    """Raised when a user-supplied Nelder-Mead simplex has the wrong shape."""

    def __init__(self, shape: tuple[int, ...], dimensions: int) -> None:
        message = f"Initial simplex has shape {shape}; expected ({dimensions + 1}, {dimensions})."
        suggestion = "Supply dimensions + 1 vertices, each with one coordinate per dimension"
        super().__init__(message, suggestion, {"shape": shape, "dimensions": dimensions})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "HeuroptError",
    # Configuration
    "ConfigurationError",
    "InvalidAlgorithmError",
    "MissingConfigError",
    # Problem
    "ProblemError",
    "ProblemDimensionError",
    "BoundsError",
    "InitialSimplexError",
]
