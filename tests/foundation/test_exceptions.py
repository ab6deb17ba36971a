"""Tests for the heuropt exception hierarchy."""

from __future__ import annotations

import pytest


class TestHeuroptError:
    """Test base HeuroptError class."""

    def test_basic_error(self):
        from heuropt.foundation.exceptions import HeuroptError

        err = HeuroptError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        """The suggestion is appended to the rendered message."""
        from heuropt.foundation.exceptions import HeuroptError

        err = HeuroptError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"

    def test_error_with_details(self):
        from heuropt.foundation.exceptions import HeuroptError

        err = HeuroptError("Error", details={"key": "value"})
        assert err.details == {"key": "value"}


class TestConfigurationErrors:
    def test_invalid_algorithm_lists_defaults(self):
        from heuropt.foundation.exceptions import InvalidAlgorithmError

        err = InvalidAlgorithmError("unknown_algo")
        assert "unknown_algo" in str(err)
        assert "nelder_mead" in str(err)

    def test_invalid_algorithm_with_matches(self):
        from heuropt.foundation.exceptions import InvalidAlgorithmError

        err = InvalidAlgorithmError("psoo", available=["pso", "sa"], matches=["pso"])
        assert "Did you mean 'pso'?" in str(err)
        assert err.details["available"] == ["pso", "sa"]

    def test_missing_config_mentions_builder(self):
        from heuropt.foundation.exceptions import MissingConfigError

        err = MissingConfigError("population_size", config_class="GAConfig")
        assert "population_size" in str(err)
        assert "GAConfig().fixed()" in str(err)

    def test_configuration_errors_are_value_errors(self):
        from heuropt.foundation.exceptions import ConfigurationError, InvalidAlgorithmError

        assert issubclass(ConfigurationError, ValueError)
        with pytest.raises(ValueError):
            raise InvalidAlgorithmError("x")


class TestProblemErrors:
    def test_dimension_error_details(self):
        from heuropt.foundation.exceptions import ProblemDimensionError, ProblemError

        err = ProblemDimensionError("bad dims", dimensions=3, n_bounds=2)
        assert isinstance(err, ProblemError)
        assert err.details == {"dimensions": 3, "n_bounds": 2}

    def test_bounds_error_index(self):
        from heuropt.foundation.exceptions import BoundsError

        err = BoundsError("min > max", index=4)
        assert err.details["index"] == 4
        assert "min <= max" in str(err)

    def test_initial_simplex_error_reports_expected_shape(self):
        from heuropt.foundation.exceptions import InitialSimplexError

        err = InitialSimplexError((2, 3), dimensions=3)
        assert "(4, 3)" in str(err)


def test_all_errors_catchable_as_base():
    from heuropt.foundation.exceptions import (
        BoundsError,
        ConfigurationError,
        HeuroptError,
        InitialSimplexError,
        InvalidAlgorithmError,
        ProblemDimensionError,
    )

    errors = [
        ConfigurationError("x"),
        InvalidAlgorithmError("x"),
        ProblemDimensionError("x"),
        BoundsError("x"),
        InitialSimplexError((1, 1), 1),
    ]
    for err in errors:
        assert isinstance(err, HeuroptError)
