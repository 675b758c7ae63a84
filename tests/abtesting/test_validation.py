"""Tests for parameter validation."""
import math

import pytest
from src.abtesting.errors import DomainError, InvalidParameterError
from src.abtesting.schema import ExperimentParameters
from src.abtesting.validation import check_parameters, validate_parameters


def test_valid_parameters_pass():
    """Typical parameters -> no failure."""
    assert validate_parameters(0.1, 0.05, 0.95, 0.8) is None


def test_confidence_upper_bound_excluded():
    """Confidence of exactly 1.0 is rejected."""
    assert validate_parameters(0.1, 0.05, 1.0, 0.8) == "Confidence level must be between 0.8 and 1"


@pytest.mark.parametrize(
    "args, expected",
    [
        ((0.0, 0.05, 0.95, 0.85), "Baseline rate must be between 0 and 1"),
        ((1.0, 0.05, 0.95, 0.85), "Baseline rate must be between 0 and 1"),
        ((0.1, 0.0, 0.95, 0.85), "Minimum detectable effect must be between 0 and 1"),
        ((0.1, 1.0, 0.95, 0.85), "Minimum detectable effect must be between 0 and 1"),
        ((0.1, 0.05, 0.79, 0.85), "Confidence level must be between 0.8 and 1"),
        ((0.1, 0.05, 1.0, 0.8), "Confidence level must be between 0.8 and 1"),
        ((0.1, 0.05, 0.95, 0.79), "Statistical power must be between 0.8 and 1"),
        ((0.1, 0.05, 0.95, 1.0), "Statistical power must be between 0.8 and 1"),
    ],
)
def test_out_of_bounds(args, expected):
    """Rates are open at both ends; confidence and power reject < 0.8 and 1."""
    assert validate_parameters(*args) == expected


@pytest.mark.parametrize(
    "confidence, power",
    [(0.8, 0.8), (0.8, 0.9), (0.95, 0.8), (0.99, 0.99)],
)
def test_lower_bound_of_confidence_and_power_accepted(confidence, power):
    """0.8 is an accepted confidence level and power."""
    assert validate_parameters(0.1, 0.05, confidence, power) is None


def test_first_failure_reported():
    """All four invalid -> baseline message (checked first)."""
    assert validate_parameters(-1, 2, 0.5, 0.5) == "Baseline rate must be between 0 and 1"
    assert validate_parameters(0.1, 2, 0.5, 0.5) == "Minimum detectable effect must be between 0 and 1"


def test_nan_rejected():
    """NaN never passes a bound check."""
    assert validate_parameters(math.nan, 0.1, 0.95, 0.85) is not None
    assert validate_parameters(0.1, 0.1, 0.95, math.nan) is not None


def test_check_parameters_raises_typed_error():
    """check_parameters raises InvalidParameterError (a DomainError / ValueError)."""
    with pytest.raises(InvalidParameterError, match="Confidence level"):
        check_parameters(0.1, 0.05, 1.0, 0.85)
    assert issubclass(InvalidParameterError, DomainError)
    assert issubclass(DomainError, ValueError)
    check_parameters(0.1, 0.05, 0.95, 0.85)


def test_experiment_parameters_helpers():
    """ExperimentParameters exposes alpha, target rate and validation."""
    p = ExperimentParameters(baseline_rate=0.1, mde=0.2, confidence=0.95, power=0.85)
    assert p.alpha == pytest.approx(0.05)
    assert p.target_rate == pytest.approx(0.12)
    assert p.validate() is None
    assert ExperimentParameters(0.1, 0.2).validate() is None
    assert ExperimentParameters(0.1, 0.2, 0.95, 0.79).validate() is not None
