"""A/B testing engine: sample sizing, significance testing and sequential monitoring."""

from .errors import (
    DomainError,
    InvalidParameterError,
    DegenerateInputError,
    ArithmeticDomainError,
)
from .schema import (
    Conclusion,
    ConfidenceInterval,
    ExperimentParameters,
    OutcomeRecord,
    SequentialCheckpoint,
    SimulationConfig,
    SimulationReport,
    UseCase,
)
from .validation import validate_parameters, check_parameters
from .stats import compute_sample_size, analyze_outcome, sequential_monitor
from .presets import load_use_cases, get_use_case
from .simulate import generate_observations, run_simulation

__all__ = [
    "DomainError",
    "InvalidParameterError",
    "DegenerateInputError",
    "ArithmeticDomainError",
    "Conclusion",
    "ConfidenceInterval",
    "ExperimentParameters",
    "OutcomeRecord",
    "SequentialCheckpoint",
    "SimulationConfig",
    "SimulationReport",
    "UseCase",
    "validate_parameters",
    "check_parameters",
    "compute_sample_size",
    "analyze_outcome",
    "sequential_monitor",
    "load_use_cases",
    "get_use_case",
    "generate_observations",
    "run_simulation",
]
