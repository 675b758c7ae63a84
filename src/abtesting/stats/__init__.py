"""Experiment statistics module."""

from .power import compute_sample_size, power_proportion, mde_proportion
from .hypothesis_tests import analyze_outcome, relative_improvement, wald_interval
from .sequential import sequential_monitor, checkpoints_to_frame, repeated_peek_warning

__all__ = [
    "compute_sample_size",
    "power_proportion",
    "mde_proportion",
    "analyze_outcome",
    "relative_improvement",
    "wald_interval",
    "sequential_monitor",
    "checkpoints_to_frame",
    "repeated_peek_warning",
]
