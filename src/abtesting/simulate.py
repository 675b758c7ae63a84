"""
Synthetic experiment simulator.

Sizes an experiment from its parameters, draws Bernoulli outcomes for the
control arm (baseline rate) and the variant arm (baseline lifted by the
MDE), then runs the z-test and the sequential monitor on the draws.

Draws use a per-trial multiplicative jitter on the target rate so that
repeated runs show realistic variation. Pass a seeded
numpy.random.Generator (or a seed) for reproducible runs.
"""

import logging
from typing import Optional

import numpy as np

from .errors import InvalidParameterError
from .schema import (
    DEFAULT_LOOKS,
    DEFAULT_NOISE,
    SIMULATOR_SEED,
    ExperimentParameters,
    SimulationConfig,
    SimulationReport,
)
from .stats import (
    analyze_outcome,
    compute_sample_size,
    repeated_peek_warning,
    sequential_monitor,
)
from .validation import check_parameters

logger = logging.getLogger(__name__)


def generate_observations(
    rate: float,
    n: int,
    noise: float = DEFAULT_NOISE,
    rng: Optional[np.random.Generator] = None,
    random_seed: int = SIMULATOR_SEED,
) -> np.ndarray:
    """
    Draw n binary outcomes with success probability near `rate`.

    Each trial succeeds with probability rate * (1 + (u - 0.5) * noise),
    u ~ Uniform(0, 1), clipped to [0, 1].

    Args:
        rate: Target success rate
        n: Number of trials
        noise: Relative jitter amplitude (0 = plain Bernoulli draws)
        rng: Random generator; a new one seeded with random_seed if None
        random_seed: Seed used when rng is not supplied

    Returns:
        Integer array of 0/1 outcomes
    """
    if not 0 <= rate <= 1:
        raise InvalidParameterError("rate must be between 0 and 1")
    if n < 0:
        raise InvalidParameterError("n must be >= 0")
    if noise < 0:
        raise InvalidParameterError("noise must be >= 0")

    if rng is None:
        rng = np.random.default_rng(random_seed)

    jitter = 1 + (rng.random(n) - 0.5) * noise
    probs = np.clip(rate * jitter, 0, 1)
    return (rng.random(n) < probs).astype(int)


def default_checkpoint_size(sample_size: int, looks: int = DEFAULT_LOOKS) -> int:
    """Checkpoint step giving roughly `looks` sequential analyses."""
    if looks <= 0:
        raise InvalidParameterError("looks must be > 0")
    return max(1, sample_size // looks)


def run_simulation(
    params: ExperimentParameters,
    config: Optional[SimulationConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> SimulationReport:
    """
    Run a synthetic experiment end to end.

    Args:
        params: Baseline rate, MDE, confidence and power
        config: Simulation settings (noise, looks, seed)
        rng: Random generator; seeded from config.random_seed if None

    Returns:
        SimulationReport with the final analysis and sequential trend
    """
    if config is None:
        config = SimulationConfig()

    check_parameters(params.baseline_rate, params.mde, params.confidence, params.power)
    sample_size = compute_sample_size(
        params.baseline_rate, params.mde, params.confidence, params.power
    )

    seed = config.random_seed if rng is None else None
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    control = generate_observations(params.baseline_rate, sample_size, config.noise, rng)
    variant = generate_observations(params.target_rate, sample_size, config.noise, rng)

    outcome = analyze_outcome(control, variant, params.confidence)

    checkpoint_size = default_checkpoint_size(sample_size, config.looks)
    checkpoints = sequential_monitor(control, variant, checkpoint_size, params.confidence)
    peek_warning, peek_message = repeated_peek_warning(
        sample_size, sample_size, len(checkpoints)
    )

    report = SimulationReport(
        parameters=params,
        sample_size=sample_size,
        checkpoint_size=checkpoint_size,
        outcome=outcome,
        checkpoints=checkpoints,
        peek_warning=peek_warning,
        peek_message=peek_message,
        random_seed=seed,
    )

    logger.info(
        f"Simulation complete: n={sample_size} per arm, "
        f"control={outcome.control_rate:.4f}, variant={outcome.variant_rate:.4f}, "
        f"p={outcome.p_value:.4g}, conclusion={outcome.conclusion.value}"
    )
    return report
