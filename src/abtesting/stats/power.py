"""
Power analysis and MDE (Minimum Detectable Effect) calculator.

Computes required per-arm sample size, achieved power and detectable
relative lift for a two-proportion test with equal allocation.
"""

import logging

import numpy as np
from scipy import stats

from ..errors import ArithmeticDomainError, InvalidParameterError
from ..validation import check_parameters

logger = logging.getLogger(__name__)


def _critical_values(confidence: float, power: float):
    alpha = 1 - confidence
    z_alpha = stats.norm.ppf(1 - alpha / 2)
    z_beta = stats.norm.ppf(power)
    return float(z_alpha), float(z_beta)


def compute_sample_size(
    baseline_rate: float,
    mde: float,
    confidence: float = 0.95,
    power: float = 0.8,
) -> int:
    """
    Per-arm sample size for a two-proportion test.

    Args:
        baseline_rate: Baseline conversion rate (e.g., 0.10)
        mde: Minimum detectable effect as relative lift (e.g., 0.10 = +10% relative)
        confidence: Confidence level (two-sided)
        power: Statistical power (1 - Type II)

    Returns:
        Required sample size per arm

    Raises:
        InvalidParameterError: a parameter is outside its bounds
        ArithmeticDomainError: the lifted rate reaches or exceeds 1
    """
    check_parameters(baseline_rate, mde, confidence, power)

    p1 = baseline_rate
    p2 = baseline_rate * (1 + mde)
    if p2 >= 1:
        raise ArithmeticDomainError(
            f"Target rate {p2:.4f} (baseline {p1} lifted by {mde:.0%}) must stay below 1"
        )

    z_alpha, z_beta = _critical_values(confidence, power)
    p_pool = (p1 + p2) / 2
    effect = p2 - p1

    n_per_arm = 2 * p_pool * (1 - p_pool) * (z_alpha + z_beta) ** 2 / effect ** 2
    n = int(np.ceil(n_per_arm))
    logger.debug(
        f"Sample size: p1={p1}, p2={p2:.4f}, z_alpha={z_alpha:.4f}, "
        f"z_beta={z_beta:.4f} -> n={n} per arm"
    )
    return n


def power_proportion(
    baseline_rate: float,
    mde: float,
    n_per_arm: int,
    confidence: float = 0.95,
) -> float:
    """
    Achieved power for a given relative lift and sample size.

    Returns:
        Statistical power (0-1)
    """
    if n_per_arm <= 0:
        raise InvalidParameterError("n_per_arm must be > 0")
    if not 0 < baseline_rate < 1:
        raise InvalidParameterError("Baseline rate must be between 0 and 1")
    if not 0 < confidence < 1:
        raise InvalidParameterError("Confidence level must be between 0 and 1")

    p1 = baseline_rate
    p2 = baseline_rate * (1 + mde)
    if not 0 < p2 < 1:
        raise ArithmeticDomainError(f"Target rate {p2:.4f} must be between 0 and 1")

    z_alpha = stats.norm.ppf(1 - (1 - confidence) / 2)
    p_pool = (p1 + p2) / 2
    se = np.sqrt(2 * p_pool * (1 - p_pool) / n_per_arm)
    effect = abs(p2 - p1)

    z_crit = effect / se
    power = 1 - stats.norm.cdf(z_alpha - z_crit) + stats.norm.cdf(-z_alpha - z_crit)
    return float(np.clip(power, 0, 1))


def mde_proportion(
    baseline_rate: float,
    n_per_arm: int,
    confidence: float = 0.95,
    power: float = 0.8,
) -> float:
    """
    Minimum detectable effect (relative) for a proportion.

    Approximates the variance at the baseline rate for both arms.

    Returns:
        MDE as relative lift (e.g., 0.10 = 10% relative increase detectable)
    """
    if n_per_arm <= 0:
        raise InvalidParameterError("n_per_arm must be > 0")
    if not 0 < baseline_rate < 1:
        raise InvalidParameterError("Baseline rate must be between 0 and 1")
    if not 0 < confidence < 1 or not 0 < power < 1:
        raise InvalidParameterError("Confidence and power must be between 0 and 1")

    z_alpha, z_beta = _critical_values(confidence, power)
    se_approx = np.sqrt(2 * baseline_rate * (1 - baseline_rate) / n_per_arm)
    mde_abs = (z_alpha + z_beta) * se_approx
    return float(mde_abs / baseline_rate)
