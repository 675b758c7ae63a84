"""
Parameter validation for experiment sizing.

Baseline rate and MDE lie in the open interval (0, 1). Confidence and
power lie in [0.8, 1): 0.8 is the smallest accepted level, 1 is never
reachable. Checks run in a fixed order and the first failing check
determines the reported reason.
"""

from typing import Optional

from .errors import InvalidParameterError

MIN_CONFIDENCE = 0.8
MIN_POWER = 0.8


def _open(value: float, low: float, high: float) -> bool:
    # NaN fails every comparison, so it is rejected here as well
    return low < value < high


def _half_open(value: float, low: float, high: float) -> bool:
    return low <= value < high


def validate_parameters(
    baseline_rate: float,
    mde: float,
    confidence: float,
    power: float,
) -> Optional[str]:
    """
    Check experiment parameters against their domain bounds.

    Args:
        baseline_rate: Baseline conversion rate, in (0, 1)
        mde: Minimum detectable effect as relative lift, in (0, 1)
        confidence: Confidence level, in [0.8, 1)
        power: Statistical power, in [0.8, 1)

    Returns:
        Reason for the first failing check, or None if all pass
    """
    if not _open(baseline_rate, 0.0, 1.0):
        return "Baseline rate must be between 0 and 1"
    if not _open(mde, 0.0, 1.0):
        return "Minimum detectable effect must be between 0 and 1"
    if not _half_open(confidence, MIN_CONFIDENCE, 1.0):
        return "Confidence level must be between 0.8 and 1"
    if not _half_open(power, MIN_POWER, 1.0):
        return "Statistical power must be between 0.8 and 1"
    return None


def check_parameters(
    baseline_rate: float,
    mde: float,
    confidence: float,
    power: float,
) -> None:
    """Raise InvalidParameterError if any parameter is out of bounds."""
    reason = validate_parameters(baseline_rate, mde, confidence, power)
    if reason is not None:
        raise InvalidParameterError(reason)
