"""
Sequential analysis: repeated significance checks over growing samples.

Runs the two-proportion z-test on successive prefixes of the observation
sequences and reports the p-value / relative improvement trend. No
alpha-spending correction is applied; repeated_peek_warning flags the
resulting Type I error inflation.
"""

import logging
import numbers
from typing import List, Sequence, Tuple

import pandas as pd

from ..errors import InvalidParameterError
from ..schema import SequentialCheckpoint
from .hypothesis_tests import analyze_outcome

logger = logging.getLogger(__name__)

CHECKPOINT_COLUMNS = ["sample_size", "p_value", "relative_improvement"]


def sequential_monitor(
    control: Sequence[int],
    variant: Sequence[int],
    checkpoint_size: int,
    confidence: float = 0.95,
) -> List[SequentialCheckpoint]:
    """
    Analyze prefixes of length k, 2k, 3k, ... of both arms.

    Only full multiples of checkpoint_size up to the shorter arm's length
    are analyzed; a trailing partial block is dropped.

    Args:
        control: Control outcomes (0/1)
        variant: Variant outcomes (0/1)
        checkpoint_size: Step between checkpoints (k > 0)
        confidence: Confidence level passed to the z-test

    Returns:
        Checkpoints ordered by strictly increasing sample_size
    """
    if isinstance(checkpoint_size, bool) or not isinstance(checkpoint_size, numbers.Integral):
        raise InvalidParameterError("checkpoint_size must be an integer")
    if checkpoint_size <= 0:
        raise InvalidParameterError("checkpoint_size must be > 0")
    if not 0 < confidence < 1:
        raise InvalidParameterError("Confidence level must be between 0 and 1")

    current_size = min(len(control), len(variant))
    results = []
    step = int(checkpoint_size)
    for size in range(step, current_size + 1, step):
        res = analyze_outcome(control[:size], variant[:size], confidence)
        results.append(SequentialCheckpoint(
            sample_size=size,
            p_value=res.p_value,
            relative_improvement=res.relative_improvement,
        ))

    logger.debug(
        f"Sequential monitor: {len(results)} checkpoints of {checkpoint_size} "
        f"over {current_size} observations per arm"
    )
    return results


def checkpoints_to_frame(checkpoints: Sequence[SequentialCheckpoint]) -> pd.DataFrame:
    """Tabulate checkpoints for charts and tables (undefined lifts become NaN)."""
    if not checkpoints:
        return pd.DataFrame(columns=CHECKPOINT_COLUMNS)
    return pd.DataFrame(
        [
            {
                "sample_size": c.sample_size,
                "p_value": c.p_value,
                "relative_improvement": c.relative_improvement,
            }
            for c in checkpoints
        ],
        columns=CHECKPOINT_COLUMNS,
    )


def repeated_peek_warning(
    n_planned: int,
    n_observed: int,
    n_analyses: int,
) -> Tuple[bool, str]:
    """
    Warning for repeated peeking / early stopping.

    Args:
        n_planned: Planned sample size per arm
        n_observed: Currently observed sample size per arm
        n_analyses: Number of times results have been analyzed

    Returns:
        Tuple of (is_warning, message)
    """
    if n_observed >= n_planned and n_analyses <= 1:
        return False, "Single analysis at planned sample size."

    msg_parts = []

    if n_observed < n_planned:
        pct = 100 * n_observed / n_planned if n_planned > 0 else 0
        msg_parts.append(
            f"Early analysis: only {pct:.0f}% of planned sample. "
            "Type I error inflation possible if stopping early."
        )

    if n_analyses > 1:
        msg_parts.append(
            f"Multiple analyses ({n_analyses}) performed. "
            "Significance at an interim look is not adjusted for repeated testing."
        )

    is_warning = len(msg_parts) > 0
    return is_warning, " ".join(msg_parts)
