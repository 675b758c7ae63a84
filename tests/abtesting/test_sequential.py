"""Tests for sequential monitoring."""
import numpy as np
import pytest

from src.abtesting.errors import InvalidParameterError
from src.abtesting.stats.hypothesis_tests import analyze_outcome
from src.abtesting.stats.sequential import (
    CHECKPOINT_COLUMNS,
    checkpoints_to_frame,
    repeated_peek_warning,
    sequential_monitor,
)


@pytest.fixture
def arms():
    rng = np.random.default_rng(42)
    control = (rng.random(100) < 0.2).astype(int)
    variant = (rng.random(100) < 0.3).astype(int)
    return control, variant


def test_checkpoint_count_and_sizes(arms):
    """N=100, k=10 -> 10 checkpoints at 10, 20, ..., 100."""
    control, variant = arms
    cps = sequential_monitor(control, variant, 10, 0.95)
    assert len(cps) == 10
    assert [c.sample_size for c in cps] == list(range(10, 101, 10))


def test_partial_remainder_dropped():
    """N=105, k=10 -> floor(105/10) checkpoints."""
    control = [0, 1, 0] * 35
    variant = [1, 1, 0] * 35
    cps = sequential_monitor(control, variant, 10, 0.95)
    assert len(cps) == 10
    assert cps[-1].sample_size == 100


def test_shorter_arm_limits_checkpoints():
    """Unequal lengths -> bounded by the shorter arm."""
    cps = sequential_monitor([0, 1] * 60, [1, 0] * 47 + [1], 10, 0.95)
    assert [c.sample_size for c in cps] == list(range(10, 91, 10))


def test_too_short_returns_empty():
    """Fewer observations than one checkpoint -> no checkpoints."""
    assert sequential_monitor([0, 1, 1], [1, 1, 0], 5, 0.95) == []


def test_checkpoint_matches_prefix_analysis(arms):
    """Each checkpoint equals the z-test on the prefix."""
    control, variant = arms
    cps = sequential_monitor(control, variant, 25, 0.95)
    for cp in cps:
        res = analyze_outcome(control[:cp.sample_size], variant[:cp.sample_size], 0.95)
        assert cp.p_value == res.p_value
        assert cp.relative_improvement == res.relative_improvement


@pytest.mark.parametrize("k", [0, -5, 2.5, True])
def test_invalid_checkpoint_size_raises(arms, k):
    """Non-positive or non-integer step fails fast."""
    control, variant = arms
    with pytest.raises(InvalidParameterError):
        sequential_monitor(control, variant, k, 0.95)


def test_checkpoints_to_frame(arms):
    """Frame has one row per checkpoint, ordered by sample size."""
    control, variant = arms
    cps = sequential_monitor(control, variant, 20, 0.95)
    df = checkpoints_to_frame(cps)
    assert list(df.columns) == CHECKPOINT_COLUMNS
    assert len(df) == 5
    assert df["sample_size"].is_monotonic_increasing


def test_checkpoints_to_frame_empty():
    """No checkpoints -> empty frame with the expected columns."""
    df = checkpoints_to_frame([])
    assert df.empty
    assert list(df.columns) == CHECKPOINT_COLUMNS


def test_peek_warning_single_final_look():
    """One analysis at the planned size -> no warning."""
    is_warning, _ = repeated_peek_warning(1000, 1000, 1)
    assert not is_warning


def test_peek_warning_early_and_repeated():
    """Early, repeated looks -> warning mentioning both."""
    is_warning, msg = repeated_peek_warning(1000, 500, 3)
    assert is_warning
    assert "Early analysis" in msg
    assert "Multiple analyses (3)" in msg


@pytest.mark.parametrize("confidence", [0.0, 1.0, 1.5])
def test_invalid_confidence_raises_without_checkpoints(confidence):
    """Bad confidence fails even when no checkpoint would be analyzed."""
    with pytest.raises(InvalidParameterError):
        sequential_monitor([0, 1, 1], [1, 1, 0], 5, confidence)
