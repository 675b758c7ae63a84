"""Pytest configuration - add project root to path, shared fixtures."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))


@pytest.fixture
def params():
    """Typical experiment parameters (10% baseline, +20% relative lift)."""
    from src.abtesting.schema import ExperimentParameters
    return ExperimentParameters(baseline_rate=0.1, mde=0.2, confidence=0.95, power=0.85)
