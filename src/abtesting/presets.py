"""
Use-case presets: illustrative baseline rate / MDE pairs.

Presets are sample data loaded from a JSON table so they can be swapped
without touching the engine.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from .errors import InvalidParameterError
from .schema import UseCase

logger = logging.getLogger(__name__)

DEFAULT_USE_CASES_PATH = Path(__file__).parent / "use_cases.json"


def load_use_cases(path: Optional[str] = None) -> List[UseCase]:
    """
    Load use-case presets from a JSON array.

    Each entry needs name, baseline_rate and mde; description is optional.
    """
    src = Path(path) if path else DEFAULT_USE_CASES_PATH
    with open(src) as f:
        rows = json.load(f)

    if not isinstance(rows, list):
        raise InvalidParameterError(f"Use-case table {src} must be a JSON array")

    use_cases = []
    for i, row in enumerate(rows):
        try:
            uc = UseCase(
                name=str(row["name"]),
                description=str(row.get("description", "")),
                baseline_rate=float(row["baseline_rate"]),
                mde=float(row["mde"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidParameterError(f"Use case #{i} in {src} is malformed: {e}") from e

        if not 0 < uc.baseline_rate < 1 or not 0 < uc.mde < 1:
            raise InvalidParameterError(
                f"Use case '{uc.name}': baseline_rate and mde must be between 0 and 1"
            )
        use_cases.append(uc)

    logger.info(f"Loaded {len(use_cases)} use cases from {src}")
    return use_cases


def get_use_case(name: str, use_cases: Optional[List[UseCase]] = None) -> UseCase:
    """Look up a preset by name."""
    if use_cases is None:
        use_cases = load_use_cases()
    for uc in use_cases:
        if uc.name == name:
            return uc
    raise KeyError(f"Unknown use case: {name}")
