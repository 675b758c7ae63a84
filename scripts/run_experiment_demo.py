#!/usr/bin/env python3
"""
Run full experiment demo: size -> simulate -> analyze -> sequential trend.

Runs each use-case preset and prints the outcome and checkpoint table.
"""

import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    from src.abtesting import ExperimentParameters, load_use_cases, run_simulation
    from src.abtesting.stats import checkpoints_to_frame

    for i, uc in enumerate(load_use_cases(), start=1):
        print(f"{i}. {uc.name}: baseline={uc.baseline_rate}, mde={uc.mde:.0%}")
        params = ExperimentParameters(baseline_rate=uc.baseline_rate, mde=uc.mde)
        report = run_simulation(params)

        print(f"   Sample size per arm: {report.sample_size}")
        print(json.dumps(report.outcome.to_dict(), indent=2))
        print(checkpoints_to_frame(report.checkpoints).to_string(index=False))
        if report.peek_warning:
            print(f"   [WARN] {report.peek_message}")
        print()

    print("[OK] Demo complete.")

if __name__ == "__main__":
    main()
