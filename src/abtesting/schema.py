"""
Experiment data models for the A/B testing engine.

Dataclass schemas for experiment parameters, analysis outcomes,
sequential checkpoints, use-case presets and simulation reports.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .validation import validate_parameters

SIMULATOR_SEED = 42
DEFAULT_LOOKS = 10
DEFAULT_NOISE = 0.1


class Conclusion(str, Enum):
    """Categorical outcome of a significance test."""
    INCONCLUSIVE = "inconclusive"
    VARIANT_BETTER = "variant outperformed control"
    CONTROL_BETTER = "control outperformed variant"

    def describe(self) -> str:
        """Sentence shown to end users."""
        if self is Conclusion.VARIANT_BETTER:
            return "The variant outperformed the control group significantly."
        if self is Conclusion.CONTROL_BETTER:
            return "The control group outperformed the variant significantly."
        return "The test results are inconclusive."


@dataclass(frozen=True)
class ExperimentParameters:
    """Inputs used to size an experiment."""
    baseline_rate: float
    mde: float  # relative lift, e.g. 0.10 = +10%
    confidence: float = 0.95
    power: float = 0.8

    @property
    def alpha(self) -> float:
        return 1 - self.confidence

    @property
    def target_rate(self) -> float:
        """Variant rate implied by a relative lift of `mde`."""
        return self.baseline_rate * (1 + self.mde)

    def validate(self) -> Optional[str]:
        return validate_parameters(self.baseline_rate, self.mde, self.confidence, self.power)


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lower, self.upper)


@dataclass(frozen=True)
class OutcomeRecord:
    """Result of a two-proportion z-test between control and variant."""
    control_rate: float
    variant_rate: float
    relative_improvement: Optional[float]  # None when control rate is 0 and variant is not
    p_value: float
    z_score: float
    significant: bool
    control_ci: ConfidenceInterval
    variant_ci: ConfidenceInterval
    conclusion: Conclusion
    control_n: int
    variant_n: int
    zero_variance: bool = False  # pooled rate was 0 or 1

    @property
    def confidence_intervals(self) -> Dict[str, Tuple[float, float]]:
        return {
            "control": self.control_ci.as_tuple(),
            "variant": self.variant_ci.as_tuple(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "control_rate": self.control_rate,
            "variant_rate": self.variant_rate,
            "relative_improvement": self.relative_improvement,
            "p_value": self.p_value,
            "z_score": self.z_score,
            "significant": self.significant,
            "confidence_intervals": {
                k: list(v) for k, v in self.confidence_intervals.items()
            },
            "conclusion": self.conclusion.value,
            "control_n": self.control_n,
            "variant_n": self.variant_n,
            "zero_variance": self.zero_variance,
        }


@dataclass(frozen=True)
class SequentialCheckpoint:
    """Snapshot of the test statistics at one prefix length."""
    sample_size: int
    p_value: float
    relative_improvement: Optional[float]


@dataclass(frozen=True)
class UseCase:
    """Illustrative experiment preset."""
    name: str
    description: str
    baseline_rate: float
    mde: float


@dataclass
class SimulationConfig:
    """Configuration for a synthetic experiment run."""
    noise: float = DEFAULT_NOISE  # multiplicative jitter applied per draw
    looks: int = DEFAULT_LOOKS  # number of sequential checkpoints targeted
    random_seed: int = SIMULATOR_SEED


@dataclass
class SimulationReport:
    """Complete output of a simulated experiment."""
    parameters: ExperimentParameters
    sample_size: int
    checkpoint_size: int
    outcome: OutcomeRecord
    checkpoints: List[SequentialCheckpoint] = field(default_factory=list)
    peek_warning: bool = False
    peek_message: str = ""
    random_seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "parameters": {
                "baseline_rate": self.parameters.baseline_rate,
                "mde": self.parameters.mde,
                "confidence": self.parameters.confidence,
                "power": self.parameters.power,
            },
            "sample_size": self.sample_size,
            "checkpoint_size": self.checkpoint_size,
            "outcome": self.outcome.to_dict(),
            "checkpoints": [
                {
                    "sample_size": c.sample_size,
                    "p_value": c.p_value,
                    "relative_improvement": c.relative_improvement,
                }
                for c in self.checkpoints
            ],
            "peek_warning": self.peek_warning,
            "peek_message": self.peek_message,
            "random_seed": self.random_seed,
        }
