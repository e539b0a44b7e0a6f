"""
Summary statistics over a batch of compatibility scores.

Used by the command-line runner to describe how a reference traveler
scores against a candidate list. Scores are reported as-is; nothing here
ranks or filters candidates.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p25": 40.0, "p50": 55.0, "p75": 70.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": int(self.count),
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }

    def summary(self) -> str:
        """Generate text summary of the statistics."""
        lines = [
            f"Score Distribution ({self.count} candidates):",
            f"  Mean: {self.mean:.2f}",
            f"  Std:  {self.std:.2f}",
            f"  Min:  {self.min:.0f}",
            f"  Max:  {self.max:.0f}",
        ]
        for q_name, q_value in self.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.2f}")
        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: Sequence[float],
    quantiles: List[float] = [0.25, 0.5, 0.75]
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Compatibility scores (0-100)
        quantiles: Quantile values to compute (default: p25, p50, p75)

    Returns:
        ScoreDistributionStats instance

    Raises:
        ValueError: If scores is empty
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        raise ValueError("Cannot compute statistics for an empty score list")

    quantile_dict = {
        f"p{int(q * 100)}": float(np.percentile(scores, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        count=int(scores.size),
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_dict
    )
