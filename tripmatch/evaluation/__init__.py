"""Evaluation module for score batch summaries."""

from .metrics import ScoreDistributionStats, compute_score_distribution_stats

__all__ = [
    "ScoreDistributionStats",
    "compute_score_distribution_stats",
]
