"""Compatibility scoring: sub-metrics, weights and aggregation."""

from .metrics import (
    DestinationOverlap,
    date_overlap_ratio,
    destination_overlap,
    interest_similarity,
    budget_similarity,
    style_match,
)
from .weights import ScoringConfig
from .compatibility import compute_compatibility, compute_components, combine_components
from .batch import evaluate_candidates

__all__ = [
    "DestinationOverlap",
    "date_overlap_ratio",
    "destination_overlap",
    "interest_similarity",
    "budget_similarity",
    "style_match",
    "ScoringConfig",
    "compute_compatibility",
    "compute_components",
    "combine_components",
    "evaluate_candidates",
]
