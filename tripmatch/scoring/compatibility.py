"""
Compatibility aggregation for a (reference, candidate) traveler pair.

Combines the five sub-metrics with fixed weights into a single 0-100
score. The computation is pure and stateless: results are recomputed for
every pair and never cached.
"""

import logging
import math
from typing import Dict, Any, Optional

import numpy as np

from ..profiles.schema import TravelProfile, CompatibilityResult
from .metrics import (
    date_overlap_ratio,
    destination_overlap,
    interest_similarity,
    budget_similarity,
    style_match,
)
from .weights import ScoringConfig

logger = logging.getLogger(__name__)

DEFAULT_SCORING_CONFIG = ScoringConfig()


def to_percent(raw_score: float) -> int:
    """
    Convert a raw [0, 1] score to an integer percentage.

    Halves round up (72.5 -> 73) rather than to the nearest even value.
    """
    return int(math.floor(raw_score * 100 + 0.5))


def compute_components(
    reference: TravelProfile,
    candidate: TravelProfile,
    config: Optional[ScoringConfig] = None
) -> Dict[str, Any]:
    """
    Compute every sub-metric for a pair.

    Args:
        reference: Reference traveler
        candidate: Candidate traveler
        config: Scoring configuration (defaults if None)

    Returns:
        Dictionary with date_overlap, destination_ratio, destination_count,
        common_destinations, interest_similarity, budget_similarity and
        style_match
    """
    config = config or DEFAULT_SCORING_CONFIG
    dest = destination_overlap(reference.destinations, candidate.destinations)

    return {
        "date_overlap": date_overlap_ratio(reference.date_range, candidate.date_range),
        "destination_ratio": dest.ratio,
        "destination_count": dest.count,
        "common_destinations": dest.common,
        "interest_similarity": interest_similarity(reference.interests, candidate.interests),
        "budget_similarity": budget_similarity(
            reference.budget_per_day, candidate.budget_per_day, config.budget_sensitivity
        ),
        "style_match": style_match(reference.travel_style, candidate.travel_style),
    }


def combine_components(components: Dict[str, Any], config: Optional[ScoringConfig] = None) -> float:
    """
    Weighted sum of sub-metrics, clipped to [0, 1].

    Args:
        components: Output of compute_components
        config: Scoring configuration (defaults if None)

    Returns:
        Raw compatibility score in [0, 1]
    """
    config = config or DEFAULT_SCORING_CONFIG
    dest_ratio = components["destination_ratio"]

    raw = (
        config.weight_destination_bonus * (1.0 if dest_ratio > 0 else 0.0) +
        config.weight_destination_ratio * dest_ratio +
        config.weight_dates * components["date_overlap"] +
        config.weight_interests * components["interest_similarity"] +
        config.weight_budget * components["budget_similarity"] +
        config.weight_style * components["style_match"]
    )

    return float(np.clip(raw, 0.0, 1.0))


def compute_compatibility(
    reference: TravelProfile,
    candidate: TravelProfile,
    config: Optional[ScoringConfig] = None,
    return_breakdown: bool = False
) -> CompatibilityResult:
    """
    Compute the compatibility score between two travelers.

    Formula:
        raw = 0.30 * (dest_ratio > 0) + 0.20 * dest_ratio + 0.20 * date_overlap
            + 0.15 * interest_jaccard + 0.10 * budget_sim + 0.05 * style_match
        score = round(raw * 100)

    Weights come from the scoring config; the defaults are shown above.

    Args:
        reference: Reference traveler (usually the current user)
        candidate: Candidate travel partner
        config: Scoring configuration (defaults if None)
        return_breakdown: Whether to include sub-metric values in the result

    Returns:
        CompatibilityResult with the score and shared destinations
    """
    config = config or DEFAULT_SCORING_CONFIG
    components = compute_components(reference, candidate, config)
    raw_score = combine_components(components, config)
    score = to_percent(raw_score)

    logger.debug(
        f"Compatibility {reference.identifier} -> {candidate.identifier}: "
        f"score={score} (raw={raw_score:.4f}, dates={components['date_overlap']:.3f}, "
        f"dest={components['destination_ratio']:.3f}, "
        f"interests={components['interest_similarity']:.3f}, "
        f"budget={components['budget_similarity']:.3f}, style={components['style_match']:.0f})"
    )

    breakdown = None
    if return_breakdown:
        breakdown = {
            key: value for key, value in components.items()
            if key != "common_destinations"
        }
        breakdown["raw_score"] = raw_score

    return CompatibilityResult(
        score=score,
        common_destinations=components["common_destinations"],
        breakdown=breakdown
    )
