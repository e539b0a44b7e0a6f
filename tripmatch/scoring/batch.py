"""
Evaluate a reference traveler against a list of candidates.

Each pair is scored independently and rows keep the candidate input
order. No ranking or sorting is applied.
"""

import logging
from typing import Optional, Sequence

import pandas as pd

from ..profiles.schema import TravelProfile
from .compatibility import compute_compatibility
from .weights import ScoringConfig

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "identifier",
    "name",
    "home_location",
    "score",
    "common_destinations",
    "date_overlap",
    "destination_ratio",
    "destination_count",
    "interest_similarity",
    "budget_similarity",
    "style_match",
    "raw_score",
]


def evaluate_candidates(
    reference: TravelProfile,
    candidates: Sequence[TravelProfile],
    config: Optional[ScoringConfig] = None
) -> pd.DataFrame:
    """
    Score every candidate against the reference traveler.

    The reference itself is skipped if it appears among the candidates.

    Args:
        reference: Reference traveler
        candidates: Candidate travelers, in display order
        config: Scoring configuration (defaults if None)

    Returns:
        DataFrame with one row per candidate and RESULT_COLUMNS columns
    """
    rows = []
    for candidate in candidates:
        if candidate.identifier == reference.identifier:
            logger.debug(f"Skipping reference profile {reference.identifier} in candidates")
            continue

        result = compute_compatibility(reference, candidate, config, return_breakdown=True)
        row = {
            "identifier": candidate.identifier,
            "name": candidate.name,
            "home_location": candidate.home_location,
            "score": result.score,
            "common_destinations": list(result.common_destinations),
        }
        row.update(result.breakdown)
        rows.append(row)

    logger.info(f"Evaluated {len(rows)} candidates against {reference.identifier}")
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
