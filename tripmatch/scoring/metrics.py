"""
Pairwise sub-metrics for trip partner compatibility.

Each metric compares one aspect of two travelers and returns a value in
[0, 1] (the destination ratio aside, see destination_overlap).

Metric Types:
- Date overlap: shared days / shorter trip length
- Destination overlap: shared destinations / distinct destination union
- Interest similarity: Jaccard index over interest tags
- Budget similarity: linear decay on the absolute daily budget gap
- Style match: exact label equality

All string comparisons are case-sensitive exact matches.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..profiles.schema import DateRange

logger = logging.getLogger(__name__)

# Currency units per day at which budget similarity reaches zero
DEFAULT_BUDGET_SENSITIVITY = 60.0

# Minimum denominator for date overlap, in days
MIN_TRIP_DAYS = 1


@dataclass(frozen=True)
class DestinationOverlap:
    """
    Shared destinations between a reference and a candidate.

    Attributes:
        count: Number of entries in common (reference duplicates included)
        ratio: count / number of distinct destinations across both lists
        common: Shared destinations in the reference order
    """
    count: int
    ratio: float
    common: Tuple[str, ...]


def date_overlap_ratio(a: DateRange, b: DateRange) -> float:
    """
    Fraction of the shorter trip that overlaps the other trip.

    Formula:
        overlap = max(0, min(end_a, end_b) - max(start_a, start_b))
        ratio = overlap / max(1 day, min(duration_a, duration_b))

    A short trip fully inside a longer one scores 1.0.

    Args:
        a: First trip window
        b: Second trip window

    Returns:
        Overlap ratio in [0, 1]
    """
    start = max(a.start, b.start)
    end = min(a.end, b.end)
    overlap = max(0, (end - start).days)
    shorter = max(MIN_TRIP_DAYS, min(a.days, b.days))
    return overlap / shorter


def destination_overlap(reference: Sequence[str], candidate: Sequence[str]) -> DestinationOverlap:
    """
    Compute shared destinations and the overlap ratio.

    The common list keeps the reference order and any duplicates the
    reference list has, while the ratio denominator counts distinct names.
    A duplicated shared destination therefore counts twice in the
    numerator but once in the denominator.

    Args:
        reference: Reference traveler's destinations
        candidate: Candidate traveler's destinations

    Returns:
        DestinationOverlap with count, ratio and common list
    """
    candidate_set = set(candidate)
    common = tuple(d for d in reference if d in candidate_set)

    union_size = len(set(reference) | candidate_set) or 1
    return DestinationOverlap(
        count=len(common),
        ratio=len(common) / union_size,
        common=common
    )


def interest_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """
    Jaccard similarity between two sets of interest tags.

    Args:
        a: First set of tags
        b: Second set of tags

    Returns:
        |A & B| / |A | B|, or 0.0 when both are empty
    """
    set_a, set_b = set(a), set(b)
    union = len(set_a | set_b) or 1
    return len(set_a & set_b) / union


def budget_similarity(a: float, b: float, sensitivity: float = DEFAULT_BUDGET_SENSITIVITY) -> float:
    """
    Linear-decay similarity between two daily budgets.

    Formula: max(0, 1 - |a - b| / sensitivity)

    Args:
        a: First daily budget
        b: Second daily budget
        sensitivity: Budget gap at which similarity reaches zero

    Returns:
        Similarity in [0, 1]
    """
    if sensitivity <= 0:
        raise ValueError(f"sensitivity must be positive, got {sensitivity}")
    return max(0.0, 1.0 - abs(a - b) / sensitivity)


def style_match(a: str, b: str) -> float:
    """1.0 if both travel style labels are identical, else 0.0."""
    return 1.0 if a == b else 0.0
