"""
Trip Partner Matcher

This package scores how well two travelers' trips align, based on
overlapping dates, shared destinations, shared interests, budget
similarity and travel style.

Key Design Decisions:
- Scoring is a pure function of two immutable profiles
- Fixed metric weights, configurable from YAML
- Profiles come from an injected source, never from hard-coded data
- Results are recomputed per pair and never stored
"""

from .profiles import DateRange, TravelProfile, CompatibilityResult
from .scoring import compute_compatibility, ScoringConfig

__version__ = "1.0.0"

__all__ = [
    "DateRange",
    "TravelProfile",
    "CompatibilityResult",
    "compute_compatibility",
    "ScoringConfig",
]
