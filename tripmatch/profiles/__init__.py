"""Traveler profile and result records."""

from .schema import DateRange, TravelProfile, CompatibilityResult, make_profile

__all__ = [
    "DateRange",
    "TravelProfile",
    "CompatibilityResult",
    "make_profile",
]
