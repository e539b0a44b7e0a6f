"""
Input and output records for trip partner matching.

Defines the immutable traveler profile consumed by the scoring core and
the result record it produces for each (reference, candidate) pair.

Profile Fields:
- identifier: Unique key of the traveler
- home_location: Free-text home city
- travel_style: Opaque style label (e.g. "Backpacker", "Comfort")
- interests: Set of interest tags
- budget_per_day: Non-negative daily budget, currency-agnostic
- date_range: Trip start and end dates (start <= end)
- destinations: Ordered destination names, duplicates allowed
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Dict, Any, Tuple, FrozenSet, Iterable, Union


DateLike = Union[date, str]


def _parse_date(value: DateLike, label: str) -> date:
    """Parse an ISO date string (YYYY-MM-DD) or pass a date through.

    Timestamps are truncated to their calendar day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a date or ISO date string, got {type(value).__name__}")
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"{label} is not a valid ISO date (YYYY-MM-DD): {value!r}") from None


@dataclass(frozen=True)
class DateRange:
    """
    Trip window; duration is end minus start.

    Attributes:
        start: First day of the trip
        end: Last day of the trip (never before start)
    """
    start: date
    end: date

    def __post_init__(self):
        """Parse string dates and check ordering."""
        start = _parse_date(self.start, "start date")
        end = _parse_date(self.end, "end date")
        if start > end:
            raise ValueError(f"Trip start {start.isoformat()} is after end {end.isoformat()}")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @property
    def days(self) -> int:
        """Trip length in days (end minus start)."""
        return (self.end - self.start).days

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary in the data-source shape."""
        return {"from": self.start.isoformat(), "to": self.end.isoformat()}


@dataclass(frozen=True)
class TravelProfile:
    """
    Immutable traveler record supplied by a profile source.

    Interests are collapsed to a frozenset; destinations keep their input
    order and duplicates because shared destinations are reported in the
    reference traveler's order.
    """
    identifier: str
    home_location: str
    travel_style: str
    interests: FrozenSet[str]
    budget_per_day: float
    date_range: DateRange
    destinations: Tuple[str, ...]
    name: str = ""
    bio: str = ""

    def __post_init__(self):
        """Normalize collections and validate constraints."""
        identifier = str(self.identifier).strip() if self.identifier is not None else ""
        if not identifier:
            raise ValueError("identifier must be a non-empty value")
        object.__setattr__(self, "identifier", identifier)

        if isinstance(self.interests, str) or isinstance(self.destinations, str):
            raise ValueError(
                f"interests and destinations must be collections of strings, "
                f"not a single string (profile {identifier})"
            )
        object.__setattr__(self, "interests", frozenset(self.interests))
        object.__setattr__(self, "destinations", tuple(self.destinations))

        if isinstance(self.budget_per_day, bool):
            raise ValueError(f"budget_per_day must be a number (profile {identifier})")
        try:
            budget = float(self.budget_per_day)
        except (TypeError, ValueError):
            raise ValueError(
                f"budget_per_day must be a number, got {self.budget_per_day!r} (profile {identifier})"
            ) from None
        if not math.isfinite(budget) or budget < 0:
            raise ValueError(
                f"budget_per_day must be finite and non-negative, got {budget} (profile {identifier})"
            )
        object.__setattr__(self, "budget_per_day", budget)

        if not isinstance(self.date_range, DateRange):
            raise ValueError(f"date_range must be a DateRange (profile {identifier})")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in the data-source shape."""
        return {
            "id": self.identifier,
            "name": self.name,
            "home": self.home_location,
            "style": self.travel_style,
            "interests": sorted(self.interests),
            "budget_per_day": self.budget_per_day,
            "dates": self.date_range.to_dict(),
            "destinations": list(self.destinations),
            "bio": self.bio,
        }


def make_profile(
    identifier: str,
    *,
    style: str,
    interests: Iterable[str],
    budget_per_day: float,
    start: DateLike,
    end: DateLike,
    destinations: Iterable[str],
    home_location: str = "",
    name: str = "",
    bio: str = ""
) -> TravelProfile:
    """
    Convenience constructor taking flat date arguments.

    Args:
        identifier: Unique traveler key
        style: Travel style label
        interests: Interest tags
        budget_per_day: Daily budget
        start: Trip start date or ISO string
        end: Trip end date or ISO string
        destinations: Destination names in order
        home_location: Home city
        name: Display name
        bio: Display bio

    Returns:
        Validated TravelProfile
    """
    return TravelProfile(
        identifier=identifier,
        home_location=home_location,
        travel_style=style,
        interests=frozenset(interests),
        budget_per_day=budget_per_day,
        date_range=DateRange(start, end),
        destinations=tuple(destinations),
        name=name,
        bio=bio,
    )


@dataclass(frozen=True)
class CompatibilityResult:
    """
    Result of compatibility scoring for one pair.

    Attributes:
        score: Aggregate compatibility percentage [0, 100]
        common_destinations: Reference destinations also in the candidate's list
        breakdown: Optional per-metric sub-scores and raw score
    """
    score: int
    common_destinations: Tuple[str, ...] = field(default_factory=tuple)
    breakdown: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "score": self.score,
            "common_destinations": list(self.common_destinations)
        }
        if self.breakdown:
            result["breakdown"] = self.breakdown
        return result
