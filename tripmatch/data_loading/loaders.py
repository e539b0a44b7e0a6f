"""
Profile sources for the trip partner matcher.

This module turns raw traveler records (YAML, JSON or CSV files, or
in-memory mappings) into validated TravelProfile objects. Scoring code
never depends on a specific dataset: callers inject a ProfileSource, any
zero-argument callable returning a sequence of profiles.

Record Shape (YAML/JSON):
    id: 1
    name: "Aarav Mehta"
    home: "Mumbai, IN"
    style: "Backpacker"
    interests: ["food", "history"]
    budget_per_day: 45          # budgetPerDay is also accepted
    dates: {from: "2025-11-10", to: "2025-11-24"}
    destinations: ["Jaipur", "Agra"]
    bio: "..."
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd
import yaml

from ..profiles.schema import DateRange, TravelProfile

logger = logging.getLogger(__name__)

ProfileSource = Callable[[], Sequence[TravelProfile]]

REQUIRED_FIELDS = ["id", "style", "interests", "dates", "destinations"]
BUDGET_KEYS = ["budget_per_day", "budgetPerDay"]

# Columns expected in tabular profile files
CSV_COLUMNS = ["id", "home", "style", "interests", "budget_per_day",
               "date_from", "date_to", "destinations"]


@dataclass(frozen=True)
class ProfileCollection:
    """
    Profiles loaded from a single file.

    Attributes:
        reference: Reference traveler, if the file defines one
        travelers: Candidate travelers in file order
    """
    reference: Optional[TravelProfile]
    travelers: Tuple[TravelProfile, ...]


def profile_from_record(record: Mapping[str, Any]) -> TravelProfile:
    """
    Build a TravelProfile from a raw record.

    Args:
        record: Mapping in the record shape described in the module docstring

    Returns:
        Validated TravelProfile

    Raises:
        ValueError: If a required field is missing or a value is invalid
    """
    missing = [key for key in REQUIRED_FIELDS if key not in record]
    budget_key = next((key for key in BUDGET_KEYS if key in record), None)
    if budget_key is None:
        missing.append("budget_per_day")
    if missing:
        raise ValueError(f"Profile record {record.get('id', '<unknown>')!r} missing fields: {missing}")

    dates = record["dates"]
    if not isinstance(dates, Mapping) or "from" not in dates or "to" not in dates:
        raise ValueError(f"Profile record {record['id']!r} needs dates with 'from' and 'to'")

    return TravelProfile(
        identifier=record["id"],
        home_location=record.get("home", "") or "",
        travel_style=record["style"],
        interests=frozenset(record["interests"] or []),
        budget_per_day=record[budget_key],
        date_range=DateRange(_as_date_value(dates["from"]), _as_date_value(dates["to"])),
        destinations=tuple(record["destinations"] or []),
        name=record.get("name", "") or "",
        bio=record.get("bio", "") or "",
    )


def _as_date_value(value: Any) -> Any:
    """YAML may already parse ISO dates; anything else is passed as text."""
    if hasattr(value, "isoformat"):
        return value
    return str(value)


def profiles_from_records(records: Iterable[Mapping[str, Any]]) -> List[TravelProfile]:
    """
    Build profiles from records, rejecting duplicate identifiers.

    Args:
        records: Raw profile records

    Returns:
        List of TravelProfile in input order
    """
    profiles = []
    seen = set()
    for record in records:
        profile = profile_from_record(record)
        if profile.identifier in seen:
            raise ValueError(f"Duplicate profile identifier: {profile.identifier}")
        seen.add(profile.identifier)
        profiles.append(profile)
    return profiles


def load_profiles(filepath: str) -> ProfileCollection:
    """
    Load traveler profiles from a YAML or JSON file.

    The file must contain a "travelers" list and may contain a single
    "reference" record (the current user).

    Args:
        filepath: Path to a .yaml/.yml or .json file

    Returns:
        ProfileCollection with the reference (or None) and travelers

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has no travelers or an invalid record
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {filepath}")

    logger.info(f"Loading profiles from {filepath}")
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if not isinstance(data, dict) or not data.get("travelers"):
        raise ValueError(f"Profile file has no travelers: {filepath}")

    travelers = profiles_from_records(data["travelers"])
    reference = None
    if data.get("reference"):
        reference = profile_from_record(data["reference"])

    logger.info(f"Loaded {len(travelers)} travelers"
                f"{' and reference ' + reference.identifier if reference else ''}")
    return ProfileCollection(reference=reference, travelers=tuple(travelers))


def load_profiles_csv(
    filepath: str,
    delimiter: str = ",",
    list_separator: str = ";"
) -> List[TravelProfile]:
    """
    Load traveler profiles from a CSV file.

    List-valued columns (interests, destinations) hold values joined by
    list_separator. Optional columns: name, bio.

    Args:
        filepath: Path to the CSV file
        delimiter: Field delimiter
        list_separator: Separator inside list-valued cells

    Returns:
        List of TravelProfile in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or required columns are missing
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile CSV not found: {filepath}")

    logger.info(f"Loading profiles from {filepath} (delimiter: {repr(delimiter)})")
    df = pd.read_csv(filepath, sep=delimiter, dtype=str, keep_default_na=False)

    if df.empty:
        raise ValueError(f"Profile CSV is empty: {filepath}")

    missing_cols = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing_cols:
        raise ValueError(f"Profile CSV missing columns: {missing_cols}")

    def split_list(cell: str) -> List[str]:
        return [item.strip() for item in cell.split(list_separator) if item.strip()]

    records = []
    for row in df.to_dict(orient="records"):
        records.append({
            "id": row["id"],
            "name": row.get("name", ""),
            "home": row["home"],
            "style": row["style"],
            "interests": split_list(row["interests"]),
            "budget_per_day": row["budget_per_day"].strip(),
            "dates": {"from": row["date_from"], "to": row["date_to"]},
            "destinations": split_list(row["destinations"]),
            "bio": row.get("bio", ""),
        })

    profiles = profiles_from_records(records)
    logger.info(f"Loaded {len(profiles)} profiles from CSV")
    return profiles


class StaticProfileSource:
    """
    Profile source returning a fixed set of profiles.

    Used for tests and for in-memory sample data.
    """

    def __init__(self, profiles: Iterable[TravelProfile]):
        self._profiles = tuple(profiles)

    def __call__(self) -> Tuple[TravelProfile, ...]:
        return self._profiles


def file_profile_source(filepath: str) -> ProfileSource:
    """
    Create a ProfileSource that reads candidates from a file on each call.

    CSV files go through load_profiles_csv; anything else through
    load_profiles.
    """
    def source() -> Sequence[TravelProfile]:
        if Path(filepath).suffix.lower() == ".csv":
            return load_profiles_csv(filepath)
        return load_profiles(filepath).travelers

    return source


def find_profile(profiles: Iterable[TravelProfile], identifier: Any) -> TravelProfile:
    """
    Look up a profile by identifier.

    Raises:
        KeyError: If no profile has that identifier
    """
    wanted = str(identifier)
    for profile in profiles:
        if profile.identifier == wanted:
            return profile
    raise KeyError(f"No profile with identifier {wanted!r}")
