"""Profile source and loading module."""

from .loaders import (
    ProfileSource,
    ProfileCollection,
    StaticProfileSource,
    profile_from_record,
    profiles_from_records,
    load_profiles,
    load_profiles_csv,
    file_profile_source,
    find_profile,
)

__all__ = [
    "ProfileSource",
    "ProfileCollection",
    "StaticProfileSource",
    "profile_from_record",
    "profiles_from_records",
    "load_profiles",
    "load_profiles_csv",
    "file_profile_source",
    "find_profile",
]
