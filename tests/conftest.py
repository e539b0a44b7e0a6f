"""Shared fixtures: synthetic traveler profiles."""

import pytest

from tripmatch.profiles import make_profile


def build_profile(identifier="p", **overrides):
    """Create a profile with neutral defaults, overridden per test."""
    fields = dict(
        style="Backpacker",
        interests=["food"],
        budget_per_day=50,
        start="2025-11-15",
        end="2025-11-25",
        destinations=["Jaipur"],
        home_location="Bengaluru, IN",
    )
    fields.update(overrides)
    return make_profile(identifier, **fields)


@pytest.fixture
def reference():
    """The reference traveler from the sample dataset."""
    return make_profile(
        "999",
        name="You",
        home_location="Bengaluru, IN",
        style="Backpacker",
        interests=["food", "photography", "markets", "hostels", "trains"],
        budget_per_day=50,
        start="2025-11-15",
        end="2025-11-25",
        destinations=["Jaipur", "Agra", "Udaipur"],
    )


@pytest.fixture
def aarav():
    return make_profile(
        "1",
        name="Aarav Mehta",
        home_location="Mumbai, IN",
        style="Backpacker",
        interests=["food", "history", "street-art", "hostels", "trains"],
        budget_per_day=45,
        start="2025-11-10",
        end="2025-11-24",
        destinations=["Jaipur", "Agra", "Varanasi", "Delhi"],
    )


@pytest.fixture
def sara():
    return make_profile(
        "2",
        name="Sara Khan",
        home_location="Delhi, IN",
        style="Comfort",
        interests=["museums", "cafes", "markets", "architecture", "yoga"],
        budget_per_day=80,
        start="2025-11-18",
        end="2025-11-30",
        destinations=["Jaipur", "Udaipur", "Jodhpur"],
    )
