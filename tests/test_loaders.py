import json
from pathlib import Path

import pytest

from tripmatch.data_loading import (
    StaticProfileSource,
    profile_from_record,
    profiles_from_records,
    load_profiles,
    load_profiles_csv,
    file_profile_source,
    find_profile,
)
from tripmatch.scoring import compute_compatibility

from conftest import build_profile

SAMPLE_PATH = Path(__file__).parent.parent / "data" / "sample_travelers.yaml"


def make_record(**overrides):
    record = {
        "id": 1,
        "name": "Aarav Mehta",
        "home": "Mumbai, IN",
        "style": "Backpacker",
        "interests": ["food", "history"],
        "budgetPerDay": 45,
        "dates": {"from": "2025-11-10", "to": "2025-11-24"},
        "destinations": ["Jaipur", "Agra"],
        "bio": "Slow travel + chai stops.",
    }
    record.update(overrides)
    return record


class TestProfileFromRecord:
    def test_builds_profile(self):
        profile = profile_from_record(make_record())
        assert profile.identifier == "1"
        assert profile.name == "Aarav Mehta"
        assert profile.home_location == "Mumbai, IN"
        assert profile.budget_per_day == 45.0
        assert profile.date_range.days == 14
        assert profile.destinations == ("Jaipur", "Agra")

    def test_snake_case_budget_key(self):
        record = make_record()
        del record["budgetPerDay"]
        record["budget_per_day"] = 30
        assert profile_from_record(record).budget_per_day == 30.0

    @pytest.mark.parametrize("key", ["id", "style", "interests", "dates", "destinations", "budgetPerDay"])
    def test_missing_field_fails(self, key):
        record = make_record()
        del record[key]
        with pytest.raises(ValueError, match="missing fields"):
            profile_from_record(record)

    def test_dates_need_from_and_to(self):
        with pytest.raises(ValueError, match="'from' and 'to'"):
            profile_from_record(make_record(dates={"from": "2025-11-10"}))

    def test_invalid_dates_fail(self):
        with pytest.raises(ValueError):
            profile_from_record(make_record(dates={"from": "2025-11-24", "to": "2025-11-10"}))

    def test_optional_fields_default_empty(self):
        record = make_record()
        for key in ["name", "home", "bio"]:
            del record[key]
        profile = profile_from_record(record)
        assert profile.name == ""
        assert profile.home_location == ""
        assert profile.bio == ""


def test_duplicate_identifiers_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        profiles_from_records([make_record(), make_record(name="Other")])


class TestLoadProfiles:
    def test_sample_dataset(self):
        collection = load_profiles(str(SAMPLE_PATH))

        assert collection.reference.identifier == "999"
        assert [p.identifier for p in collection.travelers] == ["1", "2"]
        assert collection.travelers[1].name == "Sara Khan"

    def test_json_file(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps({"travelers": [make_record()]}))

        collection = load_profiles(str(path))
        assert collection.reference is None
        assert len(collection.travelers) == 1

    def test_yaml_with_native_dates(self, tmp_path):
        path = tmp_path / "profiles.yaml"
        path.write_text(
            "travelers:\n"
            "  - id: a\n"
            "    style: Comfort\n"
            "    interests: [yoga]\n"
            "    budget_per_day: 80\n"
            "    dates: {from: 2025-11-18, to: 2025-11-30}\n"
            "    destinations: [Jaipur]\n"
        )
        profile = load_profiles(str(path)).travelers[0]
        assert profile.date_range.days == 12

    def test_yaml_timestamps_score_against_plain_dates(self, tmp_path):
        path = tmp_path / "profiles.yaml"
        path.write_text(
            "reference:\n"
            "  id: me\n"
            "  style: Backpacker\n"
            "  interests: [food]\n"
            "  budget_per_day: 50\n"
            "  dates: {from: 2025-11-15, to: 2025-11-25}\n"
            "  destinations: [Jaipur]\n"
            "travelers:\n"
            "  - id: a\n"
            "    style: Backpacker\n"
            "    interests: [food]\n"
            "    budget_per_day: 50\n"
            "    dates: {from: 2025-11-10 08:00:00, to: 2025-11-24 18:00:00}\n"
            "    destinations: [Jaipur]\n"
        )
        collection = load_profiles(str(path))
        traveler = collection.travelers[0]
        assert traveler.date_range.days == 14

        result = compute_compatibility(collection.reference, traveler, return_breakdown=True)
        assert result.breakdown["date_overlap"] == pytest.approx(0.9)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_profiles(str(tmp_path / "nope.yaml"))

    def test_no_travelers(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("reference: null\ntravelers: []\n")
        with pytest.raises(ValueError, match="no travelers"):
            load_profiles(str(path))


class TestLoadProfilesCsv:
    def write_csv(self, tmp_path, body):
        path = tmp_path / "profiles.csv"
        path.write_text(
            "id,name,home,style,interests,budget_per_day,date_from,date_to,destinations\n" + body
        )
        return path

    def test_loads_rows(self, tmp_path):
        path = self.write_csv(
            tmp_path,
            "1,Aarav,\"Mumbai, IN\",Backpacker,food;hostels,45,2025-11-10,2025-11-24,Jaipur;Agra\n"
            "2,Sara,\"Delhi, IN\",Comfort,yoga,80,2025-11-18,2025-11-30,Udaipur\n"
        )
        profiles = load_profiles_csv(str(path))

        assert [p.identifier for p in profiles] == ["1", "2"]
        assert profiles[0].interests == frozenset({"food", "hostels"})
        assert profiles[0].destinations == ("Jaipur", "Agra")
        assert profiles[0].home_location == "Mumbai, IN"
        assert profiles[1].budget_per_day == 80.0

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("id,style\n1,Backpacker\n")
        with pytest.raises(ValueError, match="missing columns"):
            load_profiles_csv(str(path))

    def test_invalid_budget(self, tmp_path):
        path = self.write_csv(tmp_path, "1,A,X,Backpacker,food,-5,2025-11-10,2025-11-24,Jaipur\n")
        with pytest.raises(ValueError, match="budget_per_day"):
            load_profiles_csv(str(path))

    def test_empty_file(self, tmp_path):
        path = self.write_csv(tmp_path, "")
        with pytest.raises(ValueError, match="empty"):
            load_profiles_csv(str(path))


class TestProfileSources:
    def test_static_source(self):
        profiles = [build_profile("a"), build_profile("b")]
        source = StaticProfileSource(profiles)
        assert [p.identifier for p in source()] == ["a", "b"]

    def test_file_source_yaml(self):
        source = file_profile_source(str(SAMPLE_PATH))
        assert [p.identifier for p in source()] == ["1", "2"]

    def test_find_profile(self):
        profiles = [build_profile("a"), build_profile("7")]
        assert find_profile(profiles, 7).identifier == "7"
        with pytest.raises(KeyError):
            find_profile(profiles, "missing")
