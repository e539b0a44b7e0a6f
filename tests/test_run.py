import json
from pathlib import Path

import pandas as pd
import pytest

from tripmatch.run import run_matching, main

ROOT = Path(__file__).parent.parent
CONFIG_PATH = ROOT / "configs" / "config.yaml"
SAMPLE_PATH = ROOT / "data" / "sample_travelers.yaml"


def test_run_matching_on_sample_data():
    result = run_matching(str(CONFIG_PATH), profiles_path=str(SAMPLE_PATH))

    assert result["reference_id"] == "999"
    results = result["results"]
    assert list(results["identifier"]) == ["1", "2"]
    assert results.loc[0, "score"] == 77
    assert result["stats"].count == 2


def test_reference_override_uses_candidate():
    result = run_matching(str(CONFIG_PATH), profiles_path=str(SAMPLE_PATH), reference_id="2")

    assert result["reference_id"] == "2"
    # The reference is not scored against itself
    assert list(result["results"]["identifier"]) == ["1"]


def test_unknown_reference_fails():
    with pytest.raises(KeyError):
        run_matching(str(CONFIG_PATH), profiles_path=str(SAMPLE_PATH), reference_id="404")


def test_writes_csv_and_json(tmp_path):
    csv_path = tmp_path / "out" / "results.csv"
    run_matching(str(CONFIG_PATH), profiles_path=str(SAMPLE_PATH), output_path=str(csv_path))
    table = pd.read_csv(csv_path)
    assert table.loc[0, "common_destinations"] == "Jaipur;Agra"

    json_path = tmp_path / "results.json"
    run_matching(str(CONFIG_PATH), profiles_path=str(SAMPLE_PATH), output_path=str(json_path))
    rows = json.loads(json_path.read_text())
    assert rows[0]["common_destinations"] == ["Jaipur", "Agra"]


def test_main_exit_codes(tmp_path):
    assert main(["--config", str(CONFIG_PATH), "--profiles", str(SAMPLE_PATH)]) == 0
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
