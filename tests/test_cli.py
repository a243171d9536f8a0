"""Tests for the citybars command line."""

import json

import pytest
from click.testing import CliRunner

from citybars.cli import main


def _json_from(output):
    # log lines may share the captured output; the summary is the trailing JSON
    return json.loads(output[output.index("{"):])


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "cities.json"
    path.write_text(json.dumps([
        {"name": "State", "values": ["MA", "TX"]},
        {"name": "City", "values": ["Boston", "Austin", "Boston", "Springfield"]},
    ]))
    return path


def test_summary_prints_counts(dataset):
    result = CliRunner().invoke(main, [str(dataset), "--summary"])
    assert result.exit_code == 0
    assert _json_from(result.output) == {"Boston": 2, "Austin": 1, "Springfield": 1}


def test_summary_missing_group_is_empty(dataset):
    result = CliRunner().invoke(main, [str(dataset), "--summary", "--group", "Town"])
    assert result.exit_code == 0
    assert _json_from(result.output) == {}


def test_missing_dataset_fails(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "nope.json"), "--summary"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_window_too_small_fails(dataset):
    result = CliRunner().invoke(main, [str(dataset), "--width", "100", "--export", "x"])
    assert result.exit_code == 1
    assert "Invalid layout" in result.output


def test_export_writes_files(dataset, tmp_path):
    base = tmp_path / "out" / "chart"
    result = CliRunner().invoke(main, [
        str(dataset), "--export", str(base), "--filter", "spring",
        "--width", "600", "--height", "350",
    ])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "chart.png").exists()
    assert (tmp_path / "out" / "chart.svg").exists()


def test_nested_values_fail_cleanly(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"name": "City", "values": [["Boston"]]}]))
    result = CliRunner().invoke(main, [str(path), "--summary"])
    assert result.exit_code == 1
    assert "nested" in result.output
