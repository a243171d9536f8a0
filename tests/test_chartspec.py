"""Tests for the explorer layout spec."""

import pytest

from citybars.chartspec import ExplorerColors, ExplorerSpec, get_compact_spec, get_default_spec


def test_derived_layout():
    spec = ExplorerSpec(window_width=1280, window_height=800)
    assert spec.main_view_width == 1280 - 150 - 100
    assert spec.main_view_height == 650
    assert spec.bars_on_screen == 32
    assert spec.viewport_height == 64
    assert spec.figsize == (12.8, 8.0)


def test_json_round_trip(tmp_path):
    spec = get_compact_spec()
    spec.colors = ExplorerColors(selected="#000000")
    path = tmp_path / "spec.json"
    spec.to_json(str(path))
    loaded = ExplorerSpec.from_json(filepath=str(path))
    assert loaded == spec
    assert isinstance(loaded.colors, ExplorerColors)


def test_window_too_small_rejected():
    with pytest.raises(ValueError, match="too small"):
        ExplorerSpec(window_width=200, window_height=800)


def test_default_spec_uses_given_size():
    spec = get_default_spec(1000, 700)
    assert (spec.window_width, spec.window_height) == (1000, 700)
