"""Tests for window arithmetic and keyed reconciliation."""

import pytest

from citybars.window import clamp_viewport, reconcile, window_bounds


@pytest.mark.parametrize("y,expected", [(-5, 0), (0, 0), (12.5, 12.5), (30, 30), (99, 30)])
def test_clamp_viewport(y, expected):
    assert clamp_viewport(y, context_height=50, viewport_height=20) == expected


def test_clamp_when_list_shorter_than_viewport():
    assert clamp_viewport(10, context_height=8, viewport_height=20) == 0


def test_window_bounds_top():
    assert window_bounds(0, 20, 2, 25) == (0, 10)


def test_window_bounds_fractional_offset():
    assert window_bounds(5.3, 20, 2, 25) == (2, 12)


def test_window_bounds_trailing_edge_is_shorter():
    assert window_bounds(36, 20, 2, 25) == (18, 25)


def test_window_bounds_empty_list():
    assert window_bounds(0, 20, 2, 0) == (0, 0)


def test_reconcile_splits_keys():
    diff = reconcile(["a", "b", "c"], ["b", "c", "d", "e"])
    assert diff.enter == ["d", "e"]
    assert diff.exit == ["a"]
    assert diff.update == ["b", "c"]
    assert diff.changed


def test_reconcile_same_keys_unchanged():
    diff = reconcile(["a", "b"], ["b", "a"])
    assert diff.enter == [] and diff.exit == []
    assert diff.update == ["b", "a"]
    assert not diff.changed


def test_reconcile_from_empty():
    diff = reconcile([], ["a"])
    assert diff.enter == ["a"]
    assert diff.exit == [] and diff.update == []
