"""Tests for the case-insensitive filter."""

import pytest

from citybars.filtering import FilterController, compile_matcher


def _selected(state):
    return {c.key for c in state.active_cities if c.selected}


def test_empty_pattern_matches_nothing():
    assert compile_matcher("")("Springfield") is False


def test_matcher_is_case_insensitive():
    match = compile_matcher("SPRING")
    assert match("Springfield")
    assert match("Palm Springs")
    assert not match("Boston")


def test_regex_syntax_is_honoured():
    match = compile_matcher("^b")
    assert match("Boston")
    assert not match("Lubbock")


@pytest.mark.parametrize("pattern", ["spring(", "[", "*", "a{2,1}"])
def test_invalid_pattern_never_raises(pattern):
    match = compile_matcher(pattern)
    assert match("no such city") is False


def test_invalid_pattern_falls_back_to_literal():
    match = compile_matcher("spring(")
    assert match("Old Spring(s)")
    assert not match("Springfield")


def test_empty_filter_selects_nothing(state):
    for city in state.active_cities:
        city.selected = True
    assert FilterController(state).apply("") == []
    assert _selected(state) == set()


def test_spring_selects_exactly_matches(state):
    selected = FilterController(state).apply("spring")
    assert selected == ["Springfield", "Springdale"]
    for city in state.active_cities:
        assert city.selected == (city.key in {"Springfield", "Springdale"})


def test_only_active_window_is_touched(state):
    FilterController(state).apply("spring")
    palm = next(c for c in state.cities if c.key == "Palm Springs")
    assert not palm.selected


def test_apply_is_idempotent(state):
    controller = FilterController(state)
    first = controller.apply("o")
    snapshot = [(c.key, c.selected) for c in state.cities]
    assert controller.apply("o") == first
    assert [(c.key, c.selected) for c in state.cities] == snapshot


def test_reapply_uses_stored_pattern(state):
    controller = FilterController(state)
    controller.apply("spring")
    assert state.filter_pattern == "spring"
    state.scroll_to(state.max_viewport_y)
    assert controller.apply() == ["Palm Springs"]


def test_filter_on_empty_window(spec):
    from citybars.state import ExplorerState

    empty = ExplorerState.from_spec([], spec)
    assert FilterController(empty).apply("spring") == []
