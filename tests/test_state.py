"""Tests for the reactive state container."""

import math
from unittest.mock import Mock

from jokoui.state import Change, ReactiveState, create_reactive_state, has_changed


def test_write_notifies_with_change_details():
    listener = Mock()
    state = create_reactive_state({"count": 0}, listener)

    state.count = 1

    listener.assert_called_once()
    change = listener.call_args.args[0]
    assert isinstance(change, Change)
    assert change.field == "count"
    assert change.old_value == 0
    assert change.new_value == 1
    assert change.state == {"count": 1}


def test_idempotent_write_notifies_once():
    listener = Mock()
    state = create_reactive_state({"name": "a"}, listener)

    state.name = "b"
    state.name = "b"

    assert listener.call_count == 1


def test_listener_runs_before_write_returns():
    seen = []
    state = create_reactive_state({"count": 0}, lambda change: seen.append(change.new_value))

    state.count = 5
    assert seen == [5]


def test_initial_fields_are_copied():
    initial = {"count": 0}
    state = create_reactive_state(initial)

    state.count = 3

    assert initial == {"count": 0}
    assert state.count == 3


def test_missing_field_reads_none_and_write_creates_it():
    listener = Mock()
    state = create_reactive_state({}, listener)

    assert state.missing is None
    state.missing = None

    change = listener.call_args.args[0]
    assert change.field == "missing"
    assert change.old_value is None
    assert "missing" in state


def test_nested_write_notifies_root_listener():
    listener = Mock()
    state = create_reactive_state({"a": {"b": 1}}, listener)

    state.a.b = 2

    change = listener.call_args.args[0]
    assert change.field == "b"
    assert change.new_value == 2
    assert state.a.b == 2


def test_deeply_nested_write_notifies():
    listener = Mock()
    state = create_reactive_state({"user": {"company": {"name": "Acme"}}}, listener)

    state.user.company.name = "Globex"

    assert listener.call_args.args[0].field == "name"
    assert state.user.company.name == "Globex"


def test_nested_reads_return_new_views():
    state = create_reactive_state({"a": {"b": 1}})

    first, second = state.a, state.a
    assert isinstance(first, ReactiveState)
    assert first is not second


def test_sequence_fields_are_not_reactive():
    listener = Mock()
    items = [1, 2]
    state = create_reactive_state({"items": items}, listener)

    state.items.append(3)

    assert state.items is items
    assert state.items == [1, 2, 3]
    listener.assert_not_called()


def test_item_access_matches_attribute_access():
    listener = Mock()
    state = create_reactive_state({"get": 1}, listener)

    state["get"] = 2

    assert state["get"] == 2
    assert listener.call_count == 1
    assert state.get("absent", "fallback") == "fallback"


def test_equal_but_distinct_objects_are_changes():
    listener = Mock()
    value = {"x": 1}
    state = create_reactive_state({"obj": value}, listener)

    state.obj = value
    listener.assert_not_called()

    state.obj = {"x": 1}
    listener.assert_called_once()


def test_has_changed_primitives():
    assert not has_changed(1, 1)
    assert not has_changed(1, 1.0)
    assert not has_changed("a", "a")
    assert not has_changed(None, None)
    assert has_changed(True, 1)
    assert has_changed(0, None)
    assert has_changed("1", 1)
    assert has_changed(math.nan, math.nan)


def test_to_dict_and_len():
    state = create_reactive_state({"a": 1, "b": [2]})

    assert state.to_dict() == {"a": 1, "b": [2]}
    assert len(state) == 2
    assert sorted(state) == ["a", "b"]


def test_helper_names_stay_reachable_as_items():
    state = create_reactive_state({"get": "field", "to_dict": "other"})

    assert state["get"] == "field"
    assert state["to_dict"] == "other"
    assert callable(state.get)
    assert state.to_dict() == {"get": "field", "to_dict": "other"}
