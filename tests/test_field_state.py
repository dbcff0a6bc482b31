"""Tests for the composite field state engine."""

import pytest

from pyqt_jsonform.forms.field_state import ArrayFieldState, ObjectFieldState


OBJECT_SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "number"},
        "nested": {"type": "object", "properties": {"x": {"type": "string"}}},
    },
}


def test_object_seed_priority():
    schema = dict(OBJECT_SCHEMA, default={"name": "default"})
    assert ObjectFieldState(schema, {"name": "doc"}).value == {"name": "doc"}
    assert ObjectFieldState(schema).value == {"name": "default"}
    assert ObjectFieldState(OBJECT_SCHEMA).value == {}


def test_object_seed_does_not_share_schema_default():
    schema = dict(OBJECT_SCHEMA, default={"name": "default"})
    state = ObjectFieldState(schema)
    state.commit_child("name", "changed")
    assert schema["default"] == {"name": "default"}


def test_object_commit_preserves_siblings_and_unknown_keys():
    document = {"name": "Ada", "age": 36, "nested": {"x": "1"}, "extra": [1, 2]}
    emitted = []
    state = ObjectFieldState(OBJECT_SCHEMA, document, on_change=emitted.append)

    state.commit_child("age", 37)

    assert emitted == [{"name": "Ada", "age": 37, "nested": {"x": "1"}, "extra": [1, 2]}]
    assert state.value is emitted[0]
    assert document["age"] == 36


def test_object_notification_observes_merged_state():
    observed = []
    state = None

    def on_change(value):
        observed.append((value, state.value))

    state = ObjectFieldState(OBJECT_SCHEMA, {}, on_change=on_change)
    state.commit_child("name", "x")

    value, committed = observed[0]
    assert value == {"name": "x"}
    assert committed is value


def test_object_emitted_values_are_not_mutated_later():
    emitted = []
    state = ObjectFieldState(OBJECT_SCHEMA, {}, on_change=emitted.append)
    state.commit_child("name", "a")
    state.commit_child("age", 1)
    assert emitted == [{"name": "a"}, {"name": "a", "age": 1}]


def test_object_required_and_rendered_order():
    state = ObjectFieldState(OBJECT_SCHEMA, {"extra": True})
    assert state.is_required("name")
    assert not state.is_required("age")
    assert [name for name, _ in state.rendered_properties()] == ["name", "age", "nested"]


def test_nested_update_propagates_one_level_at_a_time():
    root_values = []
    root = ObjectFieldState(OBJECT_SCHEMA, {"name": "keep", "nested": {"x": "old"}},
                            on_change=root_values.append)
    child = ObjectFieldState(OBJECT_SCHEMA["properties"]["nested"], root.child_value("nested"),
                             on_change=lambda value: root.commit_child("nested", value))

    child.commit_child("x", "new")

    assert child.value == {"x": "new"}
    assert root_values == [{"name": "keep", "nested": {"x": "new"}}]


ARRAY_SCHEMA = {"type": "array", "items": {"type": "string"}}


def test_array_add_on_empty_string_items():
    emitted = []
    state = ArrayFieldState(ARRAY_SCHEMA, on_change=emitted.append)
    state.add()
    assert state.value == [""]
    assert emitted == [[""]]


def test_array_seed_priority():
    schema = dict(ARRAY_SCHEMA, default=["d"])
    assert ArrayFieldState(schema, ["doc"]).value == ["doc"]
    assert ArrayFieldState(schema, "not a list").value == ["d"]
    assert ArrayFieldState(ARRAY_SCHEMA).value == []


def test_array_remove_shifts_later_items():
    original = ["a", "b", "c", "d", "e"]
    state = ArrayFieldState(ARRAY_SCHEMA, original)

    state.remove(2)

    assert len(state) == len(original) - 1
    assert state.value == ["a", "b", "d", "e"]
    for old_index in range(3, len(original)):
        assert state.value[old_index - 1] == original[old_index]


def test_array_update_replaces_in_place():
    emitted = []
    state = ArrayFieldState(ARRAY_SCHEMA, ["a", "b", "c"], on_change=emitted.append)
    state.update(1, "B")
    assert emitted == [["a", "B", "c"]]


def test_array_index_out_of_range():
    state = ArrayFieldState(ARRAY_SCHEMA, ["a"])
    with pytest.raises(IndexError):
        state.remove(1)
    with pytest.raises(IndexError):
        state.update(-1, "x")
    assert state.value == ["a"]


def test_array_item_heuristics():
    required = ArrayFieldState({"type": "array", "items": {"type": "string", "minLength": 2}})
    assert required.item_required
    assert not ArrayFieldState(ARRAY_SCHEMA).item_required

    titled = ArrayFieldState({"type": "array", "items": {"type": "string", "description": "A tag"}})
    assert titled.item_title() == "A tag"
    assert ArrayFieldState(ARRAY_SCHEMA).item_title() == "Item"


def test_array_injected_default_factory():
    state = ArrayFieldState(ARRAY_SCHEMA, default_factory=lambda items: "new")
    state.add()
    assert state.value == ["new"]


def test_array_without_items_schema():
    state = ArrayFieldState({"type": "array"})
    state.add()
    assert state.value == [None]
    assert state.items_schema.type is None
