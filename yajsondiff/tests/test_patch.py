# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import re
from types import MappingProxyType

import pytest

from yajsondiff import (
    diff, apply_change, revert_change, apply_changes, revert_changes,
    apply_diff, revert_diff, InvalidChange)
from yajsondiff.diff_format import op_added, op_removed, op_edited, op_array


def test_apply_does_not_modify_change_records():
    change1 = {"kind": "N", "path": ["foo"], "rhs": {}}
    change2 = {"kind": "N", "path": ["foo", "bar"], "rhs": "bug"}
    clone1 = copy.deepcopy(change1)
    clone2 = copy.deepcopy(change2)

    target = apply_changes({}, [change1, change2])
    assert list(target) == ["foo"]
    assert list(target["foo"]) == ["bar"]
    assert change1 == clone1
    assert change2 == clone2


def test_apply_does_not_modify_target():
    target = {"a": [1, 2], "b": {"c": 3}}
    clone = copy.deepcopy(target)
    result = apply_changes(target, [
        op_edited(["b", "c"], 3, 4),
        op_array(["a"], 1, op_removed(None, 2)),
        ])
    assert result == {"a": [1], "b": {"c": 4}}
    assert target == clone


@pytest.mark.parametrize("lhs, rhs", [
    (True, False),
    (1, 3),
    (0, None),
    (-1, 0),
    ])
def test_apply_and_revert_falsy_values(lhs, rhs):
    change = op_edited(["foo"], lhs, rhs)
    assert apply_changes({"foo": lhs}, change) == {"foo": rhs}
    assert revert_changes({"foo": rhs}, change) == {"foo": lhs}
    assert revert_changes({"foo": "hello"}, change) == {"foo": lhs}


def test_apply_nothing():
    target = {"a": 1}
    result = apply_changes(target, None)
    assert result == target
    assert result is not target
    assert revert_changes(target, None) == target
    assert apply_changes(target, [None, op_edited(["a"], 1, 2), None]) == {"a": 2}


def test_array_removal_shifts_items():
    change = {"kind": "A", "path": ["a"], "index": 0, "item": {"kind": "D", "lhs": 1}}
    assert apply_changes({"a": [1, 2, 3]}, change) == {"a": [2, 3]}
    # Reverting a removal sets the slot, it does not insert
    assert revert_changes({"a": [2, 3]}, change) == {"a": [1, 3]}


def test_array_assignment_pads_with_none():
    change = op_array(["a"], 2, op_added(None, "x"))
    assert apply_changes({}, change) == {"a": [None, None, "x"]}
    assert apply_changes({"a": ["y"]}, change) == {"a": ["y", None, "x"]}


def test_missing_containers_are_created():
    assert apply_changes({}, op_added(["a", 0, "b"], 1)) == {"a": [{"b": 1}]}
    assert apply_changes({}, op_added(["a", "b", "c"], 1)) == {"a": {"b": {"c": 1}}}
    assert revert_changes({}, op_removed(["a", "b"], 1)) == {"a": {"b": 1}}


def test_nested_array_item_with_path():
    change = {
        "kind": "A", "path": ["a"], "index": 0,
        "item": {"kind": "E", "path": ["b"], "lhs": 1, "rhs": 2},
        }
    assert apply_changes({"a": [{"b": 1}]}, change) == {"a": [{"b": 2}]}
    assert revert_changes({"a": [{"b": 2}]}, change) == {"a": [{"b": 1}]}

    with pytest.raises(InvalidChange):
        apply_changes({"a": []}, change)


def test_nested_array_changes():
    change = op_array(["a"], 0, op_array(None, 1, op_added(None, "z")))
    assert apply_changes({"a": [["x"]]}, change) == {"a": [["x", "z"]]}
    assert revert_changes({"a": [["x", "z"]]}, change) == {"a": [["x"]]}


def test_removing_missing_values_is_a_noop():
    assert apply_changes({"a": 1}, op_removed(["b"], 2)) == {"a": 1}
    assert apply_changes({"a": [1]}, op_array(["a"], 3, op_removed(None, 2))) == {"a": [1]}
    assert revert_changes({"a": 1}, op_added(["b"], 2)) == {"a": 1}


def test_root_changes():
    d = diff(re.compile("foo"), re.compile("foo", re.IGNORECASE))
    assert apply_changes("/foo/", d) == "/foo/i"
    assert revert_changes("/foo/i", d) == "/foo/"

    d = diff([1, 2, 3], [1])
    assert apply_changes([1, 2, 3], d) == [1]
    assert revert_changes([1], d) == [1, 2, 3]


@pytest.mark.parametrize("change", [
    {"kind": "N", "rhs": 1},
    {"kind": "D", "path": [], "lhs": 1},
    {"kind": "X", "path": ["a"]},
    {"kind": "A", "path": ["a"], "index": "0", "item": {"kind": "N", "rhs": 1}},
    {"kind": "A", "path": ["a"], "index": 0},
    {"kind": "E", "path": "a", "lhs": 1, "rhs": 2},
    ["N", ["a"], 1],
    ])
def test_invalid_changes(change):
    with pytest.raises(InvalidChange):
        apply_changes({"a": []}, change)
    with pytest.raises(InvalidChange):
        revert_changes({"a": []}, change)


def test_path_through_scalar_is_invalid():
    with pytest.raises(InvalidChange):
        apply_changes({"a": 5}, op_added(["a", "b"], 1))
    with pytest.raises(InvalidChange):
        apply_changes({"a": {}}, op_array(["a"], 0, op_added(None, 1)))
    with pytest.raises(InvalidChange):
        apply_changes({"a": []}, op_added(["a", "b"], 1))


def test_apply_change_in_place():
    target = {"a": 1}
    result = apply_change(target, op_edited(["a"], 1, 2))
    assert result is target
    assert target == {"a": 2}

    result = revert_change(target, op_edited(["a"], 1, 2))
    assert result is target
    assert target == {"a": 1}

    assert apply_change(1, op_edited(None, 1, 2)) == 2


def test_apply_diff_with_filter():
    target = {"a": 1, "b": 2}
    source = {"a": 3, "b": 4, "c": 5}
    seen = []

    def only_a(t, s, change):
        seen.append(change.path)
        assert t is target
        assert s is source
        return change.path == ["a"]

    result = apply_diff(target, source, only_a)
    assert result is target
    assert target == {"a": 3, "b": 2}
    assert seen == [["a"], ["b"], ["c"]]


def test_apply_diff_without_filter():
    target = {"a": [1, 2, 3], "b": {"c": 1}}
    source = {"a": [1], "b": {"d": 1}}
    assert apply_diff(target, source) is target
    assert target == source


def test_revert_diff():
    target = {"a": 3, "c": 1}
    source = {"a": 1}
    assert revert_diff(target, source) is target
    assert target == source

    target = {"a": 3, "c": 1}
    revert_diff(target, source, lambda t, s, change: change.kind == "N")
    assert target == {"a": 3}


def test_apply_and_revert_frozen_values():
    obj1 = MappingProxyType({
        "foo": "bar",
        "faz": ["pie", 1, MappingProxyType({"food": "yum"})],
        })
    obj2 = MappingProxyType({
        "faz": [1, "pie", MappingProxyType({"food": "yum"})],
        "foo": "bar",
        })
    d = diff(obj1, obj2)
    assert len(d) == 2

    result = apply_changes(obj1, d)
    assert type(result) is dict
    assert type(result["faz"][2]) is dict
    assert result == {"foo": "bar", "faz": [1, "pie", {"food": "yum"}]}

    reverted = revert_changes(obj2, d)
    assert type(reverted) is dict
    assert reverted == {"foo": "bar", "faz": ["pie", 1, {"food": "yum"}]}


def test_apply_frozen_values_held_by_changes():
    d = diff({"a": 1, "b": MappingProxyType({"c": [1]})}, {"a": 1})
    assert d == [{"kind": "D", "path": ["b"], "lhs": {"c": [1]}}]
    result = revert_changes({"a": 1}, d)
    assert result == {"a": 1, "b": {"c": [1]}}
    assert type(result["b"]) is dict
    result["b"]["c"].append(2)
    assert d[0].lhs["c"] == [1]


def test_apply_keeps_shared_and_cyclic_structure():
    shared = {"x": 1}
    target = {"a": shared, "b": shared}
    result = apply_changes(target, op_edited(["a", "x"], 1, 2))
    assert result["b"] == {"x": 2}
    assert result["a"] is result["b"]

    cyclic = {"n": 1}
    cyclic["self"] = cyclic
    result = apply_changes(cyclic, op_edited(["n"], 1, 2))
    assert result["n"] == 2
    assert result["self"] is result
    assert cyclic["n"] == 1


def test_apply_read_only_changes():
    obj1 = {"foo": "bar", "faz": ["pie", 1, {"food": "yum"}]}
    obj2 = {"faz": [1, "pie", {"food": "yum"}], "foo": "bar"}
    d = diff(obj1, obj2)
    with pytest.raises(TypeError):
        d[0]["rhs"] = "changed"
    assert apply_changes(obj1, d) == obj2
    assert revert_changes(obj2, d) == obj1


def test_invalid_change_carries_record():
    change = op_added(["a", "b"], 1)
    with pytest.raises(InvalidChange) as exc_info:
        apply_changes({"a": 5}, change)
    assert exc_info.value.change == change
    assert isinstance(exc_info.value, ValueError)

    with pytest.raises(InvalidChange) as exc_info:
        apply_changes({}, {"kind": "D", "lhs": 1})
    assert exc_info.value.change == {"kind": "D", "path": None, "lhs": 1}

    with pytest.raises(InvalidChange) as exc_info:
        apply_changes({}, {"kind": "X", "path": ["a"]})
    assert exc_info.value.change == {"kind": "X", "path": ["a"]}
