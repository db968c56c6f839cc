# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from collections.abc import Mapping, MutableMapping

from .diff_format import (
    Change, ChangeKind, Undefined, as_change, validate_change, is_root_change)
from .diffing.generic import observable_diff
from .log import InvalidChange, debug


__all__ = [
    "apply_change", "revert_change",
    "apply_changes", "revert_changes",
    "apply_diff", "revert_diff",
    ]


def _is_index(key):
    return isinstance(key, int) and not isinstance(key, bool)


def _check_container(node, path):
    if not isinstance(node, (list, MutableMapping)):
        raise InvalidChange(
            "Cannot resolve path {}: found {} where a container was expected.".format(
                path, type(node).__name__))


def _get_item(node, key):
    if isinstance(node, list):
        if _is_index(key) and 0 <= key < len(node):
            return node[key]
        return Undefined
    return node.get(key, Undefined)


def _set_item(node, key, value):
    if isinstance(node, list):
        if not _is_index(key):
            raise InvalidChange("Cannot set key {!r} on a list.".format(key))
        if key >= len(node):
            debug("Padding list of length %d up to index %d", len(node), key)
            node.extend([None] * (key + 1 - len(node)))
    node[key] = value


def _remove_item(node, key):
    if isinstance(node, list):
        # Removal shifts the following items down
        if _is_index(key) and 0 <= key < len(node):
            del node[key]
            return
    elif key in node:
        del node[key]
        return
    debug("Nothing to remove at key %r", key)


def _resolve_parent(root, path):
    """Walk path from root, returning the container holding the last key.

    Missing intermediate containers are created along the way: a list
    when the following key is an integer, a dict otherwise.
    """
    node = root
    last = len(path) - 1
    for i in range(last):
        _check_container(node, path)
        key = path[i]
        child = _get_item(node, key)
        if child is Undefined:
            child = [] if _is_index(path[i + 1]) else {}
            _set_item(node, key, child)
        node = child
    _check_container(node, path)
    return node, path[last]


def _patch_array(arr, index, change, revert):
    "Apply or revert change to the item at index of list arr."
    if not isinstance(arr, list):
        raise InvalidChange(
            "Array change expects a list, found {}.".format(type(arr).__name__))
    if change.get("path"):
        # The nested change reaches into the array item
        item = _get_item(arr, index)
        if item is Undefined:
            raise InvalidChange(
                "Array change refers to missing index {}.".format(index))
        node, key = _resolve_parent(item, change.path)
        _patch_at(node, key, change, revert)
    else:
        _patch_at(arr, index, change, revert)


def _patch_at(node, key, change, revert):
    "Apply or revert change to the value at key in container node."
    kind = change.kind
    if kind == ChangeKind.ARRAY:
        arr = _get_item(node, key)
        if arr is Undefined:
            arr = []
            _set_item(node, key, arr)
        _patch_array(arr, change.index, change.item, revert)
    elif kind == ChangeKind.ADDED:
        if revert:
            _remove_item(node, key)
        else:
            _set_item(node, key, change.rhs)
    elif kind == ChangeKind.REMOVED:
        if revert:
            _set_item(node, key, change.lhs)
        else:
            _remove_item(node, key)
    elif kind == ChangeKind.EDITED:
        _set_item(node, key, change.lhs if revert else change.rhs)
    else:
        raise InvalidChange("Unknown change kind '{}'.".format(kind))


def _patch(target, change, revert):
    change = as_change(change)
    validate_change(change, deep=True)

    if is_root_change(change):
        if change.kind == ChangeKind.EDITED:
            return change.lhs if revert else change.rhs
        elif change.kind != ChangeKind.ARRAY:
            raise InvalidChange("This change doesn't have a path.", change)

    try:
        if is_root_change(change):
            _patch_array(target, change.index, change.item, revert)
        else:
            node, key = _resolve_parent(target, change.path)
            _patch_at(node, key, change, revert)
    except InvalidChange as e:
        # Path resolution errors don't know which record they came from
        if e.change is None:
            e.change = change
        raise
    return target


def apply_change(target, change):
    """Apply a single change to target, in place.

    Returns target, or the replacement value for a change to
    the root of the value.
    """
    return _patch(target, change, False)


def revert_change(target, change):
    """Revert a single change on target, in place.

    Returns target, or the replacement value for a change to
    the root of the value.
    """
    return _patch(target, change, True)


def _as_change_list(changes):
    if changes is None:
        return []
    if isinstance(changes, Mapping):
        return [changes]
    return [e for e in changes if e is not None]


def _clone(value, memo=None):
    """Deep copy value, with read-only mappings copied as plain dicts.

    Dicts and lists are rebuilt here so that frozen mappings nested
    anywhere inside them become patchable. Everything else is left
    to copy.deepcopy.
    """
    if memo is None:
        memo = {}
    key = id(value)
    if key in memo:
        return memo[key]

    if isinstance(value, Change):
        # Records are read-only, so they can't be filled in after creation
        result = Change((k, _clone(v, memo)) for k, v in value.items())
    elif type(value) is list:
        result = memo[key] = []
        result.extend(_clone(v, memo) for v in value)
    elif type(value) is dict or (
            isinstance(value, Mapping) and not isinstance(value, MutableMapping)):
        result = memo[key] = {}
        for k, v in value.items():
            result[k] = _clone(v, memo)
    else:
        result = copy.deepcopy(value, memo)
    memo[key] = result
    return result


def apply_changes(target, changes):
    """Produce a copy of target with the given changes applied.

    `changes` can be a single change record, a list of them, or None.
    Neither target nor the change records are modified. Read-only
    mappings in target come back as plain dicts.
    """
    result = _clone(target)
    for change in _as_change_list(changes):
        result = apply_change(result, _clone(change))
    return result


def revert_changes(target, changes):
    """Produce a copy of target with the given changes undone.

    Changes are reverted in the order given. Neither target nor
    the change records are modified.
    """
    result = _clone(target)
    for change in _as_change_list(changes):
        result = revert_change(result, _clone(change))
    return result


def apply_diff(target, source, filter=None):
    """Bring target in line with source, modifying target in place.

    Each change found between target and source is passed to
    `filter(target, source, change)` first, and only applied if it
    returns True. Nothing is copied, so target ends up sharing
    values with source.
    """
    for change in observable_diff(target, source):
        if filter is None or filter(target, source, change):
            target = apply_change(target, change)
        else:
            debug("Filtered out change %r", change)
    return target


def revert_diff(target, source, filter=None):
    """Undo on target, in place, the changes that lead from source to target.

    Works like apply_diff, with the changes computed from source to
    target and then reverted.
    """
    for change in observable_diff(source, target):
        if filter is None or filter(target, source, change):
            target = revert_change(target, change)
        else:
            debug("Filtered out change %r", change)
    return target
