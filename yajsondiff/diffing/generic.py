# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

from ..diff_format import Undefined, op_added, op_removed, op_edited, op_array
from ..log import debug

from .config import DiffConfig
from .hashing import order_independent_hash
from .kinds import Kind, real_type_of, regexp_to_string, is_nan

__all__ = ["diff", "observable_diff", "order_independent_diff"]


# Sentinel for the key of the root comparison, which has none
_NoKey = object()


def _owns_key(stack, side, key):
    """Whether the parent currently compared on the given side holds key.

    This is what tells a key present with an `Undefined` value apart
    from a missing key.
    """
    if not stack or key is _NoKey:
        return False
    parent = stack[-1][side]
    if isinstance(parent, Mapping):
        return key in parent
    if isinstance(parent, list):
        return isinstance(key, int) and 0 <= key < len(parent)
    return False


def _differs(lhs, rhs):
    "Scalar inequality, where NaN equals NaN."
    if lhs is rhs:
        return False
    if is_nan(lhs) and is_nan(rhs):
        return False
    return bool(lhs != rhs)


def diff_arrays(lhs, rhs, changes, path, stack, config):
    """Diff two lists item by item, appending the changes.

    Extra trailing items are reported first, from the highest index
    down, followed by the common range, also from the highest index.
    """
    if config.order_independent:
        # Sort copies, the caller's lists keep their order
        lhs = sorted(lhs, key=order_independent_hash)
        rhs = sorted(rhs, key=order_independent_hash)

    i = len(rhs) - 1
    j = len(lhs) - 1
    while i > j:
        changes.append(op_array(path, i, op_added(None, rhs[i])))
        i -= 1
    while j > i:
        changes.append(op_array(path, j, op_removed(None, lhs[j])))
        j -= 1
    for k in range(i, -1, -1):
        deep_diff(lhs[k], rhs[k], changes, path, k, stack, config)


def diff_mappings(lhs, rhs, changes, path, stack, config):
    """Diff two mappings key by key, appending the changes.

    Keys are visited in the order of lhs, followed by the keys
    only found in rhs, in the order of rhs.
    """
    consumed = set()
    for key in lhs:
        if key in rhs:
            deep_diff(lhs[key], rhs[key], changes, path, key, stack, config)
            consumed.add(key)
        else:
            deep_diff(lhs[key], Undefined, changes, path, key, stack, config)
    for key in rhs:
        if key not in consumed:
            deep_diff(Undefined, rhs[key], changes, path, key, stack, config)


def deep_diff(lhs, rhs, changes, path, key, stack, config):
    """Recursively compare lhs and rhs found at key under path.

    Appends change records to `changes`. The `stack` holds the
    (lhs, rhs) pairs of all containers currently being compared and
    is shared by the whole traversal.
    """
    current_path = list(path)
    if key is not _NoKey:
        if config.is_filtered(current_path, key):
            return
        current_path.append(key)

    ltype = real_type_of(lhs)
    rtype = real_type_of(rhs)

    # Regexes compare by their string form
    if ltype == Kind.REGEXP and rtype == Kind.REGEXP:
        lhs = regexp_to_string(lhs)
        rhs = regexp_to_string(rhs)
        ltype = rtype = Kind.STRING

    ldefined = ltype != Kind.UNDEFINED or _owns_key(stack, 0, key)
    rdefined = rtype != Kind.UNDEFINED or _owns_key(stack, 1, key)

    if not ldefined and rdefined:
        changes.append(op_added(current_path, rhs))
    elif ldefined and not rdefined:
        changes.append(op_removed(current_path, lhs))
    elif ltype != rtype:
        changes.append(op_edited(current_path, lhs, rhs))
    elif ltype == Kind.DATE:
        if lhs != rhs:
            changes.append(op_edited(current_path, lhs, rhs))
    elif ltype in (Kind.ARRAY, Kind.OBJECT):
        if any(entry[0] is lhs for entry in stack):
            debug("Cycle detected at %r", current_path)
            if lhs is not rhs:
                changes.append(op_edited(current_path, lhs, rhs))
            return
        stack.append((lhs, rhs))
        try:
            if ltype == Kind.ARRAY:
                diff_arrays(lhs, rhs, changes, current_path, stack, config)
            else:
                diff_mappings(lhs, rhs, changes, current_path, stack, config)
        finally:
            stack.pop()
    elif _differs(lhs, rhs):
        changes.append(op_edited(current_path, lhs, rhs))


def observable_diff(lhs, rhs, observer=None, prefilter=None,
                    order_independent=False, config=None):
    """Compute the changes turning lhs into rhs, notifying observer of each.

    Returns the list of changes, which is empty when there are no
    differences.
    """
    if config is None:
        config = DiffConfig(prefilter=prefilter, order_independent=order_independent)

    changes = []
    deep_diff(lhs, rhs, changes, [], _NoKey, [], config)

    if observer is not None:
        for change in changes:
            observer(change)
    return changes


def diff(lhs, rhs, prefilter=None, order_independent=False, accum=None, config=None):
    """Compute the changes turning lhs into rhs.

    Values can be arbitrarily nested dicts (or other mappings) and
    lists of leaf values. Returns a list of change records, or None
    when the two values are equal.

    `prefilter(path, key)` is called before descending into a key,
    returning True skips that subtree. With `order_independent`, lists
    are compared as multisets rather than positionally.

    If `accum` is given, changes are appended to it and it is returned
    whether or not any were found.
    """
    changes = observable_diff(lhs, rhs, prefilter=prefilter,
                              order_independent=order_independent, config=config)
    if accum is not None:
        accum.extend(changes)
        return accum
    return changes or None


def order_independent_diff(lhs, rhs, prefilter=None, accum=None):
    "Compute the changes turning lhs into rhs, ignoring the order of lists."
    return diff(lhs, rhs, prefilter=prefilter, order_independent=True, accum=accum)
