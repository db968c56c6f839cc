# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from yajsondiff import diff, apply_changes, revert_changes
from yajsondiff.diff_format import is_valid_changes


def check_diff_and_apply(a, b):
    "Check that apply_changes(a, diff(a,b)) reproduces b and reverting reproduces a."
    a0 = copy.deepcopy(a)
    b0 = copy.deepcopy(b)

    d = diff(a, b)
    if d is None:
        assert a == b
    else:
        assert is_valid_changes(d, deep=True)
    d0 = copy.deepcopy(d)

    assert apply_changes(a, d) == b
    assert revert_changes(b, d) == a

    # Nothing was modified along the way
    assert a == a0
    assert b == b0
    assert d == d0
    return d


def check_symmetric_diff_and_apply(a, b):
    "Check diff, apply and revert in both directions."
    check_diff_and_apply(a, b)
    check_diff_and_apply(b, a)
