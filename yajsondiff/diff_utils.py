# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import ChangeKind, Undefined, as_change
from .log import InvalidChange


def to_clean_dicts(di):
    """Recursively convert change records to straight python dicts.

    Keys holding `Undefined` are left out and list items holding it
    become None, matching how json encoders treat absent values.
    """
    if isinstance(di, dict):
        return {k: to_clean_dicts(v) for k, v in di.items() if v is not Undefined}
    elif isinstance(di, list):
        return [None if v is Undefined else to_clean_dicts(v) for v in di]
    else:
        return di


def to_change_records(di):
    """Convert the plain dict encoding of changes back into Change records.

    Accepts a single encoded change or a list of them. Returns None
    for None, as diff does for equal values.
    """
    if di is None:
        return None
    elif isinstance(di, list):
        return [to_change_records(e) for e in di]
    elif isinstance(di, dict):
        return as_change(di)
    raise InvalidChange("Cannot convert {!r} to change records.".format(di))


def iter_leaf_changes(changes):
    """Yield (path, change) for each change, unwrapping array changes.

    The yielded path is the full path from the root to the changed
    value, and the change is the innermost non-array record.
    """
    for e in changes or ():
        e = as_change(e)
        path = list(e.get("path") or ())
        while e.kind == ChangeKind.ARRAY:
            path.append(e.index)
            e = e.item
            path.extend(e.get("path") or ())
        yield path, e
