# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from collections.abc import Mapping

from .log import InvalidChange


class _UndefinedType(object):
    """Type of the `Undefined` singleton.

    Stands in for a value that is not there at all, as opposed to
    `None` which is a value in its own right. A mapping may also hold
    `Undefined` explicitly, meaning the key is present without a value.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_UndefinedType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Undefined"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "Undefined"


Undefined = _UndefinedType()


class ChangeKind:
    "Collection of valid values for the kind field in change records."
    ADDED = "N"
    REMOVED = "D"
    EDITED = "E"
    ARRAY = "A"


KINDS = (
    ChangeKind.ADDED,
    ChangeKind.REMOVED,
    ChangeKind.EDITED,
    ChangeKind.ARRAY,
    )


class Change(dict):
    """A single change record.

    Minimal read-only dict providing attribute access to the record
    keys. Being a dict, a record compares equal to its plain structural
    encoding and serializes to json as is (as long as the values do).

    Reading `path` returns a copy, so the record can't be changed
    through it. The lhs and rhs values are not copied.
    """
    __slots__ = ()

    def __getitem__(self, key):
        value = dict.__getitem__(self, key)
        if key == "path" and isinstance(value, list):
            return list(value)
        return value

    def get(self, key, default=None):
        if key in self:
            return self[key]
        return default

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def _readonly(self, *args, **kwargs):
        raise TypeError("Change records are read-only")

    __setattr__ = _readonly
    __delattr__ = _readonly
    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __copy__(self):
        return type(self)(self)

    def __deepcopy__(self, memo):
        return type(self)((k, copy.deepcopy(v, memo)) for k, v in self.items())

    def __reduce__(self):
        return (type(self), (dict(self),))


def _as_path(path):
    if not path:
        return None
    return list(path)


def op_added(path, value):
    "Create a change record for a value only present on the right side."
    return Change(kind=ChangeKind.ADDED, path=_as_path(path), rhs=value)

def op_removed(path, value):
    "Create a change record for a value only present on the left side."
    return Change(kind=ChangeKind.REMOVED, path=_as_path(path), lhs=value)

def op_edited(path, lhs, rhs):
    "Create a change record for a value replaced by another."
    return Change(kind=ChangeKind.EDITED, path=_as_path(path), lhs=lhs, rhs=rhs)

def op_array(path, index, item):
    "Create a change record for a change to the array at path, at index."
    assert item is not None, "Array change needs a nested change record"
    return Change(kind=ChangeKind.ARRAY, path=_as_path(path), index=index, item=item)


def is_root_change(e):
    "Whether the change record targets the compared value itself."
    return not e.get("path")


def as_change(e):
    """Build a Change record from its plain structural encoding.

    Change records are returned as they are. Missing lhs/rhs values
    (json has no way to spell them) become `Undefined`.
    """
    if isinstance(e, Change):
        return e
    if not isinstance(e, Mapping):
        raise InvalidChange("Change record '{}' is not a mapping.".format(e), e)
    kind = e.get("kind")
    if kind not in KINDS:
        raise InvalidChange("Unknown change kind '{}'.".format(kind), e)
    path = e.get("path")
    if path is not None and not isinstance(path, (list, tuple)):
        raise InvalidChange("Change path must be a list, not '{}'.".format(path), e)
    if kind == ChangeKind.ADDED:
        return op_added(path, e.get("rhs", Undefined))
    elif kind == ChangeKind.REMOVED:
        return op_removed(path, e.get("lhs", Undefined))
    elif kind == ChangeKind.EDITED:
        return op_edited(path, e.get("lhs", Undefined), e.get("rhs", Undefined))
    item = e.get("item")
    if item is None:
        raise InvalidChange("Array change at {} has no nested change.".format(path), e)
    return op_array(path, e.get("index"), as_change(item))


def is_valid_changes(changes, deep=False):
    """Checks whether a list of change records is well formed.

    Returns a boolean indicating the well-formedness of the changes.
    """
    try:
        validate_changes(changes, deep=deep)
    except InvalidChange:
        return False
    return True


def validate_changes(changes, deep=False):
    """Check whether a list of change records is well formed.

    Raises an InvalidChange if not well formed.
    """
    if not isinstance(changes, list):
        raise InvalidChange("Changes must be a list.")
    for e in changes:
        validate_change(e, deep=deep)


def validate_change(e, deep=False):
    """Check that e is a well formed change record.

    Raises an InvalidChange if not well formed.
    """
    if not isinstance(e, Change):
        raise InvalidChange("Change record '{}' is not a change type.".format(e), e)

    kind = e.get("kind")
    path = e.get("path")
    if path is not None and not isinstance(path, list):
        raise InvalidChange("Change path must be a list, not '{}'.".format(path), e)

    if kind == ChangeKind.ADDED:
        if "rhs" not in e:
            raise InvalidChange("Added record at {} has no new value.".format(path), e)
    elif kind == ChangeKind.REMOVED:
        if "lhs" not in e:
            raise InvalidChange("Removed record at {} has no old value.".format(path), e)
    elif kind == ChangeKind.EDITED:
        if "lhs" not in e or "rhs" not in e:
            raise InvalidChange("Edited record at {} needs both values.".format(path), e)
    elif kind == ChangeKind.ARRAY:
        index = e.get("index")
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidChange(
                "Array change expects an integer index, not '{}'.".format(index), e)
        if not isinstance(e.get("item"), Change):
            raise InvalidChange(
                "Array change at {} has no nested change.".format(path), e)
        # The "deep" argument avoids recursing through every nested record
        if deep:
            validate_change(e.item, deep=deep)
    else:
        raise InvalidChange("Unknown change kind '{}'.".format(kind), e)
