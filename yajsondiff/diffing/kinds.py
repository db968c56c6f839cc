# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import math
import numbers
import re
from collections.abc import Mapping
from types import ModuleType

from ..diff_format import Undefined

__all__ = ["Kind", "real_type_of", "is_nan", "regexp_to_string"]


class Kind:
    "Collection of values returned by real_type_of."
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    DATE = "date"
    REGEXP = "regexp"
    INTRINSIC = "intrinsic"
    OBJECT = "object"
    OPAQUE = "opaque"


# Letters used when writing regex flags, in output order
_regexp_flags = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.LOCALE, "L"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
    )


def _is_regexp(value):
    """Check whether value looks like a compiled regular expression.

    Looks at the shape of the value rather than its type, so that
    patterns compiled by other engines (e.g. the `regex` package)
    are recognized as well.
    """
    if isinstance(value, (str, bytes, Mapping, list)):
        return False
    try:
        pattern = getattr(value, "pattern", None)
        flags = getattr(value, "flags", None)
    except Exception:
        # Probing failed, which is as good as not being a regex
        return False
    return (isinstance(pattern, (str, bytes)) and
            isinstance(flags, int) and not isinstance(flags, bool))


def regexp_to_string(value):
    "Canonical '/pattern/flags' form of a regex."
    pattern = value.pattern
    if isinstance(pattern, bytes):
        pattern = pattern.decode("latin-1")
    letters = "".join(c for flag, c in _regexp_flags if value.flags & flag)
    return "/%s/%s" % (pattern, letters)


def real_type_of(value):
    """Classify value into one of the Kind categories."""
    if value is Undefined:
        return Kind.UNDEFINED
    elif value is None:
        return Kind.NULL
    elif isinstance(value, bool):
        return Kind.BOOLEAN
    elif isinstance(value, numbers.Number):
        return Kind.NUMBER
    elif isinstance(value, (str, bytes)):
        return Kind.STRING
    elif isinstance(value, list):
        return Kind.ARRAY
    elif isinstance(value, (datetime.date, datetime.time)):
        return Kind.DATE
    elif isinstance(value, ModuleType):
        return Kind.INTRINSIC
    elif isinstance(value, Mapping):
        return Kind.OBJECT
    elif _is_regexp(value):
        return Kind.REGEXP
    return Kind.OPAQUE


def is_nan(value):
    "Return True for float-like NaN values."
    try:
        return isinstance(value, numbers.Number) and math.isnan(value)
    except (TypeError, ValueError):
        return False
