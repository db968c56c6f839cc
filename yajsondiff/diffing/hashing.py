# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Order independent structural hashing.

The hash of a value only depends on its structure and scalar values,
not on the order of items in arrays or of keys in objects. It is used
to bring arrays into a canonical order before comparing them, and is
neither collision free nor meant for anything security related.
"""

from .kinds import Kind, real_type_of, regexp_to_string

__all__ = ["hash_string", "order_independent_hash"]


def hash_string(s):
    """Java style string hash, wrapped to a signed 32 bit integer."""
    h = 0
    for c in s:
        h = ((h << 5) - h + ord(c)) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return h


def _scalar_text(value, kind):
    if kind == Kind.REGEXP:
        return regexp_to_string(value)
    if kind == Kind.NUMBER and isinstance(value, float) and value.is_integer():
        # So that 1.0 and 1, which compare equal, also hash alike
        return str(int(value))
    return str(value)


def order_independent_hash(value):
    """Compute a hash of value that ignores array order and key order.

    Arrays and objects that contain themselves hash the inner
    reference as a fixed cycle marker.
    """
    return _hash(value, set())


def _hash(value, ancestors):
    kind = real_type_of(value)

    if kind not in (Kind.ARRAY, Kind.OBJECT):
        return hash_string("[ type: %s ; value: %s]" % (kind, _scalar_text(value, kind)))

    if id(value) in ancestors:
        return hash_string("[ type: cycle ]")
    ancestors.add(id(value))
    try:
        if kind == Kind.ARRAY:
            # Addition is commutative, which makes this order independent
            accum = sum(_hash(item, ancestors) for item in value)
            return accum + hash_string("[type: array, hash: %d]" % accum)

        accum = 0
        for key, item in value.items():
            accum += hash_string("[ type: object, key: %s, value hash: %d]" % (
                key, _hash(item, ancestors)))
        return accum
    finally:
        ancestors.discard(id(value))
