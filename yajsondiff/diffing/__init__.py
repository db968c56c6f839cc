# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff, observable_diff, order_independent_diff
from .hashing import order_independent_hash

__all__ = ["diff", "observable_diff", "order_independent_diff", "order_independent_hash"]
