# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class DiffConfig:
    """Set of options to pass around during a single diff"""

    def __init__(self, *, prefilter=None, order_independent=False):
        self.prefilter = prefilter
        self.order_independent = order_independent

    def is_filtered(self, path, key):
        """Return True when the subtree at key under path should be skipped."""
        if self.prefilter is None:
            return False
        return bool(self.prefilter(list(path), key))

    def __copy__(self):
        return DiffConfig(
            prefilter=self.prefilter,
            order_independent=self.order_independent,
        )
