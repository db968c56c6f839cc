# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import Undefined
from .diffing import diff, observable_diff, order_independent_diff, order_independent_hash
from .log import InvalidChange
from .patching import (
    apply_change, revert_change,
    apply_changes, revert_changes,
    apply_diff, revert_diff,
    )


__all__ = [
    "__version__",
    "diff", "observable_diff", "order_independent_diff", "order_independent_hash",
    "apply_change", "revert_change",
    "apply_changes", "revert_changes",
    "apply_diff", "revert_diff",
    "Undefined", "InvalidChange",
    ]
