"""Bipartite feasibility for sibling matching.

Before the subtree matcher enumerates sibling permutations it knows, for
every (candidate child, pattern child) pair, whether the pair can match at
all.  If that compatibility matrix admits no perfect matching, no
permutation can succeed and enumeration is skipped.

The check is a minimum-cost assignment (scipy's ``linear_sum_assignment``)
over the 0/1 cost matrix ``~allowed``: a perfect matching exists exactly when
the optimal assignment uses allowed cells only.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["has_perfect_matching"]


def has_perfect_matching(allowed: np.ndarray) -> bool:
    """Return True if the square boolean matrix admits a perfect matching.

    ``allowed[i, j]`` True means row ``i`` may be paired with column ``j``.
    An empty matrix trivially has one; a non-square matrix never has one.
    """
    allowed = np.asarray(allowed, dtype=bool)
    rows, cols = allowed.shape
    if rows != cols:
        return False
    if rows == 0:
        return True
    # Necessary condition: no row or column without any option
    if not allowed.any(axis=1).all() or not allowed.any(axis=0).all():
        return False

    row_ind, col_ind = linear_sum_assignment((~allowed).astype(float))
    return bool(allowed[row_ind, col_ind].all())
