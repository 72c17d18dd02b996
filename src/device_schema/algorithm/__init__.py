"""algorithm subpackage: subtree isomorphism search.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from device_schema.algorithm import SubtreeMatcher

    result = SubtreeMatcher(tree).find(pattern.root)
    # result.matched_nodes, result.mappings
"""

from __future__ import annotations

from device_schema.algorithm.matcher import has_perfect_matching
from device_schema.algorithm.permutations import Permutations
from device_schema.algorithm.subtree import SubtreeMatcher, exceeds_fan_out

__all__ = [
    "Permutations",
    "SubtreeMatcher",
    "exceeds_fan_out",
    "has_perfect_matching",
]
