"""SubtreeMatcher: type-isomorphic subtree search with name correspondences.

Two subtrees are isomorphic when their roots have the same type and the same
number of children, and some pairing of the two child lists (siblings are
order independent) pairs every child with an isomorphic child.  Two leaves of
the same type match trivially.

For every match the matcher also reports how pattern node names map onto the
matched subtree's names.  Each admissible sibling permutation at each level
yields a level map ``{pattern child: candidate child}``; it is combined with
every combination of the maps found for the paired children (cross product),
so one subtree match can carry several maps.

Search, per candidate (every node of the pattern root's type, in preorder):

1. Reject on child count mismatch, then on differing child type multisets.
2. Match every (candidate child, pattern child) pair recursively.  Pair
   results are memoized for the duration of one search.
3. Reject when the boolean compatibility matrix has no perfect matching
   (``has_perfect_matching``); otherwise enumerate the permutations the
   matrix allows (``Permutations``).
4. At the pattern root add the root's own correspondence, keep only maps of
   maximal size and drop duplicates, first occurrence first.

The search is exponential in sibling fan-out and nothing bounds it
internally.  Callers searching untrusted schemas should check
``exceeds_fan_out`` first.
"""

from __future__ import annotations

import logging
from itertools import product
from typing import TYPE_CHECKING

import numpy as np

from device_schema.algorithm.matcher import has_perfect_matching
from device_schema.algorithm.permutations import Permutations
from device_schema.result import SubtreeMatchResult

if TYPE_CHECKING:
    from device_schema.tree.nodes import SchemaNode
    from device_schema.tree.schema_tree import SchemaTree

__all__ = ["SubtreeMatcher", "exceeds_fan_out"]

logger = logging.getLogger(__name__)

# Correspondence maps of one node pair; None means the pair does not match
_Maps = list[dict[str, str]] | None


class SubtreeMatcher:
    """Finds the subtrees of one SchemaTree that are isomorphic to a pattern.

    Example::

        matcher = SubtreeMatcher(tree)
        result = matcher.find(pattern_tree.root.child_nodes[0])
        for node, maps in result.pairs():
            print(node.path_string, maps)
    """

    def __init__(self, tree: SchemaTree) -> None:
        if tree is None:
            raise TypeError("tree must not be None")
        self._tree = tree
        self._memo: dict[tuple[SchemaNode, SchemaNode], _Maps] = {}

    def find(self, pattern_root: SchemaNode) -> SubtreeMatchResult:
        """Return every isomorphic subtree root with its correspondence maps."""
        if pattern_root is None:
            raise TypeError("pattern_root must not be None")

        self._memo = {}
        candidates = [
            node for node in self._tree if node.data_type == pattern_root.data_type
        ]
        logger.debug(
            "Subtree search for %r: %d candidates of type %s",
            pattern_root.name,
            len(candidates),
            pattern_root.data_type,
        )

        matched: list[SchemaNode] = []
        mappings: list[tuple[dict[str, str], ...]] = []
        for candidate in candidates:
            maps = self._match(candidate, pattern_root)
            if maps is None:
                continue
            rooted = [{pattern_root.name: candidate.name, **m} for m in maps]
            matched.append(candidate)
            mappings.append(_maximal_unique(rooted))

        logger.debug(
            "Subtree search for %r: %d matches", pattern_root.name, len(matched)
        )
        return SubtreeMatchResult(
            matched_nodes=tuple(matched), mappings=tuple(mappings)
        )

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _match(self, candidate: SchemaNode, pattern: SchemaNode) -> _Maps:
        """Return the maps of the pattern's descendants, or None on mismatch.

        The returned maps never contain ``pattern`` itself; the caller adds
        that entry through its level map.
        """
        key = (candidate, pattern)
        if key not in self._memo:
            self._memo[key] = self._compute(candidate, pattern)
        return self._memo[key]

    def _compute(self, candidate: SchemaNode, pattern: SchemaNode) -> _Maps:
        if candidate.data_type != pattern.data_type:
            return None
        if len(candidate.children) != len(pattern.children):
            return None
        if pattern.is_leaf:
            return [{}]
        if _child_types(candidate) != _child_types(pattern):
            return None

        cand_children = candidate.child_nodes
        pat_children = pattern.child_nodes
        n = len(pat_children)

        pair_maps = [
            [self._match(c, p) for p in pat_children] for c in cand_children
        ]
        allowed = np.array(
            [[maps is not None for maps in row] for row in pair_maps], dtype=bool
        )
        if not has_perfect_matching(allowed):
            return None

        found: list[dict[str, str]] = []
        for perm in Permutations(n, allowed):
            level = {
                pat_children[perm[i]].name: cand_children[i].name for i in range(n)
            }
            deeper = [pair_maps[i][perm[i]] for i in range(n)]
            for combination in product(*deeper):
                merged = dict(level)
                for partial in combination:
                    merged.update(partial)
                found.append(merged)

        return found or None


def _child_types(node: SchemaNode) -> list[int]:
    return sorted(child.data_type.sort_key for child in node.child_nodes)


def _maximal_unique(maps: list[dict[str, str]]) -> tuple[dict[str, str], ...]:
    """Keep only the largest maps, without duplicates, in first-seen order."""
    if not maps:
        return ()
    largest = max(len(m) for m in maps)
    seen: set[frozenset[tuple[str, str]]] = set()
    kept: list[dict[str, str]] = []
    for m in maps:
        if len(m) < largest:
            continue
        signature = frozenset(m.items())
        if signature in seen:
            continue
        seen.add(signature)
        kept.append(m)
    return tuple(kept)


def exceeds_fan_out(node: SchemaNode, limit: int) -> bool:
    """Return True if ``node`` or any descendant has more than ``limit`` children.

    Sibling permutations grow factorially with fan-out, so callers use this
    to refuse patterns or trees before calling ``SubtreeMatcher.find``.
    """
    if limit < 0:
        msg = f"limit must be >= 0, got {limit}"
        raise ValueError(msg)
    stack = [node]
    while stack:
        current = stack.pop()
        if len(current.children) > limit:
            return True
        stack.extend(current.child_nodes)
    return False
