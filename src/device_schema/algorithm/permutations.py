"""Permutations: lazy, restartable generator of index permutations.

A ``Permutations(n)`` object is an iterable over every ordering of
``range(n)`` as a tuple, in lexicographic order.  Each ``iter()`` call starts
a fresh enumeration, so the same object can be iterated any number of times.

An optional boolean ``allowed`` mask of shape ``(n, n)`` restricts the
enumeration: ``allowed[i, j]`` False means position ``i`` may never hold
element ``j``.  Pruned branches are cut before they are expanded, so a mask
with few True cells enumerates far fewer than ``n!`` prefixes.

Example::

    list(Permutations(3))
    # [(0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)]

    mask = np.array([[True, True], [False, True]])
    list(Permutations(2, mask))
    # [(0, 1)]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

__all__ = ["Permutations"]


class Permutations(Iterable[tuple[int, ...]]):
    """Restartable iterable over the permutations of ``range(n)``.

    Args:
        n: Number of elements (>= 0).  ``n == 0`` yields one empty tuple.
        allowed: Optional ``(n, n)`` boolean mask; ``allowed[i, j]`` says
            whether element ``j`` may be placed at position ``i``.

    Raises:
        ValueError: If ``n`` is negative or the mask has the wrong shape.
    """

    def __init__(self, n: int, allowed: np.ndarray | None = None) -> None:
        if n < 0:
            msg = f"n must be >= 0, got {n}"
            raise ValueError(msg)
        if allowed is not None:
            allowed = np.asarray(allowed, dtype=bool)
            if allowed.shape != (n, n):
                msg = f"allowed mask must have shape ({n}, {n}), got {allowed.shape}"
                raise ValueError(msg)
        self._n = n
        self._allowed = allowed

    @property
    def size(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return self._extend([], [False] * self._n)

    def _extend(self, prefix: list[int], used: list[bool]) -> Iterator[tuple[int, ...]]:
        position = len(prefix)
        if position == self._n:
            yield tuple(prefix)
            return

        for element in range(self._n):
            if used[element]:
                continue
            if self._allowed is not None and not self._allowed[position, element]:
                continue
            used[element] = True
            prefix.append(element)
            yield from self._extend(prefix, used)
            prefix.pop()
            used[element] = False

    def __repr__(self) -> str:
        masked = "" if self._allowed is None else ", masked"
        return f"Permutations({self._n}{masked})"
