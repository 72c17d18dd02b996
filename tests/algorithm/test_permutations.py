"""Tests for the Permutations generator."""

from __future__ import annotations

from itertools import permutations

import numpy as np
import pytest

from device_schema.algorithm.permutations import Permutations


class TestUnrestricted:
    def test_lexicographic_order(self) -> None:
        assert list(Permutations(3)) == [
            (0, 1, 2),
            (0, 2, 1),
            (1, 0, 2),
            (1, 2, 0),
            (2, 0, 1),
            (2, 1, 0),
        ]

    def test_agrees_with_itertools(self) -> None:
        assert list(Permutations(5)) == list(permutations(range(5)))

    def test_zero_elements(self) -> None:
        assert list(Permutations(0)) == [()]

    def test_one_element(self) -> None:
        assert list(Permutations(1)) == [(0,)]

    def test_restartable(self) -> None:
        perms = Permutations(3)
        assert list(perms) == list(perms)

    def test_lazy(self) -> None:
        it = iter(Permutations(10))
        assert next(it) == tuple(range(10))
        assert next(it) == (0, 1, 2, 3, 4, 5, 6, 7, 9, 8)


class TestMasked:
    def test_mask_forbids_placements(self) -> None:
        mask = np.array([[True, True], [False, True]])
        assert list(Permutations(2, mask)) == [(0, 1)]

    def test_block_diagonal_mask(self) -> None:
        mask = np.array(
            [
                [True, True, False],
                [True, True, False],
                [False, False, True],
            ]
        )
        assert list(Permutations(3, mask)) == [(0, 1, 2), (1, 0, 2)]

    def test_mask_without_solution(self) -> None:
        mask = np.array([[True, False], [True, False]])
        assert list(Permutations(2, mask)) == []

    def test_full_mask_equals_unrestricted(self) -> None:
        mask = np.ones((4, 4), dtype=bool)
        assert list(Permutations(4, mask)) == list(Permutations(4))

    def test_mask_shape_checked(self) -> None:
        with pytest.raises(ValueError, match="shape"):
            Permutations(3, np.ones((2, 2), dtype=bool))


def test_negative_size_rejected() -> None:
    with pytest.raises(ValueError, match=">= 0"):
        Permutations(-1)


def test_repr() -> None:
    assert repr(Permutations(2)) == "Permutations(2)"
    assert repr(Permutations(2, np.ones((2, 2)))) == "Permutations(2, masked)"
