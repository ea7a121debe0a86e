"""Permutations of vectors and of matrix columns."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from osdecoder.linalg import Matrix

T = TypeVar("T")


def make_permutation(perm: Sequence[int], values: Sequence[T]) -> list[T]:
    """Move the element at position ``i`` to position ``perm[i]``."""
    if len(perm) != len(values):
        raise ValueError(
            f"permutation length {len(perm)} does not match {len(values)} values"
        )
    result: list = [None] * len(values)
    for target, value in zip(perm, values):
        result[target] = value
    return result


def invert_permutation(perm: Sequence[int]) -> list[int]:
    """Return the inverse of ``perm``."""
    result = [0] * len(perm)
    for i, target in enumerate(perm):
        result[target] = i
    return result


def shuffle_cols(m: Sequence[Sequence[bool]], perm: Sequence[int]) -> Matrix:
    """Permute the columns of every row of ``m`` by ``perm``."""
    return [make_permutation(perm, row) for row in m]