"""Linear algebra over GF(2) on vectors and matrices of booleans."""

from __future__ import annotations

from collections.abc import Sequence

Vector = list[bool]
Matrix = list[Vector]


def xor(lhs: Sequence[bool], rhs: Sequence[bool]) -> Vector:
    """Return the element-wise sum of two vectors over GF(2)."""
    if len(lhs) != len(rhs):
        raise ValueError(
            f"vector lengths differ: {len(lhs)} and {len(rhs)}"
        )
    return [bool(a) != bool(b) for a, b in zip(lhs, rhs)]


def from_string(s: str) -> Vector:
    """Parse a string of '0' and '1' characters into a vector."""
    if any(c not in "01" for c in s):
        raise ValueError("String must contain only zeros and ones")
    return [c == "1" for c in s]


def mul(v: Sequence[bool], m: Sequence[Sequence[bool]]) -> Vector:
    """Multiply the row vector ``v`` by the matrix ``m`` over GF(2)."""
    if not m:
        raise ValueError("matrix must not be empty")
    if len(v) != len(m):
        raise ValueError(
            f"vector length {len(v)} does not match matrix row count {len(m)}"
        )
    result: Vector = [False] * len(m[0])
    for bit, row in zip(v, m):
        if bit:
            result = xor(result, row)
    return result


def gauss(m: Sequence[Sequence[bool]]) -> tuple[Matrix, list[int]]:
    """Reduce ``m`` to reduced row echelon form.

    Returns the reduced matrix and the indices of its pivot columns
    (the information set). The input is left untouched. Raises
    ``ValueError`` if the matrix does not have full row rank.
    """
    if not m:
        raise ValueError("matrix must not be empty")
    rows: Matrix = [[bool(x) for x in row] for row in m]
    pivots: list[int] = []
    for j in range(len(rows[0])):
        r = len(pivots)
        pivot = next((i for i in range(r, len(rows)) if rows[i][j]), None)
        if pivot is None:
            continue
        if pivot != r:
            rows[r] = xor(rows[r], rows[pivot])
        for i, row in enumerate(rows):
            if i != r and row[j]:
                rows[i] = xor(row, rows[r])
        pivots.append(j)
    if len(pivots) != len(rows):
        raise ValueError("matrix does not have full row rank")
    return rows, pivots