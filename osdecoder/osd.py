"""Ordered statistics decoding of binary linear codes."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence

from osdecoder.linalg import Matrix, Vector, gauss, mul
from osdecoder.permutation import invert_permutation, make_permutation, shuffle_cols


def combinations(k: int, n: int) -> Iterator[tuple[int, ...]]:
    """Yield every ``k``-subset of ``range(n)`` in lexicographic order."""
    if k < 0 or n < 0:
        raise ValueError("k and n must be non-negative")
    return itertools.combinations(range(n), k)


def decompose(msg: Sequence[float]) -> tuple[Vector, list[float]]:
    """Split soft values into hard decisions and reliabilities."""
    alpha = [value < 0 for value in msg]
    beta = [abs(value) for value in msg]
    return alpha, beta


def calc_metric(
    alpha: Sequence[bool], beta: Sequence[float], x: Sequence[bool]
) -> float:
    """Sum the reliabilities of positions where ``x`` disagrees with ``alpha``."""
    if not len(alpha) == len(beta) == len(x):
        raise ValueError(
            f"lengths differ: {len(alpha)}, {len(beta)} and {len(x)}"
        )
    return sum(b for a, b, bit in zip(alpha, beta, x) if bool(a) != bool(bit))


def osd(msg: Sequence[float], g: Sequence[Sequence[bool]], w_max: int) -> Vector:
    """Decode the soft word ``msg`` with generator matrix ``g``.

    Every error pattern of weight up to ``w_max`` on the most reliable
    information set is tried; the codeword with the smallest metric wins.
    """
    if not g:
        raise ValueError("generator matrix must not be empty")
    if len(g[0]) != len(msg):
        raise ValueError(
            f"message length {len(msg)} does not match code length {len(g[0])}"
        )
    if w_max < 0:
        raise ValueError("w_max must be non-negative")

    alpha, beta = decompose(msg)

    inverted_pi = sorted(range(len(beta)), key=lambda i: beta[i], reverse=True)
    pi = invert_permutation(inverted_pi)

    alpha = make_permutation(pi, alpha)
    beta = make_permutation(pi, beta)
    g_gamma, inform_indices = gauss(shuffle_cols(g, pi))

    inf_set = [alpha[i] for i in inform_indices]

    best_metric = math.inf
    best_code: Vector = []
    for w in range(w_max + 1):
        for flips in combinations(w, len(inf_set)):
            candidate = list(inf_set)
            for i in flips:
                candidate[i] = not candidate[i]
            x = mul(candidate, g_gamma)
            metric = calc_metric(alpha, beta, x)
            if metric < best_metric:
                best_code = x
                best_metric = metric

    return make_permutation(inverted_pi, best_code)