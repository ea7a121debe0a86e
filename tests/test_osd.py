import itertools
import math

import pytest

from osdecoder.linalg import from_string, mul
from osdecoder.osd import calc_metric, combinations, decompose, osd

HAMMING = [
    from_string("1000110"),
    from_string("0100101"),
    from_string("0010011"),
    from_string("0001111"),
]


def _all_codewords(g):
    return [mul(list(bits), g) for bits in itertools.product([False, True], repeat=len(g))]


def _bpsk(code):
    return [-1.0 if bit else 1.0 for bit in code]


def test_combinations_lexicographic():
    result = list(combinations(2, 4))
    assert result == sorted(result)
    assert len(result) == math.comb(4, 2)
    assert result[0] == (0, 1)
    assert result[-1] == (2, 3)


def test_combinations_zero_weight_single_empty():
    assert list(combinations(0, 3)) == [()]


@pytest.mark.parametrize("k,n", [(1, 5), (3, 6), (5, 5)])
def test_combinations_counts_and_ranges(k, n):
    result = list(combinations(k, n))
    assert len(result) == math.comb(n, k)
    assert len(set(result)) == len(result)
    assert all(len(c) == k and all(0 <= i < n for i in c) for c in result)


def test_combinations_negative_raises():
    with pytest.raises(ValueError):
        combinations(-1, 3)


def test_decompose():
    alpha, beta = decompose([-0.5, 2.0, 0.0, -3.0])
    assert alpha == [True, False, False, True]
    assert beta == [0.5, 2.0, 0.0, 3.0]


def test_calc_metric_sums_mismatches():
    alpha = [True, False, True]
    beta = [0.5, 2.0, 4.0]
    assert calc_metric(alpha, beta, [True, False, True]) == 0
    assert calc_metric(alpha, beta, [False, True, True]) == pytest.approx(2.5)


def test_calc_metric_length_mismatch():
    with pytest.raises(ValueError):
        calc_metric([True], [1.0, 2.0], [False])


@pytest.mark.parametrize("code", _all_codewords(HAMMING))
def test_osd_noiseless_decodes_exactly(code):
    assert osd(_bpsk(code), HAMMING, 0) == code


def test_osd_corrects_weak_error():
    code = mul([True, False, True, True], HAMMING)
    msg = _bpsk(code)
    msg[2] = -0.1 * msg[2]
    assert osd(msg, HAMMING, len(HAMMING)) == code


def test_osd_returns_codeword_with_minimal_metric():
    msg = [0.3, -0.9, 0.2, -0.1, 0.8, -0.4, 0.05]
    decoded = osd(msg, HAMMING, 4)
    codewords = _all_codewords(HAMMING)
    assert decoded in codewords
    alpha, beta = decompose(msg)
    best = min(calc_metric(alpha, beta, c) for c in codewords)
    assert calc_metric(alpha, beta, decoded) == pytest.approx(best)


def test_osd_result_always_codeword_with_low_order():
    msg = [-0.2, 0.7, -0.6, 0.1, 0.9, -0.3, 0.4]
    assert osd(msg, HAMMING, 1) in _all_codewords(HAMMING)


def test_osd_rank_deficient_matrix_raises():
    g = [from_string("110"), from_string("110")]
    with pytest.raises(ValueError):
        osd([1.0, 1.0, 1.0], g, 1)


def test_osd_length_mismatch_raises():
    with pytest.raises(ValueError):
        osd([1.0, 1.0], HAMMING, 1)