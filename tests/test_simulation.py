import random
import statistics

from osdecoder.simulation import generate_noise, generate_vec, simulate_translation


def test_generate_vec_length_and_type():
    v = generate_vec(50, random.Random(1))
    assert len(v) == 50
    assert all(isinstance(b, bool) for b in v)


def test_generate_vec_deterministic_for_seed():
    first = generate_vec(32, random.Random(42))
    second = generate_vec(32, random.Random(42))
    assert len(first) == 32
    assert len(second) == 32
    assert first == second


def test_generate_vec_produces_both_values():
    v = generate_vec(200, random.Random(7))
    assert set(v) == {False, True}


def test_generate_noise_zero_std_is_mean():
    assert generate_noise(0.5, 0.0, 4, random.Random(3)) == [0.5] * 4


def test_generate_noise_statistics():
    samples = generate_noise(2.0, 0.5, 5000, random.Random(11))
    assert len(samples) == 5000
    assert abs(statistics.fmean(samples) - 2.0) < 0.05
    assert abs(statistics.pstdev(samples) - 0.5) < 0.05


def test_simulate_translation_without_noise_is_bpsk():
    vec = [True, False, False, True]
    out = simulate_translation(vec, 0.0, 0.0, random.Random(0))
    assert out == [-1.0 if b else 1.0 for b in vec]


def test_simulate_translation_mean_shifts_all():
    vec = [True, False, True]
    out = simulate_translation(vec, 0.25, 0.0, random.Random(0))
    assert out == [(-1.0 if b else 1.0) + 0.25 for b in vec]


def test_simulate_translation_low_noise_keeps_signs():
    rng = random.Random(5)
    vec = generate_vec(100, rng)
    out = simulate_translation(vec, 0.0, 0.05, rng)
    assert len(out) == len(vec)
    assert [x < 0 for x in out] == vec


def test_simulate_translation_deterministic_for_seed():
    vec = [True, False, True, True]
    a = simulate_translation(vec, 0.0, 1.0, random.Random(9))
    b = simulate_translation(vec, 0.0, 1.0, random.Random(9))
    assert a == b