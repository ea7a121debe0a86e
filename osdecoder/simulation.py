"""Random messages and an additive white Gaussian noise channel."""

from __future__ import annotations

import random
from collections.abc import Sequence

from osdecoder.linalg import Vector


def generate_vec(size: int, rng: random.Random) -> Vector:
    """Return ``size`` uniformly random bits."""
    return [rng.randint(0, 1) == 1 for _ in range(size)]


def generate_noise(
    mean: float, std: float, size: int, rng: random.Random
) -> list[float]:
    """Return ``size`` samples from a normal distribution."""
    return [rng.gauss(mean, std) for _ in range(size)]


def simulate_translation(
    vec: Sequence[bool], mean: float, std: float, rng: random.Random
) -> list[float]:
    """BPSK-modulate ``vec`` (1 -> -1, 0 -> +1) and add Gaussian noise."""
    noise = generate_noise(mean, std, len(vec), rng)
    return [(-1.0 if bit else 1.0) + n for bit, n in zip(vec, noise)]