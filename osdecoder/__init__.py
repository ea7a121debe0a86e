"""Ordered statistics decoding of binary linear codes and an AWGN channel simulator."""

__version__ = "0.1.0"

__all__ = ["cli", "linalg", "osd", "permutation", "simulation"]