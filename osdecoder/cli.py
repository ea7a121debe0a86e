"""Command line simulation of OSD word error rate over an AWGN channel."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from osdecoder.linalg import Matrix, from_string, mul
from osdecoder.osd import osd
from osdecoder.simulation import generate_vec, simulate_translation


def run_experiment(
    g: Sequence[Sequence[bool]],
    std: float,
    w_max: int,
    needed_errors: int,
    count: int,
    limit: int | None,
    verbose: bool = False,
) -> float:
    """Estimate the word error rate of OSD at noise deviation ``std``.

    Runs until both ``count`` words were sent and ``needed_errors`` errors
    were seen, or until ``limit`` words were sent (``None`` means no limit).
    """
    rng = random.Random(42)
    k = len(g)
    errors_count = 0
    i = 0
    while (limit is None or i < limit) and (i < count or errors_count < needed_errors):
        code = mul(generate_vec(k, rng), g)
        noisy = simulate_translation(code, 0, std, rng)
        if osd(noisy, g, w_max) != code:
            errors_count += 1
        i += 1
        if verbose and i % 10000 == 0:
            print(f"{std:g} {i} {errors_count}")
            print()
    if i == 0:
        return math.nan
    return errors_count / i


def calc_stddev(ebno: float, k: int, n: int) -> float:
    """Noise standard deviation for a given Eb/N0 in dB and code rate k/n."""
    return math.sqrt(0.5 * n / k * 10 ** (-ebno / 10))


def read_matrix_file(filename: str) -> Matrix:
    """Read a matrix file: column and row counts, then one 0/1 row per line."""
    try:
        with open(filename, encoding="utf-8") as file:
            tokens = file.read().split()
    except OSError as exc:
        raise OSError(f"Could not open file: {filename}") from exc
    if len(tokens) < 2:
        raise ValueError("matrix file must start with column and row counts")
    try:
        rows = int(tokens[1])
    except ValueError as exc:
        raise ValueError("matrix dimensions must be integers") from exc
    lines = tokens[2 : 2 + rows]
    if len(lines) < rows:
        raise ValueError(f"expected {rows} rows, found {len(lines)}")
    return [from_string(line) for line in lines]


def _float_list(text: str) -> list[float]:
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number list: {text!r}") from exc


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid count: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="osd", add_help=False)
    parser.add_argument("-f", "--file", help="Place where generating matrix is stored")
    parser.add_argument(
        "-w", "--wmax", type=_non_negative, default=2,
        help="Maximum weight of error correcting combination",
    )
    parser.add_argument(
        "-n", "--EbN0", dest="ebn0", type=_float_list, action="extend",
        help='E_b / N_0 ratio. This option can be a list: "-n 1,2,3" would run '
        "an experiment for each parameter",
    )
    parser.add_argument(
        "-e", "--errors", type=_non_negative, help="Minimal count of errors to wait for"
    )
    parser.add_argument(
        "-c", "--count", type=_non_negative,
        help='Count of words to translate for each experiment. If both "errors" '
        'and "count" are provided, experiment runs until both constraints are '
        "satisfied or limit is reached",
    )
    parser.add_argument(
        "-L", "--tries-limit", dest="limit", type=_non_negative,
        help="Hard limit of tries. If limit is reached, experiment is stopped "
        "even if errors count isn't reached",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation for every requested Eb/N0 and print a table."""
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.help:
        print(parser.format_help())
        return 0
    if args.file is None:
        print("Generating matrix must be specified, but it isn't.")
        print(parser.format_help())
        return 0
    if not args.ebn0:
        print("Channel noise (EbN0 parameter) must be specified, but it isn't.")
        print(parser.format_help())
        return 0
    if args.errors is None and args.count is None:
        print("At least one of -e and -c must be provided.")
        print(parser.format_help())
        return 0

    needed_errors = args.errors or 0
    count = args.count or 0
    m = read_matrix_file(args.file)
    k, n = len(m), len(m[0])

    def experiment(ebn0: float) -> float:
        return run_experiment(
            m, calc_stddev(ebn0, k, n), args.wmax, needed_errors, count, args.limit
        )

    with ThreadPoolExecutor(max_workers=len(args.ebn0)) as pool:
        wers = list(pool.map(experiment, args.ebn0))

    print("E_b / N_0 (db) | Word/error rate")
    for ebn0, wer in zip(args.ebn0, wers):
        print(f"{ebn0:<16g} {wer:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())