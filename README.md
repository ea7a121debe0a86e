# osdecoder

Ordered statistics decoding (OSD) for binary linear block codes, together with
a small simulator that measures the word error rate of the decoder over an
additive white Gaussian noise channel with BPSK modulation. It is written in
pure Python with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

Installing the package provides the `osd` command (the same entry point is
reachable as `python -m osdecoder.cli`). It reads a generating matrix from a
file, runs one experiment for each requested E_b/N_0 value, and prints a table
of word error rates.

```
osd -f code.txt -n 1,2,3 -c 10000
```

Options:

| Option | Meaning |
| --- | --- |
| `-f`, `--file` | File holding the generating matrix (required) |
| `-w`, `--wmax` | Largest weight of the flip patterns tried on the information set (default 2) |
| `-n`, `--EbN0` | E_b/N_0 in dB; a comma-separated list, or the option repeated, runs one experiment per value (required) |
| `-e`, `--errors` | Keep going until at least this many word errors are seen |
| `-c`, `--count` | Number of words to transmit per experiment |
| `-L`, `--tries-limit` | Hard cap on the number of words, even if the error target is not met |
| `-h`, `--help` | Print usage |

At least one of `-e` and `-c` must be given. When both are given, an
experiment runs until both are satisfied or the limit is reached. If the file,
the E_b/N_0 values, or both of `-e` and `-c` are missing, the command prints a
message and the usage text and exits with status 0. Counts must be
non-negative integers.

The experiments run concurrently, one thread per E_b/N_0 value. Each one uses
its own random generator seeded with 42, so runs are repeatable. The noise
standard deviation for a code of `k` rows and `n` columns is
`sqrt(0.5 * n / k * 10 ** (-EbN0 / 10))`.

The output is a header line `E_b / N_0 (db) | Word/error rate` followed by one
line per value: the E_b/N_0 value left-aligned in a 16-character field, a
space, and the measured word error rate (the fraction of decoded words that
differ from the words sent). An experiment that sent no words reports `nan`.

### Matrix file format

The file starts with the number of columns `n` and the number of rows `k`,
separated by whitespace. Then come `k` rows, each a string of characters
`0` or `1`:

```
7 4
1000110
0100011
0010111
0001101
```

The rows must be linearly independent; otherwise decoding raises
`ValueError`. A file that cannot be opened raises `OSError`; a row holding
anything other than `0` and `1`, or fewer rows than announced, raises
`ValueError`.

## Library use

```python
from random import Random

from osdecoder.cli import read_matrix_file
from osdecoder.linalg import mul
from osdecoder.osd import osd
from osdecoder.simulation import generate_vec, simulate_translation

g = read_matrix_file("code.txt")
rng = Random(1)

message = generate_vec(len(g), rng)
codeword = mul(message, g)
received = simulate_translation(codeword, 0.0, 0.5, rng)

decoded = osd(received, g, 2)
print(decoded == codeword)
```

Vectors are lists of `bool` and matrices are lists of such rows. Received
values follow the BPSK convention: bit 1 is sent as -1, bit 0 as +1, so a
negative value means the hard decision is 1 and its magnitude is the
reliability.

`osd(msg, g, w_max)` sorts positions by reliability, reduces the permuted
generator matrix to find the most reliable information set, tries every flip
pattern of weight 0 to `w_max` on it, and returns the codeword whose
disagreements with the hard decisions have the smallest total reliability.

Modules:

- `osdecoder.linalg` — vectors and matrices over GF(2): `xor`, `from_string`,
  `mul`, and Gaussian elimination with `gauss`, which returns the reduced
  matrix and the indices of its pivot columns.
- `osdecoder.permutation` — `make_permutation`, `invert_permutation` and
  `shuffle_cols`.
- `osdecoder.simulation` — `generate_vec`, `generate_noise` and
  `simulate_translation` for the noisy channel, all driven by a
  `random.Random` instance.
- `osdecoder.osd` — the decoder `osd`, with `decompose`, `calc_metric` and
  the `combinations` generator of flip patterns.
- `osdecoder.cli` — `run_experiment`, `calc_stddev`, `read_matrix_file` and
  `main`, the entry point of the `osd` command.