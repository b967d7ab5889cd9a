"""
Pairwise score table for one configuration (numpy).

buckets[i, j] == bucket(score(codes[i], codes[j]), L) for every pair of
enumerated codes. Built once per Configuration and cached; the minimax
selector and the consistency filter read rows/sub-matrices from it instead
of calling score() in a Python loop.

Vectorised identity used for the partial count:
    partial = sum_s min(count_a[s], count_b[s]) - exact
(each exact match removes one instance of its symbol from both sides).

Memory is O(n^2) in the number of codes (n=1296 -> ~3 MB of uint16).
Rows are computed in blocks so the temporary (rows, n, A) tensor stays small.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .config import Configuration
from .enumeration import enumerate_codes
from .scoring import Score, n_buckets

BLOCK_ROWS = 256


def decode_buckets(length: int) -> List[Score]:
    """Inverse of scoring.bucket(): position k holds the Score with bucket k."""
    return [Score(e, p) for e in range(length + 1) for p in range(length + 1 - e)]


def _symbol_matrix(codes: Sequence[str], alphabet: str) -> np.ndarray:
    pos = {s: i for i, s in enumerate(alphabet)}
    return np.array([[pos[s] for s in c] for c in codes], dtype=np.int16)


def build_buckets(codes: Sequence[str], alphabet: str, length: int) -> np.ndarray:
    """
    Return an (n, n) uint16 matrix of score buckets for `codes`.
    """
    n = len(codes)
    sym = _symbol_matrix(codes, alphabet).reshape(n, length)

    # Per-code symbol histogram, shape (n, A)
    counts = np.zeros((n, len(alphabet)), dtype=np.int16)
    np.add.at(counts, (np.repeat(np.arange(n), length), sym.ravel()), 1)

    out = np.empty((n, n), dtype=np.uint16)
    for start in range(0, n, BLOCK_ROWS):
        stop = min(start + BLOCK_ROWS, n)
        exact = (sym[start:stop, None, :] == sym[None, :, :]).sum(axis=2)
        common = np.minimum(counts[start:stop, None, :], counts[None, :, :]).sum(axis=2)
        partial = common - exact
        out[start:stop] = exact * (length + 1) - exact * (exact - 1) // 2 + partial
    return out


class ScoreTable:
    """
    Read-only table of score buckets over an enumerated code list.
    """

    def __init__(self, codes: Sequence[str], length: int, buckets: np.ndarray):
        self.codes: Tuple[str, ...] = tuple(codes)
        self.length = int(length)
        self.n_buckets = n_buckets(self.length)
        self.index: Dict[str, int] = {c: i for i, c in enumerate(self.codes)}
        self.buckets = buckets
        self.buckets.setflags(write=False)
        self._scores = decode_buckets(self.length)

    def __len__(self) -> int:
        return len(self.codes)

    def score(self, i: int, j: int) -> Score:
        return self._scores[int(self.buckets[i, j])]

    def row(self, guess: str) -> np.ndarray | None:
        """Buckets of every code against `guess`, or None if `guess` is not enumerated."""
        i = self.index.get(guess)
        return None if i is None else self.buckets[i]


@lru_cache(maxsize=8)
def score_table(config: Configuration) -> ScoreTable:
    """
    Build (or fetch from cache) the score table for `config`.
    """
    codes = enumerate_codes(config)
    return ScoreTable(codes, config.length, build_buckets(codes, config.alphabet, config.length))
