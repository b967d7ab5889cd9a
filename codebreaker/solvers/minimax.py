"""
Minimax solver (Knuth-style worst-case minimisation).

Idea:
  For each ACTIVE candidate g considered as a hypothetical guess, partition
  the active candidates by the score they would receive against g. The
  worst case of g is the size of its largest partition: the number of
  codes still indistinguishable after the least informative answer.
  Pick the g with the smallest worst case.
Tie-break:
  earliest in enumeration order. This makes the first guess of a
  configuration a fixed, reproducible value.

Cost:
  O(|pool|^2) score evaluations per call; this is the dominant cost of a
  whole game. Two evaluation paths return the same guess:
    - table  : numpy bincount over the pool's precomputed score sub-matrix
    - oracle : score() in Python, optionally spread over a thread pool
  Partitions for different g are independent; only the final argmin
  needs all of them.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence, Tuple

import numpy as np

from codebreaker.engine import CandidatePool, EmptyPool, bucket, n_buckets, score
from .base import BaseSolver, register

# Rows of hypothetical guesses per bincount; bounds the temporary k*BLOCK array.
BLOCK_ROWS = 512


def worst_case(guess: str, candidates: Sequence[str], length: int) -> int:
    """
    Size of the largest score partition that `guess` induces on `candidates`.
    """
    counts = [0] * n_buckets(length)
    for c in candidates:
        counts[bucket(score(c, guess), length)] += 1
    return max(counts) if candidates else 0


def _worst_cases_table(buckets: np.ndarray, idx: np.ndarray, nb: int) -> np.ndarray:
    k = idx.size
    out = np.empty(k, dtype=np.int64)
    for start in range(0, k, BLOCK_ROWS):
        stop = min(start + BLOCK_ROWS, k)
        sub = buckets[np.ix_(idx[start:stop], idx)].astype(np.intp)
        rows = stop - start
        # Shift each row into its own bucket range so one bincount counts all rows.
        flat = sub + (np.arange(rows, dtype=np.intp)[:, None] * nb)
        counts = np.bincount(flat.ravel(), minlength=rows * nb).reshape(rows, nb)
        out[start:stop] = counts.max(axis=1)
    return out


def _worst_cases_oracle(candidates: List[str], length: int, workers: int | None) -> List[int]:
    if workers and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            # map() keeps input order, so ties still resolve by enumeration order.
            return list(ex.map(lambda g: worst_case(g, candidates, length), candidates))
    return [worst_case(g, candidates, length) for g in candidates]


def minimax_choice(pool: CandidatePool, *, workers: int | None = None,
                   use_table: bool = True) -> Tuple[str, int]:
    """
    Return (guess, worst_case) for the minimax guess over the active pool.

    Raises:
      EmptyPool if no candidate is active.
    """
    idx = pool.indices()
    if idx.size == 0:
        raise EmptyPool("No active candidate left; the observed scores contradict each other")

    if use_table and pool.table is not None:
        worst = _worst_cases_table(pool.table.buckets, idx, pool.table.n_buckets)
    else:
        codes = pool.codes
        worst = np.asarray(_worst_cases_oracle([codes[i] for i in idx], pool.config.length, workers))

    best = int(np.argmin(worst))  # first minimum wins
    return pool.codes[idx[best]], int(worst[best])


def select_minimax(pool: CandidatePool, *, workers: int | None = None,
                   use_table: bool = True) -> str:
    """Pick the next guess by minimax; see minimax_choice()."""
    return minimax_choice(pool, workers=workers, use_table=use_table)[0]


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (worst-case partition)"
    version = "1.0.0"

    def __init__(self, workers: int | None = None, use_table: bool = True):
        super().__init__()
        self.workers = workers
        self.use_table = use_table
        self.last_worst: int | None = None

    def next_guess(self, state: dict) -> str:
        guess, self.last_worst = minimax_choice(
            state["pool"], workers=self.workers, use_table=self.use_table)
        return guess
