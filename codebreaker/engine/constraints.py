"""
Candidate filtering given game history.

Given:
  - a pool of codes (the enumerated universe for a configuration)
  - a (guess, score) observation, or a whole history of them

Return:
  - only the codes that would have produced exactly the observed scores.

This is the core step that turns feedback into a shrinking candidate set.
Two forms are provided:
  - filter_pool       : in-place on a CandidatePool (clears liveness flags)
  - filter_candidates : list in, list out, for ad-hoc histories
"""

from typing import Iterable, List, Tuple

import numpy as np

from .pool import CandidatePool
from .scoring import Score, bucket, score

# History is a sequence of (guess, score) tuples produced by the engine.
History = Iterable[Tuple[str, Score]]


def filter_pool(pool: CandidatePool, guess: str, observed: Score) -> int:
    """
    Deactivate every active candidate whose score against `guess` differs
    from `observed`. Returns the number of candidates still active.

    Calling it again with the same (guess, observed) changes nothing.

    Raises:
      ValueError if `observed` is not a possible score for length L
      (a negative field, or exact + partial > L).
    """
    exact, partial = observed
    length = pool.config.length
    if exact < 0 or partial < 0 or exact + partial > length:
        raise ValueError(f"Impossible score {tuple(observed)} for code length {length}")

    idx = pool.indices()
    if idx.size == 0:
        return 0

    row = pool.table.row(guess) if pool.table is not None else None
    if row is not None:
        # Fast path: guess is an enumerated code, read its table row.
        keep = row[idx] == bucket(observed, length)
    else:
        codes = pool.codes
        keep = np.fromiter((score(codes[i], guess) == observed for i in idx),
                           dtype=bool, count=idx.size)

    pool.active[idx[~keep]] = False
    return int(keep.sum())


def filter_candidates(codes: Iterable[str], history: History, length: int) -> List[str]:
    """
    Keep only codes (length == L) that would produce exactly the recorded
    score for every (guess, score) in `history`.

    Returns:
      List[str] of consistent candidates (order preserved as in `codes`).
    """
    history = list(history)
    out: List[str] = []

    for c in codes:
        if len(c) != length:
            continue

        # If scoring this candidate against an old guess doesn't reproduce
        # the recorded score, the candidate is invalid.
        if all(score(c, g) == s for g, s in history):
            out.append(c)

    return out
