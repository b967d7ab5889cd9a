"""
Mastermind-style scoring for a single (guess, secret) pair.

Conventions:
  - exact   (black) : correct symbol in the correct position
  - partial (white) : correct symbol in the wrong position, each symbol
                      instance used at most once

This implementation is:
  - length-aware (any code length)
  - duplicate-safe (respects true symbol multiplicities on both sides)
  - deterministic and symmetric: score(a, b) == score(b, a)

Algorithm (two-pass):
  1) First pass counts exact matches; matched positions are consumed in
     both codes.
  2) Second pass tallies the unconsumed symbols of each code and adds
     min(count_a, count_b) for every symbol present in both tallies.

score() is the hot path of the minimax selector; the vectorised table in
engine.table precomputes it for a whole configuration.
"""

from collections import Counter
from typing import NamedTuple


class Score(NamedTuple):
    exact: int
    partial: int


def score(a: str, b: str) -> Score:
    """
    Compute the (exact, partial) score of code `a` against code `b`.

    Preconditions:
      - len(a) == len(b)

    Examples:
      score("GRBY", "RGBY") -> Score(exact=2, partial=2)
      score("OPRG", "RGBY") -> Score(exact=0, partial=2)
    """
    if len(a) != len(b):
        raise ValueError(f"Codes must be the same length: {a!r} vs {b!r}")

    exact = 0
    rest_a: Counter = Counter()
    rest_b: Counter = Counter()

    # Pass 1: exact matches; everything else goes to the leftover tallies.
    for x, y in zip(a, b):
        if x == y:
            exact += 1
        else:
            rest_a[x] += 1
            rest_b[y] += 1

    # Pass 2: symbols present in both leftovers, capped by the smaller count.
    partial = 0
    for sym, n in rest_a.items():
        m = rest_b.get(sym, 0)
        if m > 0:
            partial += n if n < m else m

    return Score(exact, partial)


def n_buckets(length: int) -> int:
    """Number of distinct scores for code length L: (L+1)(L+2)/2."""
    return (length + 1) * (length + 2) // 2


def bucket(s: Score, length: int) -> int:
    """
    Dense index of a score in [0, n_buckets(length)).

    Rows are laid out by `exact`; row e holds partial = 0..L-e.
    """
    e, p = s
    return e * (length + 1) - e * (e - 1) // 2 + p


def is_solved(s: Score, length: int) -> bool:
    return s[0] == length
