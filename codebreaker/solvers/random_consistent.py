"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (codes still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline to verify the pipeline; it does not try to bound the
    worst case the way minimax does.
"""

from __future__ import annotations

from codebreaker.engine import CandidatePool, EmptyPool
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        pool: CandidatePool = state["pool"]
        idx = pool.indices()

        # No fallback guess: an empty pool means the score history is inconsistent.
        if idx.size == 0:
            raise EmptyPool("No active candidate left to pick from")

        i = self.rng.randrange(idx.size)
        return pool.codes[idx[i]]
