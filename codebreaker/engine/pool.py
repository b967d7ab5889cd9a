"""
Candidate pool: the enumerated codes plus one liveness flag per code.

Codes are never physically removed; filtering clears flags. Iteration
yields the surviving codes in enumeration order, which the minimax
selector relies on for tie-breaking.

The pool belongs to the driver for the duration of one game. Solvers get
it per call and must not keep a reference.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np

from .config import Configuration
from .enumeration import enumerate_codes
from .table import ScoreTable, score_table


class CandidatePool:
    def __init__(self, config: Configuration, *, use_table: bool = True):
        self.config = config
        # The cached table already holds the enumeration; reuse it.
        self.table: Optional[ScoreTable] = score_table(config) if use_table else None
        self.codes: List[str] = list(self.table.codes) if self.table else enumerate_codes(config)
        self.active = np.ones(len(self.codes), dtype=bool)

    def __len__(self) -> int:
        return int(self.active.sum())

    def __iter__(self) -> Iterator[str]:
        codes = self.codes
        for i in self.indices():
            yield codes[i]

    def __contains__(self, code: object) -> bool:
        if self.table is not None:
            i = self.table.index.get(code)  # type: ignore[arg-type]
            return i is not None and bool(self.active[i])
        return any(c == code for c in self)

    def indices(self) -> np.ndarray:
        """Positions of active codes, ascending (enumeration order)."""
        return np.flatnonzero(self.active)

    def first(self) -> Optional[str]:
        """First surviving code, or None when the pool is empty."""
        idx = self.indices()
        return self.codes[idx[0]] if idx.size else None

