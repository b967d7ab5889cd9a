"""
Candidate enumeration: every code legal under a Configuration.

Order is lexicographic over symbol indices (alphabet order). The minimax
selector breaks ties by this order, so it must stay reproducible.

  - repetition allowed    : Cartesian power, A^L codes
  - repetition disallowed : L-permutations, A*(A-1)*...*(A-L+1) codes

Sizing is the caller's job: call engine.config.check_budget(config, limit)
before enumerating large configurations.
"""

from __future__ import annotations

from itertools import permutations, product
from typing import List

from .config import Configuration
from .errors import InvalidConfiguration


def enumerate_codes(config: Configuration) -> List[str]:
    """
    Return all legal codes for `config` in deterministic order.

    Raises:
      InvalidConfiguration if no code is legal (e.g. length > colors without
      repetition).
    """
    if config.candidate_count == 0:
        raise InvalidConfiguration(
            f"No codes of length {config.length} from {config.colors} colors "
            f"without repetition")

    alphabet = config.alphabet
    if config.allow_repetition:
        it = product(alphabet, repeat=config.length)
    else:
        it = permutations(alphabet, config.length)
    return ["".join(c) for c in it]
