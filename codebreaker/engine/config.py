"""
Game configuration: palette, code length, repetition rule, round budget.

A Configuration is an immutable value object. It is hashable so it can key
caches (see engine.table.score_table) and several games with different
alphabets can run side by side without sharing any global state.

Presets mirror the classic difficulty levels:
  default      : 6 colors, 10 rounds, no repetition
  easy         : 3 colors, 20 rounds, repetition allowed
  intermediate : 4 colors, 15 rounds, repetition allowed
  hard         : 5 colors, 10 rounds, no repetition
  expert       : 6 colors,  5 rounds, no repetition
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Dict, Tuple

from .errors import InvalidConfiguration

DEFAULT_SYMBOLS = "RGBYOP"
DEFAULT_NAMES: Tuple[str, ...] = ("Red", "Green", "Blue", "Yellow", "Orange", "Purple")
DEFAULT_LENGTH = 4
DEFAULT_MAX_ROUNDS = 10


@dataclass(frozen=True)
class Configuration:
    colors: int = 6                        # alphabet size A
    length: int = DEFAULT_LENGTH           # code length L
    allow_repetition: bool = False
    max_rounds: int = DEFAULT_MAX_ROUNDS   # round budget for the driver
    symbols: str = DEFAULT_SYMBOLS         # ordered palette; alphabet = symbols[:colors]
    names: Tuple[str, ...] = DEFAULT_NAMES # display names, parallel to symbols

    def __post_init__(self):
        # Callers may pass a list; keep the instance hashable.
        object.__setattr__(self, "names", tuple(self.names))
        if len(self.symbols) != len(set(self.symbols)):
            raise InvalidConfiguration(f"Duplicate symbols in palette: {self.symbols!r}")
        if not 1 <= self.colors <= len(self.symbols):
            raise InvalidConfiguration(
                f"colors must be in 1..{len(self.symbols)} for palette {self.symbols!r}; got {self.colors}")
        if self.length < 1:
            raise InvalidConfiguration(f"length must be >= 1; got {self.length}")
        if self.max_rounds < 1:
            raise InvalidConfiguration(f"max_rounds must be >= 1; got {self.max_rounds}")

    @property
    def alphabet(self) -> str:
        return self.symbols[: self.colors]

    @property
    def palette(self) -> Dict[str, str]:
        """symbol -> display name for the active alphabet (symbol itself if unnamed)."""
        return {s: (self.names[i] if i < len(self.names) else s)
                for i, s in enumerate(self.alphabet)}

    @property
    def candidate_count(self) -> int:
        """Number of legal codes, computed without enumerating them."""
        if self.allow_repetition:
            return self.colors ** self.length
        return math.perm(self.colors, self.length)

    def describe(self) -> str:
        return (f"colors={self.colors} ({self.alphabet}) length={self.length} "
                f"repetition={'ON' if self.allow_repetition else 'OFF'} "
                f"max_rounds={self.max_rounds} candidates={self.candidate_count}")

    def to_dict(self) -> Dict:
        d = asdict(self)
        d["names"] = list(self.names)
        return d


PRESETS: Dict[str, Configuration] = {
    "default": Configuration(colors=6, max_rounds=10, allow_repetition=False),
    "easy": Configuration(colors=3, max_rounds=20, allow_repetition=True),
    "intermediate": Configuration(colors=4, max_rounds=15, allow_repetition=True),
    "hard": Configuration(colors=5, max_rounds=10, allow_repetition=False),
    "expert": Configuration(colors=6, max_rounds=5, allow_repetition=False),
}


def preset(name: str, **overrides) -> Configuration:
    """
    Look up a preset by name, optionally overriding fields.

    Example:
      preset("hard", max_rounds=12)
    """
    try:
        base = PRESETS[name]
    except KeyError as e:
        raise InvalidConfiguration(
            f"Unknown preset: {name}. Available: {sorted(PRESETS.keys())}") from e
    return replace(base, **overrides) if overrides else base


def check_budget(config: Configuration, limit: int) -> int:
    """
    Reject configurations whose candidate count exceeds `limit`.
    Returns the candidate count when it fits.
    """
    n = config.candidate_count
    if n > limit:
        raise InvalidConfiguration(
            f"{n} candidate codes exceed the budget of {limit} ({config.describe()})")
    return n
