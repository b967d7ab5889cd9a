"""
Lightweight code validation and parsing.

This module answers the question: "Is this code legal under the current
configuration?" A code is valid iff:
  - it is a string
  - it has exact length L
  - every symbol belongs to the configured alphabet
  - symbols are pairwise distinct when repetition is disallowed

parse_code() turns a typed line ("r g b y", "RGBY") into a code: letters
are upper-cased, anything that is not a letter or digit is ignored.
"""

from __future__ import annotations

from typing import Optional

from .config import Configuration


def validate_code(code: str, config: Configuration) -> bool:
    """
    Return True if `code` is legal under `config`.
    """
    if not isinstance(code, str):
        return False

    if len(code) != config.length:
        return False

    alphabet = config.alphabet
    if any(sym not in alphabet for sym in code):
        return False

    if not config.allow_repetition and len(set(code)) != len(code):
        return False
    return True


def parse_code(text: str, config: Configuration) -> Optional[str]:
    """
    Parse a line of user input into a code, or None if it is not legal.

    Examples (default palette RGBYOP, L=4, no repetition):
      parse_code("r g b y", cfg) -> "RGBY"
      parse_code("RGBR", cfg)    -> None   (repeats R)
      parse_code("RGBX", cfg)    -> None   (X not in palette)
    """
    code = "".join(ch.upper() for ch in text if ch.isalnum())
    return code if validate_code(code, config) else None
