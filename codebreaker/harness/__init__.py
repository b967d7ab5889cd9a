from .core import (
    SEARCHING, SOLVED, EXHAUSTED, CONTRADICTION,
    generate_secret, new_game, next_guess, play_round, run_case, run_batch, summarize,
)
from .io import write_csv, write_manifest

__all__ = [
    "SEARCHING", "SOLVED", "EXHAUSTED", "CONTRADICTION",
    "generate_secret", "new_game", "next_guess", "play_round",
    "run_case", "run_batch", "summarize", "write_csv", "write_manifest",
]
