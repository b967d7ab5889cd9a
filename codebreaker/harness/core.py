"""
Search driver and game primitives.

- new_game:    build the candidate pool and draw (or accept) a secret.
- next_guess:  minimax selection over a pool.
- play_round:  filter a pool with one (guess, score) observation.
- run_case:    play one game with a given solver until a terminal state.
- run_batch:   run many games (by default every possible secret).
- summarize:   aggregate a batch into counts / guess distribution.

State machine of one game:
    searching -> solved         (exact == L observed)
              -> exhausted      (round budget reached, not an error)
              -> contradiction  (solver raised EmptyPool; never retried)

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations

import random
import time
from typing import Callable, Dict, Iterable, List, Tuple

import numpy as np

from codebreaker.engine import (
    CandidatePool, Configuration, EmptyPool, Score,
    enumerate_codes, filter_pool, is_solved, score, validate_code,
)
from codebreaker.solvers.minimax import select_minimax

SEARCHING = "searching"
SOLVED = "solved"
EXHAUSTED = "exhausted"
CONTRADICTION = "contradiction"

# Answers a guess with a score; normally score(guess, secret).
Oracle = Callable[[str], Score]


def generate_secret(config: Configuration, rng: random.Random | None = None) -> str:
    """
    Uniform random secret: a sample without repetition, independent draws with it.
    """
    rng = rng or random.Random()
    alphabet = config.alphabet
    if config.allow_repetition:
        return "".join(rng.choices(alphabet, k=config.length))
    return "".join(rng.sample(alphabet, k=config.length))


def new_game(config: Configuration, *, rng: random.Random | None = None,
             secret: str | None = None) -> Tuple[str, CandidatePool]:
    """
    Start a game: enumerate the pool (raises InvalidConfiguration before
    anything else happens) and draw a secret unless one is supplied.
    """
    pool = CandidatePool(config)
    if secret is None:
        secret = generate_secret(config, rng)
    elif not validate_code(secret, config):
        raise ValueError(f"Secret {secret!r} is not a legal code ({config.describe()})")
    return secret, pool


def next_guess(pool: CandidatePool) -> str:
    return select_minimax(pool)


def play_round(pool: CandidatePool, guess: str, observed: Score) -> int:
    return filter_pool(pool, guess, observed)


def run_case(
        solver,
        secret: str | None = None,
        *,
        config: Configuration,
        oracle: Oracle | None = None,
        seed: int | None = None,
        on_round: Callable[[Dict], None] | None = None,
) -> Dict:
    """
    Execute one game until solved, out of rounds, or contradicted.

    Args:
        solver:   an object implementing BaseSolver with next_guess(state)
        secret:   the hidden code; scores come from score(guess, secret)
        config:   game configuration (alphabet, length, repetition, budget)
        oracle:   alternative score source when no secret is known
                  (e.g. a human answering); exactly one of secret/oracle
        seed:     RNG seed to make solver tie-breaks reproducible
        on_round: called after every round with a dict:
                  round, guess, score, before, after, example

    Returns:
        dict with keys:
            status (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, Score)]), remaining (list[int]),
            secret (str | None)
    """
    if (secret is None) == (oracle is None):
        raise ValueError("Pass exactly one of `secret` or `oracle`")
    if secret is not None:
        _, pool = new_game(config, secret=secret)
        oracle = lambda g: score(g, secret)  # noqa: E731
    else:
        pool = CandidatePool(config)

    solver.reset(config=config, seed=seed)

    history: List[Tuple[str, Score]] = []
    remaining: List[int] = []
    status = SEARCHING

    t0 = time.perf_counter()
    while status == SEARCHING:
        state = {
            "round": len(history) + 1,
            "pool": pool,
            "history": list(history),
            "config": config,
        }

        try:
            guess = solver.next_guess(state)
        except EmptyPool:
            status = CONTRADICTION
            break

        s = oracle(guess)
        history.append((guess, s))
        before = len(pool)

        if is_solved(s, config.length):
            status = SOLVED
            after = None
        else:
            after = filter_pool(pool, guess, s)
            remaining.append(after)
            if len(history) >= config.max_rounds:
                status = EXHAUSTED

        if on_round is not None:
            on_round({
                "round": len(history),
                "guess": guess,
                "score": s,
                "before": before,
                "after": after,
                "example": pool.first() if after else None,
            })

    dt = (time.perf_counter() - t0) * 1000.0
    if secret is None and status == SOLVED:
        secret = history[-1][0]
    return {
        "status": status,
        "success": status == SOLVED,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "remaining": remaining,
        "secret": secret,
    }


def run_batch(
        solver,
        *,
        config: Configuration,
        secrets: Iterable[str] | None = None,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. Defaults to every legal secret in
    enumeration order; if 'sample' is provided only the first K are used.

    Each case's seed is derived from the base seed (seed + index).
    """
    pool = list(secrets) if secrets is not None else enumerate_codes(config)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, config=config, seed=case_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: status counts, mean/max guesses over solved games,
    and the histogram of guesses needed (index = number of guesses).
    """
    statuses = [r["status"] for r in results]
    solved = np.array([r["guesses"] for r in results if r["status"] == SOLVED], dtype=int)
    return {
        "games": len(results),
        "solved": int(statuses.count(SOLVED)),
        "exhausted": int(statuses.count(EXHAUSTED)),
        "contradiction": int(statuses.count(CONTRADICTION)),
        "mean_guesses": float(solved.mean()) if solved.size else None,
        "max_guesses": int(solved.max()) if solved.size else None,
        "distribution": np.bincount(solved).tolist() if solved.size else [],
        "total_time_ms": float(sum(r["time_ms"] for r in results)),
    }
