# apps/cli/solve.py
"""
Watch a solver crack one code, round by round.

  --secret RGBY  : score against a known secret
  (no --secret)  : you hold the secret; type each score as "exact partial"
  --random       : draw a random secret (seeded)

Each round prints the guess, its score, and how many candidates survive.
Inconsistent scores typed by hand end the game as a contradiction.
"""

from __future__ import annotations

import argparse
import random

from apps.cli.common import add_config_args, config_from_args
from codebreaker.engine import InvalidConfiguration, Score, check_budget, parse_code
from codebreaker.harness import CONTRADICTION, EXHAUSTED, SOLVED, generate_secret, run_case
from codebreaker.solvers import create_solver, get_solver_ids


def _ask_score(length: int):
    def oracle(guess: str) -> Score:
        while True:
            raw = input(f"Score for {guess} (exact partial): ").split()
            try:
                exact, partial = (int(x) for x in raw)
            except ValueError:
                print("Enter two integers, e.g. '1 2'.")
                continue
            if exact < 0 or partial < 0 or exact + partial > length:
                print(f"Need exact, partial >= 0 and exact + partial <= {length}.")
                continue
            return Score(exact, partial)
    return oracle


def _round_printer(solver):
    def print_round(info: dict) -> None:
        exact, partial = info["score"]
        print(f"Round {info['round']}: {info['guess']}  => exact {exact}, partial {partial}")
        worst = getattr(solver, "last_worst", None)
        if worst is not None:
            print(f"  chosen to leave at most {worst} candidates")
        if info["after"] is not None:
            print(f"  {info['before']} candidates -> {info['after']} after filtering")
            if info["example"]:
                print(f"  still possible, e.g. {info['example']}")
    return print_round


def main():
    ap = argparse.ArgumentParser(description="codebreaker — trace one game")
    ap.add_argument("--solver", default="minimax",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    add_config_args(ap)
    ap.add_argument("--secret", help="secret code, e.g. RGBY")
    ap.add_argument("--random", action="store_true", help="draw a random secret")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--max-candidates", type=int, default=5000)
    args = ap.parse_args()

    try:
        config = config_from_args(args)
        check_budget(config, args.max_candidates)
    except InvalidConfiguration as e:
        raise SystemExit(f"Invalid configuration: {e}")

    print(config.describe())
    for sym, name in config.palette.items():
        print(f"  {sym} = {name}")

    secret = None
    oracle = None
    if args.secret:
        secret = parse_code(args.secret, config)
        if secret is None:
            raise SystemExit(f"{args.secret!r} is not a legal code for this configuration")
    elif args.random:
        secret = generate_secret(config, random.Random(args.seed))
    else:
        oracle = _ask_score(config.length)

    solver = create_solver(args.solver)
    try:
        r = run_case(solver, secret, config=config, oracle=oracle, seed=args.seed,
                     on_round=_round_printer(solver))
    except InvalidConfiguration as e:
        raise SystemExit(f"Invalid configuration: {e}")

    if r["status"] == SOLVED:
        print(f"Solved {r['secret']} in {r['guesses']} round(s).")
    elif r["status"] == EXHAUSTED:
        print(f"Not solved within {config.max_rounds} rounds.")
        if secret:
            print(f"The secret was: {secret}")
    elif r["status"] == CONTRADICTION:
        print("No code matches every score given; something is wrong with this session.")


if __name__ == "__main__":
    main()
