# apps/cli/run.py
"""
CLI entry point for running codebreaker experiments.

This script:
  1) Builds the game configuration (preset + overrides) and checks the
     candidate count against a budget.
  2) Instantiates the requested solver.
  3) Plays every possible secret (or a seeded sample) with a live progress
     indicator and writes:
       - CSV:  per-game results + guess/score history columns
       - JSON: manifest with config, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from apps.cli.common import add_config_args, config_from_args
from codebreaker.engine import InvalidConfiguration, check_budget, enumerate_codes
from codebreaker.harness import run_case, summarize
from codebreaker.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from codebreaker.solvers import create_solver, get_solver_ids


def main():
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="codebreaker — run solver experiments")
    ap.add_argument("--solver", default="minimax",
                    help=f"solver id (one of: {solver_choices})")
    add_config_args(ap)
    ap.add_argument("--max-candidates", type=int, default=5000,
                    help="refuse configurations with more candidate codes than this")
    ap.add_argument("--workers", type=int,
                    help="minimax only: score in pure Python on this many threads instead of the numpy table")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Configuration, rejected early if it cannot be played or is too big
    try:
        config = config_from_args(args)
        check_budget(config, args.max_candidates)
        secrets = enumerate_codes(config)
    except InvalidConfiguration as e:
        raise SystemExit(f"Invalid configuration: {e}")
    print(config.describe())

    # 2) Solver by id
    kwargs = {}
    if args.workers:
        if args.solver != "minimax":
            raise SystemExit(f"--workers only applies to the minimax solver, not {args.solver}")
        kwargs = {"workers": args.workers, "use_table": False}
    solver = create_solver(args.solver, **kwargs)

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(secrets):
        pool = list(secrets)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = secrets

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 5) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, secret, config=config, seed=per_seed)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results)
    print(f"solved {summary['solved']}/{summary['games']} | "
          f"mean {summary['mean_guesses']} | max {summary['max_guesses']} | "
          f"exhausted {summary['exhausted']} | contradiction {summary['contradiction']}")

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), config)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "game": config.to_dict(),
        "summary": summary,
        "num_cases": len(results),
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
