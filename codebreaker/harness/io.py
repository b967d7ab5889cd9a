"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, summary and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Scores are written as two integer columns (exact_i, partial_i) rather
  than a single "2-1" string, which spreadsheet apps read as a date.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from codebreaker.engine import Configuration


def write_csv(results: List[Dict], path: str, config: Configuration) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, colors, length, repetition, secret, status, guesses, time_ms,
      guess_1, exact_1, partial_1, ..., guess_R, exact_R, partial_R
    where R is config.max_rounds.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    max_rounds = config.max_rounds
    fields = ["solver", "colors", "length", "repetition", "secret", "status", "guesses", "time_ms"]
    for i in range(1, max_rounds + 1):
        fields += [f"guess_{i}", f"exact_{i}", f"partial_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "colors": config.colors,
                "length": config.length,
                "repetition": config.allow_repetition,
                "secret": r["secret"] or "",
                "status": r["status"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_rounds + 1):
                if i <= len(hist):
                    g, (exact, partial) = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"exact_{i}"] = exact
                    row[f"partial_{i}"] = partial
                else:
                    row[f"guess_{i}"] = ""
                    row[f"exact_{i}"] = ""
                    row[f"partial_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and batch summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - game: Configuration.to_dict()
      - summary: harness.core.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
