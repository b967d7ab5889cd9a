# apps/cli/common.py
"""
Shared argparse wiring for the game configuration.

Start from a preset, then let explicit flags override single fields:
  --preset hard --max-rounds 12
"""

from __future__ import annotations

import argparse

from codebreaker.engine import PRESETS, Configuration, preset


def add_config_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--preset", default="default", choices=sorted(PRESETS.keys()),
                    help="difficulty preset to start from")
    ap.add_argument("--colors", type=int, help="alphabet size (overrides preset)")
    ap.add_argument("--length", type=int, help="code length (overrides preset)")
    ap.add_argument("--repetition", dest="allow_repetition", action="store_true", default=None,
                    help="allow repeated symbols (overrides preset)")
    ap.add_argument("--no-repetition", dest="allow_repetition", action="store_false",
                    help="forbid repeated symbols (overrides preset)")
    ap.add_argument("--max-rounds", type=int, help="round budget (overrides preset)")


def config_from_args(args: argparse.Namespace) -> Configuration:
    overrides = {
        k: v for k, v in (
            ("colors", args.colors),
            ("length", args.length),
            ("allow_repetition", args.allow_repetition),
            ("max_rounds", args.max_rounds),
        ) if v is not None
    }
    return preset(args.preset, **overrides)
