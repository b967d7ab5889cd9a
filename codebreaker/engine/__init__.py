from .errors import CodebreakerError, InvalidConfiguration, EmptyPool, Contradiction
from .config import Configuration, PRESETS, preset, check_budget
from .scoring import Score, score, bucket, n_buckets, is_solved
from .enumeration import enumerate_codes
from .table import ScoreTable, score_table
from .pool import CandidatePool
from .constraints import filter_pool, filter_candidates
from .validation import validate_code, parse_code

__all__ = [
    "CodebreakerError", "InvalidConfiguration", "EmptyPool", "Contradiction",
    "Configuration", "PRESETS", "preset", "check_budget",
    "Score", "score", "bucket", "n_buckets", "is_solved",
    "enumerate_codes", "ScoreTable", "score_table", "CandidatePool",
    "filter_pool", "filter_candidates", "validate_code", "parse_code",
]
