import pytest
from codebreaker.engine import CandidatePool, Configuration, EmptyPool, Score
from codebreaker.harness import CONTRADICTION, SOLVED, run_case
from codebreaker.solvers import create_solver


def test_random_consistent_smoke():
    # 24 candidates and 24 rounds: every wrong guess removes at least itself.
    cfg = Configuration(colors=4, length=3, max_rounds=24)
    solver = create_solver("random_consistent")
    r = run_case(solver, "BYR", config=cfg, seed=42)
    assert r["status"] == SOLVED


def test_random_consistent_is_seeded():
    cfg = Configuration(colors=5)
    a = run_case(create_solver("random_consistent"), "OYBR", config=cfg, seed=7)
    b = run_case(create_solver("random_consistent"), "OYBR", config=cfg, seed=7)
    assert a["history"] == b["history"]


def test_random_consistent_empty_pool_raises():
    cfg = Configuration(colors=4)
    solver = create_solver("random_consistent")
    solver.reset(config=cfg, seed=1)
    pool = CandidatePool(cfg)
    pool.active[:] = False
    with pytest.raises(EmptyPool):
        solver.next_guess({"round": 1, "pool": pool, "history": [], "config": cfg})


def test_random_consistent_contradiction():
    # Six colors, no repetition: any two codes share at least two colors,
    # so (0, 0) empties the pool whatever the first guess was.
    r = run_case(create_solver("random_consistent"), config=Configuration(),
                 oracle=lambda g: Score(0, 0), seed=3)
    assert r["status"] == CONTRADICTION
    assert r["success"] is False
    assert r["guesses"] == 1
