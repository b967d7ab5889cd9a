import pytest
from codebreaker.engine import CandidatePool, Configuration, EmptyPool, Score, filter_pool
from codebreaker.harness import SOLVED, next_guess, run_batch, summarize
from codebreaker.solvers import create_solver, get_solver_ids
from codebreaker.solvers.minimax import minimax_choice, select_minimax, worst_case


# --- golden first guesses (fixed enumeration order) ---
def test_first_guess_no_repetition():
    pool = CandidatePool(Configuration())
    assert len(pool) == 360
    guess, worst = minimax_choice(pool)
    assert guess == "RGBY"
    assert worst == 88
    assert next_guess(pool) == "RGBY"

def test_first_guess_with_repetition():
    pool = CandidatePool(Configuration(allow_repetition=True))
    assert minimax_choice(pool) == ("RRGG", 256)

def test_worst_case_matches_table_path():
    cfg = Configuration()
    pool = CandidatePool(cfg)
    assert worst_case("RGBY", list(pool), cfg.length) == 88

def test_select_is_reproducible():
    a = CandidatePool(Configuration())
    b = CandidatePool(Configuration())
    for p in (a, b):
        filter_pool(p, "RGBY", Score(1, 2))
    assert select_minimax(a) == select_minimax(b)

# --- table, oracle and threaded oracle paths agree ---
@pytest.mark.parametrize("history", [
    [],
    [("RGBY", Score(0, 3))],
    [("RGBY", Score(1, 2)), ("RGOB", Score(1, 2))],
])
def test_evaluation_paths_agree(history):
    cfg = Configuration(colors=5)
    pool = CandidatePool(cfg)
    for g, s in history:
        filter_pool(pool, g, s)
    table = minimax_choice(pool)
    assert minimax_choice(pool, use_table=False) == table
    assert minimax_choice(pool, use_table=False, workers=4) == table

def test_selector_does_not_touch_pool():
    pool = CandidatePool(Configuration(colors=5))
    before = pool.active.copy()
    select_minimax(pool)
    assert (pool.active == before).all()

def test_empty_pool_raises():
    pool = CandidatePool(Configuration(colors=4))
    pool.active[:] = False
    with pytest.raises(EmptyPool):
        select_minimax(pool)
    with pytest.raises(EmptyPool):
        select_minimax(pool, use_table=False)

def test_single_candidate_is_chosen():
    pool = CandidatePool(Configuration(colors=4))
    pool.active[:] = False
    pool.active[5] = True
    assert minimax_choice(pool) == (pool.codes[5], 1)

def test_solver_records_worst_case_of_its_guess():
    cfg = Configuration()
    solver = create_solver("minimax")
    solver.reset(config=cfg)
    assert solver.last_worst is None
    state = {"round": 1, "pool": CandidatePool(cfg), "history": [], "config": cfg}
    assert solver.next_guess(state) == "RGBY"
    assert solver.last_worst == 88

# --- registry ---
def test_registry():
    assert {"minimax", "random_consistent"} <= set(get_solver_ids())
    with pytest.raises(ValueError):
        create_solver("nope")

# --- exhaustive worst-case bound: every secret, default configuration ---
def test_minimax_solves_every_secret_within_six():
    cfg = Configuration()
    solver = create_solver("minimax")
    results = run_batch(solver, config=cfg, seed=1)
    assert len(results) == 360
    assert all(r["status"] == SOLVED for r in results)
    assert max(r["guesses"] for r in results) <= 6
    # the first guess is the same for every secret
    assert {r["history"][0][0] for r in results} == {"RGBY"}

    s = summarize(results)
    assert s["solved"] == 360 and s["max_guesses"] <= 6
    assert sum(s["distribution"]) == 360
