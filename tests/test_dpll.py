from types import SimpleNamespace

import pytest

from plusat.dpll import (
    DecideState,
    LitState,
    Solution,
    SolverResult,
    Trail,
    dpll,
)
from plusat.formula import Formula


def _decide(formula, trail):
    for clause in formula.clauses:
        for literal in clause:
            if trail.var_state(abs(literal) - 1) is LitState.UNK:
                trail.insert(abs(literal) - 1, LitState.FALSE)
                return DecideState.FOUND_VAR
    return DecideState.ALL_ASSIGNED


def _bcp(formula, trail, decision):
    return all(
        any(trail.lit_state(lit) is not LitState.FALSE for lit in clause)
        for clause in formula.clauses_with(decision.false_literal)
    )


def _resolve(trail):
    unflipped = [i for i, d in enumerate(trail.decisions) if not d.flipped]
    return unflipped[-1] + 1 if unflipped else 0


HOOKS = SimpleNamespace(decide=_decide, bcp=_bcp, resolve_conflict=_resolve)


def _formula(num_vars, clauses):
    formula = Formula(num_vars)
    for clause in clauses:
        formula.add_clause(clause)
    return formula


def _solve(num_vars, clauses):
    formula = _formula(num_vars, clauses)
    trail = Trail(num_vars)
    return formula, dpll(formula, trail, HOOKS)


def test_insert_and_last_decision():
    trail = Trail(3)
    assert trail.last_decision() is None
    trail.insert(1, LitState.TRUE)
    last = trail.last_decision()
    assert (last.var, last.value, last.flipped) == (1, LitState.TRUE, False)
    assert trail.level == 1
    assert trail.var_state(1) is LitState.TRUE
    assert trail.var_state(0) is LitState.UNK


def test_lit_state_follows_sign():
    trail = Trail(2)
    trail.insert(0, LitState.FALSE)
    assert trail.lit_state(1) is LitState.FALSE
    assert trail.lit_state(-1) is LitState.TRUE
    assert trail.lit_state(2) is LitState.UNK
    assert trail.lit_state(-2) is LitState.UNK


def test_remove_last_unassigns():
    trail = Trail(2)
    trail.insert(0, LitState.TRUE)
    trail.insert(1, LitState.FALSE)
    removed = trail.remove_last()
    assert removed.var == 1
    assert trail.var_state(1) is LitState.UNK
    assert trail.level == 1


def test_remove_last_on_empty_trail():
    with pytest.raises(IndexError):
        Trail(1).remove_last()


def test_backtrack_pops_and_flips():
    trail = Trail(3)
    trail.insert(0, LitState.FALSE)
    trail.insert(1, LitState.FALSE)
    trail.insert(2, LitState.TRUE)
    trail.backtrack_to(1)
    assert trail.level == 1
    top = trail.last_decision()
    assert (top.var, top.value, top.flipped) == (0, LitState.TRUE, True)
    assert trail.var_state(0) is LitState.TRUE
    assert trail.var_state(1) is LitState.UNK
    assert trail.var_state(2) is LitState.UNK


@pytest.mark.parametrize("level", [0, 3])
def test_backtrack_out_of_range(level):
    trail = Trail(2)
    trail.insert(0, LitState.TRUE)
    trail.insert(1, LitState.TRUE)
    with pytest.raises(ValueError):
        trail.backtrack_to(level)


def test_insert_rejects_unknown_value_and_bad_var():
    trail = Trail(2)
    with pytest.raises(ValueError):
        trail.insert(0, LitState.UNK)
    with pytest.raises(IndexError):
        trail.insert(2, LitState.TRUE)
    with pytest.raises(IndexError):
        trail.var_state(-1)


def test_model_lists_assigned_variables():
    trail = Trail(3)
    trail.insert(0, LitState.TRUE)
    trail.set_var_state(2, LitState.FALSE)
    assert trail.model() == [1, -3]


def test_model_line_format():
    assert Solution(SolverResult.SAT, (1, -2)).model_line() == "v 1 -2 0"
    assert Solution(SolverResult.UNSAT).model_line() == "v 0"


def test_false_literal_of_decision():
    trail = Trail(4)
    assert trail.insert(3, LitState.FALSE).false_literal == 4
    assert trail.insert(2, LitState.TRUE).false_literal == -3


def test_dpll_finds_model():
    clauses = [[1, 2, -3], [-1, 3], [-2, -3], [2, 3]]
    formula, solution = _solve(3, clauses)
    assert solution.result is SolverResult.SAT
    assert solution.satisfiable
    assigned = set(solution.model)
    for clause in formula.clauses:
        assert any(lit in assigned for lit in clause)


def test_dpll_contradictory_units():
    _, solution = _solve(1, [[1], [-1]])
    assert solution.result is SolverResult.UNSAT
    assert solution.model == ()


def test_dpll_all_four_binary_clauses_unsat():
    _, solution = _solve(2, [[1, 2], [1, -2], [-1, 2], [-1, -2]])
    assert solution.result is SolverResult.UNSAT


def test_dpll_empty_formula_is_sat():
    _, solution = _solve(2, [])
    assert solution.result is SolverResult.SAT
    assert solution.model == ()
    assert solution.model_line() == "v 0"