"""Decision, propagation and conflict strategies for the DPLL search."""

from __future__ import annotations

from dataclasses import dataclass

from plusat.dpll import DecideState, Decision, LitState, Trail
from plusat.formula import Formula


def no_preprocessing(formula: Formula, trail: Trail) -> list[VariableScore]:
    """Give every variable a neutral score, leaving the formula and trail untouched."""
    return [
        VariableScore(var, 0.0, 0.0) for var in range(1, formula.num_vars + 1)
    ]


def decide_first_unassigned(formula: Formula, trail: Trail) -> DecideState:
    """Decide the first unassigned variable found in the clauses, as false."""
    for clause in formula.clauses:
        for literal in clause:
            var = abs(literal) - 1
            if trail.var_state(var) is LitState.UNK:
                trail.insert(var, LitState.FALSE)
                return DecideState.FOUND_VAR
    return DecideState.ALL_ASSIGNED


def check_conflict(formula: Formula, trail: Trail, decision: Decision) -> bool:
    """Return False if a clause touched by ``decision`` has every literal false."""
    for clause in formula.clauses_with(decision.false_literal):
        if all(trail.lit_state(literal) is LitState.FALSE for literal in clause):
            return False
    return True


def resolve_chronological(trail: Trail) -> int:
    """Return the newest level whose decision has not been flipped, or 0."""
    for level in range(trail.level, 0, -1):
        if not trail.decisions[level - 1].flipped:
            return level
    return 0


def jeroslow_weight(size: int) -> float:
    """Weight a clause of ``size`` literals contributes to each of its literals."""
    if size < 1:
        raise ValueError(f"clause size must be positive: {size}")
    return 2.0 ** -size


@dataclass(frozen=True)
class VariableScore:
    """Jeroslow-Wang counts of one variable (1-based)."""

    variable: int
    positive: float
    negative: float

    @property
    def score(self) -> float:
        return max(self.positive, self.negative)


def jeroslow_scores(formula: Formula) -> list[VariableScore]:
    """Score every variable by Jeroslow-Wang, lowest score first."""
    positive = [0.0] * (formula.num_vars + 1)
    negative = [0.0] * (formula.num_vars + 1)
    for clause in formula.clauses:
        weight = jeroslow_weight(len(clause))
        for literal in clause:
            if literal < 0:
                negative[-literal] += weight
            else:
                positive[literal] += weight
    scores = [
        VariableScore(var, positive[var], negative[var])
        for var in range(1, formula.num_vars + 1)
    ]
    return sorted(scores, key=lambda item: item.score)


def jeroslow_preprocessing(formula: Formula, trail: Trail) -> list[VariableScore]:
    """Compute Jeroslow-Wang scores before the search starts."""
    return jeroslow_scores(formula)