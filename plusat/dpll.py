"""The decision trail and the DPLL search loop driven by pluggable hooks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from plusat.formula import Formula


class LitState(IntEnum):
    """Value of a variable or literal under the current assignment."""

    FALSE = 0
    TRUE = 1
    UNK = 2


class DecideState(Enum):
    """What a decide hook reports."""

    ALL_TRIED = 0
    FOUND_VAR = 1
    ALL_ASSIGNED = 2


class SolverResult(Enum):
    UNSAT = 0
    SAT = 1


@dataclass
class Decision:
    """A decided variable (0-based) with its value and whether it was flipped."""

    var: int
    value: LitState
    flipped: bool = False

    @property
    def false_literal(self) -> int:
        """The literal over ``var`` that this decision makes false."""
        return self.var + 1 if self.value == LitState.FALSE else -self.var - 1


class Trail:
    """Stack of decision levels plus the current value of every variable.

    Variables are addressed 0-based here; literal ``n`` or ``-n`` refers to
    variable ``n - 1``.
    """

    def __init__(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError(f"number of variables must not be negative: {num_vars}")
        self._states = [LitState.UNK] * num_vars
        self._levels: list[Decision] = []

    def _check_var(self, var: int) -> None:
        if not 0 <= var < len(self._states):
            raise IndexError(f"variable {var} outside 0..{len(self._states) - 1}")

    @property
    def num_vars(self) -> int:
        return len(self._states)

    @property
    def level(self) -> int:
        """Number of decisions on the trail."""
        return len(self._levels)

    @property
    def decisions(self) -> tuple[Decision, ...]:
        """The decisions, oldest first."""
        return tuple(self._levels)

    def insert(self, var: int, value: LitState) -> Decision:
        """Open a new level deciding ``var`` to ``value``."""
        self._check_var(var)
        value = LitState(value)
        if value is LitState.UNK:
            raise ValueError("a decision needs a definite value")
        decision = Decision(var, value)
        self._states[var] = value
        self._levels.append(decision)
        return decision

    def last_decision(self) -> Decision | None:
        return self._levels[-1] if self._levels else None

    def remove_last(self) -> Decision:
        """Drop the newest level and unassign its variable."""
        if not self._levels:
            raise IndexError("no decision to remove")
        decision = self._levels.pop()
        self._states[decision.var] = LitState.UNK
        return decision

    def lit_state(self, literal: int) -> LitState:
        """Value of ``literal`` (1-based, signed) under the assignment."""
        if literal == 0:
            raise ValueError("0 is not a literal")
        state = self.var_state(abs(literal) - 1)
        if literal < 0 and state is not LitState.UNK:
            return LitState.TRUE if state is LitState.FALSE else LitState.FALSE
        return state

    def var_state(self, var: int) -> LitState:
        self._check_var(var)
        return self._states[var]

    def set_var_state(self, var: int, state: LitState) -> None:
        self._check_var(var)
        self._states[var] = LitState(state)

    def backtrack_to(self, level: int) -> None:
        """Undo levels above ``level`` and flip the decision at ``level``."""
        if not 1 <= level <= len(self._levels):
            raise ValueError(f"cannot backtrack to level {level}")
        while len(self._levels) > level:
            self.remove_last()
        top = self._levels[-1]
        top.value = LitState.TRUE if top.value is LitState.FALSE else LitState.FALSE
        self._states[top.var] = top.value
        top.flipped = True

    def model(self) -> list[int]:
        """Signed 1-based literals for every assigned variable."""
        return [
            var + 1 if state is LitState.TRUE else -(var + 1)
            for var, state in enumerate(self._states)
            if state is not LitState.UNK
        ]


@dataclass(frozen=True)
class Solution:
    result: SolverResult
    model: tuple[int, ...] = ()

    @property
    def satisfiable(self) -> bool:
        return self.result is SolverResult.SAT

    def model_line(self) -> str:
        """The model as a DIMACS ``v`` line ending in 0."""
        return " ".join(["v", *map(str, self.model), "0"])


def dpll(formula: Formula, trail: Trail, hooks: Any) -> Solution:
    """Search for a model of ``formula``.

    ``hooks`` supplies ``decide(formula, trail)`` returning a
    :class:`DecideState`, ``bcp(formula, trail, decision)`` returning False
    on conflict, and ``resolve_conflict(trail)`` returning the level to
    backtrack to, 0 meaning the formula is unsatisfiable.
    """
    while True:
        state = hooks.decide(formula, trail)
        while (last := trail.last_decision()) is not None and not hooks.bcp(
            formula, trail, last
        ):
            go_back = hooks.resolve_conflict(trail)
            if go_back == 0:
                return Solution(SolverResult.UNSAT)
            trail.backtrack_to(go_back)
        if state is DecideState.ALL_ASSIGNED:
            return Solution(SolverResult.SAT, tuple(trail.model()))