"""CNF formulas: clauses plus an index of the clauses each literal occurs in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


def literal_position(literal: int) -> int:
    """Return the slot of ``literal`` in a literal-indexed table.

    Positive literal ``n`` goes to ``2n - 2`` and negative literal ``-n``
    to ``2n - 1``, so both polarities of a variable sit side by side.
    """
    if literal == 0:
        raise ValueError("0 is not a literal")
    return 2 * literal - 2 if literal > 0 else -2 * literal - 1


@dataclass(frozen=True)
class Clause:
    """A disjunction of literals; variable ``n`` appears as ``n`` or ``-n``."""

    literals: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.literals)

    def __iter__(self) -> Iterator[int]:
        return iter(self.literals)


class Formula:
    """A conjunction of clauses over variables ``1..num_vars``.

    Clauses are reported newest first, both by :attr:`clauses` and by
    :meth:`clauses_with`, which is the order the solver visits them in.
    """

    def __init__(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError(f"number of variables must not be negative: {num_vars}")
        self.num_vars = num_vars
        self._clauses: list[Clause] = []
        self._by_literal: list[list[Clause]] = [[] for _ in range(2 * num_vars)]

    def _check_literal(self, literal: int) -> None:
        if literal == 0 or abs(literal) > self.num_vars:
            raise ValueError(
                f"literal {literal} outside variables 1..{self.num_vars}"
            )

    def add_clause(self, literals: Iterable[int]) -> Clause:
        """Add a clause made of ``literals`` and return it."""
        clause = Clause(tuple(int(lit) for lit in literals))
        for literal in clause:
            self._check_literal(literal)
        self._clauses.append(clause)
        for literal in clause:
            self._by_literal[literal_position(literal)].append(clause)
        return clause

    def clauses_with(self, literal: int) -> tuple[Clause, ...]:
        """Return the clauses containing ``literal``, newest first."""
        self._check_literal(literal)
        return tuple(reversed(self._by_literal[literal_position(literal)]))

    @property
    def clauses(self) -> tuple[Clause, ...]:
        """All clauses, newest first."""
        return tuple(reversed(self._clauses))

    @property
    def num_clauses(self) -> int:
        """Number of clauses added so far."""
        return len(self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def __repr__(self) -> str:
        return f"Formula(num_vars={self.num_vars}, num_clauses={self.num_clauses})"