"""Reverse implication graph recording which variables led to each inference."""

from __future__ import annotations

from typing import Iterable, Iterator


class DependencyGraph:
    """For each variable (1-based), the variables its value was inferred from."""

    def __init__(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError(f"number of variables must not be negative: {num_vars}")
        self._deps: list[list[int]] = [[] for _ in range(num_vars)]

    def _index(self, var: int) -> int:
        if not 1 <= var <= len(self._deps):
            raise IndexError(f"variable {var} outside 1..{len(self._deps)}")
        return var - 1

    def decide(self, var: int) -> None:
        """Record a decided variable; decisions have no dependencies."""
        self.infer(var, ())

    def infer(self, var: int, references: Iterable[int]) -> None:
        """Record that ``var`` was inferred from ``references``."""
        index = self._index(var)
        refs = list(references)
        for ref in refs:
            self._index(ref)
        self._deps[index].extend(refs)

    def dependencies(self, var: int) -> tuple[int, ...]:
        """Variables ``var`` depends on, most recently recorded first."""
        return tuple(reversed(self._deps[self._index(var)]))

    def trace(self, var: int) -> Iterator[int]:
        """Walk depth first from ``var`` through its dependencies.

        Variables reached along several paths are yielded each time.
        """
        self._index(var)
        stack = [var]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(self.dependencies(current))