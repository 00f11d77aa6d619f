"""Reading formulas in the DIMACS CNF format."""

from __future__ import annotations

import os
import re
from typing import TextIO

from plusat.formula import Formula

_SPACE = re.compile(r"\s*")
_INT = re.compile(r"\s*([+-]?\d+)")
_HEADER = re.compile(r"\s*cnf\s*([+-]?\d+)\s*([+-]?\d+)")


class CNFParseError(ValueError):
    """The input is not a usable DIMACS CNF document."""


def _read_clause(text: str, pos: int) -> tuple[list[int], int]:
    """Read integers from ``pos`` up to a terminating 0 or a non-integer."""
    literals: list[int] = []
    while True:
        match = _INT.match(text, pos)
        if match is None:
            if _SPACE.match(text, pos).end() >= len(text):
                raise CNFParseError("clause not terminated by 0")
            return literals, pos
        pos = match.end()
        value = int(match.group(1))
        if value == 0:
            return literals, pos
        literals.append(value)


def parse_cnf(text: str) -> Formula:
    """Build a formula from DIMACS CNF ``text``.

    Lines starting with ``c`` are comments; ``p cnf V C`` declares the
    variable count; clauses are whitespace-separated literals ended by 0
    and may span lines. Any other character is skipped.
    """
    formula: Formula | None = None
    pos = 0
    end = len(text)
    while True:
        pos = _SPACE.match(text, pos).end()
        if pos >= end:
            break
        char = text[pos]
        pos += 1
        if char == "c":
            newline = text.find("\n", pos)
            pos = end if newline < 0 else newline + 1
        elif char == "p":
            header = _HEADER.match(text, pos)
            if header is None:
                raise CNFParseError("malformed problem line")
            num_vars = int(header.group(1))
            if num_vars < 0:
                raise CNFParseError(f"negative variable count: {num_vars}")
            formula = Formula(num_vars)
            pos = header.end()
        elif (char == "-" or "1" <= char <= "9") and _INT.match(text, pos - 1):
            literals, pos = _read_clause(text, pos - 1)
            if formula is None:
                raise CNFParseError("clause before problem line")
            try:
                formula.add_clause(literals)
            except ValueError as exc:
                raise CNFParseError(str(exc)) from exc
    if formula is None:
        raise CNFParseError("missing problem line")
    return formula


def read_cnf(stream: TextIO) -> Formula:
    """Build a formula from an open text stream."""
    return parse_cnf(stream.read())


def load_cnf(path: str | os.PathLike[str]) -> Formula:
    """Build a formula from the file at ``path``."""
    with open(path, encoding="utf-8") as stream:
        return read_cnf(stream)