"""Command line entry point: solve a DIMACS CNF file."""

from __future__ import annotations

import os
import sys
import time
from typing import Sequence

from plusat.dpll import Solution, Trail, dpll
from plusat.formula import Formula
from plusat.hooks import DEFAULT_HOOKS, HookLoadError, Hooks, load_hooks
from plusat.parser import CNFParseError, load_cnf

EXIT_NO_FILE = 5
EXIT_SAT = 10
EXIT_UNSAT = 20
HOOKS_ENV = "LIB_PLUSAT"


def solve(formula: Formula, hooks: Hooks) -> Solution:
    """Run preprocessing and the DPLL search on ``formula``."""
    trail = Trail(formula.num_vars)
    hooks.preprocessing(formula, trail)
    return dpll(formula, trail, hooks)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the CNF file named by the first argument; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    start = time.process_time()

    if not args:
        print("c Don't have a file")
        return EXIT_NO_FILE
    path = args[0]

    hooks_name = os.environ.get(HOOKS_ENV)
    if hooks_name is None:
        print(f"c {HOOKS_ENV} environment variable not set")
        hooks_name = DEFAULT_HOOKS
        print(f"c Setting value {hooks_name}")

    print(f"c FILE: {path}")

    try:
        hooks = load_hooks(hooks_name)
    except HookLoadError as exc:
        print(f"c {exc}")
        return 1

    try:
        formula = load_cnf(path)
    except (OSError, CNFParseError) as exc:
        print(f"c {exc}")
        return 1
    parse_time = time.process_time() - start

    solution = solve(formula, hooks)
    solve_time = time.process_time() - start

    if solution.satisfiable:
        print(solution.model_line())
        print("s SATISFIABLE")
        code = EXIT_SAT
    else:
        print("s UNSATISFIABLE")
        code = EXIT_UNSAT

    total = time.process_time() - start
    print(f"c Time: {total:.3f}s (Parser:{parse_time:.3f}s Solving:{solve_time:.3f}s)")
    return code


if __name__ == "__main__":
    sys.exit(main())