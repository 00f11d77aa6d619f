# plusat

plusat is a compact DPLL solver for Boolean satisfiability problems written in
DIMACS CNF format. The search loop calls out to four strategies: decide,
conflict check, conflict resolution and preprocessing. These are grouped into
named hook sets, and you can register your own.

## Installation

```
pip install .
```

## Command line

```
plusat problem.cnf
```

The output uses the usual SAT-competition line prefixes:

```
c LIB_PLUSAT environment variable not set
c Setting value implement
c FILE: problem.cnf
v 1 -2 3 0
s SATISFIABLE
c Time: 0.002s (Parser:0.001s Solving:0.002s)
```

Exit status:

- 10: satisfiable
- 20: unsatisfiable
- 5: no file was given
- 1: the file could not be read or parsed, or the hook set name is unknown

The `LIB_PLUSAT` environment variable names the registered hook set to use. If
it is unset, `implement` is used.

## Library use

```python
from plusat.parser import parse_cnf
from plusat.hooks import load_hooks
from plusat.cli import solve

formula = parse_cnf("""
c a tiny example
p cnf 3 2
1 -2 0
2 3 0
""")

solution = solve(formula, load_hooks("implement"))
print(solution.satisfiable)    # True
print(solution.model_line())   # "v ... 0"
```

Modules:

- `plusat.formula`: `Formula` and `Clause`, plus `literal_position`. `Formula.add_clause` rejects literals outside `1..num_vars`. `Formula.clauses` and `Formula.clauses_with` both return clauses newest first.
- `plusat.parser`: `parse_cnf` reads text, `read_cnf` reads a stream and `load_cnf` reads a path. Each raises `CNFParseError` if the problem line is missing or malformed, if a clause comes before the problem line, if a clause is not ended by 0, or if a literal is out of range.
- `plusat.dpll`: `Trail` holds the stack of decisions and the variable values. `dpll(formula, trail, hooks)` runs the search and returns a `Solution`. `LitState`, `DecideState` and `SolverResult` are enums.
- `plusat.strategies`: the built-in strategies are `decide_first_unassigned`, `check_conflict`, `resolve_chronological` (chronological backtracking), `no_preprocessing`, and `jeroslow_weight`, `jeroslow_scores` and `jeroslow_preprocessing` for Jeroslow-Wang scoring.
- `plusat.hooks`: `Hooks`, `register_hooks`, `available_hooks` and `load_hooks`. `load_hooks` raises `HookLoadError` for unknown names. The built-in sets are `implement`, `simple` and `clause_learning`.
- `plusat.learning`: `DependencyGraph` records which variables each inference came from. `trace` walks those dependencies depth first.
- `plusat.cli`: `solve(formula, hooks)` and the `main` command.

## Custom strategies

Build a `Hooks` from your own callables and register it under a name:

```python
from plusat.hooks import Hooks, register_hooks

register_hooks("mine", Hooks(
    decide=...,            # (formula, trail) -> DecideState
    bcp=...,               # (formula, trail, decision) -> bool, False on conflict
    resolve_conflict=...,  # (trail) -> level to backtrack to, 0 for unsatisfiable
    preprocessing=...,     # (formula, trail) -> anything
))
```

Pass that name to `load_hooks`. The command line only sees hook sets that are
registered when `plusat.hooks` is imported.

## Limitations

- Hook sets are looked up by name in an in-process registry. Strategies cannot be loaded from external files.
- The search does no unit propagation. The conflict check only tests whether some clause has every literal false.
- In the `clause_learning` set, preprocessing computes Jeroslow-Wang scores, but the search ignores them. Decisions always go to the first unassigned variable found in the clauses.
- `DependencyGraph` is a separate tool. The solver does not build it, and it does not learn clauses.