"""A DPLL SAT solver for DIMACS CNF problems with named, pluggable strategy sets."""

__version__ = "0.1.0"
__all__ = ["formula", "parser", "dpll", "strategies", "hooks", "learning", "cli"]