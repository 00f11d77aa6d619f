"""Named sets of solver strategies that the search can be run with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from plusat import strategies

DEFAULT_HOOKS = "implement"


class HookLoadError(LookupError):
    """No strategy set is registered under the requested name."""


@dataclass(frozen=True)
class Hooks:
    """The four strategies the DPLL loop calls into."""

    decide: Callable[..., Any]
    bcp: Callable[..., bool]
    resolve_conflict: Callable[..., int]
    preprocessing: Callable[..., Any]


_BASIC = Hooks(
    decide=strategies.decide_first_unassigned,
    bcp=strategies.check_conflict,
    resolve_conflict=strategies.resolve_chronological,
    preprocessing=strategies.no_preprocessing,
)

_REGISTRY: dict[str, Hooks] = {
    "implement": _BASIC,
    "simple": _BASIC,
    "clause_learning": Hooks(
        decide=strategies.decide_first_unassigned,
        bcp=strategies.check_conflict,
        resolve_conflict=strategies.resolve_chronological,
        preprocessing=strategies.jeroslow_preprocessing,
    ),
}


def register_hooks(name: str, hooks: Hooks) -> None:
    """Make ``hooks`` available under ``name``, replacing any earlier entry."""
    if not name:
        raise ValueError("hook set name must not be empty")
    if not isinstance(hooks, Hooks):
        raise TypeError(f"expected Hooks, got {type(hooks).__name__}")
    _REGISTRY[name] = hooks


def available_hooks() -> list[str]:
    """Names of all registered strategy sets, sorted."""
    return sorted(_REGISTRY)


def load_hooks(name: str) -> Hooks:
    """Return the strategy set registered under ``name``."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise HookLoadError(f"no hooks named {name!r}") from None