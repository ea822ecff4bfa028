"""
quickpass.state

Explicit application state for the generator widget.

The UI never mutates state directly: it dispatches an action and replaces its
state with ``reduce(state, action)``. Generation is the only transition that
draws randomness, via the injectable ``rng``.
"""

import random
from dataclasses import dataclass, replace
from typing import Optional, Union

from .config import Configuration, clamp_length
from .generator import generate
from .strength import StrengthResult, score_strength


@dataclass(frozen=True)
class AppState:
    config: Configuration = Configuration()
    password: str = ""
    copied: bool = False
    show_password: bool = False

    @property
    def strength(self) -> StrengthResult:
        c = self.config
        return score_strength(c.length, c.include_numbers, c.include_symbols)


# ---------------- actions ----------------

@dataclass(frozen=True)
class SetLength:
    length: int


@dataclass(frozen=True)
class ToggleNumbers:
    pass


@dataclass(frozen=True)
class ToggleSymbols:
    pass


@dataclass(frozen=True)
class Generate:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class ToggleVisibility:
    pass


@dataclass(frozen=True)
class MarkCopied:
    pass


@dataclass(frozen=True)
class ClearCopied:
    pass


Action = Union[
    SetLength, ToggleNumbers, ToggleSymbols, Generate, Reset,
    ToggleVisibility, MarkCopied, ClearCopied,
]


def reduce(state: AppState, action: Action, rng: Optional[random.Random] = None) -> AppState:
    """
    Return the state that follows ``action``. Changing the configuration does
    not regenerate; only Generate and Reset replace the password.
    """
    if isinstance(action, SetLength):
        return replace(state, config=replace(state.config, length=clamp_length(action.length)))
    if isinstance(action, ToggleNumbers):
        return replace(state, config=replace(state.config, include_numbers=not state.config.include_numbers))
    if isinstance(action, ToggleSymbols):
        return replace(state, config=replace(state.config, include_symbols=not state.config.include_symbols))
    if isinstance(action, Generate):
        return replace(state, password=generate(state.config, rng))
    if isinstance(action, Reset):
        config = Configuration()
        return replace(state, config=config, password=generate(config, rng))
    if isinstance(action, ToggleVisibility):
        return replace(state, show_password=not state.show_password)
    if isinstance(action, MarkCopied):
        return replace(state, copied=True)
    if isinstance(action, ClearCopied):
        return replace(state, copied=False)
    raise TypeError(f"Unknown action: {action!r}")


def initial_state(config: Optional[Configuration] = None, rng: Optional[random.Random] = None) -> AppState:
    """Startup step: the default state with a first password already generated."""
    return reduce(AppState(config=config or Configuration()), Generate(), rng)
