"""Symbols of a pushdown built from a context-free grammar.

Besides the bottom markers `Designated` and `Initial`, a pushdown holds
nonterminals (`Nt`) and terminals (`T`).  The order of all symbols is
Designated < Initial < Nt < T.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Union

from storomata.pos_state import Designated, Initial, _PosState


@dataclass(frozen=True)
class Nt(_PosState):
    """A nonterminal on the pushdown."""

    _rank: ClassVar[int] = 3

    value: Any

    def _key(self) -> tuple:
        return (self._rank, self.value)

    def map(self, f: Callable[[Any], Any]) -> "Nt":
        """Apply `f` to the nonterminal."""
        return Nt(f(self.value))

    def __str__(self) -> str:
        return f"({self.value})"


@dataclass(frozen=True)
class T(_PosState):
    """A terminal on the pushdown."""

    _rank: ClassVar[int] = 4

    value: Any

    def _key(self) -> tuple:
        return (self._rank, self.value)

    def map(self, f: Callable[[Any], Any]) -> "T":
        """Terminals are left unchanged."""
        return self

    def __str__(self) -> str:
        return f"({self.value})"


PushState = Union[Designated, Initial, Nt, T]


def map_push_state(state: PushState, f: Callable[[Any], Any]) -> PushState:
    """Apply `f` to the nonterminal of a state, if it carries one."""
    return state.map(f)