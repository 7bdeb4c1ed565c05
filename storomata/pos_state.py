"""States of a tree-stack automaton built from a multiple context-free grammar.

Each state names a rule together with a component and a position inside it;
two further states mark the bottom of the tree stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Tuple, Union

Path = Tuple[int, ...]


class _PosState:
    """Total order shared by all states: Designated < Initial < Position."""

    _rank: ClassVar[int]

    def _key(self) -> tuple:
        return (self._rank,)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _PosState):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _PosState):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _PosState):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _PosState):
            return NotImplemented
        return self._key() >= other._key()


@dataclass(frozen=True)
class Designated(_PosState):
    """The designated state the automaton ends in."""

    _rank: ClassVar[int] = 0

    def map(self, f: Callable[[Any], Any]) -> "Designated":
        return self

    def __str__(self) -> str:
        return "@"


@dataclass(frozen=True)
class Initial(_PosState):
    """The state the automaton starts in."""

    _rank: ClassVar[int] = 1

    def map(self, f: Callable[[Any], Any]) -> "Initial":
        return self

    def __str__(self) -> str:
        return "I"


@dataclass(frozen=True)
class Position(_PosState):
    """A position inside a component of a rule."""

    _rank: ClassVar[int] = 2

    value: Any
    component: int
    position: int

    def _key(self) -> tuple:
        return (self._rank, self.value, self.component, self.position)

    def map(self, f: Callable[[Any], Any]) -> "Position":
        """Apply `f` to the rule, keeping component and position."""
        return Position(f(self.value), self.component, self.position)

    def __str__(self) -> str:
        return f"({self.value}, {self.component}, {self.position})"


PosState = Union[Designated, Initial, Position]


def map_pos_state(state: PosState, f: Callable[[Any], Any]) -> PosState:
    """Apply `f` to the rule of a state, if it carries one."""
    return state.map(f)


def to_abstract_syntax_tree(tree: Dict[Path, PosState], pointer: Path = ()) -> Dict[Path, Any]:
    """Extract the derivation below the root's first child of a tree-stack tree.

    Raises ValueError if a node of that subtree is not a `Position`.
    """
    syntax_tree: Dict[Path, Any] = {}
    for address, state in tree.items():
        if not address or address[0] != 0:
            continue
        if not isinstance(state, Position):
            raise ValueError(
                "The given tree map contains 'designated' or 'initial' nodes "
                "that are not the root!"
            )
        syntax_tree[address[1:]] = state.value
    return dict(sorted(syntax_tree.items()))