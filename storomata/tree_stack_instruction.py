"""Instructions that move through and rewrite a tree stack."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, List, Union

from storomata.tree_stack import TreeStack, TreeStackError

_INDEX = re.compile(r"\+?[0-9]+")


class _TreeStackInstruction:
    """Total order shared by all instructions: Up < Push < Down, then by fields."""

    _rank: ClassVar[int]

    def _key(self) -> tuple:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _TreeStackInstruction):
            return NotImplemented
        return (self._rank, self._key()) < (other._rank, other._key())

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _TreeStackInstruction):
            return NotImplemented
        return (self._rank, self._key()) <= (other._rank, other._key())

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _TreeStackInstruction):
            return NotImplemented
        return (self._rank, self._key()) > (other._rank, other._key())

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _TreeStackInstruction):
            return NotImplemented
        return (self._rank, self._key()) >= (other._rank, other._key())


@dataclass(frozen=True)
class Up(_TreeStackInstruction):
    """Move to the occupied child `n`, checking both values and rewriting the child."""

    _rank: ClassVar[int] = 0

    n: int
    current_val: Any
    old_val: Any
    new_val: Any

    def _key(self) -> tuple:
        return (self.n, self.current_val, self.old_val, self.new_val)

    def map(self, f: Callable[[Any], Any]) -> "Up":
        """Apply `f` to every value of the instruction."""
        return Up(self.n, f(self.current_val), f(self.old_val), f(self.new_val))

    def apply(self, tree_stack: TreeStack) -> List[TreeStack]:
        """The tree stacks that result from applying the instruction (none or one)."""
        if tree_stack.current_symbol() != self.current_val:
            return []
        try:
            child = tree_stack.up(self.n)
        except TreeStackError:
            return []
        if child.current_symbol() != self.old_val:
            return []
        return [child.set(self.new_val)]

    def __str__(self) -> str:
        return f"(Up {self.n} {self.current_val} {self.old_val} {self.new_val})"


@dataclass(frozen=True)
class Push(_TreeStackInstruction):
    """Write a value to the vacant child `n` and move there."""

    _rank: ClassVar[int] = 1

    n: int
    current_val: Any
    new_val: Any

    def _key(self) -> tuple:
        return (self.n, self.current_val, self.new_val)

    def map(self, f: Callable[[Any], Any]) -> "Push":
        """Apply `f` to every value of the instruction."""
        return Push(self.n, f(self.current_val), f(self.new_val))

    def apply(self, tree_stack: TreeStack) -> List[TreeStack]:
        """The tree stacks that result from applying the instruction (none or one)."""
        if tree_stack.current_symbol() != self.current_val:
            return []
        try:
            return [tree_stack.push(self.n, self.new_val)]
        except TreeStackError:
            return []

    def __str__(self) -> str:
        return f"(Push {self.n} {self.current_val} {self.new_val})"


@dataclass(frozen=True)
class Down(_TreeStackInstruction):
    """Move to the parent, checking both values and rewriting the parent."""

    _rank: ClassVar[int] = 2

    current_val: Any
    old_val: Any
    new_val: Any

    def _key(self) -> tuple:
        return (self.current_val, self.old_val, self.new_val)

    def map(self, f: Callable[[Any], Any]) -> "Down":
        """Apply `f` to every value of the instruction."""
        return Down(f(self.current_val), f(self.old_val), f(self.new_val))

    def apply(self, tree_stack: TreeStack) -> List[TreeStack]:
        """The tree stacks that result from applying the instruction (none or one)."""
        if tree_stack.current_symbol() != self.current_val:
            return []
        try:
            parent = tree_stack.down()
        except TreeStackError:
            return []
        if parent.current_symbol() != self.old_val:
            return []
        return [parent.set(self.new_val)]

    def __str__(self) -> str:
        return f"(Down {self.current_val} {self.old_val} {self.new_val})"


TreeStackInstruction = Union[Up, Push, Down]


def _parse_index(token: str) -> int:
    if not _INDEX.fullmatch(token):
        raise ValueError(f"invalid digit found in string: {token!r}")
    return int(token)


def _parse_label(token: str, parse_value: Callable[[str], Any]) -> Any:
    try:
        return parse_value(token)
    except (ValueError, TypeError, KeyError) as error:
        raise ValueError("Malformed node label.") from error


def parse_tree_stack_instruction(
    text: str, parse_value: Callable[[str], Any] = str
) -> TreeStackInstruction:
    """Parse `Up n cur old new`, `Push n cur new` or `Down cur old new`.

    Raises ValueError on malformed input.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("Malformed instruction.")
    kind, args = tokens[0], tokens[1:]
    if kind == "Up" and len(args) == 4:
        n = _parse_index(args[0])
        current, old, new = (_parse_label(t, parse_value) for t in args[1:])
        return Up(n, current, old, new)
    if kind == "Push" and len(args) == 3:
        n = _parse_index(args[0])
        current, new = (_parse_label(t, parse_value) for t in args[1:])
        return Push(n, current, new)
    if kind == "Down" and len(args) == 3:
        current, old, new = (_parse_label(t, parse_value) for t in args)
        return Down(current, old, new)
    raise ValueError("Malformed instruction.")