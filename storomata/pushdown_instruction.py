"""Instructions that rewrite the top of a pushdown."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, List, Tuple, Union

from storomata.pushdown import PushDown, PushDownError


def _quoted(values: Iterable[Any]) -> str:
    return ", ".join(f'"{value}"' for value in values)


class _PushDownInstruction:
    """Total order shared by all instructions: Replace < ReplaceK, then by fields."""

    _rank: ClassVar[int]

    def _key(self) -> tuple:
        raise NotImplementedError

    def _full_key(self) -> tuple:
        return (self._rank, self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _PushDownInstruction):
            return NotImplemented
        return self._full_key() < other._full_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _PushDownInstruction):
            return NotImplemented
        return self._full_key() <= other._full_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _PushDownInstruction):
            return NotImplemented
        return self._full_key() > other._full_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _PushDownInstruction):
            return NotImplemented
        return self._full_key() >= other._full_key()


@dataclass(frozen=True)
class Replace(_PushDownInstruction):
    """Pop `current_val` (listed top first) and push `new_val` (listed bottom first).

    >>> Replace((4, 3), (5, 6)).apply(PushDown([1, 2, 3, 4]))
    [PushDown([1, 2, 5, 6])]
    """

    _rank: ClassVar[int] = 0

    current_val: Tuple[Any, ...]
    new_val: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "current_val", tuple(self.current_val))
        object.__setattr__(self, "new_val", tuple(self.new_val))

    def _key(self) -> tuple:
        return (self.current_val, self.new_val)

    def map(self, f: Callable[[Any], Any]) -> "Replace":
        """Apply `f` to every symbol of the instruction."""
        return Replace(
            tuple(f(value) for value in self.current_val),
            tuple(f(value) for value in self.new_val),
        )

    def apply(self, pushdown: PushDown) -> List[PushDown]:
        """The pushdowns that result from applying the instruction (none or one)."""
        try:
            return [pushdown.replace(self.current_val, self.new_val)]
        except PushDownError:
            return []

    def __str__(self) -> str:
        return f"(Replace {_quoted(self.current_val)} // {_quoted(self.new_val)})"


@dataclass(frozen=True)
class ReplaceK(_PushDownInstruction):
    """A `Replace` on a pushdown whose height is kept at `limit`.

    A pushdown that grows beyond the limit loses the symbols just above its
    bottom; one that was at the limit and shrinks below it is refilled on top,
    non-deterministically, from `possible_values`.
    """

    _rank: ClassVar[int] = 1

    current_val: Tuple[Any, ...]
    new_val: Tuple[Any, ...]
    limit: int
    possible_values: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "current_val", tuple(self.current_val))
        object.__setattr__(self, "new_val", tuple(self.new_val))
        object.__setattr__(self, "possible_values", tuple(self.possible_values))

    def _key(self) -> tuple:
        return (self.current_val, self.new_val, self.limit, self.possible_values)

    def map(self, f: Callable[[Any], Any]) -> "ReplaceK":
        """Apply `f` to every symbol of the instruction, keeping the limit."""
        return ReplaceK(
            tuple(f(value) for value in self.current_val),
            tuple(f(value) for value in self.new_val),
            self.limit,
            tuple(f(value) for value in self.possible_values),
        )

    def apply(self, pushdown: PushDown) -> List[PushDown]:
        """The pushdowns that result from applying the instruction."""
        below_limit = len(pushdown) < self.limit
        try:
            replaced = pushdown.replace(self.current_val, self.new_val)
        except PushDownError:
            return []

        elements = replaced.elements
        height = len(elements)
        if height > self.limit:
            kept = elements[height - (self.limit - 1):] if self.limit > 1 else ()
            return [PushDown((replaced.empty(),) + kept)]
        if not below_limit and height < self.limit:
            base = list(elements)
            candidates: List[List[Any]] = [base]
            for _ in range(self.limit - height):
                grown = [
                    candidate + [value]
                    for candidate in candidates
                    for value in self.possible_values
                ]
                grown.append(base)
                candidates = grown
            return [PushDown(candidate) for candidate in candidates]
        return [replaced]

    def __str__(self) -> str:
        possible = "".join(f"{value}," for value in self.possible_values)
        return (
            f"(ReplaceK {_quoted(self.current_val)} // {_quoted(self.new_val)}"
            f" // limit: {self.limit} // possible_values: {possible})"
        )


PushDownInstruction = Union[Replace, ReplaceK]