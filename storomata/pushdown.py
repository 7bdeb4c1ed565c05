"""A stack whose bottom element marks the empty pushdown."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Callable, Iterable, Iterator, Sequence, Tuple


class PushDownError(Exception):
    """Raised when a pushdown operation cannot be carried out."""


@total_ordering
class PushDown:
    """An immutable stack; the first element is the bottom (empty) symbol."""

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._elements: Tuple[Any, ...] = tuple(elements)

    @staticmethod
    def new(empty: Any, initial: Any) -> "PushDown":
        """A pushdown holding the empty symbol with the initial symbol on top."""
        return PushDown((empty, initial))

    @property
    def elements(self) -> Tuple[Any, ...]:
        """The elements from bottom to top."""
        return self._elements

    def empty(self) -> Any:
        """The bottom symbol."""
        if not self._elements:
            raise PushDownError("the pushdown holds no elements")
        return self._elements[0]

    def current_symbol(self) -> Any:
        """The topmost symbol."""
        if not self._elements:
            raise PushDownError("the pushdown holds no elements")
        return self._elements[-1]

    def is_bottom(self) -> bool:
        """True if only the bottom symbol is left."""
        return len(self._elements) == 1

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def map(self, f: Callable[[Any], Any]) -> "PushDown":
        """Apply `f` to every element."""
        return PushDown(f(element) for element in self._elements)

    def replace(self, current: Sequence[Any], new: Sequence[Any]) -> "PushDown":
        """Replace the topmost elements by `new`.

        `current` lists the elements to remove from the top down, so the
        pushdown must end with `current` reversed.  Raises PushDownError if it
        does not.
        """
        expected = tuple(reversed(tuple(current)))
        count = len(expected)
        if count > len(self._elements) or (
            count and self._elements[len(self._elements) - count:] != expected
        ):
            raise PushDownError("the top of the pushdown does not match")
        kept = self._elements[: len(self._elements) - count]
        return PushDown(kept + tuple(new))

    def __str__(self) -> str:
        stack = " ".join(str(element) for element in self._elements)
        return f"stack: [{stack}], empty:{self.empty()}"

    def __repr__(self) -> str:
        return f"PushDown({list(self._elements)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PushDown):
            return NotImplemented
        return self._elements == other._elements

    def __lt__(self, other: "PushDown") -> bool:
        if not isinstance(other, PushDown):
            return NotImplemented
        return self._elements < other._elements

    def __hash__(self) -> int:
        return hash(self._elements)