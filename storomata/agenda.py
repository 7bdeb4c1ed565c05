"""Containers that hold the frontier of a search.

Every weighted container here is max-first: popping yields the element with
the greatest priority.  Elements and priorities are kept apart, so elements
themselves need not be comparable.
"""

from __future__ import annotations

import bisect
import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

I = TypeVar("I")
W = TypeVar("W")

WeightFunction = Callable[[Any], Any]


def _identity(element: Any) -> Any:
    return element


@total_ordering
@dataclass(eq=False)
class WeightedItem(Generic[I, W]):
    """An item paired with a weight; equality and order look at the weight only."""

    item: I
    weight: W

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedItem):
            return NotImplemented
        return self.weight == other.weight

    def __lt__(self, other: "WeightedItem[Any, W]") -> bool:
        if not isinstance(other, WeightedItem):
            return NotImplemented
        return self.weight < other.weight


class Agenda(ABC):
    """Common interface of the containers a search draws its nodes from."""

    @abstractmethod
    def push(self, element: Any) -> Any:
        """Add an element."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the next element; raise IndexError when empty."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the next element without removing it; raise IndexError when empty."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of held elements."""

    def is_empty(self) -> bool:
        return len(self) == 0

    def extend(self, elements: Iterable[Any]) -> None:
        for element in elements:
            self.push(element)


class Stack(Agenda):
    """Last in, first out."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._items = list(elements)

    def push(self, element: Any) -> None:
        self._items.append(element)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek into an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class Queue(Agenda):
    """First in, first out; new elements go to the front, pops take the back."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._items: deque = deque(elements)

    def push(self, element: Any) -> None:
        self._items.appendleft(element)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek into an empty queue")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Ranked:
    priority: Any
    order: int
    item: Any = field(compare=False)

    def __lt__(self, other: "_Ranked") -> bool:
        if self.priority != other.priority:
            return self.priority > other.priority
        return self.order < other.order


class PriorityHeap(Agenda):
    """Max-heap; an element's priority is given on push or taken from `weight`."""

    def __init__(
        self,
        weight: Optional[WeightFunction] = None,
        elements: Iterable[Any] = (),
    ) -> None:
        self._weight = weight if weight is not None else _identity
        self._counter = itertools.count()
        self._heap: list[_Ranked] = []
        for element in elements:
            self.push(element)

    def _priority_of(self, element: Any, priority: Any) -> Any:
        return self._weight(element) if priority is None else priority

    def _top_priority(self) -> Any:
        return self._heap[0].priority

    def push(self, element: Any, priority: Any = None) -> None:
        entry = _Ranked(self._priority_of(element, priority), next(self._counter), element)
        heapq.heappush(self._heap, entry)

    def pop(self) -> Any:
        if not self._heap:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._heap).item

    def peek(self) -> Any:
        if not self._heap:
            raise IndexError("peek into an empty heap")
        return self._heap[0].item

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Yield the held elements, greatest priority first, without removing them."""
        return (entry.item for entry in sorted(self._heap))


class BeamHeap(Agenda):
    """Max-heap that rejects elements whose priority is below `beta` times the best one."""

    def __init__(self, beta: Any, weight: Optional[WeightFunction] = None) -> None:
        self.beta = beta
        self._heap = PriorityHeap(weight)

    def push(self, element: Any, priority: Any = None) -> bool:
        """Insert the element if it lies within the beam; report whether it did."""
        priority = self._heap._priority_of(element, priority)
        if not self._heap or priority >= self._heap._top_priority() * self.beta:
            self._heap.push(element, priority)
            return True
        return False

    def pop(self) -> Any:
        return self._heap.pop()

    def peek(self) -> Any:
        return self._heap.peek()

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._heap)


class LimitedHeap(Agenda):
    """Heap holding at most `capacity` elements, keeping those of highest priority."""

    def __init__(self, capacity: int, weight: Optional[WeightFunction] = None) -> None:
        self.capacity = capacity
        self._weight = weight if weight is not None else _identity
        self._entries: list[WeightedItem] = []

    def _insert(self, element: Any, priority: Any) -> None:
        bisect.insort(self._entries, WeightedItem(element, priority), key=lambda e: e.weight)

    def push(self, element: Any, priority: Any = None) -> Any:
        """Insert the element; return the element dropped to stay within capacity, if any."""
        if priority is None:
            priority = self._weight(element)
        if self.capacity > len(self._entries):
            self._insert(element, priority)
            return None
        if not self._entries or not priority > self._entries[0].weight:
            return element
        dropped = self._entries.pop(0).item
        self._insert(element, priority)
        return dropped

    def pop(self) -> Any:
        if not self._entries:
            raise IndexError("pop from an empty heap")
        return self._entries.pop().item

    def peek(self) -> Any:
        if not self._entries:
            raise IndexError("peek into an empty heap")
        return self._entries[-1].item

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        """Yield the held elements, greatest priority first, without removing them."""
        return (entry.item for entry in reversed(self._entries))