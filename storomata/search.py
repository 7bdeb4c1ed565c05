"""Lazy exploration of a graph driven by an agenda and a successor function."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from storomata.agenda import Agenda, PriorityHeap, Queue, Stack

Successors = Callable[[Any], Iterable[Any]]


class Search:
    """Iterator over graph nodes; each yielded node's successors join the agenda."""

    def __init__(self, agenda: Agenda, successors: Successors) -> None:
        self.agenda = agenda
        self.successors = successors

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self.agenda.is_empty():
            raise StopIteration
        item = self.agenda.pop()
        self.agenda.extend(self.successors(item))
        return item

    def uniques(self) -> "UniqueSearch":
        """Wrap this search so that each node is yielded at most once."""
        return UniqueSearch(self)

    @staticmethod
    def dfs(initials: Iterable[Any], successors: Successors) -> "Search":
        """Depth-first search from the given nodes."""
        return Search(Stack(initials), successors)

    @staticmethod
    def bfs(initials: Iterable[Any], successors: Successors) -> "Search":
        """Breadth-first search from the given nodes."""
        return Search(Queue(initials), successors)

    @staticmethod
    def weighted(
        initials: Iterable[Any],
        successors: Successors,
        weight: Optional[Callable[[Any], Any]] = None,
    ) -> "Search":
        """Best-first search; the node of greatest weight is explored first."""
        return Search(PriorityHeap(weight, initials), successors)


class UniqueSearch:
    """Search that skips successors already seen.

    The iteration ends as soon as a node that was already yielded comes off
    the agenda.
    """

    def __init__(self, search: Search) -> None:
        self.search = search
        self._seen: set = set()
        self._finished = False

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        agenda = self.search.agenda
        if self._finished or agenda.is_empty():
            self._finished = True
            raise StopIteration
        item = agenda.pop()
        if item in self._seen:
            self._finished = True
            raise StopIteration
        self._seen.add(item)
        agenda.extend(s for s in self.search.successors(item) if s not in self._seen)
        return item