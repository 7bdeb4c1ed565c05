"""An upside-down tree with a designated position, the stack pointer.

Tree stacks are persistent: every operation returns a new tree stack and
leaves the one it was called on untouched.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

Path = Tuple[int, ...]


class TreeStackError(Exception):
    """Raised when a tree stack operation cannot be carried out."""


def _option_key(value: Any) -> tuple:
    return (0,) if value is None else (1, value)


@total_ordering
class TreeStack:
    """A tree whose nodes carry values, with a pointer to the current node."""

    __slots__ = ("_value", "_parent", "_children")

    def __init__(self, value: Any) -> None:
        self._value = value
        self._parent: Optional[Tuple[int, TreeStack]] = None
        self._children: Tuple[Optional[TreeStack], ...] = ()

    @classmethod
    def _build(
        cls,
        value: Any,
        parent: Optional[Tuple[int, "TreeStack"]],
        children: Tuple[Optional["TreeStack"], ...],
    ) -> "TreeStack":
        stack = cls.__new__(cls)
        stack._value = value
        stack._parent = parent
        stack._children = tuple(children)
        return stack

    def map(self, f: Callable[[Any], Any]) -> "TreeStack":
        """Apply `f` to the value of every node."""
        parent = None
        if self._parent is not None:
            index, node = self._parent
            parent = (index, node.map(f))
        children = tuple(None if child is None else child.map(f) for child in self._children)
        return TreeStack._build(f(self._value), parent, children)

    def is_at_bottom(self) -> bool:
        """True if the pointer is at the root."""
        return self._parent is None

    def current_symbol(self) -> Any:
        """The value of the current node."""
        return self._value

    def set(self, value: Any) -> "TreeStack":
        """Replace the value of the current node."""
        return TreeStack._build(value, self._parent, self._children)

    def _padded_children(self, n: int) -> List[Optional["TreeStack"]]:
        children = list(self._children)
        if n >= len(children):
            children.extend([None] * (n - len(children) + 1))
        return children

    def push(self, n: int, value: Any) -> "TreeStack":
        """Write a value to the vacant child position `n` and move there."""
        return self.push_with(n, lambda: value)

    def push_with(self, n: int, make_value: Callable[[], Any]) -> "TreeStack":
        """Like `push`, but compute the value only when the position is vacant."""
        children = self._padded_children(n)
        if children[n] is not None:
            raise TreeStackError(f"child position {n} is already occupied")
        parent = TreeStack._build(self._value, self._parent, tuple(children))
        return TreeStack._build(make_value(), (n, parent), ())

    def push_next(self, value: Any) -> "TreeStack":
        """Write a value to the first vacant child position and move there."""
        index = next(
            (i for i, child in enumerate(self._children) if child is None),
            len(self._children),
        )
        return self.push(index, value)

    def all(self, predicate: Callable[[Any], bool]) -> bool:
        """Check a predicate on every node of the subtree at the pointer."""
        return predicate(self._value) and all(
            child.all(predicate) for child in self._children if child is not None
        )

    def up(self, n: int) -> "TreeStack":
        """Move to the occupied child position `n`."""
        if n >= len(self._children) or self._children[n] is None:
            raise TreeStackError(f"child position {n} is vacant")
        child = self._children[n]
        children = list(self._children)
        children[n] = None
        parent = TreeStack._build(self._value, self._parent, tuple(children))
        return TreeStack._build(child._value, (n, parent), child._children)

    def ups(self) -> List["TreeStack"]:
        """One tree stack for every occupied child position."""
        return [self.up(i) for i, child in enumerate(self._children) if child is not None]

    def down(self) -> "TreeStack":
        """Move to the parent node."""
        if self._parent is None:
            raise TreeStackError("the pointer is already at the bottom")
        index, parent = self._parent
        children = list(parent._children)
        children[index] = TreeStack._build(self._value, None, self._children)
        return TreeStack._build(parent._value, parent._parent, tuple(children))

    def to_tree(self) -> Tuple[Dict[Path, Any], Path]:
        """The whole tree as a map from Gorn addresses to values, and the pointer's address."""
        tree: Dict[Path, Any] = {}
        current: Path = ()
        if self._parent is not None:
            index, parent = self._parent
            parent_tree, parent_path = parent.to_tree()
            current = parent_path + (index,)
            tree.update(parent_tree)
        tree[current] = self._value
        for num, child in enumerate(self._children):
            if child is None:
                continue
            child_tree, _ = child.to_tree()
            for path, value in child_tree.items():
                tree[current + (num,) + path] = value
        return dict(sorted(tree.items())), current

    def __str__(self) -> str:
        tree, pointer = self.to_tree()
        lines: List[str] = []
        for path, value in tree.items():
            line1 = " "
            line2 = "*" if path == pointer else " "
            if path:
                line1 += "| " * (len(path) - 1) + "|"
                line2 += "| " * (len(path) - 1) + f"+-{path[-1]}: {value}"
            else:
                line2 += str(value)
            lines.append(f"{line1}\n{line2}\n")
        return "".join(lines)

    def __repr__(self) -> str:
        tree, pointer = self.to_tree()
        return f"TreeStack({tree!r}, pointer={pointer!r})"

    def __iter__(self) -> Iterator[Any]:
        """Yield the values of the nodes in the order of their addresses."""
        return iter(self.to_tree()[0].values())

    def _key(self) -> tuple:
        return (
            self._value,
            _option_key(self._parent),
            tuple(_option_key(child) for child in self._children),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeStack):
            return NotImplemented
        if self is other:
            return True
        return (
            self._value == other._value
            and self._parent == other._parent
            and self._children == other._children
        )

    def __lt__(self, other: "TreeStack") -> bool:
        if not isinstance(other, TreeStack):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((self._value, self._parent, self._children))