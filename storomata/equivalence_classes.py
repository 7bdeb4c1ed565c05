"""Equivalence relations that map values onto class labels.

A relation is written one class per line: a label, then either a bracketed,
comma-separated list of members or `*` for the default class that takes
every value not listed elsewhere.  Tokens are bare words or double-quoted
strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

Parser = Callable[[str], Any]

_TOKEN_DELIMITERS = frozenset(' \t\r\n[],"')
_SET_SPACE = " \t\r\n"
_LABEL_SPACE = " \t"


class ParseError(ValueError):
    """Raised when text does not describe an equivalence class or relation."""


class IncompleteInput(ParseError):
    """Raised when the text ends before a class is complete."""


@dataclass(frozen=True)
class EquivalenceClass:
    """A labelled class; `members` is None for the default class."""

    label: Any
    members: Optional[frozenset] = None

    def __post_init__(self) -> None:
        if self.members is not None and not isinstance(self.members, frozenset):
            object.__setattr__(self, "members", frozenset(self.members))

    @staticmethod
    def parse(text: str, parse_value: Parser = str, parse_label: Parser = str) -> "EquivalenceClass":
        """Parse a class from the start of `text`; whatever follows it is ignored."""
        try:
            parsed, _ = parse_class(text, parse_value, parse_label)
        except ParseError as error:
            raise ParseError(f"Could not parse {text}") from error
        return parsed


def _skip(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _token(text: str, pos: int, convert: Parser) -> Tuple[Any, int]:
    if pos >= len(text):
        raise IncompleteInput("input ended before a token")
    if text[pos] == '"':
        end = text.find('"', pos + 1)
        if end < 0:
            raise IncompleteInput("unterminated quoted token")
        raw, pos = text[pos + 1:end], end + 1
    else:
        start = pos
        while pos < len(text) and text[pos] not in _TOKEN_DELIMITERS:
            pos += 1
        if pos >= len(text):
            raise IncompleteInput("input ended inside a token")
        if pos == start:
            raise ParseError(f"expected a token at position {start}")
        raw = text[start:pos]
    try:
        return convert(raw), pos
    except (ValueError, TypeError, KeyError) as error:
        raise ParseError(f"could not convert token {raw!r}") from error


def _set(text: str, pos: int, parse_value: Parser) -> Tuple[frozenset, int]:
    if pos >= len(text):
        raise IncompleteInput("input ended before a set")
    if text[pos] != "[":
        raise ParseError(f"expected '[' at position {pos}")
    pos = _skip(text, pos + 1, _SET_SPACE)
    if pos >= len(text):
        raise IncompleteInput("input ended inside a set")
    members = []
    if text[pos] == "]":
        return frozenset(), pos + 1
    while True:
        value, pos = _token(text, pos, parse_value)
        members.append(value)
        pos = _skip(text, pos, _SET_SPACE)
        if pos >= len(text):
            raise IncompleteInput("input ended inside a set")
        if text[pos] == "]":
            return frozenset(members), pos + 1
        if text[pos] != ",":
            raise ParseError(f"expected ',' or ']' at position {pos}")
        pos = _skip(text, pos + 1, _SET_SPACE)


def parse_set(text: str, parse_value: Parser = str) -> Tuple[frozenset, str]:
    """Parse a bracketed list of members; return the set and the unparsed rest."""
    members, pos = _set(text, 0, parse_value)
    return members, text[pos:]


def parse_class(
    text: str, parse_value: Parser = str, parse_label: Parser = str
) -> Tuple[EquivalenceClass, str]:
    """Parse one class from the start of `text`; return it and the unparsed rest.

    Raises IncompleteInput if the text ends too early and ParseError if it is
    malformed.
    """
    label, pos = _token(text, 0, parse_label)
    pos = _skip(text, pos, _LABEL_SPACE)
    if pos >= len(text):
        raise IncompleteInput("input ended before the class members")
    if text[pos] == "*":
        return EquivalenceClass(label, None), text[pos + 1:]
    members, pos = _set(text, pos, parse_value)
    return EquivalenceClass(label, members), text[pos:]


class EquivalenceRelation:
    """Maps each value to the label of its class, or to the default label."""

    def __init__(self, classes: Mapping[Any, Iterable[Any]], default: Any) -> None:
        """Build from labels and their members.

        Raises ValueError if a class is labelled like the default or if two
        classes share a member.
        """
        mapping: Dict[Any, Any] = {}
        for label, members in classes.items():
            if label == default:
                raise ValueError(
                    "There can only be one default class in the equivalence relation!"
                )
            for value in members:
                if value in mapping:
                    raise ValueError(
                        "All classes of the equivalence relation must be disjoint!"
                    )
                mapping[value] = label
        self._map = mapping
        self.default = default

    @classmethod
    def from_classes(cls, classes: Iterable[EquivalenceClass]) -> "EquivalenceRelation":
        """Build from parsed classes; later classes win on shared members.

        Raises ValueError if no default class is among them.
        """
        mapping: Dict[Any, Any] = {}
        default: Any = None
        has_default = False
        for eq_class in classes:
            if eq_class.members is None:
                default, has_default = eq_class.label, True
            else:
                for value in eq_class.members:
                    mapping[value] = eq_class.label
        if not has_default:
            raise ValueError("the equivalence relation has no default class")
        relation = cls({}, default)
        relation._map = mapping
        return relation

    @classmethod
    def parse(
        cls, text: str, parse_value: Parser = str, parse_label: Parser = str
    ) -> "EquivalenceRelation":
        """Parse a relation, one class per non-empty line.

        Raises ParseError if a line is malformed, no default class is given,
        or the classes are not disjoint.
        """
        classes: Dict[Any, frozenset] = {}
        default: Any = None
        has_default = False
        for line in text.splitlines():
            if not line:
                continue
            eq_class = EquivalenceClass.parse(line.strip(), parse_value, parse_label)
            if eq_class.members is None:
                default, has_default = eq_class.label, True
            else:
                classes[eq_class.label] = eq_class.members
        if has_default:
            try:
                return cls(classes, default)
            except ValueError:
                pass
        raise ParseError(f"Could not parse {text}")

    def project(self, key: Any) -> Any:
        """The label of the class that `key` belongs to."""
        return self._map.get(key, self.default)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EquivalenceRelation):
            return NotImplemented
        return self.default == other.default and self._map == other._map

    def __repr__(self) -> str:
        return f"EquivalenceRelation({self._map!r}, default={self.default!r})"