"""Data variants of the Schemer value model.

Each variant renders to the reader's surface syntax through ``to_text`` (and
``str``), so ``read(text).to_text() == text`` for every literal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class Value:
    """Base class of every runtime datum."""

    __slots__ = ()

    def to_text(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True, slots=True)
class Number(Value):
    value: int

    def to_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class String(Value):
    value: str

    def to_text(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True, slots=True)
class Character(Value):
    value: str

    def to_text(self) -> str:
        if self.value == " ":
            return "#\\space"
        if self.value == "\n":
            return "#\\newline"
        return "#\\" + self.value


@dataclass(frozen=True, slots=True)
class Bool(Value):
    value: bool

    def to_text(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True, slots=True)
class List(Value):
    """A proper list. ``items`` is always stored as a tuple."""

    items: tuple[Value, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def to_text(self) -> str:
        return "(" + " ".join(v.to_text() for v in self.items) + ")"


@dataclass(frozen=True, slots=True)
class DottedList(Value):
    """An improper list ``(initial ... . last)``."""

    initial: tuple[Value, ...]
    last: Value

    def __post_init__(self):
        object.__setattr__(self, "initial", tuple(self.initial))

    def to_text(self) -> str:
        head = " ".join(v.to_text() for v in self.initial)
        return f"({head} . {self.last.to_text()})"


def make_dotted(initial: Iterable[Value], last: Value) -> Value:
    """Build an improper list, folding a list-shaped tail into the result.

    ``(a . (b c))`` is the proper list ``(a b c)`` and ``(a . (b . c))`` is
    ``(a b . c)``; a DottedList's ``last`` is never itself a list.
    """
    initial = tuple(initial)
    match last:
        case List(items):
            return List(initial + items)
        case DottedList(inner, tail):
            return DottedList(initial + inner, tail)
    if not initial:
        return last
    return DottedList(initial, last)


TRUE = Bool(True)
FALSE = Bool(False)
NIL = List()
