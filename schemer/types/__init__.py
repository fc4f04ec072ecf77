"""The Schemer value model and environment."""

from schemer.types.values import (
    Value,
    Number,
    String,
    Character,
    Bool,
    List,
    DottedList,
    TRUE,
    FALSE,
    NIL,
    make_dotted,
)
from schemer.types.atom import Atom
from schemer.types.procedures import Closure, Primitive
from schemer.types.environment import Environment

__all__ = [
    "Value",
    "Atom",
    "Number",
    "String",
    "Character",
    "Bool",
    "List",
    "DottedList",
    "Closure",
    "Primitive",
    "Environment",
    "TRUE",
    "FALSE",
    "NIL",
    "make_dotted",
]
