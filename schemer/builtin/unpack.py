"""Unpackers coercing Values to native Python primitives.

Numeric and string unpacking are deliberately lenient (a numeric String is
a number, a Number or Bool renders to a string); boolean unpacking is strict.
"""
from __future__ import annotations

import re

from schemer import LispValue
from schemer.errors import TypeMismatchError
from schemer.types.values import Number, String, Bool, List

_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def unpack_num(value: LispValue) -> int:
    match value:
        case Number(n):
            return n
        case String(text) if _INT_RE.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                raise TypeMismatchError("number", value) from None
        case List((head, *_)):
            return unpack_num(head)
    raise TypeMismatchError("number", value)


def unpack_str(value: LispValue) -> str:
    match value:
        case String(text):
            return text
        case Number() | Bool():
            return value.to_text()
    raise TypeMismatchError("string", value)


def unpack_bool(value: LispValue) -> bool:
    match value:
        case Bool(flag):
            return flag
    raise TypeMismatchError("boolean", value)


UNPACKERS = (unpack_num, unpack_bool, unpack_str)
