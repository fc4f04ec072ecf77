"""Built-in procedures for the Schemer runtime environment.

This module defines integer arithmetic, comparisons, list primitives,
equivalence predicates, `apply`, and the file readers, and seeds fresh
global environments from a single read-only table.
"""
from __future__ import annotations

import operator
from functools import reduce
from types import MappingProxyType
from typing import Callable

from schemer import LispValue
from schemer.errors import NumArgsError, TypeMismatchError, DivisionByZeroError
from schemer.evaluation.apply import apply as apply_engine
from schemer.modules.source_loader import load_source
from schemer.reader.parser import read_all
from schemer.types.atom import Atom
from schemer.types.environment import Environment
from schemer.types.procedures import Closure, Primitive
from schemer.types.values import (
    Number,
    String,
    Character,
    Bool,
    List,
    DottedList,
    make_dotted,
)
from schemer.builtin.unpack import unpack_num, unpack_str, unpack_bool, UNPACKERS

PrimitiveFn = Callable[[list[LispValue]], LispValue]


# -------------------------------
# Operator factories
# -------------------------------
def numeric_binop(op: Callable[[int, int], int]) -> PrimitiveFn:
    """Left-fold `op` over two or more numeric arguments."""
    def primitive(args: list[LispValue]) -> LispValue:
        if len(args) < 2:
            raise NumArgsError(2, args)
        return Number(reduce(op, [unpack_num(a) for a in args]))
    return primitive


def bool_binop(unpacker: Callable[[LispValue], object], op: Callable) -> PrimitiveFn:
    """Compare exactly two arguments after coercing both through `unpacker`."""
    def primitive(args: list[LispValue]) -> LispValue:
        if len(args) != 2:
            raise NumArgsError(2, args)
        left, right = (unpacker(a) for a in args)
        return Bool(bool(op(left, right)))
    return primitive


def num_bool_binop(op: Callable) -> PrimitiveFn:
    return bool_binop(unpack_num, op)


def str_bool_binop(op: Callable) -> PrimitiveFn:
    return bool_binop(unpack_str, op)


def bool_bool_binop(op: Callable) -> PrimitiveFn:
    return bool_binop(unpack_bool, op)


# -------------------------------
# Integer division
# -------------------------------
def _nonzero(divisor: int) -> int:
    if divisor == 0:
        raise DivisionByZeroError("Division by zero")
    return divisor


def floor_div(a: int, b: int) -> int:
    return a // _nonzero(b)


def truncate_rem(a: int, b: int) -> int:
    """Remainder taking the sign of the dividend: (mod -7 2) is -1."""
    q = abs(a) // abs(_nonzero(b))
    if (a < 0) != (b < 0):
        q = -q
    return a - b * q


# -------------------------------
# List primitives
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    if len(args) != 1:
        raise NumArgsError(1, args)
    match args[0]:
        case List((head, *_)):
            return head
        case DottedList((head, *_), _):
            return head
    raise TypeMismatchError("pair", args[0])


def cdr(args: list[LispValue]) -> LispValue:
    if len(args) != 1:
        raise NumArgsError(1, args)
    match args[0]:
        case List((_, *rest)):
            return List(rest)
        case DottedList((_,), last):
            return last
        case DottedList((_, *rest), last):
            return DottedList(rest, last)
    raise TypeMismatchError("pair", args[0])


def cons(args: list[LispValue]) -> LispValue:
    if len(args) != 2:
        raise NumArgsError(2, args)
    head, tail = args
    return make_dotted((head,), tail)


# -------------------------------
# Equivalence
# -------------------------------
def is_eqv(a: LispValue, b: LispValue) -> bool:
    """Same variant and same value; lists compare element-wise."""
    match a, b:
        case (Bool(x), Bool(y)) | (Number(x), Number(y)) | (Character(x), Character(y)) | (String(x), String(y)):
            return x == y
        case (Atom(x), Atom(y)):
            return x == y
        case (DottedList(i1, l1), DottedList(i2, l2)):
            return is_eqv(List(i1 + (l1,)), List(i2 + (l2,)))
        case (List(xs), List(ys)):
            return len(xs) == len(ys) and all(is_eqv(x, y) for x, y in zip(xs, ys))
        case (Closure() | Primitive(), _):
            return a is b
    return False


def _unpack_equals(a: LispValue, b: LispValue, unpacker) -> bool:
    try:
        return unpacker(a) == unpacker(b)
    except TypeMismatchError:
        return False


def eqv(args: list[LispValue]) -> LispValue:
    if len(args) != 2:
        raise NumArgsError(2, args)
    return Bool(is_eqv(*args))


def equal(args: list[LispValue]) -> LispValue:
    """eqv?, or equal after coercing both sides through any one unpacker."""
    if len(args) != 2:
        raise NumArgsError(2, args)
    a, b = args
    primitive_equals = any(_unpack_equals(a, b, unpacker) for unpacker in UNPACKERS)
    return Bool(primitive_equals or is_eqv(a, b))


# -------------------------------
# Procedure application
# -------------------------------
def apply_proc(args: list[LispValue]) -> LispValue:
    """(apply f (a b c)) spreads a list; (apply f a b c) passes positionally."""
    if len(args) < 2:
        raise NumArgsError(2, args)
    proc, first = args[0], args[1]
    if isinstance(first, List):
        call_args = list(first.items)
    else:
        call_args = args[1:]
    return apply_engine(proc, call_args)


# -------------------------------
# File readers
# -------------------------------
def _filename(args: list[LispValue]) -> str:
    if len(args) != 1:
        raise NumArgsError(1, args)
    if not isinstance(args[0], String):
        raise TypeMismatchError("string", args[0])
    return args[0].value


def read_contents(args: list[LispValue]) -> LispValue:
    return String(load_source(_filename(args)))


def read_all_proc(args: list[LispValue]) -> LispValue:
    return List(read_all(load_source(_filename(args))))


# -------------------------------
# Registration
# -------------------------------
def _primitives(table: dict[str, PrimitiveFn]) -> MappingProxyType:
    return MappingProxyType({name: Primitive(name, fn) for name, fn in table.items()})


# Built once per process and never mutated; environments copy from it.
PRIMITIVES = _primitives({
    '+': numeric_binop(operator.add),
    '-': numeric_binop(operator.sub),
    '*': numeric_binop(operator.mul),
    '/': numeric_binop(floor_div),
    'mod': numeric_binop(truncate_rem),
    'quotient': numeric_binop(floor_div),
    '=': num_bool_binop(operator.eq),
    '<': num_bool_binop(operator.lt),
    '>': num_bool_binop(operator.gt),
    '/=': num_bool_binop(operator.ne),
    '>=': num_bool_binop(operator.ge),
    '<=': num_bool_binop(operator.le),
    '&&': bool_bool_binop(lambda a, b: a and b),
    '||': bool_bool_binop(lambda a, b: a or b),
    'string=?': str_bool_binop(operator.eq),
    'string<?': str_bool_binop(operator.lt),
    'string>?': str_bool_binop(operator.gt),
    'string<=?': str_bool_binop(operator.le),
    'string>=?': str_bool_binop(operator.ge),
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'eq?': eqv,
    'eqv?': eqv,
    'equal?': equal,
    'apply': apply_proc,
    'read-contents': read_contents,
    'read-all': read_all_proc,
})


def register(env: Environment) -> None:
    env.update(PRIMITIVES)


def primitive_bindings() -> Environment:
    """A fresh global frame holding every primitive."""
    env = Environment()
    register(env)
    return env
