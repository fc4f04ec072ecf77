"""Helpers shared by the special-form handlers."""

from __future__ import annotations

from schemer import SExpression
from schemer.errors import BadSpecialFormError
from schemer.types.atom import Atom
from schemer.types.environment import Environment
from schemer.types.procedures import Closure
from schemer.types.values import List, DottedList


def bad_form(keyword: str, tail: list[SExpression]) -> BadSpecialFormError:
    """Build the error for a malformed special form, rebuilding the whole form."""
    return BadSpecialFormError("Unrecognized special form", List((Atom(keyword), *tail)))


def _names(values, keyword: str, tail: list[SExpression]) -> list[str]:
    names = []
    for value in values:
        if not isinstance(value, Atom):
            raise bad_form(keyword, tail)
        names.append(value.name)
    return names


def make_closure(
    params_spec: SExpression,
    body: SExpression,
    env: Environment,
    keyword: str,
    tail: list[SExpression],
) -> Closure:
    """Build a Closure from a parameter spec.

    - List: fixed parameters only
    - DottedList: fixed parameters then the variadic name
    - Atom: variadic-only, zero fixed parameters
    """
    match params_spec:
        case List(items):
            return Closure(_names(items, keyword, tail), None, body, env)
        case DottedList(initial, Atom(rest)):
            return Closure(_names(initial, keyword, tail), rest, body, env)
        case Atom(rest):
            return Closure((), rest, body, env)
    raise bad_form(keyword, tail)
