import logging

from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.types.atom import Atom
from schemer.types.environment import Environment
from schemer.types.values import List, DottedList
from schemer.evaluation.special_forms.common import bad_form, make_closure

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)            binds the value of an expression
    (define (name params...) body) binds a closure with fixed parameters
    (define (name params... . rest) body)
    (define (name . rest) body)    binds a variadic closure
    Always binds in the innermost frame and returns the bound value.
    """
    if len(tail) != 2:
        raise bad_form("define", tail)

    target, body = tail
    match target:
        case Atom(name):
            value = evaluate_fn(body, env)
        case List((Atom(name), *params)):
            value = make_closure(List(params), body, env, "define", tail)
        case DottedList((Atom(name), *params), rest):
            spec = DottedList(params, rest) if params else rest
            value = make_closure(spec, body, env, "define", tail)
        case _:
            raise bad_form("define", tail)

    logger.debug("define %s", name)
    return env.define(name, value)
