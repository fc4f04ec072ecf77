from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.types.atom import Atom
from schemer.types.environment import Environment
from schemer.evaluation.special_forms.common import bad_form


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2 or not isinstance(tail[0], Atom):
        raise bad_form("set!", tail)
    var, val_expr = tail
    value = evaluate_fn(val_expr, env)
    return env.set(var.name, value)
