from schemer import SExpression, LispValue, EvaluatorFn
from schemer.types.environment import Environment
from schemer.evaluation.special_forms.common import bad_form


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise bad_form("quote", tail)
    return tail[0]
