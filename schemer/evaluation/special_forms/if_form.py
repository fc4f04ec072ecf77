from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.types.environment import Environment
from schemer.types.values import FALSE
from schemer.evaluation.special_forms.common import bad_form


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise bad_form("if", tail)

    pred, conseq, alt = tail
    # Scheme truthiness: anything other than #f selects the consequent
    if evaluate_fn(pred, env) == FALSE:
        return evaluate_fn(alt, env)
    return evaluate_fn(conseq, env)
