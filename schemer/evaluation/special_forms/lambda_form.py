from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.types.environment import Environment
from schemer.evaluation.special_forms.common import bad_form, make_closure


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda params body) takes exactly one body expression
    if len(tail) != 2:
        raise bad_form("lambda", tail)

    params, body = tail
    return make_closure(params, body, env, "lambda", tail)
