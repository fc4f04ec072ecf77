import logging

from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import TypeMismatchError
from schemer.modules.source_loader import load_source
from schemer.reader.parser import read_all
from schemer.types.environment import Environment
from schemer.types.values import String, NIL
from schemer.evaluation.special_forms.common import bad_form

logger = logging.getLogger(__name__)


def load_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (load "file.scm")
    Reads every form in the file and evaluates them in order in `env`.
    Returns the last value, or the empty list when the file holds no forms.
    Forms before a failing one keep their side effects.
    """
    if len(tail) != 1:
        raise bad_form("load", tail)

    filename = evaluate_fn(tail[0], env)
    if not isinstance(filename, String):
        raise TypeMismatchError("string", filename)

    forms = read_all(load_source(filename.value))
    logger.debug("loading %d form(s) from %s", len(forms), filename.value)
    result: LispValue = NIL
    for form in forms:
        result = evaluate_fn(form, env)
    return result
