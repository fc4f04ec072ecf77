"""Core evaluator for the Schemer interpreter.

Dispatches each form to a special-form handler or to procedure application.
Evaluation is plain recursion: nested forms and non-tail calls consume
Python stack frames, and the interpreter's recursion limit bounds depth.
"""

from __future__ import annotations

from schemer import SExpression, LispValue
from schemer.errors import BadSpecialFormError
from schemer.types.atom import Atom
from schemer.types.environment import Environment
from schemer.types.values import String, Number, Bool, Character, List
from schemer.evaluation.apply import apply
from schemer.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one form in `env` and return its value."""
    match expr:
        # --- Self-evaluating literals ---
        case String() | Number() | Bool() | Character():
            return expr

        case Atom(name):
            return env.lookup(name)

        # --- Special forms receive their tail unevaluated ---
        case List((Atom() as head, *tail)) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        # --- Application: head first, then arguments left to right ---
        case List((head, *tail)):
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(proc, args, evaluate)

    raise BadSpecialFormError("Unrecognized special form", expr)
