"""Application engine for Schemer.

Centralizes procedure application for the evaluator and for the `apply`
primitive, which re-enters evaluation through here.
"""

from __future__ import annotations

from schemer import LispValue, EvaluatorFn
from schemer.errors import NumArgsError, NotApplicableError
from schemer.types.procedures import Closure, Primitive


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a user closure.

    The argument count must equal the number of fixed parameters, or be at
    least that many when the closure is variadic. The body runs in a fresh
    frame chained to the closure's captured environment, never the caller's.
    """
    arity = len(fn.params)
    if fn.varargs is None and len(args) != arity:
        raise NumArgsError(arity, args)
    if fn.varargs is not None and len(args) < arity:
        raise NumArgsError(arity, args)
    frame = fn.env.bind(fn.params, args, fn.varargs)
    return evaluate_fn(fn.body, frame)


def apply(
    proc: LispValue,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn | None = None,
) -> LispValue:
    """Apply either a Closure or a Primitive to already-evaluated arguments.

    - Primitives validate their own arity and argument types.
    - Anything else raises NotApplicableError.
    """
    if isinstance(proc, Primitive):
        return proc.fn(list(args))
    if isinstance(proc, Closure):
        if evaluate_fn is None:
            # Lazy import: the evaluator imports this module
            from schemer.evaluation.evaluator import evaluate as evaluate_fn
        return apply_closure(proc, list(args), evaluate_fn)
    raise NotApplicableError(proc)
