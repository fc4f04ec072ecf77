from __future__ import annotations

from schemer import LispValue
from schemer.reader.parser import read_all
from schemer.types.atom import Atom
from schemer.types.environment import Environment
from schemer.types.values import List, String, NIL
from schemer.evaluation.evaluator import evaluate
from schemer.builtin.env_builtin import primitive_bindings


class Interpreter:
    """
    Reads and evaluates Schemer code against one global Environment.
    Definitions persist across calls.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else primitive_bindings()

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value (or `()`)."""
        result: LispValue = NIL
        for expr in read_all(code):
            result = evaluate(expr, self.env)
        return result

    def load(self, filename: str) -> LispValue:
        return evaluate(List((Atom("load"), String(filename))), self.env)
