"""Procedure variants: user closures and built-in primitives."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Sequence, TYPE_CHECKING

from schemer import LispValue, SExpression
from schemer.types.values import Value

if TYPE_CHECKING:
    from schemer.types.environment import Environment


class Closure(Value):
    """A user-defined procedure with formal parameters, body, and closure env.

    The environment is held by reference: later `define`/`set!` in the
    defining scope are visible when the body runs.
    """

    __slots__ = ("params", "varargs", "body", "env")
    __match_args__ = ("params", "varargs", "body", "env")

    def __init__(
        self,
        params: Sequence[str],
        varargs: str | None,
        body: SExpression,
        env: Environment,
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.varargs: str | None = varargs
        self.body: SExpression = body
        self.env: Environment = env

    def to_text(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            if self.varargs is not None:
                if self.params:
                    buffer.write(" ")
                buffer.write(". ")
                buffer.write(self.varargs)
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self.to_text()}>"


class Primitive(Value):
    """A built-in procedure. Called with the list of evaluated arguments."""

    __slots__ = ("name", "fn")
    __match_args__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def to_text(self) -> str:
        return "<primitive>"

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"
