"""Runtime environment for Schemer.

The Environment stores bindings of variable names to evaluated values and
supports nested lexical scopes via an `outer` link. Frames are shared by
reference: every Closure created in a frame, and every frame chained to it,
sees mutations made through `set` or `define`.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional, Sequence

from schemer import LispValue
from schemer.errors import UnboundVariableError
from schemer.types.values import List


class Environment:
    """Hierarchical mapping from variable names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[name] = value
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: str, value: LispValue) -> LispValue:
        """Update an existing binding for `name` in the environment chain.

        Raises UnboundVariableError if no frame binds the name; `set` never
        creates a binding.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariableError("Setting an unbound variable", name)
        env.vars[name] = value
        return value

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UnboundVariableError if not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariableError("Getting an unbound variable", name)
        return env.vars[name]

    def update(self, mapping: Mapping[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        self.vars.update(mapping)

    def bind(
        self,
        params: Sequence[str],
        args: Sequence[LispValue],
        varargs: str | None = None,
    ) -> Environment:
        """Return a new frame, chained to this one, binding a call's arguments.

        Fixed parameters take arguments positionally. When `varargs` is
        given it is bound to a List of the leftover arguments, which is the
        empty List when nothing is left over. Arity is checked by the caller.
        """
        frame = Environment(outer=self)
        for name, value in zip(params, args):
            frame.vars[name] = value
        if varargs is not None:
            frame.vars[varargs] = List(args[len(params):])
        return frame

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
