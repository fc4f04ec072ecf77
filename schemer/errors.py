"""Error kinds raised by the Schemer core.

Every error carries its structured payload as attributes and renders the
message the REPL prints when it recovers from a failed evaluation.
"""

from __future__ import annotations

from typing import Any, Sequence


def unwords(values: Sequence[Any]) -> str:
    """Render a sequence of values separated by single spaces."""
    return " ".join(str(v) for v in values)


class SchemerError(Exception):
    """ Base class for all Schemer errors"""
    pass


class ParseError(SchemerError):
    """ Raised when the reader cannot match the grammar"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"Parse error at line {line} column {column}: {message}"
        else:
            message = f"Parse error: {message}"
        super().__init__(message)


class NumArgsError(SchemerError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, expected: int, found: Sequence[Any]):
        self.expected = expected
        self.found = list(found)
        super().__init__(f"Expected {expected} args; found values {unwords(self.found)}")


class TypeMismatchError(SchemerError):
    """ Raised when a value of the wrong variant reaches an unpacker or primitive"""

    def __init__(self, expected: str, found: Any):
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid type: expected {expected}, found {found}")


class UnboundVariableError(SchemerError):
    """ Raised when no frame in the chain binds a variable"""

    def __init__(self, operation: str, name: str):
        self.operation = operation
        self.name = name
        super().__init__(f"{operation}: {name}")


class BadSpecialFormError(SchemerError):
    """ Raised when a form has no recognised evaluation rule"""

    def __init__(self, message: str, form: Any):
        self.form = form
        super().__init__(f"{message}: {form}")


class NotApplicableError(SchemerError):
    """ Raised when the value in procedure position is not a procedure"""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Not a procedure: {value}")


class DivisionByZeroError(SchemerError):
    """ Raised by the integer division primitives"""
