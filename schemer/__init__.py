# Core type aliases for Schemer's data model.
# Every runtime datum is an instance of one of the closed set of Value
# variants in schemer.types. The same objects are used for code (forms read
# by the reader) and for data (values produced by evaluation).
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` here so that this module never has to import
# the types package (which itself imports these aliases).

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue, homoiconic)
SExpression = LispValue

# Evaluator function type: passed into special forms to avoid import cycles
EvaluatorFn = Callable[..., LispValue]
