# Core type aliases for Telescope's data model.
# Plain Python values (int, float, str, bool, list) stand for both parsed
# forms and runtime values; Nil, Symbol, Vector, Builtin and Lambda are the
# only dedicated classes.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to special forms
EvaluatorFn = Callable[..., LispValue]
