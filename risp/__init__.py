# Core type aliases for risp's data model.
# Every value the reader produces or the evaluator returns is one of the
# expression classes in risp.types (Boolean, Symbol, Number, List, Lambda).
# Code is data: a List is both a literal and a call form.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote unevaluated syntax.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the distinction is documentation only.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: (expr, env) -> value
EvaluatorFn = Callable[..., LispValue]
