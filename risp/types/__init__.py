from risp.types.expression import Expression, Boolean, Number, List, TRUE, FALSE, compare
from risp.types.symbol import Symbol
from risp.types.lambda_fn import Lambda
from risp.types.environment import Environment

__all__ = [
    "Expression",
    "Boolean",
    "Number",
    "List",
    "Symbol",
    "Lambda",
    "Environment",
    "TRUE",
    "FALSE",
    "compare",
]
