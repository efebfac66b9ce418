from risp import SExpression, LispValue
from risp.errors import RispArityError, RispTypeError
from risp.types.environment import Environment
from risp.types.symbol import Symbol
from risp.evaluation.evaluator import evaluate


def let_form(tail: list[SExpression], env: Environment) -> LispValue:
    """
    (let name value)
    Binds in the current scope, not a new one, and returns the bound value.
    """
    if len(tail) < 2:
        raise RispArityError("let", "at least 2", len(tail))

    name, val_expr = tail[0], tail[1]
    if not isinstance(name, Symbol):
        raise RispTypeError("let", "a symbol", name)
    value = evaluate(val_expr, env)
    env.define_variable(name.id, value)
    return value
