"""Core evaluator for the risp interpreter.

Call forms never evaluate their arguments up front. A builtin receives the
raw argument expressions and evaluates whichever it needs; a lambda binds
them unevaluated into a fresh scope chained to the caller's.
"""

from __future__ import annotations

import logging

from risp import SExpression, LispValue
from risp.errors import RispArityError, RispNotCallable, RispTypeError, RispUndefinedProcedure
from risp.types.expression import Boolean, Number, List
from risp.types.symbol import Symbol
from risp.types.lambda_fn import Lambda
from risp.types.environment import Environment
from risp.evaluation.apply import apply_lambda

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, raising a RispError on failure."""
    match expr:
        case Boolean() | Number() | Lambda():
            return expr

        case Symbol():
            # Unresolved symbols evaluate to themselves
            value = env.get(expr.id)
            return expr if value is None else value

        case List(items=[]):
            raise RispArityError("()", "at least 1", 0)

        case List(items=[head, *tail]):
            if not isinstance(head, Symbol):
                raise RispNotCallable(head)
            name = head.id
            proc = env.get_function(name)
            if proc is not None:
                logger.debug("builtin %s %s", name, tail)
                return proc(tail, env)
            fn = env.get(name)
            if isinstance(fn, Lambda):
                return apply_lambda(fn, tail, env, evaluate)
            raise RispUndefinedProcedure(name)

    raise RispTypeError("eval", "an expression", expr)


# ids of the List forms currently being forced
_forcing: set[int] = set()


def force(value: LispValue, env: Environment) -> LispValue:
    """Evaluate argument syntax bound by name until it settles on a value.

    A parameter holds its caller's raw expression, so looking it up may
    yield a List call form or another Symbol. Each Symbol is followed at
    most once; a value that evaluates to itself stops the walk. A List that
    needs its own value while being forced raises RispTypeError.
    """
    seen: set[str] = set()
    while isinstance(value, (List, Symbol)):
        if isinstance(value, Symbol):
            if value.id in seen:
                break
            seen.add(value.id)
            result = evaluate(value, env)
        else:
            key = id(value)
            if key in _forcing:
                raise RispTypeError("eval", "an argument that settles", value)
            _forcing.add(key)
            try:
                result = evaluate(value, env)
            finally:
                _forcing.discard(key)
        if result == value:
            break
        value = result
    return value


def evaluate_number(expr: SExpression, env: Environment, form: str = "eval") -> float:
    """Evaluate `expr` to a float; `form` names the caller in errors."""
    value = force(evaluate(expr, env), env)
    if not isinstance(value, Number):
        raise RispTypeError(form, "a number", value)
    return value.value


def evaluate_boolean(expr: SExpression, env: Environment, form: str = "eval") -> bool:
    value = force(evaluate(expr, env), env)
    if not isinstance(value, Boolean):
        raise RispTypeError(form, "a boolean", value)
    return value.value
