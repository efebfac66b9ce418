"""Lambda application for risp.

Arguments are passed by name: each parameter is bound to the caller's raw
argument expression, which is evaluated (possibly more than once, possibly
never) whenever the body refers to it. The new scope is chained to the
caller's environment, so free identifiers in the body resolve dynamically.
"""

from __future__ import annotations

import logging

from risp import EvaluatorFn, LispValue, SExpression
from risp.errors import RispArityError, RispTypeError
from risp.types.environment import Environment
from risp.types.expression import List
from risp.types.lambda_fn import Lambda
from risp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def bind_arguments(fn: Lambda, args: list[SExpression], caller_env: Environment) -> Environment:
    """Return a child of `caller_env` with each parameter bound to its raw argument."""
    params = fn.params
    if not isinstance(params, List):
        raise RispTypeError("fn", "a parameter list", params)
    if len(args) != len(params):
        raise RispArityError("fn", f"exactly {len(params)}", len(args))
    new_env = Environment(outer=caller_env)
    for param, arg in zip(params, args):
        if not isinstance(param, Symbol):
            raise RispTypeError("fn", "a symbol parameter", param)
        new_env.define_variable(param.id, arg)
    return new_env


def apply_lambda(
    fn: Lambda,
    args: list[SExpression],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `fn` to unevaluated `args` from `caller_env`."""
    new_env = bind_arguments(fn, args, caller_env)
    logger.debug("apply %s at depth %d", fn, new_env.depth())
    return evaluate_fn(fn.body, new_env)
