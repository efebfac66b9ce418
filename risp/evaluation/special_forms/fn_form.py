from risp import SExpression, LispValue
from risp.errors import RispArityError
from risp.types.environment import Environment
from risp.types.lambda_fn import Lambda


def fn_form(tail: list[SExpression], env: Environment) -> LispValue:
    # (fn (params) body): exactly one body form, no environment captured.
    # The parameter list is checked when the lambda is applied.
    if len(tail) != 2:
        raise RispArityError("fn", "exactly 2", len(tail))

    params, body = tail
    return Lambda(params, body)
