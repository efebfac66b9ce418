from risp import SExpression, LispValue
from risp.errors import RispArityError
from risp.types.environment import Environment
from risp.evaluation.evaluator import evaluate, evaluate_boolean


def if_form(tail: list[SExpression], env: Environment) -> LispValue:
    """
    (if predicate then else)
    Only the chosen branch is evaluated. Elements past the else branch are ignored.
    """
    if len(tail) < 3:
        raise RispArityError("if", "at least 3", len(tail))

    if evaluate_boolean(tail[0], env, "if"):
        return evaluate(tail[1], env)
    return evaluate(tail[2], env)
