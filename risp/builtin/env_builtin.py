"""Built-in procedures for the risp runtime environment.

Every builtin takes the raw argument expressions and the caller's
environment, and evaluates only what it needs. Arithmetic stays in the
IEEE-754 float domain: division by zero, domain errors and overflow give
inf or NaN rather than raising.
"""
from __future__ import annotations

import math
from typing import Callable

from risp import LispValue, SExpression
from risp.errors import RispArityError
from risp.types.expression import Boolean, Number, TRUE, FALSE
from risp.types.environment import Environment
from risp.evaluation.evaluator import evaluate_number
from risp.evaluation.special_forms import SPECIAL_FORMS


def _truth(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def _check_exactly(form: str, args: list[SExpression], n: int) -> None:
    if len(args) != n:
        raise RispArityError(form, f"exactly {n}", len(args))


def _check_at_least(form: str, args: list[SExpression], n: int) -> None:
    if len(args) < n:
        raise RispArityError(form, f"at least {n}", len(args))


def _numbers(form: str, args: list[SExpression], env: Environment) -> list[float]:
    return [evaluate_number(arg, env, form) for arg in args]


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[SExpression], env: Environment) -> LispValue:
    """Sum of all arguments; 0 when there are none."""
    return Number(sum(_numbers("+", args, env)))


def sub(args: list[SExpression], env: Environment) -> LispValue:
    """First argument minus the sum of the rest."""
    _check_at_least("-", args, 2)
    first, *rest = _numbers("-", args, env)
    return Number(first - sum(rest))


def mul(args: list[SExpression], env: Environment) -> LispValue:
    """Product of all arguments; 1 when there are none."""
    result = 1.0
    for x in _numbers("*", args, env):
        result *= x
    return Number(result)


def ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def div(args: list[SExpression], env: Environment) -> LispValue:
    _check_exactly("/", args, 2)
    a, b = _numbers("/", args, env)
    return Number(ieee_div(a, b))


def ieee_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        # 0 to a negative power, or a negative base to a fractional one
        return math.inf if base == 0.0 else math.nan


def power(args: list[SExpression], env: Environment) -> LispValue:
    _check_exactly("pow", args, 2)
    base, exponent = _numbers("pow", args, env)
    return Number(ieee_pow(base, exponent))


# -------------------------------
# Unary math
# -------------------------------
def _ieee_log(fn: Callable[[float], float]) -> Callable[[float], float]:
    def log(x: float) -> float:
        if x == 0.0:
            return -math.inf
        if x < 0.0 or math.isnan(x):
            return math.nan
        return fn(x)
    return log


def _ieee(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        try:
            return fn(x)
        except OverflowError:
            return math.inf
        except ValueError:
            return math.nan
    return wrapped


UNARY_MATH: dict[str, Callable[[float], float]] = {
    "cos": _ieee(math.cos),
    "sin": _ieee(math.sin),
    "tan": _ieee(math.tan),
    "acos": _ieee(math.acos),
    "asin": _ieee(math.asin),
    "atan": _ieee(math.atan),
    "log": _ieee_log(math.log),
    "log2": _ieee_log(math.log2),
    "log10": _ieee_log(math.log10),
    "sqrt": _ieee(math.sqrt),
    "exp": _ieee(math.exp),
    "abs": math.fabs,
}


def unary(name: str, fn: Callable[[float], float]):
    """Builtin applying `fn` to exactly one numeric argument."""
    def builtin(args: list[SExpression], env: Environment) -> LispValue:
        _check_exactly(name, args, 1)
        return Number(fn(evaluate_number(args[0], env, name)))
    builtin.__name__ = name
    return builtin


# -------------------------------
# Equality (raw, unevaluated operands)
# -------------------------------
def equals(args: list[SExpression], env: Environment) -> LispValue:
    """True if the first argument is structurally equal to every other one."""
    _check_at_least("=", args, 2)
    first = args[0]
    return _truth(all(first == other for other in args[1:]))


def not_equals(args: list[SExpression], env: Environment) -> LispValue:
    """True if any argument differs structurally from the first."""
    _check_at_least("!=", args, 2)
    first = args[0]
    return _truth(any(first != other for other in args[1:]))


# -------------------------------
# Ordering
# -------------------------------
# > and >= evaluate to numbers; < and <= compare the raw expressions under
# the structural order and never evaluate.
def gt(args: list[SExpression], env: Environment) -> LispValue:
    _check_at_least(">", args, 2)
    xs = _numbers(">", args, env)
    return _truth(all(a > b for a, b in zip(xs, xs[1:])))


def gte(args: list[SExpression], env: Environment) -> LispValue:
    _check_at_least(">=", args, 2)
    xs = _numbers(">=", args, env)
    return _truth(all(a >= b for a, b in zip(xs, xs[1:])))


def lt(args: list[SExpression], env: Environment) -> LispValue:
    _check_at_least("<", args, 2)
    return _truth(all(a < b for a, b in zip(args, args[1:])))


def lte(args: list[SExpression], env: Environment) -> LispValue:
    _check_at_least("<=", args, 2)
    return _truth(all(a <= b for a, b in zip(args, args[1:])))


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.define_variable("pi", Number(math.pi))
    for name, form in SPECIAL_FORMS.items():
        env.define_procedure(name, form)
    for name, proc in {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "pow": power,
        "=": equals,
        "!=": not_equals,
        ">": gt,
        ">=": gte,
        "<": lt,
        "<=": lte,
    }.items():
        env.define_procedure(name, proc)
    for name, fn in UNARY_MATH.items():
        env.define_procedure(name, unary(name, fn))


def standard_env() -> Environment:
    """Fresh top-level environment with every builtin and `pi` bound."""
    env = Environment()
    register(env)
    return env
