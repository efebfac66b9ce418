import pytest

from risp.errors import (
    RispArityError,
    RispNotCallable,
    RispTypeError,
    RispUndefinedProcedure,
)
from risp.evaluation.evaluator import evaluate
from risp.types.expression import Number, List, TRUE, FALSE
from risp.types.lambda_fn import Lambda
from risp.types.symbol import Symbol


# -----------------------------------------------------
# Atoms and symbols
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(Number(1), env) == Number(1)
    assert evaluate(TRUE, env) is TRUE
    assert evaluate(FALSE, env) is FALSE


def test_symbol_lookup(run):
    run("(let x 42)")
    assert run("x") == Number(42)


def test_unresolved_symbol_evaluates_to_itself(run):
    assert run("asdf") == Symbol("asdf")


def test_builtin_name_evaluates_to_symbol(run):
    assert run("+") == Symbol("+")
    assert run("if") == Symbol("if")


def test_empty_list_is_an_arity_error(run):
    with pytest.raises(RispArityError):
        run("()")


def test_non_symbol_head_is_not_callable(run):
    with pytest.raises(RispNotCallable) as info:
        run("(1 2)")
    assert info.value.head == Number(1)
    with pytest.raises(RispNotCallable):
        run("((fn (x) x) 1)")


def test_undefined_procedure(run):
    with pytest.raises(RispUndefinedProcedure) as info:
        run("(foo 1)")
    assert info.value.name == "foo"


def test_calling_a_non_lambda_value(run):
    run("(let v 3)")
    with pytest.raises(RispUndefinedProcedure):
        run("(v)")


# -----------------------------------------------------
# if
# -----------------------------------------------------

def test_if_takes_false_branch_without_touching_true_branch(run):
    assert run("(if (< 10 11 9) asdf (+ 1 (- 3 2)))") == Number(2)


def test_if_skips_untaken_branch_errors(run):
    assert run("(if true 1 (undefined-proc))") == Number(1)
    assert run("(if false (undefined-proc) 2)") == Number(2)


def test_if_ignores_trailing_elements(run):
    assert run("(if false 1 2 3)") == Number(2)


def test_if_requires_boolean_predicate(run):
    with pytest.raises(RispTypeError):
        run("(if 1 2 3)")


def test_if_arity(run):
    with pytest.raises(RispArityError):
        run("(if true 1)")


# -----------------------------------------------------
# let
# -----------------------------------------------------

def test_let_binds_and_returns_value(run):
    assert run("(let x (+ 2 3))") == Number(5)
    assert run("x") == Number(5)


def test_let_ignores_extra_arguments(run):
    assert run("(let x 1 2 3)") == Number(1)


def test_let_requires_literal_symbol(run):
    with pytest.raises(RispTypeError):
        run("(let (x) 1)")


def test_let_arity(run):
    with pytest.raises(RispArityError):
        run("(let x)")


def test_let_does_not_hide_builtin_in_call_position(run):
    run("(let + 5)")
    assert run("+") == Number(5)
    assert run("(+ 1 2)") == Number(3)


# -----------------------------------------------------
# fn and application
# -----------------------------------------------------

def test_fn_builds_lambda_without_environment(run):
    lam = run("(fn (a b) (+ a b))")
    assert isinstance(lam, Lambda)
    assert lam.params == List([Symbol("a"), Symbol("b")])
    assert lam.body == List([Symbol("+"), Symbol("a"), Symbol("b")])
    assert not hasattr(lam, "env")


def test_fn_requires_single_body(run):
    with pytest.raises(RispArityError):
        run("(fn (x) x x)")
    with pytest.raises(RispArityError):
        run("(fn (x))")


def test_lambda_application(run):
    run("(let add (fn (a b) (+ a b)))")
    assert run("(add 2 3)") == Number(5)


def test_lambda_arity_mismatch(run):
    run("(let add (fn (a b) (+ a b)))")
    with pytest.raises(RispArityError):
        run("(add 1)")
    with pytest.raises(RispArityError):
        run("(add 1 2 3)")


def test_parameter_list_checked_at_application(run):
    run("(let bad (fn x x))")
    with pytest.raises(RispTypeError):
        run("(bad 1)")
    run("(let worse (fn (1) 1))")
    with pytest.raises(RispTypeError):
        run("(worse 2)")


def test_free_identifiers_resolve_in_callers_scope(run):
    run("(let x 10)")
    run("(let addx (fn (y) (+ x y)))")
    run("(let x 99)")
    assert run("(addx 1)") == Number(100)


def test_scope_is_dynamic_not_lexical(run):
    run("(let f (fn (y) (+ z y)))")
    run("(let g (fn (z) (f 1)))")
    assert run("(g 5)") == Number(6)


def test_unused_arguments_are_never_evaluated(run):
    run("(let first (fn (a b) a))")
    assert run("(first 1 (undefined-proc))") == Number(1)


def test_parameter_is_bound_to_raw_syntax(run):
    run("(let quoteish (fn (e) e))")
    assert run("(quoteish (+ 1 2))") == List([Symbol("+"), Number(1), Number(2)])


def test_arguments_are_evaluated_each_time_they_are_used(run):
    run("(let n 0)")
    run("(let twice (fn (e) (+ e e)))")
    # each use of e re-runs the let inside the call's own scope
    assert run("(twice (let n (+ n 1)))") == Number(3)
    assert run("n") == Number(0)


def test_let_inside_lambda_binds_in_call_scope(run):
    run("(let setter (fn (v) (let inner v)))")
    assert run("(setter 7)") == Number(7)
    assert run("inner") == Symbol("inner")


def test_nested_call_by_name_arguments(run):
    run("(let inc (fn (a) (+ a 1)))")
    run("(let wrap (fn (b) (inc b)))")
    assert run("(wrap (* 2 3))") == Number(7)


def test_argument_mentioning_callee_parameter_does_not_loop(run):
    run("(let inc (fn (a) (+ a 1)))")
    run("(let wrap (fn (a) (inc (+ a 1))))")
    # inside inc, `a` names the argument `(+ a 1)` itself
    with pytest.raises(RispTypeError) as info:
        run("(wrap 5)")
    assert info.value.expected == "an argument that settles"
    assert run("(inc 1)") == Number(2)


def test_repeated_evaluation_is_stable(run):
    run("(let sq (fn (v) (* v v)))")
    results = {str(run("(sq (+ 1 2))")) for _ in range(3)}
    assert results == {"9"}
