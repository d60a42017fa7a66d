import pytest

from tinylisp.errors import ArityMismatch, NotCallable, UnboundVariable
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import parse
from tinylisp.types import FALSE, Builtin, Closure, Environment, Symbol, Void


def run(source, env):
    return evaluate(parse(source), env)


def test_self_evaluating_numbers(bare_env):
    assert evaluate(1.0, bare_env) == 1.0
    assert evaluate(3.14, bare_env) == 3.14


def test_symbol_lookup(bare_env):
    assert evaluate(Symbol("x"), bare_env) == 42.0
    with pytest.raises(UnboundVariable):
        evaluate(Symbol("z"), bare_env)


def test_quote_returns_data_unevaluated():
    empty = Environment()
    expr = [Symbol("quote"), [Symbol("a"), Symbol("b")]]
    assert evaluate(expr, empty) == [Symbol("a"), Symbol("b")]
    assert run("(quote undefined-name)", empty) == Symbol("undefined-name")


def test_if_picks_branch(env):
    env.define(Symbol("yes"), 1.0)
    env.define(Symbol("no"), 2.0)
    assert run("(if 1 yes no)", env) == 1.0
    assert run("(if #f yes no)", env) == 2.0


def test_if_false_marker_without_builtins():
    e = Environment()
    e.define(Symbol("no"), 2.0)
    assert evaluate([Symbol("if"), [Symbol("quote"), FALSE], Symbol("yes"), Symbol("no")], e) == 2.0


def test_if_zero_and_empty_list_are_true(env):
    assert run("(if 0 1 2)", env) == 1.0
    assert run("(if (quote ()) 1 2)", env) == 1.0


def test_if_does_not_evaluate_other_branch(env):
    assert run("(if 1 10 (undefined-procedure))", env) == 10.0
    assert run("(if #f (undefined-procedure) 20)", env) == 20.0


def test_if_without_alternative(env):
    assert run("(if #f 1)", env) is Void
    assert run("(if #t 1)", env) == 1.0


def test_define_returns_void_and_binds(env):
    assert run("(define y 5)", env) is Void
    assert env.lookup(Symbol("y")) == 5.0


def test_define_in_call_frame_shadows_outer(env):
    run("(define x 1)", env)
    result = run("((lambda (x) (define x 2) x) 5)", env)
    assert result == 2.0
    assert run("x", env) == 1.0


def test_define_in_body_does_not_leak(env):
    run("(define f (lambda () (define inner 3)))", env)
    run("(f)", env)
    with pytest.raises(UnboundVariable):
        run("inner", env)


def test_set_unbound_fails(env):
    with pytest.raises(UnboundVariable):
        run("(set! nope 1)", env)


def test_set_returns_assigned_value(env):
    run("(define counter 0)", env)
    assert run("(set! counter (+ counter 1))", env) == 1.0
    assert run("counter", env) == 1.0


def test_set_is_visible_through_shared_frame(env):
    run("(define make-counter (lambda () (begin (define n 0) (lambda () (set! n (+ n 1))))))", env)
    run("(define c (make-counter))", env)
    run("(define d (make-counter))", env)
    assert run("(c)", env) == 1.0
    assert run("(c)", env) == 2.0
    assert run("(d)", env) == 1.0


def test_set_from_inner_frame_updates_outer(env):
    run("(define total 0)", env)
    run("(define add! (lambda (v) (set! total (+ total v))))", env)
    run("(add! 3)", env)
    run("(add! 4)", env)
    assert run("total", env) == 7.0


def test_lambda_creates_closure_without_evaluating_body(env):
    closure = run("(lambda (a) (undefined a))", env)
    assert isinstance(closure, Closure)
    assert closure.params == [Symbol("a")]
    assert closure.env is env


def test_closure_persists_captured_environment(env):
    run("(define make_adder (lambda (n) (lambda (x) (+ x n))))", env)
    assert run("((make_adder 3) 4)", env) == 7.0


def test_lexical_not_dynamic_scope(env):
    run("(define n 100)", env)
    run("(define get-n (lambda () n))", env)
    assert run("((lambda (n) (get-n)) 1)", env) == 100.0


def test_recursion(env):
    run("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))", env)
    assert run("(fact 10)", env) == 3628800.0


def test_begin_returns_last(env):
    assert run("(begin 1 2 3)", env) == 3.0
    assert run("(begin)", env) is Void


def test_begin_evaluates_in_order(env):
    run("(define v 1)", env)
    assert run("(begin (set! v (* v 10)) (set! v (+ v 2)) v)", env) == 12.0


def test_application_evaluates_head(env):
    assert run("((if #t + *) 2 3)", env) == 5.0


def test_builtin_receives_argument_list():
    received = []
    e = Environment()
    e.define(Symbol("probe"), Builtin("probe", lambda args: received.append(args) or 99.0))
    assert evaluate([Symbol("probe"), 1.0, [Symbol("quote"), Symbol("s")]], e) == 99.0
    assert received == [[1.0, Symbol("s")]]


def test_not_callable(env):
    with pytest.raises(NotCallable) as info:
        run("(1 2 3)", env)
    assert info.value.value == 1.0
    with pytest.raises(NotCallable):
        run("((quote a) 1)", env)


def test_empty_list_is_not_callable(env):
    with pytest.raises(NotCallable):
        run("()", env)


def test_closure_arity_mismatch(env):
    run("(define two (lambda (a b) a))", env)
    with pytest.raises(ArityMismatch):
        run("(two 1)", env)
    with pytest.raises(ArityMismatch):
        run("(two 1 2 3)", env)


def test_special_form_keyword_only_in_head_position(env):
    run("(define if 5)", env)
    assert run("if", env) == 5.0
    assert run("(if #f 1 2)", env) == 2.0


def test_special_forms_cannot_be_shadowed_by_user_bindings(env):
    run("(define quote (lambda (a) 0))", env)
    assert run("(quote z)", env) == Symbol("z")


def test_errors_do_not_roll_back_earlier_effects(env):
    with pytest.raises(UnboundVariable):
        run("(begin (define kept 1) (undefined))", env)
    assert run("kept", env) == 1.0
