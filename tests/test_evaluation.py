import math

import pytest
from littlelisp.types import Environment, Lambda
from littlelisp.types.atom import number, string, identifier
from littlelisp.eval import evaluate
from littlelisp import errors

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    env = Environment()
    env.define("+", lambda _, args: args[0] + args[1])
    env.define("-", lambda _, args: args[0] - args[1])
    env.define("x", 42.0)
    env.define("y", 100.0)
    return env


def sym(name):
    return identifier(name)

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(number(1), env) == 1.0
    assert evaluate(number(3.14), env) == 3.14
    assert evaluate(string("hello"), env) == "hello"


def test_identifier_lookup(env):
    assert evaluate(sym("x"), env) == 42.0
    assert evaluate(sym("y"), env) == 100.0
    with pytest.raises(errors.LispUnboundIdentifier):
        evaluate(sym("z"), env)


def test_repeated_evaluation_is_stable(env):
    for expr in (number(7), string("s"), sym("x")):
        assert evaluate(expr, env) == evaluate(expr, env)


def test_simple_expression(env):
    expr = [sym("+"), number(1), number(2)]
    assert evaluate(expr, env) == 3.0


def test_empty_list(env):
    assert evaluate([], env) == []


def test_non_callable_head_yields_data_list(env):
    expr = [number(1), sym("x"), [sym("+"), number(1), number(1)]]
    assert evaluate(expr, env) == [1.0, 42.0, 2.0]


def test_lambda_simple(env):
    expr = [sym("lambda"), [sym("a"), sym("b")], [sym("+"), sym("a"), sym("b")]]
    lam = evaluate(expr, env)
    assert isinstance(lam, Lambda)
    assert lam.formals == ["a", "b"]
    assert lam.env is env
    result = evaluate([expr, number(2), number(3)], env)
    assert result == 5.0


def test_lambda_returns_last_body_form(env):
    expr = [
        [sym("lambda"), [sym("a")],
         [sym("define"), sym("b"), [sym("+"), sym("a"), number(1)]],
         [sym("+"), sym("b"), sym("b")]],
        number(4),
    ]
    assert evaluate(expr, env) == 10.0
    # the define happened in the call frame
    assert "b" not in env


def test_lambda_arity_is_lenient(env):
    lam = [sym("lambda"), [sym("a"), sym("b")], sym("b")]
    assert evaluate([lam, number(1)], env) is None
    first = [sym("lambda"), [sym("a")], sym("a")]
    assert evaluate([first, number(1), number(2), number(3)], env) == 1.0


def test_lambda_without_body(env):
    assert evaluate([[sym("lambda"), []]], env) is None


def test_define_and_lookup(env):
    expr = [sym("define"), sym("w"), number(100)]
    assert evaluate(expr, env) == 100.0
    assert evaluate(sym("w"), env) == 100.0


def test_if_expression(env):
    expr = [sym("if"), number(1), number(1), number(2)]
    assert evaluate(expr, env) == 1.0

    expr = [sym("if"), number(0), number(1), number(2)]
    assert evaluate(expr, env) == 2.0

    expr = [sym("if"), string(""), number(1), number(2)]
    assert evaluate(expr, env) == 2.0

    expr = [sym("if"), [], number(1), number(2)]
    assert evaluate(expr, env) == 2.0

    # no else branch
    assert evaluate([sym("if"), number(0), number(1)], env) is None


def test_if_only_evaluates_one_branch(env):
    expr = [sym("if"), number(1), sym("x"), sym("unbound")]
    assert evaluate(expr, env) == 42.0


def test_let_sequential_bindings(env):
    expr = [
        sym("let"),
        [[sym("a"), number(1)], [sym("b"), [sym("+"), sym("a"), number(1)]]],
        sym("b"),
    ]
    assert evaluate(expr, env) == 2.0
    assert "a" not in env


def test_default_environment_has_builtins():
    assert evaluate([sym("*"), number(6), number(7)]) == 42.0
    assert math.isinf(evaluate([sym("/"), number(1), number(0)]))


def test_errors(env):
    # unbound identifier
    with pytest.raises(errors.LispUnboundIdentifier):
        evaluate(sym("not_defined"), env)

    with pytest.raises(errors.LispUnboundIdentifier):
        evaluate([sym("not_defined"), number(1)], env)

    # invalid special form usage
    with pytest.raises(errors.LispSyntaxError):
        evaluate([sym("define")], env)

    with pytest.raises(errors.LispSyntaxError):
        evaluate([sym("define"), number(1), number(2)], env)

    with pytest.raises(errors.LispSyntaxError):
        evaluate([sym("let"), [sym("a")], sym("a")], env)

    with pytest.raises(errors.LispSyntaxError):
        evaluate([sym("lambda"), [number(1)], number(1)], env)

    # all of them are LispErrors
    assert issubclass(errors.LispUnboundIdentifier, errors.LispError)
    assert issubclass(errors.LispSyntaxError, errors.LispError)
