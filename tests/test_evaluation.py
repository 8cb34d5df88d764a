from hypothesis import given, strategies as st

from lispy.evaluation.evaluator import eval_value, evaluate
from lispy.reader.parser import parse
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.types.values import Builtin, Error, Number, QExpr, SExpr


@given(st.integers())
def test_numbers_evaluate_to_themselves(n):
    assert eval_value(Environment(), Number(n)) == Number(n)


def test_inert_values_evaluate_to_themselves(env):
    q = QExpr([Symbol("undefined"), SExpr([Symbol("+"), Number(1)])])
    assert eval_value(env, q) is q
    err = Error("earlier failure")
    assert eval_value(env, err) is err
    plus = env.get("+")
    assert eval_value(env, plus) == plus


def test_symbol_resolves_through_environment(env):
    env.put("x", Number(4))
    assert eval_value(env, Symbol("x")) == Number(4)


def test_unbound_symbol(env):
    assert eval_value(env, Symbol("nope")) == Error("Unbound Symbol 'nope'")


def test_empty_sexpr_is_unit(env):
    assert eval_value(env, SExpr()) == SExpr()


def test_singleton_sexpr_unwraps(env):
    assert eval_value(env, SExpr([Number(5)])) == Number(5)
    assert eval_value(env, SExpr([SExpr([Number(5)])])) == Number(5)


def test_singleton_function_is_not_called(env):
    assert eval_value(env, SExpr([Symbol("+")])) == env.get("+")


def test_operator_must_be_a_function(env):
    result = evaluate(env, parse("1 2 3"))
    assert result == Error("S-Expression starts with incorrect type. Got Number, Expected Function.")


def test_operator_type_named_for_lists(env):
    result = evaluate(env, parse("{1} 2"))
    assert result == Error("S-Expression starts with incorrect type. Got Q-Expression, Expected Function.")


def test_nested_arithmetic(env):
    assert evaluate(env, parse("* 10 (+ 1 5)")) == Number(60)


def test_first_error_short_circuits(env):
    calls = []

    def boom(_, args):
        calls.append(args)
        return Error("boom was called")

    env.put("boom", Builtin("boom", boom))
    result = evaluate(env, parse("+ 1 (/ 1 0) (boom 1)"))
    assert result == Error("Division By Zero!")
    assert calls == []


def test_first_error_by_position_wins(env):
    assert evaluate(env, parse("+ (/ 1 0) y")) == Error("Division By Zero!")
    assert evaluate(env, parse("+ y (/ 1 0)")) == Error("Unbound Symbol 'y'")


def test_function_never_sees_error_arguments(env):
    seen = []
    env.put("spy", Builtin("spy", lambda _, args: seen.append(args) or SExpr()))
    result = evaluate(env, parse("spy 1 undefined-name"))
    assert result == Error("Unbound Symbol 'undefined-name'")
    assert seen == []


def test_evaluation_does_not_mutate_input(env):
    expr = SExpr([Symbol("+"), Number(1), SExpr([Symbol("*"), Number(2), Number(3)])])
    before = repr(expr)
    assert eval_value(env, expr) == Number(7)
    assert repr(expr) == before
