import pytest

from lispy.builtin import make_builtin
from lispy.diagnostics import make_error
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.types.values import (
    Error, Lambda, Number, QExpr, SExpr,
    copy_value, make_lambda, make_qexpr, make_sexpr, type_name,
)


def test_copy_is_deep_for_lists():
    original = QExpr([Number(1), QExpr([Number(2)])])
    copied = copy_value(original)
    assert copied == original
    assert copied is not original
    assert copied.cells[1] is not original.cells[1]

    copied.cells[1].cells.append(Number(3))
    assert original == QExpr([Number(1), QExpr([Number(2)])])


def test_copy_shares_functions():
    plus = make_builtin("+")
    assert copy_value(plus) is plus

    lam = make_lambda(make_qexpr(Symbol("x")), make_qexpr(Symbol("x")), Environment())
    assert copy_value(lam) is lam


def test_copy_preserves_tag():
    assert isinstance(copy_value(make_sexpr(Number(1))), SExpr)
    assert isinstance(copy_value(make_qexpr(Number(1))), QExpr)
    assert copy_value(Error("boom")) == Error("boom")
    assert copy_value(Symbol("x")) == Symbol("x")


@pytest.mark.parametrize(
    "value,expected",
    [
        (Number(1), "Number"),
        (Error("e"), "Error"),
        (Symbol("s"), "Symbol"),
        (make_builtin("head"), "Function"),
        (Lambda([], QExpr(), Environment()), "Function"),
        (SExpr(), "S-Expression"),
        (QExpr(), "Q-Expression"),
    ],
)
def test_type_name(value, expected):
    assert type_name(value) == expected


def test_lists_of_different_kinds_are_not_equal():
    assert SExpr([Number(1)]) != QExpr([Number(1)])


def test_lambda_equality_ignores_environment():
    formals, body = make_qexpr(Symbol("x")), make_qexpr(Symbol("x"))
    assert make_lambda(formals, body, Environment()) == make_lambda(formals, body, Environment())


def test_make_lambda_copies_body():
    body = make_qexpr(Symbol("+"), Symbol("x"), Number(1))
    lam = make_lambda(make_qexpr(Symbol("x")), body, Environment())
    body.cells.clear()
    assert len(lam.body) == 3


def test_make_error_formats_message():
    err = make_error("Function '%s' passed %i arguments.", "head", 2)
    assert err == Error("Function 'head' passed 2 arguments.")


def test_make_error_truncates_long_messages():
    err = make_error("Unbound Symbol '%s'", "x" * 2000)
    assert len(err.message) == 512
    assert err.message.startswith("Unbound Symbol 'xxx")


def test_make_error_limit_is_configurable(monkeypatch):
    monkeypatch.setenv("LISPY_ERROR_LIMIT", "10")
    assert make_error("%s", "abcdefghijklmnop").message == "abcdefghij"


def test_make_error_ignores_bad_limit(monkeypatch):
    monkeypatch.setenv("LISPY_ERROR_LIMIT", "lots")
    assert len(make_error("%s", "y" * 600).message) == 512


def test_make_error_survives_template_mismatch():
    assert make_error("%i", "abc").message == "%i abc"


def test_make_builtin_unknown_name():
    from lispy.errors import LispyError

    with pytest.raises(LispyError):
        make_builtin("no-such-builtin")
