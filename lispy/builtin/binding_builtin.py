"""Binding builtins: def / = and the lambda constructor."""
from __future__ import annotations

from typing import Callable

from lispy.builtin.checks import expect_at_least, expect_count, expect_type
from lispy.diagnostics import DEF_COUNT, DEF_NON_SYMBOL
from lispy.errors import LispyArityError, LispyTypeError
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.types.values import QExpr, SExpr, Value, make_lambda, type_name


def _expect_symbols(name: str, formals: QExpr) -> list[Symbol]:
    for sym in formals.cells:
        if not isinstance(sym, Symbol):
            raise LispyTypeError(DEF_NON_SYMBOL, name, type_name(sym))
    return formals.cells


def _bind(
    name: str,
    args: list[Value],
    put: Callable[[Symbol, Value], None],
) -> Value:
    """(name {a b ...} va vb ...): validate everything, then bind pairwise."""
    expect_at_least(name, args, 1)
    expect_type(name, args, 0, QExpr)
    symbols = _expect_symbols(name, args[0])
    values = args[1:]
    if len(symbols) != len(values):
        raise LispyArityError(DEF_COUNT, name, len(values), len(symbols))
    for sym, value in zip(symbols, values):
        put(sym, value)
    return SExpr()


def define_global(env: Environment, args: list[Value]) -> Value:
    """(def {x y} 1 2) binds in the outermost scope."""
    return _bind("def", args, env.put_global)


def define_alias(env: Environment, args: list[Value]) -> Value:
    return _bind("define", args, env.put_global)


def define_local(env: Environment, args: list[Value]) -> Value:
    """(= {x} 1) binds in the calling scope only."""
    return _bind("=", args, env.put)


def lambda_builtin(env: Environment, args: list[Value]) -> Value:
    """(\\ {x y} {+ x y}) => a closure over the calling scope."""
    expect_count("\\", args, 2)
    expect_type("\\", args, 0, QExpr)
    expect_type("\\", args, 1, QExpr)
    _expect_symbols("\\", args[0])
    return make_lambda(args[0], args[1], env)
