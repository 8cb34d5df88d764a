"""Q-Expression builtins: construction, access and evaluation of quoted lists."""
from __future__ import annotations

from lispy.builtin.checks import expect_all, expect_at_least, expect_count, expect_not_empty, expect_type
from lispy.evaluation.evaluator import eval_value
from lispy.types.environment import Environment
from lispy.types.values import Number, QExpr, SExpr, Value


def list_builtin(env: Environment, args: list[Value]) -> Value:
    """(list a b ...) => {a b ...}"""
    return QExpr(list(args))


def head(env: Environment, args: list[Value]) -> Value:
    """(head {a b ...}) => {a}"""
    expect_count("head", args, 1)
    expect_type("head", args, 0, QExpr)
    expect_not_empty("head", args, 0)
    return QExpr(args[0].cells[:1])


def tail(env: Environment, args: list[Value]) -> Value:
    """(tail {a b ...}) => {b ...}"""
    expect_count("tail", args, 1)
    expect_type("tail", args, 0, QExpr)
    expect_not_empty("tail", args, 0)
    return QExpr(args[0].cells[1:])


def init(env: Environment, args: list[Value]) -> Value:
    """(init {a ... y z}) => {a ... y}"""
    expect_count("init", args, 1)
    expect_type("init", args, 0, QExpr)
    expect_not_empty("init", args, 0)
    return QExpr(args[0].cells[:-1])


def join(env: Environment, args: list[Value]) -> Value:
    """Concatenate one or more Q-Expressions."""
    expect_at_least("join", args, 1)
    expect_all("join", args, QExpr)
    cells: list[Value] = []
    for q in args:
        cells.extend(q.cells)
    return QExpr(cells)


def cons(env: Environment, args: list[Value]) -> Value:
    """(cons a {b c}) => {a b c}"""
    expect_count("cons", args, 2)
    expect_type("cons", args, 1, QExpr)
    return QExpr([args[0], *args[1].cells])


def length(env: Environment, args: list[Value]) -> Value:
    expect_count("len", args, 1)
    expect_type("len", args, 0, QExpr)
    return Number(len(args[0].cells))


def eval_builtin(env: Environment, args: list[Value]) -> Value:
    """Evaluate a Q-Expression's contents as an S-Expression in the calling scope."""
    expect_count("eval", args, 1)
    expect_type("eval", args, 0, QExpr)
    return eval_value(env, SExpr(args[0].cells))
