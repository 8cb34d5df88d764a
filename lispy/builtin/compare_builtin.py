"""Comparison and conditional builtins. Truth is Number(1), falsehood Number(0)."""
from __future__ import annotations

import operator
from typing import Callable

from lispy.builtin.checks import expect_all, expect_count, expect_type
from lispy.evaluation.evaluator import eval_value
from lispy.types.environment import Environment
from lispy.types.values import Number, QExpr, SExpr, Value


def _ordering(name: str, op: Callable[[int, int], bool]):
    def compare(env: Environment, args: list[Value]) -> Value:
        expect_count(name, args, 2)
        expect_all(name, args, Number)
        return Number(int(op(args[0].value, args[1].value)))

    compare.__name__ = f"compare_{op.__name__}"
    compare.__doc__ = f"({name} a b) on two Numbers."
    return compare


gt = _ordering(">", operator.gt)
lt = _ordering("<", operator.lt)
gte = _ordering(">=", operator.ge)
lte = _ordering("<=", operator.le)


def equals(env: Environment, args: list[Value]) -> Value:
    """Structural equality of any two values."""
    expect_count("==", args, 2)
    return Number(int(args[0] == args[1]))


def not_equals(env: Environment, args: list[Value]) -> Value:
    expect_count("!=", args, 2)
    return Number(int(args[0] != args[1]))


def if_builtin(env: Environment, args: list[Value]) -> Value:
    """(if cond {then} {else}): evaluate one branch; any non-zero cond is true."""
    expect_count("if", args, 3)
    expect_type("if", args, 0, Number)
    expect_type("if", args, 1, QExpr)
    expect_type("if", args, 2, QExpr)
    branch = args[1] if args[0].value != 0 else args[2]
    return eval_value(env, SExpr(branch.cells))
