"""Core evaluator for the Lispy interpreter.

A recursive tree walk: symbols resolve through the environment, S-Expressions
reduce their children left to right and apply the first to the rest, and
every other value is already in normal form. The first Error met while
reducing a list stops the walk and becomes the result.
"""

from __future__ import annotations

from typing import assert_never

from lispy.diagnostics import make_error, BAD_OPERATOR
from lispy.evaluation.apply import call
from lispy.evaluation.read import read_value
from lispy.reader.ast import AstNode
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.types.values import (
    Builtin, Error, Lambda, Number, QExpr, SExpr, Value, is_function, type_name,
)


def eval_sexpr(env: Environment, expr: SExpr) -> Value:
    if not expr.cells:
        return expr

    cells: list[Value] = []
    for cell in expr.cells:
        result = eval_value(env, cell)
        if isinstance(result, Error):
            return result
        cells.append(result)

    if len(cells) == 1:
        return cells[0]

    head, *args = cells
    if not is_function(head):
        return make_error(BAD_OPERATOR, type_name(head))
    return call(env, head, args, eval_value)


def eval_value(env: Environment, expr: Value) -> Value:
    """Reduce `expr` to a value in `env`."""
    match expr:
        case Symbol():
            return env.get(expr)
        case SExpr():
            return eval_sexpr(env, expr)
        case Number() | Error() | Builtin() | Lambda() | QExpr():
            return expr
        case _:
            assert_never(expr)


def evaluate(env: Environment, root: AstNode) -> Value:
    """Entry point for the read-eval-print loop: read `root` and evaluate it."""
    return eval_value(env, read_value(root))
