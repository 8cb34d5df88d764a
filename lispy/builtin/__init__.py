"""Builtin dispatch table for the Lispy runtime environment.

Maps each primitive's name to its implementation. `register` installs them
as Builtin values into an environment; `make_builtin` builds a single one.
"""
from __future__ import annotations

from lispy import BuiltinFn
from lispy.builtin import arithmetic, binding_builtin, compare_builtin, list_builtin
from lispy.errors import LispyError
from lispy.types.environment import Environment
from lispy.types.values import Builtin

BUILTINS: dict[str, BuiltinFn] = {
    # List functions
    "list": list_builtin.list_builtin,
    "head": list_builtin.head,
    "tail": list_builtin.tail,
    "init": list_builtin.init,
    "join": list_builtin.join,
    "cons": list_builtin.cons,
    "len": list_builtin.length,
    "eval": list_builtin.eval_builtin,
    # Arithmetic
    "+": arithmetic.add,
    "-": arithmetic.sub,
    "*": arithmetic.mul,
    "/": arithmetic.div,
    "%": arithmetic.mod,
    # Variables and functions
    "def": binding_builtin.define_global,
    "define": binding_builtin.define_alias,
    "=": binding_builtin.define_local,
    "\\": binding_builtin.lambda_builtin,
    # Comparison
    ">": compare_builtin.gt,
    "<": compare_builtin.lt,
    ">=": compare_builtin.gte,
    "<=": compare_builtin.lte,
    "==": compare_builtin.equals,
    "!=": compare_builtin.not_equals,
    "if": compare_builtin.if_builtin,
}


def make_builtin(name: str) -> Builtin:
    try:
        return Builtin(name, BUILTINS[name])
    except KeyError:
        raise LispyError(f"No builtin named {name!r}") from None


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update((name, make_builtin(name)) for name in BUILTINS)
