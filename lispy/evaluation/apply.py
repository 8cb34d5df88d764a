"""Application engine for Lispy.

Centralizes function application so the evaluator and builtins that call
back into user code (eval, if) share one set of rules:
- Builtins are invoked with the calling environment and their arguments;
  a validation failure raised by the builtin becomes an Error value here.
- Lambdas bind every formal in a fresh scope whose parent is the closure's
  defining environment; any arity mismatch is an Error.
"""

from __future__ import annotations

import logging
from typing import Callable, assert_never

from lispy.diagnostics import make_error, LAMBDA_TOO_FEW, LAMBDA_TOO_MANY
from lispy.errors import LispyBuiltinError
from lispy.types.environment import Environment
from lispy.types.values import Builtin, Function, Lambda, SExpr, Value, copy_value

logger = logging.getLogger(__name__)

EvaluatorFn = Callable[[Environment, Value], Value]


def apply_lambda(fn: Lambda, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply a Lambda value to already-evaluated arguments.

    Parameters:
    - fn: The Lambda being applied.
    - args: The argument values, one per formal.
    - evaluate_fn: Evaluator used to reduce the body.

    The call scope is discarded on return; only closures created inside the
    body keep it alive.
    """
    given, expected = len(args), len(fn.formals)
    if given > expected:
        return make_error(LAMBDA_TOO_MANY, given, expected)
    if given < expected:
        return make_error(LAMBDA_TOO_FEW, given, expected)

    scope = Environment(outer=fn.env)
    for formal, arg in zip(fn.formals, args):
        scope.put(formal, arg)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("call (\\ {%s}) with %d argument(s)", " ".join(map(str, fn.formals)), given)

    body = SExpr(copy_value(fn.body).cells)
    return evaluate_fn(scope, body)


def call(env: Environment, fn: Function, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply either a Builtin or a Lambda."""
    match fn:
        case Builtin():
            try:
                return fn.fn(env, args)
            except LispyBuiltinError as exc:
                logger.debug("builtin '%s' rejected its arguments: %s", fn.name, exc)
                return exc.to_value()
        case Lambda():
            return apply_lambda(fn, args, evaluate_fn)
        case _:
            assert_never(fn)
