"""Construction of Error values from printf-style templates.

Messages are rendered once, at construction, and clipped to the configured
limit so an oversized interpolation can never fail the caller.
"""

from __future__ import annotations

from lispy.config import error_message_limit
from lispy.types.values import Error


def render(fmt: str, *args) -> str:
    """Interpolate `args` into `fmt` and clip to the message limit."""
    if args:
        try:
            message = fmt % args
        except (TypeError, ValueError):
            # Mismatched template: keep the template and append the raw values
            message = " ".join([fmt, *map(str, args)])
    else:
        message = fmt
    limit = error_message_limit()
    if len(message) > limit:
        message = message[:limit]
    return message


def make_error(fmt: str, *args) -> Error:
    return Error(render(fmt, *args))


# --- Message templates shared by the evaluator and builtins ---
UNBOUND_SYMBOL = "Unbound Symbol '%s'"
BAD_OPERATOR = "S-Expression starts with incorrect type. Got %s, Expected Function."
WRONG_COUNT = "Function '%s' passed incorrect number of arguments. Got %i, Expected %i."
TOO_FEW = "Function '%s' passed incorrect number of arguments. Got %i, Expected at least %i."
WRONG_TYPE = "Function '%s' passed incorrect type for argument %i. Got %s, Expected %s."
EMPTY_LIST = "Function '%s' passed {} for argument %i."
DIVISION_BY_ZERO = "Division By Zero!"
DEF_COUNT = "Function '%s' passed incorrect number of values for symbols. Got %i, Expected %i."
DEF_NON_SYMBOL = "Function '%s' cannot define non-symbol. Got %s, Expected Symbol."
LAMBDA_TOO_MANY = "Function passed too many arguments. Got %i, Expected %i."
LAMBDA_TOO_FEW = "Function passed too few arguments. Got %i, Expected %i."
INVALID_NUMBER = "invalid number '%s'"
RECURSION_DEPTH = "maximum recursion depth exceeded"
