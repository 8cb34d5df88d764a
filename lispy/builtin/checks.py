"""Argument validation shared by the builtins.

Each check raises the matching LispyBuiltinError; the application engine
turns it into an Error value, so a builtin body only runs on valid input.
"""

from __future__ import annotations

from lispy.diagnostics import EMPTY_LIST, TOO_FEW, WRONG_COUNT, WRONG_TYPE
from lispy.errors import LispyArityError, LispyDomainError, LispyTypeError
from lispy.types.values import Number, QExpr, Value, type_name

_TYPE_NAMES: dict[type, str] = {
    Number: "Number",
    QExpr: "Q-Expression",
}


def expect_count(name: str, args: list[Value], count: int) -> None:
    if len(args) != count:
        raise LispyArityError(WRONG_COUNT, name, len(args), count)


def expect_at_least(name: str, args: list[Value], count: int) -> None:
    if len(args) < count:
        raise LispyArityError(TOO_FEW, name, len(args), count)


def expect_type(name: str, args: list[Value], index: int, cls: type) -> None:
    if not isinstance(args[index], cls):
        raise LispyTypeError(
            WRONG_TYPE, name, index, type_name(args[index]), _TYPE_NAMES[cls]
        )


def expect_all(name: str, args: list[Value], cls: type) -> None:
    for i in range(len(args)):
        expect_type(name, args, i, cls)


def expect_not_empty(name: str, args: list[Value], index: int) -> None:
    if len(args[index].cells) == 0:
        raise LispyDomainError(EMPTY_LIST, name, index)
