"""Tagged value model for Lispy.

Every runtime value is one of the variants below. The two list forms own
their children; function values share the callable (builtin) or closure
description (lambda) they refer to.

    Number   integer payload
    Error    rendered diagnostic message
    Symbol   unresolved identifier (lispy.types.symbol)
    Builtin  primitive function, dispatched by name
    Lambda   user function: formals, body, defining environment
    SExpr    expression list, evaluated on sight
    QExpr    quoted list, inert data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union, assert_never

from lispy import BuiltinFn
from lispy.types.symbol import Symbol

if TYPE_CHECKING:
    from lispy.types.environment import Environment


@dataclass
class Number:
    value: int


@dataclass
class Error:
    message: str


@dataclass
class Builtin:
    name: str
    fn: BuiltinFn = field(compare=False, repr=False)


@dataclass
class Lambda:
    """A user-defined function closing over the scope it was created in."""

    formals: list[Symbol]
    body: QExpr
    # Closures compare by formals and body only
    env: Environment = field(compare=False, repr=False)


@dataclass
class SExpr:
    cells: list[Value] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)


@dataclass
class QExpr:
    cells: list[Value] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)


Function = Union[Builtin, Lambda]
Value = Union[Number, Error, Symbol, Builtin, Lambda, SExpr, QExpr]


# --- Constructors ---
def make_number(n: int) -> Number:
    return Number(n)


def make_symbol(name: str) -> Symbol:
    return Symbol(name)


def make_sexpr(*cells: Value) -> SExpr:
    return SExpr(list(cells))


def make_qexpr(*cells: Value) -> QExpr:
    return QExpr(list(cells))


def make_lambda(formals: QExpr, body: QExpr, env: Environment) -> Lambda:
    """Build a closure from a Q-Expression of Symbols and a Q-Expression body."""
    return Lambda(list(formals.cells), copy_value(body), env)


# --- Structural helpers ---
def copy_value(v: Value) -> Value:
    """Deep-copy list structure; functions are shared, not duplicated."""
    match v:
        case Number(n):
            return Number(n)
        case Error(message):
            return Error(message)
        case Symbol():
            return Symbol(v.name)
        case Builtin() | Lambda():
            return v
        case SExpr(cells):
            return SExpr([copy_value(c) for c in cells])
        case QExpr(cells):
            return QExpr([copy_value(c) for c in cells])
        case _:
            assert_never(v)


def type_name(v: Value) -> str:
    match v:
        case Number():
            return "Number"
        case Error():
            return "Error"
        case Symbol():
            return "Symbol"
        case Builtin() | Lambda():
            return "Function"
        case SExpr():
            return "S-Expression"
        case QExpr():
            return "Q-Expression"
        case _:
            assert_never(v)


def is_function(v: Value) -> bool:
    return isinstance(v, (Builtin, Lambda))
