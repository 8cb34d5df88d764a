"""Rendering of Lispy values for display."""

from __future__ import annotations

from io import StringIO
from typing import assert_never

from lispy.types.symbol import Symbol
from lispy.types.values import Builtin, Error, Lambda, Number, QExpr, SExpr, Value


def _write_cells(buffer: StringIO, cells: list[Value], open_: str, close: str) -> None:
    buffer.write(open_)
    for i, cell in enumerate(cells):
        if i:
            buffer.write(" ")
        _write_value(buffer, cell)
    buffer.write(close)


def _write_value(buffer: StringIO, v: Value) -> None:
    match v:
        case Number(n):
            buffer.write(str(n))
        case Error(message):
            buffer.write(f"Error: {message}")
        case Symbol():
            buffer.write(v.name)
        case Builtin() | Lambda():
            buffer.write("<function>")
        case SExpr(cells):
            _write_cells(buffer, cells, "(", ")")
        case QExpr(cells):
            _write_cells(buffer, cells, "{", "}")
        case _:
            assert_never(v)


def format_value(v: Value) -> str:
    with StringIO() as buffer:
        _write_value(buffer, v)
        return buffer.getvalue()
