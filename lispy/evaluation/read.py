"""Conversion of reader AST nodes into Lispy values."""

from __future__ import annotations

from lispy.diagnostics import make_error, INVALID_NUMBER
from lispy.errors import LispyReadError
from lispy.reader.ast import AstNode
from lispy.types.symbol import Symbol
from lispy.types.values import Number, QExpr, SExpr, Value

# Punctuation a raw (un-normalised) parse tree may still carry
_DELIMITERS = frozenset({"(", ")", "{", "}"})


def _is_punctuation(node: AstNode) -> bool:
    return (
        node.contents in _DELIMITERS
        or node.tag == "regex"
        or "char" in node.tag.split("|")
    )


def read_number(node: AstNode) -> Value:
    try:
        return Number(int(node.contents, 10))
    except ValueError:
        return make_error(INVALID_NUMBER, node.contents)


def read_value(node: AstNode) -> Value:
    tag = node.tag
    if "number" in tag:
        return read_number(node)
    if "symbol" in tag:
        return Symbol(node.contents)

    if tag == ">" or "sexpr" in tag:
        container = SExpr()
    elif "qexpr" in tag:
        container = QExpr()
    else:
        raise LispyReadError(f"Cannot read node tagged {tag!r}")

    for child in node.children:
        if _is_punctuation(child):
            continue
        container.cells.append(read_value(child))
    return container
