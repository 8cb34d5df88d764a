import pytest

from lispy.errors import LispyReadError
from lispy.evaluation.read import read_value
from lispy.reader.ast import AstNode
from lispy.reader.parser import parse
from lispy.types.symbol import Symbol
from lispy.types.values import Error, Number, QExpr, SExpr


def test_root_reads_as_sexpr():
    assert read_value(parse("+ 1 {2 x}")) == SExpr(
        [Symbol("+"), Number(1), QExpr([Number(2), Symbol("x")])]
    )


def test_raw_tree_punctuation_is_skipped():
    raw = AstNode(">", children=[
        AstNode("regex"),
        AstNode("expr|sexpr", children=[
            AstNode("char", "("),
            AstNode("expr|symbol", "+"),
            AstNode("expr|number", "1"),
            AstNode("char", ")"),
        ]),
        AstNode("regex"),
    ])
    assert read_value(raw) == SExpr([SExpr([Symbol("+"), Number(1)])])


def test_invalid_number_reads_as_error():
    assert read_value(AstNode("expr|number", "12a")) == Error("invalid number '12a'")


def test_unknown_tag_raises():
    with pytest.raises(LispyReadError):
        read_value(AstNode("expr|string", '"hi"'))
