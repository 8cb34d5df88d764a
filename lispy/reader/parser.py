"""
  Lispy Reader: Lexer and Parser

- Streaming, lazy lexing
- Emits AstNode trees carrying only semantic children:

    - root           -> AstNode(">")
    - numbers        -> AstNode("expr|number", "42")
    - symbols        -> AstNode("expr|symbol", "+")
    - ( ... )        -> AstNode("expr|sexpr", children=[...])
    - { ... }        -> AstNode("expr|qexpr", children=[...])

   Delimiter tokens never reach the tree.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from lispy.errors import LispySyntaxError
from lispy.reader.ast import AstNode


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<atom>[a-zA-Z0-9_+\-*/\\=<>!&%]+)"  # numbers and symbols
)

NUMBER_RE = re.compile(r"-?[0-9]+")

# token type -> (closing token type, closing text, node tag)
OPENERS: dict[str, tuple[str, str, str]] = {
    "lparen": ("rparen", ")", "expr|sexpr"),
    "lbrace": ("rbrace", "}", "expr|qexpr"),
}

# (token_type, token_value, line, column)
Token = tuple[str, str, int, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, line, column) tuples."""
    pos = 0
    line, col = 1, 1
    n = len(source)
    while pos < n:
        ch = source[pos]
        if ch.isspace():
            if ch == "\n":
                line, col = line + 1, 1
            else:
                col += 1
            pos += 1
            continue
        match = TOKEN_RE.match(source, pos)
        if not match:
            raise LispySyntaxError(f"Unexpected character {ch!r}", line, col)
        kind = match.lastgroup
        text = match.group(kind)
        if kind == "atom":
            kind = "number" if NUMBER_RE.fullmatch(text) else "symbol"
        if kind != "comment":
            yield kind, text, line, col
        col += len(text)
        pos = match.end()


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[AstNode]:
        tok = self.advance()
        if tok is None:
            return None
        tok_type, tok_val, line, col = tok

        if tok_type in ("number", "symbol"):
            return AstNode(f"expr|{tok_type}", tok_val, line=line, column=col)

        if tok_type in OPENERS:
            close_type, close_text, tag = OPENERS[tok_type]
            node = AstNode(tag, line=line, column=col)
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispySyntaxError(f"Unmatched '{tok_val}'", line, col)
                if nxt[0] == close_type:
                    self.advance()
                    return node
                if nxt[0] in ("rparen", "rbrace"):
                    raise LispySyntaxError(
                        f"Expected '{close_text}' but got '{nxt[1]}'", nxt[2], nxt[3]
                    )
                node.children.append(self.parse_expr())

        raise LispySyntaxError(f"Unexpected '{tok_val}'", line, col)

    def parse_all(self) -> Iterator[AstNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> AstNode:
    """Read `source` into a root node whose children are its top-level expressions."""
    return AstNode(">", children=list(TokenStream(lex(source)).parse_all()))
