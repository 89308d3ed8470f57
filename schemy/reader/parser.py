"""
  Recursive-descent reader over the token stream.

  Builds the same values the evaluator consumes, there is no separate AST:

    - integers  -> Integer (interned when small)
    - #t / #f   -> the TRUE / FALSE singletons
    - symbols   -> Symbol
    - lists     -> chains of Pair ending in None
    - (a . b)   -> Pair with a non-list tail
    - 'expr     -> (quote expr)
"""

from __future__ import annotations

from typing import Iterator, Optional

from schemy import SExpression
from schemy.reader.tokenizer import lex
from schemy.types.boolean import make_boolean
from schemy.types.errors import SchemySyntaxError
from schemy.types.integer import make_integer
from schemy.types.pair import Pair
from schemy.types.symbol import Symbol
from schemy.types.value import make_list

QUOTE = Symbol("quote")


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise SchemySyntaxError("Unexpected end of input")

        if tok_type == "quote":
            return Pair(QUOTE, Pair(self.parse_expr()))

        if tok_type == "integer":
            return make_integer(int(tok_val))

        if tok_type == "boolean":
            return make_boolean(tok_val == "#t")

        if tok_type == "symbol":
            return Symbol(tok_val)

        if tok_type == "lparen":
            return self._parse_list()

        if tok_type == "rparen":
            raise SchemySyntaxError("Unexpected ')'")

        raise SchemySyntaxError(f"Unexpected token: {tok_val}")

    def _parse_list(self) -> SExpression:
        items = []
        tail: SExpression = None
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise SchemySyntaxError("Expected ')' ending list")
            if tok_type == "rparen":
                break
            if tok_type == "dot":
                if not items:
                    raise SchemySyntaxError("Expected expression before '.'")
                self.advance()
                tail = self.parse_expr()
                if self.peek()[0] != "rparen":
                    raise SchemySyntaxError("Expected ')' after dotted tail")
                break
            items.append(self.parse_expr())
        self.advance()  # consume ')'
        return make_list(items, tail)


def read(source: str) -> SExpression:
    """Parse exactly one expression; trailing tokens are a syntax error."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if not stream.at_end():
        raise SchemySyntaxError("Unexpected input")
    return expr
