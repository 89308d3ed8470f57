"""
  Lexer for Schemy source text.

  Produces (token_type, token_value) tuples:

    - lparen / rparen  -> "(" / ")"
    - quote            -> "'"
    - dot              -> "."
    - boolean          -> "#t" / "#f"
    - integer          -> optionally signed decimal digits
    - symbol           -> a lone "+", "-" or "/", or a name starting with a
                          letter or one of <=>*# and continuing with letters,
                          digits or <=>*#?!-

  A sign is part of a number only when a digit follows it directly.
"""

from __future__ import annotations

import re
from typing import Iterator

from schemy.types.errors import SchemySyntaxError

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<dot>\.)"
    r"|(?P<integer>[+-]?[0-9]+)"
    r"|(?P<symbol>[+\-/]|[a-zA-Z<=>*#][a-zA-Z0-9<=>*#?!\-]*)"
)

BOOLEANS = ("#t", "#f")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SchemySyntaxError(f"Invalid character at {pos}: {source[pos]!r}")
        kind = m.lastgroup
        text = m.group()
        if kind == "symbol" and text in BOOLEANS:
            kind = "boolean"
        yield kind, text
        pos = m.end()
