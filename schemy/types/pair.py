"""Mutable cons cells.

A Pair is the only mutable value and the only one that can form cycles
(through set-car!/set-cdr!). Printing a cycle through the cdr chain raises a
runtime error as soon as a cell repeats; a cycle through the car recurses
until the interpreter's recursion guard fires.
"""

from __future__ import annotations

from io import StringIO

from schemy import LispValue
from schemy.types.errors import SchemyRuntimeError


class Pair:
    __slots__ = ("first", "second")

    def __init__(self, first: LispValue, second: LispValue = None):
        self.first: LispValue = first
        self.second: LispValue = second

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"

    def __str__(self) -> str:
        seen: set[int] = set()
        with StringIO() as buffer:
            buffer.write("(")
            node: LispValue = self
            while node is not None:
                if not isinstance(node, Pair):
                    buffer.write(" . ")
                    buffer.write(str(node))
                    break
                if id(node) in seen:
                    raise SchemyRuntimeError("Cannot print cyclic list")
                if seen:
                    buffer.write(" ")
                seen.add(id(node))
                buffer.write("()" if node.first is None else str(node.first))
                node = node.second
            buffer.write(")")
            return buffer.getvalue()
