"""Closure representation and the call-frame protocol for Schemy."""

from __future__ import annotations

import logging
from io import StringIO

from schemy import SExpression, LispValue
from schemy.types.environment import Environment
from schemy.types.errors import SchemyArityError
from schemy.types.symbol import Symbol
from schemy.types.value import to_text

logger = logging.getLogger(__name__)


class Closure:
    """A procedure value: formal parameters, a body, and the scope it was created in.

    The captured environment is held by an ordinary reference; it stays alive
    for as long as this closure does.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: list[SExpression], env: Environment):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        self.env: Environment = env
        logger.debug("closure created: params=(%s), %d body expression(s)",
                     " ".join(str(f) for f in formals), len(body))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")")
            for expr in self.body:
                buffer.write(" ")
                buffer.write(to_text(expr))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Create the call frame: a child of the captured scope with parameters bound."""
        if len(args) != len(self.formals):
            raise SchemyArityError(
                f"Invalid number of arguments ({len(args)}) for lambda: {self}"
            )
        frame = Environment(outer=self.env)
        for name, value in zip(self.formals, args):
            frame.define(name, value)
        return frame

    def invoke(self, args: list[LispValue]) -> LispValue:
        """Evaluate the body in a fresh call frame; the last expression's value is returned."""
        # Deferred import: the evaluator itself constructs closures
        from schemy.evaluation.evaluator import evaluate

        frame = self.extend_env(args)
        logger.debug("invoke %s with %d argument(s)", self, len(args))
        result: LispValue = None
        for expr in self.body:
            result = evaluate(expr, frame)
        return result
