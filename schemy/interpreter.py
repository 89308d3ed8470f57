from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from schemy import SExpression, LispValue
from schemy.config import get_recursion_limit
from schemy.evaluation.evaluator import evaluate
from schemy.reader.parser import read
from schemy.types.environment import Environment
from schemy.types.errors import SchemyError, SchemyRuntimeError
from schemy.types.value import to_text

logger = logging.getLogger(__name__)


@contextmanager
def recursion_limit(limit: Optional[int]) -> Iterator[None]:
    """Temporarily raise Python's recursion limit; never lowers it."""
    previous = sys.getrecursionlimit()
    if limit is not None and limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


@contextmanager
def evaluation_guard() -> Iterator[None]:
    """Report runaway recursion (deep programs, cyclic pairs) as a runtime error."""
    with recursion_limit(get_recursion_limit()):
        try:
            yield
        except RecursionError as exc:
            raise SchemyRuntimeError("Maximum recursion depth exceeded") from exc


class Interpreter:
    """
    Reads and evaluates Schemy source one expression at a time.
    Top-level definitions persist in `env` across calls to `run`.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()

    def eval(self, expr: SExpression) -> LispValue:
        """Evaluate an already-read expression in the top-level environment."""
        with evaluation_guard():
            return evaluate(expr, self.env)

    def run(self, code: str) -> str:
        """Read exactly one expression from `code`, evaluate it and return its printed form."""
        logger.debug("run: %s", code)
        try:
            with evaluation_guard():
                return to_text(evaluate(read(code), self.env))
        except SchemyError as exc:
            logger.debug("run failed with %s: %s", type(exc).__name__, exc)
            raise


def run(code: str) -> str:
    """Evaluate `code` in a fresh top-level environment and return the printed result."""
    return Interpreter().run(code)
