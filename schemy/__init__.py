# Core type aliases for Schemy's data model.
# Code and data share one representation: the reader produces the same
# Integer / Boolean / Symbol / Pair values the evaluator works with, and the
# empty list is Python None.
#
# Naming guidance:
# - SExpression: use in reader/special-form code for unevaluated forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]


def run(source: str) -> str:
    """Evaluate one expression in a fresh interpreter and return its printed form."""
    from schemy.interpreter import run as _run
    return _run(source)
