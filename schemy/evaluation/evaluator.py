"""Core evaluator for the Schemy interpreter.

A direct recursive tree-walker: special forms are dispatched before builtin
procedures, builtins before variable lookup of the operator, and only
closures are applied generically. There is no tail-call elimination.
"""

from __future__ import annotations

import logging

from schemy import SExpression, LispValue
from schemy.builtin.env_builtin import BUILTINS
from schemy.evaluation.special_forms import SPECIAL_FORMS
from schemy.types.boolean import Boolean
from schemy.types.closure import Closure
from schemy.types.environment import Environment
from schemy.types.errors import SchemyRuntimeError
from schemy.types.integer import Integer
from schemy.types.pair import Pair
from schemy.types.symbol import Symbol
from schemy.types.value import to_text, unfold_list

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Integer() | Boolean():
            return expr
        case Symbol():
            return env.lookup(expr)
        case Pair():
            return evaluate_form(expr, env)
    raise SchemyRuntimeError(f"Cannot evaluate: {to_text(expr)}")


def evaluate_form(expr: Pair, env: Environment) -> LispValue:
    """Evaluate a list form: special form, builtin call, or closure application."""
    head, *tail = unfold_list(expr)

    if isinstance(head, Symbol):
        form = SPECIAL_FORMS.get(head)
        if form is not None:
            return form(tail, env, evaluate)
        procedure = BUILTINS.get(head)
        if procedure is not None:
            args = [evaluate(arg, env) for arg in tail]
            return procedure(head, args)

    fn = evaluate(head, env)
    if isinstance(fn, Closure):
        args = [evaluate(arg, env) for arg in tail]
        return fn.invoke(args)

    logger.debug("operator %s is not a procedure", to_text(fn))
    raise SchemyRuntimeError(f"Cannot evaluate: {to_text(expr)}")
