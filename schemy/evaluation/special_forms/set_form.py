from schemy import EvaluatorFn
from schemy import SExpression, LispValue
from schemy.types.environment import Environment
from schemy.types.errors import SchemyNameError, SchemySyntaxError, SchemyTypeError
from schemy.types.pair import Pair
from schemy.types.symbol import Symbol
from schemy.types.value import to_text


def _target(tail: list[SExpression], form: str) -> Symbol:
    if len(tail) != 2 or not isinstance(tail[0], Symbol):
        raise SchemySyntaxError(f"Invalid {form}")
    return tail[0]


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! name value) rebinds an existing variable in whichever scope holds it."""
    var_sym = _target(tail, "set!")
    value = evaluate_fn(tail[1], env)
    env.set(var_sym, value)
    return None


def _pair_slot(tail: list[SExpression], env: Environment, form: str, evaluate_fn: EvaluatorFn):
    var_sym = _target(tail, form)
    value = evaluate_fn(tail[1], env)
    scope = env.find(var_sym)
    if scope is None:
        raise SchemyNameError(f"Variable doesn't yet exist: {var_sym}")
    cell = scope.vars[var_sym]
    if not isinstance(cell, Pair):
        raise SchemyTypeError(f"Cannot {form} on a non-pair: {to_text(cell)}")
    return cell, value


def set_car_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    cell, value = _pair_slot(tail, env, "set-car!", evaluate_fn)
    cell.first = value
    return None


def set_cdr_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    cell, value = _pair_slot(tail, env, "set-cdr!", evaluate_fn)
    cell.second = value
    return None
