from schemy import EvaluatorFn
from schemy import SExpression, LispValue
from schemy.evaluation.special_forms.lambda_form import parse_formals
from schemy.types.closure import Closure
from schemy.types.environment import Environment
from schemy.types.errors import SchemySyntaxError
from schemy.types.pair import Pair
from schemy.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value) or (define (name params...) body...)

    The name is bound to the empty list before the value is computed, so a
    definition can refer to itself.
    """
    if not tail:
        raise SchemySyntaxError("Invalid define")

    target = tail[0]
    if isinstance(target, Symbol):
        if len(tail) != 2:
            raise SchemySyntaxError("Invalid define")
        env.define(target, None)
        env.define(target, evaluate_fn(tail[1], env))
        return None

    if not isinstance(target, Pair) or len(tail) < 2:
        raise SchemySyntaxError("Invalid define")
    name, *formals = parse_formals(target, "define")
    env.define(name, None)
    env.define(name, Closure(formals, tail[1:], env))
    return None
