from schemy import EvaluatorFn
from schemy import SExpression, LispValue
from schemy.types.environment import Environment
from schemy.types.errors import SchemySyntaxError
from schemy.types.value import as_boolean


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SchemySyntaxError("Invalid if")

    if as_boolean(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return None  # no else branch: the empty list
