from schemy import EvaluatorFn
from schemy import SExpression, LispValue
from schemy.builtin.env_builtin import fail_evaluation
from schemy.types.environment import Environment
from schemy.types.symbol import Symbol


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    if len(tail) != 1:
        fail_evaluation(Symbol("quote"), tail, arity=True)
    return tail[0]
