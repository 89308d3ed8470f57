from schemy import EvaluatorFn
from schemy import SExpression, LispValue
from schemy.types.boolean import TRUE, FALSE
from schemy.types.environment import Environment
from schemy.types.value import as_boolean


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a false value
    is found, which is returned immediately. If all operands are true, returns
    the value of the last operand. With zero operands, returns #t.
    """
    result: LispValue = TRUE
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not as_boolean(result):
            return result
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    true value. If none is true, returns the last value (#f). With zero
    operands, returns #f.
    """
    result: LispValue = FALSE
    for expr in tail:
        result = evaluate_fn(expr, env)
        if as_boolean(result):
            return result
    return result
