from schemy import EvaluatorFn
from schemy import SExpression, LispValue
from schemy.types.closure import Closure
from schemy.types.environment import Environment
from schemy.types.errors import SchemyError, SchemySyntaxError
from schemy.types.symbol import Symbol
from schemy.types.value import unfold_list


def parse_formals(params: SExpression, form: str) -> list[Symbol]:
    """Turn a parameter list form into Symbols; anything else is a malformed `form`."""
    try:
        formals = unfold_list(params)
    except SchemyError as exc:
        raise SchemySyntaxError(f"Invalid {form}") from exc
    if not all(isinstance(f, Symbol) for f in formals):
        raise SchemySyntaxError(f"Invalid {form}")
    return formals


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (params...) body...) with one or more body expressions."""
    if len(tail) < 2:
        raise SchemySyntaxError("Invalid lambda")

    formals = parse_formals(tail[0], "lambda")
    return Closure(formals, tail[1:], env)
