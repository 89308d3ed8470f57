import pytest

from schemy.builtin.env_builtin import BUILTINS, fail_evaluation
from schemy.interpreter import run
from schemy.types.errors import SchemyArityError, SchemyTypeError
from schemy.types.integer import make_integer
from schemy.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(number? 1)", "#t"),
        ("(number? 'a)", "#f"),
        ("(boolean? #f)", "#t"),
        ("(boolean? 0)", "#f"),
        ("(pair? '(1))", "#t"),
        ("(pair? '())", "#f"),
        ("(pair? (cons 1 2))", "#t"),
        ("(symbol? 'a)", "#t"),
        ("(symbol? 1)", "#f"),
        ("(null? '())", "#t"),
        ("(null? '(1))", "#f"),
        ("(null? #f)", "#f"),
        ("(list? '())", "#t"),
        ("(list? '(1 2))", "#t"),
        ("(list? '(1 . 2))", "#f"),
        ("(list? 1)", "#f"),
        ("(not #f)", "#t"),
        ("(not #t)", "#f"),
        ("(not 0)", "#f"),
        ("(not '())", "#f"),
        ("(pair? (lambda (x) x))", "#f"),
    ]
)
def test_predicates(source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("name", ["number?", "boolean?", "pair?", "symbol?", "null?", "list?", "not"])
def test_predicates_take_exactly_one_argument(name):
    with pytest.raises(SchemyArityError):
        run(f"({name})")
    with pytest.raises(SchemyArityError):
        run(f"({name} 1 2)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '())", "(1)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(car '(1 2 3))", "1"),
        ("(cdr '(1 2 3))", "(2 3)"),
        ("(cdr '(1))", "()"),
        ("(cdr '(1 . 2))", "2"),
        ("(list)", "()"),
        ("(list 1 (+ 1 1) 'c)", "(1 2 c)"),
        ("(list '(1) '())", "((1) ())"),
        ("(list-ref '(a b c) 0)", "a"),
        ("(list-ref '(a b c) 2)", "c"),
        ("(list-tail '(a b c) 0)", "(a b c)"),
        ("(list-tail '(a b c) 2)", "(c)"),
        ("(list-tail '(a b c) 3)", "()"),
    ]
)
def test_list_procedures(source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(car '())",
        "(car 1)",
        "(cdr 'a)",
        "(list-ref '(a b c) 3)",
        "(list-ref '(a b c) -1)",
        "(list-ref '(a b . c) 1)",
        "(list-ref 'a 0)",
        "(list-ref '(a) 'b)",
        "(list-tail '(a b c) 4)",
        "(list-tail '(a b . c) 1)",
        "(list-tail '(a) #t)",
    ]
)
def test_list_procedure_type_errors(source):
    with pytest.raises(SchemyTypeError, match="Failed to evaluate"):
        run(source)


@pytest.mark.parametrize(
    "source",
    ["(cons 1)", "(cons 1 2 3)", "(car)", "(cdr '(1) '(2))", "(list-ref '(1))", "(list-tail)"],
)
def test_list_procedure_arity_errors(source):
    with pytest.raises(SchemyArityError):
        run(source)


def test_list_ref_error_echoes_the_form():
    with pytest.raises(SchemyTypeError) as exc:
        run("(list-ref (list 1 2) 5)")
    assert str(exc.value) == "Failed to evaluate: (list-ref (1 2) 5)"


def test_list_tail_shares_structure():
    src = (
        "((lambda ()"
        "  (define xs (list 1 2 3))"
        "  (define tail (list-tail xs 1))"
        "  (set-car! tail 20)"
        "  xs))"
    )
    assert run(src) == "(1 20 3)"


def test_builtins_table_is_read_only():
    with pytest.raises(TypeError):
        BUILTINS[Symbol("+")] = None


def test_builtin_called_directly():
    plus = BUILTINS[Symbol("+")]
    assert plus(Symbol("+"), [make_integer(2), make_integer(3)]).value == 5


def test_fail_evaluation_kinds():
    with pytest.raises(SchemyArityError, match=r"^Failed to evaluate: \(car\)$"):
        fail_evaluation(Symbol("car"), [], arity=True)
    with pytest.raises(SchemyTypeError, match=r"^Failed to evaluate: \(car 1 \(\)\)$"):
        fail_evaluation(Symbol("car"), [make_integer(1), None])
