import pytest

from schemy.interpreter import run
from schemy.types.errors import (
    SchemyArityError,
    SchemyRuntimeError,
    SchemyTypeError,
    SchemyZeroDivisionError,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 12 3 2)", "2"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(+ -1 5 -3)", "1"),
        ("(- -10 -5)", "-5"),
        ("(+)", "0"),
        ("(*)", "1"),
        ("(+ 5)", "5"),
        ("(- 5)", "5"),
        ("(/ 5)", "5"),
        ("(* 1000 1000)", "1000000"),
        ("(+ 9223372036854775807 1)", "-9223372036854775808"),
        ("(abs -5)", "5"),
        ("(abs 5)", "5"),
        ("(abs 0)", "0"),
        ("(min 3 1 2)", "1"),
        ("(max 3 1 2)", "3"),
        ("(min 7)", "7"),
        ("(max -1 -1)", "-1"),
    ]
)
def test_arithmetic(source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1 1)", "#t"),
        ("(= 1 1 2)", "#f"),
        ("(< 1 2 3)", "#t"),
        ("(< 1 3 2)", "#f"),
        ("(> 3 2 1)", "#t"),
        ("(> 3 3)", "#f"),
        ("(<= 1 1 2)", "#t"),
        ("(<= 2 1)", "#f"),
        ("(>= 2 2 1)", "#t"),
        ("(>= 1 2)", "#f"),
        ("(=)", "#t"),
        ("(< 1)", "#t"),
    ]
)
def test_comparison_chains(source, expected):
    assert run(source) == expected


def test_division_by_zero():
    with pytest.raises(SchemyZeroDivisionError):
        run("(/ 1 0)")
    with pytest.raises(SchemyRuntimeError):
        run("(/ 10 2 0)")


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1 #t)", "Cannot add: 1 and #t"),
        ("(- 1 'a)", "Cannot subtract: 1 and a"),
        ("(* 2 '(1))", "Cannot multiply: 2 and (1)"),
        ("(/ 4 #f)", "Cannot divide: 4 and #f"),
    ]
)
def test_arithmetic_type_errors(source, message):
    with pytest.raises(SchemyTypeError) as exc:
        run(source)
    assert str(exc.value) == message


@pytest.mark.parametrize(
    "source,message",
    [
        ("(-)", "Failed to evaluate: (-)"),
        ("(/)", "Failed to evaluate: (/)"),
        ("(min)", "Failed to evaluate: (min)"),
        ("(max)", "Failed to evaluate: (max)"),
        ("(abs)", "Failed to evaluate: (abs)"),
        ("(abs 1 2)", "Failed to evaluate: (abs 1 2)"),
    ]
)
def test_arity_errors_echo_the_form(source, message):
    with pytest.raises(SchemyArityError) as exc:
        run(source)
    assert str(exc.value) == message


@pytest.mark.parametrize(
    "source,message",
    [
        ("(- #t)", "Failed to evaluate: (- #t)"),
        ("(< 1 'a)", "Failed to evaluate: (< 1 a)"),
        ("(= #t #t)", "Failed to evaluate: (= #t #t)"),
        ("(min 1 #f)", "Failed to evaluate: (min 1 #f)"),
        ("(abs 'x)", "Failed to evaluate: (abs x)"),
    ]
)
def test_operand_type_errors_echo_the_form(source, message):
    with pytest.raises(SchemyTypeError) as exc:
        run(source)
    assert str(exc.value) == message


def test_operands_are_evaluated_before_the_check():
    with pytest.raises(SchemyTypeError, match=r"\(max 2 \(1 2\)\)"):
        run("(max (+ 1 1) (list 1 2))")
