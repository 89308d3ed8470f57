"""Built-in procedures for the Schemy runtime.

This module defines arithmetic, comparison, list processing and predicates.
Every builtin receives its operator Symbol and the already-evaluated operands
and returns a value. Builtins are not environment bindings: the evaluator
resolves them from the read-only BUILTINS table before variable lookup, so
user definitions cannot shadow them in operator position.
"""
from __future__ import annotations

from functools import reduce
from types import MappingProxyType
from typing import Callable, NoReturn

from schemy import LispValue
from schemy.types.arithmetic import add, subtract, multiply, divide, negate
from schemy.types.boolean import Boolean, make_boolean
from schemy.types.errors import SchemyArityError, SchemyError, SchemyTypeError
from schemy.types.integer import Integer, make_integer
from schemy.types.pair import Pair
from schemy.types.symbol import Symbol
from schemy.types.value import (
    equal,
    greater,
    greater_or_equal,
    is_proper_list,
    less,
    less_or_equal,
    logical_not,
    make_list,
    to_text,
    unfold_list,
)

Builtin = Callable[[Symbol, list[LispValue]], LispValue]


def fail_evaluation(op: Symbol, args: list[LispValue], arity: bool = False) -> NoReturn:
    """Raise the uniform shape error echoing the printed form `(op args...)`."""
    msg = f"Failed to evaluate: ({' '.join([str(op), *map(to_text, args)])})"
    raise (SchemyArityError if arity else SchemyTypeError)(msg)


def _expect_arity(op: Symbol, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        fail_evaluation(op, args, arity=True)


def _expect_integers(op: Symbol, args: list[LispValue], at_least: int = 0) -> None:
    if len(args) < at_least:
        fail_evaluation(op, args, arity=True)
    if not all(isinstance(a, Integer) for a in args):
        fail_evaluation(op, args)


# -------------------------------
# Arithmetic
# -------------------------------
def plus(op: Symbol, args: list[LispValue]) -> LispValue:
    """Sum of all operands; (+) is 0."""
    return reduce(add, args, make_integer(0))


def times(op: Symbol, args: list[LispValue]) -> LispValue:
    """Product of all operands; (*) is 1."""
    return reduce(multiply, args, make_integer(1))


def _first_operand(op: Symbol, args: list[LispValue]) -> Integer:
    if not args:
        fail_evaluation(op, args, arity=True)
    if not isinstance(args[0], Integer):
        fail_evaluation(op, args)
    return args[0]


def minus(op: Symbol, args: list[LispValue]) -> LispValue:
    """Subtract every later operand from the first; (- x) is x."""
    return reduce(subtract, args[1:], _first_operand(op, args))


def quotient(op: Symbol, args: list[LispValue]) -> LispValue:
    """Divide the first operand by every later one, truncating toward zero."""
    return reduce(divide, args[1:], _first_operand(op, args))


def _chain(test: Callable[[LispValue, LispValue], bool]) -> Builtin:
    def compare(op: Symbol, args: list[LispValue]) -> Boolean:
        _expect_integers(op, args)
        return make_boolean(all(test(a, b) for a, b in zip(args, args[1:])))
    return compare


def minimum(op: Symbol, args: list[LispValue]) -> LispValue:
    _expect_integers(op, args, at_least=1)
    result = args[0]
    for x in args[1:]:
        if less(x, result):
            result = x
    return result


def maximum(op: Symbol, args: list[LispValue]) -> LispValue:
    _expect_integers(op, args, at_least=1)
    result = args[0]
    for x in args[1:]:
        if greater(x, result):
            result = x
    return result


def absolute(op: Symbol, args: list[LispValue]) -> LispValue:
    _expect_arity(op, args, 1)
    _expect_integers(op, args)
    (x,) = args
    return x if x.value >= 0 else negate(x)


def not_builtin(op: Symbol, args: list[LispValue]) -> Boolean:
    """Only #f is false, so (not x) is #t exactly when x is #f."""
    _expect_arity(op, args, 1)
    return logical_not(args[0])


# -------------------------------
# Predicates
# -------------------------------
def _variant_predicate(variant: type) -> Builtin:
    def predicate(op: Symbol, args: list[LispValue]) -> Boolean:
        _expect_arity(op, args, 1)
        return make_boolean(isinstance(args[0], variant))
    return predicate


def is_null(op: Symbol, args: list[LispValue]) -> Boolean:
    _expect_arity(op, args, 1)
    return make_boolean(args[0] is None)


def is_list(op: Symbol, args: list[LispValue]) -> Boolean:
    """#t for the empty list and for chains of pairs ending in the empty list."""
    _expect_arity(op, args, 1)
    return make_boolean(is_proper_list(args[0]))


# -------------------------------
# Lists
# -------------------------------
def cons(op: Symbol, args: list[LispValue]) -> Pair:
    _expect_arity(op, args, 2)
    return Pair(args[0], args[1])


def car(op: Symbol, args: list[LispValue]) -> LispValue:
    _expect_arity(op, args, 1)
    if not isinstance(args[0], Pair):
        fail_evaluation(op, args)
    return args[0].first


def cdr(op: Symbol, args: list[LispValue]) -> LispValue:
    _expect_arity(op, args, 1)
    if not isinstance(args[0], Pair):
        fail_evaluation(op, args)
    return args[0].second


def list_builtin(op: Symbol, args: list[LispValue]) -> LispValue:
    """Fresh proper list of the operands; (list) is the empty list."""
    return make_list(args)


def _indexed(op: Symbol, args: list[LispValue], upper_inclusive: bool) -> tuple[list[LispValue], int]:
    _expect_arity(op, args, 2)
    items, index = args
    try:
        elements = unfold_list(items)
    except SchemyError:
        fail_evaluation(op, args)
    if not isinstance(index, Integer):
        fail_evaluation(op, args)
    limit = len(elements) + 1 if upper_inclusive else len(elements)
    if not 0 <= index.value < limit:
        fail_evaluation(op, args)
    return elements, index.value


def list_ref(op: Symbol, args: list[LispValue]) -> LispValue:
    """(list-ref lst k) is the k-th element, counting from 0."""
    elements, k = _indexed(op, args, upper_inclusive=False)
    return elements[k]


def list_tail(op: Symbol, args: list[LispValue]) -> LispValue:
    """(list-tail lst k) is lst with its first k pairs dropped; shares structure."""
    _, k = _indexed(op, args, upper_inclusive=True)
    node = args[0]
    for _ in range(k):
        node = node.second
    return node


BUILTINS: MappingProxyType[Symbol, Builtin] = MappingProxyType({
    Symbol("+"): plus,
    Symbol("-"): minus,
    Symbol("*"): times,
    Symbol("/"): quotient,
    Symbol("="): _chain(equal),
    Symbol("<"): _chain(less),
    Symbol(">"): _chain(greater),
    Symbol("<="): _chain(less_or_equal),
    Symbol(">="): _chain(greater_or_equal),
    Symbol("not"): not_builtin,
    Symbol("min"): minimum,
    Symbol("max"): maximum,
    Symbol("abs"): absolute,
    Symbol("number?"): _variant_predicate(Integer),
    Symbol("boolean?"): _variant_predicate(Boolean),
    Symbol("pair?"): _variant_predicate(Pair),
    Symbol("symbol?"): _variant_predicate(Symbol),
    Symbol("null?"): is_null,
    Symbol("list?"): is_list,
    Symbol("cons"): cons,
    Symbol("car"): car,
    Symbol("cdr"): cdr,
    Symbol("list"): list_builtin,
    Symbol("list-ref"): list_ref,
    Symbol("list-tail"): list_tail,
})
