"""Polymorphic operations over the closed set of value variants.

Values are Integer, Boolean, Symbol, Pair and Closure; the empty list is
None. Equality never fails; ordering is defined between Integers only.
"""

from __future__ import annotations

from typing import Iterable

from schemy import LispValue
from schemy.types.boolean import Boolean, FALSE, make_boolean
from schemy.types.errors import SchemyRuntimeError, SchemyTypeError
from schemy.types.integer import Integer
from schemy.types.pair import Pair
from schemy.types.symbol import Symbol


def to_text(value: LispValue) -> str:
    """Printed form of a value; the empty list prints as ()."""
    if value is None:
        return "()"
    return str(value)


def equal(lhs: LispValue, rhs: LispValue) -> bool:
    """Structural equality; closures are equal only to themselves."""
    match lhs, rhs:
        case None, None:
            return True
        case Integer(), Integer():
            return lhs.value == rhs.value
        case Boolean(), Boolean():
            return lhs.value == rhs.value
        case Symbol(), Symbol():
            return lhs.name == rhs.name
        case Pair(), Pair():
            return lhs is rhs or (equal(lhs.first, rhs.first) and equal(lhs.second, rhs.second))
    return lhs is rhs


def less(lhs: LispValue, rhs: LispValue) -> bool:
    match lhs, rhs:
        case Integer(), Integer():
            return lhs.value < rhs.value
    raise SchemyTypeError(f"Cannot compare: {to_text(lhs)} and {to_text(rhs)}")


def less_or_equal(lhs: LispValue, rhs: LispValue) -> bool:
    return less(lhs, rhs) or equal(lhs, rhs)


def greater(lhs: LispValue, rhs: LispValue) -> bool:
    return less(rhs, lhs)


def greater_or_equal(lhs: LispValue, rhs: LispValue) -> bool:
    return less_or_equal(rhs, lhs)


def as_boolean(value: LispValue) -> bool:
    """Only #f is false; 0 and the empty list are true."""
    return value is not FALSE


def logical_not(value: LispValue) -> Boolean:
    return make_boolean(not as_boolean(value))


def unfold_list(value: LispValue) -> list[LispValue]:
    """Return the elements of a proper list; raise if the chain ends in a non-pair."""
    result: list[LispValue] = []
    while value is not None:
        if not isinstance(value, Pair):
            raise SchemyRuntimeError(f"Expected list, but got: {to_text(value)}")
        result.append(value.first)
        value = value.second
    return result


def is_proper_list(value: LispValue) -> bool:
    while isinstance(value, Pair):
        value = value.second
    return value is None


def make_list(items: Iterable[LispValue], tail: LispValue = None) -> LispValue:
    """Build a chain of pairs from `items`, terminated by `tail` (default: empty list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result
