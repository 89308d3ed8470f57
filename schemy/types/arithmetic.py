"""Integer arithmetic on values.

Results wrap like signed 64-bit machine arithmetic. Division truncates
toward zero, as native integer division does.
"""

from __future__ import annotations

from schemy import LispValue
from schemy.types.errors import SchemyTypeError, SchemyZeroDivisionError
from schemy.types.integer import Integer, make_integer
from schemy.types.value import to_text


def _operands(verb: str, lhs: LispValue, rhs: LispValue) -> tuple[int, int]:
    if not isinstance(lhs, Integer) or not isinstance(rhs, Integer):
        raise SchemyTypeError(f"Cannot {verb}: {to_text(lhs)} and {to_text(rhs)}")
    return lhs.value, rhs.value


def add(lhs: LispValue, rhs: LispValue) -> Integer:
    a, b = _operands("add", lhs, rhs)
    return make_integer(a + b)


def subtract(lhs: LispValue, rhs: LispValue) -> Integer:
    a, b = _operands("subtract", lhs, rhs)
    return make_integer(a - b)


def multiply(lhs: LispValue, rhs: LispValue) -> Integer:
    a, b = _operands("multiply", lhs, rhs)
    return make_integer(a * b)


def divide(lhs: LispValue, rhs: LispValue) -> Integer:
    a, b = _operands("divide", lhs, rhs)
    if b == 0:
        raise SchemyZeroDivisionError(f"Cannot divide: {to_text(lhs)} and {to_text(rhs)}")
    quotient = abs(a) // abs(b)
    return make_integer(quotient if (a < 0) == (b < 0) else -quotient)


def negate(value: Integer) -> Integer:
    return make_integer(-value.value)
