"""Fixed-width integer values.

Integers behave like signed 64-bit machine words: every result is wrapped
into [-2**63, 2**63). Values in a small range are interned so that the
common small constants share one instance.
"""

from __future__ import annotations

INTERN_MIN = -1000
INTERN_MAX = 1000

_WORD = 1 << 64
_SIGN = 1 << 63


def wrap64(value: int) -> int:
    """Reduce an arbitrary Python int to its signed 64-bit representation."""
    value &= _WORD - 1
    return value - _WORD if value & _SIGN else value


class Integer:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = wrap64(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Integer) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Integer({self.value})"

    def __str__(self):
        return str(self.value)


_interned: list[Integer | None] = [None] * (INTERN_MAX - INTERN_MIN + 1)


def make_integer(value: int) -> Integer:
    """Return an Integer for `value`, shared when it lies in the interned range."""
    value = wrap64(value)
    if INTERN_MIN <= value <= INTERN_MAX:
        index = value - INTERN_MIN
        cached = _interned[index]
        if cached is None:
            cached = _interned[index] = Integer(value)
        return cached
    return Integer(value)
