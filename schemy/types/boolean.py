from __future__ import annotations


class Boolean:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self):
        return "TRUE" if self.value else "FALSE"

    def __str__(self):
        return "#t" if self.value else "#f"


# The only two instances; compare with `is`.
TRUE = Boolean(True)
FALSE = Boolean(False)


def make_boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE
