"""Runtime environment for Schemy.

An Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Scopes are ordinary Python objects: a
call frame stays alive while a running call or any Closure that captured it
still references it, and is reclaimed by the garbage collector afterwards.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from schemy import LispValue
from schemy.types.errors import SchemyNameError, SchemySyntaxError
from schemy.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values; the first match up the chain wins."""

    __slots__ = ("vars", "outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def find(self, name: Symbol) -> Optional[Environment]:
        """Return the nearest environment in the chain that binds `name`.

        The returned scope is the slot owner: writing `env.vars[name]`
        rebinds the variable in place without resolving it again. A name bound
        to the empty list (None) is still found.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`; raise SchemyNameError if unbound."""
        env = self.find(name)
        if env is None:
            raise SchemyNameError(f"No such variable: {name}")
        return env.vars[name]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Rebind an existing variable wherever it lives in the chain.

        Raises SchemyNameError if the variable was never defined.
        """
        env = self.find(name)
        if env is None:
            raise SchemyNameError(f"Variable doesn't yet exist: {name}")
        env.vars[name] = value

    def assign(self, name: Symbol, value: LispValue) -> None:
        """Rebind `name` if it is visible anywhere in the chain, else define it here."""
        env = self.find(name)
        if env is None:
            env = self
        env.vars[name] = value

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in this frame only, shadowing any outer binding."""
        if not isinstance(name, Symbol):
            raise SchemySyntaxError(f"Cannot define {name} as a variable")
        self.vars[name] = value

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {'()' if v is None else v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole chain, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
