"""Runtime environment for Chispa.

An Environment is one lexical scope: it maps names to bindings and links to
the enclosing scope through `outer`. Declarations always land in the current
scope; lookups and assignments walk outward until a scope declares the name.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import NamedTuple, Optional

from chispa import RuntimeValue
from chispa.errors import (
    ConstAssignmentError,
    RedeclarationError,
    UndeclaredVariableError,
)

logger = logging.getLogger(__name__)


class Binding(NamedTuple):
    value: RuntimeValue
    constant: bool = False


class Environment:
    """Hierarchical mapping from names to bindings."""

    __slots__ = ("vars", "outer", "globals")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Binding] = {}
        self.outer: Environment | None = outer
        # names declared through global registration, in declaration order
        self.globals: list[str] = []

    def declare_var(
        self,
        name: str,
        value: RuntimeValue,
        constant: bool = False,
        is_global: bool = False,
    ) -> RuntimeValue:
        """Bind `name` in this scope.

        Raises RedeclarationError if this scope already binds `name`; bindings
        in enclosing scopes are shadowed, never overwritten.
        """
        if name in self.vars:
            raise RedeclarationError(f"No se puede declarar '{name}': ya existe en este ambito")
        self.vars[name] = Binding(value, constant)
        if is_global:
            self.globals.append(name)
            logger.debug("registered global %s (constant=%s)", name, constant)
        return value

    def resolve(self, name: str) -> Environment:
        """Return the nearest environment in the chain that declares `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        raise UndeclaredVariableError(f"La variable '{name}' no esta declarada")

    def assign_var(self, name: str, value: RuntimeValue) -> RuntimeValue:
        """Update the nearest existing binding for `name`.

        Raises UndeclaredVariableError if no scope declares it and
        ConstAssignmentError if the binding is constant.
        """
        env = self.resolve(name)
        if env.vars[name].constant:
            raise ConstAssignmentError(f"No se puede reasignar la constante '{name}'")
        env.vars[name] = Binding(value, False)
        return value

    def lookup_var(self, name: str) -> RuntimeValue:
        return self.resolve(name).vars[name].value

    def is_constant(self, name: str) -> bool:
        return self.resolve(name).vars[name].constant

    def __contains__(self, name: str) -> bool:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return True
            env = env.outer
        return False

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, binding in self.vars.items():
            if not first:
                buffer.write(", ")
            marker = "const " if binding.constant else ""
            buffer.write(f"{marker}{k}: {binding.value!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
