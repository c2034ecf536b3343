"""Built-in globals for the Chispa runtime environment.

Globals are supplied as two ordered sequences of (name, value) pairs:
mutable variables and constants. `define_globals` declares them into the
root environment; `register` installs the default set below.
"""
from __future__ import annotations

import logging
from typing import Iterable

from chispa import RuntimeValue
from chispa.errors import ChispaTypeError
from chispa.types.complex import ArrayVal, ComplexVal, make_function_native
from chispa.types.environment import Environment
from chispa.types.primitive import (
    FALSE,
    Null,
    StringVal,
    TRUE,
    make_number,
    make_string,
)

logger = logging.getLogger(__name__)

Globals = Iterable[tuple[str, RuntimeValue]]


# -------------------------------
# Natives
# -------------------------------
def pintar(this: RuntimeValue, args: list[RuntimeValue]) -> RuntimeValue:
    """Print the display text of every argument on one line; returns nulo."""
    print(" ".join(arg.to_text() for arg in args))
    return Null


def tipo_de(this: RuntimeValue, args: list[RuntimeValue]) -> RuntimeValue:
    """Name of the runtime type of the first argument."""
    return make_string(args[0].type_name() if args else Null.type_name())


def longitud(this: RuntimeValue, args: list[RuntimeValue]) -> RuntimeValue:
    """Elements of a list, public keys of an object or characters of a string."""
    if not args:
        raise ChispaTypeError("longitud requiere un argumento")
    value = args[0]
    if isinstance(value, ArrayVal):
        return make_number(len(value.elements()))
    if isinstance(value, ComplexVal):
        return make_number(len(value.public_items()))
    if isinstance(value, StringVal):
        return make_number(len(value.value))
    raise ChispaTypeError(f"longitud no se aplica a {value.type_name()}")


def a_cadena(this: RuntimeValue, args: list[RuntimeValue]) -> RuntimeValue:
    """Display text of the first argument."""
    return make_string(args[0].to_text() if args else "")


def _native(fn, name: str):
    return make_function_native(fn, {"name": make_string(name)}, use_props=True)


def default_variables() -> list[tuple[str, RuntimeValue]]:
    return [
        ("pintar", _native(pintar, "pintar")),
        ("tipoDe", _native(tipo_de, "tipoDe")),
        ("longitud", _native(longitud, "longitud")),
        ("aCadena", _native(a_cadena, "aCadena")),
    ]


def default_constants() -> list[tuple[str, RuntimeValue]]:
    return [
        ("verdadero", TRUE),
        ("falso", FALSE),
        ("nulo", Null),
    ]


# -------------------------------
# Registration
# -------------------------------
def define_globals(env: Environment, variables: Globals = (), constants: Globals = ()) -> None:
    """Declare variables first, then constants, into `env`."""
    for name, value in variables:
        env.declare_var(name, value, False, True)
    for name, value in constants:
        env.declare_var(name, value, True, True)


def register(env: Environment) -> None:
    define_globals(env, default_variables(), default_constants())
    logger.debug("registered %d built-in globals", len(env.globals))
