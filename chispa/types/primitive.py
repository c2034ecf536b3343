"""Primitive runtime values: numbers, strings, booleans and null.

Every runtime value exposes `family` (the variant tag), `pintar()` (the plain
host value used for display and interop) and `type_name()`.
"""

from __future__ import annotations

from typing import Any, Union

Number = Union[int, float]


class RuntimeVal:
    __slots__ = ()
    family: str = ""

    def pintar(self) -> Any:
        raise NotImplementedError

    def type_name(self) -> str:
        raise NotImplementedError

    def to_text(self) -> str:
        """Display text used by printing and string concatenation."""
        return format_host(self.pintar(), top_level=True)


class NumberVal(RuntimeVal):
    __slots__ = ("value",)
    family = "number"

    def __init__(self, value: Number):
        self.value: Number = value

    def pintar(self) -> Number:
        return self.value

    def type_name(self) -> str:
        return "numero"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NumberVal) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("number", self.value))

    def __repr__(self) -> str:
        return f"NumberVal({self.value!r})"


class StringVal(RuntimeVal):
    __slots__ = ("value",)
    family = "string"

    def __init__(self, value: str):
        self.value: str = value

    def pintar(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "cadena"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StringVal) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("string", self.value))

    def __repr__(self) -> str:
        return f"StringVal({self.value!r})"


class BooleanVal(RuntimeVal):
    __slots__ = ("value",)
    family = "boolean"

    def __init__(self, value: bool):
        self.value: bool = value

    def pintar(self) -> bool:
        return self.value

    def type_name(self) -> str:
        return "booleano"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BooleanVal) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("boolean", self.value))

    def __repr__(self) -> str:
        return f"BooleanVal({self.value!r})"


class NullVal(RuntimeVal):
    __slots__ = ()
    family = "null"

    def pintar(self) -> None:
        return None

    def type_name(self) -> str:
        return "nulo"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullVal)

    def __hash__(self) -> int:
        return hash("null")

    def __repr__(self) -> str:
        return "NullVal()"


Null = NullVal()
TRUE = BooleanVal(True)
FALSE = BooleanVal(False)


def make_number(value: Number = 0) -> NumberVal:
    return NumberVal(value)


def make_string(value: str = "") -> StringVal:
    return StringVal(value)


def make_boolean(value: bool = True) -> BooleanVal:
    return TRUE if value else FALSE


def make_null() -> NullVal:
    return Null


def format_host(value: Any, top_level: bool = False) -> str:
    """Render a plain host value (the result of `pintar()`) as Chispa text."""
    if value is None:
        return "nulo"
    if value is True:
        return "verdadero"
    if value is False:
        return "falso"
    if isinstance(value, str):
        if top_level:
            return value
        quote = "'" if '"' in value else '"'
        return f"{quote}{value}{quote}"
    if isinstance(value, list):
        return "[" + ", ".join(format_host(v) for v in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        return "{ " + ", ".join(f"{k}: {format_host(v)}" for k, v in value.items()) + " }"
    return str(value)
