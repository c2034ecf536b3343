"""Complex runtime values: objects, arrays and functions.

All three share one representation: a `type` discriminator, an ordered
property map and an optional `parent` marker naming the factory the value
extends (arrays record `make_object`). The parent is metadata only; property
lookup never walks it.

Built-in capabilities are ordinary entries of the property map, so script code
can call them (`x.__pintar__()`, `f.aCadena()`) and caller-supplied
properties override them. Host code uses the per-variant methods instead.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from chispa import RuntimeValue
from chispa.errors import ChispaTypeError
from chispa.reader import ast
from chispa.reader.unparse import unparse_function
from chispa.types.environment import Environment
from chispa.types.primitive import (
    Null,
    NumberVal,
    RuntimeVal,
    StringVal,
    make_boolean,
    make_number,
    make_string,
)

# native(this, args) -> RuntimeVal or plain host value
NativeFn = Callable[[RuntimeValue, list[RuntimeValue]], Any]

Entries = dict[str, RuntimeVal]


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


class ComplexVal(RuntimeVal):
    __slots__ = ("type", "properties", "parent")
    family = "complex"

    def __init__(
        self,
        type_: str,
        properties: Optional[Entries] = None,
        parent: Optional[Callable[..., ComplexVal]] = None,
        builtins: bool = True,
    ):
        self.type: str = type_
        self.properties: Entries = dict(BASE_PROPERTIES) if builtins else {}
        self.properties.update(properties or {})
        self.parent = parent

    def get_property(self, name: str) -> RuntimeVal:
        """Own-property lookup; a missing property reads as null."""
        return self.properties.get(name, Null)

    def set_property(self, name: str, value: RuntimeVal) -> RuntimeVal:
        self.properties[name] = value
        return value

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def public_items(self) -> list[tuple[str, RuntimeVal]]:
        """Properties in insertion order, without dunder-style built-ins."""
        return [(k, v) for k, v in self.properties.items() if not is_dunder(k)]

    def pintar(self) -> Any:
        return {k: v.pintar() for k, v in self.public_items()}

    def type_name(self) -> str:
        return self.type

    def __repr__(self) -> str:
        keys = ", ".join(k for k, _ in self.public_items())
        return f"<{type(self).__name__} {self.type} {{{keys}}}>"


class ObjectVal(ComplexVal):
    __slots__ = ()

    def __init__(self, properties: Optional[Entries] = None, type_: str = "objeto"):
        super().__init__(type_, properties)


class ArrayVal(ComplexVal):
    __slots__ = ()

    def __init__(self, properties: Optional[Entries] = None):
        super().__init__("lista", properties, parent=make_object)

    def elements(self) -> list[RuntimeVal]:
        return [v for _, v in self.public_items()]

    def pintar(self) -> list:
        return [v.pintar() for v in self.elements()]


class FunctionVal(ComplexVal):
    __slots__ = ("params", "body", "closure", "native")

    def __init__(
        self,
        params: tuple[str, ...] = (),
        body: tuple[ast.Stmt, ...] = (),
        closure: Optional[Environment] = None,
        properties: Optional[Entries] = None,
        native: Optional[NativeFn] = None,
        use_props: bool = True,
        builtins: bool = True,
    ):
        props: Entries = dict(FUNCTION_PROPERTIES) if use_props and builtins else {}
        props.update(properties or {})
        super().__init__("funcion", props, builtins=builtins)
        self.params: tuple[str, ...] = tuple(params)
        self.body: tuple[ast.Stmt, ...] = tuple(body)
        self.closure: Optional[Environment] = closure
        self.native: Optional[NativeFn] = native

    def env(self) -> Environment:
        """Create the fresh scope for one invocation, parented at the closure."""
        return Environment(self.closure)

    @property
    def name(self) -> str:
        name = self.properties.get("name")
        return name.value if isinstance(name, StringVal) else ""

    def source(self) -> str:
        if self.native is not None and not self.body:
            return f"funcion {self.name}({', '.join(self.params)}){{[codigo nativo]}}"
        return unparse_function(self.name, self.params, self.body)

    def pintar(self) -> str:
        return f"[Funcion: {self.name or '<anonima>'}]"

    def __repr__(self) -> str:
        kind = "native" if self.native is not None else "user"
        return f"<FunctionVal {self.name or '<anonima>'} {kind} ({', '.join(self.params)})>"


# --- Built-in property natives ---
# Shared by every complex value. They are created without built-ins of their
# own and then patched to reference each other, since a function value would
# otherwise need a fresh __pintar__ function to exist.

def _native_pintar(this: RuntimeValue, args: list[RuntimeValue]) -> Any:
    return this.pintar()


def _native_typeof(this: RuntimeValue, args: list[RuntimeValue]) -> StringVal:
    return make_string(this.type_name())


def _native_to_source(this: RuntimeValue, args: list[RuntimeValue]) -> StringVal:
    if not isinstance(this, FunctionVal):
        raise ChispaTypeError(f"aCadena espera una funcion, recibio {this.type_name()}")
    return make_string(this.source())


def _bootstrap_native(fn: NativeFn, name: str) -> FunctionVal:
    return FunctionVal(native=fn, properties={"name": make_string(name)}, builtins=False)


PINTAR = _bootstrap_native(_native_pintar, "__pintar__")
TYPEOF = _bootstrap_native(_native_typeof, "__typeof__")
TO_SOURCE = _bootstrap_native(_native_to_source, "aCadena")

BASE_PROPERTIES: Entries = {"__pintar__": PINTAR, "__typeof__": TYPEOF}
FUNCTION_PROPERTIES: Entries = {"aCadena": TO_SOURCE, "name": make_string("")}

for _fn in (PINTAR, TYPEOF, TO_SOURCE):
    _fn.properties = {**BASE_PROPERTIES, **_fn.properties}


# --- Constructors ---

def make_complex(
    type_: str,
    properties: Optional[Entries] = None,
    parent: Optional[Callable[..., ComplexVal]] = None,
) -> ComplexVal:
    return ComplexVal(type_, properties, parent)


def make_object(properties: Optional[Entries] = None) -> ObjectVal:
    return ObjectVal(properties)


def make_array(properties: Optional[Entries] = None) -> ArrayVal:
    return ArrayVal(properties)


def make_array_native(*values: RuntimeVal) -> ArrayVal:
    return ArrayVal({str(i): v for i, v in enumerate(values)})


def make_function(
    params: tuple[str, ...],
    body: tuple[ast.Stmt, ...],
    env: Environment,
    properties: Optional[Entries] = None,
    native: Optional[NativeFn] = None,
    use_props: bool = True,
) -> FunctionVal:
    return FunctionVal(params, body, env, properties, native, use_props)


def make_function_native(
    native: NativeFn,
    properties: Optional[Entries] = None,
    use_props: bool = False,
) -> FunctionVal:
    return FunctionVal(properties=properties, native=native, use_props=use_props)


def property_key(key: RuntimeVal) -> str:
    """Convert a computed member key (`a[k]`) into a property name."""
    if isinstance(key, StringVal):
        return key.value
    if isinstance(key, NumberVal):
        value = key.value
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)
    raise ChispaTypeError(f"Una clave de propiedad debe ser numero o cadena, no {key.type_name()}")


def from_host(value: Any) -> RuntimeVal:
    """Convert a plain host value into a runtime value."""
    if isinstance(value, RuntimeVal):
        return value
    if value is None:
        return Null
    if isinstance(value, bool):
        return make_boolean(value)
    if isinstance(value, (int, float)):
        return make_number(value)
    if isinstance(value, str):
        return make_string(value)
    if isinstance(value, (list, tuple)):
        return make_array_native(*(from_host(v) for v in value))
    if isinstance(value, dict):
        return make_object({str(k): from_host(v) for k, v in value.items()})
    if callable(value):
        def wrapped(this: RuntimeValue, args: list[RuntimeValue]) -> RuntimeVal:
            return from_host(value(*(a.pintar() for a in args)))
        name = getattr(value, "__name__", "")
        return make_function_native(
            wrapped, {"name": make_string(name if name != "<lambda>" else "")}, use_props=True
        )
    raise ChispaTypeError(f"No se puede convertir {type(value).__name__} a un valor Chispa")
