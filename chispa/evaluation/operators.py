"""Binary operators and truthiness.

Coercion policy:
- Falsy values are null, `falso`, the number 0 and the empty string; every
  other value, including every object, list and function, is truthy.
- `+` adds numbers; if either side is a string both sides are converted to
  their display text and concatenated.
- `- * / %` require numbers. `/` yields an integer when the division is exact.
- `==` / `!=` compare primitives by value and complex values by identity.
- `&` / `|` are short-circuiting and return one of their operands; they are
  handled by the expression evaluator, which must not evaluate the right side
  eagerly.
"""

from __future__ import annotations

from chispa.errors import ChispaTypeError, ChispaZeroDivisionError, EvaluationError
from chispa.types.complex import ComplexVal
from chispa.types.primitive import (
    BooleanVal,
    NullVal,
    NumberVal,
    RuntimeVal,
    StringVal,
    make_boolean,
    make_number,
    make_string,
)

SHORT_CIRCUIT = frozenset("&|")


def is_truthy(value: RuntimeVal) -> bool:
    if isinstance(value, NullVal):
        return False
    if isinstance(value, (BooleanVal, NumberVal, StringVal)):
        return bool(value.value)
    return True


def values_equal(left: RuntimeVal, right: RuntimeVal) -> bool:
    if isinstance(left, ComplexVal) or isinstance(right, ComplexVal):
        return left is right
    return left == right


def _numbers(operator: str, left: RuntimeVal, right: RuntimeVal) -> tuple:
    if not isinstance(left, NumberVal) or not isinstance(right, NumberVal):
        raise ChispaTypeError(
            f"El operador '{operator}' requiere numeros, recibio "
            f"{left.type_name()} y {right.type_name()}"
        )
    return left.value, right.value


def _divide(a, b):
    if b == 0:
        raise ChispaZeroDivisionError("Division entre cero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def _remainder(a, b):
    if b == 0:
        raise ChispaZeroDivisionError("Modulo entre cero")
    return a % b


ARITHMETIC = {
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "%": _remainder,
}


def binary_operation(operator: str, left: RuntimeVal, right: RuntimeVal) -> RuntimeVal:
    """Apply a strict (non short-circuit) binary operator."""
    if operator == "+":
        if isinstance(left, StringVal) or isinstance(right, StringVal):
            return make_string(left.to_text() + right.to_text())
        a, b = _numbers(operator, left, right)
        return make_number(a + b)
    if operator in ARITHMETIC:
        a, b = _numbers(operator, left, right)
        return make_number(ARITHMETIC[operator](a, b))
    if operator == "==":
        return make_boolean(values_equal(left, right))
    if operator == "!=":
        return make_boolean(not values_equal(left, right))
    raise EvaluationError(f"Operador desconocido '{operator}'")
