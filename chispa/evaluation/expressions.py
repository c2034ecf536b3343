"""Expression handlers: literals, names, members, operators and calls."""

from __future__ import annotations

from chispa import EvaluatorFn, RuntimeValue
from chispa.errors import ChispaTypeError, EvaluationError
from chispa.evaluation.apply import apply
from chispa.evaluation.operators import SHORT_CIRCUIT, binary_operation, is_truthy
from chispa.reader import ast
from chispa.types.complex import ComplexVal, make_array_native, make_object, property_key
from chispa.types.environment import Environment
from chispa.types.primitive import make_number, make_string


def numeric_literal(node: ast.NumericLiteral, env: Environment, _: EvaluatorFn) -> RuntimeValue:
    return make_number(node.value)


def string_literal(node: ast.StringLiteral, env: Environment, _: EvaluatorFn) -> RuntimeValue:
    return make_string(node.value)


def identifier(node: ast.Identifier, env: Environment, _: EvaluatorFn) -> RuntimeValue:
    return env.lookup_var(node.symbol)


def property_identifier(
    node: ast.PropertyIdentifier, env: Environment, _: EvaluatorFn
) -> RuntimeValue:
    return make_string(node.symbol)


def object_literal(
    node: ast.ObjectLiteral, env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    entries = {}
    for prop in node.properties:
        # `{ x }` is shorthand for `{ x: x }`
        value = env.lookup_var(prop.key) if prop.value is None else evaluate_fn(prop.value, env)
        entries[prop.key] = value
    return make_object(entries)


def array_literal(
    node: ast.ArrayLiteral, env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    return make_array_native(*(evaluate_fn(element, env) for element in node.properties))


def _member_target(
    node: ast.MemberExpr, env: Environment, evaluate_fn: EvaluatorFn
) -> tuple[ComplexVal, str]:
    obj = evaluate_fn(node.object, env)
    if not isinstance(obj, ComplexVal):
        raise ChispaTypeError(
            f"No se puede acceder a propiedades de un valor de tipo {obj.type_name()}"
        )
    if node.computed:
        return obj, property_key(evaluate_fn(node.property, env))
    if not isinstance(node.property, (ast.PropertyIdentifier, ast.Identifier)):
        raise EvaluationError(f"Propiedad invalida: {node.property!r}")
    return obj, node.property.symbol


def member_expr(node: ast.MemberExpr, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    obj, key = _member_target(node, env, evaluate_fn)
    return obj.get_property(key)


def binary_expr(node: ast.BinaryExpr, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    left = evaluate_fn(node.left, env)
    if node.operator in SHORT_CIRCUIT:
        if is_truthy(left) == (node.operator == "|"):
            return left
        return evaluate_fn(node.right, env)
    return binary_operation(node.operator, left, evaluate_fn(node.right, env))


def assignment_expr(
    node: ast.AssignmentExpr, env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    target = node.left
    if isinstance(target, ast.Identifier):
        value = evaluate_fn(node.right, env)
        return env.assign_var(target.symbol, value)
    if isinstance(target, ast.MemberExpr):
        value = evaluate_fn(node.right, env)
        obj, key = _member_target(target, env, evaluate_fn)
        return obj.set_property(key, value)
    raise EvaluationError(f"Destino de asignacion invalido: {target.kind}")


def call_expr(node: ast.CallExpr, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    this = None
    if isinstance(node.callee, ast.MemberExpr):
        this, key = _member_target(node.callee, env, evaluate_fn)
        fn = this.get_property(key)
    else:
        fn = evaluate_fn(node.callee, env)
    args = [evaluate_fn(arg, env) for arg in node.args]
    return apply(fn, args, evaluate_fn, this)
