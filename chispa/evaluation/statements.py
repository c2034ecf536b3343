"""Statement handlers: declarations, conditionals and returns."""

from __future__ import annotations

from chispa import EvaluatorFn, RuntimeValue
from chispa.evaluation.control import ReturnSignal
from chispa.evaluation.operators import is_truthy
from chispa.reader import ast
from chispa.types.complex import make_function
from chispa.types.environment import Environment
from chispa.types.primitive import Null, make_string


def evaluate_body(
    body: tuple[ast.Stmt, ...], env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    """Evaluate statements in order and return the value of the last one."""
    result: RuntimeValue = Null
    for stmt in body:
        result = evaluate_fn(stmt, env)
    return result


def program_stmt(node: ast.Program, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    # a top-level `retorna` ends the program with its value
    try:
        return evaluate_body(node.body, env, evaluate_fn)
    except ReturnSignal as signal:
        return signal.value


def var_declaration(
    node: ast.VarDeclaration, env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    value = evaluate_fn(node.value, env)
    return env.declare_var(node.identifier, value, node.constant)


def function_declaration(
    node: ast.FunctionDeclaration, env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    """Close over `env`; named functions are also declared in it."""
    fn = make_function(node.params, node.body, env, {"name": make_string(node.identifier)})
    if node.identifier:
        env.declare_var(node.identifier, fn)
    return fn


def return_statement(
    node: ast.ReturnStatement, env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    raise ReturnSignal(evaluate_fn(node.value, env))


def if_statement(node: ast.IfStatement, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    if is_truthy(evaluate_fn(node.condition, env)):
        return evaluate_body(node.body, Environment(env), evaluate_fn)
    if node.else_ is not None:
        return evaluate_fn(node.else_, env)
    return Null


def else_statement(
    node: ast.ElseStatement, env: Environment, evaluate_fn: EvaluatorFn
) -> RuntimeValue:
    return evaluate_body(node.body, Environment(env), evaluate_fn)
