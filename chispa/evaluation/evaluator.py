"""Core evaluator for the Chispa interpreter.

Dispatches each node to its handler through the EVALUATORS table. Handlers
receive the evaluator itself so they can recurse into child nodes without
importing this module.
"""

from __future__ import annotations

from chispa import Node, RuntimeValue
from chispa.errors import EvaluationError
from chispa.evaluation import expressions, statements
from chispa.reader import ast
from chispa.types.environment import Environment

EVALUATORS = {
    ast.Program: statements.program_stmt,
    ast.VarDeclaration: statements.var_declaration,
    ast.FunctionDeclaration: statements.function_declaration,
    ast.ReturnStatement: statements.return_statement,
    ast.IfStatement: statements.if_statement,
    ast.ElseStatement: statements.else_statement,
    ast.NumericLiteral: expressions.numeric_literal,
    ast.StringLiteral: expressions.string_literal,
    ast.Identifier: expressions.identifier,
    ast.PropertyIdentifier: expressions.property_identifier,
    ast.ObjectLiteral: expressions.object_literal,
    ast.ArrayLiteral: expressions.array_literal,
    ast.MemberExpr: expressions.member_expr,
    ast.BinaryExpr: expressions.binary_expr,
    ast.AssignmentExpr: expressions.assignment_expr,
    ast.CallExpr: expressions.call_expr,
}


def evaluate(node: Node, env: Environment) -> RuntimeValue:
    """Evaluate `node` in `env` and return its runtime value."""
    handler = EVALUATORS.get(type(node))
    if handler is None:
        raise EvaluationError(f"Nodo no soportado por el evaluador: {node!r}")
    return handler(node, env, evaluate)
