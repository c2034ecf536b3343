"""Rebuild Chispa source text from syntax tree nodes.

The output is structurally faithful, not textually: layout and redundant
parentheses of the original source are not preserved, but re-parsing the text
gives a tree that evaluates the same way.
"""

from __future__ import annotations

from io import StringIO

from chispa.errors import EvaluationError
from chispa.reader import ast

INDENT = "  "

# Binding strength of infix operators; assignment binds loosest.
PRECEDENCE: dict[str, int] = {
    "=": 1,
    "|": 2,
    "&": 3,
    "==": 4,
    "!=": 4,
    "+": 5,
    "-": 5,
    "*": 6,
    "/": 6,
    "%": 6,
}
POSTFIX_PRECEDENCE = 7


def quote_string(text: str) -> str:
    quote = "'" if '"' in text else '"'
    return f"{quote}{text}{quote}"


def _precedence(node: ast.Stmt) -> int:
    if isinstance(node, ast.AssignmentExpr):
        return PRECEDENCE["="]
    if isinstance(node, ast.BinaryExpr):
        return PRECEDENCE[node.operator]
    if isinstance(node, ast.FunctionDeclaration):
        return 0
    return POSTFIX_PRECEDENCE + 1


def _operand(node: ast.Stmt, min_precedence: int) -> str:
    text = unparse(node)
    return f"({text})" if _precedence(node) < min_precedence else text


def _statement(stmt: ast.Stmt) -> str:
    text = unparse(stmt)
    # expression statements need a terminator so the next line is not read as a call
    if isinstance(stmt, ast.Expr):
        return text + ";"
    # so is an anonymous function, which parses as an expression
    if isinstance(stmt, ast.FunctionDeclaration) and not stmt.identifier:
        return text + ";"
    return text


def unparse_body(body: tuple[ast.Stmt, ...]) -> str:
    """Render a statement block including braces, one statement per line."""
    if not body:
        return "{}"
    with StringIO() as buffer:
        buffer.write("{\n")
        for stmt in body:
            for line in _statement(stmt).splitlines():
                buffer.write(f"{INDENT}{line}\n")
        buffer.write("}")
        return buffer.getvalue()


def unparse_function(name: str, params: tuple[str, ...], body: tuple[ast.Stmt, ...]) -> str:
    head = f"funcion {name}(" if name else "funcion ("
    return f"{head}{', '.join(params)}){unparse_body(body)}"


def unparse(node: ast.Stmt) -> str:
    """Return source text for `node`."""
    match node:
        case ast.Program(body=body):
            return "\n".join(_statement(stmt) for stmt in body)
        case ast.VarDeclaration(constant=constant, identifier=identifier, value=value):
            keyword = "const" if constant else "def"
            return f"{keyword} {identifier} = {unparse(value)};"
        case ast.StringLiteral(value=value):
            return quote_string(value)
        case ast.NumericLiteral(value=value):
            return str(value)
        case ast.ReturnStatement(value=value):
            return f"retorna {unparse(value)};"
        case ast.Identifier(symbol=symbol) | ast.PropertyIdentifier(symbol=symbol):
            return symbol
        case ast.Property(key=key, value=None):
            return key
        case ast.Property(key=key, value=value):
            return f"{key}: {unparse(value)}"
        case ast.ObjectLiteral(properties=properties):
            if not properties:
                return "{}"
            return "{ " + ", ".join(unparse(p) for p in properties) + " }"
        case ast.ArrayLiteral(properties=elements):
            return "[" + ", ".join(unparse(e) for e in elements) + "]"
        case ast.MemberExpr(object=obj, property=prop, computed=True):
            return f"{_operand(obj, POSTFIX_PRECEDENCE)}[{unparse(prop)}]"
        case ast.MemberExpr(object=obj, property=prop):
            return f"{_operand(obj, POSTFIX_PRECEDENCE)}.{unparse(prop)}"
        case ast.CallExpr(callee=callee, args=args):
            rendered = ", ".join(unparse(a) for a in args)
            return f"{_operand(callee, POSTFIX_PRECEDENCE)}({rendered})"
        case ast.BinaryExpr(left=left, right=right, operator=op):
            prec = PRECEDENCE[op]
            # left-associative: an equal-precedence right operand keeps its parentheses
            return f"{_operand(left, prec)} {op} {_operand(right, prec + 1)}"
        case ast.AssignmentExpr(left=left, right=right):
            prec = PRECEDENCE["="]
            # right-associative
            return f"{_operand(left, prec + 1)} = {_operand(right, prec)}"
        case ast.FunctionDeclaration(identifier=name, params=params, body=body):
            return unparse_function(name, params, body)
        case ast.IfStatement(condition=condition, body=body, else_=else_):
            text = f"si ({unparse(condition)}) {unparse_body(body)}"
            return f"{text} {unparse(else_)}" if else_ is not None else text
        case ast.ElseStatement(body=body):
            return f"entonces {unparse_body(body)}"
    raise EvaluationError(f"No se puede reconstruir el nodo {node!r}")
