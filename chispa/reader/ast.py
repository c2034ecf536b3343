"""Syntax tree for Chispa programs.

Nodes are frozen dataclasses; child sequences are tuples so a tree can never
be mutated or share structure after the parser builds it. `kind` is the
node's tag and always equals its class name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class Stmt:
    __slots__ = ()

    @property
    def kind(self) -> str:
        return type(self).__name__


class Expr(Stmt):
    __slots__ = ()


# --- Statements ---

@dataclass(frozen=True)
class Program(Stmt):
    body: tuple[Stmt, ...] = ()


@dataclass(frozen=True)
class VarDeclaration(Stmt):
    constant: bool
    identifier: str
    value: Expr


@dataclass(frozen=True)
class FunctionDeclaration(Stmt):
    identifier: str
    params: tuple[str, ...]
    body: tuple[Stmt, ...]


@dataclass(frozen=True)
class ReturnStatement(Stmt):
    value: Expr


@dataclass(frozen=True)
class ElseStatement(Stmt):
    body: tuple[Stmt, ...]


@dataclass(frozen=True)
class IfStatement(Stmt):
    condition: Expr
    body: tuple[Stmt, ...]
    else_: Optional[ElseStatement] = None


# --- Expressions ---

@dataclass(frozen=True)
class AssignmentExpr(Expr):
    left: Expr
    right: Expr


@dataclass(frozen=True)
class BinaryExpr(Expr):
    left: Expr
    right: Expr
    operator: str


@dataclass(frozen=True)
class CallExpr(Expr):
    callee: Expr
    args: tuple[Expr, ...] = ()


@dataclass(frozen=True)
class MemberExpr(Expr):
    object: Expr
    property: Expr
    computed: bool = False


@dataclass(frozen=True)
class Identifier(Expr):
    symbol: str


@dataclass(frozen=True)
class PropertyIdentifier(Expr):
    """A property name that must not be looked up as a variable."""
    symbol: str


@dataclass(frozen=True)
class NumericLiteral(Expr):
    value: int


@dataclass(frozen=True)
class StringLiteral(Expr):
    value: str


@dataclass(frozen=True)
class Property(Expr):
    key: str
    # None for the `{ x }` shorthand
    value: Optional[Expr] = None


@dataclass(frozen=True)
class ObjectLiteral(Expr):
    properties: tuple[Property, ...] = ()


@dataclass(frozen=True)
class ArrayLiteral(Expr):
    properties: tuple[Expr, ...] = ()
