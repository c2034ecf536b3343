"""
  Chispa recursive-descent parser

Consumes the token list produced by `chispa.reader.lexer.tokenize` and builds
a `Program` node. Precedence, lowest first:

    assignment  ->  a = b
    or          ->  a | b      (a || b is accepted too)
    and         ->  a & b      (a && b is accepted too)
    equality    ->  a == b, a != b
    additive    ->  + -
    multiplicative -> * / %
    postfix     ->  a.b  a[b]  a(b, c)
    primary

Semicolons after statements are optional. `retorna` is an ordinary identifier
token that is only special at the start of a statement.
"""

from __future__ import annotations

import logging
from typing import Iterable

from chispa.errors import ChispaSyntaxError
from chispa.reader.lexer import Token, TokenType, tokenize
from chispa.reader import ast

logger = logging.getLogger(__name__)

RETURN_KEYWORD = "retorna"


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        if not self.tokens or self.tokens[-1].type is not TokenType.EOF:
            raise ChispaSyntaxError("Token stream must end with EOF")
        self.pos = 0

    # --- Token stream helpers ---
    def peek(self, offset: int = 0) -> Token:
        idx = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[idx]

    def at(self, kind: TokenType, value: str | None = None) -> bool:
        tok = self.peek()
        return tok.type is kind and (value is None or tok.value == value)

    def advance(self) -> Token:
        tok = self.peek()
        if tok.type is not TokenType.EOF:
            self.pos += 1
        return tok

    def expect(self, kind: TokenType, what: str) -> Token:
        tok = self.advance()
        if tok.type is not kind:
            raise ChispaSyntaxError(
                f"Se esperaba {what}, se encontro {tok.value!r} ({tok.type.name})"
            )
        return tok

    def skip_semicolons(self) -> None:
        while self.at(TokenType.Semicolon):
            self.advance()

    # --- Statements ---
    def parse_program(self) -> ast.Program:
        body = []
        self.skip_semicolons()
        while not self.at(TokenType.EOF):
            body.append(self.parse_statement())
            self.skip_semicolons()
        return ast.Program(tuple(body))

    def parse_block(self) -> tuple[ast.Stmt, ...]:
        self.expect(TokenType.OpenBrace, "'{'")
        body = []
        self.skip_semicolons()
        while not self.at(TokenType.CloseBrace):
            if self.at(TokenType.EOF):
                raise ChispaSyntaxError("Bloque sin cerrar: se esperaba '}'")
            body.append(self.parse_statement())
            self.skip_semicolons()
        self.advance()
        return tuple(body)

    def parse_statement(self) -> ast.Stmt:
        tok = self.peek()
        if tok.type in (TokenType.Def, TokenType.Const):
            return self.parse_var_declaration()
        if tok.type is TokenType.Funcion and self.peek(1).type is TokenType.Identifier:
            return self.parse_function()
        if tok.type is TokenType.Si:
            return self.parse_if()
        if tok.type is TokenType.Identifier and tok.value == RETURN_KEYWORD:
            self.advance()
            return ast.ReturnStatement(self.parse_expr())
        return self.parse_expr()

    def parse_var_declaration(self) -> ast.VarDeclaration:
        constant = self.advance().type is TokenType.Const
        name = self.expect(TokenType.Identifier, "un nombre de variable").value
        self.expect(TokenType.Equals, "'=' en la declaracion")
        return ast.VarDeclaration(constant, name, self.parse_expr())

    def parse_function(self) -> ast.FunctionDeclaration:
        self.expect(TokenType.Funcion, "'funcion'")
        name = ""
        if self.at(TokenType.Identifier):
            name = self.advance().value
        self.expect(TokenType.OpenParen, "'(' tras el nombre de la funcion")
        params = []
        while not self.at(TokenType.CloseParen):
            params.append(self.expect(TokenType.Identifier, "un parametro").value)
            if not self.at(TokenType.CloseParen):
                self.expect(TokenType.Comma, "',' entre parametros")
        self.advance()
        return ast.FunctionDeclaration(name, tuple(params), self.parse_block())

    def parse_if(self) -> ast.IfStatement:
        self.expect(TokenType.Si, "'si'")
        condition = self.parse_expr()
        body = self.parse_block()
        else_ = None
        if self.at(TokenType.Entonces):
            self.advance()
            if self.at(TokenType.Si):
                else_ = ast.ElseStatement((self.parse_if(),))
            else:
                else_ = ast.ElseStatement(self.parse_block())
        return ast.IfStatement(condition, body, else_)

    # --- Expressions ---
    def parse_expr(self) -> ast.Expr:
        return self.parse_assignment()

    def parse_assignment(self) -> ast.Expr:
        left = self.parse_or()
        if self.at(TokenType.Equals):
            self.advance()
            return ast.AssignmentExpr(left, self.parse_assignment())
        return left

    def parse_or(self) -> ast.Expr:
        left = self.parse_and()
        while self.at(TokenType.Or):
            self.advance()
            if self.at(TokenType.Or):
                self.advance()
            left = ast.BinaryExpr(left, self.parse_and(), "|")
        return left

    def parse_and(self) -> ast.Expr:
        left = self.parse_equality()
        while self.at(TokenType.And):
            self.advance()
            if self.at(TokenType.And):
                self.advance()
            left = ast.BinaryExpr(left, self.parse_equality(), "&")
        return left

    def parse_equality(self) -> ast.Expr:
        left = self.parse_additive()
        while self.peek(1).type is TokenType.Equals and (
            self.at(TokenType.Equals) or self.at(TokenType.Negate)
        ):
            operator = "==" if self.advance().type is TokenType.Equals else "!="
            self.advance()
            left = ast.BinaryExpr(left, self.parse_additive(), operator)
        return left

    def parse_additive(self) -> ast.Expr:
        left = self.parse_multiplicative()
        while self.peek().type is TokenType.BinaryOperator and self.peek().value in "+-":
            operator = self.advance().value
            left = ast.BinaryExpr(left, self.parse_multiplicative(), operator)
        return left

    def parse_multiplicative(self) -> ast.Expr:
        left = self.parse_postfix()
        while self.peek().type is TokenType.BinaryOperator and self.peek().value in "*/%":
            operator = self.advance().value
            left = ast.BinaryExpr(left, self.parse_postfix(), operator)
        return left

    def parse_postfix(self) -> ast.Expr:
        expr = self.parse_primary()
        while True:
            if self.at(TokenType.Dot):
                self.advance()
                name = self.expect(TokenType.Identifier, "un nombre de propiedad").value
                expr = ast.MemberExpr(expr, ast.PropertyIdentifier(name))
            elif self.at(TokenType.OpenBracket):
                self.advance()
                key = self.parse_expr()
                self.expect(TokenType.CloseBracket, "']'")
                expr = ast.MemberExpr(expr, key, computed=True)
            elif self.at(TokenType.OpenParen):
                expr = ast.CallExpr(expr, self.parse_args())
            else:
                return expr

    def parse_args(self) -> tuple[ast.Expr, ...]:
        self.expect(TokenType.OpenParen, "'('")
        args = []
        while not self.at(TokenType.CloseParen):
            args.append(self.parse_expr())
            if not self.at(TokenType.CloseParen):
                self.expect(TokenType.Comma, "',' entre argumentos")
        self.advance()
        return tuple(args)

    def parse_primary(self) -> ast.Expr:
        tok = self.peek()
        match tok.type:
            case TokenType.Number:
                self.advance()
                return ast.NumericLiteral(int(tok.value))
            case TokenType.Identifier:
                self.advance()
                return ast.Identifier(tok.value)
            case TokenType.OpenParen:
                self.advance()
                expr = self.parse_expr()
                self.expect(TokenType.CloseParen, "')'")
                return expr
            case TokenType.OpenBrace:
                return self.parse_object()
            case TokenType.OpenBracket:
                return self.parse_array()
            case TokenType.Funcion:
                return self.parse_function()
            case TokenType.BinaryOperator if tok.value == "-":
                # unary minus is sugar for 0 - operand
                self.advance()
                return ast.BinaryExpr(ast.NumericLiteral(0), self.parse_postfix(), "-")
        raise ChispaSyntaxError(
            f"Token inesperado {tok.value!r} ({tok.type.name})"
        )

    def parse_object(self) -> ast.ObjectLiteral:
        self.expect(TokenType.OpenBrace, "'{'")
        properties = []
        while not self.at(TokenType.CloseBrace):
            key_tok = self.advance()
            if key_tok.type not in (TokenType.Identifier, TokenType.Number):
                raise ChispaSyntaxError(f"Clave de objeto invalida: {key_tok.value!r}")
            if self.at(TokenType.Colon):
                self.advance()
                properties.append(ast.Property(key_tok.value, self.parse_expr()))
            else:
                properties.append(ast.Property(key_tok.value))
            if not self.at(TokenType.CloseBrace):
                self.expect(TokenType.Comma, "',' entre propiedades")
        self.advance()
        return ast.ObjectLiteral(tuple(properties))

    def parse_array(self) -> ast.ArrayLiteral:
        self.expect(TokenType.OpenBracket, "'['")
        elements = []
        while not self.at(TokenType.CloseBracket):
            elements.append(self.parse_expr())
            if not self.at(TokenType.CloseBracket):
                self.expect(TokenType.Comma, "',' entre elementos")
        self.advance()
        return ast.ArrayLiteral(tuple(elements))


def parse(source: str) -> ast.Program:
    """Tokenize and parse `source` into a Program node."""
    program = Parser(tokenize(source)).parse_program()
    logger.debug("parsed %d top-level statements", len(program.body))
    return program
