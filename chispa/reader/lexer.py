"""
  Chispa lexer

- Single left-to-right scan over the source text, no lookahead.
- Every operator is a single-character token; fusing `==`, `!=`, `&&`
  is left to the parser.
- Numbers are maximal runs of ASCII digits (no sign, decimals or exponent).
- Identifiers are maximal runs of [A-Za-z0-9_$]; whole runs matching a
  reserved word become keyword tokens.
- The token list always ends with exactly one EOF token.
"""

from __future__ import annotations

import logging
import string
from enum import Enum, auto
from typing import NamedTuple

from chispa.errors import InvalidSyntax

logger = logging.getLogger(__name__)


class TokenType(Enum):
    # Types
    Number = auto()
    Identifier = auto()

    # Operators
    Equals = auto()          # =
    Negate = auto()          # !
    And = auto()             # &
    Or = auto()              # |

    OpenParen = auto()       # (
    CloseParen = auto()      # )
    BinaryOperator = auto()  # + - * / %
    Semicolon = auto()       # ;
    Comma = auto()           # ,
    Dot = auto()             # .
    Colon = auto()           # :
    OpenBrace = auto()       # {
    CloseBrace = auto()      # }
    OpenBracket = auto()     # [
    CloseBracket = auto()    # ]
    EOF = auto()

    # Keywords
    Def = auto()
    Const = auto()
    Funcion = auto()
    Si = auto()
    Entonces = auto()


class Token(NamedTuple):
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


EOF_VALUE = "EndOfFile"

KEYWORDS: dict[str, TokenType] = {
    "def": TokenType.Def,
    "const": TokenType.Const,
    "funcion": TokenType.Funcion,
    "si": TokenType.Si,
    "entonces": TokenType.Entonces,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.OpenParen,
    ")": TokenType.CloseParen,
    "{": TokenType.OpenBrace,
    "}": TokenType.CloseBrace,
    "[": TokenType.OpenBracket,
    "]": TokenType.CloseBracket,
    "+": TokenType.BinaryOperator,
    "-": TokenType.BinaryOperator,
    "*": TokenType.BinaryOperator,
    "/": TokenType.BinaryOperator,
    "%": TokenType.BinaryOperator,
    "=": TokenType.Equals,
    "!": TokenType.Negate,
    "&": TokenType.And,
    "|": TokenType.Or,
    ";": TokenType.Semicolon,
    ":": TokenType.Colon,
    ",": TokenType.Comma,
    ".": TokenType.Dot,
}

SKIPPABLE = frozenset(" \n\t\r")
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_$")


def is_int(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    return ch in IDENTIFIER_CHARS


def tokenize(source: str) -> list[Token]:
    """Convert `source` into an EOF-terminated list of tokens.

    Raises InvalidSyntax on any character outside the language alphabet,
    reporting its 1-based line and column.
    """
    tokens: list[Token] = []
    pos = 0
    n = len(source)
    line, line_start = 1, 0

    while pos < n:
        ch = source[pos]

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            tokens.append(Token(kind, ch))
            pos += 1
            continue

        if is_int(ch):
            start = pos
            while pos < n and is_int(source[pos]):
                pos += 1
            tokens.append(Token(TokenType.Number, source[start:pos]))
            continue

        if is_alpha(ch):
            start = pos
            while pos < n and is_alpha(source[pos]):
                pos += 1
            word = source[start:pos]
            tokens.append(Token(KEYWORDS.get(word, TokenType.Identifier), word))
            continue

        if ch in SKIPPABLE:
            if ch == "\n":
                line, line_start = line + 1, pos + 1
            pos += 1
            continue

        raise InvalidSyntax(
            f"Caracter no reconocido en el codigo fuente: {ch!r}",
            line,
            pos - line_start + 1,
        )

    tokens.append(Token(TokenType.EOF, EOF_VALUE))
    logger.debug("tokenized %d characters into %d tokens", n, len(tokens))
    return tokens
