"""Token definitions for the minijs language."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .errors import SourceLocation


#enumerates every lexical category produced by the lexer
class TokenType(Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Literals and identifiers
    IDENT = "IDENT"
    NUMBER = "NUMBER"
    STRING = "STRING"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    EQ = "=="
    NOT_EQ = "!="

    # Punctuation
    SEMICOLON = ";"
    DOT = "."
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    NULL = "NULL"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"


#keyword lookup so the lexer can emit keyword tokens quickly
KEYWORDS: Final[dict[str, TokenType]] = {
    "fn": TokenType.FUNCTION,
    "function": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(ident: str) -> TokenType:
    return KEYWORDS.get(ident, TokenType.IDENT)


#immutable pairing of token kind and its source text
@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    literal: str
    location: SourceLocation = field(default=SourceLocation(1, 1), compare=False)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Token({self.type.name}, {self.literal!r}, {self.location})"
