"""Lexical analysis for the minijs language."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List

from .errors import SourceLocation
from .token import Token, TokenType, lookup_ident


#single-character tokens that never need lookahead
_SIMPLE_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ";": TokenType.SEMICOLON,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

#characters that may be followed by `=` to form a two-character operator
_TWO_CHAR_TOKENS = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
    ">": (TokenType.GT, TokenType.GTE),
    "<": (TokenType.LT, TokenType.LTE),
}


def _is_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


#hands out one token per call; never raises on bad input
@dataclass(slots=True)
class Lexer:
    source: str
    _length: int = field(init=False)
    _index: int = field(init=False, default=0)
    _line: int = field(init=False, default=1)
    _column: int = field(init=False, default=1)

    def __post_init__(self) -> None:
        self._length = len(self.source)

    def next_token(self) -> Token:
        self._skip_whitespace()
        start = self._current_location()
        if self._is_at_end():
            return Token(TokenType.EOF, "", start)

        char = self._advance()

        if _is_letter(char):
            literal = self._read_while(_is_letter)
            return Token(lookup_ident(literal), literal, start)

        if _is_digit(char):
            literal = self._read_while(_is_digit)
            return Token(TokenType.NUMBER, literal, start)

        if char == '"':
            return Token(TokenType.STRING, self._string(), start)

        if char in _TWO_CHAR_TOKENS:
            single, double = _TWO_CHAR_TOKENS[char]
            if self._match("="):
                return Token(double, char + "=", start)
            return Token(single, char, start)

        token_type = _SIMPLE_TOKENS.get(char)
        if token_type is None:
            return Token(TokenType.ILLEGAL, char, start)
        return Token(token_type, char, start)

    #yields tokens up to and including the first EOF
    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def lex(self) -> List[Token]:
        return list(self)

    # Internal helpers -------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._index >= self._length

    def _current_location(self) -> SourceLocation:
        return SourceLocation(line=self._line, column=self._column)

    def _advance(self) -> str:
        char = self.source[self._index]
        self._index += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self._index]

    def _match(self, expected: str) -> bool:
        if self._is_at_end():
            return False
        if self.source[self._index] != expected:
            return False
        self._advance()
        return True

    def _skip_whitespace(self) -> None:
        while not self._is_at_end() and self._peek() in " \t\n\r":
            self._advance()

    #continues a lexeme whose first character was already consumed
    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        start_index = self._index - 1
        while not self._is_at_end() and predicate(self._peek()):
            self._advance()
        return self.source[start_index:self._index]

    #no escapes; an unterminated string runs to end of input
    def _string(self) -> str:
        start_index = self._index
        while not self._is_at_end() and self._peek() != '"':
            self._advance()
        literal = self.source[start_index:self._index]
        self._match('"')
        return literal
