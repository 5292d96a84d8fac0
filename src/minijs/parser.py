"""Pratt parser that turns minijs tokens into an AST."""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional

from . import ast
from .errors import ParserReuseError
from .lexer import Lexer
from .token import Token, TokenType

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], Optional[ast.Expression]]
InfixParseFn = Callable[[ast.Expression], Optional[ast.Expression]]


#binding strength of each operator, lowest first
class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2
    COMPARISON = 3
    SUM = 4
    PRODUCT = 5
    PREFIX = 6
    CALL = 7
    PROPERTY = 8


PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.COMPARISON,
    TokenType.GT: Precedence.COMPARISON,
    TokenType.LTE: Precedence.COMPARISON,
    TokenType.GTE: Precedence.COMPARISON,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.DOT: Precedence.PROPERTY,
}


#pulls tokens lazily from a Lexer and climbs operator precedence
class Parser:
    """Parses a whole program in one pass.

    Syntax problems never raise: the offending construct is dropped (its
    parse function returns ``None``) and a message is appended to
    :attr:`errors` so the rest of the program still parses.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self.errors: List[str] = []
        self._exhausted = False
        self._prefix_fns: Dict[TokenType, PrefixParseFn] = {
            TokenType.IDENT: self._parse_identifier,
            TokenType.NUMBER: self._parse_number_literal,
            TokenType.STRING: self._parse_string_literal,
            TokenType.TRUE: self._parse_boolean_literal,
            TokenType.FALSE: self._parse_boolean_literal,
            TokenType.NULL: self._parse_null_literal,
            TokenType.MINUS: self._parse_prefix_expression,
            TokenType.BANG: self._parse_prefix_expression,
            TokenType.LPAREN: self._parse_grouped_expression,
            TokenType.IF: self._parse_if_expression,
            TokenType.FUNCTION: self._parse_function_literal,
            TokenType.ILLEGAL: self._parse_illegal,
        }
        self._infix_fns: Dict[TokenType, InfixParseFn] = {
            TokenType.PLUS: self._parse_infix_expression,
            TokenType.MINUS: self._parse_infix_expression,
            TokenType.ASTERISK: self._parse_infix_expression,
            TokenType.SLASH: self._parse_infix_expression,
            TokenType.EQ: self._parse_infix_expression,
            TokenType.NOT_EQ: self._parse_infix_expression,
            TokenType.LT: self._parse_infix_expression,
            TokenType.GT: self._parse_infix_expression,
            TokenType.LTE: self._parse_infix_expression,
            TokenType.GTE: self._parse_infix_expression,
            TokenType.LPAREN: self._parse_call_expression,
            TokenType.DOT: self._parse_property_expression,
        }
        self._cur = self._lexer.next_token()
        self._peek = self._lexer.next_token()

    @classmethod
    def from_source(cls, source: str) -> Parser:
        return cls(Lexer(source))

    def parse_program(self) -> ast.Program:
        if self._exhausted:
            raise ParserReuseError()
        program = ast.Program()
        while not self._cur_is(TokenType.EOF):
            statement = self._parse_statement()
            if statement is not None:
                program.statements.append(statement)
            self._next_token()
        self._exhausted = True
        return program

    # Statements ----------------------------------------------------------------

    #directs statements based on leading token kind
    def _parse_statement(self) -> Optional[ast.Statement]:
        if self._cur_is(TokenType.LET):
            return self._parse_let_statement()
        if self._cur_is(TokenType.RETURN):
            return self._parse_return_statement()
        if self._cur_is(TokenType.LBRACE):
            return self._parse_block_statement()
        return self._parse_expression_statement()

    def _parse_let_statement(self) -> Optional[ast.LetStatement]:
        let_token = self._cur
        if not self._expect_peek(TokenType.IDENT):
            return None
        name = ast.Identifier(token=self._cur, value=self._cur.literal)
        if not self._expect_peek(TokenType.ASSIGN):
            return None
        self._next_token()
        value = self._parse_expression(Precedence.LOWEST)
        self._skip_optional_semicolon()
        return ast.LetStatement(token=let_token, name=name, value=value)

    def _parse_return_statement(self) -> ast.ReturnStatement:
        return_token = self._cur
        self._next_token()
        value = self._parse_expression(Precedence.LOWEST)
        self._skip_optional_semicolon()
        return ast.ReturnStatement(token=return_token, return_value=value)

    def _parse_expression_statement(self) -> Optional[ast.ExpressionStatement]:
        start = self._cur
        expression = self._parse_expression(Precedence.LOWEST)
        self._skip_optional_semicolon()
        if expression is None:
            return None
        return ast.ExpressionStatement(token=start, expression=expression)

    #expects the current token to be `{` and stops on the matching `}`
    def _parse_block_statement(self) -> ast.BlockStatement:
        block = ast.BlockStatement(token=self._cur)
        self._next_token()
        while not self._cur_is(TokenType.RBRACE) and not self._cur_is(TokenType.EOF):
            statement = self._parse_statement()
            if statement is not None:
                block.statements.append(statement)
            self._next_token()
        return block

    # Expressions ---------------------------------------------------------------

    def _parse_expression(self, precedence: Precedence) -> Optional[ast.Expression]:
        prefix = self._prefix_fns.get(self._cur.type)
        if prefix is None:
            self._error(f"no prefix parse function for {self._cur.type.value}", self._cur)
            return None
        left = prefix()

        while not self._peek_is(TokenType.SEMICOLON) and precedence < self._peek_precedence():
            infix = self._infix_fns.get(self._peek.type)
            if infix is None or left is None:
                return left
            self._next_token()
            left = infix(left)
        return left

    def _parse_identifier(self) -> ast.Expression:
        return ast.Identifier(token=self._cur, value=self._cur.literal)

    def _parse_number_literal(self) -> ast.Expression:
        return ast.NumberLiteral(token=self._cur, value=float(self._cur.literal))

    def _parse_string_literal(self) -> ast.Expression:
        return ast.StringLiteral(token=self._cur, value=self._cur.literal)

    def _parse_boolean_literal(self) -> ast.Expression:
        return ast.BooleanLiteral(token=self._cur, value=self._cur_is(TokenType.TRUE))

    def _parse_null_literal(self) -> ast.Expression:
        return ast.NullLiteral(token=self._cur)

    def _parse_illegal(self) -> ast.Expression:
        self._error(f"illegal character {self._cur.literal!r}", self._cur)
        return ast.IllegalExpression(token=self._cur)

    def _parse_prefix_expression(self) -> ast.Expression:
        token = self._cur
        self._next_token()
        right = self._parse_expression(Precedence.PREFIX)
        return ast.PrefixExpression(token=token, operator=token.literal, right=right)

    def _parse_grouped_expression(self) -> Optional[ast.Expression]:
        self._next_token()
        expression = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        return expression

    def _parse_if_expression(self) -> Optional[ast.Expression]:
        token = self._cur
        if not self._expect_peek(TokenType.LPAREN):
            return None
        self._next_token()
        condition = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        if not self._expect_peek(TokenType.LBRACE):
            return None
        consequence = self._parse_block_statement()
        alternative = None
        if self._peek_is(TokenType.ELSE):
            self._next_token()
            if not self._expect_peek(TokenType.LBRACE):
                return None
            alternative = self._parse_block_statement()
        return ast.IfExpression(
            token=token,
            condition=condition,
            consequence=consequence,
            alternative=alternative,
        )

    #parameters reuse the argument-list routine and must all be bare names
    def _parse_function_literal(self) -> Optional[ast.Expression]:
        token = self._cur
        if not self._expect_peek(TokenType.LPAREN):
            return None
        items = self._parse_expression_list(TokenType.RPAREN)
        if items is None:
            return None
        parameters: List[ast.Identifier] = []
        for item in items:
            if not isinstance(item, ast.Identifier):
                self._error("function parameters must be identifiers", token)
                return None
            parameters.append(item)
        if not self._expect_peek(TokenType.LBRACE):
            return None
        body = self._parse_block_statement()
        return ast.FunctionLiteral(token=token, parameters=parameters, body=body)

    def _parse_infix_expression(self, left: ast.Expression) -> ast.Expression:
        token = self._cur
        precedence = self._cur_precedence()
        self._next_token()
        right = self._parse_expression(precedence)
        return ast.InfixExpression(token=token, left=left, operator=token.literal, right=right)

    def _parse_call_expression(self, function: ast.Expression) -> Optional[ast.Expression]:
        token = self._cur
        arguments = self._parse_expression_list(TokenType.RPAREN)
        if arguments is None:
            return None
        return ast.CallExpression(token=token, function=function, arguments=arguments)

    #`a.b` only accepts a bare identifier after the dot
    def _parse_property_expression(self, left: ast.Expression) -> Optional[ast.Expression]:
        token = self._cur
        if not self._expect_peek(TokenType.IDENT):
            return None
        right = ast.Identifier(token=self._cur, value=self._cur.literal)
        return ast.InfixExpression(token=token, left=left, operator=".", right=right)

    #shared by call arguments and function parameters; expects cur on the opener
    def _parse_expression_list(self, end: TokenType) -> Optional[List[Optional[ast.Expression]]]:
        items: List[Optional[ast.Expression]] = []
        if self._peek_is(end):
            self._next_token()
            return items
        self._next_token()
        items.append(self._parse_expression(Precedence.LOWEST))
        while self._peek_is(TokenType.COMMA):
            self._next_token()
            self._next_token()
            items.append(self._parse_expression(Precedence.LOWEST))
        if not self._expect_peek(end):
            return None
        return items

    # Utilities ----------------------------------------------------------------

    def _next_token(self) -> None:
        self._cur = self._peek
        self._peek = self._lexer.next_token()

    def _cur_is(self, token_type: TokenType) -> bool:
        return self._cur.type is token_type

    def _peek_is(self, token_type: TokenType) -> bool:
        return self._peek.type is token_type

    #advances only when the next token has the expected kind
    def _expect_peek(self, token_type: TokenType) -> bool:
        if self._peek_is(token_type):
            self._next_token()
            return True
        self._error(
            f"expected next token to be {token_type.value}, got {self._peek.type.value}",
            self._peek,
        )
        return False

    def _skip_optional_semicolon(self) -> None:
        if self._peek_is(TokenType.SEMICOLON):
            self._next_token()

    def _peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self._peek.type, Precedence.LOWEST)

    def _cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self._cur.type, Precedence.LOWEST)

    def _error(self, message: str, token: Token) -> None:
        text = f"{token.location}: {message}"
        logger.debug("parse error %s", text)
        self.errors.append(text)


#convenience used by the CLI and tests
def parse(source: str) -> ast.Program:
    return Parser.from_source(source).parse_program()


__all__ = ["Parser", "Precedence", "PRECEDENCES", "parse"]
