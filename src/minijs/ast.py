"""Abstract syntax tree definitions for minijs."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .token import Token


#common root so evaluator dispatch can accept any tree fragment
class Node:
    __slots__ = ()


#every statement remembers the token that introduced it
@dataclass(slots=True)
class Statement(Node):
    token: Token


#every expression remembers its leading or operator token
@dataclass(slots=True)
class Expression(Node):
    token: Token


#represents the root of a parsed source string
@dataclass(slots=True)
class Program(Node):
    statements: List[Statement] = field(default_factory=list)


# Expressions ------------------------------------------------------------------


#bare names resolve through the environment chain at runtime
@dataclass(slots=True)
class Identifier(Expression):
    value: str


#numbers are stored already converted to float
@dataclass(slots=True)
class NumberLiteral(Expression):
    value: float


@dataclass(slots=True)
class StringLiteral(Expression):
    value: str


@dataclass(slots=True)
class BooleanLiteral(Expression):
    value: bool


@dataclass(slots=True)
class NullLiteral(Expression):
    pass


#unary `-x` and `!x`
@dataclass(slots=True)
class PrefixExpression(Expression):
    operator: str
    right: Optional[Expression]


#binary operators; `.` property access uses an Identifier on the right
@dataclass(slots=True)
class InfixExpression(Expression):
    left: Optional[Expression]
    operator: str
    right: Optional[Expression]


#a lexically illegal character carried through to the evaluator
@dataclass(slots=True)
class IllegalExpression(Expression):
    pass


#`if (cond) { ... } else { ... }` produces the value of the chosen block
@dataclass(slots=True)
class IfExpression(Expression):
    condition: Optional[Expression]
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None


#holds the parameter names and body; the closure is attached at runtime
@dataclass(slots=True)
class FunctionLiteral(Expression):
    parameters: List[Identifier] = field(default_factory=list)
    body: Optional[BlockStatement] = None


#callee may be any expression, including a property access
@dataclass(slots=True)
class CallExpression(Expression):
    function: Optional[Expression]
    arguments: List[Optional[Expression]] = field(default_factory=list)


# Statements -------------------------------------------------------------------


#`let name = value;` binds into the current scope
@dataclass(slots=True)
class LetStatement(Statement):
    name: Identifier
    value: Optional[Expression]


@dataclass(slots=True)
class ReturnStatement(Statement):
    return_value: Optional[Expression]


#expression evaluated for its value or side effects
@dataclass(slots=True)
class ExpressionStatement(Statement):
    expression: Expression


#container for zero or more statements; does not open a new scope
@dataclass(slots=True)
class BlockStatement(Statement):
    statements: List[Statement] = field(default_factory=list)
