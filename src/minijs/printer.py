"""Human-readable rendering of minijs syntax trees."""
from __future__ import annotations

from typing import List, Optional

from . import ast
from .values import format_number


#one line per top-level statement; used by the CLI and parser tests
def format_program(program: ast.Program) -> str:
    return "\n".join(format_node(statement) for statement in program.statements)


#infix and prefix expressions are fully parenthesised to expose precedence
def format_node(node: Optional[ast.Node]) -> str:
    match node:
        case None:
            return "<missing>"
        case ast.Program():
            return format_program(node)
        case ast.LetStatement(name=name, value=value):
            return f"let {name.value} = {format_node(value)};"
        case ast.ReturnStatement(return_value=value):
            return f"return {format_node(value)};"
        case ast.ExpressionStatement(expression=expression):
            return format_node(expression)
        case ast.BlockStatement(statements=statements):
            return _format_block(statements)
        case ast.Identifier(value=name):
            return name
        case ast.NumberLiteral(value=number):
            return format_number(number)
        case ast.StringLiteral(value=text):
            return f'"{text}"'
        case ast.BooleanLiteral(value=flag):
            return "true" if flag else "false"
        case ast.NullLiteral():
            return "null"
        case ast.PrefixExpression(operator=operator, right=right):
            return f"({operator}{format_node(right)})"
        case ast.InfixExpression(left=left, operator=".", right=right):
            return f"{format_node(left)}.{format_node(right)}"
        case ast.InfixExpression(left=left, operator=operator, right=right):
            return f"({format_node(left)} {operator} {format_node(right)})"
        case ast.IfExpression(condition=condition, consequence=consequence, alternative=alternative):
            text = f"if ({format_node(condition)}) {format_node(consequence)}"
            if alternative is not None:
                text += f" else {format_node(alternative)}"
            return text
        case ast.FunctionLiteral(parameters=parameters, body=body):
            names = ", ".join(parameter.value for parameter in parameters)
            return f"fn({names}) {format_node(body)}"
        case ast.CallExpression(function=function, arguments=arguments):
            rendered = ", ".join(format_node(argument) for argument in arguments)
            return f"{format_node(function)}({rendered})"
        case ast.IllegalExpression(token=token):
            return f"<illegal {token.literal!r}>"
        case _:
            return f"<{type(node).__name__}>"


def _format_block(statements: List[ast.Statement]) -> str:
    if not statements:
        return "{ }"
    inner = " ".join(_terminated(statement) for statement in statements)
    return "{ " + inner + " }"


#expression statements inside blocks get an explicit `;` for readability
def _terminated(statement: ast.Statement) -> str:
    text = format_node(statement)
    return text if text.endswith(";") else text + ";"
