"""Tree-walking evaluator for minijs programs."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from . import ast
from .environment import Environment
from .errors import EmptySourceError
from .parser import Parser
from .values import (
    UNDEFINED,
    NULL,
    NativeFunction,
    Number,
    Object,
    ReturnValue,
    String,
    UserFunction,
    Value,
    binary_operation,
    is_truthy,
    native_bool,
    negate,
    to_string,
)

logger = logging.getLogger(__name__)

TraceSink = Callable[[str], None]


#walks the AST against an environment chain and produces values
class Evaluator:
    """Evaluates AST nodes.

    Semantic problems never raise: unbound names, mistyped operands,
    division by zero and calls to non-functions all evaluate to
    ``UNDEFINED``. ``trace``, when given, receives one line per evaluated
    statement and expression; it never influences results.
    """

    def __init__(self, trace: Optional[TraceSink] = None) -> None:
        self.trace = trace

    def evaluate(self, node: Optional[ast.Node], env: Environment) -> Value:
        match node:
            case ast.Program():
                return self._eval_program(node, env)
            case ast.Statement():
                return self._eval_statement(node, env)
            case ast.Expression():
                return self._eval_expression(node, env)
            case _:
                return UNDEFINED

    #invokes a function value; used for call expressions and by host callbacks
    def call_function(self, function: Value, arguments: Sequence[Value]) -> Value:
        match function:
            case NativeFunction(name=name, fn=fn):
                self._trace(f"call native {name} argc={len(arguments)}")
                result = fn(list(arguments))
                return UNDEFINED if result is None else result
            case UserFunction(parameters=parameters, body=body, closure=closure):
                self._trace(f"call fn argc={len(arguments)}")
                call_env = closure.child()
                for index, parameter in enumerate(parameters):
                    value = arguments[index] if index < len(arguments) else UNDEFINED
                    call_env.set(parameter.value, value)
                result = self._eval_block(body, call_env)
                if isinstance(result, ReturnValue):
                    return result.value
                return result
            case _:
                return UNDEFINED

    # Statements ----------------------------------------------------------------

    def _eval_program(self, program: ast.Program, env: Environment) -> Value:
        result: Value = UNDEFINED
        for statement in program.statements:
            result = self._eval_statement(statement, env)
            if isinstance(result, ReturnValue):
                self._trace(f"program return {to_string(result.value)}")
                return result.value
        return result

    def _eval_statement(self, statement: ast.Statement, env: Environment) -> Value:
        self._trace(f"statement {type(statement).__name__}")
        match statement:
            case ast.LetStatement(name=name, value=value_node):
                value = self._value_of(value_node, env)
                self._trace(f"let {name.value} = {to_string(value)}")
                env.set(name.value, value)
                return UNDEFINED
            case ast.ReturnStatement(return_value=value_node):
                return ReturnValue(self._value_of(value_node, env))
            case ast.ExpressionStatement(expression=expression):
                return self.evaluate(expression, env)
            case ast.BlockStatement():
                return self._eval_block(statement, env)
            case _:
                return UNDEFINED

    #stops at the first return marker and hands it upward still wrapped
    def _eval_block(self, block: Optional[ast.BlockStatement], env: Environment) -> Value:
        if block is None:
            return UNDEFINED
        result: Value = UNDEFINED
        for statement in block.statements:
            result = self._eval_statement(statement, env)
            if isinstance(result, ReturnValue):
                return result
        return result

    # Expressions ---------------------------------------------------------------

    def _eval_expression(self, expression: ast.Expression, env: Environment) -> Value:
        self._trace(f"expression {type(expression).__name__}")
        match expression:
            case ast.NumberLiteral(value=number):
                return Number(number)
            case ast.StringLiteral(value=text):
                return String(text)
            case ast.BooleanLiteral(value=flag):
                return native_bool(flag)
            case ast.NullLiteral():
                return NULL
            case ast.Identifier(value=name):
                value = env.get(name)
                return UNDEFINED if value is None else value
            case ast.PrefixExpression(operator=operator, right=right):
                return self._eval_prefix(operator, self._value_of(right, env))
            case ast.InfixExpression(left=left, operator=".", right=ast.Identifier(value=name)):
                return self._eval_property(self._value_of(left, env), name)
            case ast.InfixExpression(left=left, operator=operator, right=right):
                left_value = self._value_of(left, env)
                right_value = self._value_of(right, env)
                return binary_operation(operator, left_value, right_value)
            case ast.IfExpression(condition=condition, consequence=consequence, alternative=alternative):
                if is_truthy(self._value_of(condition, env)):
                    return self._eval_block(consequence, env)
                return self._eval_block(alternative, env)
            case ast.FunctionLiteral(parameters=parameters, body=body):
                if body is None:
                    return UNDEFINED
                return UserFunction(parameters=parameters, body=body, closure=env)
            case ast.CallExpression(function=callee, arguments=argument_nodes):
                function = self._value_of(callee, env)
                arguments: List[Value] = [self._value_of(arg, env) for arg in argument_nodes]
                return self.call_function(function, arguments)
            case ast.IllegalExpression(token=token):
                logger.debug("illegal token %r evaluates to undefined", token.literal)
                return UNDEFINED
            case _:
                return UNDEFINED

    #value of an operand; a return marker from an `if` branch is unwrapped here
    def _value_of(self, node: Optional[ast.Node], env: Environment) -> Value:
        value = self.evaluate(node, env)
        if isinstance(value, ReturnValue):
            return value.value
        return value

    def _eval_prefix(self, operator: str, right: Value) -> Value:
        match operator:
            case "!":
                return native_bool(not is_truthy(right))
            case "-":
                return negate(right)
            case _:
                return UNDEFINED

    def _eval_property(self, target: Value, name: str) -> Value:
        if isinstance(target, Object):
            return target.get_property(name)
        return UNDEFINED

    def _trace(self, message: str) -> None:
        if self.trace is not None:
            self.trace(message)


#lex -> parse -> evaluate in one call; the only entry point hosts need
def evaluate_source(
    text: str,
    root_env: Environment,
    trace: Optional[TraceSink] = None,
) -> Value:
    if text == "":
        raise EmptySourceError()
    parser = Parser.from_source(text)
    program = parser.parse_program()
    if parser.errors:
        logger.debug("parsed with %d dropped construct(s)", len(parser.errors))
    return Evaluator(trace=trace).evaluate(program, root_env)


__all__ = ["Evaluator", "TraceSink", "evaluate_source"]
