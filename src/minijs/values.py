"""Runtime values for the minijs evaluator.

Every runtime value is one of a closed set of variants. Operations on them
are plain functions that ``match`` over the variant, so adding a variant
means revisiting every function in this module.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Final, List, Optional

if TYPE_CHECKING:
    from . import ast
    from .environment import Environment


#common base for every runtime value variant
class Value:
    __slots__ = ()

    def __str__(self) -> str:
        return to_string(self)


@dataclass(frozen=True, slots=True)
class Undefined(Value):
    def __repr__(self) -> str:
        return "UNDEFINED"


@dataclass(frozen=True, slots=True)
class Null(Value):
    def __repr__(self) -> str:
        return "NULL"


@dataclass(frozen=True, slots=True)
class Number(Value):
    value: float


@dataclass(frozen=True, slots=True)
class String(Value):
    value: str


@dataclass(frozen=True, slots=True)
class Boolean(Value):
    value: bool


#shared base so call sites can tell callables from everything else
class FunctionValue(Value):
    __slots__ = ()


#a function literal paired with the environment it was defined in
@dataclass(eq=False, slots=True)
class UserFunction(FunctionValue):
    parameters: List["ast.Identifier"]
    body: "ast.BlockStatement"
    closure: "Environment"

    def __repr__(self) -> str:
        names = ", ".join(param.value for param in self.parameters)
        return f"UserFunction(fn({names}))"


NativeCallable = Callable[[List[Value]], Optional[Value]]


#host-provided callable; receives evaluated arguments in order
@dataclass(eq=False, slots=True)
class NativeFunction(FunctionValue):
    name: str
    fn: NativeCallable

    def __repr__(self) -> str:
        return f"NativeFunction({self.name})"


#named property bag used for injected host objects such as `console`
@dataclass(eq=False, slots=True)
class Object(Value):
    name: str
    properties: Dict[str, Value] = field(default_factory=dict)

    def get_property(self, name: str) -> Value:
        return self.properties.get(name, UNDEFINED)

    def set_property(self, name: str, value: Value) -> None:
        self.properties[name] = value

    def __repr__(self) -> str:
        return f"Object({self.name}, {sorted(self.properties)})"


#internal marker that unwinds blocks until the nearest call boundary
@dataclass(frozen=True, slots=True)
class ReturnValue(Value):
    value: Value


UNDEFINED: Final = Undefined()
NULL: Final = Null()
TRUE: Final = Boolean(True)
FALSE: Final = Boolean(False)


def native_bool(value: bool) -> Boolean:
    return TRUE if value else FALSE


#maps arbitrary Python host values into the value union
def from_python(value: object) -> Value:
    if isinstance(value, Value):
        return value
    if value is None:
        return NULL
    if isinstance(value, bool):
        return native_bool(value)
    if isinstance(value, (int, float)):
        return Number(float(value))
    if isinstance(value, str):
        return String(value)
    return UNDEFINED


# Conversions ------------------------------------------------------------------


def is_truthy(value: Value) -> bool:
    match value:
        case Undefined() | Null():
            return False
        case Boolean(flag):
            return flag
        case Number(number):
            return number != 0
        case String(text):
            return text != ""
        case _:
            return True


def to_number(value: Value) -> float:
    match value:
        case Number(number):
            return number
        case Boolean(flag):
            return 1.0 if flag else 0.0
        case _:
            return 0.0


def format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def to_string(value: Value) -> str:
    match value:
        case Undefined():
            return "undefined"
        case Null():
            return "null"
        case Number(number):
            return format_number(number)
        case String(text):
            return text
        case Boolean(flag):
            return "true" if flag else "false"
        case FunctionValue():
            return "[Function]"
        case Object():
            return "[object Object]"
        case _:
            raise TypeError(f"not a runtime value: {value!r}")


# Operations -------------------------------------------------------------------


#cross-variant comparisons are always false
def equals(left: Value, right: Value) -> bool:
    match (left, right):
        case (Number(a), Number(b)):
            return a == b
        case (String(a), String(b)):
            return a == b
        case (Boolean(a), Boolean(b)):
            return a == b
        case (Undefined(), Undefined()) | (Null(), Null()):
            return True
        case (FunctionValue(), FunctionValue()) | (Object(), Object()):
            return left is right
        case _:
            return False


def add(left: Value, right: Value) -> Value:
    match (left, right):
        case (Number(a), Number(b)):
            return Number(a + b)
        case (String(), _) | (_, String()):
            return String(to_string(left) + to_string(right))
        case _:
            return UNDEFINED


def subtract(left: Value, right: Value) -> Value:
    match (left, right):
        case (Number(a), Number(b)):
            return Number(a - b)
        case _:
            return UNDEFINED


def multiply(left: Value, right: Value) -> Value:
    match (left, right):
        case (Number(a), Number(b)):
            return Number(a * b)
        case _:
            return UNDEFINED


#division by zero is undefined rather than infinite
def divide(left: Value, right: Value) -> Value:
    match (left, right):
        case (Number(_), Number(0.0)):
            return UNDEFINED
        case (Number(a), Number(b)):
            return Number(a / b)
        case _:
            return UNDEFINED


def negate(value: Value) -> Value:
    match value:
        case Number(number):
            return Number(-number)
        case _:
            return UNDEFINED


_COMPARATORS: Dict[str, Callable[[object, object], bool]] = {
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
    "<=": lambda a, b: a <= b,
    ">=": lambda a, b: a >= b,
}


#orders numbers against numbers and strings against strings only
def compare(operator: str, left: Value, right: Value) -> Value:
    comparator = _COMPARATORS.get(operator)
    if comparator is None:
        return UNDEFINED
    match (left, right):
        case (Number(a), Number(b)) | (String(a), String(b)):
            return native_bool(comparator(a, b))
        case _:
            return UNDEFINED


#dispatches an infix operator symbol to the operation above
def binary_operation(operator: str, left: Value, right: Value) -> Value:
    match operator:
        case "+":
            return add(left, right)
        case "-":
            return subtract(left, right)
        case "*":
            return multiply(left, right)
        case "/":
            return divide(left, right)
        case "==":
            return native_bool(equals(left, right))
        case "!=":
            return native_bool(not equals(left, right))
        case "<" | ">" | "<=" | ">=":
            return compare(operator, left, right)
        case _:
            return UNDEFINED
