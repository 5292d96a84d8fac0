"""minijs: a small tree-walking interpreter for a JavaScript-like language."""

import logging

#makes package exports explicit for downstream imports
from . import ast, environment, errors, evaluator, event_loop, lexer, parser, printer, runtime, token, values
from .environment import Environment
from .evaluator import Evaluator, evaluate_source
from .runtime import Runtime

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Environment",
    "Evaluator",
    "Runtime",
    "ast",
    "environment",
    "errors",
    "evaluate_source",
    "evaluator",
    "event_loop",
    "lexer",
    "parser",
    "printer",
    "runtime",
    "token",
    "values",
]
