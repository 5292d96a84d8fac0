"""Command-line entry point for minijs."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .errors import MiniJSError
from .lexer import Lexer
from .parser import Parser
from .printer import format_program
from .runtime import Runtime
from .values import Undefined, to_string


#source comes from -c/--code or a file path, in that order
def read_source(args: argparse.Namespace) -> str:
    if args.code is not None:
        return args.code
    if args.source:
        return Path(args.source).read_text()
    raise SystemExit(f"{args.command} requires a source path or -c CODE")


#handles `minijs run`, waiting for timers before exiting
def cmd_run(args: argparse.Namespace) -> int:
    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    source = read_source(args)
    with Runtime(debug=args.trace, tick_interval=args.tick) as runtime:
        result = runtime.execute(source)
        if not isinstance(result, Undefined):
            print(to_string(result))
        if not runtime.wait_idle(args.wait):
            print(f"warning: timers still pending after {args.wait}s", file=sys.stderr)
    return 0


#prints one token per line with its location
def cmd_tokens(args: argparse.Namespace) -> int:
    for token in Lexer(read_source(args)):
        print(f"{token.location}\t{token.type.name}\t{token.literal!r}")
    return 0


#prints the parenthesised AST followed by any parse diagnostics
def cmd_parse(args: argparse.Namespace) -> int:
    parser = Parser(Lexer(read_source(args)))
    program = parser.parse_program()
    print(format_program(program))
    for message in parser.errors:
        print(f"parse error: {message}", file=sys.stderr)
    return 1 if parser.errors else 0


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source", nargs="?", help="path to source file")
    parser.add_argument("-c", "--code", help="program text passed as a string")


#configures the CLI surface across run/tokens/parse
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minijs", description="minijs interpreter tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_run = subparsers.add_parser("run", help="evaluate a program")
    _add_source_arguments(p_run)
    p_run.add_argument("--trace", action="store_true", help="log each evaluated node")
    p_run.add_argument("--wait", type=float, default=5.0, help="seconds to wait for pending timers")
    p_run.add_argument("--tick", type=float, default=0.01, help="event loop poll interval in seconds")
    p_run.set_defaults(func=cmd_run)

    p_tokens = subparsers.add_parser("tokens", help="dump the token stream")
    _add_source_arguments(p_tokens)
    p_tokens.set_defaults(func=cmd_tokens)

    p_parse = subparsers.add_parser("parse", help="print the parsed syntax tree")
    _add_source_arguments(p_parse)
    p_parse.set_defaults(func=cmd_parse)

    return parser


#entry point used by both console script and module execution
def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except MiniJSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
