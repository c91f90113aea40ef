"""tinyc CLI — Command-line interface for the tinyc compiler.

Commands:
  tinyc compile [file] [-e EXPR]     — Compile to call syntax (built-in example if no input)
  tinyc tokens [file] [-e EXPR]      — Print the token list
  tinyc ast [file] [-e EXPR]         — Print the source AST
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from tinyc import __version__
from tinyc.compiler import compile_result
from tinyc.config import FORMATS, TinycConfig, load_config
from tinyc.errors import CompileError
from tinyc.lexer import tokenize
from tinyc.parser import parse
from tinyc.printer import format_ast

EXAMPLE_SOURCE = "(add 2 (subtract 4 2))"


def _output_format(args: argparse.Namespace) -> str:
    return args.format or args.global_format or args.config_obj.format


def _report_error(args: argparse.Namespace, e: CompileError) -> int:
    if _output_format(args) == "json":
        print(e.to_json())
    else:
        print(f"error: {e}", file=sys.stderr)
    return 1


def _read_source(args: argparse.Namespace) -> Optional[str]:
    """Return the source to work on, or None if the input file is missing."""
    if args.expr is not None:
        return args.expr
    if args.file is None:
        return EXAMPLE_SOURCE

    if not os.path.exists(args.file):
        if _output_format(args) == "json":
            print(json.dumps({"error": f"File not found: {args.file}"}))
        else:
            print(f"error: File not found: {args.file}", file=sys.stderr)
        return None

    with open(args.file, "r") as f:
        return f.read()


def cmd_compile(args: argparse.Namespace) -> int:
    """Compile the source and print input and output."""
    source = _read_source(args)
    if source is None:
        return 1

    result = compile_result(source)

    if _output_format(args) == "json":
        print(result.to_json())
        return 0 if result.ok else 1

    if args.config_obj.echo_input:
        print(f"Input:  {source}")
    if not result.ok:
        print(f"error: {result.error}", file=sys.stderr)
        return 1
    print(f"Output: {result.output}")
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Print the tokens of the source."""
    source = _read_source(args)
    if source is None:
        return 1

    try:
        tokens = tokenize(source)
    except CompileError as e:
        return _report_error(args, e)

    if _output_format(args) == "json":
        print(json.dumps([t.to_dict() for t in tokens], indent=2))
    else:
        for tok in tokens:
            print(f"{tok.type.name} {tok.value}")
    return 0


def cmd_ast(args: argparse.Namespace) -> int:
    """Print the source AST."""
    source = _read_source(args)
    if source is None:
        return 1

    try:
        program = parse(tokenize(source))
    except CompileError as e:
        return _report_error(args, e)

    if _output_format(args) == "json":
        print(program.to_json())
    else:
        print(format_ast(program))
    return 0


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", nargs="?", help="Source file")
    p.add_argument("-e", "--expr", help="Inline source to use instead of a file")
    p.add_argument("--format", choices=FORMATS, help="Output format (default: from config, else text)")


def _configure_logging(args: argparse.Namespace, config: TinycConfig) -> None:
    level_name = "DEBUG" if args.verbose else (args.log_level or config.log_level)
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="tinyc",
        description="tinyc — s-expression to call-syntax compiler",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a .tinycrc.yml / .tinycrc.json file")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Shorthand for --log-level DEBUG")
    parser.add_argument("--format", dest="global_format", choices=FORMATS,
                        help="Output format for every command; a command's own --format wins")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # compile
    p_compile = subparsers.add_parser("compile", help="Compile source to call syntax")
    _add_input_args(p_compile)
    p_compile.set_defaults(func=cmd_compile)

    # tokens
    p_tokens = subparsers.add_parser("tokens", help="Print the token list")
    _add_input_args(p_tokens)
    p_tokens.set_defaults(func=cmd_tokens)

    # ast
    p_ast = subparsers.add_parser("ast", help="Print the source AST")
    _add_input_args(p_ast)
    p_ast.set_defaults(func=cmd_ast)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.config_obj = load_config(args.config)
    _configure_logging(args, args.config_obj)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
