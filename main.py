from __future__ import annotations
import argparse
import io
import json
import subprocess
import sys
from typing import List, Optional, TextIO

import graphviz

from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from environment import Environment, UndefinedVariableError
from ast_interpreter import NumberTooLargeError, evaluate
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import render_ast_dot, write_and_render


def lex(text: str, err: Optional[TextIO] = None) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text, err=err)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def parse_text(text: str, err: Optional[TextIO] = None) -> ProgramNode:
    """Lex and parse a whole source text into a ProgramNode."""
    return Parser(Lexer(text, err=err)).parse_program()


def run_program(
    text: str,
    env: Optional[Environment] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> Environment:
    """Parse and execute `text` one statement at a time.

    Each statement is evaluated as soon as it has been parsed, so output of
    earlier statements is written even when a later statement fails. Syntax
    errors raise `SyntaxError`; reading an undeclared variable raises
    `UndefinedVariableError` and a number past the integer string-conversion
    limit raises `NumberTooLargeError`. Returns the environment after the last statement.
    """
    if env is None:
        env = Environment()
    parser = Parser(Lexer(text, err=err))
    for stmt in parser.statements():
        evaluate(stmt, env, out)
    return env


def _inspect(
    ast: ProgramNode,
    out: TextIO,
    err: TextIO,
    print_ast: bool,
    dump_ast_path: Optional[str],
    viz_path: Optional[str],
    viz_format: str,
) -> None:
    if print_ast:
        print("AST:", file=out)
        print(PrettyPrinter.print_ast(ast), file=out)

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(ast), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}", file=err)
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}", file=err)

    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}", file=err)
        except (graphviz.ExecutableNotFound, subprocess.CalledProcessError, ValueError):
            # fallback: write dot source
            try:
                with open(f"{viz_path}.dot", "w", encoding="utf-8") as fh:
                    fh.write(render_ast_dot(ast).source)
                print(f"Wrote DOT to {viz_path}.dot (render failed)", file=err)
            except OSError as e:
                print(f"Failed to write AST visualization to {viz_path}: {e}", file=err)


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    env: Optional[Environment] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Process a single program: optionally show tokens/AST, then run it.

    Errors are reported on `err` and turned into a non-zero status; the
    return value is the exit status (0 on success, 1 on a syntax or runtime
    error).
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    if print_tokens:
        # Diagnostics are reported once, by the run below.
        tokens = lex(text, err=io.StringIO())
        print(f"Tokens ({len(tokens)}):", file=out)
        for i, token in enumerate(tokens):
            print(f"  {i:3}: {token}", file=out)

    if print_ast or dump_ast_path or viz_path:
        try:
            ast = parse_text(text, err=io.StringIO())
        except SyntaxError:
            # The run below reports the error after executing what precedes it.
            ast = None
        if ast is not None:
            _inspect(ast, out, err, print_ast, dump_ast_path, viz_path, viz_format)

    try:
        run_program(text, env=env, out=out, err=err)
    except SyntaxError as e:
        print(f"Syntax Error: {e}", file=err)
        return 1
    except (UndefinedVariableError, NumberTooLargeError) as e:
        print(f"Runtime Error: {e}", file=err)
        return 1
    return 0


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = False,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> Environment:
    """Run an interactive REPL reading statements from stdin.

    Variables persist for the whole session; an error aborts only the line
    that caused it. Returns the session environment.
    """
    out = out if out is not None else sys.stdout
    env = Environment()
    print("Interactive mode (type 'quit' to exit)", file=out)

    while True:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...", file=out)
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!", file=out)
            break

        if not text:
            continue

        process_program(
            text,
            print_tokens=print_tokens,
            print_ast=print_ast,
            env=env,
            out=out,
            err=err,
        )

    return env


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="straightline",
        description="Run a straight-line program from a file, the command line or interactively",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to run"
    )
    group.add_argument(
        "--eval", "-e", dest="source", help="Program text to run"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        choices=sorted(graphviz.FORMATS),
        metavar="FORMAT",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}", file=sys.stderr)
            return 1
    elif args.source is not None:
        text = args.source
    else:
        parser.print_help()
        return 0

    return process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
