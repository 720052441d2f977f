from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import json
import sys

from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from interpreter import Interpreter
from errors import LexError, ParseError, EvalError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

PROMPT = "calc> "


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse_text(text: str) -> ASTNode:
    """Parse input string into AST."""
    return Parser(Lexer(text)).parse()


def run(
    text: str, global_scope: Optional[Dict[str, int]] = None
) -> Tuple[int, Dict[str, int]]:
    """Interpret one line of input; return the result and the variable store."""
    interpreter = Interpreter(Parser(Lexer(text)), global_scope)
    result = interpreter.interpret()
    return result, interpreter.global_scope


def format_scope(scope: Dict[str, int]) -> str:
    return "\n".join(f"{name} = {value}" for name, value in sorted(scope.items()))


def process_program(
    text: str,
    *,
    global_scope: Optional[Dict[str, int]] = None,
    print_ast: bool = False,
    show_scope: bool = True,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> Optional[int]:
    """Process a single line: lex, parse, evaluate and print the outcome.

    Returns the integer result, or None if any stage failed. Flags control
    which diagnostics are printed or written alongside the result.
    """
    scope = global_scope if global_scope is not None else {}
    try:
        interpreter = Interpreter(Parser(Lexer(text)), scope)
        # Parse up front so diagnostics are available even if evaluation fails.
        ast = interpreter.parser.parse()
        if print_ast:
            print("AST:")
            print(PrettyPrinter.print_ast(ast))

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(ast_to_json(ast), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

        if viz_path:
            try:
                out = write_and_render(ast, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {out}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")

        result = interpreter.evaluate(ast)
    except LexError as e:
        print(f"Lexical error: {e}")
        return None
    except ParseError as e:
        print(f"Syntax error: {e}")
        return None
    except EvalError as e:
        print(f"Evaluation error: {e}")
        return None

    if show_scope and scope:
        print(format_scope(scope))
    print(result)
    return result


def interactive_mode(
    *,
    fresh_scope: bool = False,
    print_ast: bool = False,
    show_scope: bool = True,
) -> None:
    """Run the interpreter REPL reading one line at a time from stdin.

    Variables persist between lines unless `fresh_scope` is set.
    """
    print("Interactive mode (type 'quit' to exit)")
    session_scope: Dict[str, int] = {}

    while True:
        try:
            text = input(PROMPT).strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\n\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        try:
            process_program(
                text,
                global_scope={} if fresh_scope else session_scope,
                print_ast=print_ast,
                show_scope=show_scope,
            )
        except Exception as e:
            print(f"Unexpected error: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Evaluate a line of the toy Pascal-like language, or start a REPL"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--eval", "-e", dest="text", help="Evaluate a single line and exit"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode (default)",
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--no-scope",
        dest="show_scope",
        action="store_false",
        help="Do not print variable values after each line",
    )
    parser.add_argument(
        "--fresh-scope",
        dest="fresh_scope",
        action="store_true",
        help="Start every REPL line with an empty variable store",
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
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args(argv)

    if args.text is not None:
        result = process_program(
            args.text,
            print_ast=args.print_ast,
            show_scope=args.show_scope,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )
        return 0 if result is not None else 1

    interactive_mode(
        fresh_scope=args.fresh_scope,
        print_ast=args.print_ast,
        show_scope=args.show_scope,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
