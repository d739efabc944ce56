"""
Command-line front end: read one expression, print its value.
"""

import argparse
import sys
from typing import List, Optional

from .calculator import evaluate_tree, parse_expression
from .errors import ParseError
from .logging_system import LogLevel, configure_logging, log_info

PROMPT = "Please input a mathematical expression:"


def parse_log_level(name: str) -> LogLevel:
    try:
        return LogLevel[name.upper()]
    except KeyError:
        choices = ", ".join(level.name.lower() for level in LogLevel)
        raise argparse.ArgumentTypeError(f"invalid log level {name!r} (choose from {choices})")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infix-eval",
        description="Evaluate an infix arithmetic expression (+ - * / ^, unary -, parentheses).",
        epilog="Put '--' before expressions that start with '-', e.g. infix-eval -- -5^2",
    )
    parser.add_argument("expression", nargs="?",
                        help="Expression to evaluate; read one line from stdin when omitted")
    parser.add_argument("--show-tree", action="store_true", help="Print the parsed tree")
    parser.add_argument("--latex", action="store_true", help="Print the expression as LaTeX")
    parser.add_argument("--log-level", type=parse_log_level, default=LogLevel.MINIMAL,
                        help="silent, minimal, moderate, detailed or verbose")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(
        log_level=args.log_level,
        log_to_file=args.log_file is not None,
        log_file_path=args.log_file,
    )

    if args.expression is None:
        print(PROMPT)
        line = sys.stdin.readline()
    else:
        line = args.expression

    try:
        tree = parse_expression(line)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: expression is nested too deeply", file=sys.stderr)
        return 1

    if args.show_tree:
        print(tree.to_string())
    if args.latex:
        print(tree.latex())

    value = evaluate_tree(tree)
    log_info(f"{line.strip()} = {value}", LogLevel.MODERATE)
    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
