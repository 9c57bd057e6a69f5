#!/usr/bin/env python3
"""
Command-line entry point.

    $ chordprog "C-F-G-C"
    1,4,5,1
"""

from __future__ import annotations

import argparse
import logging
import sys

from chuk_mcp_chordprog.compiler.resolver import process_ast
from chuk_mcp_chordprog.compiler.serialization import degrees_to_json, encode_ast, format_degrees
from chuk_mcp_chordprog.constants import EXAMPLE_PROGRESSION, ErrorMessages
from chuk_mcp_chordprog.grammar.parser import ProgressionSyntaxError
from chuk_mcp_chordprog.pipeline import compile_progression

logger = logging.getLogger(__name__)

PROG = "chordprog"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Resolve a chord progression to C major scale degrees",
    )
    parser.add_argument(
        "progression",
        nargs="?",
        help=f"Chord progression, e.g. '{EXAMPLE_PROGRESSION}'",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Print degrees as a JSON array instead of comma-separated text",
    )
    output.add_argument(
        "--ast",
        action="store_true",
        help="Print the interchange AST instead of resolving it",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.progression is None:
        print(ErrorMessages.MISSING_PROGRESSION.format(prog=PROG), file=sys.stderr)
        print(
            ErrorMessages.USAGE_EXAMPLE.format(prog=PROG, example=EXAMPLE_PROGRESSION),
            file=sys.stderr,
        )
        return 1

    try:
        ast = compile_progression(args.progression)
    except ProgressionSyntaxError as e:
        logger.error(str(e))
        return 1

    if args.ast:
        print(encode_ast(ast))
        return 0

    degrees = process_ast(ast)
    print(degrees_to_json(degrees) if args.json else format_degrees(degrees))
    return 0


if __name__ == "__main__":
    sys.exit(main())
