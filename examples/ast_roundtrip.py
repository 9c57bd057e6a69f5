#!/usr/bin/env python3
"""
Example: AST interchange round-trip.

Shows the two halves of the pipeline meeting at the interchange format,
the same way a host and the embeddable call meet:

    text → CST → AST → interchange JSON → process_chord_progression → degrees

Usage:
    python examples/ast_roundtrip.py
"""

import json

from chuk_mcp_chordprog.compiler import encode_ast, lower, process_chord_progression
from chuk_mcp_chordprog.grammar import parse_progression

PROGRESSIONS = [
    "C-F-G-C",
    "A-F-C-G",
    "C-Am-F-G",  # Am is not a bare note letter and is dropped
]


def main() -> None:
    """Run each progression through the interchange boundary."""
    print("CHUK Chord Progression Round-Trip Demo")
    print("=" * 50)

    for text in PROGRESSIONS:
        root = parse_progression(text)
        ast = lower(root, text)
        if ast is None:
            print(f"{text}: could not parse")
            continue

        ast_json = encode_ast(ast)
        result = process_chord_progression(ast_json)

        print()
        print(f"Input:  {text}")
        print(f"AST:    {ast_json}")
        print(f"Result: {result}")

    print()
    print("Malformed interchange input:")
    print(f"  {process_chord_progression(json.dumps({'children': []}))[:80]}...")


if __name__ == "__main__":
    main()
