"""
Progression grammar - text to concrete syntax tree.

The lowering pass depends only on the CSTNode protocol; the Lark parser
here is one implementation of it.
"""

from chuk_mcp_chordprog.grammar.cst import CSTNode
from chuk_mcp_chordprog.grammar.parser import LarkCSTNode, ProgressionSyntaxError, parse_progression

__all__ = [
    "CSTNode",
    "LarkCSTNode",
    "ProgressionSyntaxError",
    "parse_progression",
]
