"""
End-to-end helpers: progression text to AST and to degrees.
"""

from __future__ import annotations

import logging

from chuk_mcp_chordprog.compiler.lowering import lower
from chuk_mcp_chordprog.compiler.resolver import process_ast
from chuk_mcp_chordprog.compiler.serialization import decode_ast, encode_ast
from chuk_mcp_chordprog.constants import ErrorMessages
from chuk_mcp_chordprog.grammar.parser import ProgressionSyntaxError, parse_progression
from chuk_mcp_chordprog.models.ast import AstNode

logger = logging.getLogger(__name__)


def compile_progression(text: str) -> AstNode:
    """
    Parse and lower progression text.

    Raises:
        ProgressionSyntaxError: If the text does not parse, or the parse
            root lowers to the empty placeholder
    """
    root = parse_progression(text)
    ast = lower(root, text)
    if ast is None:
        raise ProgressionSyntaxError(ErrorMessages.UNPARSEABLE_ROOT.format(text=text, kind=root.kind))
    return ast


def progression_to_degrees(text: str) -> list[int]:
    """
    Resolve progression text to C major scale degrees.

    The AST crosses the interchange format on the way, exactly as it
    does between a host and the embeddable call.

    Example:
        progression_to_degrees("C-F-G-C")  # -> [1, 4, 5, 1]
    """
    ast = decode_ast(encode_ast(compile_progression(text)))
    degrees = process_ast(ast)
    logger.debug(f"Resolved {text!r} to {degrees}")
    return degrees
