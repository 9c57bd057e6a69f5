"""
Compilation pipeline - concrete syntax tree to scale degrees.

The pipeline:
    CST (from the grammar)
    → AST (lowering, serializable as interchange JSON)
    → Scale degrees (resolver)
    → Caller text ("1,4,5,1") or JSON ("[1,4,5,1]")
"""

from chuk_mcp_chordprog.compiler.lowering import cst_to_interchange, lower
from chuk_mcp_chordprog.compiler.resolver import process_ast
from chuk_mcp_chordprog.compiler.serialization import (
    DecodeError,
    ast_to_interchange,
    decode_ast,
    degrees_to_json,
    encode_ast,
    error_to_json,
    format_degrees,
    interchange_to_ast,
    process_chord_progression,
)

__all__ = [
    # Lowering
    "lower",
    "cst_to_interchange",
    # Resolver
    "process_ast",
    # Serialization
    "DecodeError",
    "ast_to_interchange",
    "encode_ast",
    "decode_ast",
    "interchange_to_ast",
    "format_degrees",
    "degrees_to_json",
    "error_to_json",
    "process_chord_progression",
]
