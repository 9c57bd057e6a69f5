"""
CHUK chord progression toolkit.

Parses progressions like "C-F-G-C", lowers them to an AST and resolves
each note to its C major scale degree:

    >>> from chuk_mcp_chordprog import progression_to_degrees
    >>> progression_to_degrees("C-F-G-C")
    [1, 4, 5, 1]
"""

from chuk_mcp_chordprog.compiler import DecodeError, process_ast, process_chord_progression
from chuk_mcp_chordprog.models import AstNode, NoteNode, ProgressionNode
from chuk_mcp_chordprog.pipeline import compile_progression, progression_to_degrees

__version__ = "0.1.0"

__all__ = [
    "AstNode",
    "NoteNode",
    "ProgressionNode",
    "DecodeError",
    "process_ast",
    "process_chord_progression",
    "compile_progression",
    "progression_to_degrees",
]
