"""
AST resolver - AST to C major scale degrees.

Unrecognized notes are filtered, not reported: a progression with some bad
tokens still resolves to the degrees of its good ones. Callers that need
strictness compare the output length with the number of notes.
"""

from __future__ import annotations

from chuk_mcp_chordprog.core.scale import note_to_degree
from chuk_mcp_chordprog.models.ast import AstNode, NoteNode, ProgressionNode


def process_ast(ast: AstNode) -> list[int]:
    """
    Resolve an AST to its sequence of scale degrees.

    Args:
        ast: A ProgressionNode or a bare NoteNode

    Returns:
        Degrees (1-7) in input order; invalid notes and non-note
        children are omitted
    """
    if isinstance(ast, ProgressionNode):
        degrees: list[int] = []
        for child in ast.children:
            if not isinstance(child, NoteNode):
                continue
            degree = note_to_degree(child.text)
            if degree is not None:
                degrees.append(degree)
        return degrees

    if isinstance(ast, NoteNode):
        degree = note_to_degree(ast.text)
        return [] if degree is None else [degree]

    raise TypeError(f"Expected an AST node, got {type(ast).__name__}")
