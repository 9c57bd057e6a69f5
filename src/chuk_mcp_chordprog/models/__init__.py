"""
Pydantic models for the chord progression system.

This module provides:
- AstNode: Tagged union of the two AST variants
- ProgressionNode: Ordered progression of child nodes
- NoteNode: A single note token
"""

from chuk_mcp_chordprog.models.ast import AstNode, NoteNode, ProgressionNode

__all__ = [
    "AstNode",
    "NoteNode",
    "ProgressionNode",
]
