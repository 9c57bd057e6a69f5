"""
AST model - the semantic tree of a chord progression.

Exactly two node variants, discriminated by their "type" tag:

    {"type": "progression", "children": [...]}
    {"type": "note", "text": "C"}

Nodes are frozen once built. Progression children keep performance order;
nothing downstream reorders or deduplicates them.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class NoteNode(BaseModel):
    """
    One note token.

    The text is the raw source slice - no trimming, no case-folding.
    It may be empty if the grammar produced a degenerate node.
    """

    type: Literal["note"] = Field("note", description="Variant tag")
    text: str = Field(..., description="Raw source text of the note token")

    model_config = {"frozen": True}


class ProgressionNode(BaseModel):
    """A full chord progression: an ordered sequence of child nodes."""

    type: Literal["progression"] = Field("progression", description="Variant tag")
    children: tuple[AstNode, ...] = Field(..., description="Child nodes in performance order")

    model_config = {"frozen": True}

    def notes(self) -> Iterator[NoteNode]:
        """Iterate the Note children in order, skipping any other variant."""
        for child in self.children:
            if isinstance(child, NoteNode):
                yield child


AstNode = Annotated[ProgressionNode | NoteNode, Field(discriminator="type")]

ProgressionNode.model_rebuild()
