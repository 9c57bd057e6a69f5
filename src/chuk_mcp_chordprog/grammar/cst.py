"""
The concrete syntax tree seam.

Lowering only needs three things from a grammar's parse tree: a node kind,
the direct children in document order, and the source text a node spans.
Any tree that provides them can be lowered, whichever parser built it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CSTNode(Protocol):
    """Read-only view of one node of an externally owned parse tree."""

    @property
    def kind(self) -> str:
        """Node kind, e.g. 'progression', 'note' or a punctuation kind."""
        ...

    @property
    def children(self) -> Sequence[CSTNode]:
        """Direct children in document order."""
        ...

    def utf8_text(self, source: bytes) -> str:
        """
        Extract the exact source text this node spans.

        Raises:
            UnicodeDecodeError: If the span does not decode as UTF-8
        """
        ...
