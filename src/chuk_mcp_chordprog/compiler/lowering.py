"""
CST to AST lowering.

Walks a concrete syntax tree (any CSTNode implementation) and builds the
AST model. Only two node kinds carry meaning:

- 'progression': its direct 'note' children are lowered in document order;
  every other child kind (dashes, whitespace, error nodes) is skipped.
- 'note': becomes a NoteNode holding the exact source text it spans.

Any other root kind lowers to None, the placeholder the caller is expected
to reject. Lowering never raises for tree-shape problems.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_chordprog.constants import ErrorMessages, NodeKind
from chuk_mcp_chordprog.grammar.cst import CSTNode
from chuk_mcp_chordprog.models.ast import AstNode, NoteNode, ProgressionNode

logger = logging.getLogger(__name__)


def _as_bytes(source: str | bytes) -> bytes:
    return source.encode("utf-8", "surrogateescape") if isinstance(source, str) else source


def _note_text(node: CSTNode, source: bytes) -> str:
    try:
        return node.utf8_text(source)
    except UnicodeDecodeError as e:
        logger.warning(ErrorMessages.TEXT_EXTRACTION_FAILED.format(error=e))
        return ""


def lower(node: CSTNode, source: str | bytes) -> AstNode | None:
    """
    Lower a CST node to an AST node.

    Args:
        node: Root of the (sub)tree to lower
        source: The text the tree was parsed from

    Returns:
        ProgressionNode or NoteNode, or None for any other node kind
    """
    source_bytes = _as_bytes(source)
    kind = node.kind

    if kind == NodeKind.PROGRESSION.value:
        children: list[AstNode] = []
        for child in node.children:
            if child.kind != NodeKind.NOTE.value:
                continue
            lowered = lower(child, source_bytes)
            if lowered is not None:
                children.append(lowered)
        return ProgressionNode(children=tuple(children))

    if kind == NodeKind.NOTE.value:
        return NoteNode(text=_note_text(node, source_bytes))

    logger.debug(f"Ignoring CST node of kind '{kind}'")
    return None


def cst_to_interchange(node: CSTNode, source: str | bytes) -> dict[str, Any]:
    """
    Lower a CST node straight to the interchange dict.

    The placeholder for an unknown kind is the empty object {}, which the
    interchange decoder rejects.
    """
    ast = lower(node, source)
    if ast is None:
        return {}
    return ast.model_dump(mode="json")
