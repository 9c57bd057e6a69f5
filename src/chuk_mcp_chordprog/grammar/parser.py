"""
Lark-backed chord progression parser.

Parses progression text with chordprog.lark and exposes the result through
the CSTNode protocol. Punctuation tokens are kept in the tree (kind
'MINUS') so the tree mirrors the source exactly.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from chuk_mcp_chordprog.constants import ErrorMessages

logger = logging.getLogger(__name__)


class ProgressionSyntaxError(ValueError):
    """The grammar could not parse the progression text."""


@lru_cache(maxsize=1)
def _get_parser() -> Lark:
    """Build the parser once; the grammar never changes at runtime."""
    return Lark.open(
        "chordprog.lark",
        rel_to=__file__,
        start="progression",
        parser="lalr",
        propagate_positions=True,
        keep_all_tokens=True,
    )


class LarkCSTNode:
    """
    A Lark Tree or Token seen as a CSTNode.

    Lark reports character offsets; spans are converted to UTF-8 byte
    offsets so utf8_text() slices the encoded source like any other
    byte-addressed parse tree. Undecodable command-line bytes arrive as
    surrogate escapes and are encoded back to the raw bytes, so their
    spans fail in utf8_text() rather than while measuring offsets.
    """

    __slots__ = ("_item", "_source")

    def __init__(self, item: Tree | Token, source: str) -> None:
        self._item = item
        self._source = source

    @property
    def kind(self) -> str:
        if isinstance(self._item, Token):
            return self._item.type
        return str(self._item.data)

    @property
    def children(self) -> list[LarkCSTNode]:
        if isinstance(self._item, Token):
            return []
        return [LarkCSTNode(child, self._source) for child in self._item.children]

    @property
    def start_pos(self) -> int:
        """Character offset where the node starts."""
        if isinstance(self._item, Token):
            return self._item.start_pos or 0
        meta = self._item.meta
        return 0 if meta.empty else meta.start_pos

    @property
    def end_pos(self) -> int:
        """Character offset just past the node."""
        if isinstance(self._item, Token):
            return self._item.end_pos or 0
        meta = self._item.meta
        return 0 if meta.empty else meta.end_pos

    @property
    def start_byte(self) -> int:
        return len(self._source[: self.start_pos].encode("utf-8", "surrogateescape"))

    @property
    def end_byte(self) -> int:
        return len(self._source[: self.end_pos].encode("utf-8", "surrogateescape"))

    def utf8_text(self, source: bytes) -> str:
        """Decode the node's byte span out of the encoded source."""
        return source[self.start_byte : self.end_byte].decode("utf-8")

    def __repr__(self) -> str:
        return f"LarkCSTNode({self.kind!r}, {self.start_pos}..{self.end_pos})"


def parse_progression(text: str) -> LarkCSTNode:
    """
    Parse progression text into a concrete syntax tree.

    Args:
        text: Progression text like 'C-F-G-C'

    Returns:
        Root CST node (kind 'progression')

    Raises:
        ProgressionSyntaxError: If the text is not a dash-separated note list
    """
    try:
        tree = _get_parser().parse(text)
    except UnexpectedInput as e:
        raise ProgressionSyntaxError(ErrorMessages.SYNTAX_ERROR.format(text=text, error=e)) from e

    logger.debug(f"Parsed {text!r}: {tree}")
    return LarkCSTNode(tree, text)
