"""
Tests for the AST model.

Tests cover:
- Variant construction and tags
- Immutability and structural equality
- Child order preservation
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_chordprog.models import NoteNode, ProgressionNode


class TestNoteNode:
    """Tests for NoteNode."""

    def test_create(self) -> None:
        """Notes carry their tag and raw text."""
        note = NoteNode(text="C")
        assert note.type == "note"
        assert note.text == "C"

    def test_text_not_normalized(self) -> None:
        """Text is kept exactly as given."""
        assert NoteNode(text=" c ").text == " c "

    def test_empty_text_allowed(self) -> None:
        """Degenerate empty notes are valid nodes."""
        assert NoteNode(text="").text == ""

    def test_text_required(self) -> None:
        """Notes need text."""
        with pytest.raises(ValidationError):
            NoteNode()  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Notes are immutable."""
        note = NoteNode(text="C")
        with pytest.raises(ValidationError):
            note.text = "D"  # type: ignore[misc]


class TestProgressionNode:
    """Tests for ProgressionNode."""

    def test_create(self, cfgc_ast: ProgressionNode) -> None:
        """Progressions carry their tag and children."""
        assert cfgc_ast.type == "progression"
        assert len(cfgc_ast.children) == 4

    def test_order_and_duplicates_preserved(self, cfgc_ast: ProgressionNode) -> None:
        """Children keep performance order, duplicates included."""
        assert [n.text for n in cfgc_ast.notes()] == ["C", "F", "G", "C"]

    def test_list_children_become_tuple(self) -> None:
        """Children are stored immutably."""
        prog = ProgressionNode(children=[NoteNode(text="C")])
        assert isinstance(prog.children, tuple)

    def test_nested_progression_allowed(self) -> None:
        """The type permits non-note children."""
        inner = ProgressionNode(children=(NoteNode(text="G"),))
        outer = ProgressionNode(children=(NoteNode(text="C"), inner))
        assert outer.children[1] == inner
        assert [n.text for n in outer.notes()] == ["C"]

    def test_structural_equality(self, cfgc_ast: ProgressionNode) -> None:
        """Equal trees compare and hash equal."""
        same = ProgressionNode(children=tuple(NoteNode(text=t) for t in "CFGC"))
        assert same == cfgc_ast
        assert hash(same) == hash(cfgc_ast)
        assert same != ProgressionNode(children=tuple(NoteNode(text=t) for t in "CGFC"))

    def test_frozen(self, cfgc_ast: ProgressionNode) -> None:
        """Progressions are immutable."""
        with pytest.raises(ValidationError):
            cfgc_ast.children = ()  # type: ignore[misc]
