"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_chordprog.models import NoteNode, ProgressionNode


@pytest.fixture
def cfgc_ast() -> ProgressionNode:
    """The I-IV-V-I progression C-F-G-C."""
    return ProgressionNode(
        children=(
            NoteNode(text="C"),
            NoteNode(text="F"),
            NoteNode(text="G"),
            NoteNode(text="C"),
        )
    )


@pytest.fixture
def cfgc_json() -> str:
    """Interchange JSON for C-F-G-C."""
    return (
        '{"type":"progression","children":['
        '{"type":"note","text":"C"},'
        '{"type":"note","text":"F"},'
        '{"type":"note","text":"G"},'
        '{"type":"note","text":"C"}]}'
    )
