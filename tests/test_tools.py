"""
Tests for MCP tools.

Tests the progression tool implementations against a mock server.
"""

import json

import pytest

from chuk_mcp_chordprog.tools import register_progression_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def tools():
    """Progression tools registered on a mock server."""
    mcp = MockMCPServer("test")
    registered = register_progression_tools(mcp)
    assert set(mcp.tools) == set(registered)
    return registered


class TestProcessAstTool:
    """Tests for chord_process_ast."""

    @pytest.mark.asyncio
    async def test_cfgc(self, tools, cfgc_json: str):
        """Resolves an interchange AST."""
        assert await tools["chord_process_ast"](ast_json=cfgc_json) == "[1,4,5,1]"

    @pytest.mark.asyncio
    async def test_decode_error(self, tools):
        """Malformed input returns an error object."""
        result = json.loads(await tools["chord_process_ast"](ast_json='{"text":"C"}'))
        assert "error" in result


class TestParseProgressionTool:
    """Tests for chord_parse_progression."""

    @pytest.mark.asyncio
    async def test_parse(self, tools):
        """Parses text to degrees and AST."""
        data = json.loads(await tools["chord_parse_progression"](progression="C-Am-F-G"))
        assert data["status"] == "success"
        assert data["degrees"] == [1, 4, 5]
        assert data["formatted"] == "1,4,5"
        assert [c["text"] for c in data["ast"]["children"]] == ["C", "Am", "F", "G"]

    @pytest.mark.asyncio
    async def test_syntax_error(self, tools):
        """Unparseable text returns an error status."""
        data = json.loads(await tools["chord_parse_progression"](progression=""))
        assert data["status"] == "error"
        assert "Could not parse" in data["message"]


class TestValidateAstTool:
    """Tests for chord_validate_ast."""

    @pytest.mark.asyncio
    async def test_complete(self, tools, cfgc_json: str):
        """Every note resolves."""
        data = json.loads(await tools["chord_validate_ast"](ast_json=cfgc_json))
        assert data["valid"] is True
        assert data["note_count"] == 4
        assert data["resolved_count"] == 4
        assert data["complete"] is True

    @pytest.mark.asyncio
    async def test_incomplete(self, tools):
        """Dropped notes are counted."""
        payload = (
            '{"type":"progression","children":'
            '[{"type":"note","text":"C"},{"type":"note","text":"X"}]}'
        )
        data = json.loads(await tools["chord_validate_ast"](ast_json=payload))
        assert data["note_count"] == 2
        assert data["resolved_count"] == 1
        assert data["complete"] is False

    @pytest.mark.asyncio
    async def test_bare_note(self, tools):
        """A bare note counts as one note."""
        data = json.loads(await tools["chord_validate_ast"](ast_json='{"type":"note","text":"H"}'))
        assert data["note_count"] == 1
        assert data["complete"] is False

    @pytest.mark.asyncio
    async def test_invalid(self, tools):
        """Undecodable input is reported as invalid."""
        data = json.loads(await tools["chord_validate_ast"](ast_json="{}"))
        assert data["status"] == "error"
        assert data["valid"] is False
