"""
Progression tools - MCP tools for resolving chord progressions.

Tools for turning progression text or interchange ASTs into scale degrees.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chordprog.compiler import (
    DecodeError,
    ast_to_interchange,
    decode_ast,
    format_degrees,
    process_ast,
    process_chord_progression,
)
from chuk_mcp_chordprog.grammar import ProgressionSyntaxError
from chuk_mcp_chordprog.pipeline import compile_progression

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord progression tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_process_ast(ast_json: str) -> str:
        """
        Resolve an interchange-format AST to C major scale degrees.

        Args:
            ast_json: AST as JSON, e.g.
                '{"type":"progression","children":[{"type":"note","text":"C"}]}'

        Returns:
            JSON array of degrees like '[1,4,5,1]', or '{"error": "..."}'
            if the AST could not be decoded

        Example:
            chord_process_ast(ast_json='{"type":"note","text":"G"}')
        """
        return process_chord_progression(ast_json)

    tools["chord_process_ast"] = chord_process_ast

    @mcp.tool  # type: ignore[arg-type]
    async def chord_parse_progression(progression: str) -> str:
        """
        Parse a chord progression and resolve it to C major scale degrees.

        Notes other than the letters A-G are dropped from the degrees.

        Args:
            progression: Dash-separated note letters, e.g. 'C-F-G-C'

        Returns:
            JSON string with the degrees, the formatted result and the AST

        Example:
            chord_parse_progression(progression="C-Am-F-G")
        """
        try:
            ast = compile_progression(progression)
            degrees = process_ast(ast)
            return json.dumps(
                {
                    "status": "success",
                    "degrees": degrees,
                    "formatted": format_degrees(degrees),
                    "ast": ast_to_interchange(ast),
                }
            )
        except ProgressionSyntaxError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_parse_progression"] = chord_parse_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chord_validate_ast(ast_json: str) -> str:
        """
        Check an interchange-format AST without resolving it.

        Reports how many notes it holds and how many of them resolve,
        since unrecognized notes are otherwise dropped silently.

        Args:
            ast_json: AST as JSON

        Returns:
            JSON string with validation results
        """
        try:
            ast = decode_ast(ast_json)
        except DecodeError as e:
            return json.dumps({"status": "error", "valid": False, "message": str(e)})

        degrees = process_ast(ast)
        if ast.type == "progression":
            note_count = sum(1 for _ in ast.notes())
        else:
            note_count = 1
        return json.dumps(
            {
                "status": "success",
                "valid": True,
                "note_count": note_count,
                "resolved_count": len(degrees),
                "complete": len(degrees) == note_count,
            }
        )

    tools["chord_validate_ast"] = chord_validate_ast

    return tools
