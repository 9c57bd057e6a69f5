"""
MCP tool implementations.

- progression - Parse, resolve and validate chord progressions
"""

from chuk_mcp_chordprog.tools.progression import register_progression_tools

__all__ = [
    "register_progression_tools",
]
