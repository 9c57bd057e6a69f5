#!/usr/bin/env python3
"""
Async Chord Progression MCP Server using chuk-mcp-server

Exposes the progression pipeline to MCP hosts:
- Resolving interchange-format ASTs to scale degrees
- Parsing progression text straight to degrees
- Checking how many notes of an AST actually resolve
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chordprog.tools import register_progression_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chordprog")

# Register all tools
progression_tools = register_progression_tools(mcp)

# Export tool functions for direct access
chord_process_ast = progression_tools["chord_process_ast"]
chord_parse_progression = progression_tools["chord_parse_progression"]
chord_validate_ast = progression_tools["chord_validate_ast"]

logger.info("CHUK Chord Progression MCP Server initialized")
