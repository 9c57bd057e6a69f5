#!/usr/bin/env python3
"""
MCP entry point: serves the progression tools to an MCP host.

    $ chuk-mcp-chordprog                      # stdio, for local hosts
    $ chuk-mcp-chordprog --transport http --port 8010
"""

from __future__ import annotations

import argparse
import asyncio
import logging

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "http")
DEFAULT_HTTP_PORT = 8000


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the MCP server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-chordprog",
        description="Serve chord progression tools (chord_process_ast, "
        "chord_parse_progression, chord_validate_ast) over MCP",
    )
    parser.add_argument("--transport", choices=TRANSPORTS, default="stdio")
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_HTTP_PORT,
        help=f"Port for the http transport (default: {DEFAULT_HTTP_PORT})",
    )
    parser.add_argument("--debug", action="store_true", help="Log tool calls at DEBUG level")
    return parser


def serve(transport: str, port: int = DEFAULT_HTTP_PORT) -> None:
    """Start the tool server on the chosen transport and block until it stops."""
    # Deferred so building the parser never needs the server stack
    from chuk_mcp_chordprog.async_server import mcp

    if transport == "http":
        logger.info(f"Serving chord progression tools on http port {port}")
        asyncio.run(mcp.run_http(port=port))
    else:
        logger.info("Serving chord progression tools on stdio")
        asyncio.run(mcp.run_stdio())


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, configure logging and serve."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    serve(args.transport, args.port)


if __name__ == "__main__":
    main()
