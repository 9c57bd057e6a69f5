"""
Tests for the MCP server entry point's argument handling.
"""

import pytest

from chuk_mcp_chordprog.server import DEFAULT_HTTP_PORT, build_parser


class TestServerArguments:
    """Tests for server.build_parser()."""

    def test_defaults(self) -> None:
        """stdio is the default transport."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == DEFAULT_HTTP_PORT
        assert args.debug is False

    def test_http(self) -> None:
        """http takes a port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "8010"])
        assert (args.transport, args.port) == ("http", 8010)

    def test_unknown_transport(self) -> None:
        """Only stdio and http are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "sse"])
