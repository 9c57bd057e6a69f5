"""
Serialization boundary - AST interchange JSON and caller-facing results.

Interchange format (compact JSON, the only wire format):

    {"type":"progression","children":[{"type":"note","text":"C"}, ...]}

Degree results are either comma-separated text ("1,4,5,1") for the CLI or
a compact JSON array ("[1,4,5,1]") for the embeddable call.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from chuk_mcp_chordprog.compiler.resolver import process_ast
from chuk_mcp_chordprog.models.ast import AstNode

logger = logging.getLogger(__name__)

_AST_ADAPTER: TypeAdapter[AstNode] = TypeAdapter(AstNode)

_COMPACT = (",", ":")


class DecodeError(ValueError):
    """Interchange input is not a valid AST (bad JSON, tag or field)."""


def ast_to_interchange(ast: AstNode) -> dict[str, Any]:
    """Convert an AST to its interchange dictionary."""
    return ast.model_dump(mode="json")


def encode_ast(ast: AstNode) -> str:
    """Serialize an AST to compact interchange JSON."""
    return ast.model_dump_json()


def interchange_to_ast(data: Any) -> AstNode:
    """
    Build an AST from an already-parsed interchange object.

    Raises:
        DecodeError: On unknown tag, missing or mistyped field
    """
    try:
        return _AST_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


def decode_ast(data: str | bytes) -> AstNode:
    """
    Deserialize interchange JSON to an AST.

    Raises:
        DecodeError: On malformed JSON, unknown tag, missing or mistyped field
    """
    try:
        return _AST_ADAPTER.validate_json(data)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


def format_degrees(degrees: Sequence[int]) -> str:
    """Render degrees as comma-separated text; empty input gives ''."""
    return ",".join(str(d) for d in degrees)


def degrees_to_json(degrees: Sequence[int]) -> str:
    """Render degrees as a compact JSON array, e.g. '[1,4,5,1]'."""
    return json.dumps(list(degrees), separators=_COMPACT)


def error_to_json(message: str) -> str:
    """Render an error as the compact interchange error object."""
    return json.dumps({"error": message}, separators=_COMPACT)


def process_chord_progression(ast_json: str) -> str:
    """
    Embeddable entry point: interchange AST JSON in, degree JSON out.

    Never raises. Decode failures come back as {"error": "<message>"}.

    Example:
        process_chord_progression('{"type":"note","text":"G"}')  # -> '[5]'
    """
    try:
        ast = decode_ast(ast_json)
    except DecodeError as e:
        logger.debug(f"Rejected interchange input: {e}")
        return error_to_json(str(e))
    return degrees_to_json(process_ast(ast))
