"""
Constants and enums for the chord progression system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class NodeKind(str, Enum):
    """
    Node kinds shared by the grammar's CST and the AST interchange format.

    The lowering pass only reacts to these two kinds; anything else the
    grammar emits (punctuation, error nodes) is structural noise.
    """

    PROGRESSION = "progression"
    NOTE = "note"


# Interchange tag values (the "type" field of an AST object)
NodeTag = Literal["progression", "note"]

# Example shown in CLI usage output
EXAMPLE_PROGRESSION = "C-F-G-C"


class ErrorMessages:
    """Standardized error messages."""

    MISSING_PROGRESSION = "Usage: {prog} <chord-progression>"
    USAGE_EXAMPLE = 'Example: {prog} "{example}"'
    TEXT_EXTRACTION_FAILED = "UTF-8 decoding error for 'note' node: {error}"
    SYNTAX_ERROR = "Could not parse chord progression {text!r}: {error}"
    UNPARSEABLE_ROOT = "Could not parse chord progression {text!r}: root node is '{kind}'"
